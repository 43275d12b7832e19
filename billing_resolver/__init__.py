"""Billing state resolution for payment-provider integrations."""
