"""Billing gate utilities enforcing resolved snapshot actions."""
from .context import BillingSnapshotContext
from .enforcement import require_billing_action
from .exceptions import BillingActionError

__all__ = [
    "BillingActionError",
    "BillingSnapshotContext",
    "require_billing_action",
]
