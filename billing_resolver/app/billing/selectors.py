"""Predicates deriving UI decisions from a resolved snapshot."""
from __future__ import annotations

from typing import Union

from ..catalog.models import BillingType, PlanCategory
from .models import AvailableAction, BillingSnapshot, OneTimePaymentStatus

TERMINAL_PAYMENT_STATUSES = frozenset(
    {
        OneTimePaymentStatus.PAID.value,
        OneTimePaymentStatus.REFUNDED.value,
        OneTimePaymentStatus.PARTIALLY_REFUNDED.value,
    }
)


def has_billing_action(snapshot: BillingSnapshot, action: Union[AvailableAction, str]) -> bool:
    return action in snapshot.available_actions


def is_one_time_billing(snapshot: BillingSnapshot) -> bool:
    return snapshot.billing_type == BillingType.ONETIME


def is_enterprise_billing(snapshot: BillingSnapshot) -> bool:
    return snapshot.active_category == PlanCategory.ENTERPRISE


def should_show_billing_cycle_toggle(snapshot: BillingSnapshot) -> bool:
    """Whether a monthly/yearly style cycle toggle should render.

    All three conditions are required: a plan may list several cycles while
    the action builder withholds ``switch_interval``.
    """

    return (
        snapshot.billing_type == BillingType.RECURRING
        and len(snapshot.available_billing_cycles) > 1
        and has_billing_action(snapshot, AvailableAction.SWITCH_INTERVAL)
    )


def is_terminal_payment_status(status: Union[OneTimePaymentStatus, str]) -> bool:
    return getattr(status, "value", status) in TERMINAL_PAYMENT_STATUSES
