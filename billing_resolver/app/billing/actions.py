"""Decision procedure for the actions a billing entity may be offered."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..catalog.models import BillingType, PlanCatalogEntry
from .models import AvailableAction, BillingResolverInput, SubscriptionStatus

CANCELABLE_STATUSES = frozenset(
    {
        SubscriptionStatus.ACTIVE.value,
        SubscriptionStatus.TRIALING.value,
        SubscriptionStatus.SCHEDULED_CANCEL.value,
    }
)

REACTIVATABLE_STATUSES = frozenset(
    {
        SubscriptionStatus.CANCELED.value,
        SubscriptionStatus.SCHEDULED_CANCEL.value,
    }
)


class _ActionSet:
    """Insertion-ordered set of actions."""

    def __init__(self) -> None:
        self._actions: Dict[AvailableAction, None] = {}

    def add(self, action: AvailableAction) -> None:
        self._actions.setdefault(action, None)

    def freeze(self) -> Tuple[AvailableAction, ...]:
        return tuple(self._actions)


def build_actions(
    resolver_input: BillingResolverInput,
    plan: Optional[PlanCatalogEntry],
    billing_type: BillingType,
) -> Tuple[AvailableAction, ...]:
    """Return the permitted actions, in builder order and without duplicates.

    Enterprise plans and one-time purchases short-circuit before any
    subscription lifecycle action is considered, as does the absence of a
    current subscription.
    """

    actions = _ActionSet()
    subscription = resolver_input.current_subscription

    if plan is not None and plan.is_enterprise:
        actions.add(AvailableAction.CONTACT_SALES)
        return actions.freeze()

    if billing_type == BillingType.ONETIME or subscription is None:
        actions.add(AvailableAction.CHECKOUT)
        return actions.freeze()

    actions.add(AvailableAction.PORTAL)

    if subscription.status in CANCELABLE_STATUSES:
        actions.add(AvailableAction.CANCEL)

    if subscription.status in REACTIVATABLE_STATUSES:
        actions.add(AvailableAction.REACTIVATE)

    if plan is not None and len(set(plan.billing_cycles)) > 1:
        actions.add(AvailableAction.SWITCH_INTERVAL)

    seat_priced = plan is not None and plan.is_seat_priced
    if billing_type == BillingType.RECURRING and (seat_priced or subscription.seats is not None):
        actions.add(AvailableAction.UPDATE_SEATS)

    return actions.freeze()
