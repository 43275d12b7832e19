"""Classification of subscription state and plan billing type."""
from __future__ import annotations

from typing import Optional

from ..catalog.models import BillingType, PlanCatalogEntry, PlanCategory
from .models import BillingResolverInput, SubscriptionSnapshot, SubscriptionStatus

PAID_STATUSES = frozenset(
    {
        SubscriptionStatus.ACTIVE.value,
        SubscriptionStatus.SCHEDULED_CANCEL.value,
        SubscriptionStatus.PAST_DUE.value,
        SubscriptionStatus.CANCELED.value,
    }
)


def classify_category_from_subscription(
    subscription: Optional[SubscriptionSnapshot],
) -> PlanCategory:
    """Fallback category when no catalog plan matches the subscription."""

    status = subscription.status if subscription else None
    if status == SubscriptionStatus.TRIALING.value:
        return PlanCategory.TRIAL
    if status in PAID_STATUSES:
        return PlanCategory.PAID
    return PlanCategory.CUSTOM


def resolve_billing_type(
    plan: Optional[PlanCatalogEntry],
    resolver_input: BillingResolverInput,
) -> BillingType:
    """Plan-declared billing type wins; otherwise infer from the input."""

    if plan is not None and plan.billing_type is not None:
        return plan.billing_type
    if resolver_input.payment is not None:
        return BillingType.ONETIME
    if resolver_input.current_subscription is not None:
        return BillingType.RECURRING
    return BillingType.CUSTOM
