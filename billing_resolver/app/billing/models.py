"""Domain models for billing snapshots and their inputs."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import BillingType, PlanCatalog, PlanCategory, RecurringCycle


class SubscriptionStatus(str, Enum):
    """Known subscription statuses reported by the payment provider.

    Snapshots keep ``status`` as a plain string because upstream may introduce
    new values; these members are only used for membership tests.
    """

    ACTIVE = "active"
    TRIALING = "trialing"
    SCHEDULED_CANCEL = "scheduled_cancel"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    PAUSED = "paused"
    UNPAID = "unpaid"


class OneTimePaymentStatus(str, Enum):
    """Status of a one-time payment order."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"


class AvailableAction(str, Enum):
    """Actions a billing entity may be offered."""

    CHECKOUT = "checkout"
    PORTAL = "portal"
    CANCEL = "cancel"
    REACTIVATE = "reactivate"
    SWITCH_INTERVAL = "switch_interval"
    UPDATE_SEATS = "update_seats"
    CONTACT_SALES = "contact_sales"


class SubscriptionSnapshot(BaseModel):
    """Read-only projection of a persisted subscription."""

    id: Optional[str] = None
    product_id: Optional[str] = Field(default=None, alias="productId")
    status: Optional[str] = None
    recurring_interval: Optional[str] = Field(default=None, alias="recurringInterval")
    seats: Optional[int] = None
    cancel_at_period_end: Optional[bool] = Field(default=None, alias="cancelAtPeriodEnd")
    current_period_end: Optional[str] = Field(default=None, alias="currentPeriodEnd")
    trial_end: Optional[str] = Field(default=None, alias="trialEnd")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PaymentSnapshot(BaseModel):
    """Read-only projection of a one-time payment."""

    status: OneTimePaymentStatus
    checkout_id: Optional[str] = Field(default=None, alias="checkoutId")
    order_id: Optional[str] = Field(default=None, alias="orderId")
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    product_id: Optional[str] = Field(default=None, alias="productId")
    request_id: Optional[str] = Field(default=None, alias="requestId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BillingResolverInput(BaseModel):
    """Everything the resolver needs, passed explicitly on every call."""

    catalog: Optional[PlanCatalog] = None
    current_subscription: Optional[SubscriptionSnapshot] = Field(
        default=None, alias="currentSubscription"
    )
    all_subscriptions: Tuple[SubscriptionSnapshot, ...] = Field(
        default=(), alias="allSubscriptions"
    )
    payment: Optional[PaymentSnapshot] = None
    user_context: Dict[str, Any] = Field(default_factory=dict, alias="userContext")
    now: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class BillingSnapshot(BaseModel):
    """Resolved billing state for a billing entity."""

    resolved_at: str = Field(alias="resolvedAt")
    catalog_version: Optional[str] = Field(default=None, alias="catalogVersion")
    active_plan_id: Optional[str] = Field(default=None, alias="activePlanId")
    active_category: PlanCategory = Field(default=PlanCategory.CUSTOM, alias="activeCategory")
    billing_type: BillingType = Field(default=BillingType.CUSTOM, alias="billingType")
    recurring_cycle: Optional[RecurringCycle] = Field(default=None, alias="recurringCycle")
    available_billing_cycles: Tuple[RecurringCycle, ...] = Field(
        default=(), alias="availableBillingCycles"
    )
    subscription_state: Optional[str] = Field(default=None, alias="subscriptionState")
    seats: Optional[int] = None
    payment: Optional[PaymentSnapshot] = None
    available_actions: Tuple[AvailableAction, ...] = Field(default=(), alias="availableActions")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)
