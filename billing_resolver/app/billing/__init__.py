"""Billing snapshot resolution: models, decision procedure and selectors."""

from .actions import CANCELABLE_STATUSES, REACTIVATABLE_STATUSES, build_actions
from .checkout import (
    CheckoutSuccessParams,
    has_checkout_success_params,
    parse_checkout_success_params,
)
from .classifiers import classify_category_from_subscription, resolve_billing_type
from .models import (
    AvailableAction,
    BillingResolverInput,
    BillingSnapshot,
    OneTimePaymentStatus,
    PaymentSnapshot,
    SubscriptionSnapshot,
    SubscriptionStatus,
)
from .resolver import resolve_billing_snapshot
from .selectors import (
    has_billing_action,
    is_enterprise_billing,
    is_one_time_billing,
    is_terminal_payment_status,
    should_show_billing_cycle_toggle,
)
from .service import (
    BillingSnapshotService,
    CatalogProvider,
    SubscriptionSnapshotRepository,
    UserContextProvider,
)
from .updates import (
    UpdateBehavior,
    UpdateKind,
    UpdateSummary,
    UpdateSummaryInput,
    build_update_summary,
    get_switch_plan_description,
)

__all__ = [
    "CANCELABLE_STATUSES",
    "REACTIVATABLE_STATUSES",
    "AvailableAction",
    "BillingResolverInput",
    "BillingSnapshot",
    "BillingSnapshotService",
    "CatalogProvider",
    "CheckoutSuccessParams",
    "OneTimePaymentStatus",
    "PaymentSnapshot",
    "SubscriptionSnapshot",
    "SubscriptionSnapshotRepository",
    "SubscriptionStatus",
    "UpdateBehavior",
    "UpdateKind",
    "UpdateSummary",
    "UpdateSummaryInput",
    "UserContextProvider",
    "build_actions",
    "build_update_summary",
    "classify_category_from_subscription",
    "get_switch_plan_description",
    "has_billing_action",
    "has_checkout_success_params",
    "is_enterprise_billing",
    "is_one_time_billing",
    "is_terminal_payment_status",
    "parse_checkout_success_params",
    "resolve_billing_snapshot",
    "resolve_billing_type",
    "should_show_billing_cycle_toggle",
]
