"""Plan catalog models, normalization and lookups."""

from .lookup import find_plan_by_id, find_plan_by_product_id
from .models import (
    SUPPORTED_RECURRING_CYCLES,
    BillingType,
    PlanCatalog,
    PlanCatalogEntry,
    PlanCategory,
    PricingModel,
    RecurringCycle,
)
from .normalize import (
    is_supported_recurring_cycle,
    normalize_billing_type,
    normalize_plan_catalog,
    normalize_plan_category,
    normalize_recurring_cycle,
)

__all__ = [
    "SUPPORTED_RECURRING_CYCLES",
    "BillingType",
    "PlanCatalog",
    "PlanCatalogEntry",
    "PlanCategory",
    "PricingModel",
    "RecurringCycle",
    "find_plan_by_id",
    "find_plan_by_product_id",
    "is_supported_recurring_cycle",
    "normalize_billing_type",
    "normalize_plan_catalog",
    "normalize_plan_category",
    "normalize_recurring_cycle",
]
