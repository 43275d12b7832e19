"""Normalization of loosely typed catalog values into closed enums."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .models import (
    SUPPORTED_RECURRING_CYCLES,
    BillingType,
    PlanCatalog,
    PlanCategory,
    RecurringCycle,
)


def is_supported_recurring_cycle(value: Optional[str]) -> bool:
    """Return whether ``value`` is one of the provider's supported cycles."""

    return bool(value) and RecurringCycle(value) in SUPPORTED_RECURRING_CYCLES


def normalize_recurring_cycle(value: Optional[str]) -> Optional[RecurringCycle]:
    """Map a cycle string to :class:`RecurringCycle`.

    Empty values yield ``None``; unrecognized strings yield ``custom``.
    """

    if not value:
        return None
    return RecurringCycle(value)


def normalize_plan_category(value: Optional[str]) -> PlanCategory:
    if not value:
        return PlanCategory.CUSTOM
    return PlanCategory(value)


def normalize_billing_type(value: Optional[str]) -> BillingType:
    if not value:
        return BillingType.CUSTOM
    return BillingType(value)


def normalize_plan_catalog(
    catalog: Union[PlanCatalog, Mapping[str, Any], None],
) -> Optional[PlanCatalog]:
    """Return a normalized copy of ``catalog``.

    A missing catalog is a valid state and yields ``None``. Raw mappings (for
    example a decoded JSON document from the catalog provider) are accepted
    with either camelCase or snake_case keys. Every plan ends up with a
    concrete category, a concrete billing type and a cycle list free of empty
    values.
    """

    if catalog is None:
        return None
    if not isinstance(catalog, PlanCatalog):
        catalog = PlanCatalog.model_validate(catalog)

    plans = tuple(
        plan.model_copy(
            update={
                "category": normalize_plan_category(plan.category),
                "billing_type": normalize_billing_type(plan.billing_type),
                "billing_cycles": tuple(
                    dict.fromkeys(
                        cycle
                        for cycle in (normalize_recurring_cycle(value) for value in plan.billing_cycles)
                        if cycle is not None
                    )
                ),
            }
        )
        for plan in catalog.plans
    )
    return catalog.model_copy(update={"plans": plans})
