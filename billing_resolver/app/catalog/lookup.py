"""Indexed lookups over an explicit plan catalog."""
from __future__ import annotations

from typing import Optional

from .models import PlanCatalog, PlanCatalogEntry


def find_plan_by_id(catalog: Optional[PlanCatalog], plan_id: str) -> Optional[PlanCatalogEntry]:
    """Return the first plan whose ``plan_id`` matches, if any."""

    if catalog is None:
        return None
    return next((plan for plan in catalog.plans if plan.plan_id == plan_id), None)


def find_plan_by_product_id(
    catalog: Optional[PlanCatalog],
    product_id: Optional[str],
) -> Optional[PlanCatalogEntry]:
    """Return the first plan that lists ``product_id`` among its product ids.

    Keys of ``creem_product_ids`` are not interpreted; only the values are
    searched. A product id mapped by two plans resolves to the first one in
    catalog order.
    """

    if catalog is None or not product_id:
        return None
    return next((plan for plan in catalog.plans if plan.owns_product(product_id)), None)
