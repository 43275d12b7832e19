"""Resolution of a :class:`BillingSnapshot` from catalog and subscription state."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Tuple

from ..catalog.lookup import find_plan_by_id, find_plan_by_product_id
from ..catalog.models import RecurringCycle
from ..catalog.normalize import normalize_plan_catalog, normalize_recurring_cycle
from .actions import build_actions
from .classifiers import classify_category_from_subscription, resolve_billing_type
from .models import BillingResolverInput, BillingSnapshot


def resolve_billing_snapshot(resolver_input: BillingResolverInput) -> BillingSnapshot:
    """Resolve the billing state for one billing entity.

    The function is pure apart from reading the clock when
    ``resolver_input.now`` is not supplied, and it never raises for
    well-formed input: missing data degrades to the ``custom`` category and a
    checkout-only or portal-only action set.
    """

    catalog = normalize_plan_catalog(resolver_input.catalog)
    subscription = resolver_input.current_subscription

    plan_from_subscription = find_plan_by_product_id(
        catalog, subscription.product_id if subscription else None
    )
    fallback_plan = (
        find_plan_by_id(catalog, catalog.default_plan_id)
        if catalog is not None and catalog.default_plan_id
        else None
    )
    active_plan = plan_from_subscription if plan_from_subscription is not None else fallback_plan

    billing_type = resolve_billing_type(active_plan, resolver_input)
    recurring_cycle = normalize_recurring_cycle(
        subscription.recurring_interval if subscription else None
    )

    available_billing_cycles: Tuple[RecurringCycle, ...]
    if active_plan is not None and active_plan.billing_cycles:
        available_billing_cycles = tuple(dict.fromkeys(active_plan.billing_cycles))
    elif recurring_cycle is not None:
        available_billing_cycles = (recurring_cycle,)
    else:
        available_billing_cycles = ()

    return BillingSnapshot(
        resolved_at=(
            resolver_input.now
            if resolver_input.now is not None
            else datetime.now(timezone.utc).isoformat()
        ),
        catalog_version=catalog.version if catalog is not None else None,
        active_plan_id=active_plan.plan_id if active_plan is not None else None,
        active_category=(
            active_plan.category
            if active_plan is not None
            else classify_category_from_subscription(subscription)
        ),
        billing_type=billing_type,
        recurring_cycle=recurring_cycle,
        available_billing_cycles=available_billing_cycles,
        subscription_state=subscription.status if subscription else None,
        seats=subscription.seats if subscription else None,
        payment=resolver_input.payment,
        available_actions=build_actions(resolver_input, active_plan, billing_type),
        metadata={
            "cancelAtPeriodEnd": bool(subscription and subscription.cancel_at_period_end),
            "currentPeriodEnd": subscription.current_period_end if subscription else None,
            "trialEnd": subscription.trial_end if subscription else None,
            "userContext": dict(resolver_input.user_context),
        },
    )
