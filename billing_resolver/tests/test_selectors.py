from __future__ import annotations

import pytest

from billing_resolver.app.billing import (
    AvailableAction,
    BillingSnapshot,
    OneTimePaymentStatus,
    has_billing_action,
    is_enterprise_billing,
    is_one_time_billing,
    is_terminal_payment_status,
    should_show_billing_cycle_toggle,
)
from billing_resolver.app.catalog import BillingType, PlanCategory, RecurringCycle


def _snapshot(**fields) -> BillingSnapshot:
    return BillingSnapshot(resolved_at="2026-03-01T12:00:00Z", **fields)


def test_has_billing_action_accepts_enum_and_string() -> None:
    snapshot = _snapshot(available_actions=(AvailableAction.PORTAL, AvailableAction.CANCEL))

    assert has_billing_action(snapshot, AvailableAction.CANCEL) is True
    assert has_billing_action(snapshot, "portal") is True
    assert has_billing_action(snapshot, AvailableAction.CHECKOUT) is False


def test_is_one_time_and_enterprise() -> None:
    one_time = _snapshot(billing_type=BillingType.ONETIME)
    enterprise = _snapshot(active_category=PlanCategory.ENTERPRISE)

    assert is_one_time_billing(one_time) is True
    assert is_one_time_billing(enterprise) is False
    assert is_enterprise_billing(enterprise) is True
    assert is_enterprise_billing(one_time) is False


def test_cycle_toggle_requires_all_three_conditions() -> None:
    cycles = (RecurringCycle.EVERY_MONTH, RecurringCycle.EVERY_YEAR)
    shown = _snapshot(
        billing_type=BillingType.RECURRING,
        available_billing_cycles=cycles,
        available_actions=(AvailableAction.PORTAL, AvailableAction.SWITCH_INTERVAL),
    )

    assert should_show_billing_cycle_toggle(shown) is True
    assert should_show_billing_cycle_toggle(
        shown.model_copy(update={"billing_type": BillingType.CUSTOM})
    ) is False
    assert should_show_billing_cycle_toggle(
        shown.model_copy(update={"available_billing_cycles": (RecurringCycle.EVERY_MONTH,)})
    ) is False
    assert should_show_billing_cycle_toggle(
        shown.model_copy(update={"available_actions": (AvailableAction.PORTAL,)})
    ) is False


@pytest.mark.parametrize(
    "status,expected",
    [
        (OneTimePaymentStatus.PENDING, False),
        (OneTimePaymentStatus.PAID, True),
        (OneTimePaymentStatus.REFUNDED, True),
        ("partially_refunded", True),
        ("pending", False),
    ],
)
def test_is_terminal_payment_status(status, expected: bool) -> None:
    assert is_terminal_payment_status(status) is expected
