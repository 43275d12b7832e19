from __future__ import annotations

import pytest

from billing_resolver.app.billing import AvailableAction, BillingSnapshot
from billing_resolver.app.billing_gates import (
    BillingActionError,
    BillingSnapshotContext,
    require_billing_action,
)
from billing_resolver.app.catalog import BillingType, PlanCategory, RecurringCycle


@pytest.fixture
def snapshot() -> BillingSnapshot:
    return BillingSnapshot(
        resolved_at="2026-03-01T12:00:00Z",
        catalog_version="1",
        active_plan_id="pro",
        active_category=PlanCategory.PAID,
        billing_type=BillingType.RECURRING,
        recurring_cycle=RecurringCycle.EVERY_MONTH,
        available_billing_cycles=(RecurringCycle.EVERY_MONTH, RecurringCycle.EVERY_YEAR),
        subscription_state="active",
        available_actions=(
            AvailableAction.PORTAL,
            AvailableAction.CANCEL,
            AvailableAction.SWITCH_INTERVAL,
        ),
    )


def test_require_billing_action_allows_available_action(snapshot: BillingSnapshot) -> None:
    require_billing_action(snapshot, AvailableAction.CANCEL)
    require_billing_action(snapshot, "portal")


def test_require_billing_action_raises_when_missing(snapshot: BillingSnapshot) -> None:
    with pytest.raises(BillingActionError) as exc:
        require_billing_action(snapshot, AvailableAction.REACTIVATE)

    assert exc.value.code == "billing_action_unavailable"
    assert exc.value.payload["action"] == "reactivate"
    assert exc.value.payload["available_actions"] == ["portal", "cancel", "switch_interval"]
    assert exc.value.payload["subscription_state"] == "active"
    assert "reactivate" in exc.value.message


def test_require_billing_action_custom_code_and_message(snapshot: BillingSnapshot) -> None:
    with pytest.raises(BillingActionError) as exc:
        require_billing_action(
            snapshot,
            "update_seats",
            error_code="seat_update_blocked",
            message="Seats cannot be changed on this plan.",
        )

    assert exc.value.payload["error"] == "seat_update_blocked"
    assert exc.value.payload["message"] == "Seats cannot be changed on this plan."


def test_billing_snapshot_context_helpers(snapshot: BillingSnapshot) -> None:
    context = BillingSnapshotContext(snapshot)

    assert context.plan_id == "pro"
    assert context.category == PlanCategory.PAID
    assert context.billing_type == BillingType.RECURRING
    assert context.actions == snapshot.available_actions
    assert context.is_one_time is False
    assert context.is_enterprise is False
    assert context.show_cycle_toggle is True
    assert context.has("cancel") is True
    assert context.has(AvailableAction.CHECKOUT) is False

    context.require(AvailableAction.SWITCH_INTERVAL)

    with pytest.raises(BillingActionError) as exc:
        context.require(AvailableAction.CHECKOUT, error_code="checkout_not_allowed")

    assert exc.value.code == "checkout_not_allowed"


def test_billing_action_error_converts_to_http_exception() -> None:
    error = BillingActionError(
        action="cancel",
        available_actions=("checkout",),
    )
    http_exc = error.to_http_exception()

    assert str(error) == "Billing action 'cancel' is not available."
    assert http_exc.status_code == 403
    assert http_exc.detail == {
        "error": "billing_action_unavailable",
        "message": "Billing action 'cancel' is not available.",
        "action": "cancel",
        "available_actions": ["checkout"],
        "subscription_state": None,
    }
