from __future__ import annotations

import pytest

from billing_resolver.app.billing import (
    UpdateBehavior,
    UpdateKind,
    UpdateSummaryInput,
    build_update_summary,
    get_switch_plan_description,
)


def _input(**overrides) -> UpdateSummaryInput:
    fields = {
        "kind": UpdateKind.PLAN_SWITCH,
        "update_behavior": UpdateBehavior.PRORATION_CHARGE,
        "current_label": "Pro (monthly)",
        "new_label": "Pro (yearly)",
        "current_period_end": "2026-04-01T00:00:00.000Z",
    }
    fields.update(overrides)
    return UpdateSummaryInput(**fields)


def test_switch_plan_description_with_and_without_title() -> None:
    titled = get_switch_plan_description(UpdateBehavior.PRORATION_NONE, "Team")
    untitled = get_switch_plan_description(UpdateBehavior.PRORATION_CHARGE_IMMEDIATELY)

    assert titled == (
        "You are about to switch to the Team plan. "
        "The new price will take effect at your next billing cycle."
    )
    assert untitled.startswith("You are about to switch your plan.")
    assert "charged immediately" in untitled


def test_plan_switch_summary_with_invoice_note() -> None:
    summary = build_update_summary(_input())

    assert summary.title == "Switch plan?"
    assert summary.confirm_label == "Confirm switch"
    assert "next invoice" in summary.description
    assert summary.date_note == "Your next invoice is on Apr 1, 2026."
    assert summary.current_label == "Pro (monthly)"
    assert summary.new_label == "Pro (yearly)"


def test_seat_update_summary_without_proration() -> None:
    summary = build_update_summary(
        _input(
            kind=UpdateKind.SEAT_UPDATE,
            update_behavior=UpdateBehavior.PRORATION_NONE,
            current_label="5 seats",
            new_label="8 seats",
        )
    )

    assert summary.title == "Update seats?"
    assert summary.confirm_label == "Confirm update"
    assert summary.date_note == "Your next billing cycle starts on Apr 1, 2026."


@pytest.mark.parametrize(
    "overrides",
    [
        {"update_behavior": UpdateBehavior.PRORATION_CHARGE_IMMEDIATELY},
        {"current_period_end": None},
        {"current_period_end": "not-a-date"},
    ],
)
def test_date_note_is_omitted(overrides) -> None:
    assert build_update_summary(_input(**overrides)).date_note is None


def test_trialing_summary_uses_trial_end() -> None:
    summary = build_update_summary(
        _input(is_trialing=True, trial_end="2026-03-04T08:23:39.000Z")
    )

    assert summary.description == (
        "Your trial continues until Mar 4, 2026. The new price will apply once the trial ends."
    )
    assert summary.date_note is None


def test_trialing_summary_without_trial_end() -> None:
    summary = build_update_summary(_input(is_trialing=True))

    assert "free trial will continue" in summary.description
    assert summary.date_note is None


def test_string_values_are_accepted() -> None:
    summary = build_update_summary(_input(kind="seat-update", update_behavior="proration-none"))

    assert summary.title == "Update seats?"
    assert summary.date_note is not None
