"""Confirmation copy for plan switches and seat updates."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class UpdateBehavior(str, Enum):
    """How the payment provider prorates plan switches and seat changes."""

    PRORATION_CHARGE_IMMEDIATELY = "proration-charge-immediately"
    PRORATION_CHARGE = "proration-charge"
    PRORATION_NONE = "proration-none"


class UpdateKind(str, Enum):
    PLAN_SWITCH = "plan-switch"
    SEAT_UPDATE = "seat-update"


_BEHAVIOR_DESCRIPTIONS = {
    UpdateBehavior.PRORATION_CHARGE_IMMEDIATELY: (
        "The price difference will be prorated and charged immediately."
    ),
    UpdateBehavior.PRORATION_CHARGE: (
        "The price difference will be prorated and applied to your next invoice."
    ),
    UpdateBehavior.PRORATION_NONE: "The new price will take effect at your next billing cycle.",
}


@dataclass(frozen=True)
class UpdateSummaryInput:
    kind: UpdateKind
    update_behavior: UpdateBehavior
    current_label: str
    new_label: str
    current_period_end: Optional[str] = None
    is_trialing: bool = False
    trial_end: Optional[str] = None


@dataclass(frozen=True)
class UpdateSummary:
    title: str
    description: str
    current_label: str
    new_label: str
    date_note: Optional[str]
    confirm_label: str


def get_switch_plan_description(
    update_behavior: UpdateBehavior,
    plan_title: Optional[str] = None,
) -> str:
    """Describe a plan switch for the given proration behavior."""

    prefix = (
        f"You are about to switch to the {plan_title} plan."
        if plan_title
        else "You are about to switch your plan."
    )
    return f"{prefix} {_BEHAVIOR_DESCRIPTIONS[UpdateBehavior(update_behavior)]}"


def _format_date(iso: str) -> Optional[str]:
    try:
        parsed = datetime.fromisoformat(iso.replace("Z", "+00:00"))
    except ValueError:
        return None
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _period_end_note(iso: str, update_behavior: UpdateBehavior) -> Optional[str]:
    formatted = _format_date(iso)
    if formatted is None:
        return None
    if update_behavior == UpdateBehavior.PRORATION_CHARGE:
        return f"Your next invoice is on {formatted}."
    if update_behavior == UpdateBehavior.PRORATION_NONE:
        return f"Your next billing cycle starts on {formatted}."
    return None


def _trial_note(iso: str) -> Optional[str]:
    formatted = _format_date(iso)
    if formatted is None:
        return None
    return (
        f"Your trial continues until {formatted}. "
        "The new price will apply once the trial ends."
    )


def build_update_summary(summary_input: UpdateSummaryInput) -> UpdateSummary:
    """Build the confirmation dialog copy for a subscription update.

    Trialing subscriptions are not charged until the trial ends, so they get a
    trial note instead of the proration description and no date note.
    """

    is_switch = UpdateKind(summary_input.kind) == UpdateKind.PLAN_SWITCH
    title = "Switch plan?" if is_switch else "Update seats?"
    confirm_label = "Confirm switch" if is_switch else "Confirm update"

    if summary_input.is_trialing:
        trial_note = _trial_note(summary_input.trial_end) if summary_input.trial_end else None
        return UpdateSummary(
            title=title,
            description=trial_note
            or "Your free trial will continue. The new price will take effect once the trial ends.",
            current_label=summary_input.current_label,
            new_label=summary_input.new_label,
            date_note=None,
            confirm_label=confirm_label,
        )

    behavior = UpdateBehavior(summary_input.update_behavior)
    return UpdateSummary(
        title=title,
        description=_BEHAVIOR_DESCRIPTIONS[behavior],
        current_label=summary_input.current_label,
        new_label=summary_input.new_label,
        date_note=(
            _period_end_note(summary_input.current_period_end, behavior)
            if summary_input.current_period_end
            else None
        ),
        confirm_label=confirm_label,
    )
