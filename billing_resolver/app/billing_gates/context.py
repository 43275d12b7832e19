"""Convenience wrapper around billing snapshots for action gating."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..billing.models import AvailableAction, BillingSnapshot
from ..billing.selectors import (
    has_billing_action,
    is_enterprise_billing,
    is_one_time_billing,
    should_show_billing_cycle_toggle,
)
from ..catalog.models import BillingType, PlanCategory
from .enforcement import require_billing_action


@dataclass(frozen=True)
class BillingSnapshotContext:
    """Facade exposing gating-centric helpers for a resolved snapshot."""

    snapshot: BillingSnapshot

    @property
    def actions(self) -> Tuple[AvailableAction, ...]:
        return self.snapshot.available_actions

    @property
    def plan_id(self) -> Optional[str]:
        return self.snapshot.active_plan_id

    @property
    def category(self) -> PlanCategory:
        return self.snapshot.active_category

    @property
    def billing_type(self) -> BillingType:
        return self.snapshot.billing_type

    @property
    def is_one_time(self) -> bool:
        return is_one_time_billing(self.snapshot)

    @property
    def is_enterprise(self) -> bool:
        return is_enterprise_billing(self.snapshot)

    @property
    def show_cycle_toggle(self) -> bool:
        return should_show_billing_cycle_toggle(self.snapshot)

    def has(self, action: Union[AvailableAction, str]) -> bool:
        """Return whether the action is available."""

        return has_billing_action(self.snapshot, action)

    def require(
        self,
        action: Union[AvailableAction, str],
        *,
        error_code: str = "billing_action_unavailable",
    ) -> None:
        """Ensure the action is available before proceeding."""

        require_billing_action(self.snapshot, action, error_code=error_code)
