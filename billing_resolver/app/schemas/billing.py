"""API schemas for billing endpoints."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..billing import (
    AvailableAction,
    BillingSnapshot,
    CheckoutSuccessParams,
    PaymentSnapshot,
    UpdateBehavior,
    UpdateKind,
    UpdateSummary,
    has_checkout_success_params,
    is_enterprise_billing,
    is_one_time_billing,
    should_show_billing_cycle_toggle,
)
from ..catalog import BillingType, PlanCategory, RecurringCycle


class BillingSnapshotResponse(BaseModel):
    resolved_at: str = Field(alias="resolvedAt")
    catalog_version: Optional[str] = Field(alias="catalogVersion", default=None)
    active_plan_id: Optional[str] = Field(alias="activePlanId", default=None)
    active_category: PlanCategory = Field(alias="activeCategory")
    billing_type: BillingType = Field(alias="billingType")
    recurring_cycle: Optional[RecurringCycle] = Field(alias="recurringCycle", default=None)
    available_billing_cycles: List[RecurringCycle] = Field(alias="availableBillingCycles")
    subscription_state: Optional[str] = Field(alias="subscriptionState", default=None)
    seats: Optional[int] = None
    payment: Optional[PaymentSnapshot] = None
    available_actions: List[AvailableAction] = Field(alias="availableActions")
    metadata: Dict[str, Any] = Field(default_factory=dict)
    show_cycle_toggle: bool = Field(alias="showCycleToggle", default=False)
    is_one_time: bool = Field(alias="isOneTime", default=False)
    is_enterprise: bool = Field(alias="isEnterprise", default=False)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_snapshot(cls, snapshot: BillingSnapshot) -> "BillingSnapshotResponse":
        return cls(
            resolved_at=snapshot.resolved_at,
            catalog_version=snapshot.catalog_version,
            active_plan_id=snapshot.active_plan_id,
            active_category=snapshot.active_category,
            billing_type=snapshot.billing_type,
            recurring_cycle=snapshot.recurring_cycle,
            available_billing_cycles=list(snapshot.available_billing_cycles),
            subscription_state=snapshot.subscription_state,
            seats=snapshot.seats,
            payment=snapshot.payment,
            available_actions=list(snapshot.available_actions),
            metadata=dict(snapshot.metadata),
            show_cycle_toggle=should_show_billing_cycle_toggle(snapshot),
            is_one_time=is_one_time_billing(snapshot),
            is_enterprise=is_enterprise_billing(snapshot),
        )


class CheckoutSuccessResponse(BaseModel):
    params: CheckoutSuccessParams
    is_complete: bool = Field(alias="isComplete")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_params(cls, params: CheckoutSuccessParams) -> "CheckoutSuccessResponse":
        return cls(params=params, is_complete=has_checkout_success_params(params))


class UpdateSummaryRequest(BaseModel):
    kind: UpdateKind
    current_label: str = Field(alias="currentLabel")
    new_label: str = Field(alias="newLabel")
    update_behavior: Optional[UpdateBehavior] = Field(alias="updateBehavior", default=None)

    model_config = ConfigDict(populate_by_name=True)


class UpdateSummaryResponse(BaseModel):
    title: str
    description: str
    current_label: str = Field(alias="currentLabel")
    new_label: str = Field(alias="newLabel")
    date_note: Optional[str] = Field(alias="dateNote", default=None)
    confirm_label: str = Field(alias="confirmLabel")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_summary(cls, summary: UpdateSummary) -> "UpdateSummaryResponse":
        return cls(
            title=summary.title,
            description=summary.description,
            current_label=summary.current_label,
            new_label=summary.new_label,
            date_note=summary.date_note,
            confirm_label=summary.confirm_label,
        )
