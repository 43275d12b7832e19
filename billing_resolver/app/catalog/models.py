"""Domain models for the plan catalog."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlanCategory(str, Enum):
    """Category of a billing plan, drives default actions and UI behavior."""

    FREE = "free"
    TRIAL = "trial"
    PAID = "paid"
    ENTERPRISE = "enterprise"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value: object) -> "PlanCategory":
        return cls.CUSTOM


class BillingType(str, Enum):
    """Billing model: subscriptions, single purchases, or uncategorized."""

    RECURRING = "recurring"
    ONETIME = "onetime"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value: object) -> "BillingType":
        return cls.CUSTOM


class RecurringCycle(str, Enum):
    """Billing cycles supported by the payment provider."""

    EVERY_MONTH = "every-month"
    EVERY_THREE_MONTHS = "every-three-months"
    EVERY_SIX_MONTHS = "every-six-months"
    EVERY_YEAR = "every-year"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value: object) -> "RecurringCycle":
        return cls.CUSTOM


SUPPORTED_RECURRING_CYCLES: Tuple[RecurringCycle, ...] = (
    RecurringCycle.EVERY_MONTH,
    RecurringCycle.EVERY_THREE_MONTHS,
    RecurringCycle.EVERY_SIX_MONTHS,
    RecurringCycle.EVERY_YEAR,
)


class PricingModel(str, Enum):
    """How a plan is priced. ``seat`` enables per-seat controls."""

    FLAT = "flat"
    SEAT = "seat"


class PlanCatalogEntry(BaseModel):
    """A single sellable plan definition."""

    plan_id: str = Field(alias="planId")
    category: PlanCategory = PlanCategory.CUSTOM
    billing_type: Optional[BillingType] = Field(default=None, alias="billingType")
    billing_cycles: Tuple[RecurringCycle, ...] = Field(default=(), alias="billingCycles")
    pricing_model: Optional[PricingModel] = Field(default=None, alias="pricingModel")
    creem_product_ids: Dict[str, str] = Field(default_factory=dict, alias="creemProductIds")
    contact_url: Optional[str] = Field(default=None, alias="contactUrl")
    recommended: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: object) -> PlanCategory:
        if not value:
            return PlanCategory.CUSTOM
        return PlanCategory(value)

    @field_validator("billing_type", mode="before")
    @classmethod
    def _coerce_billing_type(cls, value: object) -> Optional[BillingType]:
        if value is None:
            return None
        if not value:
            return BillingType.CUSTOM
        return BillingType(value)

    @field_validator("billing_cycles", mode="before")
    @classmethod
    def _coerce_billing_cycles(cls, value: object) -> Tuple[RecurringCycle, ...]:
        if not value:
            return ()
        return tuple(dict.fromkeys(RecurringCycle(cycle) for cycle in value if cycle))

    @field_validator("pricing_model", mode="before")
    @classmethod
    def _coerce_pricing_model(cls, value: object) -> Optional[PricingModel]:
        try:
            return PricingModel(value) if value else None
        except ValueError:
            return None

    @field_validator("creem_product_ids", mode="before")
    @classmethod
    def _coerce_product_ids(cls, value: object) -> Dict[str, str]:
        if not value:
            return {}
        return {
            str(key): str(product_id)
            for key, product_id in dict(value).items()
            if product_id is not None and product_id != ""
        }

    @property
    def is_enterprise(self) -> bool:
        return self.category == PlanCategory.ENTERPRISE

    @property
    def is_seat_priced(self) -> bool:
        return self.pricing_model == PricingModel.SEAT

    def owns_product(self, product_id: str) -> bool:
        """Return ``True`` when ``product_id`` is one of this plan's product ids."""

        return product_id in self.creem_product_ids.values()


class PlanCatalog(BaseModel):
    """Versioned, ordered collection of plans."""

    version: str
    plans: Tuple[PlanCatalogEntry, ...] = ()
    default_plan_id: Optional[str] = Field(default=None, alias="defaultPlanId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
