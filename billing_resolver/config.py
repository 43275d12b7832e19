"""Billing configuration helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os

from .app.billing.updates import UpdateBehavior


@dataclass(frozen=True)
class BillingConfig:
    """Configuration for catalog loading and snapshot resolution."""

    catalog_path: Optional[str]
    default_plan_id: Optional[str]
    update_behavior: UpdateBehavior
    log_resolutions: bool


def _to_bool(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _to_update_behavior(value: Optional[str], *, default: UpdateBehavior) -> UpdateBehavior:
    if not value:
        return default
    try:
        return UpdateBehavior(value.strip().lower())
    except ValueError:
        return default


def load_billing_config(env: Optional[Mapping[str, str]] = None) -> BillingConfig:
    """Load :class:`BillingConfig` from environment variables."""

    env_mapping = os.environ if env is None else env

    catalog_path = (env_mapping.get("BILLING_CATALOG_PATH") or "").strip() or None
    default_plan_id = (env_mapping.get("BILLING_DEFAULT_PLAN_ID") or "").strip() or None
    update_behavior = _to_update_behavior(
        env_mapping.get("BILLING_UPDATE_BEHAVIOR"),
        default=UpdateBehavior.PRORATION_CHARGE_IMMEDIATELY,
    )
    log_resolutions = _to_bool(env_mapping.get("BILLING_LOG_RESOLUTIONS"), default=False)

    return BillingConfig(
        catalog_path=catalog_path,
        default_plan_id=default_plan_id,
        update_behavior=update_behavior,
        log_resolutions=log_resolutions,
    )
