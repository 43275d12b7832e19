"""Application wiring for the billing snapshot service."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from ...config import BillingConfig, load_billing_config
from ..billing import BillingSnapshotService, SubscriptionSnapshot
from ..catalog import PlanCatalog


logger = logging.getLogger("billing")


class FileCatalogProvider:
    """Catalog provider reading a JSON catalog document from disk.

    The file is read on every call so catalog edits take effect without a
    restart; ``default_plan_id`` overrides the document's own default.
    """

    def __init__(self, path: Optional[str], *, default_plan_id: Optional[str] = None) -> None:
        self._path = Path(path) if path else None
        self._default_plan_id = default_plan_id

    def get_catalog(self) -> Optional[PlanCatalog]:
        if self._path is None:
            return None
        if not self._path.exists():
            raise LookupError(f"Plan catalog not found at {self._path}")

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            catalog = PlanCatalog.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ValueError(f"Invalid plan catalog at {self._path}: {exc}") from exc

        if self._default_plan_id:
            catalog = catalog.model_copy(update={"default_plan_id": self._default_plan_id})
        logger.debug(
            "Loaded plan catalog version=%s plans=%s from %s",
            catalog.version,
            len(catalog.plans),
            self._path,
        )
        return catalog


class InMemorySubscriptionRepository:
    """Subscription projections held in memory for local development and tests."""

    def __init__(self, subscriptions: Optional[Dict[str, Iterable[SubscriptionSnapshot]]] = None) -> None:
        self._subscriptions: Dict[str, List[SubscriptionSnapshot]] = {
            entity_id: list(items) for entity_id, items in (subscriptions or {}).items()
        }

    def add(self, entity_id: str, subscription: SubscriptionSnapshot) -> None:
        self._subscriptions.setdefault(entity_id, []).append(subscription)

    def get_current_subscription(self, entity_id: str) -> Optional[SubscriptionSnapshot]:
        subscriptions = self._subscriptions.get(entity_id)
        return subscriptions[-1] if subscriptions else None

    def list_subscriptions(self, entity_id: str) -> Sequence[SubscriptionSnapshot]:
        return tuple(self._subscriptions.get(entity_id, ()))


def build_billing_snapshot_service(config: BillingConfig) -> BillingSnapshotService:
    catalog_provider = FileCatalogProvider(
        config.catalog_path,
        default_plan_id=config.default_plan_id,
    )
    if config.catalog_path is None:
        logger.info("No plan catalog configured; snapshots resolve without plan data")
    logger.warning(
        "Using an empty in-memory subscription repository; every entity resolves without a subscription"
    )
    return BillingSnapshotService(
        catalog_provider=catalog_provider,
        subscription_repository=InMemorySubscriptionRepository(),
        log_resolutions=config.log_resolutions,
    )


@lru_cache(maxsize=1)
def get_billing_config() -> BillingConfig:
    return load_billing_config()


@lru_cache(maxsize=1)
def get_billing_snapshot_service() -> BillingSnapshotService:
    return build_billing_snapshot_service(get_billing_config())


__all__ = [
    "FileCatalogProvider",
    "InMemorySubscriptionRepository",
    "build_billing_snapshot_service",
    "get_billing_config",
    "get_billing_snapshot_service",
]
