"""Service assembling resolver input from collaborators."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Union

from ..billing_gates.enforcement import require_billing_action
from ..billing_gates.exceptions import BillingActionError
from ..catalog.models import PlanCatalog
from .models import (
    AvailableAction,
    BillingResolverInput,
    BillingSnapshot,
    PaymentSnapshot,
    SubscriptionSnapshot,
    SubscriptionStatus,
)
from .resolver import resolve_billing_snapshot
from .updates import (
    UpdateBehavior,
    UpdateKind,
    UpdateSummary,
    UpdateSummaryInput,
    build_update_summary,
)

logger = logging.getLogger(__name__)

SnapshotResolver = Callable[[BillingResolverInput], BillingSnapshot]


class CatalogProvider(Protocol):
    """Supplies the raw plan catalog, or ``None`` when none is configured."""

    def get_catalog(self) -> Optional[PlanCatalog]:
        ...


class SubscriptionSnapshotRepository(Protocol):
    """Read access to already conflict-resolved subscription projections."""

    def get_current_subscription(self, entity_id: str) -> Optional[SubscriptionSnapshot]:
        ...

    def list_subscriptions(self, entity_id: str) -> Sequence[SubscriptionSnapshot]:
        ...


class UserContextProvider(Protocol):
    """Supplies opaque per-entity context passed through to the snapshot."""

    def get_user_context(self, entity_id: str) -> Dict[str, Any]:
        ...


@dataclass
class BillingSnapshotService:
    """Loads catalog and subscription state and resolves a billing snapshot.

    ``resolve_plan`` replaces the default resolver for applications with their
    own plan logic; it receives the same :class:`BillingResolverInput`.
    """

    catalog_provider: CatalogProvider
    subscription_repository: SubscriptionSnapshotRepository
    user_context_provider: Optional[UserContextProvider] = None
    resolve_plan: Optional[SnapshotResolver] = None
    log_resolutions: bool = False

    def build_input(
        self,
        entity_id: str,
        *,
        payment: Optional[PaymentSnapshot] = None,
        now: Optional[str] = None,
    ) -> BillingResolverInput:
        user_context = (
            self.user_context_provider.get_user_context(entity_id)
            if self.user_context_provider is not None
            else {}
        )
        return BillingResolverInput(
            catalog=self.catalog_provider.get_catalog(),
            current_subscription=self.subscription_repository.get_current_subscription(entity_id),
            all_subscriptions=tuple(self.subscription_repository.list_subscriptions(entity_id)),
            payment=payment,
            user_context=user_context or {},
            now=now,
        )

    def get_billing_snapshot(
        self,
        entity_id: str,
        *,
        payment: Optional[PaymentSnapshot] = None,
        now: Optional[str] = None,
    ) -> BillingSnapshot:
        resolver_input = self.build_input(entity_id, payment=payment, now=now)
        resolver = self.resolve_plan or resolve_billing_snapshot
        snapshot = resolver(resolver_input)

        logger.log(
            logging.INFO if self.log_resolutions else logging.DEBUG,
            "Resolved billing snapshot entity=%s plan=%s category=%s actions=%s",
            entity_id,
            snapshot.active_plan_id,
            snapshot.active_category.value,
            ",".join(action.value for action in snapshot.available_actions),
        )
        return snapshot

    def summarize_update(
        self,
        entity_id: str,
        *,
        kind: UpdateKind,
        update_behavior: UpdateBehavior,
        current_label: str,
        new_label: str,
    ) -> UpdateSummary:
        """Build confirmation copy using the entity's current period and trial."""

        snapshot = self.get_billing_snapshot(entity_id)
        return build_update_summary(
            UpdateSummaryInput(
                kind=kind,
                update_behavior=update_behavior,
                current_label=current_label,
                new_label=new_label,
                current_period_end=snapshot.metadata.get("currentPeriodEnd"),
                is_trialing=snapshot.subscription_state == SubscriptionStatus.TRIALING.value,
                trial_end=snapshot.metadata.get("trialEnd"),
            )
        )

    def require_action(
        self,
        entity_id: str,
        action: Union[AvailableAction, str],
        *,
        payment: Optional[PaymentSnapshot] = None,
    ) -> BillingSnapshot:
        """Resolve the snapshot and ensure ``action`` is permitted."""

        snapshot = self.get_billing_snapshot(entity_id, payment=payment)
        try:
            require_billing_action(snapshot, action)
        except BillingActionError:
            logger.warning(
                "Denied billing action %s for entity=%s state=%s",
                getattr(action, "value", action),
                entity_id,
                snapshot.subscription_state,
            )
            raise
        return snapshot
