"""Helpers for enforcing resolved billing actions on API and service layers."""
from __future__ import annotations

from typing import Optional, Union

from ..billing.models import AvailableAction, BillingSnapshot
from ..billing.selectors import has_billing_action
from .exceptions import BillingActionError


def require_billing_action(
    snapshot: BillingSnapshot,
    action: Union[AvailableAction, str],
    *,
    error_code: str = "billing_action_unavailable",
    message: Optional[str] = None,
) -> None:
    """Ensure ``action`` is among the snapshot's available actions.

    Parameters
    ----------
    snapshot:
        The resolved :class:`BillingSnapshot` for the billing entity.
    action:
        The action the caller is about to perform.
    error_code:
        Optional override for the surfaced error code. Defaults to
        ``"billing_action_unavailable"``.
    message:
        Optional human-friendly message. If omitted, a default message naming
        the action is used.
    """

    if has_billing_action(snapshot, action):
        return

    raise BillingActionError(
        action=getattr(action, "value", action),
        available_actions=tuple(item.value for item in snapshot.available_actions),
        subscription_state=snapshot.subscription_state,
        code=error_code,
        message=message,
    )
