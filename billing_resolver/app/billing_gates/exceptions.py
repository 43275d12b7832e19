"""Exceptions raised when a billing action is not permitted."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from fastapi import HTTPException, status


@dataclass
class BillingActionError(Exception):
    """A requested billing action is missing from the resolved snapshot.

    ``available_actions`` and ``subscription_state`` describe the snapshot the
    decision was made against so clients can refresh their controls.
    """

    action: str
    available_actions: Tuple[str, ...] = ()
    subscription_state: Optional[str] = None
    code: str = "billing_action_unavailable"
    message: Optional[str] = None
    status_code: int = status.HTTP_403_FORBIDDEN

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"Billing action '{self.action}' is not available."
        super().__init__(self.message)

    @property
    def payload(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "action": self.action,
            "available_actions": list(self.available_actions),
            "subscription_state": self.subscription_state,
        }

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.payload)
