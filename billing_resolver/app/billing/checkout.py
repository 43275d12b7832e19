"""Parsing of checkout success redirect parameters."""
from __future__ import annotations

from typing import Mapping, Optional, Union
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from .models import OneTimePaymentStatus, PaymentSnapshot

_QUERY_KEYS = (
    "checkout_id",
    "order_id",
    "customer_id",
    "product_id",
    "request_id",
    "signature",
)


class CheckoutSuccessParams(BaseModel):
    """Query parameters appended to a checkout success redirect."""

    checkout_id: Optional[str] = Field(default=None, alias="checkoutId")
    order_id: Optional[str] = Field(default=None, alias="orderId")
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    product_id: Optional[str] = Field(default=None, alias="productId")
    request_id: Optional[str] = Field(default=None, alias="requestId")
    signature: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payment_snapshot(
        self,
        status: OneTimePaymentStatus = OneTimePaymentStatus.PENDING,
    ) -> PaymentSnapshot:
        """Build the payment snapshot fed back into the resolver."""

        return PaymentSnapshot(
            status=status,
            checkout_id=self.checkout_id,
            order_id=self.order_id,
            customer_id=self.customer_id,
            product_id=self.product_id,
            request_id=self.request_id,
        )


def _query_mapping(search: Union[str, Mapping[str, object]]) -> Mapping[str, object]:
    if not isinstance(search, str):
        return search
    if "?" in search:
        search = urlsplit(search).query if "://" in search else search.split("?", 1)[1]
    parsed = parse_qs(search, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def parse_checkout_success_params(
    search: Union[str, Mapping[str, object]],
) -> CheckoutSuccessParams:
    """Parse checkout success parameters.

    ``search`` may be a raw query string (with or without the leading ``?``),
    a full redirect URL, or an already parsed mapping such as a framework's
    query params object. Missing keys are left as ``None``.
    """

    query = _query_mapping(search)
    values = {}
    for key in _QUERY_KEYS:
        value = query.get(key)
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        values[key] = None if value is None else str(value)
    return CheckoutSuccessParams(**values)


def has_checkout_success_params(params: CheckoutSuccessParams) -> bool:
    """Return ``True`` when both the checkout id and order id are present."""

    return bool(params.checkout_id and params.order_id)
