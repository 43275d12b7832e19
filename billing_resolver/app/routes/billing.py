"""API routes exposing billing snapshot resolution."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from fastapi import APIRouter, HTTPException, Query, Response, status

from ..billing import (
    AvailableAction,
    OneTimePaymentStatus,
    PaymentSnapshot,
    has_checkout_success_params,
    parse_checkout_success_params,
)
from ..billing_gates import BillingActionError
from ..schemas.billing import (
    BillingSnapshotResponse,
    CheckoutSuccessResponse,
    UpdateSummaryRequest,
    UpdateSummaryResponse,
)
from ..services.billing import get_billing_config, get_billing_snapshot_service

T = TypeVar("T")

router = APIRouter(prefix="/api/billing", tags=["billing"])


def _with_catalog(call: Callable[[], T]) -> T:
    try:
        return call()
    except (LookupError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def _payment_from_query(
    *,
    checkout_id: Optional[str],
    order_id: Optional[str],
    customer_id: Optional[str],
    product_id: Optional[str],
    request_id: Optional[str],
    payment_status: OneTimePaymentStatus,
) -> Optional[PaymentSnapshot]:
    params = parse_checkout_success_params(
        {
            "checkout_id": checkout_id,
            "order_id": order_id,
            "customer_id": customer_id,
            "product_id": product_id,
            "request_id": request_id,
        }
    )
    if not has_checkout_success_params(params):
        return None
    return params.to_payment_snapshot(payment_status)


@router.get("/entities/{entity_id}/snapshot", response_model=BillingSnapshotResponse)
def get_billing_snapshot(
    entity_id: str,
    checkout_id: Optional[str] = Query(default=None),
    order_id: Optional[str] = Query(default=None),
    customer_id: Optional[str] = Query(default=None),
    product_id: Optional[str] = Query(default=None),
    request_id: Optional[str] = Query(default=None),
    payment_status: OneTimePaymentStatus = Query(default=OneTimePaymentStatus.PENDING),
) -> BillingSnapshotResponse:
    service = get_billing_snapshot_service()
    payment = _payment_from_query(
        checkout_id=checkout_id,
        order_id=order_id,
        customer_id=customer_id,
        product_id=product_id,
        request_id=request_id,
        payment_status=payment_status,
    )
    snapshot = _with_catalog(lambda: service.get_billing_snapshot(entity_id, payment=payment))
    return BillingSnapshotResponse.from_snapshot(snapshot)


@router.get("/checkout-success", response_model=CheckoutSuccessResponse)
def read_checkout_success(
    checkout_id: Optional[str] = Query(default=None),
    order_id: Optional[str] = Query(default=None),
    customer_id: Optional[str] = Query(default=None),
    product_id: Optional[str] = Query(default=None),
    request_id: Optional[str] = Query(default=None),
    signature: Optional[str] = Query(default=None),
) -> CheckoutSuccessResponse:
    params = parse_checkout_success_params(
        {
            "checkout_id": checkout_id,
            "order_id": order_id,
            "customer_id": customer_id,
            "product_id": product_id,
            "request_id": request_id,
            "signature": signature,
        }
    )
    return CheckoutSuccessResponse.from_params(params)


@router.post(
    "/entities/{entity_id}/actions/{action}/check",
    status_code=status.HTTP_204_NO_CONTENT,
)
def check_billing_action(entity_id: str, action: AvailableAction) -> Response:
    service = get_billing_snapshot_service()
    try:
        _with_catalog(lambda: service.require_action(entity_id, action))
    except BillingActionError as exc:
        raise exc.to_http_exception() from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/entities/{entity_id}/update-summary", response_model=UpdateSummaryResponse)
def create_update_summary(entity_id: str, payload: UpdateSummaryRequest) -> UpdateSummaryResponse:
    service = get_billing_snapshot_service()
    update_behavior = payload.update_behavior or get_billing_config().update_behavior
    summary = _with_catalog(
        lambda: service.summarize_update(
            entity_id,
            kind=payload.kind,
            update_behavior=update_behavior,
            current_label=payload.current_label,
            new_label=payload.new_label,
        )
    )
    return UpdateSummaryResponse.from_summary(summary)
