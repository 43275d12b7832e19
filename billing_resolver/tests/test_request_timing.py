from __future__ import annotations

import asyncio
import logging

import pytest
from starlette.requests import Request
from starlette.responses import Response

from billing_resolver.middleware_perf import RequestTimingMiddleware


async def _noop_app(scope, receive, send) -> None:
    return None


def _request(path: str) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def test_request_timing_logs_successful_request(caplog: pytest.LogCaptureFixture) -> None:
    middleware = RequestTimingMiddleware(_noop_app)

    async def call_next(request: Request) -> Response:
        return Response(status_code=204)

    with caplog.at_level(logging.DEBUG, logger="billing.http"):
        response = asyncio.run(middleware.dispatch(_request("/api/billing/checkout-success"), call_next))

    assert response.status_code == 204
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert "GET /api/billing/checkout-success status=204" in record.getMessage()


def test_request_timing_logs_failures_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    middleware = RequestTimingMiddleware(_noop_app)

    async def call_next(request: Request) -> Response:
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger="billing.http"):
        with pytest.raises(RuntimeError):
            asyncio.run(middleware.dispatch(_request("/api/billing/entities/org-1/snapshot"), call_next))

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "status=500" in record.getMessage()
