"""Shared test fixtures and configuration."""
from __future__ import annotations

from typing import Any

import httpx
import pytest

from kot_dashboard.client import OrderApiClient

TEST_BASE_URL = "http://kot.test"


SAMPLE_RAW_ORDER: dict[str, Any] = {
    "order_number": "12",
    "mode": None,
    "order_date": "2024-01-01T10:00:00Z",
    "status": "in_process",
    "items": [{"quantity": 2, "name": "Tea", "price": "1.5"}],
    "total_price": "3.00",
    "gst": "0.15",
    "customers": [],
}


class FakeOrderApi:
    """Serves a configurable response for the orders endpoint and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._json: Any = []
        self._content: bytes | None = None
        self._error: Exception | None = None

    def respond(self, status_code: int = 200, json: Any = None, content: bytes | None = None) -> None:
        self._status_code = status_code
        self._json = [] if json is None and content is None else json
        self._content = content
        self._error = None

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._json)

    def client(self, base_url: str = TEST_BASE_URL) -> OrderApiClient:
        return OrderApiClient(base_url, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def order_api() -> FakeOrderApi:
    """Fake orders endpoint returning an empty list until told otherwise."""
    return FakeOrderApi()


@pytest.fixture
def sample_raw_order() -> dict[str, Any]:
    """A fresh copy of the reference raw order."""
    return {**SAMPLE_RAW_ORDER, "items": [dict(item) for item in SAMPLE_RAW_ORDER["items"]]}
