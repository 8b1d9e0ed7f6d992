"""HTTP client for the KOT orders endpoint."""

from __future__ import annotations

import logging

import httpx

from kot_dashboard.config import BASE_URL, ORDERS_PATH, REQUEST_TIMEOUT_SECONDS
from kot_dashboard.data import transform_orders
from kot_dashboard.exceptions import NetworkError, ParseError
from kot_dashboard.models import DisplayOrder

logger = logging.getLogger(__name__)


class OrderApiClient:
    """Fetches and normalizes the order list with a single GET request."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        *,
        timeout: float | None = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @property
    def orders_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{ORDERS_PATH}"

    async def fetch_orders(self) -> list[DisplayOrder]:
        """
        Fetch the current orders.

        Raises NetworkError on transport failures and non-2xx responses, and
        ParseError when the body is not a JSON list of order objects.
        """
        url = self.orders_url
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("orders request to %s failed: %s", url, exc)
            raise NetworkError(f"Failed to fetch orders: {exc}") from exc

        if not response.is_success:
            logger.warning("orders request to %s returned HTTP %s", url, response.status_code)
            raise NetworkError(
                f"Failed to fetch orders (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise ParseError("Orders response is not valid JSON") from exc

        orders = transform_orders(payload)
        logger.debug("received %d orders", len(orders))
        return orders
