"""Unit tests for the orders HTTP client."""
import httpx
import pytest

from kot_dashboard.client import OrderApiClient
from kot_dashboard.exceptions import NetworkError, ParseError


class TestOrderApiClient:
    def test_orders_url(self):
        assert OrderApiClient("http://kot.test").orders_url == "http://kot.test/kot/api/orders/"
        assert OrderApiClient("http://kot.test/").orders_url == "http://kot.test/kot/api/orders/"

    @pytest.mark.asyncio
    async def test_fetch_transforms_orders(self, order_api, sample_raw_order):
        order_api.respond(json=[sample_raw_order])

        orders = await order_api.client().fetch_orders()

        assert [order.table_no for order in orders] == ["12"]
        assert orders[0].items[0].name == "Tea"

    @pytest.mark.asyncio
    async def test_single_plain_get(self, order_api):
        await order_api.client().fetch_orders()

        assert len(order_api.requests) == 1
        request = order_api.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://kot.test/kot/api/orders/"
        assert request.url.query == b""
        assert "authorization" not in request.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_success_status_is_network_error(self, order_api, status_code):
        order_api.respond(status_code=status_code, json={"detail": "nope"})

        with pytest.raises(NetworkError) as exc_info:
            await order_api.client().fetch_orders()

        assert exc_info.value.status_code == status_code
        assert str(exc_info.value) == f"Failed to fetch orders (HTTP {status_code})"

    @pytest.mark.asyncio
    async def test_transport_failure_is_network_error(self, order_api):
        order_api.fail_with(httpx.ConnectError("connection refused"))

        with pytest.raises(NetworkError, match="connection refused"):
            await order_api.client().fetch_orders()

    @pytest.mark.asyncio
    async def test_invalid_json_is_parse_error(self, order_api):
        order_api.respond(content=b"<html>oops</html>")

        with pytest.raises(ParseError):
            await order_api.client().fetch_orders()

    @pytest.mark.asyncio
    async def test_wrong_shape_is_parse_error(self, order_api):
        order_api.respond(json={"results": []})

        with pytest.raises(ParseError):
            await order_api.client().fetch_orders()

    @pytest.mark.asyncio
    async def test_deeply_nested_json_is_parse_error(self, order_api):
        order_api.respond(content=b"[" * 200000 + b"]" * 200000)

        with pytest.raises(ParseError):
            await order_api.client().fetch_orders()
