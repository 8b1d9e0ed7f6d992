"""Order loading with observable loading/error/orders state."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Protocol

from kot_dashboard.exceptions import DashboardError
from kot_dashboard.models import DisplayOrder
from kot_dashboard.state import (
    BoardAction,
    BoardState,
    DateChanged,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    initial_state,
    parse_selected_date,
    reduce_board,
)

logger = logging.getLogger(__name__)


class OrderFetcher(Protocol):
    async def fetch_orders(self) -> list[DisplayOrder]: ...


class OrderDataSource:
    """
    Owns the board state and runs fetches against an order client.

    Every fetch gets a request id. Only the most recently issued request may
    complete the state, so overlapping refetches resolve in issue order.
    """

    def __init__(
        self,
        client: OrderFetcher,
        on_change: Callable[[BoardState], None] | None = None,
        today: date | None = None,
    ) -> None:
        self.client = client
        self.on_change = on_change
        self._state = initial_state(today)

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def orders(self) -> tuple[DisplayOrder, ...]:
        return self._state.orders

    def dispatch(self, action: BoardAction) -> BoardState:
        previous = self._state
        self._state = reduce_board(previous, action)
        if self._state is previous:
            logger.debug("discarded stale %s", type(action).__name__)
        elif self.on_change is not None:
            self.on_change(self._state)
        return self._state

    async def fetch_orders(self) -> None:
        request_id = self._state.latest_request_id + 1
        logger.info("fetch started request_id=%d", request_id)
        self.dispatch(FetchStarted(request_id))

        try:
            orders = await self.client.fetch_orders()
        except DashboardError as exc:
            logger.warning("fetch failed request_id=%d error=%s", request_id, exc)
            self.dispatch(FetchFailed(request_id, str(exc) or type(exc).__name__))
            return
        except Exception as exc:
            logger.exception("fetch crashed request_id=%d", request_id)
            self.dispatch(FetchFailed(request_id, f"Unexpected error: {exc!r}"))
            return

        logger.info("fetch finished request_id=%d orders=%d", request_id, len(orders))
        self.dispatch(FetchSucceeded(request_id, tuple(orders)))

    async def refetch(self) -> None:
        """Run the fetch again; safe to call while another fetch is pending."""
        await self.fetch_orders()

    def change_date(self, value: str) -> None:
        """Record the selected calendar date. It does not affect the fetch."""
        self.dispatch(DateChanged(parse_selected_date(value)))
