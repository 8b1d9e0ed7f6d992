"""Main Textual app class."""

from __future__ import annotations

import logging
from datetime import date

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Grid, Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Resize
from textual.widgets import Button, ContentSwitcher, Footer, Header, Input, Static

from kot_dashboard.client import OrderApiClient
from kot_dashboard.datasource import OrderDataSource, OrderFetcher
from kot_dashboard.models import DisplayOrder
from kot_dashboard.order_card import OrderCard
from kot_dashboard.rendering import grid_columns_for_width
from kot_dashboard.state import BoardState

logger = logging.getLogger(__name__)

_VIEW_IDS = {
    "loading": "loading-view",
    "error": "error-view",
    "ready": "orders-view",
}


class OrderBoardApp(App):
    """A Textual dashboard showing kitchen orders as status-colored cards."""

    TITLE = "KOT Orders"
    SUB_TITLE = "Order Board"

    CSS = """
    Screen {
        layout: vertical;
    }

    #toolbar {
        height: auto;
        padding: 1 2 0 2;
    }

    #date-picker {
        width: 20;
    }

    #orders-button {
        margin-left: 2;
        background: #f97316;
        color: #ffffff;
    }

    #board {
        height: 1fr;
    }

    #loading-view {
        width: 1fr;
        height: 1fr;
        content-align: center middle;
        color: #f97316;
        text-style: bold;
    }

    #error-view {
        width: 1fr;
        height: 1fr;
        align: center middle;
    }

    #error-message {
        width: auto;
        padding: 1 2;
    }

    #retry-button {
        background: #f97316;
        color: #ffffff;
    }

    #orders-view {
        padding: 1 2;
    }

    #empty-orders {
        color: $text-muted;
    }

    #order-grid {
        layout: grid;
        grid-size: 4;
        grid-gutter: 1 2;
        grid-rows: auto;
        height: auto;
    }
    """

    BINDINGS = [
        ("r", "refetch", "Refresh"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: OrderFetcher | None = None, today: date | None = None) -> None:
        super().__init__()
        self.datasource = OrderDataSource(
            client if client is not None else OrderApiClient(),
            on_change=self._on_state_change,
            today=today,
        )
        self._rendered_orders: tuple[DisplayOrder, ...] | None = None

    @property
    def board_state(self) -> BoardState:
        return self.datasource.state

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="toolbar"):
            yield Input(value=self.board_state.selected_date, placeholder="YYYY-MM-DD", id="date-picker")
            yield Button("Orders", id="orders-button")
        with ContentSwitcher(initial="loading-view", id="board"):
            yield Static("Loading orders...", id="loading-view")
            with Horizontal(id="error-view"):
                yield Static(id="error-message")
                yield Button("Retry", id="retry-button")
            with VerticalScroll(id="orders-view"):
                yield Static("No orders", id="empty-orders")
                yield Grid(id="order-grid")
        yield Footer()

    def on_mount(self) -> None:
        logger.info("app mounted")
        self._refresh_view()
        self.action_refetch()

    def on_resize(self, event: Resize) -> None:
        self._refresh_grid_columns(event.size.width)

    def action_refetch(self) -> None:
        logger.info("refetch requested")
        self.run_worker(self.datasource.refetch(), group="orders")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in {"retry-button", "orders-button"}:
            self.action_refetch()
            event.stop()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "date-picker":
            return
        try:
            self.datasource.change_date(event.value)
        except ValueError:
            # Partial or invalid text keeps the last valid date.
            return
        logger.info("selected date %s", self.board_state.selected_date)

    def _on_state_change(self, state: BoardState) -> None:
        self._refresh_view()

    def _refresh_view(self) -> None:
        state = self.board_state
        try:
            switcher = self.query_one("#board", ContentSwitcher)
            toolbar = self.query_one("#toolbar", Horizontal)
        except NoMatches:
            return

        switcher.current = _VIEW_IDS[state.view]
        toolbar.display = state.view == "ready"

        if state.view == "error":
            self._refresh_error(state.error or "")
        self._refresh_orders(state.orders)

    def _refresh_error(self, message: str) -> None:
        text = Text()
        text.append(f"Error: {message}", style="#ef4444")
        self.query_one("#error-message", Static).update(text)

    def _refresh_orders(self, orders: tuple[DisplayOrder, ...]) -> None:
        if orders is self._rendered_orders:
            return
        self._rendered_orders = orders

        grid = self.query_one("#order-grid", Grid)
        self.query_one("#empty-orders", Static).display = not orders
        grid.remove_children()
        if orders:
            grid.mount(*(OrderCard(order) for order in orders))
        self._refresh_grid_columns(self.size.width)

    def _refresh_grid_columns(self, width: int) -> None:
        try:
            grid = self.query_one("#order-grid", Grid)
        except NoMatches:
            return
        grid.styles.grid_size_columns = grid_columns_for_width(width)
