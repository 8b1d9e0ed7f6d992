"""Order card widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from kot_dashboard.constant import TONE_COLORS
from kot_dashboard.models import DisplayOrder
from kot_dashboard.rendering import (
    build_header,
    build_items_table,
    build_timing,
    build_totals_table,
    status_classes,
    status_label,
)


def _status_button_css() -> str:
    rules = []
    for tone, (background, hover, color) in TONE_COLORS.items():
        rules.append(f"OrderCard Button.status-{tone} {{ background: {background}; color: {color}; }}")
        rules.append(f"OrderCard Button.status-{tone}:hover {{ background: {hover}; }}")
    return "\n".join(rules)


class OrderCard(Vertical):
    """One order: header, timing, line items, totals and a status button."""

    DEFAULT_CSS = (
        """
    OrderCard {
        height: auto;
        border: round #f97316;
        background: $panel;
        padding: 0 1;
    }

    OrderCard .card-header {
        height: auto;
        margin-bottom: 1;
    }

    OrderCard .card-title {
        width: 1fr;
    }

    OrderCard .card-timing {
        width: auto;
    }

    OrderCard .card-totals {
        border-top: solid #fed7aa;
    }

    OrderCard .status-button {
        width: 100%;
        margin-top: 1;
        border: none;
        text-style: bold;
    }
    """
        + _status_button_css()
    )

    def __init__(self, order: DisplayOrder) -> None:
        super().__init__()
        self.order = order

    def compose(self) -> ComposeResult:
        with Horizontal(classes="card-header"):
            yield Static(build_header(self.order), classes="card-title")
            yield Static(build_timing(self.order), classes="card-timing")
        yield Static(build_items_table(self.order), classes="card-items")
        yield Static(build_totals_table(self.order), classes="card-totals")
        yield Button(status_label(self.order.status), classes=status_classes(self.order.status))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        # The status button has no action yet.
        event.stop()
