"""Status mapping and card rendering helpers."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from kot_dashboard.config import CURRENCY_SYMBOL
from kot_dashboard.constant import (
    ACCENT_COLOR,
    BADGE_STYLE,
    DEFAULT_STATUS_TONE,
    GRID_BREAKPOINTS,
    MUTED_STYLE,
    STATUS_TONE_BY_STATUS,
)
from kot_dashboard.models import DisplayOrder


def status_tone(status: str) -> str:
    """Return the color tone for a raw status (case-insensitive)."""
    return STATUS_TONE_BY_STATUS.get(status.lower(), DEFAULT_STATUS_TONE)


def status_classes(status: str) -> str:
    """CSS classes for the status button of an order."""
    return f"status-button status-{status_tone(status)}"


def status_label(status: str) -> str:
    """Render a status as a badge label, e.g. "ready_to_pickup" -> "READY TO PICKUP"."""
    return status.replace("_", " ").upper()


def format_money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:.2f}"


def table_badge(table_no: str) -> str:
    return table_no[:2]


def grid_columns_for_width(width: int) -> int:
    """Pick how many cards fit side by side in a terminal of the given width."""
    for min_width, columns in GRID_BREAKPOINTS:
        if width >= min_width:
            return columns
    return 1


def item_rows(order: DisplayOrder) -> list[tuple[str, str, str]]:
    return [(str(item.quantity), item.name, format_money(item.price)) for item in order.items]


def summary_rows(order: DisplayOrder) -> list[tuple[str, str]]:
    return [
        ("SubTotal", format_money(order.total_price)),
        ("GST", format_money(order.gst)),
    ]


def build_header(order: DisplayOrder) -> Text:
    """Badge, table label and service type."""
    text = Text()
    text.append(f" {table_badge(order.table_no)} ", style=BADGE_STYLE)
    text.append(f" Table No. {order.table_no}", style="bold")
    text.append("\n")
    text.append(f"     {order.order_type}", style=ACCENT_COLOR)
    return text


def build_timing(order: DisplayOrder) -> Text:
    return Text(f"Time: {order.time}\nEstimate: {order.estimate}", style=MUTED_STYLE, justify="right")


def build_items_table(order: DisplayOrder) -> Table:
    table = Table(box=None, expand=True, pad_edge=False, header_style=MUTED_STYLE)
    table.add_column("Qty", ratio=1)
    table.add_column("Items", ratio=2)
    table.add_column("Price", ratio=1, justify="right")
    for quantity, name, price in item_rows(order):
        table.add_row(quantity, name, price, style=ACCENT_COLOR)
    return table


def build_totals_table(order: DisplayOrder) -> Table:
    table = Table.grid(expand=True)
    table.add_column(ratio=3)
    table.add_column(ratio=1, justify="right")
    for label, amount in summary_rows(order):
        table.add_row(Text(label, style=MUTED_STYLE), Text(amount, style=ACCENT_COLOR))
    return table

