"""Normalization of raw order payloads into display orders."""

from __future__ import annotations

import math
import re
from datetime import datetime, tzinfo
from typing import Any, Mapping

from kot_dashboard.config import DEFAULT_ORDER_TYPE, ESTIMATE_PLACEHOLDER, INVALID_TIME_TEXT
from kot_dashboard.exceptions import ParseError
from kot_dashboard.models import DisplayOrder, OrderLine

_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")
_MAX_QUANTITY_DIGITS = 9


def parse_amount(value: object) -> float:
    """Parse a numeric or numeric-string amount, falling back to 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return 0.0

    try:
        amount = float(value)
    except (ValueError, OverflowError):
        return 0.0

    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def parse_quantity(value: object) -> int:
    """Parse a line quantity; anything missing or below 1 counts as 1."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, float) and value.is_integer():
        quantity = int(value)
    elif isinstance(value, str) and value.strip().isdecimal():
        digits = value.strip()
        if len(digits) > _MAX_QUANTITY_DIGITS:
            return 1
        quantity = int(digits)
    else:
        return 1
    return quantity if quantity >= 1 else 1


def format_order_time(value: object, tz: tzinfo | None = None) -> str:
    """
    Render an ISO-8601 timestamp as a 12-hour clock, e.g. "9:05 PM".

    Timestamps with an offset (or a trailing Z) are converted to `tz`, which
    defaults to the local timezone. Naive timestamps are read as local time,
    date-only values as UTC midnight.
    """
    if not isinstance(value, str) or not value.strip():
        return INVALID_TIME_TEXT

    raw = value.strip()
    if raw[-1] in {"Z", "z"}:
        raw = raw[:-1] + "+00:00"
    if _DATE_ONLY.fullmatch(raw):
        raw += "T00:00:00+00:00"
    raw = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", raw)

    try:
        local = datetime.fromisoformat(raw).astimezone(tz)
    except (ValueError, OverflowError, OSError):
        return INVALID_TIME_TEXT

    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _line_name(raw_item: Mapping[str, Any]) -> str:
    for key in ("name", "product_name"):
        value = raw_item.get(key)
        if value is not None and str(value) != "":
            return str(value)
    return ""


def to_order_line(raw_item: Mapping[str, Any]) -> OrderLine:
    """Build one display line from a raw item record."""
    return OrderLine(
        quantity=parse_quantity(raw_item.get("quantity")),
        name=_line_name(raw_item),
        price=parse_amount(raw_item.get("price")),
    )


def to_display_order(raw: Mapping[str, Any]) -> DisplayOrder:
    """Build a display order from one raw record. Missing fields get defaults."""
    raw_items = raw.get("items")
    if not isinstance(raw_items, list):
        raw_items = []

    customers = raw.get("customers")
    customer = customers[0] if isinstance(customers, list) and customers else None

    order_number = raw.get("order_number")
    mode = raw.get("mode")

    return DisplayOrder(
        table_no="" if order_number is None else str(order_number),
        order_type=str(mode) if mode else DEFAULT_ORDER_TYPE,
        time=format_order_time(raw.get("order_date")),
        estimate=ESTIMATE_PLACEHOLDER,
        status=_optional_text(raw.get("status")) or "",
        items=tuple(to_order_line(item) for item in raw_items if isinstance(item, Mapping)),
        total_price=parse_amount(raw.get("total_price")),
        gst=parse_amount(raw.get("gst")),
        address=_optional_text(raw.get("address")),
        customer=customer,
    )


def transform_orders(payload: object) -> list[DisplayOrder]:
    """Map a decoded API payload to display orders, one per raw order."""
    if not isinstance(payload, list):
        raise ParseError(f"Expected a list of orders, got {type(payload).__name__}")

    orders: list[DisplayOrder] = []
    for idx, raw in enumerate(payload):
        if not isinstance(raw, Mapping):
            raise ParseError(f"Order at index {idx} is not an object")
        orders.append(to_display_order(raw))
    return orders
