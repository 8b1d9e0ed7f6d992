"""Domain models for the order board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OrderLine:
    """One line item of a display order."""

    quantity: int
    name: str
    price: float


@dataclass(frozen=True)
class DisplayOrder:
    """A rendering-ready projection of a raw API order."""

    table_no: str
    order_type: str
    time: str
    estimate: str
    status: str
    items: tuple[OrderLine, ...]
    total_price: float
    gst: float
    address: str | None = None
    customer: Any = None
