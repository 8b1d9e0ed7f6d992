"""Exceptions raised while loading orders."""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for order loading failures."""


class NetworkError(DashboardError):
    """The orders request failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(DashboardError):
    """The orders response was not JSON or not a list of order objects."""
