"""Runtime configuration defaults for the order API and logging."""

from __future__ import annotations

import os

# Base URL of the KOT service, e.g. "https://pos.example.com". Not validated.
BASE_URL = os.environ.get("KOT_BASE_URL", "")
ORDERS_PATH = "/kot/api/orders/"


def _timeout_from_env(raw: str) -> float | None:
    """Seconds from KOT_REQUEST_TIMEOUT; blank or non-numeric means no timeout."""
    try:
        seconds = float(raw)
    except ValueError:
        return None
    return seconds if 0 < seconds < float("inf") else None


REQUEST_TIMEOUT_SECONDS = _timeout_from_env(os.environ.get("KOT_REQUEST_TIMEOUT", "").strip())

DEFAULT_ORDER_TYPE = "Dine-in"
# Fixed until a real ETA rule exists.
ESTIMATE_PLACEHOLDER = "15 mins"
CURRENCY_SYMBOL = "$"
INVALID_TIME_TEXT = "Invalid Date"

DEBUG_LOG_PATH = os.environ.get("KOT_DEBUG_LOG", "/tmp/kot-dashboard-debug.log")
LOG_LEVEL = os.environ.get("KOT_LOG_LEVEL", "INFO").upper()
