"""Editable static status and color configuration."""

from __future__ import annotations

# Lower-cased raw status -> color tone. Unknown statuses use DEFAULT_STATUS_TONE.
STATUS_TONE_BY_STATUS: dict[str, str] = {
    "completed": "green",
    "in_process": "amber",
    "ready_to_pickup": "red",
}

DEFAULT_STATUS_TONE = "orange"

# Tone -> (background, hover background, text color) for the status button.
TONE_COLORS: dict[str, tuple[str, str, str]] = {
    "green": ("#22c55e", "#16a34a", "#ffffff"),
    "amber": ("#fbbf24", "#f59e0b", "#1f1300"),
    "red": ("#ef4444", "#dc2626", "#ffffff"),
    "orange": ("#f97316", "#ea580c", "#ffffff"),
}

ACCENT_COLOR = "#f97316"
BADGE_STYLE = "bold #ffffff on #f97316"
MUTED_STYLE = "#9ca3af"

# Terminal width -> grid column breakpoints, widest first.
GRID_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (160, 4),
    (120, 3),
    (80, 2),
)
