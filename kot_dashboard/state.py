"""Board state record and the actions that transition it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from kot_dashboard.models import DisplayOrder


@dataclass(frozen=True)
class BoardState:
    """Everything the board renders from. Replaced, never mutated."""

    loading: bool = True
    error: str | None = None
    orders: tuple[DisplayOrder, ...] = ()
    selected_date: str = ""
    latest_request_id: int = 0

    @property
    def view(self) -> str:
        """One of "loading", "error" or "ready"."""
        if self.loading:
            return "loading"
        if self.error is not None:
            return "error"
        return "ready"


@dataclass(frozen=True)
class FetchStarted:
    request_id: int


@dataclass(frozen=True)
class FetchSucceeded:
    request_id: int
    orders: tuple[DisplayOrder, ...]


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    message: str


@dataclass(frozen=True)
class DateChanged:
    selected_date: str


BoardAction = FetchStarted | FetchSucceeded | FetchFailed | DateChanged


def initial_state(today: date | None = None) -> BoardState:
    """Return the pre-fetch state with the date defaulted to today."""
    return BoardState(selected_date=(today or date.today()).isoformat())


def parse_selected_date(value: str) -> str:
    """Normalize a YYYY-MM-DD string; raises ValueError if it is not a calendar date."""
    return date.fromisoformat(value.strip()).isoformat()


def reduce_board(state: BoardState, action: BoardAction) -> BoardState:
    """Apply one action. Completions for superseded requests leave the state as is."""
    if isinstance(action, FetchStarted):
        return replace(state, loading=True, latest_request_id=action.request_id)

    if isinstance(action, FetchSucceeded):
        if action.request_id != state.latest_request_id:
            return state
        return replace(state, loading=False, error=None, orders=tuple(action.orders))

    if isinstance(action, FetchFailed):
        if action.request_id != state.latest_request_id:
            return state
        return replace(state, loading=False, error=action.message)

    if isinstance(action, DateChanged):
        return replace(state, selected_date=action.selected_date)

    raise TypeError(f"Unknown board action: {action!r}")
