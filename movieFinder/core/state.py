"""
core.state
~~~~~~~~~~
The one view-state record owned by the search controller, plus the only
functions allowed to produce a new one.

Legal phases::

    IDLE ──begin──▶ LOADING ──reconcile──▶ SUCCESS | ERROR
                       ▲                        │
                       └─────────begin──────────┘

Every transition returns a fresh ``SearchState``; nothing is mutated in place.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Mapping, Tuple

from movieFinder.settings import GENERIC_ERROR, NO_MOVIES_FOUND


class Phase(enum.Enum):
    IDLE    = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR   = "error"


@dataclass(frozen=True, slots=True)
class SearchState:
    query: str = ""
    page: int = 1
    total_pages: int = 1
    results: Tuple[dict, ...] = ()
    error_message: str = ""
    phase: Phase = Phase.IDLE
    request_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages


def begin(state: SearchState, query: str, page: int) -> SearchState:
    """Dispatch transition: stamp a new request id, enter LOADING, clear the error."""
    return replace(
        state,
        query=query,
        page=page,
        phase=Phase.LOADING,
        error_message="",
        request_id=state.request_id + 1,
    )


def reconcile(state: SearchState, payload: Mapping[str, Any]) -> SearchState:
    """
    Fold a decoded TMDb response into *state*.

    A non-empty ``results`` list replaces the result set as-is and updates
    ``total_pages``. Anything else clears the results and surfaces the API's
    ``status_message`` (or a generic "No movies found."); the page count
    falls back to 1 so paging stops at the empty result.
    """
    results = payload.get("results")
    if isinstance(results, list) and results:
        return replace(
            state,
            results=tuple(results),
            total_pages=_coerce_total(payload.get("total_pages"), state.total_pages),
            error_message="",
            phase=Phase.SUCCESS,
        )
    total = _coerce_total(payload.get("total_pages"), 1)
    return replace(
        state,
        page=min(state.page, total),
        total_pages=total,
        results=(),
        error_message=payload.get("status_message") or NO_MOVIES_FOUND,
        phase=Phase.ERROR,
    )


def fail(state: SearchState) -> SearchState:
    """Transport failure: keep the (possibly stale) results, show the retry text."""
    return replace(state, error_message=GENERIC_ERROR, phase=Phase.ERROR)


def _coerce_total(value: Any, fallback: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return max(1, fallback)
    return max(1, int(value))
