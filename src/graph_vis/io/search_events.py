# graph_vis/io/search_events.py

from dataclasses import dataclass
from typing import Literal


# Base type for analytics events emitted after a query
@dataclass
class SearchEvent:
    run_id: str
    seq: int  # per-hooks query counter (for total ordering)
    name: str  # stable event name


@dataclass
class PathFound(SearchEvent):
    start: int
    end: int
    path: list[int]
    distance: int
    visited: int
    wall_ms: float | None = None


@dataclass
class PathNotFound(SearchEvent):
    start: int | None
    end: int | None
    reason: Literal["unset_endpoint", "missing_endpoint", "disconnected"]
    visited: int = 0
