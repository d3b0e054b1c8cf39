from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from graph_vis.domain.entities.node import Edge
from graph_vis.domain.search_state import SearchState
from graph_vis.domain.store import GraphStore
from graph_vis.engine.dijkstra import SearchResult


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Run one start→end query over the store, writing its working arrays into `state`.
      • Report a missing endpoint or a disconnected pair as SearchResult(found=False).
    """

    def run(self, store: GraphStore, start: int, end: int, state: SearchState) -> SearchResult: ...


@runtime_checkable
class GraphView(Protocol):
    """
    Read-only surface a renderer draws from. Iterating must not mutate anything.
    """

    @property
    def start(self) -> int | None: ...
    @property
    def end(self) -> int | None: ...
    def nodes(self) -> Iterable[tuple[int, Any]]: ...
    def edges(self) -> Iterable[Edge]: ...
    def get_path(self) -> list[int] | None: ...
