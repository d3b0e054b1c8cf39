# engine/dijkstra.py
import time
from dataclasses import dataclass
from enum import Enum

import numpy as np

from graph_vis.domain.search_state import SearchState
from graph_vis.domain.store import GraphStore

from .hooks import GraphHooks, NoopHooks

TIE_BREAKS = ("lowest_id", "keep_first")


class SearchPhase(Enum):
    IDLE = "idle"
    INITIALIZED = "initialized"
    RELAXING = "relaxing"
    DONE = "done"


@dataclass(frozen=True)
class SearchResult:
    found: bool
    path: tuple[int, ...] | None = None
    distance: int | None = None
    visited: int = 0


class DijkstraEngine:
    """
    Exact single-source, single-target Dijkstra over a GraphStore.

    The frontier is a boolean mask over the node slots; each step takes the
    unvisited frontier node with the smallest tentative distance (lowest id on
    equal distances), which keeps a run O(N^2) and fully deterministic.

    Equal-cost alternatives: with tie_break="lowest_id" a node's predecessor is
    switched to the lower id when a relaxation ties its current distance;
    "keep_first" keeps whichever predecessor reached it first. Both give a
    minimal total weight; only the node sequence among equal-weight paths differs.
    """

    def __init__(self, hooks: GraphHooks | None = None, *, tie_break: str = "lowest_id"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {tie_break!r}")
        self.tie_break = tie_break
        self.phase = SearchPhase.IDLE
        self._hooks = hooks or NoopHooks()

    def run(self, store: GraphStore, start: int, end: int, state: SearchState) -> SearchResult:
        if start not in store or end not in store:
            self.phase = SearchPhase.IDLE
            self._hooks.search_rejected(reason="missing_endpoint", start=start, end=end)
            return SearchResult(found=False)

        t0 = time.perf_counter()
        self._initialize(state, start)
        self._hooks.search_start(start=start, end=end, nodes=len(store))

        self.phase = SearchPhase.RELAXING
        visited = 0
        found = False
        while True:
            current = self._pop_min(state)
            if current is None:
                break
            state.visited[current] = True
            visited += 1
            self._hooks.search_visit(
                node=current,
                distance=int(state.distance[current]),
                frontier=state.frontier,
            )
            if current == end:
                found = True
                break
            self._relax(store, state, current)

        self.phase = SearchPhase.DONE
        path = self._reconstruct(state, start, end) if found else None
        result = SearchResult(
            found=found,
            path=path,
            distance=int(state.distance[end]) if found else None,
            visited=visited,
        )
        self._hooks.search_end(
            start=start,
            end=end,
            found=found,
            path=path,
            distance=result.distance,
            visited=visited,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    # ------------------------------------------------------------------

    def _initialize(self, state: SearchState, start: int) -> None:
        state.reset()
        state.distance[start] = 0
        state.predecessor[start] = start
        state.frontier[start] = True
        self.phase = SearchPhase.INITIALIZED

    @staticmethod
    def _pop_min(state: SearchState) -> int | None:
        candidates = np.flatnonzero(state.frontier)
        if candidates.size == 0:
            return None
        # argmin returns the first minimum, so ties resolve to the lowest id
        current = int(candidates[np.argmin(state.distance[candidates])])
        state.frontier[current] = False
        return current

    def _relax(self, store: GraphStore, state: SearchState, current: int) -> None:
        base = int(state.distance[current])
        for neighbor, weight in store.out_edges(current):
            if state.visited[neighbor]:
                continue
            candidate = base + weight
            known = int(state.distance[neighbor])
            if candidate < known:
                state.distance[neighbor] = candidate
                state.predecessor[neighbor] = current
                state.frontier[neighbor] = True
            elif (
                candidate == known
                and self.tie_break == "lowest_id"
                and current < state.predecessor[neighbor]
            ):
                state.predecessor[neighbor] = current

    @staticmethod
    def _reconstruct(state: SearchState, start: int, end: int) -> tuple[int, ...]:
        path = [end]
        node = end
        # a predecessor chain never holds more nodes than there are slots
        for _ in range(state.capacity):
            if node == start:
                return tuple(reversed(path))
            node = int(state.predecessor[node])
            path.append(node)
        raise RuntimeError(f"predecessor chain from {end} does not reach {start}")
