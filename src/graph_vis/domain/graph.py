# graph_vis/domain/graph.py
from collections.abc import Iterator
from typing import Any

from graph_vis.app.protocols import PathFinder
from graph_vis.domain.entities.node import Edge
from graph_vis.domain.search_state import PathCache, SearchState
from graph_vis.domain.store import DEFAULT_CAPACITY, MAX_WEIGHT_U16, GraphStore
from graph_vis.engine.dijkstra import DijkstraEngine
from graph_vis.engine.hooks import GraphHooks, NoopHooks


class Graph:
    """
    Editable weighted directed graph with a cached start→end shortest path.

    Invalid ids, full capacity and bad weights are absorbed as no-ops: the UI calls in
    with stale ids all the time. Every effective structural change (node or edge
    added/removed, endpoint changed) drops the cached path and resets the search
    arrays. Moving a node only swaps its payload and keeps the cache.

    Not thread-safe. A multi-threaded host must lock the whole graph, search included.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        max_weight: int = MAX_WEIGHT_U16,
        engine: PathFinder | None = None,
        hooks: GraphHooks | None = None,
    ):
        self._hooks = hooks or NoopHooks()
        self._store = GraphStore(capacity, max_weight=max_weight)
        self._engine = engine or DijkstraEngine(hooks=self._hooks)
        self._state = SearchState(capacity)
        self._cache = PathCache()
        self._start: int | None = None
        self._end: int | None = None

    # ------------------------- read access ---------------------------

    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def start(self) -> int | None:
        return self._start

    @property
    def end(self) -> int | None:
        return self._end

    @property
    def search_state(self) -> SearchState:
        return self._state

    @property
    def path_distance(self) -> int | None:
        return self._cache.distance

    def size(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._store

    def payload(self, node_id: int) -> Any:
        return self._store.payload(node_id)

    def weight(self, source: int, target: int) -> int | None:
        return self._store.weight(source, target)

    def nodes(self) -> Iterator[tuple[int, Any]]:
        return self._store.nodes()

    def edges(self) -> Iterator[Edge]:
        return self._store.edges()

    def edge_count(self) -> int:
        return self._store.edge_count()

    def describe(self) -> dict:
        return {
            "points": self._store.node_ids(),
            "lines": [(e.source, e.target, e.weight) for e in self._store.edges()],
            "start": self._start,
            "end": self._end,
        }

    # ------------------------- mutation ------------------------------

    def add_node(self, payload: Any = None) -> int | None:
        node_id = self._store.add_node(payload)
        if node_id is not None:
            self._changed("add_node", id=node_id)
        return node_id

    def insert_node(self, node_id: int, payload: Any = None) -> bool:
        ok = self._store.insert_node(node_id, payload)
        if ok:
            self._changed("insert_node", id=int(node_id))
        return ok

    def remove_node(self, node_id: int) -> bool:
        node_id = self._store.live_id(node_id)
        if node_id is None or not self._store.remove_node(node_id):
            return False
        if self._start == node_id:
            self._start = None
        if self._end == node_id:
            self._end = None
        self._changed("remove_node", id=node_id)
        return True

    def move_node(self, node_id: int, payload: Any) -> bool:
        node_id = self._store.live_id(node_id)
        if node_id is None or not self._store.set_payload(node_id, payload):
            return False
        self._hooks.mutation("move_node", id=node_id)
        return True

    def add_edge(self, source: int, target: int, weight: int) -> bool:
        source, target = self._store.live_id(source), self._store.live_id(target)
        if source is None or target is None or not self._store.add_edge(source, target, weight):
            return False
        self._changed("add_edge", source=source, target=target, weight=int(weight))
        return True

    def remove_edge(self, source: int, target: int) -> bool:
        source, target = self._store.live_id(source), self._store.live_id(target)
        if source is None or target is None or not self._store.remove_edge(source, target):
            return False
        self._changed("remove_edge", source=source, target=target)
        return True

    def clear(self) -> None:
        self._store.clear()
        self._start = self._end = None
        self._changed("clear")

    # ------------------------- designation ---------------------------

    def set_start(self, node_id: int) -> bool:
        node_id = self._store.live_id(node_id)
        if node_id is None:
            return False
        self._start = node_id
        self._changed("set_start", id=node_id)
        return True

    def set_end(self, node_id: int) -> bool:
        node_id = self._store.live_id(node_id)
        if node_id is None:
            return False
        self._end = node_id
        self._changed("set_end", id=node_id)
        return True

    def clear_start(self) -> None:
        self._start = None
        self._changed("clear_start")

    def clear_end(self) -> None:
        self._end = None
        self._changed("clear_end")

    # ------------------------- computation ---------------------------

    def find_shortest_path(self) -> bool:
        if self._start is None or self._end is None:
            self._hooks.search_rejected(reason="unset_endpoint", start=self._start, end=self._end)
            return False
        result = self._engine.run(self._store, self._start, self._end, self._state)
        self._cache.store(result.path, result.distance)
        return result.found

    def get_path(self) -> list[int] | None:
        path = self._cache.path
        return None if path is None else list(path)

    def clear_path(self) -> None:
        self._state.reset()
        self._cache.invalidate()
        self._hooks.invalidated(reason="clear_path")

    # ------------------------------------------------------------------

    def _changed(self, op: str, **kw) -> None:
        self._hooks.mutation(op, **kw)
        self._state.reset()
        self._cache.invalidate()
        self._hooks.invalidated(reason=op)
