# graph_vis/domain/store.py
from collections.abc import Iterator
from numbers import Integral
from typing import Any

from graph_vis.domain.entities.node import Edge, Node
from graph_vis.domain.ids import NodeIdAllocator

DEFAULT_CAPACITY = 100
MAX_WEIGHT_U16 = 65_535


class GraphStore:
    """
    Dense slot arena of nodes (None marks a free slot) plus directed weighted edges.

    Every mutator absorbs bad input as a no-op and reports whether anything changed,
    so the owner knows when cached search results go stale.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, max_weight: int = MAX_WEIGHT_U16):
        self.ids = NodeIdAllocator(capacity)
        self.max_weight = max_weight
        self._slots: list[Node | None] = [None] * capacity
        self._edge_count = 0

    @property
    def capacity(self) -> int:
        return self.ids.capacity

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, node_id) -> bool:
        return node_id in self.ids

    def live_id(self, node_id) -> int | None:
        """Plain int form of a live node id; None for anything else (stale, float, list, ...)."""
        return int(node_id) if node_id in self.ids else None

    # ------------------------- nodes --------------------------------

    def add_node(self, payload: Any = None) -> int | None:
        node_id = self.ids.acquire()
        if node_id is not None:
            self._slots[node_id] = Node(node_id, payload)
        return node_id

    def insert_node(self, node_id: int, payload: Any = None) -> bool:
        if not self.ids.claim(node_id):
            return False
        node_id = int(node_id)
        self._slots[node_id] = Node(node_id, payload)
        return True

    def remove_node(self, node_id: int) -> bool:
        node_id = self.live_id(node_id)
        if node_id is None:
            return False
        node = self._slots[node_id]
        for dst in node.out:
            if dst != node_id:
                self._slots[dst].inc.discard(node_id)
        for src in node.inc:
            if src != node_id:
                del self._slots[src].out[node_id]
        self._edge_count -= len(node.out) + len(node.inc - {node_id})
        self._slots[node_id] = None
        self.ids.release(node_id)
        return True

    def set_payload(self, node_id: int, payload: Any) -> bool:
        node = self.node(node_id)
        if node is None:
            return False
        node.payload = payload
        return True

    def payload(self, node_id: int) -> Any:
        node = self.node(node_id)
        return None if node is None else node.payload

    def node(self, node_id: int) -> Node | None:
        node_id = self.live_id(node_id)
        return None if node_id is None else self._slots[node_id]

    def nodes(self) -> Iterator[tuple[int, Any]]:
        for node in self._slots:
            if node is not None:
                yield node.id, node.payload

    def node_ids(self) -> list[int]:
        return [node.id for node in self._slots if node is not None]

    # ------------------------- edges --------------------------------

    def valid_weight(self, weight) -> bool:
        return (
            isinstance(weight, Integral)
            and not isinstance(weight, bool)
            and 0 < weight <= self.max_weight
        )

    def add_edge(self, source: int, target: int, weight: int) -> bool:
        """Create the edge or overwrite its weight. At most one edge per ordered pair."""
        source, target = self.live_id(source), self.live_id(target)
        if source is None or target is None or not self.valid_weight(weight):
            return False
        src = self._slots[source]
        if target not in src.out:
            self._edge_count += 1
        src.out[target] = int(weight)
        self._slots[target].inc.add(source)
        return True

    def remove_edge(self, source: int, target: int) -> bool:
        src, target = self.node(source), self.live_id(target)
        if src is None or target not in src.out:
            return False
        del src.out[target]
        self._slots[target].inc.discard(src.id)
        self._edge_count -= 1
        return True

    def weight(self, source: int, target: int) -> int | None:
        src, target = self.node(source), self.live_id(target)
        return None if src is None or target is None else src.out.get(target)

    def out_edges(self, node_id: int) -> Iterator[tuple[int, int]]:
        node = self.node(node_id)
        if node is not None:
            yield from node.out.items()

    def edges(self) -> Iterator[Edge]:
        for node in self._slots:
            if node is None:
                continue
            for dst, w in node.out.items():
                yield Edge(node.id, dst, w)

    def edge_count(self) -> int:
        return self._edge_count

    def clear(self) -> None:
        self._slots = [None] * self.capacity
        self._edge_count = 0
        self.ids.reset()
