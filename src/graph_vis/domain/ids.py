# graph_vis/domain/ids.py
import heapq
from numbers import Integral


class NodeIdAllocator:
    """
    Hands out small integer ids from [0, capacity).
    acquire() always returns the smallest free id; released ids are reused.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._free: list[int] = list(range(capacity))  # already a valid min-heap
        self._live: set[int] = set()

    def __contains__(self, node_id) -> bool:
        return self.in_bounds(node_id) and int(node_id) in self._live

    def __len__(self) -> int:
        return len(self._live)

    def in_bounds(self, node_id) -> bool:
        return (
            isinstance(node_id, Integral)
            and not isinstance(node_id, bool)
            and 0 <= node_id < self.capacity
        )

    def acquire(self) -> int | None:
        if not self._free:
            return None
        node_id = heapq.heappop(self._free)
        self._live.add(node_id)
        return node_id

    def claim(self, node_id: int) -> bool:
        """Take a specific id out of the free pool. False if out of range or taken."""
        if not self.in_bounds(node_id) or node_id in self._live:
            return False
        node_id = int(node_id)
        self._free.remove(node_id)
        heapq.heapify(self._free)
        self._live.add(node_id)
        return True

    def release(self, node_id: int) -> bool:
        if node_id not in self:
            return False
        node_id = int(node_id)
        self._live.remove(node_id)
        heapq.heappush(self._free, node_id)
        return True

    def reset(self) -> None:
        self._free = list(range(self.capacity))
        self._live.clear()
