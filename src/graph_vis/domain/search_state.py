# graph_vis/domain/search_state.py
from dataclasses import dataclass

import numpy as np

# "infinity" for tentative distances. int64 leaves plenty of headroom:
# the longest simple path is capacity * max_weight (100 * 65535 for the defaults).
UNREACHED = np.iinfo(np.int64).max
NO_PREDECESSOR = -1


class SearchState:
    """Per-node working arrays of one Dijkstra run, indexed by node id."""

    def __init__(self, capacity: int):
        self.distance = np.full(capacity, UNREACHED, dtype=np.int64)
        self.predecessor = np.full(capacity, NO_PREDECESSOR, dtype=np.int64)
        self.visited = np.zeros(capacity, dtype=bool)
        self.frontier = np.zeros(capacity, dtype=bool)

    @property
    def capacity(self) -> int:
        return len(self.distance)

    def reset(self) -> None:
        self.distance.fill(UNREACHED)
        self.predecessor.fill(NO_PREDECESSOR)
        self.visited.fill(False)
        self.frontier.fill(False)

    def is_pristine(self) -> bool:
        return (
            bool(np.all(self.distance == UNREACHED))
            and bool(np.all(self.predecessor == NO_PREDECESSOR))
            and not self.visited.any()
            and not self.frontier.any()
        )

    def tentative_distance(self, node_id: int) -> int | None:
        d = int(self.distance[node_id])
        return None if d == UNREACHED else d

    def predecessor_of(self, node_id: int) -> int | None:
        p = int(self.predecessor[node_id])
        return None if p == NO_PREDECESSOR else p


@dataclass
class PathCache:
    path: tuple[int, ...] | None = None
    distance: int | None = None

    def store(self, path: tuple[int, ...] | None, distance: int | None) -> None:
        self.path, self.distance = path, distance

    def invalidate(self) -> None:
        self.path, self.distance = None, None
