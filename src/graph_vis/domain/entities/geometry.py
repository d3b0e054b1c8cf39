from collections.abc import Iterable
from dataclasses import dataclass


# Payload type used by the presentation layer and the sample loaders
@dataclass(frozen=True)
class Point:
    x: float  # window pixels
    y: float


def is_point_in_circle(px: float, py: float, cx: float, cy: float, radius: float) -> bool:
    return (cx - px) ** 2 + (cy - py) ** 2 <= radius**2


def find_hovered_node(
    nodes: Iterable[tuple[int, Point]], x: float, y: float, radius: float
) -> int | None:
    """Id of the node whose circle contains (x, y).
    When circles overlap the last one in iteration order wins (it is drawn on top)."""
    hit = None
    for node_id, p in nodes:
        if p is not None and is_point_in_circle(x, y, p.x, p.y, radius):
            hit = node_id
    return hit
