# graph_vis/domain/samples.py
import numpy as np

from graph_vis.domain.entities.geometry import Point
from graph_vis.domain.graph import Graph

# Drawing area of the editor window: 1290x720 minus the 200px side panel
WINDOW_W, WINDOW_H = 1290.0, 720.0
PANEL_W = 200.0
DEFAULT_RADIUS = 13.0

# name -> (points in id order, lines as (from, to, weight))
SAMPLES: dict[str, tuple[list[tuple[float, float]], list[tuple[int, int, int]]]] = {
    "small": (
        [(942, 355), (720, 208), (198, 342), (463, 507),
         (735, 513), (458, 346), (468, 202), (721, 360)],
        [(3, 4, 3), (2, 5, 5), (5, 7, 4), (6, 1, 5), (1, 0, 5), (5, 1, 7), (3, 7, 5),
         (7, 0, 4), (2, 6, 4), (2, 3, 7), (6, 7, 6), (5, 4, 8), (4, 0, 3)],
    ),
    "medium": (
        [(959, 211), (967, 394), (946, 532), (144, 377), (775, 295), (734, 523),
         (559, 493), (570, 361), (569, 200), (353, 206), (355, 350), (342, 488)],
        [(10, 6, 4), (7, 1, 5), (3, 9, 4), (11, 6, 4), (3, 11, 6), (5, 2, 20),
         (7, 4, 3), (11, 7, 3), (8, 4, 3), (10, 7, 3), (3, 10, 5), (4, 0, 1),
         (8, 0, 5), (9, 8, 4), (6, 5, 7), (4, 1, 2)],
    ),
    "large": (
        [(595, 640), (864, 300), (550, 369), (280, 606), (748, 127), (177, 71),
         (467, 84), (260, 431), (928, 642), (466, 181), (433, 27), (667, 52),
         (847, 75), (734, 270), (931, 233), (904, 389), (423, 467), (445, 551),
         (691, 559)],
        [(11, 12, 1), (5, 7, 12), (13, 2, 1), (15, 8, 10), (14, 8, 14), (1, 18, 9),
         (17, 18, 3), (16, 17, 2), (7, 3, 1), (0, 8, 1), (6, 4, 1), (15, 2, 2),
         (2, 7, 1), (2, 16, 3), (14, 15, 1), (4, 13, 3), (9, 2, 8), (12, 1, 2),
         (11, 4, 2), (10, 11, 1), (5, 10, 2), (9, 4, 3), (4, 1, 1), (15, 16, 5),
         (5, 6, 1), (17, 0, 1), (5, 9, 2), (1, 2, 1), (18, 8, 4), (16, 3, 2),
         (12, 14, 1), (3, 0, 1)],
    ),
}  # fmt: skip


def load_sample(graph: Graph, name: str) -> Graph:
    """Replace the contents of `graph` with one of the built-in demo graphs."""
    try:
        points, lines = SAMPLES[name]
    except KeyError:
        raise ValueError(f"Unknown sample {name!r}; choose from {sorted(SAMPLES)}")
    graph.clear()
    for x, y in points:
        graph.add_node(Point(float(x), float(y)))
    for a, b, w in lines:
        graph.add_edge(a, b, w)
    return graph


def random_points(
    graph: Graph, n: int, rng: np.random.Generator, *, radius: float = DEFAULT_RADIUS
) -> list[int]:
    """Append up to n nodes at uniform positions inside the drawing area.
    Stops silently once the graph is full; returns the ids actually created."""
    xs = rng.uniform(radius, WINDOW_W - PANEL_W - radius, size=n)
    ys = rng.uniform(radius, WINDOW_H - radius, size=n)
    created = []
    for x, y in zip(xs, ys):
        node_id = graph.add_node(Point(float(x), float(y)))
        if node_id is not None:
            created.append(node_id)
    return created
