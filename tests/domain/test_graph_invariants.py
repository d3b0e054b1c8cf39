from graph_vis.domain.entities.geometry import Point
from graph_vis.domain.graph import Graph
from graph_vis.domain.samples import load_sample


def _small_with_path(start=2, end=0) -> Graph:
    g = load_sample(Graph(), "small")
    g.set_start(start)
    g.set_end(end)
    assert g.find_shortest_path()
    return g


def test_clear_resets_everything():
    g = _small_with_path()
    g.clear()
    assert g.size() == 0
    assert g.edge_count() == 0
    assert g.start is None and g.end is None
    assert g.get_path() is None
    assert g.path_distance is None
    assert g.search_state.is_pristine()


def test_removing_endpoint_clears_designation():
    g = _small_with_path(start=2, end=0)
    g.remove_node(0)
    assert g.end is None
    assert g.start == 2
    assert g.get_path() is None
    g.remove_node(2)
    assert g.start is None


def test_set_start_and_end_ignore_unknown_ids():
    g = Graph()
    a = g.add_node()
    assert g.set_start(a)
    assert not g.set_start(55)
    assert not g.set_end(-1)
    assert g.start == a
    assert g.end is None


def test_find_without_endpoints_returns_false_and_leaves_state_alone():
    g = load_sample(Graph(), "small")
    assert not g.find_shortest_path()
    g.set_start(2)
    assert not g.find_shortest_path()
    assert g.get_path() is None
    assert g.search_state.is_pristine()


def test_structural_mutations_invalidate_path():
    mutations = [
        lambda g: g.add_node(Point(1.0, 1.0)),
        lambda g: g.insert_node(50, Point(1.0, 1.0)),
        lambda g: g.remove_node(6),
        lambda g: g.add_edge(0, 2, 1),
        lambda g: g.add_edge(3, 4, 1),  # weight update only
        lambda g: g.remove_edge(6, 7),
        lambda g: g.set_start(3),
        lambda g: g.set_end(4),
        lambda g: g.clear_start(),
        lambda g: g.clear_end(),
    ]
    for mutate in mutations:
        g = _small_with_path()
        mutate(g)
        assert g.get_path() is None
        assert g.path_distance is None
        assert g.search_state.is_pristine()


def test_noop_mutations_keep_path():
    g = _small_with_path()
    before = g.get_path()
    g.remove_node(77)
    g.add_edge(0, 99, 1)
    g.remove_edge(0, 2)
    g.set_start(99)
    assert g.get_path() == before


def test_moving_a_node_keeps_path():
    g = _small_with_path()
    before = g.get_path()
    assert g.move_node(3, Point(10.0, 10.0))
    assert g.payload(3) == Point(10.0, 10.0)
    assert g.get_path() == before


def test_clear_path_keeps_graph_and_designation():
    g = _small_with_path()
    edges = g.edge_count()
    g.clear_path()
    assert g.get_path() is None
    assert g.search_state.is_pristine()
    assert (g.start, g.end) == (2, 0)
    assert g.size() == 8 and g.edge_count() == edges
    # can be recomputed without re-designating
    assert g.find_shortest_path()
    assert g.path_distance == 13


def test_find_is_idempotent():
    g = load_sample(Graph(), "medium")
    g.set_start(3)
    g.set_end(1)
    first = (g.find_shortest_path(), g.get_path(), g.path_distance)
    second = (g.find_shortest_path(), g.get_path(), g.path_distance)
    assert first == second


def test_multiple_calls_after_redesignation():
    g = load_sample(Graph(), "small")
    g.set_start(2)
    g.set_end(0)
    g.find_shortest_path()
    g.set_start(2)
    g.set_end(4)
    g.find_shortest_path()
    g.find_shortest_path()
    assert g.find_shortest_path()
    assert g.get_path() == [2, 3, 4]


def test_get_path_returns_a_copy():
    g = _small_with_path()
    g.get_path().append(99)
    assert 99 not in g.get_path()


def test_describe_dumps_points_lines_and_endpoints():
    g = Graph()
    a, b = g.add_node(), g.add_node()
    g.add_edge(a, b, 7)
    g.set_start(a)
    assert g.describe() == {"points": [0, 1], "lines": [(0, 1, 7)], "start": 0, "end": None}
