from ppi_refine.merging import DistanceClusterer, ProbabilisticDistanceClusterer

from .conftest import build_graph


def weight_of(edge):
    return edge.weight


def path_graph():
    return build_graph([], [(1, 2, 0.9), (2, 3, 0.5)])


def test_probabilistic_clusterer():
    clusterer = ProbabilisticDistanceClusterer(weight_of, min_probability=0.6)
    clusters = clusterer.transform(path_graph().homology_view())
    assert clusters == {1: {1, 2, 3}, 2: {1, 2}, 3: {3}}
    # every visit was undone
    assert clusterer.log_probability == 0.0


def test_selected_roots():
    clusterer = ProbabilisticDistanceClusterer(weight_of, min_probability=0.95)
    assert clusterer.transform(path_graph().homology_view(), roots=[1]) == {1: {1}}


def test_certain_edge():
    graph = build_graph([], [(1, 2, 1.0), (2, 3, 0.1)])
    clusterer = ProbabilisticDistanceClusterer(weight_of, min_probability=0.99)
    assert clusterer.transform(graph.homology_view(), roots=[1]) == {1: {1, 2, 3}}


class RecordingClusterer(DistanceClusterer):
    """Accepts vertices within ``max_hops`` and records hook calls."""

    def __init__(self, max_hops):
        super().__init__(weight_of)
        self.max_hops = max_hops
        self.depth = 0
        self.calls = []

    def is_within_range(self, root, vertex):
        return self.depth <= self.max_hops

    def visit(self, vertex, edge):
        self.depth += 1
        self.calls.append(("visit", vertex, edge.edge_id))

    def unvisit(self, vertex, edge):
        self.depth -= 1
        self.calls.append(("unvisit", vertex, edge.edge_id))


def test_hooks_are_matched():
    graph = build_graph([], [(1, 2, 0.5), (2, 3, 0.5), (3, 4, 0.5), (1, 5, 0.5)])
    clusterer = RecordingClusterer(max_hops=2)
    clusters = clusterer.transform(graph.homology_view(), roots=[1])

    assert clusters == {1: {1, 2, 3, 5}}
    assert clusterer.depth == 0
    assert clusterer.calls == [
        ("visit", 2, 1),
        ("visit", 3, 2),
        ("visit", 4, 3),
        ("unvisit", 4, 3),
        ("unvisit", 3, 2),
        ("unvisit", 2, 1),
        ("visit", 5, 4),
        ("unvisit", 5, 4),
    ]
    assert clusterer.get_edge_weight(graph.find_homology(1, 2)) == 0.5


def test_search_goes_deep_before_wide():
    graph = build_graph([], [(1, 2, 0.5), (1, 3, 0.5), (2, 4, 0.5)])
    clusterer = RecordingClusterer(max_hops=10)
    assert clusterer.transform(graph.homology_view(), roots=[1]) == {1: {1, 2, 3, 4}}
    visited = [vertex for call, vertex, _ in clusterer.calls if call == "visit"]
    assert visited == [2, 4, 3]
