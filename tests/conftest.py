import random

import pytest

from ppi_refine.graph import DualGraph, HomologyEdge, InteractionEdge


def build_graph(
    interactions: list[tuple[int, int, float]],
    homologies: list[tuple[int, int, float]],
    vertices: list[int] | None = None,
) -> DualGraph:
    """Build a dual graph numbering edges from 1 in list order."""
    graph = DualGraph()
    for v in vertices or []:
        graph.add_vertex(v)
    for i, (u, v, w) in enumerate(interactions, start=1):
        graph.add_interaction(InteractionEdge(i, w), u, v)
    for i, (u, v, w) in enumerate(homologies, start=1):
        graph.add_homology(HomologyEdge(i, w), u, v)
    return graph


def edge_set(graph: DualGraph) -> tuple[set, set]:
    """Interaction and homology edges as (id, frozenset(endpoints), weight) triples."""
    interactions = {
        (e.edge_id, frozenset(graph.interaction_endpoints(e)), e.weight)
        for e in graph.interactions()
    }
    homologies = {
        (e.edge_id, frozenset(graph.homology_endpoints(e)), e.weight)
        for e in graph.homologies()
    }
    return interactions, homologies


@pytest.fixture
def trivial_graph() -> DualGraph:
    """Two homology chains 1-2-5 and 3-4-7 bridged by interactions 1-3, 2-4, 5-7."""
    return build_graph(
        interactions=[(1, 3, 0.4), (2, 4, 0.4), (5, 7, 0.4)],
        homologies=[(1, 2, 0.8), (3, 4, 0.8), (2, 5, 0.8), (4, 7, 0.8)],
        vertices=[1, 2, 3, 4, 5, 6],
    )


@pytest.fixture
def degenerate_graph() -> DualGraph:
    """Homology triangle 1-2-3 where 1 and 2 share the interaction partner 10."""
    return build_graph(
        interactions=[(1, 10, 0.9), (2, 10, 0.6), (3, 11, 0.7)],
        homologies=[(1, 2, 0.9), (1, 3, 0.9), (2, 3, 0.9), (10, 11, 0.8)],
    )


@pytest.fixture
def random_graph() -> DualGraph:
    rng = random.Random(7)
    vertices = list(range(30))
    interactions = []
    homologies = []
    seen_i: set[frozenset] = set()
    seen_h: set[frozenset] = set()
    for _ in range(60):
        u, v = rng.sample(vertices, 2)
        if frozenset((u, v)) not in seen_i:
            seen_i.add(frozenset((u, v)))
            interactions.append((u, v, round(rng.random(), 3)))
        u, v = rng.sample(vertices, 2)
        if frozenset((u, v)) not in seen_h:
            seen_h.add(frozenset((u, v)))
            homologies.append((u, v, round(rng.random(), 3)))
    return build_graph(interactions, homologies, vertices)
