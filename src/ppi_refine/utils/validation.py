from ..graph.network import DualGraph, EdgeKind


def find_invalid_weights(graph: DualGraph) -> list[tuple[EdgeKind, int, float]]:
    """Return ``(kind, edge_id, weight)`` for every edge whose weight is not in [0, 1]."""
    invalid = []
    for kind in EdgeKind:
        for edge in graph.edges(kind):
            if not 0.0 <= edge.weight <= 1.0:
                invalid.append((kind, edge.edge_id, edge.weight))
    return invalid


def summarize_graph(graph: DualGraph) -> dict[str, int]:
    """Vertex and edge counts, plus vertices with no edge of either kind."""
    isolated = sum(
        1
        for v in graph.vertices()
        if graph.interaction_degree(v) == 0 and graph.homology_degree(v) == 0
    )
    return {
        "vertices": graph.vertex_count,
        "interactions": graph.interaction_count,
        "homologies": graph.homology_count,
        "isolated": isolated,
    }
