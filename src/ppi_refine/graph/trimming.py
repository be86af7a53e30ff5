"""Threshold-based removal of weighted edges."""

import logging
import math

from .network import DualGraph, EdgeKind

logger = logging.getLogger(__name__)


def trim_edges(
    graph: DualGraph,
    kind: EdgeKind,
    minimum: float,
    maximum: float = math.inf,
) -> int:
    """Remove every edge whose weight is outside ``[minimum, maximum]``.

    Args:
        graph: Dual graph, mutated in place
        kind: Which of the two graphs to trim
        minimum: Edges with weight strictly below this are removed
        maximum: Edges with weight strictly above this are removed

    Returns:
        Number of removed edges
    """
    if minimum > maximum:
        raise ValueError(f"Minimum {minimum} is greater than maximum {maximum}")

    # Snapshot first; the edge table must not change while we scan it
    to_remove = [e for e in graph.edges(kind) if e.weight < minimum or e.weight > maximum]
    for edge in to_remove:
        graph.remove_edge(kind, edge)

    logger.info(
        f"Trimmed {len(to_remove)} {kind.value} edges outside [{minimum}, {maximum}]; "
        f"{graph.edge_count(kind)} remain"
    )
    return len(to_remove)
