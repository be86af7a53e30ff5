"""Finding degenerate sets: homologous vertices with identical interaction partners."""

import hashlib
import logging
from collections import defaultdict

from ..graph.network import DualGraph, Vertex
from .cliques import find_maximal_cliques
from .models import DegenerateSet

logger = logging.getLogger(__name__)


def interaction_signature(graph: DualGraph, vertex: Vertex) -> str:
    """MD5 hex digest of the ascending interaction-neighbour ids of ``vertex``."""
    text = "".join(f"{neighbor}," for neighbor in graph.interaction_neighbors(vertex))
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def find_degenerate_sets(graph: DualGraph) -> list[DegenerateSet]:
    """Group the members of each homology clique by interaction signature.

    Every returned set has at least two vertices, all pairwise homologous and
    with the same interaction neighbours. Each set is sorted so its first
    element is the representative.

    Returns:
        Distinct degenerate sets in ascending order
    """
    cliques = find_maximal_cliques(graph.homology_view())

    signatures: dict[Vertex, str] = {}
    groups: set[DegenerateSet] = set()
    for clique in cliques:
        if len(clique) < 2:
            continue
        by_signature: dict[str, list[Vertex]] = defaultdict(list)
        for vertex in clique:
            if vertex not in signatures:
                signatures[vertex] = interaction_signature(graph, vertex)
            by_signature[signatures[vertex]].append(vertex)
        for members in by_signature.values():
            if len(members) > 1:
                groups.add(tuple(sorted(members)))

    return sorted(groups)


class MergeJob:
    """Finds the degenerate sets of one connected component."""

    def __init__(self, graph: DualGraph, index: int = 0) -> None:
        self.graph = graph
        self.index = index

    def __call__(self) -> list[DegenerateSet]:
        groups = find_degenerate_sets(self.graph)
        logger.debug(f"Component {self.index}: {len(groups)} degenerate sets")
        return groups
