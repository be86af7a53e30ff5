"""Weakly connected components of the combined interaction/homology graph."""

import logging
from collections import defaultdict

from .network import DualGraph, EdgeKind, Vertex

logger = logging.getLogger(__name__)


class UnionFind:
    """Union-Find data structure for computing connected components."""

    def __init__(self) -> None:
        self.parent: dict[Vertex, Vertex] = {}
        self.rank: dict[Vertex, int] = {}

    def add(self, x: Vertex) -> None:
        self.parent.setdefault(x, x)
        self.rank.setdefault(x, 0)

    def find(self, x: Vertex) -> Vertex:
        """Find the root of the set containing x (with path compression)."""
        self.add(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: Vertex, b: Vertex) -> None:
        """Merge the sets containing a and b (with union by rank)."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1

    def get_components(self) -> dict[Vertex, list[Vertex]]:
        """Return all connected components as a dict of root -> members."""
        by_root: dict[Vertex, list[Vertex]] = defaultdict(list)
        for node in self.parent:
            by_root[self.find(node)].append(node)
        return dict(by_root)


def find_connected_components(graph: DualGraph) -> list[frozenset[Vertex]]:
    """Partition the vertices so that no two parts share an edge of either kind.

    Returns:
        Components ordered by their smallest vertex id
    """
    uf = UnionFind()
    for vertex in graph.vertices():
        uf.add(vertex)
    for kind in EdgeKind:
        for edge in graph.edges(kind):
            uf.union(*graph.endpoints(kind, edge))

    components = sorted((frozenset(m) for m in uf.get_components().values()), key=min)
    logger.debug(f"Found {len(components)} connected components over {graph.vertex_count} vertices")
    return components
