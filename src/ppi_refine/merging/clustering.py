"""Clustering vertices by bounded reachability from a set of roots."""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from typing import Any

import networkx as nx

logger = logging.getLogger(__name__)

EdgeWeighter = Callable[[Any], float]


class DistanceClusterer(ABC):
    """Depth-first reachability whose extent is decided by a running statistic.

    Subclasses keep the statistic up to date through ``visit`` and ``unvisit``.
    ``visit`` is called when the search steps onto a vertex and ``unvisit``
    when it steps back off it, so the calls are matched in push/pop order.
    ``is_within_range`` is consulted right after ``visit``; a vertex out of
    range is neither added nor expanded.

    Edges are read from the ``edge`` attribute of ``graph``.
    """

    def __init__(self, edge_weight: EdgeWeighter) -> None:
        self._edge_weight = edge_weight

    def get_edge_weight(self, edge: Any) -> float:
        return self._edge_weight(edge)

    def transform(
        self, graph: nx.Graph, roots: Iterable[Hashable] | None = None
    ) -> dict[Hashable, set[Hashable]]:
        """Map each root to the set of vertices within range of it, root included.

        Args:
            graph: Undirected graph whose edges carry an ``edge`` attribute
            roots: Start vertices; every vertex of ``graph`` if omitted
        """
        if roots is None:
            roots = sorted(graph.nodes)
        return {root: self._reachable_from(graph, root) for root in roots}

    def _reachable_from(self, graph: nx.Graph, root: Hashable) -> set[Hashable]:
        reachable = {root}
        stack = [(root, None, iter(sorted(graph.adj[root])))]
        while stack:
            vertex, edge, neighbors = stack[-1]
            neighbor = next(neighbors, None)
            if neighbor is None:
                stack.pop()
                if edge is not None:
                    self.unvisit(vertex, edge)
                continue
            if neighbor in reachable:
                continue

            next_edge = graph.edges[vertex, neighbor]["edge"]
            self.visit(neighbor, next_edge)
            if self.is_within_range(root, neighbor):
                reachable.add(neighbor)
                stack.append((neighbor, next_edge, iter(sorted(graph.adj[neighbor]))))
            else:
                self.unvisit(neighbor, next_edge)

        return reachable

    @abstractmethod
    def is_within_range(self, root: Hashable, vertex: Hashable) -> bool: ...

    @abstractmethod
    def visit(self, vertex: Hashable, edge: Any) -> None: ...

    @abstractmethod
    def unvisit(self, vertex: Hashable, edge: Any) -> None: ...


class ProbabilisticDistanceClusterer(DistanceClusterer):
    """Accepts vertices while ``1 - exp(log_probability) >= min_probability``.

    ``log_probability`` is the sum of ``log(1 - weight)`` over the edges of the
    current search path.
    """

    def __init__(self, edge_weight: EdgeWeighter, min_probability: float) -> None:
        super().__init__(edge_weight)
        self.min_probability = min_probability
        self._terms: list[float] = []

    @property
    def log_probability(self) -> float:
        return math.fsum(self._terms)

    def is_within_range(self, root: Hashable, vertex: Hashable) -> bool:
        return 1 - math.exp(self.log_probability) >= self.min_probability

    def visit(self, vertex: Hashable, edge: Any) -> None:
        complement = 1 - self.get_edge_weight(edge)
        self._terms.append(math.log(complement) if complement > 0 else -math.inf)

    def unvisit(self, vertex: Hashable, edge: Any) -> None:
        self._terms.pop()
