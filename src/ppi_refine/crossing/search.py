"""Homology-mediated evidence search for a single interaction edge."""

import logging
import math
from collections import deque

from ..graph.network import DualGraph, InteractionEdge, Vertex
from .models import InteractionEdgeUpdate, noisy_or

logger = logging.getLogger(__name__)


def log_weight(weight: float) -> float:
    """Natural log of an edge weight, with ``log(0) = -inf``."""
    return math.log(weight) if weight > 0 else -math.inf


def non_traversal_probability(distance: float) -> float:
    """Probability that the path behind a log-probability ``distance`` is not taken."""
    return 1.0 - math.exp(distance)


def find_distances(graph: DualGraph, root: Vertex, max_depth: int) -> dict[Vertex, float]:
    """Log-probability of reaching each vertex from ``root`` across homology edges.

    Breadth-first over the homology graph with neighbours taken in ascending
    vertex id order. Each vertex is discovered once; its value is the sum of
    the log weights along the breadth-first tree, which is the path with the
    fewest hops and not necessarily the most probable one.

    Args:
        graph: Dual graph whose homology edges are traversed
        root: Start vertex, recorded with distance 0 (log 1)
        max_depth: Maximum number of hops from the root

    Returns:
        Mapping of every vertex within ``max_depth`` hops to its log-probability
    """
    distances: dict[Vertex, float] = {root: 0.0}
    hops: dict[Vertex, int] = {root: 0}
    queue: deque[Vertex] = deque([root])

    while queue:
        vertex = queue.popleft()
        hop = hops[vertex]
        if hop >= max_depth:
            continue
        for neighbor in graph.homology_neighbors(vertex):
            if neighbor in hops:
                continue
            edge = graph.find_homology(vertex, neighbor)
            hops[neighbor] = hop + 1
            distances[neighbor] = distances[vertex] + log_weight(edge.weight)
            queue.append(neighbor)

    return distances


class HomologySearchJob:
    """Computes the evidence update for one interaction edge.

    The job only reads the graph, so any number of jobs can run concurrently
    as long as nothing mutates the graph meanwhile.
    """

    def __init__(self, root: InteractionEdge, graph: DualGraph, max_depth: int) -> None:
        self.root = root
        self.graph = graph
        self.max_depth = max_depth
        self.root_a, self.root_b = graph.interaction_endpoints(root)

    def __call__(self) -> InteractionEdgeUpdate:
        distances_a = find_distances(self.graph, self.root_a, self.max_depth)
        distances_b = find_distances(self.graph, self.root_b, self.max_depth)

        score = 0.0
        n_updates = 0
        for a in sorted(distances_a):
            for b in self.graph.interaction_neighbors(a):
                if b not in distances_b:
                    continue
                interaction = self.graph.find_interaction(a, b)
                if interaction.edge_id == self.root.edge_id:
                    continue
                score_a = non_traversal_probability(distances_a[a])
                score_b = non_traversal_probability(distances_b[b])
                contribution = interaction.weight * (1 - score_a - score_b + score_a * score_b)
                logger.debug(
                    f"Interaction {self.root.edge_id} ({self.root_a}, {self.root_b}) gains "
                    f"{contribution:.3f} from interaction {interaction.edge_id} ({a}, {b})"
                )
                score = noisy_or(score, contribution)
                n_updates += 1

        return InteractionEdgeUpdate(
            edge_id=self.root.edge_id,
            interactor_a=self.root_a,
            interactor_b=self.root_b,
            initial_weight=self.root.weight,
            score=score,
            n_updates=n_updates,
        )
