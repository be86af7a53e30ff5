"""Value objects produced by crossing jobs."""

from dataclasses import dataclass

from ..graph.network import EdgeId, Vertex


def noisy_or(p: float, q: float) -> float:
    """Combine two independent probabilities of the same event: ``p + q - p*q``."""
    return p + q - p * q


@dataclass(frozen=True)
class InteractionEdgeUpdate:
    """Result of one crossing job, consumed once by the crossing manager.

    Attributes:
        edge_id: Id of the interaction edge the job was run for.
        interactor_a: First endpoint of that edge.
        interactor_b: Second endpoint of that edge.
        initial_weight: Weight of the edge when the job read it.
        score: Noisy-or accumulation of the homology-mediated evidence.
        n_updates: Number of interaction edges that contributed to ``score``.
    """

    edge_id: EdgeId
    interactor_a: Vertex
    interactor_b: Vertex
    initial_weight: float
    score: float = 0.0
    n_updates: int = 0

    @property
    def new_weight(self) -> float:
        return noisy_or(self.initial_weight, self.score)
