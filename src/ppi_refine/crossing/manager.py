"""Concurrent crossing pass over every interaction edge."""

import logging
from concurrent.futures import Future, as_completed

from tqdm import tqdm

from ..graph.network import DualGraph, EdgeId, EdgeKind
from ..utils.pools import create_pool, shutdown_pool, wait_for_result
from .models import InteractionEdgeUpdate
from .search import HomologySearchJob

logger = logging.getLogger(__name__)


class CrossingManager:
    """Updates interaction probabilities with evidence found across homology edges.

    One ``HomologySearchJob`` runs per interaction edge on a fixed-size pool.
    New weights are written back only after every job has reported, so no job
    ever reads a weight changed during the same pass.
    """

    def __init__(self, n_cores: int, max_depth: int) -> None:
        if max_depth < 0:
            raise ValueError(f"Maximum depth must be non-negative, got {max_depth}")
        self.n_cores = n_cores
        self.max_depth = max_depth

    def cross(self, graph: DualGraph) -> list[InteractionEdgeUpdate]:
        """Run the crossing pass and apply the new weights to ``graph``.

        Returns:
            The updates that were applied, ordered by edge id
        """
        edges = graph.interactions()
        logger.info(
            f"Crossing {len(edges)} interactions with depth {self.max_depth} "
            f"on {self.n_cores} workers"
        )
        show_progress = logger.isEnabledFor(logging.INFO)

        new_weights: dict[EdgeId, float] = {}
        updates: list[InteractionEdgeUpdate] = []
        pool = create_pool(self.n_cores, "crossing")
        try:
            futures: dict[Future[InteractionEdgeUpdate], EdgeId] = {
                pool.submit(HomologySearchJob(edge, graph, self.max_depth)): edge.edge_id
                for edge in edges
            }
            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                desc="Crossing",
                unit="edge",
                disable=not show_progress,
            ):
                edge_id = futures[future]
                try:
                    update = wait_for_result(future, f"interaction {edge_id}")
                except Exception:
                    logger.error(
                        f"Crossing job for interaction {edge_id} failed. Leaving its weight unchanged.",
                        exc_info=True,
                    )
                    continue
                new_weights[edge_id] = update.new_weight
                updates.append(update)
        finally:
            shutdown_pool(pool)

        # Every job has reported; now it is safe to mutate
        for edge_id, weight in new_weights.items():
            edge = graph.get_edge(EdgeKind.INTERACTION, edge_id)
            logger.debug(f"Interaction {edge_id}: {edge.weight:.3f} -> {weight:.3f}")
            edge.weight = weight

        n_failed = len(edges) - len(updates)
        logger.info(
            f"Crossing updated {sum(1 for u in updates if u.n_updates)} of {len(edges)} interactions"
            + (f"; {n_failed} jobs failed" if n_failed else "")
        )
        return sorted(updates, key=lambda u: u.edge_id)
