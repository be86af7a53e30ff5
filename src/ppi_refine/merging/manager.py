"""Contraction of degenerate vertex sets, serially or one job per component."""

import logging
from concurrent.futures import Future, as_completed

from ..graph.connected_components import find_connected_components
from ..graph.network import DualGraph
from ..utils.pools import create_pool, shutdown_pool, wait_for_result
from .job import MergeJob, find_degenerate_sets
from .models import DegenerateSet, MergeUpdate

logger = logging.getLogger(__name__)


def contract(graph: DualGraph, groups: list[DegenerateSet]) -> list[MergeUpdate]:
    """Collapse each degenerate set onto its first surviving vertex.

    Interaction edges of the other members are re-attached to the
    representative unless it already interacts with that neighbour, in which
    case they are dropped. Homology edges of the other members are removed,
    and so are the members themselves.

    Args:
        graph: Dual graph, mutated in place
        groups: Degenerate sets, applied in the given order

    Returns:
        One record per group that removed at least one vertex
    """
    updates: list[MergeUpdate] = []
    for group in groups:
        # Earlier groups may already have removed some members
        members = [v for v in group if graph.contains_vertex(v)]
        if len(members) < 2:
            continue
        v0, others = members[0], members[1:]
        update = MergeUpdate(v0=v0)

        for vi in others:
            for interaction in graph.interactions(vi):
                a, b = graph.interaction_endpoints(interaction)
                neighbor = b if a == vi else a
                graph.remove_interaction(interaction)
                if neighbor == v0 or graph.is_interacting(v0, neighbor):
                    update.removed_interactions.add(interaction.edge_id)
                else:
                    graph.add_interaction(interaction, v0, neighbor)
                    update.moved_interactions.add(interaction.edge_id)

            for homology in graph.homologies(vi):
                graph.remove_homology(homology)
                update.removed_homologies.add(homology.edge_id)

            graph.remove_vertex(vi)
            update.vertices.add(vi)

        logger.debug(f"Contracted {sorted(update.vertices)} into {v0}")
        updates.append(update)

    return updates


class MergeManager:
    """Finds degenerate sets over the whole graph and contracts them."""

    def merge(self, graph: DualGraph) -> list[MergeUpdate]:
        """Run the merging pass on ``graph``.

        Returns:
            The contractions that were applied
        """
        n_vertices = graph.vertex_count
        groups = self.find_groups(graph)
        updates = contract(graph, groups)
        logger.info(
            f"Merged {n_vertices - graph.vertex_count} vertices in {len(updates)} degenerate sets; "
            f"{graph.vertex_count} vertices remain"
        )
        return updates

    def find_groups(self, graph: DualGraph) -> list[DegenerateSet]:
        return find_degenerate_sets(graph)


class ConcurrentMergeManager(MergeManager):
    """Runs one clique job per connected component on a fixed-size pool.

    Components share no edge of either kind, so the jobs are independent.
    Contraction still happens serially once every job has reported.
    """

    def __init__(self, n_cores: int) -> None:
        self.n_cores = n_cores

    def find_groups(self, graph: DualGraph) -> list[DegenerateSet]:
        # Components without a homology edge have nothing to merge
        components = [
            cc for cc in find_connected_components(graph)
            if any(graph.homology_degree(v) for v in cc)
        ]
        logger.info(f"Submitting {len(components)} components to {self.n_cores} workers")

        groups: list[DegenerateSet] = []
        pool = create_pool(self.n_cores, "merging")
        try:
            futures: dict[Future[list[DegenerateSet]], int] = {}
            for index, cc in enumerate(components, start=1):
                job = MergeJob(graph.subgraph(cc), index)
                futures[pool.submit(job)] = index

            for future in as_completed(futures):
                index = futures[future]
                try:
                    result = wait_for_result(future, f"component {index}")
                except Exception:
                    logger.error(
                        f"Merging job for component {index} failed. Skipping its degenerate sets.",
                        exc_info=True,
                    )
                    continue
                groups.extend(result)
        finally:
            shutdown_pool(pool)

        return sorted(groups)
