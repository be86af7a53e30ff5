import logging
import time
from dataclasses import dataclass, field

from .config import PipelineParams
from .crossing import CrossingManager, InteractionEdgeUpdate
from .graph import DualGraph, EdgeKind, trim_edges
from .merging import ConcurrentMergeManager, MergeManager, MergeUpdate
from .utils.validation import find_invalid_weights, summarize_graph

logger = logging.getLogger(__name__)


@dataclass
class RefinementResult:
    """Everything a refinement run produced. ``graph`` is the input graph, mutated."""

    graph: DualGraph
    interaction_updates: list[InteractionEdgeUpdate] = field(default_factory=list)
    merges: list[MergeUpdate] = field(default_factory=list)
    timings: dict[str, float] = field(default_factory=dict)
    trimmed: dict[str, int] = field(default_factory=dict)


class RefinementPipeline:
    """
    Orchestrates Trim(tau) -> Cross -> Trim(zeta) -> Merge on a dual graph.
    """

    def __init__(
        self,
        params: PipelineParams | None = None,
        crossing_manager: CrossingManager | None = None,
        merge_manager: MergeManager | None = None,
    ) -> None:
        self.params = params or PipelineParams()
        self.params.validate()
        self.crossing_manager = crossing_manager or CrossingManager(
            n_cores=self.params.n_cores, max_depth=self.params.xi
        )
        if merge_manager is None:
            if self.params.concurrent_merge:
                merge_manager = ConcurrentMergeManager(n_cores=self.params.n_cores)
            else:
                merge_manager = MergeManager()
        self.merge_manager = merge_manager

    def run(self, graph: DualGraph) -> RefinementResult:
        """Execute every pass on ``graph`` in place."""
        logger.info(f"Starting refinement of {graph!r} with {self.params}")
        for kind, edge_id, weight in find_invalid_weights(graph):
            logger.warning(f"{kind.value} edge {edge_id} has weight {weight} outside [0, 1]")

        result = RefinementResult(graph=graph)
        start_time = time.perf_counter()

        self._step_trim(result, "Trim (tau)", self.params.tau)
        if not self.params.no_cross:
            self._step_cross(result)
        self._step_trim(result, "Trim (zeta)", self.params.zeta)
        if not self.params.no_merge:
            self._step_merge(result)

        total_elapsed = time.perf_counter() - start_time
        logger.info(f"Refinement completed in {total_elapsed:.2f} seconds: {summarize_graph(graph)}")
        return result

    def _step_trim(self, result: RefinementResult, step: str, minimum: float) -> None:
        t0 = time.perf_counter()
        result.trimmed[step] = trim_edges(result.graph, EdgeKind.HOMOLOGY, minimum)
        result.timings[step] = time.perf_counter() - t0

    def _step_cross(self, result: RefinementResult) -> None:
        t0 = time.perf_counter()
        result.interaction_updates = self.crossing_manager.cross(result.graph)
        result.timings["Crossing"] = time.perf_counter() - t0

    def _step_merge(self, result: RefinementResult) -> None:
        t0 = time.perf_counter()
        result.merges = self.merge_manager.merge(result.graph)
        result.timings["Merging"] = time.perf_counter() - t0


def format_timings(timings: dict[str, float]) -> str:
    """Render step timings as a fixed-width table."""
    lines = ["=" * 40, f"{'Step':<25} | {'Time (ms)':<10}", "-" * 40]
    total = 0.0
    for step, duration in timings.items():
        lines.append(f"{step:<25} | {duration * 1000:<10.4f}")
        total += duration
    lines += ["-" * 40, f"{'Total Computation':<25} | {total * 1000:<10.4f}", "=" * 40]
    return "\n".join(lines)
