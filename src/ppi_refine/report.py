"""Tabular summaries of a refinement run."""

import logging
from pathlib import Path

import pandas as pd

from .crossing import InteractionEdgeUpdate
from .merging import MergeUpdate
from .pipeline import RefinementResult

logger = logging.getLogger(__name__)

UPDATE_COLUMNS = [
    "edge_id",
    "interactor_a",
    "interactor_b",
    "initial_weight",
    "score",
    "new_weight",
    "n_updates",
]
MERGE_COLUMNS = ["v0", "vertex", "n_moved_interactions", "n_removed_interactions", "n_removed_homologies"]


def updates_frame(updates: list[InteractionEdgeUpdate]) -> pd.DataFrame:
    """One row per crossing update."""
    rows = [
        {
            "edge_id": u.edge_id,
            "interactor_a": u.interactor_a,
            "interactor_b": u.interactor_b,
            "initial_weight": u.initial_weight,
            "score": u.score,
            "new_weight": u.new_weight,
            "n_updates": u.n_updates,
        }
        for u in updates
    ]
    return pd.DataFrame(rows, columns=UPDATE_COLUMNS)


def merges_frame(merges: list[MergeUpdate]) -> pd.DataFrame:
    """One row per vertex removed by merging, with its representative."""
    rows = [
        {
            "v0": m.v0,
            "vertex": v,
            "n_moved_interactions": len(m.moved_interactions),
            "n_removed_interactions": len(m.removed_interactions),
            "n_removed_homologies": len(m.removed_homologies),
        }
        for m in merges
        for v in sorted(m.vertices)
    ]
    return pd.DataFrame(rows, columns=MERGE_COLUMNS)


def write_report(result: RefinementResult, output_dir: Path) -> dict[str, Path]:
    """Write updates, merges and timings as TSV files under ``output_dir``.

    Returns:
        Mapping of table name to written path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = {
        "interaction_updates": output_dir / "interaction_updates.tsv",
        "merges": output_dir / "merges.tsv",
        "timings": output_dir / "timings.tsv",
    }
    updates_frame(result.interaction_updates).to_csv(paths["interaction_updates"], sep="\t", index=False)
    merges_frame(result.merges).to_csv(paths["merges"], sep="\t", index=False)
    timings = pd.DataFrame(
        {
            "step": list(result.timings),
            "seconds": list(result.timings.values()),
            "removed_edges": [result.trimmed.get(step) for step in result.timings],
        }
    )
    timings.to_csv(paths["timings"], sep="\t", index=False)

    logger.info(f"Report written to {output_dir}")
    return paths
