"""Utilities for reading and writing the dual graph as CSV edge lists."""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from .network import DualGraph, EdgeKind, HomologyEdge, InteractionEdge

logger = logging.getLogger(__name__)

EDGE_LIST_HEADER = ["edge_id", "source", "target", "weight"]

EDGE_TYPES = {
    EdgeKind.INTERACTION: InteractionEdge,
    EdgeKind.HOMOLOGY: HomologyEdge,
}


def iter_edge_list(path: Path) -> Iterable[tuple[int, int, int, float]]:
    """Iterate ``(edge_id, source, target, weight)`` rows from an edge-list CSV."""
    with open(path, encoding="utf-8") as f:
        r = csv.DictReader(f)
        for row in r:
            yield int(row["edge_id"]), int(row["source"]), int(row["target"]), float(row["weight"])


def write_edge_list(path: Path, graph: DualGraph, kind: EdgeKind) -> None:
    """Write one of the two graphs as an edge-list CSV, ordered by edge id."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(EDGE_LIST_HEADER)
        for edge in graph.edges(kind):
            source, target = graph.endpoints(kind, edge)
            w.writerow([edge.edge_id, source, target, repr(edge.weight)])


def read_dual_graph(interaction_csv: Path, homology_csv: Path | None = None) -> DualGraph:
    """Build a dual graph from an interaction edge list and an optional homology one.

    Args:
        interaction_csv: Edge list of interaction edges (weight = probability)
        homology_csv: Edge list of homology edges (weight = score)

    Returns:
        The populated dual graph
    """
    graph = DualGraph()
    sources = [(EdgeKind.INTERACTION, interaction_csv)]
    if homology_csv is not None:
        sources.append((EdgeKind.HOMOLOGY, homology_csv))

    for kind, path in sources:
        edge_type = EDGE_TYPES[kind]
        for edge_id, source, target, weight in iter_edge_list(path):
            graph.add_edge(kind, edge_type(edge_id=edge_id, weight=weight), source, target)

    logger.info(f"Loaded {graph!r} from {interaction_csv}")
    return graph


def write_dual_graph(graph: DualGraph, interaction_csv: Path, homology_csv: Path) -> None:
    """Write both graphs of ``graph`` as edge-list CSVs."""
    write_edge_list(interaction_csv, graph, EdgeKind.INTERACTION)
    write_edge_list(homology_csv, graph, EdgeKind.HOMOLOGY)
    logger.info(f"Wrote {graph!r} to {interaction_csv} and {homology_csv}")
