import logging
from pathlib import Path

from ppi_refine.graph import EdgeKind, read_dual_graph, trim_edges, write_dual_graph
from ppi_refine.merging import ConcurrentMergeManager


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root = Path(__file__).parents[1] / "datasets/test"
    print(f"Using data root directory: {root}")

    graph = read_dual_graph(root / "interactions_crossed.csv", root / "homologies_crossed.csv")
    trim_edges(graph, EdgeKind.HOMOLOGY, 0.7)
    merges = ConcurrentMergeManager(n_cores=2).merge(graph)

    write_dual_graph(graph, root / "interactions_merged.csv", root / "homologies_merged.csv")
    logging.info(f"Applied {len(merges)} merges; saved merged graph to {root}")


if __name__ == "__main__":
    main()
