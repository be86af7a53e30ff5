import logging
from pathlib import Path

from ppi_refine.crossing import CrossingManager
from ppi_refine.graph import EdgeKind, read_dual_graph, trim_edges, write_dual_graph


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root = Path(__file__).parents[1] / "datasets/test"
    print(f"Using data root directory: {root}")

    graph = read_dual_graph(root / "interactions.csv", root / "homologies.csv")
    trim_edges(graph, EdgeKind.HOMOLOGY, 0.5)
    CrossingManager(n_cores=2, max_depth=2).cross(graph)

    write_dual_graph(graph, root / "interactions_crossed.csv", root / "homologies_crossed.csv")
    logging.info(f"Saved crossed graph to {root}")


if __name__ == "__main__":
    main()
