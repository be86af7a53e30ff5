import argparse
import logging
import sys
from pathlib import Path

from ppi_refine import PipelineParams, RefinementPipeline
from ppi_refine.graph import read_dual_graph, write_dual_graph
from ppi_refine.pipeline import format_timings
from ppi_refine.report import write_report


def main():
    parser = argparse.ArgumentParser(description="Refine an interaction network with homology evidence.")
    parser.add_argument("interactions", type=Path, help="Interaction edge list CSV")
    parser.add_argument("homologies", type=Path, help="Homology edge list CSV")
    parser.add_argument("output_dir", type=Path, help="Directory for the refined edge lists")
    parser.add_argument("--tau", type=float, help="Homology threshold before crossing (default: 0.5)")
    parser.add_argument("--zeta", type=float, help="Homology threshold before merging (default: 0.7)")
    parser.add_argument("--xi", type=int, help="Maximum homology hops during crossing (default: 2)")
    parser.add_argument("--n_cores", type=int, help="Worker threads (default: cores - 1)")
    parser.add_argument("--no_cross", action="store_true", help="Skip the crossing pass")
    parser.add_argument("--no_merge", action="store_true", help="Skip the merging pass")
    parser.add_argument("--report", action="store_true", help="Write TSV tables of the run")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(__name__)

    try:
        params = PipelineParams.from_env(
            tau=args.tau,
            zeta=args.zeta,
            xi=args.xi,
            n_cores=args.n_cores,
            no_cross=args.no_cross or None,
            no_merge=args.no_merge or None,
        )
        graph = read_dual_graph(args.interactions, args.homologies)
        result = RefinementPipeline(params).run(graph)
        write_dual_graph(
            graph,
            args.output_dir / "interactions_refined.csv",
            args.output_dir / "homologies_refined.csv",
        )
        if args.report:
            write_report(result, args.output_dir / "report")
        print(format_timings(result.timings))
    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
