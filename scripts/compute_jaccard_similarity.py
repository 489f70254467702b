#!/usr/bin/env python3
"""
Compute Jaccard similarity for vertex pairs at shortest-path distance 2.

Loads an undirected graph from an edge list, scores every ordered pair of
vertices that share a neighbor without being adjacent, and reports:
- Mean and maximum similarity, with the pairs tied at the maximum
- Percentage of pairs above thresholds 0.1, 0.2, ..., 1.0

Optionally writes every scored pair to CSV.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from jaccard_graph.cli import add_graph_arguments, print_header, setup_logging
from jaccard_graph.config import get_edge_list_path, get_log_dir
from jaccard_graph.constants import DEFAULT_TOP_N
from jaccard_graph.ingest import EdgeListError, load_graph
from jaccard_graph.logging import setup_structured_logging
from jaccard_graph.report import log_report, similarities_to_dataframe
from jaccard_graph.similarity import (
    compute_similarity,
    compute_stats,
    percentage_above_thresholds,
)

SCRIPT_NAME = "compute_jaccard_similarity"


def main():
    """Run the Jaccard similarity computation script."""
    parser = argparse.ArgumentParser(
        description="Compute Jaccard similarity for vertex pairs at distance 2"
    )
    add_graph_arguments(parser)
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Max-similarity pairs to list (default: {DEFAULT_TOP_N})",
    )
    parser.add_argument("--output", "-o", type=Path, help="Write all scored pairs to this CSV")
    parser.add_argument("--log-file", action="store_true", help="Also log to a file")
    parser.add_argument(
        "--json-logs", action="store_true", help="Write the log file as JSON lines"
    )

    args = parser.parse_args()

    if args.json_logs:
        # Configure the package logger so library modules share the handlers
        logger = setup_structured_logging("jaccard_graph", log_dir=get_log_dir(), json_output=True)
    else:
        logger = setup_logging(SCRIPT_NAME, write_log_file=args.log_file)

    input_path = args.input or get_edge_list_path()

    print_header("Jaccard Similarity Computation", logger)

    start = time.time()
    try:
        graph = load_graph(input_path)
    except FileNotFoundError:
        logger.error(f"✗ Edge list not found: {input_path}")
        sys.exit(1)
    except EdgeListError as e:
        logger.error(f"✗ Invalid edge list: {e}")
        sys.exit(1)

    similarities = compute_similarity(graph, progress=args.progress)
    stats = compute_stats(similarities)
    profile = percentage_above_thresholds(similarities)
    duration_ms = int((time.time() - start) * 1000)

    log_report(similarities, stats, profile, logger=logger, top_n=args.top)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        similarities_to_dataframe(similarities).to_csv(args.output, index=False)
        logger.info(f"Wrote {len(similarities)} pairs to {args.output}")

    logger.info(
        f"✓ Complete in {duration_ms} ms",
        extra={"script": SCRIPT_NAME, "pairs": len(similarities), "duration_ms": duration_ms},
    )


if __name__ == "__main__":
    main()
