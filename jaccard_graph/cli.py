"""
Common CLI utilities for jaccard_graph scripts.

Provides shared functionality for:
- Logging setup (file + console)
- Standard graph input arguments
- Section headers
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from jaccard_graph.config import get_edge_list_path, get_log_dir


def setup_logging(
    script_name: str,
    write_log_file: bool = False,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up logging for a script.

    Args:
        script_name: Name of the script (for log file naming)
        write_log_file: If True, log to file + console. If False, only console.
        log_dir: Directory for log files (default: get_log_dir())

    Returns:
        Configured logger instance
    """
    if write_log_file:
        log_dir = Path(log_dir) if log_dir else get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{script_name}_{timestamp}.log"

        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(),
            ],
        )
        logger = logging.getLogger(__name__)
        logger.info(f"Log file: {log_file}")
        return logger
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            stream=sys.stdout,
        )
        return logging.getLogger(__name__)


def add_graph_arguments(parser):
    """
    Add standard graph input arguments to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help=f"Edge list file (default: {get_edge_list_path()})",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while scoring vertices",
    )


def print_header(title: str, logger: Optional[logging.Logger] = None):
    """
    Print a standard section header.

    Args:
        title: Title for the section
        logger: Optional logger instance
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info(title)
    logger.info("=" * 70)


# CLI entry points for pyproject.toml [project.scripts]


def run_compute_jaccard_similarity():
    """Entry point for compute-jaccard-similarity command."""
    import subprocess

    script = Path(__file__).parent.parent / "scripts" / "compute_jaccard_similarity.py"
    result = subprocess.run([sys.executable, str(script)] + sys.argv[1:])
    sys.exit(result.returncode)
