"""
Configuration management for jaccard_graph.

Loads environment variables and provides configuration defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Data paths
def get_data_dir() -> Path:
    """Get data directory path (project root / data)."""
    # Go up from jaccard_graph/config.py -> jaccard_graph/ -> project root/
    project_root = Path(__file__).parent.parent
    return project_root / "data"


def get_edge_list_path() -> Path:
    """Get path to the edge list file used as the default graph input."""
    configured = os.getenv("JACCARD_EDGE_LIST", "").strip()
    if configured:
        return Path(configured)
    # Try relative to current working directory first (for scripts)
    cwd_edges = Path("data/edges.txt")
    if cwd_edges.exists():
        return cwd_edges
    # Otherwise use absolute path from package
    return get_data_dir() / "edges.txt"


def get_log_dir() -> Path:
    """Get log directory from environment or default."""
    return Path(os.getenv("JACCARD_LOG_DIR", "logs"))
