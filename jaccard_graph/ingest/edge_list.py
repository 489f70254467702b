"""
Edge list readers.

This module reads plain-text edge lists (one ``u v`` pair per line) and
returns structured data that can be turned into a Graph.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from jaccard_graph.constants import EDGE_COMMENT_PREFIX
from jaccard_graph.graph import Graph

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[\s,]+")


class EdgeListError(ValueError):
    """Raised when an edge list file contains a line that cannot be parsed."""

    def __init__(self, path: Path, line_number: int, line: str, reason: str):
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: {reason}: {line!r}")


def _parse_vertex(token: str) -> Optional[int]:
    # Plain ASCII decimal digits only (rejects signs, underscores, other scripts)
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def read_edges(path: Union[str, Path]) -> List[Tuple[int, int]]:
    """
    Read (u, v) pairs from an edge list file.

    Tokens may be separated by whitespace or commas. Blank lines and comment
    lines are skipped, as is a single-integer header (vertex count) on the
    first data line. Tokens after the first two on a line are ignored.

    Args:
        path: Path to the edge list file

    Returns:
        List of (u, v) integer tuples in file order

    Raises:
        FileNotFoundError: If the file does not exist
        EdgeListError: If a line is not valid UTF-8, holds a vertex id that is
            not a non-negative decimal integer, or holds a single token
            anywhere but the first data line
    """
    path = Path(path)
    edges = []
    first_data_line = True

    with open(path, "rb") as f:
        for line_number, raw_bytes in enumerate(f, start=1):
            try:
                line = raw_bytes.decode("utf-8-sig").strip()
            except UnicodeDecodeError as e:
                shown = raw_bytes.decode("utf-8", errors="replace").strip()
                raise EdgeListError(path, line_number, shown, "not valid UTF-8") from e

            if not line or line.startswith(EDGE_COMMENT_PREFIX):
                continue

            tokens = [token for token in _SEPARATOR.split(line) if token]
            if len(tokens) == 1:
                if not first_data_line:
                    raise EdgeListError(path, line_number, line, "expected two vertex ids")
                if _parse_vertex(tokens[0]) is None:
                    raise EdgeListError(path, line_number, line, "invalid header")
                first_data_line = False
                continue
            first_data_line = False

            u = _parse_vertex(tokens[0])
            v = _parse_vertex(tokens[1])
            if u is None or v is None:
                raise EdgeListError(
                    path, line_number, line, "vertex ids must be non-negative integers"
                )
            edges.append((u, v))

    return edges


def load_graph(path: Union[str, Path]) -> Graph:
    """
    Load an undirected Graph from an edge list file.

    Args:
        path: Path to the edge list file

    Returns:
        Graph built from every edge in the file
    """
    edges = read_edges(path)
    graph = Graph.from_edges(edges)
    logger.info(
        f"Loaded graph from {path}: {graph.vertex_count} vertices, {graph.edge_count} edges",
        extra={"vertices": graph.vertex_count, "edges": graph.edge_count},
    )
    return graph
