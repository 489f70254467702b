"""
Pytest configuration and shared fixtures for jaccard_graph tests.
"""

import pytest

from jaccard_graph.graph import Graph


@pytest.fixture
def four_cycle_graph():
    """4-cycle 0-1-3-2-0: opposite corners share both neighbors."""
    return Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def cycle_with_tail_graph():
    """4-cycle 0-1-3-2-0 with an extra vertex 4 hanging off vertex 3."""
    return Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])


@pytest.fixture
def isolated_graph():
    """Two vertices and no edges."""
    return Graph.from_edges([], vertices=[0, 1])


@pytest.fixture
def write_edge_list(tmp_path):
    """Write edge list text to a temporary file and return its path."""

    def _write(content: str, name: str = "edges.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
