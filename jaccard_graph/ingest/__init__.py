"""
Graph loading utilities.

This module provides functions for:
- Reading edge list files into (u, v) pairs
- Building Graph instances from edge list files
"""

from jaccard_graph.ingest.edge_list import EdgeListError, load_graph, read_edges

__all__ = [
    "EdgeListError",
    "read_edges",
    "load_graph",
]
