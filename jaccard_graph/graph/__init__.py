"""
In-memory graph structures.

Provides the undirected adjacency-list graph consumed by the similarity code.
"""

from jaccard_graph.graph.adjacency import Graph

__all__ = ["Graph"]
