"""
Jaccard Graph - neighbor-overlap similarity for undirected graphs.

This package provides utilities for:
- Loading undirected graphs from edge list files
- Computing Jaccard similarity for vertex pairs at shortest-path distance 2
- Summarizing scores (mean, maximum, tied maximum pairs)
- Profiling the share of pairs above evenly spaced thresholds
"""

__version__ = "0.1.0"

# Re-export commonly used items
from jaccard_graph.constants import (
    SIMILARITY_DISTANCE,
    THRESHOLD_STEPS,
)
from jaccard_graph.graph import Graph
from jaccard_graph.ingest import EdgeListError, load_graph
from jaccard_graph.similarity import (
    SimilarityStats,
    compute_similarity,
    compute_stats,
    percentage_above_thresholds,
)

__all__ = [
    "__version__",
    # Constants
    "SIMILARITY_DISTANCE",
    "THRESHOLD_STEPS",
    # Graph
    "Graph",
    "EdgeListError",
    "load_graph",
    # Similarity
    "SimilarityStats",
    "compute_similarity",
    "compute_stats",
    "percentage_above_thresholds",
]
