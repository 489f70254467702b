"""
Similarity computation utilities.

Provides Jaccard similarity over distance-2 vertex pairs, plus summary
statistics and a threshold profile over the resulting scores.
"""

from jaccard_graph.similarity.jaccard import (
    compute_similarity,
    jaccard_similarity,
    validate_similarity_score,
)
from jaccard_graph.similarity.stats import SimilarityStats, compute_stats
from jaccard_graph.similarity.thresholds import (
    default_thresholds,
    percentage_above_thresholds,
)

__all__ = [
    "compute_similarity",
    "jaccard_similarity",
    "validate_similarity_score",
    "SimilarityStats",
    "compute_stats",
    "default_thresholds",
    "percentage_above_thresholds",
]
