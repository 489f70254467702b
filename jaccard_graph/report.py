"""
Presentation helpers for similarity results.

Turns similarity maps and threshold profiles into DataFrames and writes a
human-readable summary to a logger.
"""

import logging
from typing import Dict, List, Optional, Tuple

import pandas as pd

from jaccard_graph.constants import DEFAULT_TOP_N
from jaccard_graph.similarity.stats import SimilarityStats

logger = logging.getLogger(__name__)

SIMILARITY_COLUMNS = ["vertex1", "vertex2", "similarity"]
PROFILE_COLUMNS = ["threshold", "percentage"]


def similarities_to_dataframe(similarities: Dict[Tuple[int, int], float]) -> pd.DataFrame:
    """
    Convert a similarity map into a DataFrame.

    Args:
        similarities: Dictionary mapping (v1, v2) -> similarity score

    Returns:
        DataFrame with columns vertex1, vertex2, similarity, sorted by
        similarity descending and then by vertex ids
    """
    rows = [(v1, v2, score) for (v1, v2), score in similarities.items()]
    df = pd.DataFrame(rows, columns=SIMILARITY_COLUMNS)
    if df.empty:
        return df
    df = df.sort_values(
        ["similarity", "vertex1", "vertex2"], ascending=[False, True, True]
    ).reset_index(drop=True)
    return df


def threshold_profile_to_dataframe(profile: List[Tuple[float, float]]) -> pd.DataFrame:
    """Convert a threshold profile into a DataFrame with threshold/percentage columns."""
    return pd.DataFrame(profile, columns=PROFILE_COLUMNS)


def log_report(
    similarities: Dict[Tuple[int, int], float],
    stats: SimilarityStats,
    profile: List[Tuple[float, float]],
    logger: Optional[logging.Logger] = None,
    top_n: int = DEFAULT_TOP_N,
) -> None:
    """
    Log a summary of similarity results.

    Args:
        similarities: Dictionary mapping (v1, v2) -> similarity score
        stats: Result of compute_stats()
        profile: Result of percentage_above_thresholds()
        logger: Optional logger instance
        top_n: Maximum number of max-similarity pairs to list
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info("=" * 70)
    logger.info("Jaccard Similarity (distance-2 pairs)")
    logger.info("=" * 70)
    logger.info(f"Scored pairs: {len(similarities)}")
    logger.info(f"Mean similarity: {stats.mean:.4f}")
    logger.info(f"Max similarity: {stats.max:.4f}")

    if stats.max_pairs:
        logger.info(f"Pairs with max similarity: {len(stats.max_pairs)}")
        for v1, v2 in stats.max_pairs[:top_n]:
            logger.info(f"  ({v1}, {v2})")
        if len(stats.max_pairs) > top_n:
            logger.info(f"  ... and {len(stats.max_pairs) - top_n} more")

    logger.info("")
    logger.info("Threshold | % of pairs above")
    logger.info("-" * 30)
    for threshold, percentage in profile:
        logger.info(f"  {threshold:.1f}     | {percentage:>6.2f}%")
