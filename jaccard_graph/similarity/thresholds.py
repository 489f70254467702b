"""
Threshold profile: share of pairs whose similarity exceeds each threshold.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from jaccard_graph.constants import EMPTY_SIMILARITY, PERCENT_SCALE, THRESHOLD_STEPS


def default_thresholds() -> List[float]:
    """Evenly spaced thresholds 0.1, 0.2, ..., 1.0 in ascending order."""
    return [step / THRESHOLD_STEPS for step in range(1, THRESHOLD_STEPS + 1)]


def percentage_above_thresholds(
    similarities: Dict[Tuple[int, int], float],
    thresholds: Optional[Sequence[float]] = None,
) -> List[Tuple[float, float]]:
    """
    Compute the percentage of pairs with similarity strictly above each threshold.

    Args:
        similarities: Dictionary mapping (v1, v2) -> similarity score
        thresholds: Thresholds to evaluate (default: default_thresholds())

    Returns:
        List of (threshold, percentage) tuples in threshold order.
        Every percentage is 0.0 when the map is empty.
    """
    if thresholds is None:
        thresholds = default_thresholds()

    scores = np.fromiter(similarities.values(), dtype=np.float64, count=len(similarities))
    total = len(scores)

    profile = []
    for threshold in thresholds:
        if total == 0:
            percentage = EMPTY_SIMILARITY
        else:
            count_above = int(np.count_nonzero(scores > threshold))
            percentage = count_above / total * PERCENT_SCALE
        profile.append((threshold, percentage))

    return profile
