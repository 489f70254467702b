"""
Summary statistics over a similarity map.
"""

from typing import Dict, List, NamedTuple, Tuple

from jaccard_graph.constants import EMPTY_SIMILARITY


class SimilarityStats(NamedTuple):
    """Mean and maximum similarity, with every pair that attains the maximum."""

    mean: float
    max: float
    max_pairs: List[Tuple[int, int]]


def compute_stats(similarities: Dict[Tuple[int, int], float]) -> SimilarityStats:
    """
    Compute mean, maximum and the pairs tied at the maximum.

    Single pass: a strictly greater value resets the tied pairs, an exactly
    equal value is appended to them.

    Args:
        similarities: Dictionary mapping (v1, v2) -> similarity score

    Returns:
        SimilarityStats; mean and max are 0.0 and max_pairs is empty for an empty map
    """
    total_similarity = 0.0
    max_similarity = EMPTY_SIMILARITY
    max_pairs: List[Tuple[int, int]] = []

    for pair, similarity in similarities.items():
        total_similarity += similarity

        if similarity > max_similarity:
            max_similarity = similarity
            max_pairs = [pair]
        elif similarity == max_similarity:
            max_pairs.append(pair)

    if similarities:
        mean_similarity = total_similarity / len(similarities)
    else:
        mean_similarity = EMPTY_SIMILARITY

    return SimilarityStats(mean=mean_similarity, max=max_similarity, max_pairs=max_pairs)
