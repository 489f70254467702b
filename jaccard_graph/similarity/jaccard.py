"""
Jaccard similarity between vertices at shortest-path distance 2.

Two vertices at distance 2 are not adjacent but share at least one neighbor;
their score is the Jaccard index of their neighbor sets.
"""

import logging
from typing import AbstractSet, Dict, FrozenSet, Tuple

import numpy as np
from tqdm import tqdm

from jaccard_graph.constants import EMPTY_SIMILARITY, SIMILARITY_DISTANCE
from jaccard_graph.graph import Graph

logger = logging.getLogger(__name__)

SimilarityMap = Dict[Tuple[int, int], float]


def jaccard_similarity(a: AbstractSet[int], b: AbstractSet[int]) -> float:
    """
    Compute |a & b| / |a | b|.

    Args:
        a: First set
        b: Second set

    Returns:
        Ratio in [0, 1]; 0.0 when both sets are empty
    """
    union_size = len(a | b)
    if union_size == 0:
        return EMPTY_SIMILARITY
    return len(a & b) / union_size


def validate_similarity_score(score: float) -> bool:
    """
    Validate a similarity score is in valid range.

    Args:
        score: Similarity score to validate

    Returns:
        True if finite and in [0, 1], False otherwise
    """
    if score is None:
        return False
    if not isinstance(score, (int, float)):
        return False
    if not np.isfinite(score):
        return False
    if score < 0.0 or score > 1.0:
        logger.warning(f"Similarity score out of range: {score}")
        return False
    return True


def compute_similarity(graph: Graph, progress: bool = False) -> SimilarityMap:
    """
    Compute Jaccard similarity for every ordered pair at distance 2.

    Both (v1, v2) and (v2, v1) are stored; their values are equal. Vertices
    without an adjacency entry are treated as having no neighbors.

    Args:
        graph: Graph to score
        progress: If True, show a progress bar over source vertices

    Returns:
        Dictionary mapping (v1, v2) -> similarity score
    """
    similarities: SimilarityMap = {}
    neighbor_sets: Dict[int, FrozenSet[int]] = {}

    def neighbor_set(vertex: int) -> FrozenSet[int]:
        if vertex not in neighbor_sets:
            neighbor_sets[vertex] = frozenset(graph.neighbors(vertex))
        return neighbor_sets[vertex]

    vertices = sorted(graph.vertices())
    logger.info(
        f"Computing distance-{SIMILARITY_DISTANCE} Jaccard similarity "
        f"for {len(vertices)} vertices..."
    )

    for v1 in tqdm(vertices, desc="Scoring vertices", unit="vertex", disable=not progress):
        distances = graph.shortest_paths_from(v1)
        for v2, distance in distances.items():
            # Only vertices with an adjacency entry are scored as targets
            if v2 == v1 or distance != SIMILARITY_DISTANCE or v2 not in graph:
                continue
            similarities[(v1, v2)] = jaccard_similarity(neighbor_set(v1), neighbor_set(v2))

    logger.info(f"Scored {len(similarities)} vertex pairs", extra={"pairs": len(similarities)})
    return similarities
