"""
Unit tests for jaccard_graph.similarity.thresholds module.
"""

import pytest

from jaccard_graph.similarity import compute_similarity
from jaccard_graph.similarity.thresholds import (
    default_thresholds,
    percentage_above_thresholds,
)


class TestDefaultThresholds:
    """Tests for default_thresholds function."""

    def test_ten_ascending_thresholds(self):
        """Test thresholds are 0.1 through 1.0."""
        thresholds = default_thresholds()
        assert thresholds == [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
        assert thresholds == sorted(thresholds)


class TestPercentageAboveThresholds:
    """Tests for percentage_above_thresholds function."""

    def test_empty_map(self):
        """Test that an empty map yields 0.0 for every threshold."""
        profile = percentage_above_thresholds({})
        assert [threshold for threshold, _ in profile] == default_thresholds()
        assert all(percentage == 0.0 for _, percentage in profile)

    def test_strictly_greater(self):
        """Test that values equal to a threshold are not counted."""
        profile = dict(percentage_above_thresholds({(0, 1): 0.5, (1, 0): 0.5}))
        assert profile[0.4] == 100.0
        assert profile[0.5] == 0.0

    def test_four_cycle(self, four_cycle_graph):
        """Test that a 4-cycle is 100% above every threshold except 1.0."""
        profile = percentage_above_thresholds(compute_similarity(four_cycle_graph))
        assert len(profile) == 10
        for threshold, percentage in profile[:-1]:
            assert percentage == 100.0
        assert profile[-1] == (1.0, 0.0)

    def test_cycle_with_tail(self, cycle_with_tail_graph):
        """Test the profile on a 4-cycle with a pendant vertex."""
        profile = percentage_above_thresholds(compute_similarity(cycle_with_tail_graph))
        percentages = [percentage for _, percentage in profile]
        assert percentages == [100.0, 100.0, 100.0, 100.0, 50.0, 50.0, 25.0, 25.0, 25.0, 0.0]

    def test_isolated_vertices(self, isolated_graph):
        """Test that a graph without edges yields all-zero percentages."""
        profile = percentage_above_thresholds(compute_similarity(isolated_graph))
        assert [percentage for _, percentage in profile] == [0.0] * 10

    def test_monotonic(self):
        """Test that percentages never increase as the threshold rises."""
        similarities = {(i, i + 100): (i % 11) / 10 for i in range(50)}
        percentages = [p for _, p in percentage_above_thresholds(similarities)]
        assert all(a >= b for a, b in zip(percentages, percentages[1:]))

    def test_custom_thresholds(self):
        """Test that custom thresholds are evaluated in the given order."""
        profile = percentage_above_thresholds(
            {(0, 1): 0.2, (1, 2): 0.6, (2, 3): 0.9, (3, 4): 1.0}, thresholds=[0.0, 0.75]
        )
        assert profile == [(0.0, 100.0), (0.75, pytest.approx(50.0))]
