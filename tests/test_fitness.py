"""
Unit tests for fitness selection utilities.

Tests cover:
- most_fit / fittest_index correctness and tie-breaking
- above_average filtering
- summarize statistics
- Empty candidate handling

Author: chromosomes maintainers
License: MIT
"""

import pytest

from chromosomes.exceptions import EmptyCandidateSetError
from chromosomes.genome.encoding import builder_for
from chromosomes.genome.fitness import (
    above_average,
    fittest_index,
    most_fit,
    summarize,
)


@pytest.fixture
def x_candidates(x_builder):
    """Three chromosomes with X = 0x10, 0x7F, 0xFF (in a shuffled order)."""
    return [
        x_builder.build({"X": 0x7F}),
        x_builder.build({"X": 0xFF}),
        x_builder.build({"X": 0x10}),
    ]


# ============================================================================
# Most Fit Tests
# ============================================================================

class TestMostFit:
    """Test single-winner selection."""

    def test_most_fit_returns_maximum(self, x_candidates, x_fitness):
        """Test the candidate with the highest fitness wins."""
        winner = most_fit(x_fitness, x_candidates)
        assert winner.get("X") == 0xFF

    def test_fittest_index(self, x_candidates, x_fitness):
        """Test fittest_index reports position and score."""
        assert fittest_index(x_fitness, x_candidates) == (1, 255.0)

    def test_ties_keep_earliest(self, x_builder):
        """Test the earliest candidate wins a tie."""
        first = x_builder.build({"X": 3})
        second = x_builder.build({"X": 3})
        assert most_fit(lambda c: 1.0, [first, second]) is first

    def test_negative_fitness(self, x_candidates):
        """Test selection works when every score is negative."""
        winner = most_fit(lambda c: -float(c.get("X")), x_candidates)
        assert winner.get("X") == 0x10

    def test_negative_infinity_fitness(self, x_candidates):
        """Test an all -inf pool still yields the first candidate."""
        assert most_fit(lambda c: float("-inf"), x_candidates) is x_candidates[0]

    def test_nan_first_candidate_does_not_win(self, x_builder):
        """Test a NaN score never beats a real score, wherever it appears."""
        broken = x_builder.build({"X": 1})
        healthy = x_builder.build({"X": 200})

        def fitness(c):
            return float("nan") if c is broken else float(c.get("X"))

        assert most_fit(fitness, [broken, healthy]) is healthy
        assert most_fit(fitness, [healthy, broken]) is healthy
        assert fittest_index(fitness, [broken, healthy]) == (1, 200.0)

    def test_all_nan_yields_first(self, x_candidates):
        """Test an all-NaN pool still yields the first candidate."""
        assert most_fit(lambda c: float("nan"), x_candidates) is x_candidates[0]

    def test_empty_candidates(self, x_fitness):
        """Test selecting from nothing fails."""
        with pytest.raises(EmptyCandidateSetError):
            most_fit(x_fitness, [])
        with pytest.raises(ValueError):
            fittest_index(x_fitness, [])

    def test_evaluates_each_candidate_once(self, x_candidates):
        """Test the fitness function is called once per candidate."""
        calls = []

        def fitness(c):
            calls.append(c)
            return float(c.get("X"))

        most_fit(fitness, x_candidates)
        assert len(calls) == len(x_candidates)


# ============================================================================
# Above Average Tests
# ============================================================================

class TestAboveAverage:
    """Test above-average filtering."""

    def test_above_average_preserves_order(self, x_builder, x_fitness):
        """Test survivors keep their original order."""
        values = [200, 10, 150, 20, 250, 30]
        pool = [x_builder.build({"X": v}) for v in values]
        # mean = 110
        survivors = above_average(x_fitness, pool)
        assert [c.get("X") for c in survivors] == [200, 150, 250]

    def test_above_average_is_strict(self, x_builder, x_fitness):
        """Test a candidate equal to the mean is excluded."""
        pool = [x_builder.build({"X": v}) for v in (10, 20, 30)]
        assert [c.get("X") for c in above_average(x_fitness, pool)] == [30]

    def test_all_equal_yields_empty(self, x_builder, x_fitness):
        """Test identical fitness leaves nobody above average."""
        pool = [x_builder.build({"X": 42}) for _ in range(5)]
        assert above_average(x_fitness, pool) == []

    def test_empty_input(self, x_fitness):
        """Test an empty pool yields an empty list."""
        assert above_average(x_fitness, []) == []

    def test_double_filter_narrows(self):
        """Test applying the filter twice keeps a subset of the first pass."""
        builder = builder_for("a", "b", seed=17)
        pool = [builder.build_random() for _ in range(40)]

        def fitness(c):
            return float(c.get("a") + c.get("b"))

        once = above_average(fitness, pool)
        twice = above_average(fitness, once)
        assert 0 < len(twice) < len(once) < len(pool)
        assert all(c in once for c in twice)


# ============================================================================
# Summary Tests
# ============================================================================

class TestSummarize:
    """Test fitness statistics."""

    def test_summary_values(self, x_candidates, x_fitness):
        """Test best, mean and worst are computed over the pool."""
        summary = summarize(x_fitness, x_candidates)
        assert summary.size == 3
        assert summary.best == 255.0
        assert summary.worst == 16.0
        assert summary.mean == pytest.approx((0x10 + 0x7F + 0xFF) / 3)
        assert summary.to_dict()["best"] == 255.0

    def test_summary_empty(self, x_fitness):
        """Test summarizing nothing fails."""
        with pytest.raises(EmptyCandidateSetError):
            summarize(x_fitness, [])
