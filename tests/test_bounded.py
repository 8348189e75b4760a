"""
Unit tests for bounded real-function maximization.

Tests cover:
- The affine byte -> real mapping
- Fitness wrapping for 1-3 variables
- Convergence on simple functions
- Argument validation

Author: chromosomes maintainers
License: MIT
"""

import pytest

from chromosomes.exceptions import ConfigurationError
from chromosomes.genome.encoding import builder_for
from chromosomes.optimize.bounded import (
    bounded_fitness,
    bounded_maximize,
    bounded_maximize_2d,
    bounded_maximize_3d,
    bounded_maximize_nd,
    decode,
    rescale,
)


def best_of(f, points):
    return max(points, key=lambda p: f(*p) if isinstance(p, tuple) else f(p))


# ============================================================================
# Rescale Tests
# ============================================================================

class TestRescale:
    """Test the byte -> real mapping."""

    def test_endpoints(self):
        """Test 0 maps to lower and 255 maps to upper."""
        assert rescale(0, -10, 10) == -10.0
        assert rescale(255, -10, 10) == 10.0
        assert rescale(0, 3, 7) == 3.0
        assert rescale(255, 3, 7) == 7.0

    def test_exact_formula(self):
        """Test intermediate values follow lower + (v / 255) * (upper - lower)."""
        for value in (1, 51, 127, 128, 200):
            assert rescale(value, -10, 10) == -10 + (value / 255.0) * 20
        assert rescale(51, 0, 255) == pytest.approx(51.0)
        assert rescale(127, -10, 10) == pytest.approx(-0.0392157, abs=1e-6)

    def test_monotonic(self):
        """Test the mapping is increasing."""
        values = [rescale(v, -5, 5) for v in range(256)]
        assert values == sorted(values)

    def test_degenerate_interval(self):
        """Test equal bounds collapse to a single point."""
        assert {rescale(v, 4, 4) for v in range(256)} == {4.0}


# ============================================================================
# Fitness Wrapping Tests
# ============================================================================

class TestBoundedFitness:
    """Test wrapping real functions as fitness functions."""

    def test_one_dimension(self):
        """Test a 1D function reads trait X."""
        fitness = bounded_fitness(lambda x: x, -10, 10)
        c = builder_for("X").build({"X": 255})
        assert fitness(c) == 10.0

    def test_three_dimensions(self):
        """Test a 3D function reads X, Y and Z in order."""
        fitness = bounded_fitness(lambda x, y, z: (x, y, z), 0, 255, dimensions=3)
        c = builder_for("X", "Y", "Z").build({"X": 1, "Y": 2, "Z": 3})
        assert fitness(c) == pytest.approx((1.0, 2.0, 3.0))

    def test_decode(self):
        """Test decoding a chromosome into coordinates."""
        c = builder_for("X", "Y").build({"X": 0, "Y": 255})
        assert decode(c, -1, 1, 2) == (-1.0, 1.0)

    def test_reversed_bounds(self):
        """Test lower > upper is rejected."""
        with pytest.raises(ConfigurationError):
            bounded_fitness(lambda x: x, 10, -10)

    @pytest.mark.parametrize("dimensions", [0, 4])
    def test_bad_dimensions(self, dimensions):
        """Test only 1-3 variables are supported."""
        with pytest.raises(ConfigurationError):
            bounded_fitness(lambda *xs: 0.0, 0, 1, dimensions=dimensions)


# ============================================================================
# Maximization Tests
# ============================================================================

class TestBoundedMaximize:
    """Test convergence of the bounded adapters."""

    def test_maximize_identity(self):
        """Test maximizing f(x) = x over [-10, 10] reaches the upper bound."""
        f = lambda x: x
        x = best_of(f, [bounded_maximize(f, -10, 10, seed=seed) for seed in (1, 2, 3)])
        assert x > 9.98

    def test_maximize_negative_square(self):
        """Test maximizing f(x) = -x^2 over [-10, 10] converges near 0."""
        f = lambda x: -x * x
        x = best_of(f, [bounded_maximize(f, -10, 10, seed=seed) for seed in (1, 2, 3)])
        assert -0.1 < x < 0.1

    def test_maximize_2d(self):
        """Test a 2D paraboloid converges near its peak."""
        f = lambda x, y: -((x - 3) ** 2) - (y + 2) ** 2
        x, y = best_of(f, [bounded_maximize_2d(f, -10, 10, seed=seed) for seed in (1, 2, 3)])
        assert abs(x - 3) < 0.5
        assert abs(y + 2) < 0.5

    def test_maximize_3d(self):
        """Test a 3D linear function heads to the upper corner."""
        f = lambda x, y, z: x + y + z
        x, y, z = best_of(f, [bounded_maximize_3d(f, 0, 10, seed=seed) for seed in (1, 2, 3)])
        assert min(x, y, z) > 9.0

    def test_result_within_bounds(self):
        """Test results always lie inside the interval."""
        x = bounded_maximize(lambda x: -abs(x - 2.5), 0, 5, seed=4)
        assert 0.0 <= x <= 5.0

    def test_deterministic(self):
        """Test equal seeds give equal points."""
        f = lambda x, y: x * y
        assert bounded_maximize_2d(f, -3, 3, seed=9) == bounded_maximize_2d(f, -3, 3, seed=9)

    def test_nd_validation(self):
        """Test the generic entry point validates its arguments."""
        with pytest.raises(ConfigurationError):
            bounded_maximize_nd(lambda x: x, 5, 1, 1)
        with pytest.raises(ConfigurationError):
            bounded_maximize(lambda x: x, -1, 1, mutation_chance=1.5)
