"""
Tests for linear_combination and lerp.
"""

import numpy as np
import pytest

from pylinalg import Vector, lerp, linear_combination
from pylinalg.core.exceptions import DimensionError


class TestLinearCombination:

    def test_basis(self):
        e1 = Vector([1, 0, 0])
        e2 = Vector([0, 1, 0])
        e3 = Vector([0, 0, 1])
        result = linear_combination([e1, e2, e3], [10, -2, 0.5])
        assert result == Vector([10, -2, 0.5])

    def test_two_vectors(self):
        v1 = Vector([1, 2, 3])
        v2 = Vector([0, 10, -100])
        assert linear_combination([v1, v2], [10, -2]) == Vector([10, 0, 230])

    def test_single(self):
        assert linear_combination([Vector([1, 2])], [3]) == Vector([3, 6])

    def test_empty(self):
        result = linear_combination([], [])
        assert len(result) == 0

    def test_inputs_not_modified(self):
        v1 = Vector([1, 2])
        linear_combination([v1, v1], [2, 3])
        assert v1 == Vector([1, 2])

    def test_complex_coefficients(self):
        result = linear_combination([Vector([1, 0]), Vector([0, 1])], [1j, 2])
        assert result.kind.is_complex
        assert result == Vector([1j, 2])

    def test_accepts_sequences(self):
        assert linear_combination([[1, 1], [2, 0]], [1, 1]) == Vector([3, 1])

    def test_matches_numpy(self, rng):
        vectors = rng.standard_normal((5, 8))
        scalars = rng.standard_normal(5)
        result = linear_combination([Vector(v) for v in vectors], scalars)
        np.testing.assert_allclose(result.to_numpy(), scalars @ vectors, atol=1e-12)

    def test_count_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent counts"):
            linear_combination([Vector([1, 2]), Vector([3, 4])], [1])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match=r"vectors\[1\]"):
            linear_combination([Vector([1, 2]), Vector([3, 4, 5])], [1, 1])


class TestLerp:

    def test_endpoints(self):
        u = Vector([2, 1])
        v = Vector([4, 2])
        assert lerp(u, v, 0.0) == u
        assert lerp(u, v, 1.0) == v

    def test_midpoint(self):
        assert lerp(Vector([0, 0]), Vector([1, 1]), 0.5) == Vector([0.5, 0.5])

    def test_interior(self):
        assert lerp(Vector([2, 1]), Vector([4, 2]), 0.3) == Vector([2.6, 1.3])

    def test_extrapolates(self):
        assert lerp(Vector([0]), Vector([1]), 2.0) == Vector([2])

    def test_complex(self):
        assert lerp(Vector([0]), Vector([2j]), 0.5) == Vector([1j])

    def test_size_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            lerp(Vector([1, 2]), Vector([1, 2, 3]), 0.5)
