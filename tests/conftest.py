"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix, diagonally dominant so it is safely invertible."""
    a = rng.standard_normal((5, 5))
    a += np.diag(np.abs(a).sum(axis=1) + 1.0)
    return Matrix.from_array(a)


@pytest.fixture
def complex_matrix(rng):
    """Random 4x4 complex matrix with a dominant diagonal."""
    a = rng.standard_normal((4, 4)) + 1j * rng.standard_normal((4, 4))
    a += np.diag(np.abs(a).sum(axis=1) + 1.0)
    return Matrix.from_array(a)


@pytest.fixture
def rank_deficient():
    """3x4 matrix whose third row is the sum of the first two (rank 2)."""
    return Matrix([
        [1, 2, 0, 3],
        [0, 1, 4, 1],
        [1, 3, 4, 4],
    ])
