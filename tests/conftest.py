"""
pytest configuration and shared fixtures.
"""

from dataclasses import dataclass

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_matrix(rng):
    """Diagonally dominant 5x5 matrix: invertible without row exchange."""
    n = 5
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    return A


@pytest.fixture
def zero_pivot_matrix():
    """Invertible matrix whose first natural pivot is exactly zero."""
    return np.array([
        [0.0, 1.0],
        [1.0, 0.0],
    ])


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float


@pytest.fixture
def cpu_fp64():
    """Direct double-precision results on well-conditioned input."""
    return ToleranceTier(rtol=1e-10, atol=1e-12)


@pytest.fixture
def round_trip():
    """Product of a matrix with its computed inverse loses a few digits."""
    return ToleranceTier(rtol=1e-8, atol=1e-9)
