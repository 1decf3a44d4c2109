"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_vectors(rng):
    """Two int64 vectors of equal length with small entries."""
    n = 16
    a = rng.integers(-1000, 1000, size=n)
    b = rng.integers(-1000, 1000, size=n)
    return a, b


@pytest.fixture
def float_vectors(rng):
    """Two float64 vectors of equal length."""
    n = 16
    return rng.standard_normal(n), rng.standard_normal(n)


@pytest.fixture
def int_system(rng):
    """Integer 5 x 3 matrix (stored as 3 columns) and two length-3 vectors."""
    m = rng.integers(-50, 50, size=(3, 5))
    v1 = rng.integers(-50, 50, size=3)
    v2 = rng.integers(-50, 50, size=3)
    return m, v1, v2
