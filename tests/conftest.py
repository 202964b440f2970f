"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible test data."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Factory for random n x n float arrays."""
    def make(n):
        return rng.standard_normal((n, n))
    return make


@pytest.fixture
def angles():
    """Angles covering all four quadrants, including the axis crossings."""
    return [0.0, 0.3, np.pi / 2, 2.0, np.pi, -1.2, 4.5, 2 * np.pi]
