"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def central_grid():
    """Arguments across the central region, step 1/32."""
    return np.arange(-24.0, 64.0, 1.0 / 32.0)


@pytest.fixture
def right_tail_grid():
    """Arguments from 64 to 2^64, 256 points per binary order."""
    points = []
    x0 = 64.0
    while x0 <= 2.0 ** 64:
        points.extend(x0 + k * x0 / 256.0 for k in range(256))
        x0 *= 2.0
    return np.array(points)


@pytest.fixture
def segment_boundaries():
    """Points where the evaluators switch between approximants."""
    return [-16.0, -8.0, -4.0, -2.0, -1.0, 1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 64.0]


@pytest.fixture
def rng():
    """Seeded generator for reproducible sampling tests."""
    return np.random.default_rng(20240611)
