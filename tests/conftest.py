"""Pytest configuration for quadstat tests."""

import random

import pytest

# =============================================================================
# Fixtures - Samples
# =============================================================================

@pytest.fixture
def symmetric_sample():
    """Five values symmetric around zero."""
    return [-2, -1, 0, 1, 2]


@pytest.fixture
def shifted_sample():
    """The symmetric sample shifted down by one."""
    return [-3, -2, -1, 0, 1]


@pytest.fixture
def normal_sample():
    """30 draws from N(0.4, 1) with a fixed seed."""
    rng = random.Random(42)
    return [rng.gauss(0.4, 1.0) for _ in range(30)]


@pytest.fixture
def other_normal_sample():
    """25 draws from N(0, 1.5) with a fixed seed."""
    rng = random.Random(7)
    return [rng.gauss(0.0, 1.5) for _ in range(25)]


# =============================================================================
# Fixtures - Grids
# =============================================================================

@pytest.fixture
def probabilities():
    """Probabilities spread over (0.001, 0.999)."""
    return [0.0011, 0.01, 0.05, 0.1, 0.25, 0.4, 0.5, 0.6, 0.75, 0.9, 0.95, 0.99, 0.9989]
