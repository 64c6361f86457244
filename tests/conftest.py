"""Shared fixtures for polytab tests."""

from fractions import Fraction

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def quadratic():
    """Coefficients of 1 + 2x + 3x^2."""
    return [1, 2, 3]


@pytest.fixture
def random_int_polys(rng):
    """Integer coefficient lists of degree 0 through 7."""
    return [
        [int(c) for c in rng.integers(-20, 21, size=degree + 1)]
        for degree in range(8)
    ]


@pytest.fixture
def fraction_poly():
    """Coefficients of 1/2 - 3/4 x + 5/3 x^3 as exact fractions."""
    return [Fraction(1, 2), Fraction(-3, 4), Fraction(0), Fraction(5, 3)]


def _power_sum(coefficients, x):
    """Reference evaluation as an explicit sum of c_i * x**i."""
    return sum(c * x**i for i, c in enumerate(coefficients))


@pytest.fixture(scope="session")
def power_sum():
    """Return the independent power-sum reference evaluator."""
    return _power_sum
