"""Tests for polytab.utils.validate."""

import numpy as np
import pytest

from polytab.utils.validate import (
    EmptyPolynomialError,
    validate_coefficients,
    validate_num_points,
)


@pytest.mark.parametrize(
    "coefficients, expected",
    [
        ([1], 1),
        ((1, 2, 3), 3),
        (np.zeros(5), 5),
        (np.zeros((4, 2)), 4),
    ],
)
def test_validate_coefficients_returns_length(coefficients, expected):
    """Tests that the number of coefficients is returned."""
    assert validate_coefficients(coefficients) == expected


@pytest.mark.parametrize("empty", [[], (), np.array([])])
def test_validate_coefficients_rejects_empty(empty):
    """Tests that empty sequences raise EmptyPolynomialError."""
    with pytest.raises(EmptyPolynomialError, match="no coefficients"):
        validate_coefficients(empty)


@pytest.mark.parametrize("bad", [1, 2.5, None, np.array(3.0)])
def test_validate_coefficients_rejects_unsized(bad):
    """Tests that values without a length raise TypeError."""
    with pytest.raises(TypeError, match="must be a sequence"):
        validate_coefficients(bad)


@pytest.mark.parametrize("n", [0, 1, 100, np.int64(7)])
def test_validate_num_points_accepts_non_negative_integers(n):
    """Tests that non-negative integers pass through as int."""
    out = validate_num_points(n)
    assert out == n
    assert type(out) is int


def test_validate_num_points_rejects_negative():
    """Tests that negative counts raise ValueError."""
    with pytest.raises(ValueError, match="non-negative"):
        validate_num_points(-3)


@pytest.mark.parametrize("bad", [1.0, "3", None, False])
def test_validate_num_points_rejects_non_integers(bad):
    """Tests that non-integral counts raise TypeError."""
    with pytest.raises(TypeError, match="must be an integer"):
        validate_num_points(bad)
