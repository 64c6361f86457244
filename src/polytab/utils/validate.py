"""Validation utilities for polytab."""

from __future__ import annotations

from collections.abc import Sized
from numbers import Integral
from typing import Any

__all__ = [
    "EmptyPolynomialError",
    "validate_coefficients",
    "validate_num_points",
]


class EmptyPolynomialError(ValueError):
    """Raises when a polynomial is given without any coefficients."""


def validate_coefficients(coefficients: Any) -> int:
    """Checks that ``coefficients`` is a non-empty sized sequence.

    Args:
        coefficients: Polynomial coefficients ordered from the constant
            term upwards.

    Returns:
        The number of coefficients, i.e. the degree plus one.

    Raises:
        TypeError: If ``coefficients`` has no length (a bare scalar or a
            0-d array).
        EmptyPolynomialError: If ``coefficients`` is empty.
    """
    if not isinstance(coefficients, Sized) or getattr(coefficients, "ndim", 1) == 0:
        raise TypeError(
            "coefficients must be a sequence ordered from the constant term; "
            f"got {type(coefficients).__name__}."
        )
    n = len(coefficients)
    if n == 0:
        raise EmptyPolynomialError("Cannot evaluate a polynomial with no coefficients.")
    return n


def validate_num_points(num_points: Any) -> int:
    """Checks that ``num_points`` is a non-negative integer and returns it as ``int``."""
    if isinstance(num_points, bool) or not isinstance(num_points, Integral):
        raise TypeError(
            f"num_points must be an integer; got {type(num_points).__name__}."
        )
    if num_points < 0:
        raise ValueError(f"num_points must be non-negative; got {num_points}.")
    return int(num_points)
