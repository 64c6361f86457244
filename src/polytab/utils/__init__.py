"""Utility functions for polytab package."""

from .validate import (
    EmptyPolynomialError,
    validate_coefficients,
    validate_num_points,
)

__all__ = [
    "EmptyPolynomialError",
    "validate_coefficients",
    "validate_num_points",
]
