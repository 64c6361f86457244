"""Direct evaluation of a polynomial at a single point.

Coefficients are ordered from the constant term upwards, so
``[1, 2, 3]`` is ``1 + 2*x + 3*x**2``.

Examples:
--------
>>> from polytab.horner import evaluate
>>> evaluate([1, 2, 3], 7)
162

Array-valued points evaluate element-wise:

>>> import numpy as np
>>> evaluate([1, 2, 3], np.array([0, 1, 2]))
array([ 1,  6, 17])
"""

from __future__ import annotations

from polytab.utils.types import C, Coefficients
from polytab.utils.validate import EmptyPolynomialError, validate_coefficients

__all__ = [
    "EmptyPolynomialError",
    "evaluate",
]


def evaluate(coefficients: Coefficients, point: C) -> C:
    """Evaluates a polynomial at ``point`` using Horner's method.

    Starting from the highest-degree coefficient, the accumulator is
    multiplied by ``point`` and the next lower coefficient is added, down to
    the constant term. A degree ``d`` polynomial costs ``d`` multiplications
    and ``d`` additions; a constant is returned without any arithmetic.

    Args:
        coefficients: Non-empty sequence of coefficients, constant term first.
        point: Where to evaluate. Must support ``*`` and ``+`` with the
            coefficients.

    Returns:
        The value of the polynomial at ``point``.

    Raises:
        EmptyPolynomialError: If ``coefficients`` is empty.
    """
    n = validate_coefficients(coefficients)
    if n == 1:
        return coefficients[0]

    acc = coefficients[n - 1]
    for i in range(n - 2, -1, -1):
        acc = acc * point + coefficients[i]
    return acc
