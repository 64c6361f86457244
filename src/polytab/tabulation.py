"""Tabulates a polynomial along an arithmetic progression of points.

:class:`PolynomialTabulator` yields ``(x, P(x))`` for
``x = initial, initial + step, initial + 2*step, ...``. Construction samples
the polynomial at ``degree + 1`` points with Horner's method and turns the
samples into a table of finite differences. Every later point is produced by
folding that table forward, which costs ``degree`` additions and no
multiplications. This is the "tabulating polynomial values" method of Knuth,
TAOCP Vol. 2, section 4.6.4.

It pays off once more points are needed than the polynomial has
coefficients.

Examples:
--------
>>> from itertools import islice
>>> from polytab.tabulation import PolynomialTabulator
>>> tab = PolynomialTabulator([1, 2, 3], initial=0, step=1)
>>> list(islice(tab, 4))
[(0, 1), (1, 6), (2, 17), (3, 34)]

Collecting the first few pairs into NumPy arrays:

>>> from polytab.tabulation import tabulate
>>> xs, ys = tabulate([1, 2, 3], initial=7, step=5, num_points=3)
>>> xs.tolist(), ys.tolist()
([7, 12, 17], [162, 457, 902])
"""

from __future__ import annotations

import copy
from typing import Generic

import numpy as np
from numpy.typing import NDArray

from polytab.horner import evaluate
from polytab.logger import polytab_logger
from polytab.utils.types import C, Coefficients
from polytab.utils.validate import validate_coefficients, validate_num_points

__all__ = [
    "PolynomialTabulator",
    "construct",
    "pull",
    "tabulate",
]


class PolynomialTabulator(Generic[C]):
    """Infinite iterator over ``(x, P(x))`` on an arithmetic progression.

    The state holds ``degree + 1`` entries. Entry 0 is the value at the most
    recently produced point and entry ``j`` is the ``j``-th backward
    difference needed to reach the next one.

    The iterator is one-way: each ``next`` mutates the table, and earlier
    pairs can only be reproduced by constructing a new tabulator. A single
    instance must not be advanced from several threads at once without a
    lock (see :func:`polytab.utils.thread_safety.synchronized_pull`).

    Attributes:
        degree: Degree of the tabulated polynomial.
        step: Distance between successive points.
        current_input: Point of the most recently produced pair, or the
            initial point before the first pull.
    """

    __slots__ = ("_state", "_first", "_input", "_step")

    def __init__(self, coefficients: Coefficients, initial: C, step: C) -> None:
        """Builds the difference table for ``coefficients`` starting at ``initial``.

        Args:
            coefficients: Non-empty sequence of coefficients, constant term first.
                Only read here; no reference is kept.
            initial: First point of the progression.
            step: Increment between successive points.

        Raises:
            EmptyPolynomialError: If ``coefficients`` is empty.
        """
        n = validate_coefficients(coefficients)

        state = []
        x = initial
        for k in range(n):
            if k:
                x = x + step
            state.append(copy.copy(evaluate(coefficients, x)))

        # Descending j keeps state[j - 1] at order k - 1 while state[j] is updated.
        for k in range(1, n):
            for j in range(n - 1, k - 1, -1):
                state[j] = state[j] - state[j - 1]

        self._state = state
        self._first = True
        self._input = copy.copy(initial)
        self._step = step

        polytab_logger.debug(
            "Built difference table of degree %d starting at %r with step %r.",
            n - 1,
            initial,
            step,
        )

    @property
    def degree(self) -> int:
        return len(self._state) - 1

    @property
    def step(self) -> C:
        return self._step

    @property
    def current_input(self) -> C:
        return self._input

    def __iter__(self) -> PolynomialTabulator[C]:
        return self

    def __next__(self) -> tuple[C, C]:
        """Returns the next ``(x, P(x))`` pair.

        The first call returns the initial pair as built. Each later call adds
        ``state[j + 1]`` into ``state[j]`` for ascending ``j``, so every sum
        still sees the old higher difference, then advances the point by one
        step. The pair returned is a copy, so callers may modify it freely.
        """
        state = self._state
        if self._first:
            self._first = False
        else:
            for j in range(len(state) - 1):
                state[j] = state[j] + state[j + 1]
            self._input = self._input + self._step
        return copy.copy(self._input), copy.copy(state[0])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(degree={self.degree}, "
            f"current_input={self._input!r}, step={self._step!r})"
        )


def construct(coefficients: Coefficients, initial: C, step: C) -> PolynomialTabulator[C]:
    """Returns a :class:`PolynomialTabulator` for ``coefficients``."""
    return PolynomialTabulator(coefficients, initial, step)


def pull(tabulator: PolynomialTabulator[C]) -> tuple[C, C]:
    """Advances ``tabulator`` and returns the next ``(x, P(x))`` pair."""
    return next(tabulator)


def tabulate(
    coefficients: Coefficients,
    initial: C,
    step: C,
    num_points: int,
) -> tuple[NDArray, NDArray]:
    """Tabulates the first ``num_points`` pairs into NumPy arrays.

    Args:
        coefficients: Non-empty sequence of coefficients, constant term first.
        initial: First point of the progression.
        step: Increment between successive points.
        num_points: How many pairs to produce. May be zero.

    Returns:
        Tuple ``(points, values)``. Both have length ``num_points`` along
        axis 0; trailing dimensions of ``values`` follow the shape of the
        coefficients (e.g. ``(num_points, 2)`` for planar curve
        coefficients). Values of exact Python types such as ``Fraction``
        come back as ``object`` arrays.

    Raises:
        EmptyPolynomialError: If ``coefficients`` is empty.
        TypeError: If ``num_points`` is not an integer.
        ValueError: If ``num_points`` is negative.
    """
    num_points = validate_num_points(num_points)
    tab = PolynomialTabulator(coefficients, initial, step)
    if 0 < num_points < tab.degree + 1:
        polytab_logger.warning(
            "Tabulating %d points of a degree %d polynomial; direct evaluation "
            "is cheaper when fewer than %d points are needed.",
            num_points,
            tab.degree,
            tab.degree + 1,
        )

    points = []
    values = []
    for _ in range(num_points):
        x, y = next(tab)
        points.append(x)
        values.append(y)
    return np.asarray(points), np.asarray(values)
