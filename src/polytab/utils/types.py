"""Shared typing aliases for polytab."""

from __future__ import annotations

from typing import Protocol, Sequence, TypeAlias, TypeVar

import numpy as np
from numpy.typing import NDArray


class RingLike(Protocol):
    """Arithmetic needed from coefficient and point values.

    Horner evaluation needs ``*`` and ``+``; building and advancing the
    difference table needs ``+`` and ``-``. All operands and results share
    one type. Overflow and rounding are whatever the type provides.
    """

    def __add__(self, other, /): ...

    def __sub__(self, other, /): ...

    def __mul__(self, other, /): ...


C = TypeVar("C", bound=RingLike)

Coefficients: TypeAlias = Sequence[C] | NDArray[np.generic]
