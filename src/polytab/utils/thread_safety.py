"""Thread safety utilities."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from polytab.tabulation import PolynomialTabulator
from polytab.utils.types import C

__all__ = ["synchronized_pull"]


def synchronized_pull(
    tabulator: PolynomialTabulator[C],
    lock: Any = None,
) -> Callable[[], tuple[C, C]]:
    """Returns a callable that pulls the next pair from ``tabulator`` under a lock.

    A pull updates the difference table and then the current point; both
    must happen without another pull in between. Every thread sharing one
    tabulator has to go through the same lock.

    Args:
        tabulator: The tabulator to share.
        lock: Lock to hold during each pull. Defaults to a new
            ``threading.RLock``.

    Returns:
        Zero-argument callable returning the next ``(x, P(x))`` pair.
    """
    lk = lock if lock is not None else threading.RLock()

    def pull_locked() -> tuple[C, C]:
        """Pulls one pair while holding the lock."""
        with lk:
            return next(tabulator)

    return pull_locked
