"""Provides all polytab methods."""

from importlib.metadata import PackageNotFoundError, version

from polytab.horner import EmptyPolynomialError, evaluate
from polytab.tabulation import PolynomialTabulator, construct, pull, tabulate
from polytab.utils.thread_safety import synchronized_pull

try:
    __version__ = version("polytab")
except PackageNotFoundError:
    pass

__all__ = [
    "EmptyPolynomialError",
    "PolynomialTabulator",
    "construct",
    "evaluate",
    "pull",
    "synchronized_pull",
    "tabulate",
]
