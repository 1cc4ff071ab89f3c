"""
Root finders used by the line search.

The line search only needs ``solve(func, lower, upper, precision)`` on a
bracket where ``func`` changes sign (or vanishes at an end).
"""
from abc import ABC, abstractmethod
from typing import Callable

from scipy.optimize import brentq


class RootFinder(ABC):
    """Abstract 1-D root finder over a bracketing interval."""

    @abstractmethod
    def solve(
        self,
        func: Callable[[float], float],
        lower: float,
        upper: float,
        precision: float,
    ) -> float:
        """
        Find a root of *func* inside ``[lower, upper]``.

        Args:
            func: Continuous scalar function of one real.
            lower: Lower bracket end.
            upper: Upper bracket end.
            precision: Requested absolute precision of the root.

        Returns:
            Abscissa of the root.
        """
        pass


class BrentRootFinder(RootFinder):
    """
    Brent's method via :func:`scipy.optimize.brentq`.

    A zero at either bracket end is returned directly. Non-convergence
    raises scipy's ``RuntimeError`` and an invalid bracket its
    ``ValueError``; both reach the caller unchanged.

    Attributes:
        max_iterations: Iteration limit passed to ``brentq``.
    """

    def __init__(self, max_iterations: int = 100) -> None:
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self.max_iterations = max_iterations

    def solve(
        self,
        func: Callable[[float], float],
        lower: float,
        upper: float,
        precision: float,
    ) -> float:
        return float(brentq(func, lower, upper, xtol=precision, maxiter=self.max_iterations))
