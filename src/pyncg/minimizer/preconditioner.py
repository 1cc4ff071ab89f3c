"""
Preconditioners turning the negative gradient into a steepest-descent vector.
"""
from abc import ABC, abstractmethod

from pyncg.core.vector import Vector, clone


class Preconditioner(ABC):
    """Maps ``(point, r)`` to the preconditioned steepest-descent vector."""

    @abstractmethod
    def precondition(self, point: Vector, r: Vector) -> Vector:
        """
        Precondition the negative gradient.

        Args:
            point: Current point.
            r: Negative gradient at ``point``.

        Returns:
            New vector of the same length; must not alias ``r``.
        """
        pass


class IdentityPreconditioner(Preconditioner):
    """Returns a copy of ``r`` unchanged."""

    def precondition(self, point: Vector, r: Vector) -> Vector:
        return clone(r)
