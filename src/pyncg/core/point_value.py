"""
Immutable (point, value) snapshot recorded once per iteration.
"""
from dataclasses import dataclass

import numpy as np

from .vector import Vector


@dataclass(frozen=True)
class PointValuePair:
    """
    Point and the objective value evaluated there.

    The point is copied and made read-only on construction, so the
    minimizer's working vector can keep moving without changing a
    recorded snapshot.

    Attributes:
        point: Evaluated point (read-only array).
        value: Objective value at ``point``.
    """

    point: Vector
    value: float

    def __post_init__(self) -> None:
        snapshot = np.array(self.point, dtype=np.float64)
        snapshot.setflags(write=False)
        object.__setattr__(self, "point", snapshot)
        object.__setattr__(self, "value", float(self.value))
