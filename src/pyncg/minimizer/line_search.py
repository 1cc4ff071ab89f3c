"""
Exact line search along a fixed direction.

The stationary point of f restricted to ``point + x * d`` is a root of the
directional derivative ``g(x) = <grad f(point + x * d), d>``. The search
first brackets a sign change of g starting from ``x = 0``, then hands the
bracket to a root finder.
"""
import sys
from typing import Callable, Optional

from pyncg.core.exceptions import BracketingError
from pyncg.core.vector import Vector, dot, shifted

from .root_finder import BrentRootFinder, RootFinder

GradientFunction = Callable[[Vector], Vector]


def directional_derivative(
    gradient: GradientFunction,
    point: Vector,
    direction: Vector,
) -> Callable[[float], float]:
    """
    Build ``g(x) = <gradient(point + x * direction), direction>``.

    *point* and *direction* are captured by reference; callers must not
    mutate them while ``g`` is in use.
    """

    def g(x: float) -> float:
        return dot(gradient(shifted(point, x, direction)), direction)

    return g


def find_upper_bound(func: Callable[[float], float], a: float, h: float) -> float:
    """
    Grow a step from *a* until *func* changes sign.

    The step starts at *h* and is multiplied by ``max(2, g(a) / g(b))``
    after every failed probe.

    Args:
        func: Directional derivative g.
        a: Near bracket end (always 0 in the minimizer).
        h: Initial step.

    Returns:
        Far bracket end ``b`` with ``g(a) * g(b) <= 0``.

    Raises:
        BracketingError: If the step reaches the largest float first.
    """
    ya = float(func(a))
    step = h
    while step < sys.float_info.max:
        b = a + step
        yb = float(func(b))
        if ya * yb <= 0:
            return b
        step *= max(2.0, ya / yb)
    raise BracketingError(step)


class LineSearch:
    """
    Bracketing + root-solve line search.

    Attributes:
        root_finder: Solver used on the bracket ``[0, b]``.
        initial_step: First bracketing step.
        precision: Precision requested from the root finder.
    """

    def __init__(
        self,
        root_finder: Optional[RootFinder] = None,
        initial_step: float = 1.0,
        precision: float = 1e-15,
    ) -> None:
        if initial_step <= 0:
            raise ValueError(f"initial_step must be positive, got {initial_step}")
        if precision <= 0:
            raise ValueError(f"precision must be positive, got {precision}")
        self.root_finder = root_finder if root_finder is not None else BrentRootFinder()
        self.initial_step = initial_step
        self.precision = precision

    def search(
        self,
        gradient: GradientFunction,
        point: Vector,
        direction: Vector,
    ) -> float:
        """
        Return the step length to the stationary point along *direction*.

        May legitimately return 0 when g already vanishes at the origin.
        """
        g = directional_derivative(gradient, point, direction)
        upper = find_upper_bound(g, 0.0, self.initial_step)
        return self.root_finder.solve(g, 0.0, upper, self.precision)
