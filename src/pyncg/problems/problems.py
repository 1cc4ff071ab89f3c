"""
Benchmark objectives with analytic gradients.

Each problem bundles f(x), grad f(x), a default start point and, when
known, the location of the minimum. They feed the service layer, the
CLI and the REST API.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray


class Problem(ABC):
    """
    Abstract base for a smooth unconstrained minimization problem.

    Subclasses must implement objective() and gradient().

    Example:
        >>> problem = get_problem("rosenbrock")
        >>> result = polak_ribiere(problem.objective, problem.gradient, problem.start)
    """

    name: str = ""

    @abstractmethod
    def objective(self, x: NDArray[np.float64]) -> float:
        """Objective value at x."""
        pass

    @abstractmethod
    def gradient(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        """Gradient at x (same length as x)."""
        pass

    @property
    @abstractmethod
    def start(self) -> NDArray[np.float64]:
        """Default start point."""
        pass

    @property
    def minimum(self) -> Optional[NDArray[np.float64]]:
        """Known minimizer, or None."""
        return None

    def get_name(self) -> str:
        return self.name


class QuadraticProblem(Problem):
    """
    Shifted sphere f(x) = sum((x_i - c_i)^2).

    Gradient 2 * (x - c); minimum at x = c with f = 0.
    """

    name = "quadratic"

    def __init__(self, center: Sequence[float] = (2.0, 5.0, 100.0)) -> None:
        c = np.asarray(center, dtype=np.float64).ravel()
        if c.size == 0:
            raise ValueError("center must have at least one element")
        self.center = c

    def objective(self, x: NDArray[np.float64]) -> float:
        return float(np.sum((x - self.center) ** 2))

    def gradient(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        return 2.0 * (x - self.center)

    @property
    def start(self) -> NDArray[np.float64]:
        return np.zeros_like(self.center)

    @property
    def minimum(self) -> NDArray[np.float64]:
        return self.center.copy()


class SphereProblem(QuadraticProblem):
    """Unshifted sphere f(x) = sum(x_i^2), started from all ones."""

    name = "sphere"

    def __init__(self, dimension: int = 2) -> None:
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        super().__init__(center=np.zeros(dimension))

    @property
    def start(self) -> NDArray[np.float64]:
        return np.ones_like(self.center)


class RosenbrockProblem(Problem):
    """
    Rosenbrock's banana function f(x, y) = (a - x)^2 + b * (y - x^2)^2.

    Minimum at (a, a^2) with f = 0.
    """

    name = "rosenbrock"

    def __init__(self, a: float = 1.0, b: float = 100.0) -> None:
        if b <= 0:
            raise ValueError(f"b must be positive, got {b}")
        self.a = a
        self.b = b

    def objective(self, x: NDArray[np.float64]) -> float:
        return float((self.a - x[0]) ** 2 + self.b * (x[1] - x[0] ** 2) ** 2)

    def gradient(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.array(
            [
                -2.0 * (self.a - x[0]) - 4.0 * self.b * x[0] * (x[1] - x[0] ** 2),
                2.0 * self.b * (x[1] - x[0] ** 2),
            ]
        )

    @property
    def start(self) -> NDArray[np.float64]:
        return np.array([-1.2, 1.0])

    @property
    def minimum(self) -> NDArray[np.float64]:
        return np.array([self.a, self.a**2])


class BoothProblem(Problem):
    """
    Booth function f(x, y) = (x + 2y - 7)^2 + (2x + y - 5)^2.

    A non-separable convex quadratic; minimum at (1, 3) with f = 0.
    """

    name = "booth"

    def objective(self, x: NDArray[np.float64]) -> float:
        return float((x[0] + 2 * x[1] - 7) ** 2 + (2 * x[0] + x[1] - 5) ** 2)

    def gradient(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        u = x[0] + 2 * x[1] - 7
        v = 2 * x[0] + x[1] - 5
        return np.array([2 * u + 4 * v, 4 * u + 2 * v])

    @property
    def start(self) -> NDArray[np.float64]:
        return np.zeros(2)

    @property
    def minimum(self) -> NDArray[np.float64]:
        return np.array([1.0, 3.0])


class ExponentialProblem(Problem):
    """
    Strictly convex f(x) = sum(exp(x_i) - x_i).

    Minimum at x = 0 with f = n.
    """

    name = "exponential"

    def __init__(self, dimension: int = 2) -> None:
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        self.dimension = dimension

    def objective(self, x: NDArray[np.float64]) -> float:
        return float(np.sum(np.exp(x) - x))

    def gradient(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.exp(x) - 1.0

    @property
    def start(self) -> NDArray[np.float64]:
        return np.linspace(1.0, -0.5, self.dimension)

    @property
    def minimum(self) -> NDArray[np.float64]:
        return np.zeros(self.dimension)


_PROBLEMS = ["quadratic", "sphere", "rosenbrock", "booth", "exponential"]


def list_problems() -> List[str]:
    """Names accepted by :func:`get_problem`."""
    return list(_PROBLEMS)


def get_problem(name: str, **params: Any) -> Problem:
    """
    Create a problem by name.

    Args:
        name: One of :func:`list_problems` (case-insensitive).
        **params: Problem parameters, e.g. ``center`` for ``quadratic``,
            ``dimension`` for ``sphere`` and ``exponential``, ``a``/``b``
            for ``rosenbrock``.

    Raises:
        ValueError: For unknown names, or parameters of the wrong type or
            out of range.
    """
    key = name.lower()
    if key not in _PROBLEMS:
        raise ValueError(
            f"Unknown problem: {name}. Choose from: {', '.join(_PROBLEMS)}"
        )
    try:
        if key == "quadratic":
            return QuadraticProblem(center=params.get("center", (2.0, 5.0, 100.0)))
        elif key == "sphere":
            return SphereProblem(dimension=int(params.get("dimension", 2)))
        elif key == "rosenbrock":
            return RosenbrockProblem(
                a=float(params.get("a", 1.0)),
                b=float(params.get("b", 100.0)),
            )
        elif key == "booth":
            return BoothProblem()
        else:
            return ExponentialProblem(dimension=int(params.get("dimension", 2)))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid parameters for {name}: {exc}") from exc


def describe(problem: Problem) -> Dict[str, Any]:
    """Plain-dict summary used by the API."""
    minimum = problem.minimum
    return {
        "name": problem.get_name(),
        "dimension": int(problem.start.shape[0]),
        "start": problem.start.tolist(),
        "minimum": None if minimum is None else minimum.tolist(),
    }
