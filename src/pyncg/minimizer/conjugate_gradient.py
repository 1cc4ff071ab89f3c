"""
Nonlinear conjugate gradient minimizer.

One instance owns the whole per-run state (working point, negative
gradient, steepest-descent vector, search direction, delta, iteration
count). Each :meth:`NonLinearConjugateGradient.step` performs one exact
line search followed by one direction update; :meth:`minimize` repeats
steps until the convergence test succeeds.
"""
from typing import Callable, Optional, Sequence, Union

import numpy as np

from pyncg.core.config import MinimizerConfig
from pyncg.core.exceptions import IterationLimitError
from pyncg.core.point_value import PointValuePair
from pyncg.core.vector import (
    Vector,
    VectorLike,
    add_scaled,
    as_vector,
    check_length,
    clone,
    dot,
    negate,
)
from pyncg.observer import Observer

from .beta import BetaFormula, compute_beta, update_direction
from .convergence import ConvergenceChecker
from .line_search import LineSearch
from .preconditioner import IdentityPreconditioner, Preconditioner
from .root_finder import RootFinder

ObjectiveFunction = Callable[[Vector], float]
GradientFunction = Callable[[Vector], VectorLike]


class NonLinearConjugateGradient:
    """
    Conjugate gradient minimizer with a Fletcher-Reeves or Polak-Ribiere beta.

    ``is_converging`` reads as "keep iterating": it is True after
    construction and turns False the first time two successive evaluated
    values pass the convergence test.

    Attributes:
        beta_formula: Update rule fixed at construction.
        config: Tunables (tolerances, initial step, iteration cap).

    Example:
        >>> f = lambda x: (x[0] - 2)**2 + (x[1] - 5)**2 + (x[2] - 100)**2
        >>> fd = lambda x: [2 * (x[0] - 2), 2 * (x[1] - 5), 2 * (x[2] - 100)]
        >>> minimizer = NonLinearConjugateGradient(f, fd, [0, 0, 0], "fletcher_reeves")
        >>> while minimizer.is_converging:
        ...     minimizer.step()
        >>> minimizer.x_minimum, minimizer.f_minimum
    """

    def __init__(
        self,
        objective: ObjectiveFunction,
        gradient: GradientFunction,
        start_point: VectorLike,
        beta_formula: Union[BetaFormula, str],
        config: Optional[MinimizerConfig] = None,
        *,
        preconditioner: Optional[Preconditioner] = None,
        root_finder: Optional[RootFinder] = None,
    ) -> None:
        """
        Initialize state and compute the first search direction.

        Args:
            objective: f(x) -> float.
            gradient: x -> grad f(x), same length as x.
            start_point: Starting point (copied).
            beta_formula: BetaFormula member or its name.
            config: Tunables; defaults to ``MinimizerConfig()``.
            preconditioner: Defaults to the identity.
            root_finder: Line-search root finder; defaults to Brent.

        Raises:
            ValueError: If start_point is empty.
            UnknownBetaFormulaError: If beta_formula is not recognized.
            DimensionMismatchError: If the gradient has the wrong length.
        """
        self.beta_formula = BetaFormula.parse(beta_formula)
        self.config = config if config is not None else MinimizerConfig()

        self._f = objective
        self._fd = gradient
        self._preconditioner = (
            preconditioner if preconditioner is not None else IdentityPreconditioner()
        )
        self._line_search = LineSearch(
            root_finder=root_finder,
            initial_step=self.config.initial_step,
            precision=self.config.root_precision,
        )
        self._checker = ConvergenceChecker.from_config(self.config)

        self._point = as_vector(start_point)
        self._n = self._point.shape[0]
        self._iterations = 0
        self._converging = True
        self._previous: Optional[PointValuePair] = None
        self._current: Optional[PointValuePair] = None
        self._last_step_length: Optional[float] = None
        self._last_beta: Optional[float] = None
        self._last_reset = False

        self._r = negate(self._gradient(self._point))
        self._steepest_descent = self._precondition(self._point, self._r)
        self._search_direction = clone(self._steepest_descent)
        self._delta = dot(self._r, self._steepest_descent)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def is_converging(self) -> bool:
        """True while the caller should keep stepping."""
        return self._converging

    @property
    def x_minimum(self) -> Optional[Vector]:
        """Latest recorded point (None before the first step)."""
        return None if self._current is None else self._current.point

    @property
    def f_minimum(self) -> Optional[float]:
        """Objective value at :attr:`x_minimum`."""
        return None if self._current is None else self._current.value

    @property
    def current(self) -> Optional[PointValuePair]:
        return self._current

    @property
    def previous(self) -> Optional[PointValuePair]:
        return self._previous

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def dimension(self) -> int:
        return self._n

    @property
    def point(self) -> Vector:
        """Copy of the working point (already advanced past x_minimum)."""
        return clone(self._point)

    @property
    def search_direction(self) -> Vector:
        return clone(self._search_direction)

    @property
    def steepest_descent(self) -> Vector:
        return clone(self._steepest_descent)

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def last_step_length(self) -> Optional[float]:
        return self._last_step_length

    @property
    def last_beta(self) -> Optional[float]:
        return self._last_beta

    @property
    def last_reset(self) -> bool:
        """Whether the last step restarted from steepest descent."""
        return self._last_reset

    # ------------------------------------------------------------------ #
    #  Iteration
    # ------------------------------------------------------------------ #

    def step(self) -> None:
        """
        Perform one conjugate gradient iteration.

        Process:
        1. Evaluate f at the working point and record it
        2. Update the convergence flag from the previous/current pair
        3. Line search along the current direction
        4. Advance the working point
        5-6. New negative gradient, steepest-descent vector and delta
        7. Beta from the configured formula
        8. Restart or conjugate direction update

        Raises:
            BracketingError: If the line search cannot bracket a root.
        """
        self._iterations += 1
        self._previous = self._current
        self._current = PointValuePair(self._point, self._f(self._point))
        self._converging = not (
            self._previous is not None
            and self._checker.converged(self._previous, self._current)
        )

        step = self._line_search.search(self._gradient, self._point, self._search_direction)
        add_scaled(self._point, step, self._search_direction)
        self._last_step_length = step

        self._r = negate(self._gradient(self._point))
        delta_old = self._delta
        new_steepest_descent = self._precondition(self._point, self._r)
        self._delta = dot(self._r, new_steepest_descent)

        beta = compute_beta(
            self.beta_formula,
            delta_old,
            self._delta,
            self._r,
            self._steepest_descent,
        )
        self._steepest_descent = new_steepest_descent
        self._search_direction, self._last_reset = update_direction(
            self._search_direction,
            self._steepest_descent,
            beta,
            self._iterations,
            self._n,
        )
        self._last_beta = beta

    def minimize(
        self, observers: Optional[Sequence[Observer]] = None
    ) -> "NonLinearConjugateGradient":
        """
        Step until converged.

        Args:
            observers: Notified after each step whose iteration number is
                a multiple of their interval; finalized when the loop ends.

        Returns:
            This minimizer, finished.

        Raises:
            IterationLimitError: If ``config.max_iterations`` steps were
                taken without converging.
        """
        active = list(observers or [])
        try:
            while self._converging:
                if self._iterations >= self.config.max_iterations:
                    raise IterationLimitError(self)
                self.step()
                for obs in active:
                    if self._iterations % obs.interval == 0:
                        obs.observe(self, self._iterations)
        finally:
            for obs in active:
                obs.finalize()
        return self

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _gradient(self, x: Vector) -> Vector:
        g = np.asarray(self._fd(x), dtype=np.float64).ravel()
        check_length(g, self._n)
        return g

    def _precondition(self, point: Vector, r: Vector) -> Vector:
        s = np.asarray(self._preconditioner.precondition(point, r), dtype=np.float64)
        check_length(s, self._n)
        return s

    def get_name(self) -> str:
        """Get human-readable name."""
        return (
            f"NonLinearConjugateGradient(beta_formula={self.beta_formula.value}, "
            f"n={self._n})"
        )


def minimize(
    objective: ObjectiveFunction,
    gradient: GradientFunction,
    start_point: VectorLike,
    beta_formula: Union[BetaFormula, str] = BetaFormula.FLETCHER_REEVES,
    config: Optional[MinimizerConfig] = None,
    **kwargs,
) -> NonLinearConjugateGradient:
    """
    Build a minimizer and run it to convergence.

    Args:
        objective: Function to minimize.
        gradient: First derivative of *objective*.
        start_point: Starting point.
        beta_formula: BetaFormula member or its name.
        config: Tunables; defaults to ``MinimizerConfig()``.
        **kwargs: ``preconditioner``, ``root_finder`` and ``observers``.

    Returns:
        The finished minimizer; read ``x_minimum`` and ``f_minimum``.
    """
    observers = kwargs.pop("observers", None)
    minimizer = NonLinearConjugateGradient(
        objective, gradient, start_point, beta_formula, config, **kwargs
    )
    return minimizer.minimize(observers=observers)


def fletcher_reeves(
    objective: ObjectiveFunction,
    gradient: GradientFunction,
    start_point: VectorLike,
    config: Optional[MinimizerConfig] = None,
    **kwargs,
) -> NonLinearConjugateGradient:
    """
    Minimize with the Fletcher-Reeves beta.

    Example:
        >>> f = lambda x: (x[0] - 2)**2 + (x[1] - 5)**2 + (x[2] - 100)**2
        >>> fd = lambda x: [2 * (x[0] - 2), 2 * (x[1] - 5), 2 * (x[2] - 100)]
        >>> result = fletcher_reeves(f, fd, [0, 0, 0])
        >>> result.x_minimum
    """
    return minimize(
        objective, gradient, start_point, BetaFormula.FLETCHER_REEVES, config, **kwargs
    )


def polak_ribiere(
    objective: ObjectiveFunction,
    gradient: GradientFunction,
    start_point: VectorLike,
    config: Optional[MinimizerConfig] = None,
    **kwargs,
) -> NonLinearConjugateGradient:
    """Minimize with the Polak-Ribiere beta."""
    return minimize(
        objective, gradient, start_point, BetaFormula.POLAK_RIBIERE, config, **kwargs
    )
