"""
Backend service layer for pyncg.

Framework-independent orchestration consumed by both the CLI and the
FastAPI transport layer. No references to FastAPI or any transport
concern belong here.
"""
from __future__ import annotations

from typing import List, Optional

from pyncg.core.config import MinimizerConfig
from pyncg.core.exceptions import IterationLimitError
from pyncg.core.schemas import MinimizationParams, MinimizationResult
from pyncg.minimizer import BetaFormula, NonLinearConjugateGradient
from pyncg.observer import HistoryObserver, Observer, PrintObserver
from pyncg.problems import get_problem


class MinimizationService:
    """Runs minimizations of named benchmark problems."""

    def __init__(self, extra_observers: Optional[List[Observer]] = None):
        self._extra_observers = list(extra_observers or [])

    def run_minimization(self, params: MinimizationParams) -> MinimizationResult:
        """
        Minimize the problem described by *params*.

        Hitting the iteration cap yields ``converged=False``; bracketing
        and root-finder failures propagate.

        Raises:
            ValueError: For unknown problems, formulas or config keys.
            BracketingError: If a line search cannot bracket a root.
        """
        problem = get_problem(params.problem, **params.problem_params)
        formula = BetaFormula.parse(params.beta_formula)
        config = MinimizerConfig.from_dict(params.config)
        start = params.start_point if params.start_point is not None else problem.start

        minimizer = NonLinearConjugateGradient(
            problem.objective,
            problem.gradient,
            start,
            formula,
            config,
        )
        initial_value = problem.objective(minimizer.point)

        history = HistoryObserver(interval=1)
        observers: List[Observer] = [history, *self._extra_observers]
        if params.print_every > 0:
            observers.append(PrintObserver(interval=params.print_every))

        try:
            minimizer.minimize(observers=observers)
            converged = True
            message = f"Converged after {minimizer.iterations} iterations"
        except IterationLimitError as exc:
            converged = False
            message = str(exc)

        return MinimizationResult(
            converged=converged,
            n_iterations=minimizer.iterations,
            beta_formula=formula.value,
            x_minimum=[float(v) for v in minimizer.x_minimum],
            f_minimum=float(minimizer.f_minimum),
            initial_value=float(initial_value),
            message=message,
            value_history=[float(v) for v in history.values],
        )
