"""
Minimizer module for nonlinear conjugate gradient minimization.

Provides:
- NonLinearConjugateGradient: the step-by-step state machine
- fletcher_reeves / polak_ribiere: run-to-convergence entry points
- LineSearch: bracketing + root-solve line search
- ConvergenceChecker: relative/absolute stopping rule
- Preconditioner / RootFinder: pluggable collaborators
"""

from .beta import BetaFormula, compute_beta, update_direction
from .conjugate_gradient import (
    NonLinearConjugateGradient,
    fletcher_reeves,
    minimize,
    polak_ribiere,
)
from .convergence import ConvergenceChecker
from .line_search import LineSearch, directional_derivative, find_upper_bound
from .preconditioner import IdentityPreconditioner, Preconditioner
from .root_finder import BrentRootFinder, RootFinder

__all__ = [
    "NonLinearConjugateGradient",
    "BetaFormula",
    "fletcher_reeves",
    "polak_ribiere",
    "minimize",
    "compute_beta",
    "update_direction",
    "ConvergenceChecker",
    "LineSearch",
    "directional_derivative",
    "find_upper_bound",
    "Preconditioner",
    "IdentityPreconditioner",
    "RootFinder",
    "BrentRootFinder",
]
