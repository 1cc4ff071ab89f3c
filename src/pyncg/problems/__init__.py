"""
Benchmark problems with analytic gradients.
"""

from .problems import (
    BoothProblem,
    ExponentialProblem,
    Problem,
    QuadraticProblem,
    RosenbrockProblem,
    SphereProblem,
    describe,
    get_problem,
    list_problems,
)

__all__ = [
    "Problem",
    "QuadraticProblem",
    "SphereProblem",
    "RosenbrockProblem",
    "BoothProblem",
    "ExponentialProblem",
    "describe",
    "get_problem",
    "list_problems",
]
