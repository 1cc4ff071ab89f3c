"""
Exceptions raised by the conjugate gradient minimizer.

All failures are fatal to the current run: nothing here is retried or
recovered internally. Failures of the root finder (scipy) are not wrapped
and reach the caller unchanged.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyncg.minimizer import NonLinearConjugateGradient


class MinimizationError(Exception):
    """Base class for minimizer failures."""


class BracketingError(MinimizationError):
    """
    Line search could not bracket a root of the directional derivative.

    Raised when the bracketing step grows past the largest representable
    float without the directional derivative changing sign, i.e. the
    objective does not admit a descent root along the current direction.
    """

    def __init__(self, last_step: float) -> None:
        super().__init__("Unable to bracket minimum in line search.")
        self.last_step = last_step


class UnknownBetaFormulaError(MinimizationError, ValueError):
    """Beta formula tag outside {fletcher_reeves, polak_ribiere}."""

    def __init__(self, formula: object) -> None:
        super().__init__(f"Unknown beta formula type: {formula!r}")
        self.formula = formula


class DimensionMismatchError(MinimizationError, ValueError):
    """Two vectors of one run have different lengths."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Vector length mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class IterationLimitError(MinimizationError):
    """
    Run-to-convergence loop reached ``max_iterations`` while still converging.

    Attributes:
        minimizer: The unfinished minimizer, so callers can inspect the
            best point reached so far.
    """

    def __init__(self, minimizer: "NonLinearConjugateGradient") -> None:
        super().__init__(
            f"Did not converge after {minimizer.iterations} iterations "
            f"(f={minimizer.f_minimum:.6e})"
        )
        self.minimizer = minimizer
