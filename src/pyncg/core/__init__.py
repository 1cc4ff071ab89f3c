"""
Core module for conjugate gradient minimization.

This module provides the building blocks shared by every minimizer:
- vector: elementwise helpers on 1-D float vectors
- PointValuePair: immutable snapshot of an evaluated point
- MinimizerConfig: tunables with documented defaults
- exceptions: error taxonomy raised by the minimizer
"""

from .config import (
    DEFAULT_EPSILON,
    DEFAULT_INITIAL_STEP,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_ROOT_PRECISION,
    DEFAULT_SAFE_MIN,
    MinimizerConfig,
    load_config,
)
from .exceptions import (
    BracketingError,
    DimensionMismatchError,
    IterationLimitError,
    MinimizationError,
    UnknownBetaFormulaError,
)
from .point_value import PointValuePair

__all__ = [
    # Classes
    "MinimizerConfig",
    "PointValuePair",
    # Functions
    "load_config",
    # Exceptions
    "MinimizationError",
    "BracketingError",
    "DimensionMismatchError",
    "IterationLimitError",
    "UnknownBetaFormulaError",
    # Defaults
    "DEFAULT_EPSILON",
    "DEFAULT_INITIAL_STEP",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_ROOT_PRECISION",
    "DEFAULT_SAFE_MIN",
]
