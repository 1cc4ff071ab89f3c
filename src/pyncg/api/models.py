"""
Pydantic request / response models for the pyncg REST API.

All validation, field constraints, and serialisation logic lives here.
Routes import these models and never define their own.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from pyncg.core.config import MinimizerConfig
from pyncg.minimizer import BetaFormula
from pyncg.problems import list_problems


# ------------------------------------------------------------------ #
#  Request models
# ------------------------------------------------------------------ #


class MinimizationRequest(BaseModel):
    """Payload for ``POST /minimize``."""

    problem: str = Field("quadratic", description="Benchmark problem name")
    beta_formula: str = Field(
        "fletcher_reeves",
        description="Beta formula (fletcher_reeves, polak_ribiere)",
    )
    start_point: Optional[List[float]] = Field(
        None, min_length=1, description="Start point (defaults to the problem's)"
    )
    problem_params: Dict[str, Any] = Field(
        default_factory=dict,
        description="Problem parameters (center, dimension, a, b, ...)",
    )
    # Unset tunables fall back to the server defaults (see create_app).
    epsilon: Optional[float] = Field(None, gt=0, description="Relative tolerance / 100")
    safe_min: Optional[float] = Field(None, gt=0, description="Absolute tolerance / 100")
    max_iterations: Optional[int] = Field(None, gt=0, description="Iteration cap")
    initial_step: Optional[float] = Field(None, gt=0, description="First bracketing step")
    root_precision: Optional[float] = Field(
        None, gt=0, description="Absolute precision of the line-search root solve"
    )

    @field_validator("problem")
    @classmethod
    def problem_must_be_known(cls, v: str) -> str:
        allowed = list_problems()
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(
                f"Unknown problem '{v}'. Choose from: {', '.join(sorted(allowed))}"
            )
        return v_lower

    @field_validator("beta_formula")
    @classmethod
    def formula_must_be_valid(cls, v: str) -> str:
        return BetaFormula.parse(v).value

    def minimizer_config(self, defaults: MinimizerConfig) -> Dict[str, Any]:
        """Server defaults overridden by the tunables set on this request."""
        config = defaults.to_dict()
        for key in config:
            value = getattr(self, key)
            if value is not None:
                config[key] = value
        return config


# ------------------------------------------------------------------ #
#  Response models
# ------------------------------------------------------------------ #


class ProblemInfo(BaseModel):
    """Summary of one benchmark problem."""

    name: str
    dimension: int
    start: List[float]
    minimum: Optional[List[float]] = None


class ProblemsResponse(BaseModel):
    """Response for ``GET /problems``."""

    ok: bool = True
    problems: List[ProblemInfo]


class MinimizationResultPayload(BaseModel):
    """Minimization result data."""

    converged: bool
    n_iterations: int
    beta_formula: str
    x_minimum: List[float]
    f_minimum: float
    initial_value: float
    message: str
    value_history: List[float]


class MinimizationResponse(BaseModel):
    """Response for ``POST /minimize``."""

    ok: bool = True
    result: MinimizationResultPayload


class HealthResponse(BaseModel):
    """Response for ``GET /health``."""

    status: str = "ok"
    version: str


class DefaultsResponse(BaseModel):
    """Response for ``GET /api/defaults``: tunables applied to unset request fields."""

    ok: bool = True
    defaults: Dict[str, Any]
