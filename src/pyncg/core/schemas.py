"""
Shared payload schemas for the CLI and the API service.

Defines the data structures that both the command line and the FastAPI
transport layer consume and produce.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ------------------------------------------------------------------ #
#  Input schemas
# ------------------------------------------------------------------ #


@dataclass
class MinimizationParams:
    """Parameters for running a minimization on a named problem."""

    problem: str = "quadratic"
    beta_formula: str = "fletcher_reeves"
    start_point: Optional[List[float]] = None
    config: Dict[str, Any] = field(default_factory=dict)
    problem_params: Dict[str, Any] = field(default_factory=dict)
    print_every: int = 0

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MinimizationParams":
        """
        Build params from a plain mapping (e.g. a YAML run file).

        Raises:
            ValueError: If a field has the wrong type.
        """
        if not isinstance(d, dict):
            raise ValueError(f"Run parameters must be a mapping, got {type(d).__name__}")
        start = d.get("start_point")
        try:
            return cls(
                problem=str(d.get("problem", "quadratic")).lower(),
                beta_formula=str(d.get("beta_formula", "fletcher_reeves")),
                start_point=None if start is None else [float(x) for x in start],
                config=dict(d.get("minimizer", d.get("config", {})) or {}),
                problem_params=dict(d.get("problem_params", {}) or {}),
                print_every=int(d.get("print_every", 0)),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid run parameters: {exc}") from exc


# ------------------------------------------------------------------ #
#  Output schemas
# ------------------------------------------------------------------ #


@dataclass
class MinimizationResult:
    """Result of a minimization run."""

    converged: bool
    n_iterations: int
    beta_formula: str
    x_minimum: List[float]
    f_minimum: float
    initial_value: float
    message: str = ""
    value_history: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "converged": self.converged,
            "n_iterations": self.n_iterations,
            "beta_formula": self.beta_formula,
            "x_minimum": self.x_minimum,
            "f_minimum": self.f_minimum,
            "initial_value": self.initial_value,
            "message": self.message,
            "value_history": self.value_history,
        }
