"""
Minimizer configuration.

Tunables are grouped in :class:`MinimizerConfig` and passed at
construction time. Configs can also be loaded from YAML files::

    minimizer:
      epsilon: 1.0e-8
      max_iterations: 500
      initial_step: 0.5
"""
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

DEFAULT_EPSILON = 1e-6
# 4.503599e15 ~= 2**52, kept as the default absolute floor.
DEFAULT_SAFE_MIN = 4.503599e15
DEFAULT_MAX_ITERATIONS = 100000
DEFAULT_INITIAL_STEP = 1.0
DEFAULT_ROOT_PRECISION = 1e-15


@dataclass(frozen=True)
class MinimizerConfig:
    """
    Construction-time tunables of the conjugate gradient minimizer.

    Attributes:
        epsilon: Relative convergence tolerance (scaled by 100).
        safe_min: Absolute convergence floor (scaled by 100).
        max_iterations: Iteration cap of the run-to-convergence loop.
        initial_step: First step of the line-search bracketing.
        root_precision: Absolute precision requested from the root finder.

    Example:
        >>> config = MinimizerConfig(epsilon=1e-10, safe_min=1e-300)
        >>> minimizer = polak_ribiere(f, fd, [0.0, 0.0], config=config)
    """

    epsilon: float = DEFAULT_EPSILON
    safe_min: float = DEFAULT_SAFE_MIN
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    initial_step: float = DEFAULT_INITIAL_STEP
    root_precision: float = DEFAULT_ROOT_PRECISION

    def __post_init__(self) -> None:
        """
        Validate tunables.

        Raises:
            ValueError: If any value is non-positive.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")

    @property
    def relative_threshold(self) -> float:
        return 100 * self.epsilon

    @property
    def absolute_threshold(self) -> float:
        return 100 * self.safe_min

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MinimizerConfig":
        """
        Build a config from a plain mapping, filling in defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {', '.join(sorted(unknown))}. "
                f"Valid keys: {', '.join(sorted(known))}"
            )
        kwargs: Dict[str, Any] = {}
        for key, value in d.items():
            try:
                kwargs[key] = int(value) if key == "max_iterations" else float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid value for {key}: {value!r}") from exc
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration (empty for an empty file).
    """
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(path: Union[str, Path]) -> MinimizerConfig:
    """
    Load a :class:`MinimizerConfig` from a YAML file.

    The tunables may sit at the top level or under a ``minimizer`` key.
    """
    raw = load_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    section = raw.get("minimizer", raw)
    if not isinstance(section, dict):
        raise ValueError("'minimizer' section must be a mapping")
    return MinimizerConfig.from_dict(section)
