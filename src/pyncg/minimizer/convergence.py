"""
Convergence policy comparing two successive point/value pairs.
"""
from pyncg.core.config import MinimizerConfig
from pyncg.core.point_value import PointValuePair


class ConvergenceChecker:
    """
    Mixed relative/absolute test on successive objective values.

    With ``d = |f_prev - f_curr|`` and ``m = max(|f_prev|, |f_curr|)`` the
    pair is converged when ``d <= m * relative_threshold`` or
    ``d <= absolute_threshold``.
    """

    def __init__(self, relative_threshold: float, absolute_threshold: float) -> None:
        if relative_threshold < 0:
            raise ValueError(
                f"relative_threshold must be non-negative, got {relative_threshold}"
            )
        if absolute_threshold < 0:
            raise ValueError(
                f"absolute_threshold must be non-negative, got {absolute_threshold}"
            )
        self.relative_threshold = relative_threshold
        self.absolute_threshold = absolute_threshold

    @classmethod
    def from_config(cls, config: MinimizerConfig) -> "ConvergenceChecker":
        return cls(config.relative_threshold, config.absolute_threshold)

    def converged(self, previous: PointValuePair, current: PointValuePair) -> bool:
        p = previous.value
        c = current.value
        difference = abs(p - c)
        size = max(abs(p), abs(c))
        return difference <= size * self.relative_threshold or (
            difference <= self.absolute_threshold
        )
