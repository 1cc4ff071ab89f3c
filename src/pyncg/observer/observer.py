"""
Observer module for monitoring minimization progress.

Provides the Observer pattern for logging and recording iterations of a
conjugate gradient run.
"""
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, TextIO

import numpy as np

if TYPE_CHECKING:
    from pyncg.minimizer import NonLinearConjugateGradient


class Observer(ABC):
    """
    Abstract base for minimization observers (Observer Pattern).

    Observers are notified after each step to record progress or print
    it.

    Attributes:
        interval: How often to call observe() (in iterations).

    Example:
        >>> history = HistoryObserver()
        >>> fletcher_reeves(f, fd, x0, observers=[history])
        >>> history.values[-1]
    """

    def __init__(self, interval: int = 1) -> None:
        """
        Initialize observer.

        Args:
            interval: Observation interval in iterations. Default=1 (every step).
        """
        if interval < 1:
            raise ValueError(f"Interval must be >= 1, got {interval}")
        self.interval = interval

    @abstractmethod
    def observe(
        self,
        minimizer: "NonLinearConjugateGradient",
        iteration: int,
    ) -> None:
        """
        Record observation.

        Args:
            minimizer: Minimizer right after its step.
            iteration: Iteration number of that step (1-based).
        """
        pass

    def finalize(self) -> None:
        """Called at end of the run for cleanup."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get observer name."""
        pass


class CompositeObserver(Observer):
    """
    Composite observer that wraps multiple observers.

    Delegates to child observers based on their individual intervals.
    """

    def __init__(self, observers: List[Observer]) -> None:
        super().__init__(interval=1)  # Check every step
        self.observers = observers

    def observe(
        self,
        minimizer: "NonLinearConjugateGradient",
        iteration: int,
    ) -> None:
        """Delegate to child observers based on their intervals."""
        for obs in self.observers:
            if iteration % obs.interval == 0:
                obs.observe(minimizer, iteration)

    def finalize(self) -> None:
        """Finalize all child observers."""
        for obs in self.observers:
            obs.finalize()

    def get_name(self) -> str:
        """Return composite name."""
        names = [o.get_name() for o in self.observers]
        return f"Composite[{', '.join(names)}]"


class HistoryObserver(Observer):
    """
    Records the trajectory of a run.

    ``values[k]`` is the objective at ``points[k]``, the pair recorded at the
    start of iteration ``iterations[k]``; step length, beta and reset
    describe the line search and direction update of that same iteration.
    """

    def __init__(self, interval: int = 1) -> None:
        """Initialize history observer."""
        super().__init__(interval)
        self.iterations: List[int] = []
        self.values: List[float] = []
        self.points: List[np.ndarray] = []
        self.step_lengths: List[float] = []
        self.betas: List[float] = []
        self.resets: List[bool] = []

    def observe(
        self,
        minimizer: "NonLinearConjugateGradient",
        iteration: int,
    ) -> None:
        """Record the latest pair and update statistics."""
        self.iterations.append(iteration)
        self.values.append(minimizer.f_minimum)
        self.points.append(np.array(minimizer.x_minimum))
        self.step_lengths.append(minimizer.last_step_length)
        self.betas.append(minimizer.last_beta)
        self.resets.append(minimizer.last_reset)

    def get_name(self) -> str:
        """Return observer name."""
        return f"HistoryObserver(interval={self.interval})"


class PrintObserver(Observer):
    """
    Prints minimization progress to console.
    """

    def __init__(self, interval: int = 100, stream: Optional[TextIO] = None) -> None:
        """Initialize print observer."""
        super().__init__(interval)
        self.stream = stream

    def observe(
        self,
        minimizer: "NonLinearConjugateGradient",
        iteration: int,
    ) -> None:
        """Print iteration info."""
        reset = " | reset" if minimizer.last_reset else ""
        print(
            f"Iter {iteration:6d} | "
            f"f={minimizer.f_minimum:14.6e} | "
            f"step={minimizer.last_step_length:11.4e} | "
            f"beta={minimizer.last_beta:11.4e}"
            f"{reset}",
            file=self.stream if self.stream is not None else sys.stdout,
        )

    def get_name(self) -> str:
        """Return observer name."""
        return f"PrintObserver(interval={self.interval})"
