#!/usr/bin/env python3
"""
Example 2: Rosenbrock with progress observers

Run Polak-Ribiere on Rosenbrock's banana function, printing progress
every 10 iterations and recording the full trajectory.

Usage:
    python examples/02_rosenbrock_history.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pyncg.core import MinimizationError, MinimizerConfig
from pyncg.minimizer import polak_ribiere
from pyncg.observer import HistoryObserver, PrintObserver
from pyncg.problems import RosenbrockProblem


def main():
    print("=" * 60)
    print("  Example 2: ROSENBROCK WITH OBSERVERS")
    print("=" * 60)

    problem = RosenbrockProblem()
    config = MinimizerConfig(epsilon=1e-10, safe_min=1e-20, max_iterations=2000)
    history = HistoryObserver()

    try:
        result = polak_ribiere(
            problem.objective,
            problem.gradient,
            problem.start,
            config,
            observers=[history, PrintObserver(interval=10)],
        )
    except MinimizationError as exc:
        print(f"\n[FAIL] {exc}")
        return

    print(f"\nIterations: {result.iterations}")
    print(f"x_min:      {result.x_minimum}")
    print(f"f_min:      {result.f_minimum:.6e}")
    print(f"Resets:     {sum(history.resets)}")

    decreasing = all(b <= a + 1e-12 for a, b in zip(history.values, history.values[1:]))
    print(f"[{'PASS' if decreasing else 'FAIL'}] Objective never increased")
    print("=" * 60)


if __name__ == "__main__":
    main()
