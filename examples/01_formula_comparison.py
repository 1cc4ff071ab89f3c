#!/usr/bin/env python3
"""
Example 1: Fletcher-Reeves vs Polak-Ribiere

Minimize the shifted quadratic

    f(x) = (x0 - 2)^2 + (x1 - 5)^2 + (x2 - 100)^2

from the origin with both beta formulas, then independently verify the
minimizer with scipy's own conjugate gradient (no pyncg code).

Usage:
    python examples/01_formula_comparison.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from scipy.optimize import minimize as scipy_minimize

from pyncg.core import MinimizerConfig
from pyncg.minimizer import fletcher_reeves, polak_ribiere


def f(x):
    return (x[0] - 2) ** 2 + (x[1] - 5) ** 2 + (x[2] - 100) ** 2


def fd(x):
    return np.array([2 * (x[0] - 2), 2 * (x[1] - 5), 2 * (x[2] - 100)])


def main():
    print("=" * 60)
    print("  Example 1: BETA FORMULA COMPARISON")
    print("=" * 60)

    start = [0.0, 0.0, 0.0]
    configs = [
        ("default", MinimizerConfig()),
        ("tight", MinimizerConfig(epsilon=1e-10, safe_min=1e-20)),
    ]

    print(f"\n{'Method':<18} {'Config':<8} {'Iter':>5} {'f_min':>14}   x_min")
    print("-" * 60)
    results = []
    for label, config in configs:
        for name, entry in [("Fletcher-Reeves", fletcher_reeves), ("Polak-Ribiere", polak_ribiere)]:
            result = entry(f, fd, start, config)
            results.append(result)
            x = ", ".join(f"{v:.6f}" for v in result.x_minimum)
            print(f"{name:<18} {label:<8} {result.iterations:>5} {result.f_minimum:>14.6e}   [{x}]")

    # --- Independent verification ---
    reference = scipy_minimize(f, np.array(start), jac=fd, method="CG")
    print(f"\nscipy CG x_min: {reference.x}")

    spread = max(np.max(np.abs(r.x_minimum - reference.x)) for r in results)
    if spread < 1e-4:
        print(f"[PASS] All runs agree with scipy (max deviation {spread:.2e})")
    else:
        print(f"[FAIL] Deviation from scipy too large: {spread:.2e}")

    print("=" * 60)


if __name__ == "__main__":
    main()
