"""Allow running with: python -m pyncg

Minimizes a named benchmark problem and prints the result.

Usage::

    python -m pyncg --problem rosenbrock --formula pr --epsilon 1e-12 --safe-min 1e-300
    python -m pyncg --config run.yaml --print-every 10
"""
from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

import pyncg
from pyncg.core.config import load_yaml
from pyncg.core.exceptions import MinimizationError
from pyncg.core.schemas import MinimizationParams
from pyncg.core.service import MinimizationService
from pyncg.problems import list_problems


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pyncg",
        description=f"pyncg {pyncg.__version__} - nonlinear conjugate gradient minimizer.",
    )
    parser.add_argument("--config", help="YAML run file (problem, beta_formula, minimizer, ...)")
    parser.add_argument("--problem", choices=list_problems(), help="Benchmark problem")
    parser.add_argument("--formula", help="Beta formula: fletcher_reeves/fr or polak_ribiere/pr")
    parser.add_argument("--start", type=float, nargs="+", help="Start point coordinates")
    parser.add_argument("--epsilon", type=float, help="Relative tolerance (scaled by 100)")
    parser.add_argument("--safe-min", type=float, help="Absolute tolerance (scaled by 100)")
    parser.add_argument("--max-iterations", type=int, help="Iteration cap")
    parser.add_argument("--initial-step", type=float, help="First bracketing step")
    parser.add_argument("--print-every", type=int, default=0, help="Progress interval (0 = quiet)")
    return parser


def params_from_args(args: argparse.Namespace) -> MinimizationParams:
    """Merge the YAML run file (if any) with command line overrides."""
    raw: Dict[str, Any] = load_yaml(args.config) if args.config else {}
    params = MinimizationParams.from_dict(raw)

    if args.problem is not None:
        params.problem = args.problem
    if args.formula is not None:
        params.beta_formula = args.formula
    if args.start is not None:
        params.start_point = list(args.start)
    overrides = {
        "epsilon": args.epsilon,
        "safe_min": args.safe_min,
        "max_iterations": args.max_iterations,
        "initial_step": args.initial_step,
    }
    params.config.update({k: v for k, v in overrides.items() if v is not None})
    if args.print_every:
        params.print_every = args.print_every
    return params


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        params = params_from_args(args)
        result = MinimizationService().run_minimization(params)
    except (MinimizationError, RuntimeError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    x = ", ".join(f"{v:.10g}" for v in result.x_minimum)
    print(f"problem     : {params.problem}")
    print(f"beta formula: {result.beta_formula}")
    print(f"iterations  : {result.n_iterations}")
    print(f"x_minimum   : [{x}]")
    print(f"f_minimum   : {result.f_minimum:.10g}")
    print(result.message)
    return 0 if result.converged else 1


if __name__ == "__main__":
    raise SystemExit(main())
