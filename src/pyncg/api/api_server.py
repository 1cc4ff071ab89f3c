"""
CLI entry-point for the pyncg REST API server.

The minimizer flags set the server-wide defaults; requests may still
override any of them.

Usage::

    python -m pyncg.api                                   # stock defaults
    python -m pyncg.api --port 9000 --safe-min 1e-20      # real convergence
"""
from __future__ import annotations

import argparse
import importlib.util
import sys
from typing import List, Optional

from pyncg.core.config import MinimizerConfig, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pyncg.api",
        description="Serve pyncg minimizations over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--log-level", default="info", help="uvicorn log level (default: info)")

    defaults = parser.add_argument_group("minimizer defaults")
    defaults.add_argument("--config", help="YAML file with a 'minimizer' section")
    defaults.add_argument("--epsilon", type=float, help="Relative tolerance (scaled by 100)")
    defaults.add_argument("--safe-min", type=float, help="Absolute tolerance (scaled by 100)")
    defaults.add_argument("--max-iterations", type=int, help="Iteration cap")
    defaults.add_argument("--initial-step", type=float, help="First bracketing step")
    defaults.add_argument("--root-precision", type=float, help="Root solve precision")
    return parser


def defaults_from_args(args: argparse.Namespace) -> MinimizerConfig:
    """
    Server defaults: the config file (if any) overridden by flags.

    Raises:
        ValueError: On invalid or unknown tunables.
    """
    base = load_config(args.config) if args.config else MinimizerConfig()
    config = base.to_dict()
    overrides = {
        "epsilon": args.epsilon,
        "safe_min": args.safe_min,
        "max_iterations": args.max_iterations,
        "initial_step": args.initial_step,
        "root_precision": args.root_precision,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    return MinimizerConfig.from_dict(config)


def run_server(defaults: MinimizerConfig, host: str, port: int, log_level: str) -> None:
    """Validate dependencies and serve an app built with *defaults*."""
    if importlib.util.find_spec("fastapi") is None:
        raise RuntimeError(
            "Missing API dependencies. Install with: pip install -e '.[api]'"
        )
    try:
        import uvicorn
    except ImportError:
        raise RuntimeError(
            "uvicorn is required to run the API server. "
            "Install with: pip install -e '.[api]'"
        )
    from pyncg.api.app import create_app

    uvicorn.run(create_app(defaults), host=host, port=port, log_level=log_level)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        defaults = defaults_from_args(args)
        run_server(defaults, host=args.host, port=args.port, log_level=args.log_level)
        return 0
    except (RuntimeError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
