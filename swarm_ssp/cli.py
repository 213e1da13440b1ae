"""Command‑line entry point: generate a random instance and let the swarm solve it."""
from __future__ import annotations

import argparse
import logging
import sys

from . import constants as C
from .config import SolverConfig
from .coordinator import SolveResult, SwarmSolver
from .instance import generate_instance

__all__ = ["main", "format_report"]


def format_report(result: SolveResult) -> list[str]:
    """Lines printed once the swarm has stopped."""

    selected = " ".join(str(w) for w in result.selected)
    return [
        "Solution found (or search stopped):",
        f"Error: {result.error} Target: {result.target}",
        f"Selected integers: {selected}",
        f"Sum = {result.achieved_sum} (target {result.target})",
    ]


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(description="Solve a random subset-sum instance with an agent swarm")
    parser.add_argument("--size", type=int, default=C.DEFAULT_SIZE, help="Number of integers")
    parser.add_argument("--max-weight", type=int, default=C.MAX_WEIGHT, help="Largest integer drawn")
    parser.add_argument("--seed", type=int, help="Seed for the instance and every agent")
    parser.add_argument(
        "--interval",
        type=float,
        default=C.POLL_INTERVAL,
        help="Seconds each agent pauses between iterations",
    )
    parser.add_argument(
        "--pairs-per-task",
        type=int,
        default=1,
        help="Coupling agents driven by one worker thread",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Give up after this many seconds and report the partial selection",
    )
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for swarm_ssp",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)

    level = getattr(logging, ns.log_level)
    pkg_logger = logging.getLogger("swarm_ssp")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)

    try:
        config = SolverConfig(
            interval=ns.interval,
            pairs_per_task=ns.pairs_per_task,
            timeout=ns.timeout,
            seed=ns.seed,
            verbose=ns.log_level in {"INFO", "DEBUG"},
        )
        instance = generate_instance(ns.size, max_weight=ns.max_weight, rng=ns.seed)
    except ValueError as exc:
        sys.exit(f"Error: {exc}")

    print(f"Starting solver with n={instance.size} target={instance.target}")
    result = SwarmSolver(instance, config).solve()
    for line in format_report(result):
        print(line)
    return 0 if result.converged else 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
