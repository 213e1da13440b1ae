from __future__ import annotations

"""Run configuration for :class:`swarm_ssp.coordinator.SwarmSolver`."""

from dataclasses import dataclass

from .constants import POLL_INTERVAL


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for one solve.

    ``timeout`` is ``None`` by default: the swarm runs until the error
    reaches zero, however long that takes.  Setting it makes the solver
    force‑cancel every task once the deadline passes and return a partial,
    non‑exact selection flagged ``converged=False``.
    """

    interval: float = POLL_INTERVAL
    pairs_per_task: int = 1
    timeout: float | None = None
    seed: int | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.interval > 0:
            raise ValueError(f"interval must be positive, got {self.interval!r}")
        if int(self.pairs_per_task) != self.pairs_per_task or self.pairs_per_task < 1:
            raise ValueError(
                f"pairs_per_task must be a positive integer, got {self.pairs_per_task!r}"
            )
        if self.timeout is not None and not self.timeout > 0:
            raise ValueError(f"timeout must be positive or None, got {self.timeout!r}")
