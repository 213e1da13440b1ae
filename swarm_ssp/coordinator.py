from __future__ import annotations

"""Coordinator that runs the whole swarm for one instance.

Lifecycle::

    IDLE --solve()--> RUNNING --verifier saw zero--> STOPPING --joined--> DONE

The verifier and every agent task run on their own worker thread.  The
coordinator blocks on the verifier, then sets the shared cancellation event
and joins everything.  Agents only block in ``cancel.wait(interval)`` so they
leave within one interval of the broadcast.
"""

import logging
import threading
import time
from concurrent.futures import (
    FIRST_COMPLETED,
    CancelledError,
    Future,
    ThreadPoolExecutor,
    wait,
)
from dataclasses import dataclass
from enum import Enum

from .agents import Agent, build_agents
from .config import SolverConfig
from .instance import Instance
from .qubo import qubo_energy, qubo_matrix
from .runner import chunked, run_agents
from .state import SolutionState
from .verification import ErrorVerifier


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"
    DONE = "done"


@dataclass
class SolveResult:
    """Outcome of :meth:`SwarmSolver.solve`."""

    instance: Instance
    selection: tuple[bool, ...]
    error: int
    converged: bool
    elapsed: float
    shutdown_latency: float
    flips: int = 0
    evictions: int = 0
    checks: int = 0

    @property
    def target(self) -> int:
        return self.instance.target

    @property
    def selected(self) -> list[int]:
        return self.instance.selected(self.selection)

    @property
    def achieved_sum(self) -> int:
        return self.instance.subset_sum(self.selection)


class SwarmSolver:
    def __init__(self, instance: Instance, config: SolverConfig | None = None) -> None:
        self.instance = instance
        self.config = config or SolverConfig()
        self.matrix = qubo_matrix(instance)
        self.state = SolutionState(instance)
        self.spins, self.couplings = build_agents(self.matrix, seed=self.config.seed)
        self.verifier = ErrorVerifier()
        self.phase = Phase.IDLE
        self._cancel = threading.Event()
        self.logger = logging.getLogger("swarm_ssp.coordinator")
        self.logger.setLevel(logging.DEBUG if self.config.verbose else logging.WARNING)

    def _tasks(self) -> list[list[Agent]]:
        tasks: list[list[Agent]] = [[spin] for spin in self.spins]
        tasks.extend(chunked(self.couplings, self.config.pairs_per_task))
        return tasks

    def _await_verifier(self, verifier: Future, futures: list[Future], deadline: float | None) -> bool:
        """Block until the verifier exits; ``False`` on deadline or agent failure."""

        pending = list(futures)
        while pending:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            done, _ = wait(pending, timeout=remaining, return_when=FIRST_COMPLETED)
            if verifier.done():
                return verifier.exception() is None
            for fut in done:
                if fut.exception() is not None:
                    self.logger.error("agent task failed before convergence; stopping swarm")
                    return False
            if deadline is not None and time.monotonic() >= deadline:
                self.logger.warning(
                    "deadline of %.3fs reached with error=%d; cancelling swarm",
                    self.config.timeout,
                    self.state.error,
                )
                return False
            pending = [fut for fut in pending if not fut.done()]
        return verifier.exception() is None

    def _join(self, futures: list[Future]) -> BaseException | None:
        """Wait for every task; return the first failure, if any."""

        wait(futures)
        failure: BaseException | None = None
        for fut in futures:
            try:
                fut.result()
            except CancelledError:
                # only reachable when a future is cancelled before it starts;
                # treated as a normal exit
                self.logger.debug("task cancelled during shutdown")
            except Exception as exc:
                if failure is None:
                    failure = exc
        return failure

    def solve(self) -> SolveResult:
        """Run the swarm to completion (or to the configured deadline)."""

        if self.phase is not Phase.IDLE:
            raise RuntimeError(f"solver already used (phase={self.phase.value})")

        cfg = self.config
        tasks = self._tasks()
        self.logger.info(
            "starting swarm n=%d target=%d spins=%d couplings=%d tasks=%d",
            self.instance.size,
            self.instance.target,
            len(self.spins),
            len(self.couplings),
            len(tasks) + 1,
        )

        started = time.monotonic()
        deadline = None if cfg.timeout is None else started + cfg.timeout
        converged = False
        futures: list[Future] = []
        with ThreadPoolExecutor(max_workers=len(tasks) + 1, thread_name_prefix="swarm") as pool:
            try:
                self.phase = Phase.RUNNING
                verifier = pool.submit(run_agents, [self.verifier], self.state, self._cancel, cfg.interval)
                futures.append(verifier)
                for task in tasks:
                    futures.append(pool.submit(run_agents, task, self.state, self._cancel, cfg.interval))
                converged = self._await_verifier(verifier, futures, deadline)
            finally:
                self.phase = Phase.STOPPING
                stop_started = time.monotonic()
                self._cancel.set()
            failure = self._join(futures)
            shutdown_latency = time.monotonic() - stop_started
        self.phase = Phase.DONE
        if failure is not None:
            raise failure

        selection = self.state.snapshot()
        error = self.instance.target - self.instance.subset_sum(selection)
        converged = converged and error == 0
        result = SolveResult(
            instance=self.instance,
            selection=selection,
            error=error,
            converged=converged,
            elapsed=time.monotonic() - started,
            shutdown_latency=shutdown_latency,
            flips=sum(s.flips for s in self.spins),
            evictions=sum(c.evictions for c in self.couplings),
            checks=self.verifier.checks,
        )
        self.logger.info(
            "swarm stopped converged=%s error=%d elapsed=%.3fs shutdown=%.4fs",
            result.converged,
            result.error,
            result.elapsed,
            result.shutdown_latency,
        )
        self.logger.debug(
            "flips=%d evictions=%d checks=%d energy=%.6f",
            result.flips,
            result.evictions,
            result.checks,
            qubo_energy(self.matrix, selection),
        )
        return result
