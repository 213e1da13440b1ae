from __future__ import annotations

"""Spin and coupling agents.

An agent is a small step object: :meth:`Agent.step` performs one iteration
against the shared :class:`~swarm_ssp.state.SolutionState` and returns
``False`` once there is nothing left to do (the published error is zero).
Looping, pausing and cancellation live in :mod:`swarm_ssp.runner`, so the
classes here only hold per‑iteration logic.
"""

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from .state import SolutionState


class Agent:
    """Protocol for anything the runner can drive."""

    name: str

    def step(self, state: SolutionState) -> bool:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class SpinAgent(Agent):
    """Pushes variable ``index`` toward the polarity its bias favours.

    A negative diagonal coefficient lowers the energy when the variable is
    selected, so ``bias < 0`` encourages ``True``; anything else encourages
    ``False``.  Each step is one Bernoulli trial with probability
    ``min(1, |bias|)``.
    """

    index: int
    bias: float
    rng: np.random.Generator = field(repr=False)
    trials: int = 0
    flips: int = 0

    @property
    def name(self) -> str:
        return f"spin[{self.index}]"

    @property
    def encouraged(self) -> bool:
        return self.bias < 0.0

    @property
    def probability(self) -> float:
        return min(1.0, abs(self.bias))

    def step(self, state: SolutionState) -> bool:
        if state.error == 0:
            return False
        with state.transaction() as bits:
            if state.error == 0:
                return False
            self.trials += 1
            if bits[self.index] != self.encouraged and self.rng.random() < self.probability:
                bits[self.index] = self.encouraged
                self.flips += 1
        return True


@dataclass
class CouplingAgent(Agent):
    """Resolves a jointly selected pair by evicting one of its two members.

    Off‑diagonal terms of the subset‑sum QUBO are non‑negative penalties on
    selecting both variables.  When ``i`` and ``j`` are both set, a trial with
    probability ``min(1, |coupling|)`` clears exactly one of them, chosen
    uniformly.
    """

    i: int
    j: int
    coupling: float
    rng: np.random.Generator = field(repr=False)
    trials: int = 0
    evictions: int = 0

    @property
    def name(self) -> str:
        return f"coupling[{self.i},{self.j}]"

    @property
    def probability(self) -> float:
        return min(1.0, abs(self.coupling))

    def step(self, state: SolutionState) -> bool:
        if state.error == 0:
            return False
        with state.transaction() as bits:
            if state.error == 0:
                return False
            self.trials += 1
            if bits[self.i] and bits[self.j] and self.rng.random() < self.probability:
                victim = self.i if self.rng.random() < 0.5 else self.j
                bits[victim] = False
                self.evictions += 1
        return True


def _streams(seed: int | None, count: int) -> Iterator[np.random.Generator]:
    for child in np.random.SeedSequence(seed).spawn(count):
        yield np.random.default_rng(child)


def build_agents(
    Q: np.ndarray, *, seed: int | None = None
) -> tuple[list[SpinAgent], list[CouplingAgent]]:
    """Create one spin agent per variable and one coupling agent per pair.

    Every agent gets its own generator spawned from ``seed`` so no generator
    is ever shared between threads.
    """

    n = Q.shape[0]
    pairs = [(i, j) for i in range(n) for j in range(i + 1, n)]
    streams = _streams(seed, n + len(pairs))
    spins = [SpinAgent(i, float(Q[i, i]), next(streams)) for i in range(n)]
    couplings = [CouplingAgent(i, j, float(Q[i, j]), next(streams)) for i, j in pairs]
    return spins, couplings
