from __future__ import annotations

"""Generic poll‑and‑sleep loop shared by every swarm task."""

import logging
import threading
from typing import Sequence

from .agents import Agent
from .state import SolutionState

logger = logging.getLogger(__name__)


def run_agents(
    agents: Sequence[Agent],
    state: SolutionState,
    cancel: threading.Event,
    interval: float,
) -> bool:
    """Drive ``agents`` until each reports done or ``cancel`` is set.

    One iteration steps every still‑active agent once, then pauses for
    ``interval`` on the cancellation event, which is the only place the task
    blocks.  Returns ``True`` when all agents finished on their own and
    ``False`` when the task was cancelled.
    """

    active = list(agents)
    try:
        while active:
            still_active: list[Agent] = []
            for agent in active:
                if cancel.is_set():
                    return False
                if agent.step(state):
                    still_active.append(agent)
            active = still_active
            if active and cancel.wait(interval):
                return False
    except Exception:
        logger.exception("task %s failed", ",".join(a.name for a in agents))
        raise
    return True


def chunked(items: Sequence[Agent], size: int) -> list[list[Agent]]:
    """Split ``items`` into consecutive batches of at most ``size``."""

    return [list(items[k : k + size]) for k in range(0, len(items), size)]
