from __future__ import annotations

"""Error verifier: the single writer of the swarm's termination signal."""

import logging

from .agents import Agent
from .state import SolutionState

logger = logging.getLogger(__name__)


class ErrorVerifier(Agent):
    """Recomputes ``target - selected sum`` each step until it reaches zero.

    When zero is observed the exact snapshot behind it is kept in
    ``verified_selection``; since it was taken in the same critical section as
    the publish, its subset sum equals the target.
    """

    name = "verifier"

    def __init__(self) -> None:
        self.checks = 0
        self.verified_selection: tuple[bool, ...] | None = None

    def step(self, state: SolutionState) -> bool:
        error, snap = state.publish_error()
        self.checks += 1
        if error != 0:
            return True
        self.verified_selection = snap
        logger.debug("zero error observed after %d checks", self.checks)
        return False
