from __future__ import annotations

"""Shared solution vector for the swarm.

One :class:`SolutionState` is shared by every agent of a solve.  It holds

``bits``  – the boolean selection, guarded by a single ``threading.Lock``
``error`` – ``target - selected sum``, the termination signal

The lock covers the whole vector rather than single entries so that a reader
never sees half of a pairwise update.  It is only ever held for O(1) work and
never across a sleep, so there is nothing to deadlock on.

``error`` is deliberately *not* read under the lock.  Rebinding an ``int``
attribute is atomic in CPython, there is exactly one writer (the verifier,
through :meth:`SolutionState.publish_error`) and readers tolerate a stale
value.  Agents that are about to mutate re‑check it inside
:meth:`transaction`, which is what keeps the final snapshot equal to the one
the verifier accepted.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from .instance import Instance


class SolutionState:
    """Lock‑guarded selection vector plus the published error signal."""

    def __init__(self, instance: Instance) -> None:
        self.instance = instance
        self._lock = threading.Lock()
        self._bits: list[bool] = [False] * instance.size
        self._error: int = instance.target

    def __len__(self) -> int:
        return len(self._bits)

    # ------------------------------------------------------------------
    # error signal (single writer)
    @property
    def error(self) -> int:
        return self._error

    def publish_error(self) -> tuple[int, tuple[bool, ...]]:
        """Recompute the error from a fresh snapshot and publish it.

        Only the verifier calls this.  The snapshot and the write happen in
        the same critical section, so the returned snapshot is exactly the
        selection the published error describes.
        """

        with self._lock:
            snap = tuple(self._bits)
            self._error = self.instance.target - self.instance.subset_sum(snap)
            return self._error, snap

    # ------------------------------------------------------------------
    # vector access
    def get(self, i: int) -> bool:
        with self._lock:
            return self._bits[i]

    def set(self, i: int, value: bool) -> None:
        with self._lock:
            self._bits[i] = bool(value)

    def snapshot(self) -> tuple[bool, ...]:
        with self._lock:
            return tuple(self._bits)

    @contextmanager
    def transaction(self) -> Iterator[list[bool]]:
        """Hold the lock and yield the raw vector for a multi‑bit update.

        The yielded list is the live vector, not a copy: it must not be kept
        or touched after the ``with`` block exits.
        """

        with self._lock:
            yield self._bits
