from __future__ import annotations

"""QUBO encoding of subset sum.

The penalty ``(target - sum_i w_i x_i)^2`` expands, for binary ``x``, into
``target^2 + sum_i Q[i][i] x_i + sum_{i<j} Q[i][j] x_i x_j`` with

``Q[i][i] = w_i^2 - 2 * target * w_i`` and ``Q[i][j] = 2 * w_i * w_j``.

The constant ``target^2`` is dropped.  After scaling by the largest absolute
entry every coefficient lies in ``[-1, 1]`` so agents can use magnitudes
directly as flip probabilities.
"""

from typing import Sequence

import numpy as np

from .instance import Instance


def build_qubo(instance: Instance) -> np.ndarray:
    """Return the raw (unscaled) symmetric QUBO matrix for ``instance``."""

    w = np.asarray(instance.weights, dtype=np.float64)
    Q = 2.0 * np.outer(w, w)
    np.fill_diagonal(Q, w * w - 2.0 * instance.target * w)
    return Q


def normalize_qubo(Q: np.ndarray) -> np.ndarray:
    """Scale ``Q`` so its largest absolute entry is 1.

    An all‑zero matrix is returned unchanged (as a copy).
    """

    Q = np.array(Q, dtype=np.float64)
    peak = float(np.max(np.abs(Q))) if Q.size else 0.0
    if peak > 0.0:
        Q /= peak
    return Q


def qubo_matrix(instance: Instance) -> np.ndarray:
    """Build, normalise and freeze the matrix the agents read from."""

    Q = normalize_qubo(build_qubo(instance))
    Q.flags.writeable = False
    return Q


def qubo_energy(Q: np.ndarray, selection: Sequence[bool]) -> float:
    """Evaluate the upper‑triangular QUBO form for a boolean selection.

    ``Q`` stores each pair coefficient on both sides of the diagonal, so the
    full quadratic form counts pairs twice and is halved back.
    """

    x = np.asarray(selection, dtype=np.float64)
    return float(0.5 * (x @ Q @ x + np.diag(Q) @ x))
