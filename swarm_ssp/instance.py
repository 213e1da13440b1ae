from __future__ import annotations

"""Subset‑sum instances and the random encoder that plants a solution."""

import numbers
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .constants import MAX_WEIGHT


def _is_integer(value: object) -> bool:
    # numpy integer scalars register as numbers.Integral; bools do too but are rejected
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


@dataclass(frozen=True)
class Instance:
    """An immutable SSP instance: pick a subset of ``weights`` summing to ``target``."""

    target: int
    weights: tuple[int, ...]

    def __post_init__(self) -> None:
        if not _is_integer(self.target):
            raise ValueError(f"target must be an integer, got {self.target!r}")
        if not all(_is_integer(w) for w in self.weights):
            raise ValueError(f"weights must be positive integers, got {list(self.weights)}")
        weights = tuple(int(w) for w in self.weights)
        if not weights:
            raise ValueError("instance needs at least one weight")
        if any(w <= 0 for w in weights):
            raise ValueError(f"weights must be positive integers, got {list(weights)}")
        if int(self.target) < 0:
            raise ValueError(f"target must be non-negative, got {self.target}")
        # normalise numpy scalars / lists to plain ints on a frozen instance
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "target", int(self.target))

    @property
    def size(self) -> int:
        return len(self.weights)

    def subset_sum(self, selection: Iterable[bool]) -> int:
        return sum(w for w, chosen in zip(self.weights, selection) if chosen)

    def selected(self, selection: Iterable[bool]) -> list[int]:
        return [w for w, chosen in zip(self.weights, selection) if chosen]


def generate_instance(
    n: int,
    *,
    max_weight: int = MAX_WEIGHT,
    rng: np.random.Generator | int | None = None,
    return_solution: bool = False,
) -> Instance | tuple[Instance, tuple[bool, ...]]:
    """Draw a random instance whose target is reachable by construction.

    Parameters
    ----------
    n : int
        Number of weights; must be positive.
    max_weight : int
        Each weight is drawn uniformly from ``[1, max_weight]``.
    rng : numpy.random.Generator or int, optional
        Generator (or seed) to draw from; a fresh default generator otherwise.
    return_solution : bool
        Also return the planted assignment the target was built from.
    """

    if n <= 0:
        raise ValueError(f"instance size must be positive, got {n}")
    if max_weight < 1:
        raise ValueError(f"max_weight must be at least 1, got {max_weight}")
    rng = np.random.default_rng(rng)

    weights = rng.integers(1, max_weight, size=n, endpoint=True)
    planted = rng.random(size=n) < 0.5
    target = int(weights[planted].sum())

    instance = Instance(target=target, weights=tuple(int(w) for w in weights))
    solution = tuple(bool(x) for x in planted)
    if instance.subset_sum(solution) != instance.target:
        raise RuntimeError("planted assignment does not reproduce the target")

    if return_solution:
        return instance, solution
    return instance


def instance_from_weights(weights: Sequence[int], target: int) -> Instance:
    """Convenience constructor for hand‑written instances."""

    return Instance(target=target, weights=tuple(weights))
