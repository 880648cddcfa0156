"""Seeded random number generator for reproducible battle simulation.

Wraps Python's random.Random so every roll of a battle comes from one
explicit source.  Batch runs *fork* the RNG per sub-system (enemy
selection, combat dice, ...) so that consuming random values in one
system does not perturb another.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.  ``None`` seeds
        from system entropy (interactive play, no reproducibility).
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2**63)
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        """Return a random float *N* such that ``low <= N <= high``."""
        return self._rng.uniform(low, high)

    def chance(self, probability: float) -> bool:
        """Return ``True`` with the given *probability*."""
        return self._rng.random() < probability

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def weighted_choice(self, seq: Sequence[T], weights: Sequence[int]) -> T:
        """Return one element of *seq*, drawn proportionally to *weights*.

        Raises
        ------
        ValueError
            If *seq* is empty, the lengths differ, a weight is negative,
            or every weight is zero.
        """
        if not seq:
            raise ValueError("weighted_choice requires a non-empty sequence")
        if len(seq) != len(weights):
            raise ValueError(
                f"got {len(seq)} items but {len(weights)} weights"
            )
        if any(w < 0 for w in weights):
            raise ValueError("weights must be >= 0")
        if sum(weights) <= 0:
            raise ValueError("at least one weight must be positive")
        return self._rng.choices(seq, weights=weights, k=1)[0]

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in-place."""
        self._rng.shuffle(lst)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        The derivation is deterministic: forking with the same *name*
        always produces the same child seed.  This lets sub-systems
        (e.g. ``"combat"``, ``"spawn"``) each have their own independent
        random stream.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return GameRNG(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
