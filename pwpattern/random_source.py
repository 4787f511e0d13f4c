"""
Randomness collaborators for password generation.
"""

import secrets
from typing import List, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Picks and permutes items on behalf of the generator."""

    def sample(self, items: Sequence[T]) -> T:
        """Return one item chosen uniformly. Must not mutate ``items``."""
        ...

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a permutation of ``items``. Must not mutate ``items``."""
        ...


class SystemRandomSource:
    """Cryptographically secure random source backed by ``secrets``."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def sample(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot sample from an empty sequence")
        return self._rng.choice(items)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled
