"""
Injectable identity and randomness sources.
"""

import random
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


def uuid_id_factory() -> str:
    """Generate a unique player id."""
    return uuid.uuid4().hex


class RandomSource(ABC):
    """Source of random permutations used for role assignment."""

    @abstractmethod
    def permutation(self, n: int) -> List[int]:
        """Return a permutation of range(n)."""
        pass


class SeededRandomSource(RandomSource):
    """Uniform permutations from random.Random, reproducible when seeded."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def permutation(self, n: int) -> List[int]:
        order = list(range(n))
        self._rng.shuffle(order)
        return order


class FixedPermutationSource(RandomSource):
    """Always returns the same permutation. Intended for tests."""

    def __init__(self, order: Sequence[int]):
        if sorted(order) != list(range(len(order))):
            raise ValueError(f"Not a permutation: {list(order)}")
        self.order = list(order)

    def permutation(self, n: int) -> List[int]:
        if n != len(self.order):
            raise ValueError(f"Fixed permutation has length {len(self.order)}, requested {n}")
        return list(self.order)
