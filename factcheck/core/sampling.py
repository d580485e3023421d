"""
Score samplers for the placeholder scores of the pipeline.

Claim confidence, contradiction strength, the bias proxies and the recency
estimate stand in for models that are not integrated yet. They are drawn
from a sampler so callers choose between reproducible and random values.
"""

import hashlib
import random
from typing import Optional


class ScoreSampler:
    """Interface: return a value in ``[low, high)`` for an item ``key``."""

    def uniform(self, low: float, high: float, key: str) -> float:
        raise NotImplementedError


class DeterministicSampler(ScoreSampler):
    """
    Derives each value from a hash of the seed and the item key.

    The same key always yields the same value, independent of call order,
    so concurrent analyses of the same text produce identical reports.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed

    def uniform(self, low: float, high: float, key: str) -> float:
        digest = hashlib.sha256(f"{self.seed}:{key}".encode('utf-8')).digest()
        fraction = int.from_bytes(digest[:8], 'big') / 2 ** 64
        return low + (high - low) * fraction

    def __repr__(self) -> str:
        return f"DeterministicSampler(seed={self.seed})"


class RandomSampler(ScoreSampler):
    """Draws from ``random.Random``; unseeded by default."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def uniform(self, low: float, high: float, key: str) -> float:
        return low + (high - low) * self._random.random()


def create_sampler(seed: Optional[int] = 0) -> ScoreSampler:
    """Deterministic sampler for an integer seed, random sampler for ``None``."""
    if seed is None:
        return RandomSampler()
    return DeterministicSampler(seed)
