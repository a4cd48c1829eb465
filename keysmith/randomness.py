"""
keysmith.randomness
Random sources the generator draws from. The default wraps the OS CSPRNG.
"""

from random import SystemRandom
from typing import Protocol


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        ...

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...


class SystemRandomSource:
    """
    Backed by random.SystemRandom (os.urandom), so one instance can be shared
    between threads.
    """

    def __init__(self):
        self._rng = SystemRandom()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        return self._rng.randrange(n)

    def random(self) -> float:
        return self._rng.random()
