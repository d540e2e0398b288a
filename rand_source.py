# rand_source.py
import random
from typing import Optional, Sequence, TypeVar

from errors import ArgumentOutOfRange

T = TypeVar("T")


class RandomSource:
    """
    The random capability handed to the maze algorithms.

    Wraps its own random.Random, so two sources built with the same seed
    carve identical mazes. Any object with the same three methods can be
    passed to the algorithms instead.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_bool(self, prob: float = 0.5) -> bool:
        """Returns True with the given probability."""
        if not (0.0 <= prob <= 1.0):
            raise ArgumentOutOfRange(
                f'expected probability between 0.0 and 1.0, got "{prob}"'
            )
        return self._rng.random() < prob

    def uniform_int(self, start: int, end: Optional[int] = None) -> int:
        """
        Returns an integer in [start, end). With a single argument the range
        is [0, start).
        """
        if end is None:
            start, end = 0, start
        if start >= end:
            raise ArgumentOutOfRange(f"empty range [{start}, {end})")
        return self._rng.randrange(start, end)

    def sample_one(self, items: Sequence[T]) -> T:
        """Picks one element uniformly from a non-empty sequence."""
        items = list(items)
        if not items:
            raise ArgumentOutOfRange("cannot sample from an empty sequence")
        if len(items) == 1:
            return items[0]
        return items[self._rng.randrange(len(items))]

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
