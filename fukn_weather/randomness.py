"""Random sources for description picks"""
import random
import threading
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b]"""

    def randint(self, a: int, b: int) -> int:
        ...


class LockedRandom:
    """Thread-safe wrapper around random.Random"""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def randint(self, a: int, b: int) -> int:
        with self._lock:
            return self._random.randint(a, b)
