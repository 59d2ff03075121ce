import random
import threading
from abc import ABC, abstractmethod
from typing import Optional

from ..utils.constants import (
    DEFAULT_FAILURE_RATE,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MIN_DELAY_MS,
)


class RandomSource(ABC):
    """Source of the nondeterministic decisions taken during analysis"""

    @abstractmethod
    def processing_delay(self) -> float:
        """Simulated processing time for one item, in seconds"""
        pass

    @abstractmethod
    def should_inject_failure(self) -> bool:
        """Whether the current item should fail with a simulated parsing error"""
        pass


class SeededRandomSource(RandomSource):
    """RandomSource backed by a private, optionally seeded generator.

    Delays are drawn uniformly from [min_delay, max_delay) seconds and
    failures are injected with probability ``failure_rate``. Setting both
    delays and the rate to 0 makes analysis fully deterministic.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        min_delay: float = DEFAULT_MIN_DELAY_MS / 1000,
        max_delay: float = DEFAULT_MAX_DELAY_MS / 1000,
        failure_rate: float = DEFAULT_FAILURE_RATE,
    ):
        if not 0 <= failure_rate <= 1:
            raise ValueError(f"failure_rate must be between 0 and 1, got {failure_rate}")
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError(
                f"Invalid delay range [{min_delay}, {max_delay}): "
                "bounds must be non-negative and ordered"
            )

        self.seed = seed
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.failure_rate = failure_rate
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def processing_delay(self) -> float:
        if self.max_delay == self.min_delay:
            return self.min_delay
        with self._lock:
            offset = self._rng.random()
        return self.min_delay + offset * (self.max_delay - self.min_delay)

    def should_inject_failure(self) -> bool:
        if self.failure_rate == 0:
            return False
        with self._lock:
            return self._rng.random() < self.failure_rate

    def __repr__(self) -> str:
        return (
            f"SeededRandomSource(seed={self.seed}, min_delay={self.min_delay}, "
            f"max_delay={self.max_delay}, failure_rate={self.failure_rate})"
        )
