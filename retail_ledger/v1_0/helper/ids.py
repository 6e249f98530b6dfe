import itertools
import random
import time
from typing import Callable, Collection, Optional

from retail_ledger.core.logger import logger


class IdGenerator:
    """
    Short numeric identifiers with collision avoidance.

    Draws random fixed-width numbers and retries against the ids already
    taken, then tries a clock-derived value. When both fail, a sequential
    scan returns the lowest free number, widening past the fixed width only
    when every number of that width is taken, so the result is always unique.
    """

    def __init__(
        self,
        width: int,
        *,
        prefix: str = "",
        max_attempts: int = 1000,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self.width = width
        self.prefix = prefix
        self.max_attempts = max_attempts
        self._rng = rng or random.Random(seed)
        self._clock = clock
        self._space = 10 ** width

    def _format(self, n: int) -> str:
        return f"{self.prefix}{n:0{self.width}d}"

    def generate(self, taken: Collection[str]) -> str:
        for _ in range(self.max_attempts):
            candidate = self._format(self._rng.randrange(self._space))
            if candidate not in taken:
                return candidate

        candidate = self._format(self._clock() % self._space)
        if candidate not in taken:
            logger.warning(
                "[IdGenerator] random draws exhausted after %s attempts, using clock value %s",
                self.max_attempts, candidate,
            )
            return candidate

        for n in itertools.count():
            candidate = self._format(n)
            if candidate not in taken:
                logger.warning("[IdGenerator] clock value collided, using sequential id %s", candidate)
                return candidate
        raise AssertionError("unreachable")
