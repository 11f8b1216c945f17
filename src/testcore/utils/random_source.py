"""Uniform random sources consumed by the value generators."""

from __future__ import annotations

import logging
import os
import random
import secrets
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class UniformSource(ABC):
    """Contract every generator draws from.

    Integer draws are limited to the signed 32-bit domain, so anything wider
    must go through `next_wide_bytes`.
    """

    @abstractmethod
    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return an int uniformly distributed over [min_inclusive, max_exclusive).

        When both arguments are equal, `min_inclusive` is returned.
        """
        ...

    @abstractmethod
    def next_double(self) -> float:
        """Return a float uniformly distributed over [0, 1)."""
        ...

    @abstractmethod
    def next_wide_bytes(self, count: int) -> bytes:
        """Return `count` random bytes."""
        ...


class RandomSource(UniformSource):
    """Default uniform source.

    Uses `secrets` (high entropy) when no seed is given,
    `random.Random(seed)` when a seed is supplied so a run can be repeated.
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._seeded = seed is not None
        if self._seeded:
            self._rng = random.Random(seed)
        else:
            self._rng = None
        logger.debug(
            "Random source created (seeded=%s)", self._seeded,
            extra={"event": "source.init"},
        )

    @property
    def seed(self) -> int | None:
        return self._seed

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        if min_inclusive > max_exclusive:
            raise ValueError(
                f"min_inclusive {min_inclusive} is greater than max_exclusive {max_exclusive}"
            )
        if min_inclusive < INT32_MIN or max_exclusive > INT32_MAX:
            raise ValueError(
                f"Range [{min_inclusive}, {max_exclusive}) is outside the 32-bit signed domain"
            )
        span = max_exclusive - min_inclusive
        if span == 0:
            return min_inclusive
        if self._seeded:
            return min_inclusive + self._rng.randrange(span)
        return min_inclusive + secrets.randbelow(span)

    def next_double(self) -> float:
        if self._seeded:
            return self._rng.random()
        # 53 random bits scaled into [0, 1), same resolution as random.random()
        return secrets.randbits(53) / (1 << 53)

    def next_wide_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if self._seeded:
            return self._rng.randbytes(count)
        return os.urandom(count)
