"""Base class for test fixtures that need a random source."""

from __future__ import annotations

import logging
import os

from testcore.utils.random_source import RandomSource

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "TESTCORE_SEED"


def seed_from_env() -> int | None:
    """Return the seed from TESTCORE_SEED, or None when it is unset or empty."""
    raw = os.environ.get(SEED_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        return int(raw, 0)
    except ValueError:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from None


class BaseTestFixture:
    """Holds one lazily created RandomSource per fixture instance.

    Meant to be subclassed by test classes; pytest builds a fresh instance for
    every test, so every test gets its own source. With no seed the source
    draws from high-entropy system randomness. Set `seed` on the subclass (or
    instance), or export TESTCORE_SEED, to make a run repeatable.
    """

    seed: int | None = None
    _random: RandomSource | None = None

    @property
    def random(self) -> RandomSource:
        if self._random is None:
            seed = self.seed if self.seed is not None else seed_from_env()
            self._random = RandomSource(seed)
            logger.debug(
                "Fixture %s using seed %s", type(self).__name__, seed,
                extra={"event": "fixture.random_source"},
            )
        return self._random
