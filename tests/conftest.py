"""Shared test fixtures."""

import pytest

from testcore.utils.random_source import RandomSource, UniformSource


@pytest.fixture
def rng():
    """Provide a seeded RandomSource for deterministic tests."""
    return RandomSource(seed=42)


class ScriptedSource(UniformSource):
    """Source that replays canned values and records every call."""

    def __init__(self, ints=(), doubles=(), wide=b""):
        self.ints = list(ints)
        self.doubles = list(doubles)
        self.wide = wide
        self.calls: list[tuple] = []

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        self.calls.append(("next_int", min_inclusive, max_exclusive))
        return self.ints.pop(0)

    def next_double(self) -> float:
        self.calls.append(("next_double",))
        return self.doubles.pop(0)

    def next_wide_bytes(self, count: int) -> bytes:
        self.calls.append(("next_wide_bytes", count))
        return self.wide[:count]


class LowestSource(UniformSource):
    """Always returns the lowest value the request allows."""

    def __init__(self):
        self.calls: list[tuple] = []

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        self.calls.append((min_inclusive, max_exclusive))
        return min_inclusive

    def next_double(self) -> float:
        return 0.0

    def next_wide_bytes(self, count: int) -> bytes:
        return bytes(count)


class HighestSource(LowestSource):
    """Always returns the highest value the request allows."""

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        self.calls.append((min_inclusive, max_exclusive))
        if max_exclusive == min_inclusive:
            return min_inclusive
        return max_exclusive - 1

    def next_double(self) -> float:
        return 1.0 - 2**-53

    def next_wide_bytes(self, count: int) -> bytes:
        return b"\xff" * count


@pytest.fixture
def lowest():
    return LowestSource()


@pytest.fixture
def highest():
    return HighestSource()
