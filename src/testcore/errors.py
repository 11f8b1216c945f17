"""Errors raised when a generator is called outside its contract."""

from __future__ import annotations


class TestDataError(ValueError):
    """Base class for caller-contract violations in test data generation."""

    __test__ = False


class InvalidBoundsError(TestDataError):
    """A bound pair is reversed or does not fit the target domain."""

    def __init__(self, min_value: int, max_value: int, reason: str | None = None):
        self.min_value = min_value
        self.max_value = max_value
        if reason is None:
            reason = f"min_value {min_value} is greater than max_value {max_value}"
        super().__init__(reason)


class NotEnumerableError(TestDataError):
    """Variant sampling was requested for something with no declared variants."""

    def __init__(self, kind: object):
        self.kind = kind
        name = getattr(kind, "__name__", repr(kind))
        super().__init__(f"{name} does not declare any variants")


class ExhaustedDomainError(TestDataError):
    """Every declared variant was excluded, so nothing is left to draw."""

    def __init__(self, kind: object = None):
        self.kind = kind
        if kind is None:
            message = "All variants are excluded"
        else:
            name = getattr(kind, "__name__", repr(kind))
            message = f"All variants of {name} are excluded"
        super().__init__(message)
