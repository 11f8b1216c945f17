"""Sampling from a closed set of variants, optionally excluding some."""

from __future__ import annotations

import enum
from typing import Iterable, Sequence, TypeVar

from testcore.errors import ExhaustedDomainError, NotEnumerableError
from testcore.generators.bounded import next_exclusive_bounded_int
from testcore.utils.random_source import UniformSource
from testcore.utils.widths import INT32

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)


def next_variant(
    source: UniformSource,
    variants: Sequence[T],
    excluded: Iterable[T] = (),
    kind: object = None,
) -> T:
    """Pick one of `variants` uniformly, never returning an excluded value.

    Exclusions match by equality and remove every matching entry, including
    repeats in `variants`. Repeated or unknown exclusions are ignored.

    Args:
        source: Uniform source to draw the index from.
        variants: Ordered, declared variants.
        excluded: Values that must not be returned.
        kind: What the variants belong to, used in error messages.

    Raises:
        NotEnumerableError: `variants` is empty.
        ExhaustedDomainError: every variant is excluded.
    """
    candidates = list(variants)
    if not candidates:
        raise NotEnumerableError(kind if kind is not None else type(variants))

    removed = list(excluded)
    candidates = [v for v in candidates if v not in removed]
    if not candidates:
        raise ExhaustedDomainError(kind)

    index = next_exclusive_bounded_int(source, INT32, 0, len(candidates))
    return candidates[index]


def next_enum(source: UniformSource, enum_type: type[E], excluded: Iterable[E] = ()) -> E:
    """Pick a member of `enum_type`, skipping any in `excluded`.

    Aliases are not separate members, so each value is equally likely.
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise NotEnumerableError(enum_type)
    return next_variant(source, list(enum_type), excluded, kind=enum_type)
