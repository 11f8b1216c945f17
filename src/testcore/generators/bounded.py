"""Bounded integer primitives shared by every integer generator.

Two conventions exist side by side and both are part of the public contract:

- `next_bounded_int` treats both bounds as inclusive (8-bit generators);
- `next_exclusive_bounded_int` treats the upper bound as exclusive
  (16-bit, 32-bit and index draws).

The underlying source primitive is always exclusive, so the inclusive form
asks it for ``max_value + 1``.
"""

from __future__ import annotations

from testcore.errors import InvalidBoundsError
from testcore.utils.random_source import INT32_MAX, INT32_MIN, UniformSource
from testcore.utils.widths import IntWidth


def check_bounds(width: IntWidth, min_value: int, max_value: int) -> None:
    """Raise InvalidBoundsError unless min <= max and both fit `width`."""
    if min_value > max_value:
        raise InvalidBoundsError(min_value, max_value)
    for bound in (min_value, max_value):
        if not width.contains(bound):
            raise InvalidBoundsError(
                min_value, max_value,
                f"Bound {bound} is outside the {width.name} range "
                f"[{width.min_value}, {width.max_value}]",
            )


def _check_source_range(min_value: int, max_exclusive: int) -> None:
    """Raise InvalidBoundsError if the source cannot serve [min_value, max_exclusive)."""
    if min_value < INT32_MIN or max_exclusive > INT32_MAX:
        raise InvalidBoundsError(
            min_value, max_exclusive,
            f"Range [{min_value}, {max_exclusive}) does not fit the source's "
            f"32-bit signed domain [{INT32_MIN}, {INT32_MAX}]",
        )


def resolve_bounds(
    width: IntWidth,
    min_value: int | None,
    max_value: int | None,
    default_max: int | None = None,
) -> tuple[int, int]:
    """Expand the zero/one/two-argument call forms into an explicit pair.

    A single argument is the maximum, as with ``range(stop)``. Generators
    take their bounds positionally only, so a lone bound is always the first.
    """
    if min_value is None and max_value is None:
        return width.min_value, width.max_value if default_max is None else default_max
    if max_value is None:
        return width.min_value, min_value
    if min_value is None:
        return width.min_value, max_value
    return min_value, max_value


def next_bounded_int(
    source: UniformSource, width: IntWidth, min_value: int, max_value: int
) -> int:
    """Return a value of `width` uniformly drawn from [min_value, max_value]."""
    check_bounds(width, min_value, max_value)
    _check_source_range(min_value, max_value + 1)
    return width.truncate(source.next_int(min_value, max_value + 1))


def next_exclusive_bounded_int(
    source: UniformSource, width: IntWidth, min_value: int, max_value: int
) -> int:
    """Return a value of `width` uniformly drawn from [min_value, max_value).

    Equal bounds yield `min_value`.
    """
    check_bounds(width, min_value, max_value)
    _check_source_range(min_value, max_value)
    return width.truncate(source.next_int(min_value, max_value))
