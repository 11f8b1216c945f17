"""Per-width integer generators.

Each bounded generator accepts zero, one or two positional bounds:

    next_byte(src)          -> [0, 255]
    next_byte(src, 9)       -> [0, 9]
    next_byte(src, 3, 9)    -> [3, 9]

8-bit generators treat the maximum as inclusive, 16- and 32-bit generators
treat it as exclusive. 64-bit generators take no bounds and draw from the
source's wide byte stream.
"""

from __future__ import annotations

from testcore.generators import GeneratorRegistry
from testcore.generators.bounded import (
    check_bounds,
    next_bounded_int,
    next_exclusive_bounded_int,
    resolve_bounds,
)
from testcore.utils.random_source import INT32_MAX, UniformSource
from testcore.utils.widths import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
)

# Bytes requested per 64-bit draw; only the first 8 are used.
WIDE_DRAW_SIZE = 16


@GeneratorRegistry.register("uint8")
def next_byte(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Return a uint8 in [min_value, max_value]; both bounds are inclusive."""
    lo, hi = resolve_bounds(UINT8, min_value, max_value)
    return next_bounded_int(source, UINT8, lo, hi)


@GeneratorRegistry.register("int8")
def next_sbyte(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Return an int8 in [min_value, max_value]; both bounds are inclusive."""
    lo, hi = resolve_bounds(INT8, min_value, max_value)
    return next_bounded_int(source, INT8, lo, hi)


@GeneratorRegistry.register("int16")
def next_short(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Upper bound is exclusive, so the no-argument form never returns 32767."""
    lo, hi = resolve_bounds(INT16, min_value, max_value)
    return next_exclusive_bounded_int(source, INT16, lo, hi)


@GeneratorRegistry.register("uint16")
def next_ushort(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Upper bound is exclusive, so the no-argument form never returns 65535."""
    lo, hi = resolve_bounds(UINT16, min_value, max_value)
    return next_exclusive_bounded_int(source, UINT16, lo, hi)


@GeneratorRegistry.register("int32")
def next_int(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Return an int32 in [min_value, max_value); the upper bound is exclusive."""
    lo, hi = resolve_bounds(INT32, min_value, max_value)
    return next_exclusive_bounded_int(source, INT32, lo, hi)


@GeneratorRegistry.register("uint32")
def next_uint(
    source: UniformSource, min_value: int | None = None, max_value: int | None = None, /
) -> int:
    """Return a uint32 in [min_value, max_value).

    The source only covers the signed 32-bit domain, so both bounds are
    clamped to 2**31 - 1 before drawing. Values above 2**31 - 1 are
    therefore never produced, and a range lying entirely above it collapses
    to the single value 2**31 - 1.
    """
    lo, hi = resolve_bounds(UINT32, min_value, max_value, default_max=INT32_MAX)
    check_bounds(UINT32, lo, hi)
    return next_exclusive_bounded_int(source, UINT32, min(lo, INT32_MAX), min(hi, INT32_MAX))


@GeneratorRegistry.register("int64")
def next_long(source: UniformSource) -> int:
    return INT64.from_bytes(source.next_wide_bytes(WIDE_DRAW_SIZE))


@GeneratorRegistry.register("uint64")
def next_ulong(source: UniformSource) -> int:
    return UINT64.from_bytes(source.next_wide_bytes(WIDE_DRAW_SIZE))
