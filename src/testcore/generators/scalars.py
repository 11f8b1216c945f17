"""Boolean, float, character and string generators."""

from __future__ import annotations

import struct

from testcore.errors import InvalidBoundsError
from testcore.generators import GeneratorRegistry
from testcore.utils.random_source import UniformSource

# Printable ASCII range used for characters; 127 (DEL) is included.
CHAR_MIN = 32
CHAR_MAX = 127


@GeneratorRegistry.register("bool")
def next_bool(source: UniformSource) -> bool:
    return source.next_int(0, 2) == 1


@GeneratorRegistry.register("float32")
def next_float(source: UniformSource) -> float:
    """Narrow a [0, 1) double to single precision.

    Rounding to nearest means a draw just below 1.0 can become exactly 1.0.
    """
    return struct.unpack("<f", struct.pack("<f", source.next_double()))[0]


@GeneratorRegistry.register("char")
def next_char(source: UniformSource) -> str:
    return chr(source.next_int(CHAR_MIN, CHAR_MAX + 1))


@GeneratorRegistry.register("string")
def next_string(source: UniformSource, max_length: int) -> str:
    """Return a string of exactly `max_length` random printable characters.

    The length is fixed, not drawn up to `max_length`.
    """
    if max_length < 0:
        raise InvalidBoundsError(0, max_length, f"max_length must be non-negative, got {max_length}")
    return "".join(next_char(source) for _ in range(max_length))
