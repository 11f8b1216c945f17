"""Random values of primitive shapes for building test data."""

from testcore.errors import (
    ExhaustedDomainError,
    InvalidBoundsError,
    NotEnumerableError,
    TestDataError,
)
from testcore.fixture import BaseTestFixture
from testcore.generators import GeneratorRegistry, generate
from testcore.generators.bounded import next_bounded_int, next_exclusive_bounded_int
from testcore.generators.integers import (
    next_byte, next_int, next_long, next_sbyte, next_short,
    next_uint, next_ulong, next_ushort,
)
from testcore.generators.scalars import next_bool, next_char, next_float, next_string
from testcore.generators.variants import next_enum, next_variant
from testcore.utils.random_source import RandomSource, UniformSource
from testcore.utils.widths import IntWidth

__all__ = [
    "TestDataError", "InvalidBoundsError", "NotEnumerableError", "ExhaustedDomainError",
    "BaseTestFixture", "GeneratorRegistry", "generate",
    "next_bounded_int", "next_exclusive_bounded_int",
    "next_byte", "next_sbyte", "next_short", "next_ushort",
    "next_int", "next_uint", "next_long", "next_ulong",
    "next_bool", "next_char", "next_float", "next_string",
    "next_enum", "next_variant",
    "RandomSource", "UniformSource", "IntWidth",
]
