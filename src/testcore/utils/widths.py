"""Fixed-width integer domains and two's-complement narrowing."""

from __future__ import annotations

from dataclasses import dataclass


def _sign_extend(value: int, bits: int) -> int:
    """Sign-extend a value from `bits` width to Python int."""
    sign_bit = 1 << (bits - 1)
    return (value & ((1 << bits) - 1)) - ((value & sign_bit) << 1)


@dataclass(frozen=True)
class IntWidth:
    name: str
    bits: int
    signed: bool

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return self.mask

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def truncate(self, value: int) -> int:
        """Wrap `value` into this width the way a C-style cast does (no saturation)."""
        if self.signed:
            return _sign_extend(value, self.bits)
        return value & self.mask

    def from_bytes(self, data: bytes) -> int:
        """Reinterpret the leading little-endian bytes of `data` as this width."""
        size = self.bits // 8
        if len(data) < size:
            raise ValueError(f"{self.name} needs {size} bytes, got {len(data)}")
        return int.from_bytes(data[:size], "little", signed=self.signed)


INT8 = IntWidth("int8", 8, signed=True)
UINT8 = IntWidth("uint8", 8, signed=False)
INT16 = IntWidth("int16", 16, signed=True)
UINT16 = IntWidth("uint16", 16, signed=False)
INT32 = IntWidth("int32", 32, signed=True)
UINT32 = IntWidth("uint32", 32, signed=False)
INT64 = IntWidth("int64", 64, signed=True)
UINT64 = IntWidth("uint64", 64, signed=False)
