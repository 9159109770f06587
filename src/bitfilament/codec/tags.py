"""Tag byte model.

Every encoded value starts with one tag byte. The high nibble holds the wire
type, the low nibble holds type-specific info: the numeric subtype for numbers,
or the width in bytes of the size prefix for every other wire type.

    7 6 5 4   3 2 1 0
    [ type ]  [ info ]
"""

from __future__ import annotations

import enum

TYPE_MASK = 0xF0
INFO_MASK = 0x0F
MAX_INFO = 0x0F


class WireType(enum.IntEnum):
    """Coarse value category stored in the high nibble of a tag byte."""

    NUMBER = 0x1
    STRING = 0x2
    REGEXP = 0x3
    OBJECT = 0x4
    ARRAY = 0x5
    BUFFER = 0x6


class NumberType(enum.IntEnum):
    """Numeric subtype stored in the info nibble of a NUMBER tag."""

    UINT_8 = 0x0
    UINT_16 = 0x1
    UINT_32 = 0x2
    INT_8 = 0x3
    INT_16 = 0x4
    INT_32 = 0x5
    FLOAT_32 = 0x6
    FLOAT_64 = 0x7
    FALSE = 0xE
    TRUE = 0xF


# struct format character and payload width for each numeric subtype
NUMBER_FORMATS: dict[NumberType, tuple[str, int]] = {
    NumberType.UINT_8: ("B", 1),
    NumberType.UINT_16: ("H", 2),
    NumberType.UINT_32: ("I", 4),
    NumberType.INT_8: ("b", 1),
    NumberType.INT_16: ("h", 2),
    NumberType.INT_32: ("i", 4),
    NumberType.FLOAT_32: ("f", 4),
    NumberType.FLOAT_64: ("d", 8),
}


def number_width(number_type: NumberType) -> int:
    """Return the payload width in bytes of a numeric subtype (0 for booleans)."""
    if number_type in (NumberType.TRUE, NumberType.FALSE):
        return 0
    return NUMBER_FORMATS[number_type][1]


def pack_tag(wire_type: WireType, info: int) -> int:
    """Combine a wire type and an info nibble into a tag byte.

    Args:
        wire_type: Wire type for the high nibble
        info: Info value for the low nibble (0-15)

    Returns:
        Tag byte value (0-255)

    Raises:
        ValueError: If info does not fit in a nibble
    """
    if info < 0 or info > MAX_INFO:
        raise ValueError(f"Tag info must be 0-{MAX_INFO}, got {info}")
    return (int(wire_type) << 4) | info


def split_tag(tag: int) -> tuple[int, int]:
    """Split a tag byte into its raw type nibble and info nibble.

    The type nibble is returned as a plain int; the caller decides whether it
    names a known WireType.
    """
    return (tag & TYPE_MASK) >> 4, tag & INFO_MASK
