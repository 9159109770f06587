"""Numeric codec: booleans, integers and floats.

Each number is stored in the narrowest exact fixed-width representation.
Integral values test ascending magnitude thresholds; anything with a
fractional part, non-finite values, and integers outside the 32-bit ranges
fall back to a 64-bit float.
"""

from __future__ import annotations

import struct
from typing import Union

from ..config import CodecConfig
from ..exceptions import EncodeError, UnknownWireTypeError
from .bytepack import read_exact
from .tags import NUMBER_FORMATS, NumberType, WireType, pack_tag

Number = Union[bool, int, float]


def select_number_type(value: Number) -> NumberType:
    """Choose the narrowest numeric subtype that holds ``value`` exactly.

    Args:
        value: Boolean, integer or float

    Returns:
        Numeric subtype for the tag's info nibble

    Example:
        >>> select_number_type(200)
        <NumberType.UINT_8: 0>
        >>> select_number_type(-129)
        <NumberType.INT_16: 4>
        >>> select_number_type(1.5)
        <NumberType.FLOAT_64: 7>
    """
    if isinstance(value, bool):
        return NumberType.TRUE if value else NumberType.FALSE

    # is_integer() is False for nan and +/-inf
    if isinstance(value, float) and not value.is_integer():
        return NumberType.FLOAT_64

    n = int(value)
    if n < 0:
        if n > -0x81:
            return NumberType.INT_8
        if n > -0x8001:
            return NumberType.INT_16
        if n > -0x80000001:
            return NumberType.INT_32
    else:
        if n < 0x100:
            return NumberType.UINT_8
        if n < 0x10000:
            return NumberType.UINT_16
        if n < 0x100000000:
            return NumberType.UINT_32

    return NumberType.FLOAT_64


def float64_value(value: Number) -> float:
    """Convert a FLOAT_64 number to a Python float.

    Raises:
        EncodeError: If an integer is too large to be represented as a float
    """
    try:
        return float(value)
    except OverflowError as err:
        raise EncodeError(f"Integer {value} is too large to encode as a 64-bit float") from err


def encode_number(value: Number, config: CodecConfig) -> bytes:
    """Encode a boolean or number as a tag byte plus fixed-width payload.

    Raises:
        EncodeError: If an integer is too large to be represented as a float
    """
    number_type = select_number_type(value)
    tag = pack_tag(WireType.NUMBER, number_type)

    if number_type in (NumberType.TRUE, NumberType.FALSE):
        return bytes([tag])

    code, _ = NUMBER_FORMATS[number_type]
    if number_type is NumberType.FLOAT_64:
        payload_value: Number = float64_value(value)
    else:
        payload_value = int(value)

    return bytes([tag]) + struct.pack(config.struct_prefix + code, payload_value)


def decode_number(
    info: int, buffer: bytes, offset: int, config: CodecConfig
) -> tuple[Number, int]:
    """Decode a number whose tag info nibble is ``info``.

    Returns:
        Tuple of (value, offset just past the payload)

    Raises:
        UnknownWireTypeError: If info is not a known numeric subtype
        TruncatedBufferError: If the payload is incomplete
    """
    try:
        number_type = NumberType(info)
    except ValueError as err:
        raise UnknownWireTypeError(f"Unknown numeric subtype 0x{info:x}") from err

    if number_type is NumberType.TRUE:
        return True, offset
    if number_type is NumberType.FALSE:
        return False, offset

    code, width = NUMBER_FORMATS[number_type]
    raw, offset = read_exact(buffer, offset, width)
    (value,) = struct.unpack(config.struct_prefix + code, raw)
    return value, offset
