"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually building the encoded bytes.
"""

from __future__ import annotations

from typing import Any

from ..codec.bytepack import MAX_PREFIX_WIDTH, prefix_width
from ..codec.containers import object_entries
from ..codec.inspector import classify
from ..codec.numeric import float64_value, select_number_type
from ..codec.payload import regexp_text
from ..codec.tags import NumberType, WireType, number_width
from ..config import CodecConfig, resolve_config
from ..exceptions import EncodeError, UnencodableValueError


def encoded_size(value: Any, *, config: CodecConfig | None = None) -> int:
    """Calculate the size in bytes of ``encode(value)``.

    Args:
        value: Any encodable value
        config: Codec configuration (the text codec affects string sizes)

    Returns:
        Encoded size in bytes

    Raises:
        UnencodableValueError: If the value has no wire representation
        EncodeError: If text cannot be converted to bytes

    Example:
        >>> encoded_size({"a": 1})
        7  # tag + prefix, key "a" (3 bytes), UINT_8 1 (2 bytes)
    """
    try:
        return _size(value, resolve_config(config))
    except RecursionError as err:
        raise EncodeError("Value nesting exceeds the recursion limit (cyclic or too deep)") from err


def _size(value: Any, config: CodecConfig) -> int:
    wire_type = classify(value)

    if wire_type is None:
        raise UnencodableValueError("None has no wire representation")
    if wire_type is WireType.NUMBER:
        number_type = select_number_type(value)
        if number_type is NumberType.FLOAT_64:
            float64_value(value)
        return 1 + number_width(number_type)
    if wire_type is WireType.STRING:
        return _text_size(value, config)
    if wire_type is WireType.REGEXP:
        return _text_size(regexp_text(value), config)
    if wire_type is WireType.BUFFER:
        nbytes = memoryview(value).nbytes
        return _header_size(nbytes) + nbytes

    if wire_type is WireType.ARRAY:
        items = list(value)
        return _header_size(len(items)) + sum(_size(item, config) for item in items)

    entries = object_entries(value)
    return _header_size(len(entries)) + sum(
        _text_size(key, config) + _size(item, config) for key, item in entries
    )


def _text_size(text: str, config: CodecConfig) -> int:
    try:
        length = len(config.text_codec.encode(text))
    except UnicodeError as err:
        raise EncodeError(f"Cannot encode text {text!r}: {err}") from err
    return _header_size(length) + length


def _header_size(count: int) -> int:
    """Tag byte plus the size prefix for ``count``."""
    width = prefix_width(count)
    if width > MAX_PREFIX_WIDTH:
        raise UnencodableValueError(
            f"Count {count} needs a {width}-byte size prefix (max: {MAX_PREFIX_WIDTH})"
        )
    return 1 + width
