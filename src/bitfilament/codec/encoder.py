"""Top-level encoder.

This module provides the encode() function that classifies a value and hands it
to the codec for its wire type. Containers call back into the same dispatcher
for their children.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..config import CodecConfig, resolve_config
from ..exceptions import EncodeError, UnencodableValueError
from .containers import encode_array, encode_object
from .inspector import classify
from .numeric import encode_number
from .payload import encode_buffer, encode_regexp, encode_string
from .tags import WireType


def encode(value: Any, *, config: CodecConfig | None = None) -> bytes:
    """Encode a value to a self-describing byte string.

    Args:
        value: Number, boolean, str, compiled str pattern, bytes-like buffer,
            list/tuple/array.array, or mapping/pydantic model/dataclass instance
        config: Codec configuration (default: little-endian numbers, UTF-8 text)

    Returns:
        Encoded bytes: one tag byte, an optional size prefix, then the payload

    Raises:
        UnencodableValueError: If the value (or any nested value) is None or has
            no wire representation
        EncodeError: If a value cannot be encoded for any other reason

    Examples:
        ```python
        from bitfilament import encode

        encode(200)          # b"\\x10\\xc8"
        encode("hi")         # b"\\x21\\x02hi"
        encode({"a": [True]})
        ```
    """
    try:
        return encode_value(value, resolve_config(config))
    except RecursionError as err:
        raise EncodeError("Value nesting exceeds the recursion limit (cyclic or too deep)") from err


def encode_many(values: Iterable[Any], *, config: CodecConfig | None = None) -> bytes:
    """Encode several values back to back into one buffer.

    The result can be read with decode() and the returned offsets, or with
    iter_decode()/decode_all().
    """
    config = resolve_config(config)
    result = bytearray()
    for value in values:
        try:
            result.extend(encode_value(value, config))
        except RecursionError as err:
            raise EncodeError(
                "Value nesting exceeds the recursion limit (cyclic or too deep)"
            ) from err
    return bytes(result)


def encode_value(value: Any, config: CodecConfig) -> bytes:
    """Encode one value with an already resolved configuration."""
    wire_type = classify(value)

    if wire_type is None:
        raise UnencodableValueError("None has no wire representation")
    if wire_type is WireType.NUMBER:
        return encode_number(value, config)
    if wire_type is WireType.STRING:
        return encode_string(value, config)
    if wire_type is WireType.REGEXP:
        return encode_regexp(value, config)
    if wire_type is WireType.BUFFER:
        return encode_buffer(value)
    if wire_type is WireType.ARRAY:
        return encode_array(value, encode_value, config)
    return encode_object(value, encode_value, config)
