"""Top-level decoder.

This module provides decode(), a cursor-based reader: given a buffer and an
offset it returns the value found there and the offset just past it, so several
concatenated values can be read one after another.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Union

from structlog import get_logger

from ..config import CodecConfig, resolve_config
from ..exceptions import DecodeError, UnknownWireTypeError
from .bytepack import read_exact
from .containers import decode_array, decode_object
from .numeric import decode_number
from .payload import decode_buffer, decode_regexp, decode_string
from .tags import WireType, split_tag

logger = get_logger()

BufferInput = Union[bytes, bytearray, memoryview, "list[int]"]


def decode(
    buffer: BufferInput, offset: int = 0, *, config: CodecConfig | None = None
) -> tuple[Any, int]:
    """Decode the value that starts at ``offset``.

    Args:
        buffer: Encoded data (bytes-like, or an iterable of byte values)
        offset: Position of the value's tag byte (default 0)
        config: Codec configuration; must match the one used to encode

    Returns:
        Tuple of (value, offset just past the value)

    Raises:
        UnknownWireTypeError: If a tag names no known wire type or numeric subtype
        TruncatedBufferError: If the buffer ends inside the value
        DecodeError: If the data is otherwise invalid

    Examples:
        ```python
        from bitfilament import decode, encode

        data = encode("first") + encode([1, 2])
        first, offset = decode(data)
        second, offset = decode(data, offset)
        ```
    """
    data = _as_bytes(buffer)
    _check_offset(offset)
    try:
        return decode_value(data, offset, resolve_config(config))
    except RecursionError as err:
        raise DecodeError(f"Nesting too deep in value at offset {offset}") from err


def iter_decode(
    buffer: BufferInput, offset: int = 0, *, config: CodecConfig | None = None
) -> Iterator[tuple[Any, int]]:
    """Decode concatenated values until the end of the buffer.

    Yields:
        Tuple of (value, offset just past the value) for each value in order
    """
    data = _as_bytes(buffer)
    _check_offset(offset)
    config = resolve_config(config)
    log = logger.new(buffer_size=len(data))

    count = 0
    while offset < len(data):
        try:
            value, offset = decode_value(data, offset, config)
        except DecodeError:
            log.debug('stream decode failed', values=count, offset=offset)
            raise
        except RecursionError as err:
            log.debug('stream decode failed', values=count, offset=offset)
            raise DecodeError(f"Nesting too deep in value at offset {offset}") from err
        count += 1
        yield value, offset


def decode_all(buffer: BufferInput, *, config: CodecConfig | None = None) -> list[Any]:
    """Decode every concatenated value in the buffer."""
    return [value for value, _ in iter_decode(buffer, config=config)]


def decode_value(buffer: bytes, offset: int, config: CodecConfig) -> tuple[Any, int]:
    """Decode one value from normalized bytes with an already resolved configuration."""
    raw, offset = read_exact(buffer, offset, 1)
    type_nibble, info = split_tag(raw[0])

    try:
        wire_type = WireType(type_nibble)
    except ValueError as err:
        logger.debug('unknown wire type', tag=raw[0], offset=offset - 1)
        raise UnknownWireTypeError(
            f"Unknown wire type 0x{type_nibble:x} in tag 0x{raw[0]:02x} at offset {offset - 1}"
        ) from err

    if wire_type is WireType.NUMBER:
        return decode_number(info, buffer, offset, config)
    if wire_type is WireType.STRING:
        return decode_string(info, buffer, offset, config)
    if wire_type is WireType.REGEXP:
        return decode_regexp(info, buffer, offset, config)
    if wire_type is WireType.BUFFER:
        return decode_buffer(info, buffer, offset)
    if wire_type is WireType.ARRAY:
        return decode_array(info, buffer, offset, decode_value, config)
    return decode_object(info, buffer, offset, decode_value, config)


def _as_bytes(buffer: BufferInput) -> bytes:
    if isinstance(buffer, bytes):
        return buffer
    if isinstance(buffer, int):
        raise DecodeError(f"Cannot read int as bytes: {buffer}")
    try:
        return bytes(buffer)
    except (TypeError, ValueError) as err:
        raise DecodeError(f"Cannot read {type(buffer).__name__} as bytes: {err}") from err


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise DecodeError(f"Offset must be non-negative, got {offset}")
