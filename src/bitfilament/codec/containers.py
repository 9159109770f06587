"""Container codec for objects and arrays.

Layout: ``[tag | prefix width] [count prefix, big-endian] [entries...]``.
Object entries are a string-encoded key followed by a complete encoded value;
array entries are complete encoded values. Children are encoded and decoded
through the top-level dispatcher passed in by the caller.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel

from ..config import CodecConfig
from ..exceptions import DecodeError, UnencodableValueError
from .bytepack import read_size_prefix, size_prefix
from .payload import encode_string
from .tags import WireType, pack_tag

EncodeItem = Callable[[Any, CodecConfig], bytes]
DecodeItem = Callable[[bytes, int, CodecConfig], "tuple[Any, int]"]


def object_entries(value: Any) -> list[tuple[str, Any]]:
    """Return the key/value entries of an object in iteration order.

    Mappings use their own order, pydantic models their field order, and
    dataclass instances their field declaration order.

    Raises:
        UnencodableValueError: If the value cannot be viewed as entries or a key is not a str
    """
    if isinstance(value, Mapping):
        entries = list(value.items())
    elif isinstance(value, BaseModel):
        entries = list(value.model_dump().items())
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        entries = [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    else:
        raise UnencodableValueError(f"Cannot encode value of type {type(value).__name__}")

    for key, _ in entries:
        if not isinstance(key, str):
            raise UnencodableValueError(
                f"Object keys must be str, got {type(key).__name__} ({key!r})"
            )
    return entries


def encode_object(value: Any, encode_item: EncodeItem, config: CodecConfig) -> bytes:
    entries = object_entries(value)
    prefix = size_prefix(len(entries))

    result = bytearray([pack_tag(WireType.OBJECT, len(prefix))])
    result.extend(prefix)
    for key, item in entries:
        result.extend(encode_string(key, config))
        result.extend(encode_item(item, config))

    return bytes(result)


def decode_object(
    info: int, buffer: bytes, offset: int, decode_item: DecodeItem, config: CodecConfig
) -> tuple[dict[str, Any], int]:
    """Decode an object into an insertion-ordered dict.

    Raises:
        DecodeError: If a key does not decode to a string
        TruncatedBufferError: If the buffer ends before all entries are read
    """
    count, offset = read_size_prefix(buffer, offset, info)

    obj: dict[str, Any] = {}
    for _ in range(count):
        key_offset = offset
        key, offset = decode_item(buffer, offset, config)
        if not isinstance(key, str):
            raise DecodeError(
                f"Object key at offset {key_offset} decoded to {type(key).__name__}, expected str"
            )
        obj[key], offset = decode_item(buffer, offset, config)

    return obj, offset


def encode_array(value: Any, encode_item: EncodeItem, config: CodecConfig) -> bytes:
    items = list(value)
    prefix = size_prefix(len(items))

    result = bytearray([pack_tag(WireType.ARRAY, len(prefix))])
    result.extend(prefix)
    for item in items:
        result.extend(encode_item(item, config))

    return bytes(result)


def decode_array(
    info: int, buffer: bytes, offset: int, decode_item: DecodeItem, config: CodecConfig
) -> tuple[list[Any], int]:
    count, offset = read_size_prefix(buffer, offset, info)

    arr: list[Any] = []
    for _ in range(count):
        item, offset = decode_item(buffer, offset, config)
        arr.append(item)

    return arr, offset
