"""bitfilament: compact self-describing binary encoding

A Python library for encoding dynamically typed values (numbers, booleans,
strings, regular expressions, byte buffers, arrays and objects) into a compact
tagged binary form and decoding them back. Several encoded values can be
concatenated in one buffer and read back in order with an explicit cursor.

Key Features:
- One tag byte per value: 4-bit wire type plus 4-bit info nibble
- Narrowest exact width for every number
- Minimal big-endian size prefixes for strings, buffers, arrays and objects
- Pydantic models and dataclasses encode as objects

Quick Start:
    >>> from bitfilament import decode, encode
    >>>
    >>> data = encode({"a": 1, "b": [True, False, "x"]})
    >>> value, offset = decode(data)
    >>> value
    {'a': 1, 'b': [True, False, 'x']}
    >>> offset == len(data)
    True
"""

from __future__ import annotations

from .codec import (
    NumberType,
    WireType,
    classify,
    decode,
    decode_all,
    encode,
    encode_many,
    iter_decode,
    pack_tag,
    prefix_width,
    select_number_type,
    size_prefix,
    split_tag,
)
from .config import DEFAULT_CONFIG, CodecConfig, TextCodec, Utf8TextCodec
from .exceptions import (
    DecodeError,
    EncodeError,
    FilamentError,
    MalformedRegexError,
    TruncatedBufferError,
    UnencodableValueError,
    UnknownWireTypeError,
)
from .models import FilamentModel, decode_model
from .utils import encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "classify",
    # Streams of concatenated values
    "encode_many",
    "iter_decode",
    "decode_all",
    # Tag model
    "WireType",
    "NumberType",
    "pack_tag",
    "split_tag",
    "select_number_type",
    # Size prefixes
    "prefix_width",
    "size_prefix",
    "encoded_size",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    "TextCodec",
    "Utf8TextCodec",
    # Models
    "FilamentModel",
    "decode_model",
    # Exceptions
    "FilamentError",
    "EncodeError",
    "UnencodableValueError",
    "DecodeError",
    "UnknownWireTypeError",
    "TruncatedBufferError",
    "MalformedRegexError",
    # Version
    "__version__",
]
