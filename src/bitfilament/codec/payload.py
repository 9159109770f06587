"""Length-prefixed payload codec for strings, regular expressions and buffers.

Layout: ``[tag | prefix width] [size prefix, big-endian] [payload bytes]``.
Regular expressions reuse the string layout on their ``/source/flags`` text
with the REGEXP wire type in the tag.
"""

from __future__ import annotations

import re
from typing import Union

from ..config import CodecConfig
from ..exceptions import DecodeError, EncodeError, MalformedRegexError, UnencodableValueError
from .bytepack import read_exact, read_size_prefix, size_prefix
from .tags import INFO_MASK, WireType, pack_tag

BufferLike = Union[bytes, bytearray, memoryview]

# Flag letters in the order they are written after the closing slash.
# g, u and y are accepted on decode and have no Python equivalent.
REGEX_FLAGS: tuple[tuple[str, int], ...] = (
    ("i", re.IGNORECASE),
    ("m", re.MULTILINE),
    ("s", re.DOTALL),
)
_SUPPORTED_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL | re.UNICODE
_REGEX_TEXT = re.compile(r"/(?P<source>.*)/g?(?P<i>i?)(?P<m>m?)(?P<s>s?)u?y?", re.DOTALL)


def encode_length_prefixed(wire_type: WireType, payload: bytes) -> bytes:
    """Encode raw payload bytes behind a tag and minimal size prefix."""
    prefix = size_prefix(len(payload))
    return bytes([pack_tag(wire_type, len(prefix))]) + prefix + payload


def decode_length_prefixed(info: int, buffer: bytes, offset: int) -> tuple[bytes, int]:
    """Decode payload bytes whose size prefix is ``info`` bytes wide.

    Returns:
        Tuple of (payload, offset just past it)

    Raises:
        TruncatedBufferError: If the prefix or payload is incomplete
    """
    length, offset = read_size_prefix(buffer, offset, info)
    return read_exact(buffer, offset, length)


def encode_string(text: str, config: CodecConfig) -> bytes:
    try:
        payload = config.text_codec.encode(text)
    except UnicodeError as err:
        raise EncodeError(f"Cannot encode text {text!r}: {err}") from err
    return encode_length_prefixed(WireType.STRING, payload)


def decode_string(info: int, buffer: bytes, offset: int, config: CodecConfig) -> tuple[str, int]:
    payload, offset = decode_length_prefixed(info, buffer, offset)
    try:
        return config.text_codec.decode(payload), offset
    except UnicodeError as err:
        raise DecodeError(f"Invalid text payload: {err}") from err


def encode_buffer(data: BufferLike) -> bytes:
    return encode_length_prefixed(WireType.BUFFER, bytes(data))


def decode_buffer(info: int, buffer: bytes, offset: int) -> tuple[bytes, int]:
    return decode_length_prefixed(info, buffer, offset)


def regexp_text(pattern: re.Pattern) -> str:
    """Render a compiled pattern as ``/source/flags``.

    Raises:
        UnencodableValueError: If the pattern is a bytes pattern or uses flags
            other than IGNORECASE, MULTILINE and DOTALL. Inline flags such as
            ``(?x)`` or ``(?a)`` are part of ``pattern.flags`` and count too.
    """
    if not isinstance(pattern.pattern, str):
        raise UnencodableValueError(
            "Only str regular expressions can be encoded, got a bytes pattern"
        )

    unsupported = pattern.flags & ~_SUPPORTED_FLAGS
    if unsupported:
        raise UnencodableValueError(
            f"Regular expression {pattern.pattern!r} uses unsupported flags "
            f"{re.RegexFlag(unsupported)!r}"
        )

    flags = "".join(letter for letter, flag in REGEX_FLAGS if pattern.flags & flag)
    return f"/{pattern.pattern}/{flags}"


def encode_regexp(pattern: re.Pattern, config: CodecConfig) -> bytes:
    encoded = bytearray(encode_string(regexp_text(pattern), config))
    encoded[0] = pack_tag(WireType.REGEXP, encoded[0] & INFO_MASK)
    return bytes(encoded)


def decode_regexp(
    info: int, buffer: bytes, offset: int, config: CodecConfig
) -> tuple[re.Pattern, int]:
    """Decode a ``/source/flags`` payload back into a compiled pattern.

    Raises:
        MalformedRegexError: If the text is malformed (strict mode) or the
            source does not compile
    """
    text, offset = decode_string(info, buffer, offset, config)

    match = _REGEX_TEXT.fullmatch(text)
    if match is None:
        if config.strict_regex:
            raise MalformedRegexError(
                f"Regular expression text {text!r} is not of the form /source/flags"
            )
        source, flags = text, 0
    else:
        source = match.group("source")
        flags = 0
        for letter, flag in REGEX_FLAGS:
            if match.group(letter):
                flags |= flag

    try:
        return re.compile(source, flags), offset
    except re.error as err:
        raise MalformedRegexError(
            f"Regular expression source {source!r} does not compile: {err}"
        ) from err
