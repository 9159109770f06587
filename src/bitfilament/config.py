"""Codec configuration.

This module provides the configuration dataclass shared by every encode and
decode call, together with the pluggable text codec used for string payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

ByteOrder = Literal["little", "big"]


@runtime_checkable
class TextCodec(Protocol):
    """Converts text to raw bytes and back."""

    def encode(self, text: str) -> bytes: ...

    def decode(self, data: bytes) -> str: ...


class Utf8TextCodec:
    """Default text codec: strict UTF-8."""

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8")

    def decode(self, data: bytes) -> str:
        return data.decode("utf-8")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for encoding and decoding filaments.

    Both ends of a channel must use the same configuration; nothing about it is
    stored in the encoded bytes.

    Attributes:
        byte_order: Byte order of numeric payloads, ``"little"`` (default) or ``"big"``.
            Size prefixes are always big-endian regardless of this setting.

        text_codec: Text codec used for string, regular expression and object key
            payloads (default UTF-8).

        strict_regex: If True (default), a regular expression payload that is not of
            the form ``/source/flags`` raises MalformedRegexError. If False, the whole
            text is compiled as the pattern with no flags.

    Examples:
        ```python
        from bitfilament import CodecConfig, decode, encode

        config = CodecConfig(byte_order="big")
        data = encode(1234, config=config)
        value, _ = decode(data, config=config)
        ```
    """

    byte_order: ByteOrder = "little"
    text_codec: TextCodec = field(default_factory=Utf8TextCodec)
    strict_regex: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.byte_order not in ("little", "big"):
            raise ValueError(f"byte_order must be 'little' or 'big', got {self.byte_order!r}")

        if not isinstance(self.text_codec, TextCodec):
            raise ValueError(
                "text_codec must provide encode() and decode(), "
                f"got {type(self.text_codec).__name__}"
            )

    @property
    def struct_prefix(self) -> str:
        """struct format prefix matching ``byte_order``."""
        return "<" if self.byte_order == "little" else ">"


DEFAULT_CONFIG = CodecConfig()


def resolve_config(config: CodecConfig | None) -> CodecConfig:
    """Return ``config`` or the module default when None."""
    return DEFAULT_CONFIG if config is None else config
