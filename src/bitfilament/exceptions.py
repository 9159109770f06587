"""Exception hierarchy for bitfilament.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FilamentError for easy catching of any bitfilament-specific error.
"""

from __future__ import annotations


class FilamentError(Exception):
    """Base exception for all bitfilament errors."""

    pass


class EncodeError(FilamentError):
    """Raised when encoding a value fails.

    Examples:
        - Integer too large to be represented even as a 64-bit float
        - Text that cannot be converted to bytes by the text codec
        - Size prefix that would need more than 15 bytes
    """

    pass


class UnencodableValueError(EncodeError):
    """Raised when a value has no wire representation.

    Examples:
        - None at any nesting level
        - Mapping with non-string keys
        - Regular expression compiled from bytes or with unsupported flags
        - Arbitrary object that cannot be viewed as key/value entries
    """

    pass


class DecodeError(FilamentError):
    """Raised when decoding binary data fails.

    Examples:
        - Invalid UTF-8 in a string payload
        - Object key that does not decode to a string
        - Decoded object that fails model validation
    """

    pass


class UnknownWireTypeError(DecodeError):
    """Raised when a tag byte names a wire type or numeric subtype with no codec."""

    pass


class TruncatedBufferError(DecodeError):
    """Raised when a prefix or payload read runs past the end of the buffer."""

    pass


class MalformedRegexError(DecodeError):
    """Raised when a regular expression payload is not in ``/source/flags`` form.

    Also raised when the recovered source does not compile.
    """

    pass
