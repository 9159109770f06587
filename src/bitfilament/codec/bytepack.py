"""Byte-level cursor reads and size prefixes.

Size prefixes are minimal-width big-endian unsigned integers: no leading zero
bytes, and no bytes at all for zero. Every read is bounds checked so a short
buffer fails loudly instead of producing partial values.
"""

from __future__ import annotations

from ..exceptions import TruncatedBufferError, UnencodableValueError
from .tags import MAX_INFO

MAX_PREFIX_WIDTH = MAX_INFO


def prefix_width(count: int) -> int:
    """Return the number of bytes in the minimal size prefix for ``count``.

    Args:
        count: Length or entry count (must be >= 0)

    Returns:
        Prefix width in bytes; 0 when count is 0

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Size prefix requires non-negative count, got {count}")
    return (count.bit_length() + 7) // 8


def size_prefix(count: int) -> bytes:
    """Encode ``count`` as a minimal big-endian size prefix.

    Raises:
        UnencodableValueError: If the prefix would need more than 15 bytes
    """
    width = prefix_width(count)
    if width > MAX_PREFIX_WIDTH:
        raise UnencodableValueError(
            f"Count {count} needs a {width}-byte size prefix (max: {MAX_PREFIX_WIDTH})"
        )
    return count.to_bytes(width, "big")


def read_exact(buffer: bytes, offset: int, size: int) -> tuple[bytes, int]:
    """Read exactly ``size`` bytes starting at ``offset``.

    Returns:
        Tuple of (bytes read, offset just past them)

    Raises:
        TruncatedBufferError: If fewer than ``size`` bytes remain
    """
    end = offset + size
    if end > len(buffer):
        raise TruncatedBufferError(
            f"Truncated buffer: need {size} bytes at offset {offset}, "
            f"have {max(len(buffer) - offset, 0)}"
        )
    return buffer[offset:end], end


def read_size_prefix(buffer: bytes, offset: int, width: int) -> tuple[int, int]:
    """Read a ``width``-byte big-endian size prefix.

    A zero width reads nothing and yields a count of 0.
    """
    raw, offset = read_exact(buffer, offset, width)
    return int.from_bytes(raw, "big"), offset
