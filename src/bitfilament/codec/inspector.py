"""Runtime classification of Python values into wire types."""

from __future__ import annotations

import array
import re
from typing import Any

from .tags import WireType

_BUFFER_TYPES = (bytes, bytearray, memoryview)
_SEQUENCE_TYPES = (list, tuple, array.array)


def classify(value: Any) -> WireType | None:
    """Return the wire type a value encodes as.

    Checks run in a fixed order: text, numbers and booleans, byte buffers,
    regular expressions, then sequences. Anything else is treated as an object;
    whether it can actually be viewed as key/value entries is decided when it
    is encoded.

    Args:
        value: Value to classify

    Returns:
        WireType for the value, or None for None (which has no wire representation)

    Example:
        >>> classify("abc")
        <WireType.STRING: 2>
        >>> classify([1, 2])
        <WireType.ARRAY: 5>
        >>> classify({"a": 1})
        <WireType.OBJECT: 4>
    """
    if value is None:
        return None

    if isinstance(value, str):
        return WireType.STRING
    if isinstance(value, (bool, int, float)):
        return WireType.NUMBER

    if isinstance(value, _BUFFER_TYPES):
        return WireType.BUFFER
    if isinstance(value, re.Pattern):
        return WireType.REGEXP

    if isinstance(value, _SEQUENCE_TYPES):
        return WireType.ARRAY

    return WireType.OBJECT
