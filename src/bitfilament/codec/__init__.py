"""Self-describing binary codec for bitfilament.

This module provides the tag model, the per-type codecs and the top-level
encode/decode dispatchers.
"""

from __future__ import annotations

from .bytepack import prefix_width, size_prefix
from .decoder import decode, decode_all, iter_decode
from .encoder import encode, encode_many
from .inspector import classify
from .numeric import select_number_type
from .tags import NumberType, WireType, pack_tag, split_tag

__all__ = [
    "encode",
    "encode_many",
    "decode",
    "decode_all",
    "iter_decode",
    "classify",
    "select_number_type",
    "prefix_width",
    "size_prefix",
    "WireType",
    "NumberType",
    "pack_tag",
    "split_tag",
]
