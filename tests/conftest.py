"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bitfilament import CodecConfig


@pytest.fixture
def sample_document() -> dict:
    """Nested document covering every wire type except regular expressions."""
    return {
        "name": "Grüße",
        "count": 300,
        "ratio": 0.25,
        "flags": [True, False],
        "raw": b"\x00\x01\xff",
        "nested": {"empty_list": [], "empty_map": {}, "neg": -40000},
    }


@pytest.fixture
def big_endian() -> CodecConfig:
    """Codec configuration with big-endian numeric payloads."""
    return CodecConfig(byte_order="big")
