"""Unit tests for the numeric codec."""

from __future__ import annotations

import math
import struct

import pytest

from bitfilament import (
    CodecConfig,
    EncodeError,
    NumberType,
    TruncatedBufferError,
    UnknownWireTypeError,
    decode,
    encode,
    select_number_type,
)


class TestNumberTypeSelection:
    """Test narrowest-width subtype selection."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, NumberType.UINT_8),
            (200, NumberType.UINT_8),
            (255, NumberType.UINT_8),
            (256, NumberType.UINT_16),
            (65535, NumberType.UINT_16),
            (65536, NumberType.UINT_32),
            (0xFFFFFFFF, NumberType.UINT_32),
            (0x100000000, NumberType.FLOAT_64),
            (-1, NumberType.INT_8),
            (-128, NumberType.INT_8),
            (-129, NumberType.INT_16),
            (-32768, NumberType.INT_16),
            (-32769, NumberType.INT_32),
            (-0x80000000, NumberType.INT_32),
            (-0x80000001, NumberType.FLOAT_64),
            (1.5, NumberType.FLOAT_64),
            (-0.25, NumberType.FLOAT_64),
            (2.0, NumberType.UINT_8),
            (-300.0, NumberType.INT_16),
            (True, NumberType.TRUE),
            (False, NumberType.FALSE),
        ],
    )
    def test_select(self, value: object, expected: NumberType) -> None:
        """Test threshold boundaries for each width."""
        assert select_number_type(value) is expected

    def test_non_finite_floats(self) -> None:
        """Test nan and infinities fall back to FLOAT_64."""
        assert select_number_type(math.nan) is NumberType.FLOAT_64
        assert select_number_type(math.inf) is NumberType.FLOAT_64
        assert select_number_type(-math.inf) is NumberType.FLOAT_64


class TestNumberEncoding:
    """Test encoded number bytes."""

    def test_booleans_have_no_payload(self) -> None:
        """Test boolean tags."""
        assert encode(True) == b"\x1f"
        assert encode(False) == b"\x1e"

    def test_little_endian_default(self) -> None:
        """Test default numeric byte order."""
        assert encode(200) == b"\x10\xc8"
        assert encode(256) == b"\x11\x00\x01"
        assert encode(65536) == b"\x12\x00\x00\x01\x00"
        assert encode(-128) == b"\x13\x80"
        assert encode(-129) == b"\x14\x7f\xff"
        assert encode(1.5) == b"\x17" + struct.pack("<d", 1.5)

    def test_big_endian(self, big_endian: CodecConfig) -> None:
        """Test big-endian numeric payloads."""
        assert encode(256, config=big_endian) == b"\x11\x01\x00"
        assert encode(-129, config=big_endian) == b"\x14\xff\x7f"
        assert encode(1.5, config=big_endian) == b"\x17" + struct.pack(">d", 1.5)

    def test_large_integers_become_floats(self) -> None:
        """Test integers beyond 32 bits use FLOAT_64."""
        data = encode(2**40)
        assert data[0] == 0x17
        assert decode(data) == (float(2**40), 9)

    def test_integer_too_large(self) -> None:
        """Test integers that overflow a double."""
        with pytest.raises(EncodeError, match="too large"):
            encode(10**400)


class TestNumberDecoding:
    """Test decoding numbers."""

    @pytest.mark.parametrize(
        "value",
        [0, 255, 256, 65535, 65536, 0xFFFFFFFF, -1, -128, -129, -32768, -32769, -0x80000000],
    )
    def test_integer_roundtrip(self, value: int) -> None:
        """Test integers at every width boundary."""
        data = encode(value)
        decoded, offset = decode(data)
        assert decoded == value
        assert isinstance(decoded, int)
        assert offset == len(data)

    def test_int8_is_signed(self) -> None:
        """Test INT_8 payloads decode as signed bytes."""
        assert decode(b"\x13\xff") == (-1, 2)

    def test_float_roundtrip(self) -> None:
        """Test floats with fractional parts."""
        for value in (1.5, -0.1, 3.141592653589793, 1e-300, math.inf, -math.inf):
            assert decode(encode(value)) == (value, 9)

    def test_nan_roundtrip(self) -> None:
        """Test nan survives encoding."""
        decoded, _ = decode(encode(math.nan))
        assert math.isnan(decoded)

    def test_integral_float_decodes_as_int(self) -> None:
        """Test integral floats are compacted to integers."""
        decoded, offset = decode(encode(3.0))
        assert decoded == 3
        assert isinstance(decoded, int)
        assert offset == 2

    def test_booleans(self) -> None:
        """Test booleans consume no payload bytes."""
        assert decode(b"\x1f\x1e") == (True, 1)
        assert decode(b"\x1f\x1e", 1) == (False, 2)

    def test_float32(self) -> None:
        """Test FLOAT_32 payloads are accepted."""
        assert decode(b"\x16" + struct.pack("<f", 0.5)) == (0.5, 5)

    def test_unknown_subtype(self) -> None:
        """Test unused numeric subtype nibbles."""
        with pytest.raises(UnknownWireTypeError, match="numeric subtype"):
            decode(b"\x18\x00")

    def test_truncated_payload(self) -> None:
        """Test a short numeric payload."""
        with pytest.raises(TruncatedBufferError):
            decode(b"\x12\x00\x01")
