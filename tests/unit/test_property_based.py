"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from bitfilament import (
    CodecConfig,
    decode,
    decode_all,
    encode,
    encode_many,
    encoded_size,
    prefix_width,
    size_prefix,
)
from bitfilament.codec.bytepack import read_size_prefix

scalars = st.one_of(
    st.booleans(),
    st.integers(min_value=-(2**31), max_value=2**32 - 1),
    st.floats(allow_nan=False),
    st.text(),
    st.binary(),
)

values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=8), children, max_size=5),
    ),
    max_leaves=25,
)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(value=values)
    def test_encode_decode_roundtrip(self, value: object) -> None:
        """Test decode(encode(v)) == (v, len(encode(v)))."""
        data = encode(value)
        assert decode(data) == (value, len(data))

    @given(value=values)
    def test_big_endian_roundtrip(self, value: object) -> None:
        """Test round-trip with big-endian numbers."""
        config = CodecConfig(byte_order="big")
        data = encode(value, config=config)
        assert decode(data, config=config) == (value, len(data))

    @given(value=values)
    def test_encode_deterministic(self, value: object) -> None:
        """Test encoding is deterministic."""
        assert encode(value) == encode(value)

    @given(value=values)
    def test_encoded_size(self, value: object) -> None:
        """Test encoded_size agrees with encode."""
        assert encoded_size(value) == len(encode(value))

    @given(items=st.lists(values, max_size=5))
    def test_concatenated_roundtrip(self, items: list) -> None:
        """Test decoding concatenated values in order."""
        assert decode_all(encode_many(items)) == items

    @given(value=st.integers(min_value=-(2**31), max_value=2**32 - 1))
    def test_integers_use_integer_subtypes(self, value: int) -> None:
        """Test 32-bit range integers never fall back to floats."""
        data = encode(value)
        assert data[0] & 0x0F <= 0x05
        assert isinstance(decode(data)[0], int)


class TestSizePrefixProperties:
    """Property-based tests for size prefixes."""

    @given(count=st.integers(min_value=0, max_value=256**15 - 1))
    def test_prefix_roundtrip(self, count: int) -> None:
        """Test prefixes read back to the same count."""
        prefix = size_prefix(count)
        assert len(prefix) == prefix_width(count)
        assert read_size_prefix(prefix, 0, len(prefix)) == (count, len(prefix))

    @given(count=st.integers(min_value=1, max_value=256**15 - 1))
    def test_prefix_is_minimal(self, count: int) -> None:
        """Test prefixes never start with a zero byte."""
        assert size_prefix(count)[0] != 0
