"""Tests for the codec module."""

import pytest

from lexibit.codec import (
    ALPHABET,
    MASK_LIMIT,
    WILDCARD,
    decode,
    decode_letters,
    encode,
    encode_letters,
    fill_pattern,
    letter_bit,
    wildcard_pattern,
    wildcard_position,
)


class TestEncode:
    """Tests for letter -> bit mapping."""

    def test_reverse_alphabetical(self):
        """Test 'a' is the highest bit and 'z' the lowest."""
        assert encode(0) == 25
        assert encode(25) == 0
        assert encode(ALPHABET.index("m")) == 13

    def test_out_of_range(self):
        """Test invalid letter indices are rejected."""
        with pytest.raises(ValueError):
            encode(-1)
        with pytest.raises(ValueError):
            encode(26)

    def test_letter_bit(self):
        """Test single letter masks."""
        assert letter_bit("a") == 1 << 25
        assert letter_bit("z") == 1

    def test_letter_bit_invalid(self):
        """Test non a-z letters are rejected."""
        for bad in ("A", "", "ab", "&", "é"):
            with pytest.raises(ValueError):
                letter_bit(bad)

    def test_encode_letters(self):
        """Test packing several letters."""
        assert encode_letters("lr") == (1 << 14) | (1 << 8)
        assert encode_letters("") == 0
        assert encode_letters(ALPHABET) == MASK_LIMIT - 1

    def test_upper_bits_unused(self):
        """Test no letter touches the upper 6 bits of a 32-bit field."""
        assert encode_letters(ALPHABET) < 1 << 26


class TestDecode:
    """Tests for mask -> letters."""

    def test_decode_order(self):
        """Test letters come out reverse alphabetically."""
        assert decode_letters(encode_letters("lr")) == ["r", "l"]
        assert decode_letters(MASK_LIMIT - 1) == list(reversed(ALPHABET))

    def test_decode_empty(self):
        """Test the empty mask decodes to nothing."""
        assert list(decode(0)) == []

    def test_decode_indices(self):
        """Test decode yields letter indices."""
        assert list(decode(letter_bit("a"))) == [0]
        assert list(decode(letter_bit("z"))) == [25]

    def test_decode_inverts_encode(self):
        """Test every letter subset survives encode then decode."""
        for letters in ("a", "z", "aeiou", "qxz", "bcdfg"):
            assert sorted(decode_letters(encode_letters(letters))) == sorted(letters)

    def test_decode_out_of_range(self):
        """Test masks outside 26 bits are rejected."""
        with pytest.raises(ValueError):
            list(decode(MASK_LIMIT))
        with pytest.raises(ValueError):
            list(decode(-1))


class TestPatterns:
    """Tests for wildcard pattern helpers."""

    def test_wildcard_pattern(self):
        """Test blanking each position."""
        assert wildcard_pattern("cold", 0) == "&old"
        assert wildcard_pattern("cold", 1) == "c&ld"
        assert wildcard_pattern("cold", 3) == "col&"

    def test_fill_pattern(self):
        """Test substituting into the blank."""
        assert fill_pattern("co&d", "r") == "cord"
        assert fill_pattern("&old", "b") == "bold"

    def test_wildcard_position(self):
        """Test locating the blank."""
        assert wildcard_position("co&d") == 2
        assert wildcard_position("cold") == -1
        assert wildcard_position(WILDCARD * 2 + "ld") == -1
