"""Unit tests for the radix converter."""

import pytest

from ksuid.radix import convert


class TestConvert:
    """Tests for convert()."""

    def test_decimal_to_binary(self):
        """Converts a small number between bases."""
        assert convert([1, 0], 10, 2) == [1, 0, 1, 0]

    def test_bytes_to_base62(self):
        """256 is 4*62 + 8."""
        assert convert([1, 0], 256, 62) == [4, 8]

    def test_base62_to_bytes(self):
        """Inverse of the byte direction."""
        assert convert([4, 8], 62, 256) == [1, 0]

    def test_most_significant_digit_first(self):
        """Output is big-endian."""
        assert convert([0x12, 0x34], 256, 16) == [1, 2, 3, 4]

    def test_zero_without_fixed_length(self):
        """Zero has a single zero digit."""
        assert convert([0, 0, 0], 256, 62) == [0]

    def test_empty_input_is_zero(self):
        """No digits means zero."""
        assert convert([], 62, 256) == [0]

    def test_zero_with_fixed_length(self):
        """Zero pads to the full width."""
        assert convert([0] * 20, 256, 62, fixed_length=27) == [0] * 27

    def test_fixed_length_left_pads(self):
        """Short results are left-padded with zeros."""
        assert convert([1], 256, 62, fixed_length=5) == [0, 0, 0, 0, 1]

    def test_leading_zero_digits_dropped(self):
        """Leading zeros carry no magnitude."""
        assert convert([0, 0, 1, 0], 256, 62) == [4, 8]

    def test_longer_than_fixed_length_not_truncated(self):
        """Overflowing results come back whole."""
        assert len(convert([61] * 27, 62, 256, fixed_length=20)) == 21

    def test_full_width_max_value(self):
        """Twenty 0xFF bytes need exactly 27 base62 digits."""
        assert len(convert([255] * 20, 256, 62)) == 27

    def test_invalid_digit(self):
        """Digits must be below the source base."""
        with pytest.raises(ValueError):
            convert([62], 62, 256)

    def test_negative_digit(self):
        """Negative digits are rejected."""
        with pytest.raises(ValueError):
            convert([-1], 10, 2)

    def test_invalid_base(self):
        """Bases below 2 are rejected."""
        with pytest.raises(ValueError):
            convert([1], 1, 10)
        with pytest.raises(ValueError):
            convert([1], 10, 0)

    def test_does_not_mutate_input(self):
        """Input sequence is left untouched."""
        digits = [0, 1, 2]
        convert(digits, 256, 62, fixed_length=4)
        assert digits == [0, 1, 2]
