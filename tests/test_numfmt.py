"""Tests for the decimal formatter."""

import pytest

from slotlog.numfmt import itoa


def _fmt(value, width):
    buf = bytearray()
    itoa(buf, value, width)
    return bytes(buf)


class TestItoa:
    def test_zero_pads_to_width(self):
        assert _fmt(5, 2) == b"05"
        assert _fmt(7, 4) == b"0007"

    def test_exact_width(self):
        assert _fmt(12, 2) == b"12"
        assert _fmt(2024, 4) == b"2024"

    def test_never_truncates(self):
        assert _fmt(12345, 2) == b"12345"

    def test_negative_width_means_no_padding(self):
        assert _fmt(7, -1) == b"7"
        assert _fmt(1234, -1) == b"1234"

    def test_zero_value(self):
        assert _fmt(0, -1) == b"0"
        assert _fmt(0, 2) == b"00"

    def test_appends_in_place(self):
        buf = bytearray(b"pid=")
        itoa(buf, 42, -1)
        assert buf == bytearray(b"pid=42")

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError):
            _fmt(-1, 2)
