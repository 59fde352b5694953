"""
Unit tests for rational_io/text.py.

Covers:
- format: canonical "n/d", no whitespace, no "+"
- parse: whitespace, signs, normalization, permissive separator
- malformed input and zero denominators read as 0/1 without raising
- strict separator mode
- scan positions for consecutive values
"""

import logging

import numpy as np
import pytest

from rational_universe.rational_core.errors import UnsupportedIntegerType
from rational_universe.rational_io.text import format_rational, parse_rational, scan_rational
from rational_universe.rational_ops.rational import Rational


def pair(r):
    return (int(r.numerator), int(r.denominator))


class TestFormat:
    """Output form."""

    def test_canonical_pair(self):
        assert format_rational(Rational(2, -8)) == "-1/4"
        assert format_rational(Rational(5)) == "5/1"
        assert format_rational(Rational()) == "0/1"

    def test_matches_str(self):
        r = Rational[np.int16](-300, 7)
        assert format_rational(r) == str(r) == "-300/7"


class TestParse:
    """Permissive reading."""

    @pytest.mark.parametrize("text,expected", [
        ("1/2", (1, 2)),
        ("-6/8", (-3, 4)),
        ("  3/4", (3, 4)),
        ("+5/10", (1, 2)),
        ("3/-6", (-1, 2)),
        ("1/ 2", (1, 2)),
        ("12/4 trailing", (3, 1)),
    ])
    def test_well_formed(self, text, expected):
        assert pair(parse_rational(text)) == expected

    @pytest.mark.parametrize("text", ["3:4", "3 4", "3x4"])
    def test_any_separator_by_default(self, text):
        assert pair(parse_rational(text)) == (3, 4)

    @pytest.mark.parametrize("text", [
        "abc",
        "",
        "   ",
        "5",
        "1/x",
        "1/",
        "/2",
        "- 1/2",
        "1 / 2",    # separator is the space, "/" is not an integer
    ])
    def test_malformed_reads_zero(self, text):
        assert pair(parse_rational(text)) == (0, 1)

    def test_zero_denominator_reads_zero(self):
        assert pair(parse_rational("1/0")) == (0, 1)
        assert pair(parse_rational("0/0")) == (0, 1)

    def test_result_type(self):
        assert type(parse_rational("1/2")) is Rational[np.int64]
        assert type(parse_rational("1/2", np.int8)) is Rational[np.int8]
        assert type(parse_rational("garbage", np.int16)) is Rational[np.int16]

    def test_unsupported_int_type_raises(self):
        with pytest.raises(UnsupportedIntegerType):
            parse_rational("1/2", np.uint8)


class TestRanges:
    """Components must fit the requested representation."""

    def test_in_range(self):
        assert pair(parse_rational("-128/127", np.int8)) == (-128, 127)

    def test_component_out_of_range_reads_zero(self):
        assert pair(parse_rational("300/1", np.int8)) == (0, 1)

    def test_unrepresentable_normal_form_reads_zero(self):
        """-128/-1 is 128/1, outside int8."""
        assert pair(parse_rational("-128/-1", np.int8)) == (0, 1)

    def test_wider_type_accepts(self):
        assert pair(parse_rational("300/1", np.int16)) == (300, 1)

    def test_beyond_int64(self):
        assert pair(parse_rational(f"{2**64}/1")) == (0, 1)


class TestStrictSeparator:
    """strict_separator only accepts '/'."""

    def test_slash_accepted(self):
        assert pair(parse_rational("3/4", strict_separator=True)) == (3, 4)

    @pytest.mark.parametrize("text", ["3:4", "3 4"])
    def test_other_separators_read_zero(self, text):
        assert pair(parse_rational(text, strict_separator=True)) == (0, 1)


class TestScan:
    """Positions after reading."""

    def test_consecutive_values(self):
        text = "1/2 3/4"
        first, end = scan_rational(text)
        assert pair(first) == (1, 2) and end == 3
        second, end = scan_rational(text, end)
        assert pair(second) == (3, 4) and end == 7

    def test_failure_position(self):
        value, end = scan_rational("  x/2")
        assert pair(value) == (0, 1)
        assert end == 2

    def test_int_type_argument(self):
        value, _ = scan_rational("5/10", 0, np.int16)
        assert type(value) is Rational[np.int16]

    def test_failure_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="rational_universe.rational_io.text"):
            parse_rational("1/0")
        assert "unreadable rational '1/0'" in caplog.text


class TestRoundTrip:
    """parse(format(r)) == r in every representation."""

    @pytest.mark.parametrize("int_type", [np.int8, np.int16, np.int32, np.int64])
    def test_round_trip(self, int_type):
        lo, hi = np.iinfo(int_type).min, np.iinfo(int_type).max
        for n, d in [(0, 1), (1, 2), (-3, 4), (int(hi), 1), (int(lo), 1), (1, int(hi))]:
            r = Rational[int_type](n, d)
            assert parse_rational(format_rational(r), int_type) == r
