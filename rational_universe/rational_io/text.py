"""
Textual form of a Rational: "<numerator>/<denominator>".

Output is exactly the canonical pair, decimal, no whitespace, no "+".

Input follows a stream-extraction contract:
1. skip whitespace, read an optionally signed decimal integer
2. consume exactly one character (the separator)
3. skip whitespace, read a second integer
4. build the value through normal construction

Any failure (no digits, a value outside the representation, nothing left
for the separator, a zero denominator) yields canonical zero 0/1 and
never raises. The separator is not validated unless strict_separator is
set, so "3:4" and "3 4" read as 3/4 by default.
"""

import logging
from typing import Optional, Tuple

from ..rational_core.errors import RationalError
from ..rational_core.types import DEFAULT_INT_TYPE, SEPARATOR
from ..rational_core.widening import fits
from ..rational_ops.rational import Rational, specialize

logger = logging.getLogger(__name__)


def format_rational(value: Rational) -> str:
    """
    Format a Rational as "<numerator>/<denominator>".

    Examples:
        >>> format_rational(Rational(2, -8))
        '-1/4'
    """
    return f"{value.numerator}{SEPARATOR}{value.denominator}"


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_int(text: str, pos: int) -> Tuple[Optional[int], int]:
    """
    Read an optionally signed decimal integer starting at pos.

    Returns:
        (value, end) on success, (None, pos_of_failure) otherwise
    """
    pos = _skip_whitespace(text, pos)
    start = pos
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    digits_start = pos
    while pos < len(text) and text[pos] in "0123456789":
        pos += 1
    if pos == digits_start:
        return None, start
    return int(text[start:pos]), pos


def scan_rational(
    text: str,
    pos: int = 0,
    int_type=None,
    *,
    strict_separator: bool = False,
) -> Tuple[Rational, int]:
    """
    Read one Rational from text starting at pos.

    Args:
        text: Source text
        pos: Index to start reading from
        int_type: Representation of the result (default: DEFAULT_INT_TYPE)
        strict_separator: Require the separator to be "/"

    Returns:
        (value, end) where end indexes the first unconsumed character.
        On failure value is 0/1 and end is where reading stopped.

    Raises:
        UnsupportedIntegerType: int_type is not a supported representation
    """
    cls = specialize(DEFAULT_INT_TYPE if int_type is None else int_type)

    numerator, pos = _read_int(text, pos)
    if numerator is None:
        return _recover(cls, text, "numerator is not an integer"), pos

    if pos >= len(text):
        return _recover(cls, text, "missing separator"), pos
    if strict_separator and text[pos] != SEPARATOR:
        return _recover(cls, text, f"separator {text[pos]!r} is not {SEPARATOR!r}"), pos
    pos += 1

    denominator, pos = _read_int(text, pos)
    if denominator is None:
        return _recover(cls, text, "denominator is not an integer"), pos

    if not (fits(numerator, cls.int_type) and fits(denominator, cls.int_type)):
        return _recover(cls, text, "component out of range"), pos

    try:
        value = cls(numerator, denominator)
    except RationalError as exc:
        return _recover(cls, text, str(exc)), pos
    return value, pos


def parse_rational(text: str, int_type=None, *, strict_separator: bool = False) -> Rational:
    """
    Parse "<int><sep><int>" into a Rational; malformed text gives 0/1.

    Examples:
        >>> str(parse_rational("-6/8"))
        '-3/4'
        >>> str(parse_rational("abc"))
        '0/1'
    """
    value, _ = scan_rational(text, 0, int_type, strict_separator=strict_separator)
    return value


def _recover(cls, text: str, reason: str) -> Rational:
    logger.debug("unreadable rational %r (%s), using 0/1", text, reason)
    return cls()
