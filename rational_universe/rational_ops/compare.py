"""
Relational kernels for canonical Rationals.

Both operands must already be Rationals (raw integers are promoted by the
caller). Every kernel relies on canonical form:
- equality is component-wise, valid only because each value has exactly
  one representation
- ordering reads the sign of the normalized difference's numerator, valid
  because the denominator is always positive
- <= and >= negate the strict opposite, valid because the order is total

The difference is formed on exact ints and never narrowed, so ordering is
defined for every pair of representable values.
"""

from ..rational_core.canonical import simplify


def equal(left, right) -> bool:
    return bool(left.numerator == right.numerator and left.denominator == right.denominator)


def equals_integer(left, value) -> bool:
    """A Rational equals a raw integer iff it is value/1."""
    return int(left.denominator) == 1 and int(left.numerator) == int(value)


def difference_sign(left, right) -> int:
    """Sign (-1, 0, 1) of left - right."""
    a, b = int(left.numerator), int(left.denominator)
    c, d = int(right.numerator), int(right.denominator)
    numerator, _ = simplify(d * a - b * c, b * d)
    return (numerator > 0) - (numerator < 0)


def less(left, right) -> bool:
    return difference_sign(right, left) > 0


def greater(left, right) -> bool:
    return difference_sign(left, right) > 0


def less_equal(left, right) -> bool:
    return not greater(left, right)


def greater_equal(left, right) -> bool:
    return not less(left, right)
