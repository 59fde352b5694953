"""
Error taxonomy for fixed-width rational arithmetic.

- DivisionByZero: zero denominator at normalization, or division by a
  zero-valued Rational
- ArithmeticOverflow: a value does not fit its fixed-width representation
- UnsupportedIntegerType: specialisation with a representation that is not
  a supported signed integer type

Malformed text is not an error: the parse functions recover to 0/1.
"""


class RationalError(ArithmeticError):
    """Base class for arithmetic failures of the rational type."""


class DivisionByZero(RationalError, ZeroDivisionError):
    """A denominator (or divisor) of zero reached normalization or division."""


class ArithmeticOverflow(RationalError, OverflowError):
    """A computed or converted value does not fit its integer representation."""


class UnsupportedIntegerType(TypeError):
    """The requested integer representation has no widening policy."""
