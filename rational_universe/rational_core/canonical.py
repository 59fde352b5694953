"""
Canonical form for numerator/denominator pairs.

A pair is canonical when:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. zero is exactly 0/1
4. the sign is carried by the numerator alone

simplify() is the only way a pair becomes observable as a Rational.
Reduction itself runs on exact Python ints; the reduced pair is then
converted (checked) into the requested representation, so the one case
that cannot be represented (negating the minimum, e.g. int8 -128/-1)
raises instead of wrapping.
"""

from typing import Optional, Tuple

from .errors import DivisionByZero
from .types import IntType
from .widening import to_int_type


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    gcd(a, b) = gcd(b, a mod b), stopping when the second operand is 0.
    The sign of the result follows Python's remainder convention and is
    not normalized; simplify() fixes the sign afterwards.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(7, 0)
        7
    """
    while b != 0:
        a, b = b, a % b
    return a


def simplify(numerator, denominator, int_type: Optional[IntType] = None) -> Tuple:
    """
    Reduce a pair to canonical form.

    Args:
        numerator: Integer numerator
        denominator: Integer denominator (must be non-zero)
        int_type: Representation of the result; None returns Python ints

    Returns:
        (numerator, denominator) in canonical form

    Raises:
        DivisionByZero: denominator == 0 (0/0 included)
        ArithmeticOverflow: a reduced component does not fit int_type

    Examples:
        >>> simplify(2, -8)
        (-1, 4)
        >>> simplify(0, -128)
        (0, 1)
    """
    n, d = int(numerator), int(denominator)
    if d == 0:
        raise DivisionByZero(f"zero denominator for numerator {n}")

    if n == 0:
        n, d = 0, 1
    else:
        g = gcd(n, d)
        n //= g
        d //= g
        # Sign on numerator only
        if d < 0:
            n, d = -n, -d

    if int_type is None:
        return n, d
    return to_int_type(n, int_type), to_int_type(d, int_type)


def is_canonical(numerator, denominator) -> bool:
    """True if the pair already satisfies every canonical-form invariant."""
    n, d = int(numerator), int(denominator)
    if d <= 0:
        return False
    if n == 0:
        return d == 1
    return abs(gcd(n, d)) == 1
