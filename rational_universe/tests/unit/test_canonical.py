"""
Unit tests for rational_core/canonical.py.

Acceptance criteria:
- denominator > 0, lowest terms, zero is 0/1, sign on numerator
- normalizing a canonical pair is a no-op
- zero denominator is an explicit DivisionByZero
- reduced pairs that do not fit the representation raise, never wrap
"""

from fractions import Fraction
from itertools import product

import numpy as np
import pytest

from rational_universe.rational_core.canonical import gcd, is_canonical, simplify
from rational_universe.rational_core.errors import ArithmeticOverflow, DivisionByZero


class TestGcd:
    """Euclidean algorithm."""

    def test_known_values(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(100, 10) == 10

    def test_zero_second_operand(self):
        assert gcd(7, 0) == 7

    def test_magnitude_with_negative_operands(self):
        """Sign is left to simplify(); magnitude is the true gcd."""
        assert abs(gcd(-4, 6)) == 2
        assert abs(gcd(4, -6)) == 2
        assert abs(gcd(-4, -6)) == 2


class TestSimplify:
    """Reduction to canonical form."""

    @pytest.mark.parametrize("pair,expected", [
        ((2, -8), (-1, 4)),
        ((0, -128), (0, 1)),
        ((6, 3), (2, 1)),
        ((-3, -9), (1, 3)),
        ((0, 5), (0, 1)),
        ((5, 1), (5, 1)),
        ((-10, 4), (-5, 2)),
    ])
    def test_literal_cases(self, pair, expected):
        assert simplify(*pair) == expected

    def test_zero_denominator_raises(self):
        with pytest.raises(DivisionByZero, match="zero denominator"):
            simplify(1, 0)

    def test_zero_over_zero_raises(self):
        """0/0 is not silently turned into canonical zero."""
        with pytest.raises(DivisionByZero):
            simplify(0, 0)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            simplify(3, 0)

    def test_returns_requested_representation(self):
        n, d = simplify(np.int8(4), np.int8(-6), np.int8)
        assert type(n) is np.int8 and type(d) is np.int8
        assert (n, d) == (-2, 3)

    def test_minimum_value_kept_when_representable(self):
        n, d = simplify(-128, 1, np.int8)
        assert (n, d) == (-128, 1)

    def test_negating_minimum_overflows(self):
        """-128/-1 is 128/1, which int8 cannot hold."""
        with pytest.raises(ArithmeticOverflow):
            simplify(-128, -1, np.int8)

    def test_grid_is_canonical_and_value_preserving(self):
        """Every pair in a small grid reduces to the same value in canonical form."""
        for n, d in product(range(-12, 13), range(-12, 13)):
            if d == 0:
                continue
            rn, rd = simplify(n, d)
            assert rd > 0
            assert is_canonical(rn, rd), f"{n}/{d} -> {rn}/{rd} not canonical"
            assert Fraction(rn, rd) == Fraction(n, d)

    def test_idempotent(self):
        """simplify(simplify(p)) == simplify(p)."""
        for n, d in product(range(-9, 10), range(1, 10)):
            once = simplify(n, d)
            assert simplify(*once) == once


class TestIsCanonical:
    """Invariant checker."""

    def test_canonical_pairs(self):
        assert is_canonical(0, 1)
        assert is_canonical(-1, 4)
        assert is_canonical(7, 1)

    def test_non_canonical_pairs(self):
        assert not is_canonical(0, 2)       # zero must be 0/1
        assert not is_canonical(2, 4)       # not lowest terms
        assert not is_canonical(1, -4)      # sign on denominator
        assert not is_canonical(1, 0)
