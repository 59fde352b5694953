"""
rational_core: Primitives for fixed-width rational arithmetic.

Provides:
- types: supported integer representations and defaults
- errors: DivisionByZero, ArithmeticOverflow, UnsupportedIntegerType
- widening: next_type / largest_type policy, checked conversion, overflow trap
- canonical: Euclidean GCD and normalization to lowest terms
"""

from .canonical import gcd, is_canonical, simplify
from .errors import ArithmeticOverflow, DivisionByZero, RationalError, UnsupportedIntegerType
from .types import DEFAULT_INT_TYPE, SEPARATOR, SIGNED_INT_TYPES
from .widening import (
    canonical_int_type,
    checked_arithmetic,
    largest_type,
    next_type,
    raw_int_type,
    to_int_type,
)

__all__ = [
    "ArithmeticOverflow",
    "DEFAULT_INT_TYPE",
    "DivisionByZero",
    "RationalError",
    "SEPARATOR",
    "SIGNED_INT_TYPES",
    "UnsupportedIntegerType",
    "canonical_int_type",
    "checked_arithmetic",
    "gcd",
    "is_canonical",
    "largest_type",
    "next_type",
    "raw_int_type",
    "simplify",
    "to_int_type",
]
