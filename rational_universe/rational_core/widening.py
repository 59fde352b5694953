"""
Integer-widening policy for fixed-width rational arithmetic.

Provides:
- canonical_int_type: resolve any signed-integer spelling to a supported type
- next_type: representation wide enough for products of two T values
- largest_type: the wider of two representations (result type of a binary op)
- raw_int_type: representation carried by a raw integer operand
- to_int_type: checked conversion into a representation (widen or narrow)
- checked_arithmetic: context that traps NumPy integer overflow

Resolution is purely declarative: a fixed table over the four NumPy signed
scalar types. int64 has no wider fixed-width type and maps to itself, so
products of two int64 values can overflow; checked_arithmetic surfaces
that as ArithmeticOverflow instead of wrapping.
"""

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional, Tuple

import numpy as np

from .errors import ArithmeticOverflow, UnsupportedIntegerType
from .types import SIGNED_INT_TYPES, IntType

logger = logging.getLogger(__name__)

_BY_BITS = {np.dtype(t).itemsize * 8: t for t in SIGNED_INT_TYPES}

_NEXT_TYPE = {
    np.int8: np.int16,
    np.int16: np.int32,
    np.int32: np.int64,
    np.int64: np.int64,
}


# =============================================================================
# Type Resolution
# =============================================================================

def canonical_int_type(int_type) -> IntType:
    """
    Resolve an integer representation to one of SIGNED_INT_TYPES.

    Accepts anything numpy.dtype() understands as a signed integer:
    np.int32, np.intc, np.longlong, "int16", the builtin int, ...

    Raises:
        UnsupportedIntegerType: unsigned, boolean, floating or unknown types
    """
    if int_type is None:
        raise UnsupportedIntegerType("integer representation must not be None")
    try:
        dtype = np.dtype(int_type)
    except TypeError as exc:
        raise UnsupportedIntegerType(f"not an integer representation: {int_type!r}") from exc

    if dtype.kind != "i":
        raise UnsupportedIntegerType(
            f"{dtype.name} is not a signed integer representation"
        )
    return _BY_BITS[dtype.itemsize * 8]


def next_type(int_type) -> IntType:
    """Representation used for overflow-safe intermediates of int_type."""
    return _NEXT_TYPE[canonical_int_type(int_type)]


def largest_type(left, right) -> IntType:
    """The representation with the greater range of left and right."""
    left = canonical_int_type(left)
    right = canonical_int_type(right)
    return left if bit_width(left) >= bit_width(right) else right


def bit_width(int_type) -> int:
    return np.dtype(int_type).itemsize * 8


@lru_cache(maxsize=None)
def int_bounds(int_type) -> Tuple[int, int]:
    """Inclusive (min, max) of int_type as Python ints."""
    info = np.iinfo(int_type)
    return int(info.min), int(info.max)


# =============================================================================
# Values
# =============================================================================

def is_integer_value(value) -> bool:
    """True for Python ints and NumPy integer scalars (bool excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_raw_integer(value) -> bool:
    """True for values usable as raw-integer operands (signed only)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.signedinteger))


def fits(value: int, int_type) -> bool:
    lo, hi = int_bounds(canonical_int_type(int_type))
    return lo <= int(value) <= hi


def raw_int_type(value, preferred: Optional[IntType] = None) -> IntType:
    """
    Representation carried by a raw integer operand.

    A NumPy scalar carries its own type. A Python int takes `preferred`
    when it fits, otherwise the narrowest supported type that holds it.

    Raises:
        ArithmeticOverflow: Python int beyond the int64 range
    """
    if isinstance(value, np.signedinteger):
        return canonical_int_type(type(value))

    value = int(value)
    if preferred is not None and fits(value, preferred):
        return canonical_int_type(preferred)
    for int_type in SIGNED_INT_TYPES:
        if fits(value, int_type):
            return int_type
    raise ArithmeticOverflow(f"integer {value} exceeds every supported representation")


def to_int_type(value, int_type):
    """
    Checked conversion of an integer value into int_type.

    Widening is always exact. Narrowing never truncates: a value outside
    the target range raises.

    Raises:
        TypeError: value is not an integer
        ArithmeticOverflow: value does not fit int_type
    """
    if not is_integer_value(value):
        raise TypeError(f"expected an integer, got {type(value).__name__}")

    value = int(value)
    int_type = canonical_int_type(int_type)
    if not fits(value, int_type):
        logger.debug("narrowing rejected: %d does not fit %s", value, np.dtype(int_type).name)
        raise ArithmeticOverflow(
            f"{value} does not fit {np.dtype(int_type).name}"
        )
    return int_type(value)


@contextmanager
def checked_arithmetic(operation: str) -> Iterator[None]:
    """
    Trap integer overflow of NumPy scalar arithmetic inside the block.

    NumPy reports scalar integer overflow through its floating-point error
    state; under over="raise" it becomes FloatingPointError, re-raised here
    as ArithmeticOverflow.
    """
    try:
        with np.errstate(over="raise"):
            yield
    except ArithmeticOverflow:
        raise
    except (FloatingPointError, OverflowError) as exc:
        raise ArithmeticOverflow(f"{operation} overflowed its integer representation") from exc
