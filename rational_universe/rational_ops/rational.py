"""
Rational value type over a fixed-width integer representation.

Rational[T] holds numerator/denominator as NumPy scalars of T (np.int8 ..
np.int64) in canonical lowest terms. Bare Rational(...) uses
DEFAULT_INT_TYPE.

Arithmetic:
- Compound operators (+=, -=, *=, /=) mutate in place. They compute in
  next_type(T), renormalize there, and narrow back into T (checked).
- Binary operators pick largest_type(T, U) of the two operands, copy the
  left operand into it, and delegate to the compound operator.
- A raw integer operand is the fraction value/1. Raw-on-the-left forms
  delegate to the mirrored form: raw + r is r + raw, raw * r is r * raw,
  raw - r is (-r) + raw with r first promoted to the result type, raw / r
  builds value/1 and divides in place.

Every value that becomes observable has passed through simplify().
"""

from typing import Dict, Optional

import numpy as np

from ..rational_core import widening
from ..rational_core.canonical import simplify
from ..rational_core.errors import DivisionByZero
from ..rational_core.types import DEFAULT_INT_TYPE, SEPARATOR, IntType
from ..rational_core.widening import (
    canonical_int_type,
    checked_arithmetic,
    is_integer_value,
    is_raw_integer,
    largest_type,
    raw_int_type,
    to_int_type,
)
from . import compare

_SPECIALIZATIONS: Dict[IntType, type] = {}


def specialize(int_type) -> type:
    """
    Return the Rational class for an integer representation.

    The widening target is resolved here, once per representation; an
    unsupported representation fails here and never during arithmetic.

    Raises:
        UnsupportedIntegerType: int_type is not a supported signed integer
    """
    int_type = canonical_int_type(int_type)
    cls = _SPECIALIZATIONS.get(int_type)
    if cls is None:
        name = f"Rational[{np.dtype(int_type).name}]"
        cls = type(
            name,
            (Rational,),
            {
                "__slots__": (),
                "__module__": __name__,
                "__qualname__": name,
                "int_type": int_type,
                "next_type": widening.next_type(int_type),
            },
        )
        _SPECIALIZATIONS[int_type] = cls
    return cls


class Rational:
    """
    Exact fraction in canonical form: denominator > 0, lowest terms, zero
    as 0/1, sign on the numerator.

    Examples:
        >>> r = Rational[np.int32](2, -8)
        >>> str(r)
        '-1/4'
        >>> str(Rational[np.int32](1, 2) + Rational[np.int64](1, 3))
        '5/6'
    """

    __slots__ = ("_numerator", "_denominator")

    # NumPy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    # Mutable value
    __hash__ = None

    int_type: Optional[IntType] = None
    next_type: Optional[IntType] = None

    def __class_getitem__(cls, int_type):
        return specialize(int_type)

    def __new__(cls, numerator=0, denominator=1):
        if cls.int_type is None:
            cls = specialize(DEFAULT_INT_TYPE)
        return super().__new__(cls)

    def __init__(self, numerator=0, denominator=1):
        if isinstance(numerator, Rational):
            if not (is_integer_value(denominator) and denominator == 1):
                raise TypeError("a Rational source cannot take a separate denominator")
            # Source is canonical: convert only
            self._numerator = to_int_type(numerator._numerator, self.int_type)
            self._denominator = to_int_type(numerator._denominator, self.int_type)
        else:
            self.set(numerator, denominator)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def set(self, numerator, denominator) -> "Rational":
        """
        Replace the value with numerator/denominator and normalize.

        Raises:
            TypeError: a component is not an integer
            ArithmeticOverflow: a component does not fit int_type
            DivisionByZero: denominator == 0
        """
        numerator = to_int_type(numerator, self.int_type)
        denominator = to_int_type(denominator, self.int_type)
        self._numerator, self._denominator = simplify(numerator, denominator, self.int_type)
        return self

    def copy(self) -> "Rational":
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __reduce__(self):
        return _rebuild, (np.dtype(self.int_type).name, int(self._numerator), int(self._denominator))

    def _assign(self, source: "Rational") -> "Rational":
        # Narrow an already-canonical value into this representation
        self._numerator = to_int_type(source._numerator, self.int_type)
        self._denominator = to_int_type(source._denominator, self.int_type)
        return self

    # -------------------------------------------------------------------------
    # Operand Coercion
    # -------------------------------------------------------------------------

    def _coerce(self, other):
        """other as a Rational of this representation, or NotImplemented."""
        if isinstance(other, Rational):
            if other.int_type is self.int_type:
                return other
            return type(self)(other)
        if is_raw_integer(other):
            return type(self)(other)
        return NotImplemented

    def _as_rational(self, other):
        """other as a Rational of its own representation, or NotImplemented."""
        if isinstance(other, Rational):
            return other
        if is_raw_integer(other):
            return specialize(raw_int_type(other, self.int_type))(other)
        return NotImplemented

    def _promote(self, other):
        """Copy of self in largest_type(T, U), or NotImplemented."""
        if isinstance(other, Rational):
            result_type = largest_type(self.int_type, other.int_type)
        elif is_raw_integer(other):
            result_type = largest_type(self.int_type, raw_int_type(other, self.int_type))
        else:
            return NotImplemented
        return specialize(result_type)(self)

    def _widened(self, right: "Rational"):
        wide = self.next_type
        return (
            wide(self._numerator),
            wide(self._denominator),
            wide(right._numerator),
            wide(right._denominator),
        )

    # -------------------------------------------------------------------------
    # Compound Arithmetic (computed in next_type, narrowed back)
    # -------------------------------------------------------------------------

    def __iadd__(self, other):
        right = self._coerce(other)
        if right is NotImplemented:
            return NotImplemented
        a, b, c, d = self._widened(right)
        with checked_arithmetic("addition"):
            return self._assign(specialize(self.next_type)(d * a + b * c, b * d))

    def __isub__(self, other):
        right = self._coerce(other)
        if right is NotImplemented:
            return NotImplemented
        a, b, c, d = self._widened(right)
        with checked_arithmetic("subtraction"):
            return self._assign(specialize(self.next_type)(d * a - b * c, b * d))

    def __imul__(self, other):
        right = self._coerce(other)
        if right is NotImplemented:
            return NotImplemented
        a, b, c, d = self._widened(right)
        with checked_arithmetic("multiplication"):
            return self._assign(specialize(self.next_type)(a * c, b * d))

    def __itruediv__(self, other):
        right = self._coerce(other)
        if right is NotImplemented:
            return NotImplemented
        if right._numerator == 0:
            raise DivisionByZero(f"division of {self} by zero")
        a, b, c, d = self._widened(right)
        with checked_arithmetic("division"):
            return self._assign(specialize(self.next_type)(d * a, c * b))

    # -------------------------------------------------------------------------
    # Binary Arithmetic (result in largest_type of the operands)
    # -------------------------------------------------------------------------

    def __add__(self, other):
        result = self._promote(other)
        if result is NotImplemented:
            return NotImplemented
        result += other
        return result

    def __radd__(self, other):
        if not is_raw_integer(other):
            return NotImplemented
        return self + other

    def __sub__(self, other):
        result = self._promote(other)
        if result is NotImplemented:
            return NotImplemented
        result -= other
        return result

    def __rsub__(self, other):
        if not is_raw_integer(other):
            return NotImplemented
        # Negate after promotion: -MIN of T may only fit the result type
        result = -self._promote(other)
        result += other
        return result

    def __mul__(self, other):
        result = self._promote(other)
        if result is NotImplemented:
            return NotImplemented
        result *= other
        return result

    def __rmul__(self, other):
        if not is_raw_integer(other):
            return NotImplemented
        return self * other

    def __truediv__(self, other):
        result = self._promote(other)
        if result is NotImplemented:
            return NotImplemented
        result /= other
        return result

    def __rtruediv__(self, other):
        if not is_raw_integer(other):
            return NotImplemented
        quotient_type = largest_type(self.int_type, raw_int_type(other, self.int_type))
        quotient = specialize(quotient_type)(other)
        quotient /= self
        return quotient

    def __neg__(self):
        result = self.copy()
        # Canonical form is kept: only the numerator's sign changes
        result._numerator = to_int_type(-int(self._numerator), self.int_type)
        return result

    def __pos__(self):
        return self.copy()

    # -------------------------------------------------------------------------
    # Increment / Decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "Rational":
        """Prefix increment: add 1 in place and return this instance."""
        return self.set(int(self._numerator) + int(self._denominator), self._denominator)

    def decrement(self) -> "Rational":
        """Prefix decrement: subtract 1 in place and return this instance."""
        return self.set(int(self._numerator) - int(self._denominator), self._denominator)

    def post_increment(self) -> "Rational":
        """Postfix increment: add 1 in place and return the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "Rational":
        """Postfix decrement: subtract 1 in place and return the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Relational
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, Rational):
            return compare.equal(self, other)
        if is_raw_integer(other):
            return compare.equals_integer(self, other)
        return NotImplemented

    def __lt__(self, other):
        right = self._as_rational(other)
        if right is NotImplemented:
            return NotImplemented
        return compare.less(self, right)

    def __gt__(self, other):
        right = self._as_rational(other)
        if right is NotImplemented:
            return NotImplemented
        return compare.greater(self, right)

    def __le__(self, other):
        right = self._as_rational(other)
        if right is NotImplemented:
            return NotImplemented
        return compare.less_equal(self, right)

    def __ge__(self, other):
        right = self._as_rational(other)
        if right is NotImplemented:
            return NotImplemented
        return compare.greater_equal(self, right)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        # Truncates toward zero
        n, d = int(self._numerator), int(self._denominator)
        quotient = abs(n) // d
        return quotient if n >= 0 else -quotient

    def __float__(self) -> float:
        return float(self._numerator) / float(self._denominator)

    def __bool__(self) -> bool:
        return bool(self._numerator != 0)

    def __str__(self) -> str:
        return f"{self._numerator}{SEPARATOR}{self._denominator}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"


def _rebuild(type_name: str, numerator: int, denominator: int) -> Rational:
    # Unpickling entry point; specialisation classes are created on demand
    return specialize(type_name)(numerator, denominator)
