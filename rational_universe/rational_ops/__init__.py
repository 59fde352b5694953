"""
rational_ops: The Rational value type and its operator protocol.

Modules:
- rational.py: Rational / Rational[T], construction, arithmetic in three
  shapes, increment/decrement, conversions
- compare.py: equality and ordering kernels on canonical operands
"""

from .rational import Rational, specialize

__all__ = [
    "Rational",
    "specialize",
]
