"""
rational_universe: Exact rationals over fixed-width integer representations.

Sub-packages:
- rational_core: widening policy, canonical form, errors
- rational_ops: the Rational value type and its operator protocol
- rational_io: textual formatting and parsing
- rational_tools: logging setup and the batch expression evaluator
"""

from .rational_core.errors import ArithmeticOverflow, DivisionByZero, RationalError, UnsupportedIntegerType
from .rational_io.text import format_rational, parse_rational, scan_rational
from .rational_ops.rational import Rational

__all__ = [
    "ArithmeticOverflow",
    "DivisionByZero",
    "Rational",
    "RationalError",
    "UnsupportedIntegerType",
    "format_rational",
    "parse_rational",
    "scan_rational",
]
