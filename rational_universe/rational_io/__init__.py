"""
rational_io: Textual formatting and parsing of Rationals.

Modules:
- text.py: format_rational, scan_rational, parse_rational
"""

from .text import format_rational, parse_rational, scan_rational

__all__ = [
    "format_rational",
    "parse_rational",
    "scan_rational",
]
