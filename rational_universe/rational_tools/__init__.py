"""
rational_tools: Developer tooling around the Rational type.

Modules:
- logs.py: setup_logger for console/file logging
- evaluate.py: batch expression evaluator (rational-eval) with JSON receipts
"""

from .evaluate import evaluate_all, evaluate_expression
from .logs import setup_logger

__all__ = [
    "evaluate_all",
    "evaluate_expression",
    "setup_logger",
]
