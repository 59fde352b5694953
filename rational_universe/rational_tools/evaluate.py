#!/usr/bin/env python3
"""
Batch evaluator for rational expressions.

Each expression is "<operand> <op> <operand>":
- operands use the textual form "<int>/<int>"; a bare integer is a raw
  integer operand
- arithmetic ops: + - * /
- relational ops: == != < > <= >=

Every expression produces a receipt (PASS with the result, or FAIL with the
error). A malformed operand is not a failure: it reads as 0/1, exactly as
parse_rational does.

Usage:
    python -m rational_universe.rational_tools.evaluate --expr "1/2 + 1/3"
    python -m rational_universe.rational_tools.evaluate exprs.txt --int-type int32 --receipt out.json
"""

import argparse
import json
import logging
import operator
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import numpy as np

from ..rational_core.errors import RationalError
from ..rational_core.types import SIGNED_INT_TYPES
from ..rational_io.text import format_rational, parse_rational
from ..rational_ops.rational import Rational, specialize
from .logs import setup_logger

ARITHMETIC_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

RELATIONAL_OPS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}

INT_TYPE_NAMES = [np.dtype(t).name for t in SIGNED_INT_TYPES]


# =============================================================================
# Evaluation
# =============================================================================

def parse_operand(token: str, int_type, strict_separator: bool = False) -> Union[int, Rational]:
    """A bare (optionally signed) decimal integer is raw; anything else is a Rational."""
    digits = token[1:] if token[:1] in "+-" else token
    if digits.isdigit():
        return int(token)
    return parse_rational(token, int_type, strict_separator=strict_separator)


def evaluate_expression(
    expression: str,
    int_type,
    strict_separator: bool = False,
) -> Union[Rational, bool]:
    """
    Evaluate one "<operand> <op> <operand>" expression.

    Raises:
        ValueError: expression does not have three tokens or the operator is unknown
        RationalError: division by zero or overflow during evaluation
    """
    tokens = expression.split()
    if len(tokens) != 3:
        raise ValueError(f"expected '<operand> <op> <operand>', got {expression!r}")

    left_token, op, right_token = tokens
    func = ARITHMETIC_OPS.get(op) or RELATIONAL_OPS.get(op)
    if func is None:
        raise ValueError(f"unknown operator {op!r}")

    left = parse_operand(left_token, int_type, strict_separator)
    right = parse_operand(right_token, int_type, strict_separator)
    if not isinstance(left, Rational) and not isinstance(right, Rational):
        # Two raw integers: evaluate as Rationals of the configured type
        left = specialize(int_type)(left)

    return func(left, right)


def format_result(result: Union[Rational, bool]) -> str:
    if isinstance(result, Rational):
        return format_rational(result)
    return "true" if result else "false"


def build_receipt(
    line: int,
    expression: str,
    result: Optional[Union[Rational, bool]] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one expression.

    Returns:
        Receipt with line, expression, status and result or error
    """
    receipt: Dict[str, Any] = {
        "line": line,
        "expression": expression,
        "status": "FAIL" if error is not None else "PASS",
    }
    if error is not None:
        receipt["error"] = error
    else:
        receipt["result"] = format_result(result)
        if isinstance(result, Rational):
            receipt["int_type"] = np.dtype(result.int_type).name
    return receipt


def evaluate_all(
    expressions: Iterable[str],
    int_type,
    strict_separator: bool = False,
    logger: Optional[logging.Logger] = None,
) -> List[Dict[str, Any]]:
    """Evaluate expressions in order; blank lines and '#' comments are skipped."""
    logger = logger or logging.getLogger(__name__)
    receipts = []

    for line, raw in enumerate(expressions, start=1):
        expression = raw.strip()
        if not expression or expression.startswith("#"):
            continue

        try:
            result = evaluate_expression(expression, int_type, strict_separator)
        except (ValueError, RationalError) as e:
            logger.error(f"Line {line}: {expression!r} failed - {e}")
            receipts.append(build_receipt(line, expression, error=str(e)))
            continue

        logger.debug(f"Line {line}: {expression!r} = {format_result(result)}")
        receipts.append(build_receipt(line, expression, result=result))

    return receipts


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")
    return {
        "total": total,
        "passed": passed,
        "failed": total - passed,
    }


def save_receipts(receipts: List[Dict[str, Any]], summary: Dict[str, Any], path: Path) -> None:
    """Write receipts and summary to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {
        "timestamp": datetime.now().isoformat(),
        "summary": summary,
        "receipts": receipts,
    }
    with open(path, "w") as f:
        json.dump(document, f, indent=2)


# =============================================================================
# Command Line
# =============================================================================

def _read_sources(files: List[str]) -> List[str]:
    lines: List[str] = []
    for name in files:
        if name == "-":
            lines.extend(sys.stdin.read().splitlines())
        else:
            with open(name, "r") as f:
                lines.extend(f.read().splitlines())
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate fixed-width rational expressions")
    parser.add_argument("files", nargs="*", help="Expression files, one expression per line ('-' for stdin)")
    parser.add_argument("--expr", action="append", default=[], help="Expression to evaluate (repeatable)")
    parser.add_argument("--int-type", type=str, default="int64", choices=INT_TYPE_NAMES,
                        help="Integer representation of parsed operands")
    parser.add_argument("--strict-separator", action="store_true",
                        help="Read operands whose separator is not '/' as 0/1")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    parser.add_argument("--receipt", type=Path, default=None, help="Write JSON receipts to this file")
    parser.add_argument("--verbose", action="store_true", help="Log every evaluated expression")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("rational_eval", args.log_file, level)

    try:
        expressions = args.expr + _read_sources(args.files)
    except OSError as e:
        logger.error(f"Cannot read expressions: {e}")
        return 2

    int_type = np.dtype(args.int_type).type
    logger.info(f"Evaluating {len(expressions)} lines as {args.int_type}")

    receipts = evaluate_all(expressions, int_type, args.strict_separator, logger)
    for receipt in receipts:
        outcome = receipt.get("result", f"error: {receipt.get('error')}")
        print(f"{receipt['expression']} => {outcome}")

    summary = compute_summary_stats(receipts)
    logger.info(f"Total: {summary['total']}  Passed: {summary['passed']}  Failed: {summary['failed']}")

    if args.receipt is not None:
        save_receipts(receipts, summary, args.receipt)
        logger.info(f"Receipts saved to: {args.receipt}")

    return 0 if summary["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
