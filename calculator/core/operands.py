"""Operand Parsing - query-string values to IEEE-754 doubles.

Invariants:
    - Returns a float or raises InvalidOperandError, never anything else
    - Missing, blank, and NaN values are rejected
    - Infinities are numbers and pass through
    - Only ASCII decimal or scientific notation is a number (no "1_000", no non-ASCII digits)
"""

import re

from calculator.core.errors import INVALID_NUMBERS, ErrorContext, InvalidOperandError

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?)",
    re.IGNORECASE | re.ASCII,
)


def parse_operand(
    raw: str | None,
    message: str = INVALID_NUMBERS,
    context: ErrorContext | None = None,
) -> float:
    """Parse one operand, raising InvalidOperandError(message) when it is not a number."""
    text = raw.strip() if raw is not None else ""
    if not _NUMBER.fullmatch(text):
        raise InvalidOperandError(message, context=context)
    return float(text)


def parse_operands(
    raw: dict[str, str | None],
    message: str = INVALID_NUMBERS,
    context: ErrorContext | None = None,
) -> tuple[float, ...]:
    """Parse operands in order; the first invalid one raises."""
    return tuple(parse_operand(v, message, context) for v in raw.values())
