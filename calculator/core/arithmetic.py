"""Arithmetic - the seven operations with IEEE-754 double semantics.

Invariants:
    - All functions are pure (no IO, no async)
    - Valid operands never raise: overflow gives +/-inf, undefined results give nan
    - Domain-illegal operands raise an InvalidOperandError subclass
    - modulo is the truncated remainder (sign follows the dividend)

Design Decisions:
    - math.pow/math.fmod over ** and %: float-only, no silent complex results, and
      the ValueError/OverflowError cases map cleanly onto IEEE special values
"""

import math

from calculator.core.errors import (
    DivisionByZeroError,
    ErrorContext,
    NegativeOperandError,
    ZeroDivisorError,
)


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float, context: ErrorContext | None = None) -> float:
    if b == 0:
        raise DivisionByZeroError(context)
    return a / b


def exponentiate(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # |result| too large; sign is negative only for odd integer powers of a negative base
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # zero to a negative power
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        # negative base, non-integer exponent
        return math.nan


def square_root(x: float, context: ErrorContext | None = None) -> float:
    if x < 0:
        raise NegativeOperandError(context)
    return math.sqrt(x)


def modulo(a: float, b: float, context: ErrorContext | None = None) -> float:
    if b == 0:
        raise ZeroDivisorError(context)
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer() and int(x) % 2 == 1
