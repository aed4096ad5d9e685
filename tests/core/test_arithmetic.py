"""Arithmetic - tests for the pure operations and their IEEE-754 edge cases.

Tests cover:
    - Native operator results for add/subtract/multiply/divide
    - Zero divisor and negative radicand raise typed errors
    - exponentiate maps overflow and undefined cases to inf/nan
    - modulo is the truncated remainder
"""

import math

import pytest

from calculator.core import arithmetic
from calculator.core.errors import (
    DivisionByZeroError,
    InvalidOperandError,
    NegativeOperandError,
    ZeroDivisorError,
)


def test_add_subtract_multiply_use_native_doubles():
    assert arithmetic.add(0.1, 0.2) == 0.1 + 0.2
    assert arithmetic.subtract(0.3, 0.1) == 0.3 - 0.1
    assert arithmetic.multiply(1.1, 1.1) == 1.1 * 1.1


def test_multiply_overflow_is_infinite():
    assert arithmetic.multiply(1e308, 10) == math.inf


def test_divide():
    assert arithmetic.divide(1, 3) == 1 / 3


@pytest.mark.parametrize("divisor", [0.0, -0.0])
def test_divide_by_zero_raises(divisor):
    with pytest.raises(DivisionByZeroError) as exc_info:
        arithmetic.divide(5, divisor)
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Cannot divide by zero."


def test_domain_errors_are_invalid_operand_errors():
    for error in (DivisionByZeroError(), NegativeOperandError(), ZeroDivisorError()):
        assert isinstance(error, InvalidOperandError)


# ─── exponentiate ────────────────────────────────────────────────

def test_exponentiate_regular():
    assert arithmetic.exponentiate(2, 10) == 1024
    assert arithmetic.exponentiate(9, 0.5) == 3


def test_exponentiate_overflow():
    assert arithmetic.exponentiate(10, 400) == math.inf
    assert arithmetic.exponentiate(-10, 401) == -math.inf
    assert arithmetic.exponentiate(-10, 400) == math.inf


def test_exponentiate_zero_to_negative_power():
    assert arithmetic.exponentiate(0.0, -1) == math.inf
    assert arithmetic.exponentiate(-0.0, -1) == -math.inf
    assert arithmetic.exponentiate(-0.0, -2) == math.inf


def test_exponentiate_negative_base_fractional_exponent_is_nan():
    assert math.isnan(arithmetic.exponentiate(-8, 1 / 3))


# ─── square_root ─────────────────────────────────────────────────

def test_square_root():
    assert arithmetic.square_root(2) == math.sqrt(2)
    assert arithmetic.square_root(math.inf) == math.inf


def test_square_root_negative_raises():
    with pytest.raises(NegativeOperandError):
        arithmetic.square_root(-1e-300)


def test_square_root_negative_zero_is_allowed():
    result = arithmetic.square_root(-0.0)
    assert result == 0 and math.copysign(1, result) == -1


# ─── modulo ──────────────────────────────────────────────────────

@pytest.mark.parametrize("a,b,expected", [
    (10, 3, 1),
    (-7, 3, -1),
    (7, -3, 1),
    (5.5, 2, 1.5),
    (3, math.inf, 3),
])
def test_modulo_is_truncated_remainder(a, b, expected):
    assert arithmetic.modulo(a, b) == expected


def test_modulo_infinite_dividend_is_nan():
    assert math.isnan(arithmetic.modulo(math.inf, 2))


def test_modulo_zero_divisor_raises():
    with pytest.raises(ZeroDivisorError) as exc_info:
        arithmetic.modulo(4, 0)
    assert exc_info.value.code == "ZERO_DIVISOR"
