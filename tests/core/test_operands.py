"""Operand Parsing - accepted and rejected query-string values."""

import math

import pytest

from calculator.core.errors import (
    INVALID_NON_NEGATIVE,
    INVALID_NUMBERS,
    ErrorContext,
    InvalidOperandError,
)
from calculator.core.operands import parse_operand, parse_operands


@pytest.mark.parametrize("raw,expected", [
    ("3", 3.0),
    ("-2.5", -2.5),
    (" 7 ", 7.0),
    ("1e3", 1000.0),
    ("+.5", 0.5),
    ("Infinity", math.inf),
    ("-inf", -math.inf),
])
def test_parse_operand_accepts_numbers(raw, expected):
    assert parse_operand(raw) == expected


@pytest.mark.parametrize("raw", [
    None, "", "   ", "abc", "NaN", "1,5", "0x10", "12abc", "1_000", "３", "٣", "1e", "--1",
])
def test_parse_operand_rejects_non_numbers(raw):
    with pytest.raises(InvalidOperandError) as exc_info:
        parse_operand(raw)
    assert exc_info.value.message == INVALID_NUMBERS
    assert exc_info.value.http_status == 400


def test_parse_operand_uses_given_message_and_context():
    ctx = ErrorContext(operation="square root", operands={"number": "x"})
    with pytest.raises(InvalidOperandError) as exc_info:
        parse_operand("x", INVALID_NON_NEGATIVE, ctx)
    assert exc_info.value.message == INVALID_NON_NEGATIVE
    assert exc_info.value.context is ctx


def test_parse_operands_preserves_order():
    assert parse_operands({"base": "2", "exponent": "-1"}) == (2.0, -1.0)


def test_parse_operands_fails_on_any_invalid():
    with pytest.raises(InvalidOperandError):
        parse_operands({"num1": "1", "num2": None})
