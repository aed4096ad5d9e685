"""Arithmetic Routes - seven GET endpoints, operands from the query string.

Invariants:
    - Operands are accepted as optional strings and parsed in core/operands, so a
      missing or malformed value yields the endpoint's own 400 message (never a 422)
    - Success: 200 text/plain sentence + one info log line
    - Failure: InvalidOperandError propagates to the global handler (400 + error log line)
    - Handlers are stateless; the only shared object is the injected service logger
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from calculator.api.dependencies import get_service_logger
from calculator.core import arithmetic
from calculator.core.domain_types import Operation
from calculator.core.errors import (
    INVALID_NON_NEGATIVE,
    INVALID_NON_ZERO_DIVISOR,
    ErrorContext,
)
from calculator.core.format_messages import format_operation_log, format_result
from calculator.core.operands import parse_operands
from calculator.infrastructure.observability import ServiceLogger

router = APIRouter(tags=["arithmetic"])


def _respond(
    logger: ServiceLogger,
    operation: Operation,
    operands: tuple[float, ...],
    result: float,
) -> PlainTextResponse:
    logger.info(
        format_operation_log(operation, operands),
        extra={"operation": operation.value},
    )
    return PlainTextResponse(format_result(operation, operands, result))


@router.get("/add", response_class=PlainTextResponse)
async def add(
    num1: str | None = None,
    num2: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"num1": num1, "num2": num2}
    ctx = ErrorContext(operation=Operation.ADDITION.value, operands=raw)
    a, b = parse_operands(raw, context=ctx)
    return _respond(logger, Operation.ADDITION, (a, b), arithmetic.add(a, b))


@router.get("/subtract", response_class=PlainTextResponse)
async def subtract(
    num1: str | None = None,
    num2: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"num1": num1, "num2": num2}
    ctx = ErrorContext(operation=Operation.SUBTRACTION.value, operands=raw)
    a, b = parse_operands(raw, context=ctx)
    return _respond(logger, Operation.SUBTRACTION, (a, b), arithmetic.subtract(a, b))


@router.get("/multiply", response_class=PlainTextResponse)
async def multiply(
    num1: str | None = None,
    num2: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"num1": num1, "num2": num2}
    ctx = ErrorContext(operation=Operation.MULTIPLICATION.value, operands=raw)
    a, b = parse_operands(raw, context=ctx)
    return _respond(logger, Operation.MULTIPLICATION, (a, b), arithmetic.multiply(a, b))


@router.get("/divide", response_class=PlainTextResponse)
async def divide(
    num1: str | None = None,
    num2: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"num1": num1, "num2": num2}
    ctx = ErrorContext(operation=Operation.DIVISION.value, operands=raw)
    a, b = parse_operands(raw, context=ctx)
    return _respond(logger, Operation.DIVISION, (a, b), arithmetic.divide(a, b, ctx))


@router.get("/exponentiate", response_class=PlainTextResponse)
async def exponentiate(
    base: str | None = None,
    exponent: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"base": base, "exponent": exponent}
    ctx = ErrorContext(operation=Operation.EXPONENTIATION.value, operands=raw)
    b, e = parse_operands(raw, context=ctx)
    return _respond(logger, Operation.EXPONENTIATION, (b, e), arithmetic.exponentiate(b, e))


@router.get("/sqrt", response_class=PlainTextResponse)
async def sqrt(
    number: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"number": number}
    ctx = ErrorContext(operation=Operation.SQUARE_ROOT.value, operands=raw)
    (n,) = parse_operands(raw, INVALID_NON_NEGATIVE, ctx)
    return _respond(logger, Operation.SQUARE_ROOT, (n,), arithmetic.square_root(n, ctx))


@router.get("/modulo", response_class=PlainTextResponse)
async def modulo(
    dividend: str | None = None,
    divisor: str | None = None,
    logger: ServiceLogger = Depends(get_service_logger),
):
    raw = {"dividend": dividend, "divisor": divisor}
    ctx = ErrorContext(operation=Operation.MODULO.value, operands=raw)
    a, b = parse_operands(raw, INVALID_NON_ZERO_DIVISOR, ctx)
    return _respond(logger, Operation.MODULO, (a, b), arithmetic.modulo(a, b, ctx))
