"""Error Handlers - global exception handlers for the calculator API.

Invariants:
    - CalculatorError -> plain-text body (the error message) with its http_status
    - Exception (catch-all) -> 500, never leaks internal details
    - Every handled error produces exactly one error-level log line

Design Decisions:
    - Two-layer handler: domain (CalculatorError), catch-all (Exception)
    - Request validation layer omitted: operands arrive as optional strings, so
      FastAPI never rejects a request before the route parses it
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from calculator.core.errors import CalculatorError, ErrorCategory, ErrorSeverity


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_calculator_error_handler(app)
    _register_generic_error_handler(app)


def _register_calculator_error_handler(app: FastAPI) -> None:
    """Register calculator domain error handler."""

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        request.app.state.service_logger.error(
            exc.message, extra=exc.to_log_extra(),
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        request.app.state.service_logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
