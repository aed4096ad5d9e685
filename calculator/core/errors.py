"""Error Hierarchy - typed, categorized exceptions for calculator failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Invalid operands (non-numeric or outside an operation's domain) are 400-level
    - message is the exact plain-text body returned to the caller

Design Decisions:
    - Single hierarchy with CalculatorError base: one global handler renders all of them
    - Domain-illegal operands subclass InvalidOperandError: callers see one error kind,
      logs still carry a specific code
"""

from dataclasses import dataclass
from enum import Enum


INVALID_NUMBERS = "Invalid input. Please provide valid numbers."
INVALID_NON_NEGATIVE = "Invalid input. Please provide a non-negative number."
INVALID_NON_ZERO_DIVISOR = (
    "Invalid input. Please provide valid numbers and ensure the divisor is non-zero."
)
DIVIDE_BY_ZERO = "Cannot divide by zero."


class ErrorSeverity(str, Enum):
    """Error severity for observability (CRITICAL is reserved for unhandled errors)."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-side details attached to an error for log output."""
    operation: str | None = None
    operands: dict[str, str | None] | None = None


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "operation": self.context.operation,
            "operands": self.context.operands,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidOperandError(CalculatorError):
    """An operand is missing, non-numeric, or illegal for the operation."""
    def __init__(
        self,
        message: str = INVALID_NUMBERS,
        code: str = "INVALID_INPUT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DivisionByZeroError(InvalidOperandError):
    """Division requested with a zero divisor."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(DIVIDE_BY_ZERO, "DIVISION_BY_ZERO", context)


class NegativeOperandError(InvalidOperandError):
    """Square root requested for a negative number."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(INVALID_NON_NEGATIVE, "NEGATIVE_OPERAND", context)


class ZeroDivisorError(InvalidOperandError):
    """Modulo requested with a zero divisor."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(INVALID_NON_ZERO_DIVISOR, "ZERO_DIVISOR", context)
