"""Message Formatting - pure functions for response sentences and outcome log lines.

Invariants:
    - All functions are pure (no IO, no async)
    - Every number is rendered through format_number, so echoed operands and results
      use the same notation
"""

from calculator.core.domain_types import Operation
from calculator.core.format_number import format_number

_SYMBOLS: dict[Operation, str] = {
    Operation.ADDITION: "+",
    Operation.SUBTRACTION: "-",
    Operation.MULTIPLICATION: "*",
    Operation.DIVISION: "/",
    Operation.EXPONENTIATION: "^",
    Operation.MODULO: "%",
}

# How the operator reads inside a result sentence, when it differs from the symbol
_PHRASES: dict[Operation, str] = {
    Operation.EXPONENTIATION: "raised to the power of",
    Operation.MODULO: "modulo",
}


def format_result(operation: Operation, operands: tuple[float, ...], result: float) -> str:
    """Sentence returned to the caller on success."""
    r = format_number(result)
    if operation == Operation.SQUARE_ROOT:
        return f"The square root of {format_number(operands[0])} is {r}."
    a, b = (format_number(x) for x in operands)
    op = _PHRASES.get(operation, _SYMBOLS[operation])
    return f"The result of {a} {op} {b} is {r}."


def format_operation_log(operation: Operation, operands: tuple[float, ...]) -> str:
    """Outcome log line for a successful request."""
    prefix = f"New {operation.value} operation requested:"
    if operation == Operation.SQUARE_ROOT:
        return f"{prefix} √{format_number(operands[0])}"
    a, b = (format_number(x) for x in operands)
    return f"{prefix} {a} {_SYMBOLS[operation]} {b}"
