"""Domain Types - the closed set of arithmetic operations the service exposes.

Invariants:
    - Every route maps to exactly one Operation
    - All valid operations encoded as an Enum, no raw string matching

Design Decisions:
    - str Enum: values double as the operation name in log lines and error context
"""

from enum import Enum


class Operation(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    EXPONENTIATION = "exponentiation"
    SQUARE_ROOT = "square root"
    MODULO = "modulo"
