"""Number Formatting - shortest round-trip text for doubles.

Invariants:
    - Output parses back (float()) to the same double, except -0 which renders "0"
    - Integral values carry no fractional part: 5.0 -> "5"
    - Fixed notation when the decimal exponent n satisfies -6 < n <= 21, else "1e+21" style
    - Special values: "Infinity", "-Infinity", "NaN"

Design Decisions:
    - Digits come from repr(), which already yields the shortest round-trip digit string;
      only the layout (fixed vs exponent, sign of exponent) is decided here
"""

import math
from decimal import Decimal


def format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    digits, n = _shortest_digits(abs(x))
    return sign + _layout(digits, n)


def _shortest_digits(x: float) -> tuple[str, int]:
    """Return (digits, n) such that x == 0.<digits> * 10**n, digits without trailing zeros."""
    t = Decimal(repr(x)).normalize().as_tuple()
    digits = "".join(str(d) for d in t.digits)
    return digits, t.exponent + len(digits)


def _layout(digits: str, n: int) -> str:
    k = len(digits)
    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + digits
    exp = n - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
