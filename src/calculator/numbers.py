"""Operand parsing and number rendering.

Operands arrive as free text in the query string and are read the way a
browser's ``parseFloat`` reads them: the longest numeric prefix wins and
anything unparseable becomes NaN. Numbers are rendered back to text with the
``Number#toString`` layout, which the exponent rules and the diagnostics
depend on.
"""

import math
import re
from decimal import Decimal

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

NUMERIC_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
FRACTION_RE = re.compile(r"[0-9]+\.[0-9]+")

# Decimal point positions rendered without an exponent
PLAIN_NOTATION_MIN = -6
PLAIN_NOTATION_MAX = 21


def parse_operand(raw: str | None) -> float:
    """Parse query text into an operand.

    Args:
        raw: Query parameter value, or None when the parameter is absent.

    Returns:
        The parsed float; NaN when no numeric prefix is present. Values too
        large for a double become signed infinity.
    """
    if raw is None:
        return math.nan
    match = NUMERIC_PREFIX_RE.match(raw.lstrip())
    if not match:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def format_number(value: float) -> str:
    """Render a float as its shortest round-trip decimal text.

    Args:
        value: Number to render.

    Returns:
        ``"3"`` for 3.0, ``"0.5"``, ``"1e-7"``, ``"1e+21"``, ``"NaN"``,
        ``"Infinity"``; negative zero renders as ``"0"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= PLAIN_NOTATION_MAX:
        body = digits + "0" * (n - k)
    elif 0 < n <= PLAIN_NOTATION_MAX:
        body = f"{digits[:n]}.{digits[n:]}"
    elif PLAIN_NOTATION_MIN < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def has_fraction(value: float) -> bool:
    """Whether the rendered text of ``value`` contains digits-dot-digits."""
    return FRACTION_RE.search(format_number(value)) is not None


def is_safe_magnitude(value: float) -> bool:
    """Whether ``value`` lies within the safe-integer range."""
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def render_result(value: float) -> int | float | None:
    """Convert a computed float into a JSON-ready value.

    Args:
        value: Raw result.

    Returns:
        None for NaN or infinity, an int for integral values, otherwise the float.
    """
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value
