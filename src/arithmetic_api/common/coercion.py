"""Loose conversion of arbitrary JSON operands to numbers and strings.

Operands are never rejected. Any JSON value (or an absent field) is turned
into a double before arithmetic, and ``+`` switches to string concatenation as
soon as one side is textual:

    - numbers are IEEE doubles; integers too large for a double become +/-inf
    - true / false are 1 / 0, null is 0, an absent field is NaN
    - strings are parsed as decimal, hex, octal or binary literals
      (blank means 0, anything unparsable is NaN)
    - arrays go through their comma-joined text, objects are NaN
"""
from decimal import Decimal
import math
import re
from typing import Any, Union


class _Missing:
    """Marker for an operand absent from the request body."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

# Largest integer a double holds exactly
MAX_SAFE_INTEGER: int = 2**53

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_text(text: str) -> float:
    """
    Parse a numeric literal, ignoring surrounding whitespace.

    :param str text: Operand text

    :return: Parsed value, 0 for blank text, NaN if unparsable
    :rtype: float
    """
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _RADIX_LITERAL.fullmatch(text):
        return _int_to_float(int(text, 0))
    return math.nan


def to_number(value: Any) -> float:
    """
    Convert any operand to a double.

    :param Any value: JSON value or MISSING

    :return: Numeric value, NaN when there is none
    :rtype: float
    """
    if value is MISSING:
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        return _parse_text(value)
    if isinstance(value, list):
        return _parse_text(to_string(value))
    return math.nan


def format_number(value: float) -> str:
    """
    Render a double as the shortest text that reads back to the same value.

    Integers below 1e21 are written without fraction or exponent, small
    magnitudes down to 1e-6 in plain decimal, everything else in exponent
    form such as 1.5e+300 or 1e-7.

    :param float value: Number to render

    :return: Text form
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign: str = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits: str = "".join(map(str, digit_tuple))
    # value == 0.<digits> * 10 ** point
    point: int = exponent + len(digits)

    if len(digits) <= point <= 21:
        body = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"

    return sign + body


def to_string(value: Any) -> str:
    """
    Convert any operand to text, as used by concatenation.

    :param Any value: JSON value or MISSING

    :return: Text form
    :rtype: str
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(to_number(value))
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        # null entries render empty
        return ",".join("" if item is None else to_string(item) for item in value)
    return "[object Object]"


def is_textual(value: Any) -> bool:
    """Whether ``+`` on this operand concatenates instead of adding."""
    return isinstance(value, (str, list, dict))


def as_json_number(value: float) -> Union[int, float]:
    """
    Narrow a double to an int when it is an exactly representable integer.

    Keeps 2 + 3 answering 5 rather than 5.0 and folds -0.0 into 0.

    :param float value: Computed result

    :return: int for safe integers, the double otherwise
    :rtype: Union[int, float]
    """
    if math.isfinite(value) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value
