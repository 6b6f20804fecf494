"""Value model shared by the serializer and the parser.

Values are plain Python objects as produced by ``json.loads``: ``None``,
``bool``, ``int``/``float``, ``str``, ``list`` and ``dict``. Integers and
floats are both treated as a single number kind.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Union

Value = Union[None, bool, int, float, str, list, dict]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_PREFIXED_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")

# Integers beyond this magnitude are rounded to the nearest double
MAX_SAFE_INTEGER = 2**53


class ValueKind(Enum):
    """Kind of a value in the model."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    MAP = "map"


def kind_of(value: Any) -> ValueKind | None:
    """Classify a Python object, or return None if it is outside the model."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAP
    return None


def is_container(value: Any) -> bool:
    """Check if a value is a list or a map."""
    return isinstance(value, (list, dict))


def is_empty(value: Any) -> bool:
    """Check if a value counts as empty: blank string, empty list or empty map."""
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def format_scalar(value: Any) -> str:
    """Render a scalar the way it appears on a line of block text.

    Objects outside the value model are stringified with ``str()``.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)
    return str(value)


def format_number(value: int | float) -> str:
    """Format a number using double-precision shortest-representation rules.

    Integral floats lose their fractional part and exponent notation is only
    used below 1e-6 or from 1e21 upwards.
    """
    if isinstance(value, int):
        value = _to_double(value)
        if isinstance(value, int):
            return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(value)
    if value.is_integer() and abs(value) < 1e21:
        # Past 2**53 only the shortest digits are significant
        return format(Decimal(text), "f") if "e" in text else str(int(value))

    if "e" not in text:
        return text

    mantissa, exponent_text = text.split("e")
    exponent = int(exponent_text)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def parse_number(text: str) -> int | float | None:
    """Parse text that is entirely a numeric literal, else return None."""
    if _INTEGER_RE.fullmatch(text):
        number = float(text)
        return int(text) if abs(number) <= MAX_SAFE_INTEGER else number
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _INFINITY_RE.fullmatch(text):
        return float("-inf") if text.startswith("-") else float("inf")
    if _PREFIXED_RE.fullmatch(text):
        return _to_double(int(text, 0))
    return None


def _to_double(value: int) -> int | float:
    """Keep an integer exact up to 2**53, else round it to a double."""
    if abs(value) <= MAX_SAFE_INTEGER:
        return value
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def json_safe(value: Any) -> Any:
    """Replace NaN and infinities with None so the value encodes as strict JSON.

    Containers are updated in place.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None

    stack = [value] if is_container(value) else []
    while stack:
        container = stack.pop()
        entries = container.items() if isinstance(container, dict) else enumerate(container)
        for key, item in list(entries):
            if is_container(item):
                stack.append(item)
            elif isinstance(item, float) and not math.isfinite(item):
                container[key] = None
    return value


def coerce_scalar(text: str) -> Value:
    """Turn the text after a colon into a value.

    First match wins: ``true``, ``false``, ``null``, a number, then the raw
    string.
    """
    if text == "true":
        return True
    if text == "false":
        return False
    if text == "null":
        return None
    if text:
        number = parse_number(text)
        if number is not None:
            return number
    return text
