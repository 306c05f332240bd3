"""
Numeric Parser - tolerant conversion of user-typed numbers
"""
import math
import re
from typing import Any

# Leading decimal literal, optional exponent. Trailing garbage is ignored ("12abc" -> 12).
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_numeric(value: Any) -> float:
    """
    Convert user input to a finite number.

    Empty, non-numeric or non-finite input yields 0.0. Never raises.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return 0.0

    try:
        number = float(match.group(1))
    except (ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity"""
    return int(math.floor(value + 0.5))
