"""
Numeric parsing helpers for the Hockey Match Tracker application.

Action values arrive from the browser as loosely typed JSON (numbers, numeric
strings, free text or null). These helpers turn them into floats and minutes.
"""
import math
import re
from typing import Any, Optional, Union

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRAILING_MINUTE = re.compile(r"(\d+)$")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a loosely typed value as a float.

    Numeric strings may carry trailing text; only the leading number is used.

    Args:
        value: Raw value from the request payload

    Returns:
        Parsed float, or None when the value is absent or not numeric

    Example:
        >>> parse_number("30")
        30.0
        >>> parse_number("2 goles")
        2.0
        >>> parse_number("Own goal") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            match = _LEADING_NUMBER.match(value)
            if not match:
                return None
            number = float(match.group(1))
        else:
            return None
    except (OverflowError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded towards positive infinity.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def parse_trailing_minute(label: str) -> Optional[int]:
    """
    Extract the minute encoded at the end of a substitution label.

    Example:
        >>> parse_trailing_minute("Sale minuto 30")
        30
        >>> parse_trailing_minute("Sale minuto") is None
        True
    """
    match = _TRAILING_MINUTE.search(label or "")
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def as_count(total: float) -> Union[int, float]:
    """Return whole totals as ints so stored counters stay integral."""
    if float(total).is_integer():
        return int(total)
    return total
