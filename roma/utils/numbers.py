"""
Numeric coercion for provider payloads.

External APIs return numbers as strings, nulls, missing keys or garbage.
Every numeric field in a record goes through these helpers so that a
missing value becomes 0 and never NaN.
"""

import math
from typing import Any


def to_number(*candidates: Any, default: float = 0.0) -> float:
    """
    Return the first candidate that is a usable, non-zero number.

    Mirrors "a || b || 0" fallbacks: None, empty strings, unparseable
    strings, NaN, infinities and zero are skipped.

    Examples:
        >>> to_number("1.5")
        1.5
        >>> to_number(None, "", 0, "42")
        42.0
        >>> to_number(float("nan"))
        0.0
    """
    for value in candidates:
        if value is None or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(number) and number != 0:
            return number
    return default


def to_int(*candidates: Any, default: int = 0) -> int:
    """Integer variant of to_number (truncates toward zero)."""
    return int(to_number(*candidates, default=float(default)))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, like JavaScript Math.round."""
    return math.floor(value + 0.5)
