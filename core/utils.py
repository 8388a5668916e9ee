from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Iterable

import pandas as pd

# Longest leading decimal literal, e.g. "12.5", "-3", ".5", "1e3", "7kg" -> "7"
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def to_number(value: Any) -> float:
    """
    Coerce a monetary field to float. Anything that does not parse becomes 0.0.

    Strings are read like a lenient decimal parser: the leading numeric prefix
    wins ("12.50 INR" -> 12.5). None, "", booleans, NaN, infinities and
    numbers too large for a float -> 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            parsed = float(value)
        except (OverflowError, ValueError):
            # ints beyond float range, signaling Decimal NaN
            return 0.0
        return parsed if math.isfinite(parsed) else 0.0

    match = _LEADING_NUMBER.match(str(value))
    if match is None:
        return 0.0
    parsed = float(match.group(1))
    return parsed if math.isfinite(parsed) else 0.0


def sum_amounts(values: Iterable[Any]) -> float:
    """Sum after coercing each value with to_number()."""
    return float(sum(to_number(v) for v in values))
