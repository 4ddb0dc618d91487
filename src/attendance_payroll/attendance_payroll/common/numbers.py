from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

# Wide enough for every finite float (up to ~1.8e308) plus two decimals.
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def round2(value: float) -> float:
    """Round half-up to 2 decimals (how amounts are displayed to users)."""
    if math.isnan(value) or math.isinf(value):
        return value
    return float(Decimal(str(value)).quantize(Decimal("0.01"), context=_ROUNDING_CONTEXT))


def parse_number(value) -> Optional[float]:
    """Best-effort float parsing for user-typed values; None when not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
