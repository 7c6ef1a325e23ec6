"""Number parsing and rounding helpers."""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_CENT = Decimal("0.01")
# Enough digits to quantize the largest finite float to cents.
_ROUNDING_PRECISION = 400


def parse_locale_number(text: str | None) -> float:
    """Parse a number written with a comma decimal separator.

    Unparseable input and negative values yield 0.
    """
    if not text:
        return 0.0
    cleaned = re.sub(r"[^\d,.\-]", "", text).replace(",", ".", 1)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    try:
        value = float(match.group())
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def round_2(value: float) -> float:
    """Round to 2 decimals, halves away from zero.

    Non-finite values are returned unchanged.
    """
    number = float(value)
    if not math.isfinite(number):
        return number
    with localcontext() as context:
        context.prec = _ROUNDING_PRECISION
        rounded = Decimal(repr(number)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return float(rounded)
