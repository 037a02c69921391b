"""Number helpers that reproduce JavaScript semantics."""

from __future__ import annotations

import math

_HEX_DIGITS = "0123456789ABCDEF"
_FRACTION_DIGIT_LIMIT = 20


def _round_half_away(num: float) -> float:
    if not math.isfinite(num):
        return num
    whole = float(math.trunc(num))
    if abs(num - whole) >= 0.5:
        whole += math.copysign(1.0, num)
    return whole


def js_round(num: float) -> float:
    """Round like JavaScript's Math.round: halves go towards positive infinity."""
    if math.isfinite(num) and num - math.trunc(num) == -0.5:
        return float(math.ceil(num))
    return _round_half_away(num)


def is_odd(num: int) -> float:
    """Return -1.0 when the truncated remainder of num by 2 is 1, else 0.0.

    Negative odd numbers leave a remainder of -1 and so give 0.0.
    """
    remainder = int(math.fmod(num, 2))
    if remainder == 1:
        return -1.0
    return 0.0


def js_float_to_hex(num: float) -> str:
    """Render a non-negative number in hexadecimal, as JavaScript's toString(16)."""
    if num == 0.0:
        return "0"

    quotient = math.floor(num)
    fraction = num - quotient

    if quotient == 0:
        result = "0"
    else:
        digits = []
        while quotient > 0:
            quotient, remainder = divmod(quotient, 16)
            digits.append(_HEX_DIGITS[remainder])
        result = "".join(reversed(digits))

    if fraction > 0.0:
        fraction_digits = []
        while fraction > 0.0 and len(fraction_digits) < _FRACTION_DIGIT_LIMIT:
            fraction *= 16.0
            digit = math.floor(fraction)
            fraction -= digit
            fraction_digits.append(_HEX_DIGITS[digit])
        result += "." + "".join(fraction_digits)

    return result