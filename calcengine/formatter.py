"""
Display formatting for engine results.

format_number is deterministic and locale independent: the same float always
gives the same string.
"""
import math

import numpy as np

from calcengine.tokens import EPSILON

ERROR_TEXT = "Error"

# integers at or above this magnitude are shown in scientific form
_INTEGER_LIMIT = 1e21
_SIGNIFICANT_DIGITS = 12
_POSITIONAL_RANGE = (1e-6, 1e12)


def _scientific(value: float) -> str:
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def format_number(value: float) -> str:
    """
    Render `value` for the calculator display.

    - NaN and infinities become "Error".
    - Values within EPSILON of an integer are shown as that integer.
    - Values within EPSILON of n + 0.5 are shown with one decimal ("2.5").
    - Anything else is rounded to 12 significant digits; results between
      1e-6 and 1e12 are written out positionally, the rest in scientific
      notation, without trailing zeros.
    """
    value = float(value)
    if not math.isfinite(value):
        return ERROR_TEXT

    nearest = round(value)
    if abs(value - nearest) < EPSILON:
        if abs(nearest) >= _INTEGER_LIMIT:
            return _scientific(float(nearest))
        return str(nearest)

    half = round(value * 2) / 2
    if abs(value - half) < EPSILON:
        return f"{half:.1f}"

    rounded = float(f"{value:.{_SIGNIFICANT_DIGITS}g}")
    low, high = _POSITIONAL_RANGE
    if low <= abs(rounded) < high:
        return np.format_float_positional(rounded, trim="-")
    return _scientific(rounded)
