import math
import numbers
from decimal import Decimal

import numpy as np

from ..config.formatter_config import DEFAULT_DIVISOR, DEFAULT_RADIX, DEFAULT_SEPARATOR
from .radix import to_decimal_string, to_radix_string


def effective_value(v) -> float:
    """None, 0, -0.0, False, NaN 은 0 으로 치환"""
    if v is None:
        return 0.0
    if isinstance(v, Decimal):
        if v.is_nan():
            return 0.0
    elif not isinstance(v, (numbers.Real, np.bool_)):
        raise TypeError(f"version value must be a real number, got {type(v).__name__}")

    try:
        value = float(v)
    except OverflowError:
        # double 범위를 넘는 int
        value = math.inf if v > 0 else -math.inf

    if math.isnan(value) or value == 0:
        return 0.0
    return value


def _floor(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def render_version(v, divisor=DEFAULT_DIVISOR, radix=DEFAULT_RADIX, separator=DEFAULT_SEPARATOR) -> str:
    value = effective_value(v)
    major = _floor(value / divisor)
    # v mod divisor 가 아니라 v - floor(v / divisor)
    minor = value - major
    return f"{to_decimal_string(major)}{separator}{to_radix_string(minor, radix)}"


def format_version(v=None) -> str:
    """
    Format a raw version counter into a display string.

    The major part is floor(v / 1000), the minor part is v - floor(v / 1000)
    in base 32, joined by 'f'.

    Returns:
        str: e.g. 1000 -> '1fv7', 500 -> '0ffk', None -> '0f0'
    """
    return render_version(v)
