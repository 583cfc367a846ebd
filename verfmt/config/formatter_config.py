import math
import numbers

from ..utils.radix import check_radix
from ..utils.logger import logger

DEFAULT_DIVISOR = 1000
DEFAULT_RADIX = 32
DEFAULT_SEPARATOR = 'f'


class VersionFormatParams:
    def __init__(self, divisor=DEFAULT_DIVISOR, radix=DEFAULT_RADIX, separator=DEFAULT_SEPARATOR):
        # major 계산용 나눗수
        if isinstance(divisor, bool) or not isinstance(divisor, numbers.Real):
            logger.error(f"Invalid divisor type: {type(divisor).__name__}")
            raise TypeError(f"divisor must be a real number, got {type(divisor).__name__}")
        try:
            value = float(divisor)
        except OverflowError:
            logger.error("Invalid divisor: out of double range")
            raise ValueError("divisor must be finite and non-zero, got a value out of double range")
        if not math.isfinite(value) or value == 0:
            logger.error(f"Invalid divisor: {value}")
            raise ValueError(f"divisor must be finite and non-zero, got {value}")

        # minor 인코딩 진법
        try:
            check_radix(radix)
        except ValueError as e:
            logger.error(f"Invalid radix: {e}")
            raise

        if not isinstance(separator, str):
            logger.error(f"Invalid separator type: {type(separator).__name__}")
            raise TypeError(f"separator must be a str, got {type(separator).__name__}")

        self.divisor = value
        self.radix = int(radix)
        self.separator = separator
