import math
import numbers
from decimal import Decimal

DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
MIN_RADIX = 2
MAX_RADIX = 36

# 가장 작은 양의 subnormal double
_MIN_DELTA = math.nextafter(0.0, 1.0)


def check_radix(radix):
    if isinstance(radix, bool) or not isinstance(radix, numbers.Integral):
        raise ValueError(f"radix must be an integer, got {radix!r}")
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ValueError(f"radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}")


def _special_token(value: float):
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    return None


def _double_exponent(value: float) -> int:
    """value = significand * 2**exponent 에서 53비트 정수 significand 기준 exponent"""
    return math.frexp(value)[1] - 53


def to_decimal_string(value) -> str:
    """
    Render a double the way ECMAScript Number::toString(10) does.

    Integral values below 1e21 print as plain digits, everything else uses the
    shortest round-trip digits with an exponent outside the [1e-7, 1e21) window.
    """
    value = float(value)
    token = _special_token(value)
    if token:
        return token
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = ''.join(map(str, digit_tuple))
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        return sign + digits + '0' * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + '.' + digits[n:]
    if -6 < n <= 0:
        return sign + '0.' + '0' * (-n) + digits

    e = n - 1
    e_str = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + digits + e_str
    return sign + digits[0] + '.' + digits[1:] + e_str


def to_radix_string(value, radix: int = 32) -> str:
    """
    Render a double in the given radix (2..36), like Number.prototype.toString(radix).

    Fractional digits are emitted only up to the precision of the input double,
    rounding half to even and carrying back into already written digits.

    Args:
        value: int, float 또는 numbers.Real
        radix: 2 ~ 36

    Returns:
        str: e.g. 999 -> 'v7', 0.5 -> '0.g', -999 -> '-v7'
    """
    check_radix(radix)
    value = float(value)

    token = _special_token(value)
    if token:
        return token
    if value == 0:
        return '0'
    if radix == 10:
        return to_decimal_string(value)

    negative = value < 0
    if negative:
        value = -value

    integer = float(math.floor(value))
    fraction = value - integer

    # 입력 double의 정밀도까지만 소수 자릿수 계산
    delta = 0.5 * (math.nextafter(value, math.inf) - value)
    delta = max(_MIN_DELTA, delta)

    fraction_digits = []
    if fraction >= delta:
        while True:
            fraction *= radix
            delta *= radix
            digit = int(fraction)
            fraction_digits.append(digit)
            fraction -= digit

            # round half to even
            if fraction > 0.5 or (fraction == 0.5 and (digit & 1)):
                if fraction + delta > 1:
                    # carry
                    while True:
                        if not fraction_digits:
                            integer += 1
                            break
                        last = fraction_digits.pop()
                        if last + 1 < radix:
                            fraction_digits.append(last + 1)
                            break
                    break

            if not fraction >= delta:
                break

    # 2**53 이상은 표현 불가능한 하위 자릿수를 0으로 채움
    integer_digits = []
    while _double_exponent(integer / radix) > 0:
        integer /= radix
        integer_digits.append(0)
    while True:
        remainder = math.fmod(integer, radix)
        integer_digits.append(int(remainder))
        integer = (integer - remainder) / radix
        if not integer > 0:
            break

    result = ''.join(DIGITS[d] for d in reversed(integer_digits))
    if fraction_digits:
        result += '.' + ''.join(DIGITS[d] for d in fraction_digits)
    if negative:
        result = '-' + result
    return result
