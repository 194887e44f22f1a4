"""
Arithmetic Core — обобщённые mod / power / divide / gcd / lcm

Операции согласованы для всех комбинаций Integer/Real и знаков операндов.

ПРАВИЛА MOD (floored modulo, в порядке убывания приоритета):

    -x % -y             -->  -(x % y)
    -x % y.f            -->  y.f - (x % y.f), либо 0
    x % -y.f            -->  -(-x % y.f)
    x % y.f             -->  ((x / y.f) % 1) * y.f
    x.f % y.i           -->  (floor(x.f) % y.i) + (x.f - floor(x.f)), ceil вместо floor при y.i < 0
    -x.i % y.i          -->  y.i - (x.i % y.i), либо 0
    x.i % -y.i          -->  -(-x.i % y.i)
    x.i % y.i           -->  rem(x.i, y.i)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак mod(a, b) совпадает со знаком b (или результат 0)
2. power с обоими Integer и exponent >= 0 точен (без округления)
3. divide(a, b) * b + mod(a, b) == a для Integer
4. Нулевой делитель → DivisionByZero, никогда не fallback
"""

import math

from osabie_numeric.core.domain.number import Number, any_real, kind_of
from osabie_numeric.core.errors import DivisionByZero, UndefinedDomain
from osabie_numeric.core.math.safeguards import is_close, is_valid_float, is_zero


def _check_operands(*values: Number) -> None:
    for value in values:
        kind_of(value)
        if isinstance(value, float) and not is_valid_float(value):
            raise UndefinedDomain(f"Operand contains NaN/Inf: {value}")


def _complement(remainder: Number, divisor: Number) -> Number:
    # Переход через положительный случай: -x % y == y - (x % y), кроме нуля
    if remainder == 0:
        return remainder
    return divisor - remainder


# =============================================================================
# MOD
# =============================================================================


def mod(dividend: Number, divisor: Number) -> Number:
    """
    Floored modulo для Integer и Real.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        Остаток со знаком делителя (или 0)

    Raises:
        DivisionByZero: если divisor == 0
        UndefinedDomain: если операнд не число или NaN/Inf

    Examples:
        >>> mod(7, 3)
        1
        >>> mod(-7, 3)
        2
        >>> mod(7, -3)
        -2
        >>> mod(-3.5, 2)
        0.5
    """
    _check_operands(dividend, divisor)

    if divisor == 0:
        raise DivisionByZero(f"Modulo by zero: {dividend} % {divisor}")

    if dividend < 0 and divisor < 0:
        return -mod(-dividend, -divisor)

    if isinstance(divisor, float):
        if dividend < 0 < divisor:
            return _complement(mod(-dividend, divisor), divisor)
        if divisor < 0 < dividend:
            return -mod(-dividend, -divisor)
        return mod(dividend / divisor, 1) * divisor

    if isinstance(dividend, float):
        # Integer divisor: целая часть по целочисленному правилу, дробная часть
        # берётся со знаком делителя
        int_part = math.floor(dividend) if divisor > 0 else math.ceil(dividend)
        float_part = dividend - int_part
        return mod(int_part, divisor) + float_part

    if dividend < 0 < divisor:
        return _complement(mod(-dividend, divisor), divisor)
    if divisor < 0 < dividend:
        return -mod(-dividend, -divisor)

    # Оба неотрицательные: rem == floored modulo
    return dividend % divisor


# =============================================================================
# POWER
# =============================================================================


def power(base: Number, exponent: Number) -> Number:
    """
    Степень для отрицательных и дробных операндов.

    - exponent < 0 → 1 / power(base, -exponent)
    - Real операнд или дробный exponent → float power
    - Integer ** Integer (exponent >= 0) → точный результат произвольной точности

    Raises:
        DivisionByZero: если base == 0 и exponent < 0
        UndefinedDomain: если отрицательное base в дробной степени (комплексный результат)
            или Real результат переполняет double

    Examples:
        >>> power(2, 10)
        1024
        >>> power(2, -3)
        0.125
        >>> power(4, 0.5)
        2.0
    """
    _check_operands(base, exponent)

    if exponent < 0:
        if base == 0:
            raise DivisionByZero(f"Zero base with negative exponent: {base} ** {exponent}")
        return 1 / power(base, -exponent)

    if exponent == 0:
        return 1.0 if any_real(base, exponent) else 1

    if any_real(base, exponent):
        try:
            return math.pow(base, exponent)
        except ValueError as exc:
            raise UndefinedDomain(
                f"Power is not real-valued: {base} ** {exponent}"
            ) from exc
        except OverflowError as exc:
            raise UndefinedDomain(
                f"Power overflows a Real: {base} ** {exponent}"
            ) from exc

    return base**exponent


# =============================================================================
# DIVIDE
# =============================================================================


def divide(dividend: Number, divisor: Number) -> int:
    """
    Целочисленное деление.

    Real операнд → усечение вещественного частного к нулю.
    Оба Integer → floor division, согласованная со знаком mod.

    Raises:
        DivisionByZero: если divisor == 0

    Examples:
        >>> divide(7, 2)
        3
        >>> divide(-7, 2)
        -4
        >>> divide(-7.0, 2)
        -3
    """
    _check_operands(dividend, divisor)

    if divisor == 0:
        raise DivisionByZero(f"Integer division by zero: {dividend} // {divisor}")

    if any_real(dividend, divisor):
        return math.trunc(dividend / divisor)

    return dividend // divisor


# =============================================================================
# GCD / LCM
# =============================================================================


def _subtractive_gcd(a: float, b: float) -> float:
    # Линейный алгоритм: допускает нецелые величины (gcd(1.5, 0.5) == 0.5)
    while not is_close(a, b):
        if a > b:
            a -= b
        else:
            b -= a
        if is_zero(a):
            return b
        if is_zero(b):
            return a
    return a


def gcd(a: Number, b: Number) -> Number:
    """
    НОД, поддерживающий Real операнды.

    Оба Integer → алгоритм Евклида. Иначе → вычитательный алгоритм Евклида
    после выделения знаков.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(1.5, 0.5)
        0.5
    """
    _check_operands(a, b)

    if a == b:
        return a
    if b == 0:
        return a
    if a == 0:
        return b

    if not any_real(a, b):
        return math.gcd(a, b)

    if a < 0 and b < 0:
        return -gcd(-a, -b)
    if a < 0:
        return gcd(-a, b)
    if b < 0:
        return gcd(a, -b)

    return _subtractive_gcd(a, b)


def lcm(a: Number, b: Number) -> Number:
    """
    НОК: |a * b| / gcd(a, b).

    Raises:
        DivisionByZero: если a == b == 0

    Examples:
        >>> lcm(4, 6)
        12
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise DivisionByZero(f"lcm undefined for {a} and {b}")

    product = abs(a * b)
    if any_real(a, b):
        return product / divisor
    return product // divisor
