"""
Factorial & Gamma Extension

factorial(n) для Integer n >= 0 — точное произведение произвольной точности.
factorial(x) для Real x — Γ(x + 1):

- полуцелые аргументы (x + 1 = n + 0.5) — замкнутая формула через
  двойной факториал:
      Γ(n + 1/2) = (2n)! / (4^n * n!) * sqrt(π)
      Γ(1/2 - n) = (-4)^n * n! / (2n)! * sqrt(π)
- x + 1 < 0.5 — формула отражения Γ(z) = π / (sin(πz) * Γ(1 - z))
- иначе — аппроксимация Ланцоша (g = 7, 8 коэффициентов)

Отрицательный Integer не поддерживается: UndefinedDomain (полюс Γ).
"""

import math
from typing import Final

from osabie_numeric.core.domain.number import Number, NumberKind, is_integral, kind_of
from osabie_numeric.core.errors import UndefinedDomain
from osabie_numeric.core.math.arithmetic import mod, power

# =============================================================================
# LANCZOS-ПАРАМЕТРЫ
# =============================================================================

LANCZOS_G: Final[float] = 7.0

LANCZOS_BASE_COEFFICIENT: Final[float] = 0.99999999999980993

LANCZOS_COEFFICIENTS: Final[tuple[float, ...]] = (
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(value: Number) -> Number:
    """
    Факториал с расширением на Real через Γ.

    Args:
        value: Integer >= 0 или Real

    Returns:
        Integer для Integer аргумента, float для Real

    Raises:
        UndefinedDomain: для отрицательного Integer или полюса Γ

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
        >>> round(factorial(0.5), 6)
        0.886227
    """
    if kind_of(value) is NumberKind.REAL:
        return gamma_function(value + 1)

    if value < 0:
        raise UndefinedDomain(f"factorial is undefined for negative integers, got {value}")

    result = 1
    for k in range(2, value + 1):
        result *= k
    return result


def gamma_function(value: float) -> float:
    """
    Γ(value) для вещественного аргумента.

    Raises:
        UndefinedDomain: в полюсах (0, -1, -2, ...)
    """
    if value <= 0 and is_integral(value):
        raise UndefinedDomain(f"Gamma function has a pole at {value}")

    # Γ(n + 1/2) и Γ(1/2 - n): точная формула вместо ряда
    if mod(value - 0.5, 1) == 0:
        n = int(value - 0.5)
        if n >= 0:
            return factorial(2 * n) / (power(4, n) * factorial(n)) * math.sqrt(math.pi)
        n = -n
        return power(-4, n) * factorial(n) / factorial(2 * n) * math.sqrt(math.pi)

    if value < 0.5:
        return math.pi / (math.sin(math.pi * value) * gamma_function(1 - value))

    series = LANCZOS_BASE_COEFFICIENT + sum(
        coefficient / (value + index)
        for index, coefficient in enumerate(LANCZOS_COEFFICIENTS)
    )
    t = value + LANCZOS_G - 0.5
    return math.sqrt(2 * math.pi) * power(t, value - 0.5) * math.exp(-t) * series
