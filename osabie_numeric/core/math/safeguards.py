"""
Numerical Safeguards — сравнения float с учётом машинной точности

Используется там, где алгоритм над Real должен остановиться, хотя точное
равенство недостижимо из-за округления (вычитательный алгоритм Евклида).
"""

import math
from typing import Final

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """Проверка |value| <= tol."""
    return abs(value) <= tol
