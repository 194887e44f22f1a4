"""
Number — tagged union Integer | Real

Integer = int (произвольная точность), Real = float (double precision).
bool исключается явно: в Python это подкласс int, но числом стека не является.

Каждая арифметическая операция ветвится по тегу через kind_of; смешение тегов
повышает результат до Real, если операция не оговаривает иное.
"""

import math
from enum import Enum
from typing import Any, Union

from osabie_numeric.core.errors import UndefinedDomain

Number = Union[int, float]


class NumberKind(str, Enum):
    """Тег варианта Number"""

    INTEGER = "integer"
    REAL = "real"


def kind_of(value: Any) -> NumberKind:
    """
    Тег числа.

    Raises:
        UndefinedDomain: если value не int/float (в т.ч. bool)
    """
    if isinstance(value, bool):
        raise UndefinedDomain(f"Expected a number, got bool {value!r}")
    if isinstance(value, int):
        return NumberKind.INTEGER
    if isinstance(value, float):
        return NumberKind.REAL
    raise UndefinedDomain(f"Expected a number, got {type(value).__name__} {value!r}")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return is_number(value) and kind_of(value) is NumberKind.INTEGER


def is_real(value: Any) -> bool:
    return is_number(value) and kind_of(value) is NumberKind.REAL


def any_real(*values: Number) -> bool:
    """True если хотя бы один операнд имеет тег Real."""
    return any(kind_of(value) is NumberKind.REAL for value in values)


def is_integral(value: Number) -> bool:
    """Integer, либо конечный Real без дробной части."""
    if kind_of(value) is NumberKind.INTEGER:
        return True
    return math.isfinite(value) and value.is_integer()


def require_integer(value: Number, name: str = "value") -> int:
    """
    Приведение к Integer для целочисленных операций.

    Real без дробной части допускается (5.0 → 5).

    Raises:
        UndefinedDomain: если значение не целое
    """
    if not is_integral(value):
        raise UndefinedDomain(f"{name} must be an integer, got {value!r}")
    return int(value)
