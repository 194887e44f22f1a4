"""
Special Sequences — Фибоначчи, Люка, римские цифры, проверка квадрата

factorial / Γ-расширение живут в gamma.py и реэкспортируются отсюда.

is_square использует целочисленную итерацию Ньютона x ← (x + n // x) // 2
с множеством посещённых значений: вблизи корня неквадрата итерация может
колебаться между двумя соседними значениями, и именно повтор значения
(а не лимит итераций) означает "не квадрат".
"""

from typing import Any

from osabie_numeric.core.domain.number import Number, is_integer, require_integer
from osabie_numeric.core.domain.roman import ROMAN_NUMERAL_TABLE
from osabie_numeric.core.errors import SymbolNotFound, UndefinedDomain
from osabie_numeric.core.math.gamma import factorial, gamma_function

__all__ = [
    "factorial",
    "gamma_function",
    "fibonacci",
    "lucas",
    "to_roman_numeral",
    "from_roman_numeral",
    "is_square",
]


# =============================================================================
# LINEAR RECURRENCES
# =============================================================================


def _linear_recurrence(index: Number, first: int, second: int, name: str) -> int:
    n = require_integer(index, "index")
    if n < 0:
        raise UndefinedDomain(f"{name} index must be non-negative, got {n}")

    a, b = first, second
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci(index: Number) -> int:
    """
    n-е число Фибоначчи (F(0) = 0, F(1) = 1), линейная итерация.

    Examples:
        >>> fibonacci(10)
        55
    """
    return _linear_recurrence(index, 0, 1, "fibonacci")


def lucas(index: Number) -> int:
    """
    n-е число Люка (L(0) = 2, L(1) = 1).

    Examples:
        >>> lucas(5)
        11
    """
    return _linear_recurrence(index, 2, 1, "lucas")


# =============================================================================
# ROMAN NUMERALS
# =============================================================================


def to_roman_numeral(number: Number) -> str:
    """
    Римская запись жадным вычитанием по ROMAN_NUMERAL_TABLE.

    Raises:
        UndefinedDomain: для отрицательного или нецелого числа

    Examples:
        >>> to_roman_numeral(1994)
        'MCMXCIV'
        >>> to_roman_numeral(0)
        ''
    """
    remaining = require_integer(number, "number")
    if remaining < 0:
        raise UndefinedDomain(f"Roman numerals cannot represent {remaining}")

    parts: list[str] = []
    for entry in ROMAN_NUMERAL_TABLE:
        while remaining >= entry.value:
            parts.append(entry.symbol)
            remaining -= entry.value
    return "".join(parts)


def from_roman_numeral(roman: Any) -> int:
    """
    Значение римской записи: на каждом шаге отбирается самый длинный символ
    таблицы, являющийся префиксом остатка (CM раньше C).

    Raises:
        SymbolNotFound: если остаток не начинается ни с одного символа таблицы

    Examples:
        >>> from_roman_numeral("MCMXCIV")
        1994
    """
    remaining = str(roman)
    total = 0

    while remaining:
        entry = max(
            (entry for entry in ROMAN_NUMERAL_TABLE if remaining.startswith(entry.symbol)),
            key=lambda entry: len(entry.symbol),
            default=None,
        )
        if entry is None:
            raise SymbolNotFound(f"Invalid Roman numeral near {remaining!r}")
        total += entry.value
        remaining = remaining[len(entry.symbol):]

    return total


# =============================================================================
# SQUARE TEST
# =============================================================================


def is_square(value: Any) -> bool:
    """
    Является ли value точным квадратом целого.

    Только Integer: Real и прочие значения → False.

    Examples:
        >>> is_square(144)
        True
        >>> is_square(2)
        False
        >>> is_square(4.0)
        False
    """
    if not is_integer(value):
        return False
    if value in (0, 1):
        return True
    if value < 0:
        return False

    x = value // 2
    history = {x}
    while x * x != value:
        x = (x + value // x) // 2
        if x in history:
            return False
        history.add(x)
    return True
