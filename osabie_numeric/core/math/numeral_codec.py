"""
Numeral Codec — позиционные системы счисления

Модуль обеспечивает:
- to_base / from_base: строка в каноническом алфавите (255 символов code page)
- to_base_arbitrary: список цифр для положительного и отрицательного основания
- list_from_base: вычисление Σ digit[i] * base^(len-1-i) для произвольного списка
- to_custom_base / from_custom_base: алфавит, заданный вызывающим

ОТРИЦАТЕЛЬНОЕ ОСНОВАНИЕ:
    Используется усечённый остаток (знак делимого). Если остаток < 0,
    из него вычитается base (остаток становится неотрицательным), а к
    частному прибавляется 1. Получается единственное представление с
    цифрами 0..|base|-1.

Основание проверяется до начала разложения (InvalidBase).
"""

from typing import Any, Sequence

from osabie_numeric.core.contracts.coercion import DEFAULT_COERCION, ValueCoercion
from osabie_numeric.core.domain.alphabet import ALPHABET_SIZE, DIGIT_ALPHABET, DIGIT_INDEX
from osabie_numeric.core.domain.number import Number, kind_of, require_integer
from osabie_numeric.core.errors import InvalidBase, SymbolNotFound, UndefinedDomain
from osabie_numeric.core.math.arithmetic import power

# =============================================================================
# ВАЛИДАЦИЯ ОСНОВАНИЯ
# =============================================================================


def _validate_base(base: Number, allow_negative: bool = True) -> int:
    kind_of(base)
    try:
        base = require_integer(base, "base")
    except UndefinedDomain as exc:
        raise InvalidBase(f"base must be an integer, got {base!r}") from exc

    if abs(base) < 2:
        raise InvalidBase(f"base must satisfy |base| >= 2, got {base}")
    if base < 0 and not allow_negative:
        raise InvalidBase(f"base must be positive, got {base}")
    return base


def _validate_alphabet_base(base: Number) -> int:
    base = _validate_base(base, allow_negative=False)
    if base > ALPHABET_SIZE:
        raise InvalidBase(
            f"base must not exceed the digit alphabet size {ALPHABET_SIZE}, got {base}"
        )
    return base


def _truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    # Частное усекается к нулю, остаток имеет знак делимого
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


# =============================================================================
# ЦИФРЫ
# =============================================================================


def to_base_arbitrary(value: Number, base: Number) -> list[int]:
    """
    Разложение на цифры (старшая первой).

    Положительное основание: стандартное разложение; для отрицательного value
    все цифры отрицательны. Отрицательное основание: правило коррекции остатка.

    Raises:
        InvalidBase: если |base| < 2
        UndefinedDomain: если value не целое

    Examples:
        >>> to_base_arbitrary(10, 2)
        [1, 0, 1, 0]
        >>> to_base_arbitrary(0, 7)
        [0]
        >>> to_base_arbitrary(2, -2)
        [1, 1, 0]
        >>> to_base_arbitrary(-3, -2)
        [1, 1, 0, 1]
    """
    base = _validate_base(base)
    value = require_integer(value)

    if value == 0:
        return [0]

    if base > 0:
        sign = -1 if value < 0 else 1
        remaining = abs(value)
        digits: list[int] = []
        while remaining:
            remaining, digit = divmod(remaining, base)
            digits.append(sign * digit)
        return digits[::-1]

    digits = []
    remaining = value
    while remaining != 0:
        quotient, remainder = _truncated_divmod(remaining, base)
        if remainder < 0:
            remainder -= base
            quotient += 1
        digits.append(remainder)
        remaining = quotient
    return digits[::-1]


def list_from_base(digits: Sequence[Number], base: Number) -> Number:
    """
    Позиционное значение Σ digits[i] * base^(len-1-i).

    Examples:
        >>> list_from_base([1, 0, 1, 0], 2)
        10
        >>> list_from_base([1, 1, 0], -2)
        2
        >>> list_from_base([], 10)
        0
    """
    base = _validate_base(base)
    digits = list(digits)

    result: Number = 0
    for position, digit in enumerate(digits):
        result += power(base, len(digits) - 1 - position) * digit
    return result


# =============================================================================
# КАНОНИЧЕСКИЙ АЛФАВИТ
# =============================================================================


def to_base(value: Number, base: Number) -> str:
    """
    Строка цифр value в основании base через канонический алфавит.

    Отрицательное value → префикс "-" и разложение модуля.

    Raises:
        InvalidBase: если base вне [2, 255]

    Examples:
        >>> to_base(255, 16)
        'FF'
        >>> to_base(-5, 2)
        '-101'
        >>> to_base(0, 10)
        '0'
    """
    base = _validate_alphabet_base(base)
    value = require_integer(value)

    if value < 0:
        return "-" + to_base(-value, base)

    return "".join(DIGIT_ALPHABET[digit] for digit in to_base_arbitrary(value, base))


def from_base(text: str, base: Number) -> Number:
    """
    Десятичное значение строки в основании base (канонический алфавит).

    Ведущий "-" (как его пишет to_base) означает отрицательное значение.

    Raises:
        InvalidBase: если base вне [2, 255]
        SymbolNotFound: если символа нет в алфавите

    Examples:
        >>> from_base("FF", 16)
        255
        >>> from_base("101", 2)
        5
        >>> from_base("-101", 2)
        -5
    """
    base = _validate_alphabet_base(base)
    text = str(text)

    if text.startswith("-"):
        return -from_base(text[1:], base)

    digits: list[int] = []
    for symbol in text:
        digit = DIGIT_INDEX.get(symbol)
        if digit is None:
            raise SymbolNotFound(f"Symbol {symbol!r} is not in the digit alphabet")
        digits.append(digit)

    return list_from_base(digits, base)


# =============================================================================
# ПОЛЬЗОВАТЕЛЬСКИЙ АЛФАВИТ
# =============================================================================


def _as_symbols(value: Any, coercion: ValueCoercion) -> list[Any]:
    # Неитерируемое значение разбивается на символы строкового представления
    if coercion.is_iterable(value):
        return list(value)
    return list(str(value))


def _custom_alphabet(alphabet: Any, coercion: ValueCoercion) -> list[Any]:
    symbols = _as_symbols(alphabet, coercion)
    if len(symbols) < 2:
        raise InvalidBase(f"custom alphabet must hold at least 2 symbols, got {len(symbols)}")
    return symbols


def to_custom_base(
    value: Number,
    alphabet: Any,
    coercion: ValueCoercion = DEFAULT_COERCION,
) -> list[Any]:
    """
    Разложение value в основании len(alphabet) с символами alphabet.

    Raises:
        InvalidBase: если алфавит короче 2 символов
        UndefinedDomain: если value отрицательно или не целое

    Examples:
        >>> to_custom_base(5, "ab")
        ['b', 'a', 'b']
        >>> to_custom_base(5, ["x", "y", "z"])
        ['y', 'z']
    """
    symbols = _custom_alphabet(alphabet, coercion)
    value = require_integer(value)
    if value < 0:
        raise UndefinedDomain(f"custom base conversion requires a non-negative value, got {value}")

    return [symbols[digit] for digit in to_base_arbitrary(value, len(symbols))]


def from_custom_base(
    value: Any,
    alphabet: Any,
    coercion: ValueCoercion = DEFAULT_COERCION,
) -> Number:
    """
    Десятичное значение последовательности символов alphabet.

    Поиск символа выполняется через структурное равенство коэрсии (не identity).

    Raises:
        InvalidBase: если алфавит короче 2 символов
        SymbolNotFound: если символа нет в алфавите

    Examples:
        >>> from_custom_base("bab", "ab")
        5
        >>> from_custom_base(["y", "z"], ["x", "y", "z"])
        5
    """
    symbols = _custom_alphabet(alphabet, coercion)

    digits: list[int] = []
    for item in _as_symbols(value, coercion):
        index = next(
            (i for i, symbol in enumerate(symbols) if coercion.equals(item, symbol)),
            None,
        )
        if index is None:
            raise SymbolNotFound(f"Symbol {item!r} is not in the custom alphabet")
        digits.append(index)

    return list_from_base(digits, len(symbols))
