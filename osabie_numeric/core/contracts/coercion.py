"""
Value Coercion Contract — граница с модулем коэрсии хоста

Числовое ядро не определяет приведение значений стека, а только потребляет его:
- to_number(v) -> Number
- to_integer(v) -> int
- is_iterable(v) -> bool
- equals(a, b) -> bool (структурное равенство, не identity)

ValueCoercion — протокол для внедрения коэрсии интерпретатора.
DefaultCoercion — эталонная реализация, используемая по умолчанию:
- строки, похожие на число, приводятся к int/float ("12" → 12, "1.5" → 1.5)
- нечисловой ввод → UndefinedDomain (политика: ошибка, а не sentinel)
- строки НЕ считаются итерируемыми (это скаляры стека)
"""

import math
import re
from collections.abc import Iterable
from typing import Any, Final, Protocol, runtime_checkable

from osabie_numeric.core.domain.number import Number, is_number
from osabie_numeric.core.errors import UndefinedDomain

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")
_REAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$"
)


@runtime_checkable
class ValueCoercion(Protocol):
    """Интерфейс коэрсии значений стека."""

    def to_number(self, value: Any) -> Number: ...

    def to_integer(self, value: Any) -> int: ...

    def is_iterable(self, value: Any) -> bool: ...

    def equals(self, a: Any, b: Any) -> bool: ...


class DefaultCoercion:
    """Эталонная коэрсия: числа и числовые строки."""

    def to_number(self, value: Any) -> Number:
        """
        Приведение к Number.

        Raises:
            UndefinedDomain: если значение не число и не числовая строка
        """
        if is_number(value):
            return value

        if isinstance(value, str):
            text = value.strip()
            if _INTEGER_PATTERN.match(text):
                return int(text)
            if _REAL_PATTERN.match(text):
                return float(text)

        raise UndefinedDomain(f"Cannot coerce {value!r} to a number")

    def to_integer(self, value: Any) -> int:
        """Приведение к int с усечением к нулю (как trunc)."""
        number = self.to_number(value)
        if isinstance(number, float) and not math.isfinite(number):
            raise UndefinedDomain(f"Cannot coerce {value!r} to an integer")
        return math.trunc(number)

    def is_iterable(self, value: Any) -> bool:
        if isinstance(value, (str, bytes)):
            return False
        return isinstance(value, Iterable)

    def equals(self, a: Any, b: Any) -> bool:
        """
        Структурное равенство.

        Последовательности сравниваются поэлементно; скаляры сравниваются
        как числа, если оба приводятся к числу ("1" == 1), иначе как строки.
        """
        a_iterable = self.is_iterable(a)
        b_iterable = self.is_iterable(b)

        if a_iterable or b_iterable:
            if not (a_iterable and b_iterable):
                return False
            a_items = list(a)
            b_items = list(b)
            return len(a_items) == len(b_items) and all(
                self.equals(x, y) for x, y in zip(a_items, b_items)
            )

        try:
            return self.to_number(a) == self.to_number(b)
        except UndefinedDomain:
            return str(a) == str(b)


DEFAULT_COERCION: Final[DefaultCoercion] = DefaultCoercion()
