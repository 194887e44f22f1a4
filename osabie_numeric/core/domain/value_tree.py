"""
Value Tree — рекурсивное представление вложенных последовательностей

Value = LeafValue | SequenceValue. Агрегатные функции (max/min/mean/median)
реализованы как обходчики этого дерева: глубина вложенности не ограничена,
но всегда явна.

Лист хранит исходное (некоэрсированное) значение: приведение к Number
выполняет обходчик через ValueCoercion, так как политика пропуска
нечисловых элементов у операций разная.
"""

from typing import Any, Union

from pydantic import BaseModel, Field

from osabie_numeric.core.contracts.coercion import DEFAULT_COERCION, ValueCoercion


class LeafValue(BaseModel):
    """Неитерируемый элемент (число, строка-число, произвольный скаляр)."""

    raw: Any = Field(..., description="Исходное значение со стека")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class SequenceValue(BaseModel):
    """Последовательность дочерних значений."""

    items: tuple["Value", ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.items)

    @property
    def head(self) -> "Value":
        return self.items[0]


Value = Union[LeafValue, SequenceValue]

SequenceValue.model_rebuild()


def build_value_tree(raw: Any, coercion: ValueCoercion = DEFAULT_COERCION) -> Value:
    """
    Построение дерева из значения со стека.

    Итерируемость определяет коэрсия хоста (строки итерируемыми не считаются).
    """
    if isinstance(raw, (LeafValue, SequenceValue)):
        return raw
    if coercion.is_iterable(raw):
        return SequenceValue(items=tuple(build_value_tree(item, coercion) for item in raw))
    return LeafValue(raw=raw)
