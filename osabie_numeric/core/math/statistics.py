"""
Aggregate Statistics — max / min / mean / median над вложенными последовательностями

Вход (значение со стека) превращается в дерево Value = LeafValue | SequenceValue,
и каждая агрегатная функция — обходчик этого дерева.

СЕМАНТИКА:
- max_of / min_of: вложенная последовательность сначала сводится рекурсивно,
  затем участвует в общем экстремуме. Листья приводятся к числу через коэрсию;
  нечисловые листья пропускаются (не ошибка). Скаляр разбивается на символы.
- arithmetic_mean: если голова входа сама последовательность — среднее
  по позициям (по столбцам), а не одно общее среднее.
- median: все элементы приводятся к числу (ошибка коэрсии пробрасывается),
  пустой вход → пустой результат [].
"""

from typing import Any, Callable, Optional, Union

from osabie_numeric.core.contracts.coercion import DEFAULT_COERCION, ValueCoercion
from osabie_numeric.core.domain.number import Number
from osabie_numeric.core.domain.value_tree import LeafValue, SequenceValue, build_value_tree
from osabie_numeric.core.errors import UndefinedDomain
from osabie_numeric.core.logging import get_logger

logger = get_logger(__name__)

MeanResult = Union[Number, list[Any]]


def _as_sequence(value: Any, coercion: ValueCoercion) -> SequenceValue:
    tree = build_value_tree(value, coercion)
    if isinstance(tree, SequenceValue):
        return tree
    # Скаляр (в т.ч. число) рассматривается как последовательность символов
    return SequenceValue(items=tuple(LeafValue(raw=symbol) for symbol in str(tree.raw)))


# =============================================================================
# MAX / MIN
# =============================================================================


def _extremum(
    node: SequenceValue,
    better: Callable[[Number, Number], bool],
    coercion: ValueCoercion,
) -> Optional[Number]:
    result: Optional[Number] = None

    for item in node.items:
        if isinstance(item, SequenceValue):
            candidate = _extremum(item, better, coercion)
        else:
            try:
                candidate = coercion.to_number(item.raw)
            except UndefinedDomain:
                logger.debug("skipping non-numeric leaf %r", item.raw)
                continue

        if candidate is None:
            continue
        if result is None or better(candidate, result):
            result = candidate

    return result


def max_of(value: Any, coercion: ValueCoercion = DEFAULT_COERCION) -> Optional[Number]:
    """
    Максимум по всем числовым листьям (рекурсивно).

    Returns:
        Максимум или None, если числовых листьев нет

    Examples:
        >>> max_of([1, [5, 2], "3"])
        5
        >>> max_of(4172)
        7
        >>> max_of([1, "a", 2])
        2
    """
    return _extremum(_as_sequence(value, coercion), lambda a, b: a > b, coercion)


def min_of(value: Any, coercion: ValueCoercion = DEFAULT_COERCION) -> Optional[Number]:
    """
    Минимум по всем числовым листьям (рекурсивно).

    Examples:
        >>> min_of([4, [0, 9], -2.5])
        -2.5
    """
    return _extremum(_as_sequence(value, coercion), lambda a, b: a < b, coercion)


# =============================================================================
# MEAN
# =============================================================================


def _mean_of_tree(node: SequenceValue, coercion: ValueCoercion) -> MeanResult:
    if not node.items:
        raise UndefinedDomain("arithmetic mean of an empty sequence is undefined")

    if isinstance(node.head, SequenceValue):
        # Элементы являются строками таблицы; среднее по каждой позиции
        rows = [
            item.items if isinstance(item, SequenceValue) else (item,)
            for item in node.items
        ]
        width = max(len(row) for row in rows)
        return [
            _mean_of_tree(
                SequenceValue(items=tuple(row[position] for row in rows if position < len(row))),
                coercion,
            )
            for position in range(width)
        ]

    total: Number = 0
    for item in node.items:
        if isinstance(item, SequenceValue):
            raise UndefinedDomain("cannot average a nested sequence with scalar rows")
        total += coercion.to_number(item.raw)
    return total / len(node.items)


def arithmetic_mean(value: Any, coercion: ValueCoercion = DEFAULT_COERCION) -> MeanResult:
    """
    Среднее арифметическое.

    Плоский вход → sum / count. Если голова — последовательность,
    результат — список средних по позициям (столбцам).

    Raises:
        UndefinedDomain: для пустого входа или нечислового листа

    Examples:
        >>> arithmetic_mean([1, 2, 3, 4])
        2.5
        >>> arithmetic_mean([[1, 2], [3, 4]])
        [2.0, 3.0]
    """
    return _mean_of_tree(_as_sequence(value, coercion), coercion)


# =============================================================================
# MEDIAN
# =============================================================================


def median(value: Any, coercion: ValueCoercion = DEFAULT_COERCION) -> Union[Number, list[Any]]:
    """
    Медиана: средний элемент (нечётная длина) или среднее двух средних (чётная).

    Returns:
        Медиана, либо [] для пустого входа

    Raises:
        UndefinedDomain: если элемент не приводится к числу

    Examples:
        >>> median([1, 2, 3, 4])
        2.5
        >>> median([3, "1", 2])
        2
        >>> median([])
        []
    """
    tree = _as_sequence(value, coercion)
    if not tree.items:
        return []

    numbers: list[Number] = []
    for item in tree.items:
        if isinstance(item, SequenceValue):
            raise UndefinedDomain("median expects a flat sequence of numbers")
        numbers.append(coercion.to_number(item.raw))

    ordered = sorted(numbers)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]
