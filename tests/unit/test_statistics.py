"""
Тесты для Aggregate Statistics — max / min / mean / median
"""

import logging

import pytest

from osabie_numeric.core.contracts.coercion import DefaultCoercion
from osabie_numeric.core.errors import UndefinedDomain
from osabie_numeric.core.math.statistics import arithmetic_mean, max_of, median, min_of


class WordCoercion(DefaultCoercion):
    """Коэрсия хоста, понимающая слова-числа."""

    WORDS = {"one": 1, "two": 2, "ten": 10}

    def to_number(self, value):
        if value in self.WORDS:
            return self.WORDS[value]
        return super().to_number(value)


# =============================================================================
# ТЕСТЫ: MAX / MIN
# =============================================================================


class TestMaxMin:
    """Тесты max_of / min_of"""

    def test_flat(self) -> None:
        assert max_of([3, 9, 2]) == 9
        assert min_of([3, 9, 2]) == 2

    def test_nested_reduced_recursively(self) -> None:
        assert max_of([1, [5, [11, 2]], 3]) == 11
        assert min_of([4, [0, [-7]], 9]) == -7

    def test_numeric_strings_coerced(self) -> None:
        assert max_of(["3", "12", 4]) == 12
        assert min_of(["-1.5", 0]) == -1.5

    def test_non_numeric_leaves_skipped(self) -> None:
        assert max_of([1, "a", 2]) == 2
        assert min_of(["x", [5, "y"], 7]) == 5

    def test_no_numeric_leaves(self) -> None:
        assert max_of(["a", "b"]) is None
        assert min_of([]) is None

    def test_scalar_split_into_digits(self) -> None:
        """Скаляр обрабатывается как последовательность символов"""
        assert max_of(4172) == 7
        assert min_of("4172") == 1

    def test_mixed_kinds(self) -> None:
        assert max_of([1, 2.5, 2]) == 2.5

    def test_skipped_leaf_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="osabie_numeric"):
            max_of([1, "abc"])

        assert "skipping non-numeric leaf" in caplog.text

    def test_injected_coercion(self) -> None:
        assert max_of(["one", "ten", 3], coercion=WordCoercion()) == 10


# =============================================================================
# ТЕСТЫ: MEAN
# =============================================================================


class TestArithmeticMean:
    """Тесты arithmetic_mean"""

    def test_flat(self) -> None:
        assert arithmetic_mean([1, 2, 3, 4]) == pytest.approx(2.5)
        assert arithmetic_mean([5]) == pytest.approx(5.0)

    def test_column_wise_for_nested_head(self) -> None:
        """Голова — последовательность → среднее по столбцам"""
        assert arithmetic_mean([[1, 2], [3, 4]]) == [pytest.approx(2.0), pytest.approx(3.0)]

    def test_ragged_rows(self) -> None:
        """Короткие строки не участвуют в недостающих столбцах"""
        assert arithmetic_mean([[1, 2, 3], [3, 4]]) == [
            pytest.approx(2.0),
            pytest.approx(3.0),
            pytest.approx(3.0),
        ]

    def test_numeric_strings(self) -> None:
        assert arithmetic_mean(["1", "2", 3]) == pytest.approx(2.0)

    def test_scalar_digits(self) -> None:
        assert arithmetic_mean(123) == pytest.approx(2.0)

    def test_empty_raises(self) -> None:
        with pytest.raises(UndefinedDomain, match="empty"):
            arithmetic_mean([])

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(UndefinedDomain):
            arithmetic_mean([1, "a"])

    def test_injected_coercion(self) -> None:
        assert arithmetic_mean(["one", "two"], coercion=WordCoercion()) == pytest.approx(1.5)


# =============================================================================
# ТЕСТЫ: MEDIAN
# =============================================================================


class TestMedian:
    """Тесты median"""

    def test_odd_length(self) -> None:
        assert median([3, 1, 2]) == 2

    def test_even_length(self) -> None:
        assert median([1, 2, 3, 4]) == pytest.approx(2.5)
        assert median([4, 1]) == pytest.approx(2.5)

    def test_numeric_strings(self) -> None:
        assert median(["10", "2", "7"]) == 7

    def test_empty_returns_empty(self) -> None:
        assert median([]) == []

    def test_non_numeric_raises(self) -> None:
        """Ошибка коэрсии пробрасывается"""
        with pytest.raises(UndefinedDomain):
            median([1, "a", 2])

    def test_nested_raises(self) -> None:
        with pytest.raises(UndefinedDomain, match="flat"):
            median([1, [2, 3]])
