"""
Тесты для Continued Fraction

Проверяет:
1. Первая цифра — целая часть, далее дробные цифры
2. Поток перезапускается каждым iter()
3. Вырожденные знаменатели → DivisionByZero
"""

from itertools import islice

import pytest

from osabie_numeric.core.errors import DivisionByZero
from osabie_numeric.core.math.continued_fraction import (
    ContinuedFraction,
    ContinuedFractionState,
    continued_fraction,
    next_fraction_digit,
)


def one_third_a(k: int) -> int:
    return 0 if k == 0 else 3


def one_third_b(k: int) -> int:
    return 1 if k == 1 else 0


def sqrt2_a(k: int) -> int:
    return 1 if k == 0 else 2


def sqrt2_b(k: int) -> int:
    return 1


class TestContinuedFractionDigits:
    """Цифры известных констант"""

    def test_one_third(self) -> None:
        """1/3 = 0 + 1/3 → 0, 3, 3, 3, ..."""
        digits = list(islice(continued_fraction(one_third_a, one_third_b), 8))
        assert digits == [0, 3, 3, 3, 3, 3, 3, 3]

    def test_sqrt2(self) -> None:
        """√2 = 1 + 1/(2 + 1/(2 + ...))"""
        digits = list(islice(continued_fraction(sqrt2_a, sqrt2_b), 10))
        assert digits == [1, 4, 1, 4, 2, 1, 3, 5, 6, 2]

    def test_e(self) -> None:
        """e = 2 + 1/(1 + 1/(2 + 1/(1 + 1/(1 + 1/(4 + ...)))))"""

        def a(k: int) -> int:
            if k == 0:
                return 2
            return 2 * (k + 1) // 3 if k % 3 == 2 else 1

        digits = list(islice(continued_fraction(a, lambda k: 1), 8))
        assert digits == [2, 7, 1, 8, 2, 8, 1, 8]

    def test_integer_value(self) -> None:
        """Целое число: целая часть, затем нули"""
        digits = list(islice(continued_fraction(lambda k: 5 if k == 0 else 1, lambda k: 0), 4))
        assert digits == [5, 0, 0, 0]


class TestContinuedFractionStream:
    """Тесты ленивого потока"""

    def test_restartable(self) -> None:
        """Каждый iter() начинает с начала"""
        fraction = ContinuedFraction(sqrt2_a, sqrt2_b, radix=10)

        first = list(islice(fraction, 5))
        second = list(islice(fraction, 5))

        assert first == second == [1, 4, 1, 4, 2]

    def test_iterator_is_single_pass(self) -> None:
        stream = continued_fraction(sqrt2_a, sqrt2_b)

        assert list(islice(stream, 2)) == [1, 4]
        assert list(islice(stream, 2)) == [1, 4]
        assert next(stream) == 2

    def test_other_radix(self) -> None:
        """1/3 в основании 3 → 0, 1, 0, 0, ..."""
        fraction = ContinuedFraction(one_third_a, one_third_b, radix=3)
        assert list(islice(fraction, 4)) == [0, 1, 0, 0]

    def test_invalid_radix_raises(self) -> None:
        with pytest.raises(ValueError, match="radix"):
            ContinuedFraction(sqrt2_a, sqrt2_b, radix=1)

    def test_default_radix_is_decimal(self) -> None:
        """ContinuedFraction и continued_fraction выдают одни и те же цифры"""
        assert ContinuedFraction(sqrt2_a, sqrt2_b).radix == 10
        assert list(islice(ContinuedFraction(sqrt2_a, sqrt2_b), 6)) == list(
            islice(continued_fraction(sqrt2_a, sqrt2_b), 6)
        )


class TestContinuedFractionState:
    """Тесты явного состояния"""

    def test_initial_state(self) -> None:
        state = ContinuedFractionState.initial(sqrt2_a, sqrt2_b)
        assert state == ContinuedFractionState(k=1, p0=1, q0=1, p1=3, q1=2)

    def test_next_digit_is_pure(self) -> None:
        """Одно и то же состояние → одна и та же цифра"""
        state = ContinuedFractionState.initial(sqrt2_a, sqrt2_b)

        digit, new_state = next_fraction_digit(sqrt2_a, sqrt2_b, state)
        again, _ = next_fraction_digit(sqrt2_a, sqrt2_b, state)

        assert digit == again == 1
        assert new_state != state

    def test_degenerate_denominator_raises(self) -> None:
        with pytest.raises(DivisionByZero):
            next(continued_fraction(lambda k: 0, lambda k: 0))
