"""
Continued Fraction — ленивый поток цифр обобщённой цепной дроби

    x = a(0) + b(1) / (a(1) + b(2) / (a(2) + b(3) / (a(3) + ...)))

a(k) — неполные знаменатели, b(k) — неполные числители (Integer, k >= 0).

Выдача цифр (по Госперу): из состояния (k, p0, q0, p1, q1) сравниваются
floor(p0/q0) и floor(p1/q1).
- Совпали (цифра x, остатки r0, r1) → выдать x, перейти в
  (k, radix*r0, q0, radix*r1, q1) без нового члена.
- Не совпали → k += 1, свернуть a(k), b(k) в новые подходящие дроби:
      (p1, q1) ← (a(k)*p1 + b(k)*p0, a(k)*q1 + b(k)*q0), (p0, q0) ← старые (p1, q1)

Первая выданная цифра — целая часть. Поток бесконечен: длину определяет
потребитель. Отмена — просто прекращение чтения (фоновой работы нет).
"""

from dataclasses import dataclass
from typing import Callable, Iterator

from osabie_numeric.core.errors import DivisionByZero
from osabie_numeric.core.math.arithmetic import divide, mod

TermFunction = Callable[[int], int]


@dataclass(frozen=True)
class ContinuedFractionState:
    """Две последовательные подходящие дроби и индекс текущего члена."""

    k: int
    p0: int
    q0: int
    p1: int
    q1: int

    @classmethod
    def initial(cls, a: TermFunction, b: TermFunction) -> "ContinuedFractionState":
        """Начальное состояние (1, a(0), 1, a(1)*a(0) + b(1), a(1))."""
        a0 = a(0)
        a1 = a(1)
        return cls(k=1, p0=a0, q0=1, p1=a1 * a0 + b(1), q1=a1)


def next_fraction_digit(
    a: TermFunction,
    b: TermFunction,
    state: ContinuedFractionState,
    radix: int = 10,
) -> tuple[int, ContinuedFractionState]:
    """
    Одна цифра и следующее состояние.

    Raises:
        DivisionByZero: если знаменатель подходящей дроби равен 0
            (вырожденная последовательность членов)
    """
    k, p0, q0, p1, q1 = state.k, state.p0, state.q0, state.p1, state.q1

    while True:
        if q0 == 0 or q1 == 0:
            raise DivisionByZero(f"Degenerate continued fraction convergent at term {k}")

        digit = divide(p0, q0)
        if digit == divide(p1, q1):
            return digit, ContinuedFractionState(
                k=k,
                p0=radix * mod(p0, q0),
                q0=q0,
                p1=radix * mod(p1, q1),
                q1=q1,
            )

        k += 1
        x = a(k)
        y = b(k)
        p0, q0, p1, q1 = p1, q1, x * p1 + y * p0, x * q1 + y * q0


class ContinuedFraction:
    """
    Цепная дробь как перезапускаемый поток цифр.

    Каждый iter() начинает с начального состояния; внутри одного итератора
    перемотка невозможна.

    Examples:
        >>> from itertools import islice
        >>> sqrt2 = ContinuedFraction(lambda k: 1 if k == 0 else 2, lambda k: 1)
        >>> list(islice(sqrt2, 6))
        [1, 4, 1, 4, 2, 1]
    """

    def __init__(self, a: TermFunction, b: TermFunction, radix: int = 10):
        """
        Args:
            a: неполные знаменатели a(k)
            b: неполные числители b(k)
            radix: основание выдаваемых цифр (default: 10)
        """
        self.a = a
        self.b = b
        self.radix = radix
        if self.radix < 2:
            raise ValueError(f"radix must be >= 2, got {self.radix}")

    def __iter__(self) -> Iterator[int]:
        state = ContinuedFractionState.initial(self.a, self.b)
        while True:
            digit, state = next_fraction_digit(self.a, self.b, state, self.radix)
            yield digit


def continued_fraction(a: TermFunction, b: TermFunction) -> Iterator[int]:
    """Новый бесконечный итератор десятичных цифр цепной дроби."""
    return iter(ContinuedFraction(a, b))
