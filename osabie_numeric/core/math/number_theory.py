"""
Number Theory Engine — простые числа, факторизация, делители, комбинаторика

Модуль обеспечивает:
- Детерминированную проверку простоты пробным делением (без вероятностных тестов)
- Поиск следующего / предыдущего / ближайшего простого
- Мемоизированный nth_prime поверх общего Prime Cache
- Разложение на простые множители и вектор показателей
- Делители, функцию Эйлера, nCk / nPk

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пробное деление ограничено floor(sqrt(n))
2. Prime Cache только растёт, записи не изменяются
3. number_from_prime_exponents(prime_exponents(n)) == n для n >= 1
"""

import math
from collections import Counter
from typing import Final

from osabie_numeric.config import get_settings
from osabie_numeric.core.domain.number import Number, is_integral, kind_of, require_integer
from osabie_numeric.core.errors import UndefinedDomain
from osabie_numeric.core.math.arithmetic import divide, gcd, power
from osabie_numeric.core.math.gamma import factorial
from osabie_numeric.primes.cache import PrimeCache, PrimeCacheConfig

# Малые простые, кратные которым отсеиваются до основного цикла
SMALL_PRIMES: Final[tuple[int, ...]] = (2, 3, 5, 7)

# Шаг колеса 6k ± 1
WHEEL_STEP: Final[int] = 6


# =============================================================================
# PRIMALITY
# =============================================================================


def is_prime(value: Number) -> bool:
    """
    Проверка простоты пробным делением.

    Кратные 2, 3, 5, 7 отсеиваются явно, затем проверяются n mod p и
    n mod (p + 2) для p = 5, 11, 17, ... до floor(sqrt(n)).
    Нецелое значение простым не является.

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(91)
        False
        >>> is_prime(1)
        False
    """
    kind_of(value)
    if not is_integral(value):
        return False

    n = int(value)
    if n in SMALL_PRIMES:
        return True
    if n < 2 or any(n % p == 0 for p in SMALL_PRIMES):
        return False

    upper_bound = math.isqrt(n)
    candidate = 5
    while candidate <= upper_bound:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += WHEEL_STEP
    return True


def _successor_prime(prime: int) -> int:
    # Шаг по нечётным числам: prime предполагается простым (2 или нечётным)
    if prime < 2:
        return 2
    if prime == 2:
        return 3
    candidate = prime + 2
    while not is_prime(candidate):
        candidate += 2
    return candidate


def next_prime(value: Number) -> int:
    """
    Наименьшее простое, строго большее value.

    Real округляется вниз; value < 2 → 2.

    Examples:
        >>> next_prime(7)
        11
        >>> next_prime(7.9)
        11
        >>> next_prime(-4)
        2
    """
    kind_of(value)
    n = math.floor(value)
    if n < 2:
        return 2

    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def prev_prime(value: Number) -> int:
    """
    Наибольшее простое, строго меньшее value.

    Real округляется вверх.

    Raises:
        UndefinedDomain: если простых меньше value нет (value <= 2)
    """
    kind_of(value)
    n = math.ceil(value)
    if n <= 2:
        raise UndefinedDomain(f"There is no prime below {value}")

    candidate = n - 1
    while not is_prime(candidate):
        candidate -= 1
    return candidate


def _round_half_away_from_zero(value: Number) -> int:
    if isinstance(value, int):
        return value
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def nearest_prime(value: Number) -> int:
    """
    Ближайшее к value простое.

    Сканирует симметричные смещения от round(value); при равном расстоянии
    выбирается большее простое.

    Examples:
        >>> nearest_prime(10)
        11
        >>> nearest_prime(9.5)
        11
        >>> nearest_prime(8.9)
        7
    """
    kind_of(value)
    center = _round_half_away_from_zero(value)
    offset = 0

    while True:
        upper = center + offset
        lower = center - offset

        if is_prime(upper):
            if offset == 0:
                return upper
            if is_prime(lower) and abs(value - lower) < abs(value - upper):
                return lower
            return upper
        if is_prime(lower):
            return lower

        offset += 1


# =============================================================================
# PRIME ENUMERATION (Prime Cache)
# =============================================================================

# Общий кэш процесса: индекс → простое
PRIME_CACHE: Final[PrimeCache] = PrimeCache(
    successor=_successor_prime,
    config=PrimeCacheConfig(use_lock=get_settings().prime_cache_lock),
)


def nth_prime(n: Number) -> int:
    """
    n-е простое (0-indexed), мемоизированное в PRIME_CACHE.

    Отрицательный индекс → 0.

    Examples:
        >>> nth_prime(0)
        2
        >>> nth_prime(4)
        11
    """
    index = require_integer(n, "n")
    if index < 0:
        return 0
    return PRIME_CACHE.get(index)


def get_prime_index(value: Number) -> int:
    """
    Индекс (0-indexed) наибольшего простого <= value; -1 если value < 2.

    Examples:
        >>> get_prime_index(11)
        4
        >>> get_prime_index(12)
        4
        >>> get_prime_index(1)
        -1
    """
    kind_of(value)
    if value < 2:
        return -1

    index = 0
    while nth_prime(index + 1) <= value:
        index += 1
    return index


# =============================================================================
# FACTORIZATION
# =============================================================================


def prime_factors(value: Number) -> list[int]:
    """
    Разложение на простые множители с кратностями, по возрастанию.

    Examples:
        >>> prime_factors(60)
        [2, 2, 3, 5]
        >>> prime_factors(1)
        []
    """
    remaining = require_integer(value)
    factors: list[int] = []
    index = 0

    while remaining >= 2:
        prime = nth_prime(index)
        if prime * prime > remaining:
            # Остаток без делителей до sqrt является простым
            factors.append(remaining)
            break
        if remaining % prime == 0:
            factors.append(prime)
            remaining //= prime
        else:
            index += 1

    return factors


def prime_exponents(value: Number) -> list[int]:
    """
    Показатели разложения n = 2^a * 3^b * 5^c * ... как [a, b, c, ...].

    Хвостовые нули отбрасываются.

    Examples:
        >>> prime_exponents(12)
        [2, 1]
        >>> prime_exponents(9)
        [0, 2]
        >>> prime_exponents(1)
        []
    """
    remaining = Counter(prime_factors(value))
    exponents: list[int] = []
    index = 0

    while remaining:
        exponents.append(remaining.pop(nth_prime(index), 0))
        index += 1

    return exponents


def number_from_prime_exponents(exponents: list[Number]) -> Number:
    """
    Обратное к prime_exponents: Π nth_prime(i) ** exponents[i].

    Examples:
        >>> number_from_prime_exponents([2, 1])
        12
        >>> number_from_prime_exponents([])
        1
    """
    result: Number = 1
    for index, exponent in enumerate(exponents):
        result *= power(nth_prime(index), exponent)
    return result


# =============================================================================
# DIVISORS & TOTIENT
# =============================================================================


def divisors(value: Number) -> list[int]:
    """
    Все делители |value| по возрастанию.

    Пробное деление до floor(sqrt(|value|)); каждый делитель d даёт пару
    |value| / d, кроме d * d == |value|. divisors(0) == [].

    Examples:
        >>> divisors(12)
        [1, 2, 3, 4, 6, 12]
        >>> divisors(-9)
        [1, 3, 9]
    """
    n = abs(require_integer(value))
    small: list[int] = []
    large: list[int] = []

    for d in range(1, math.isqrt(n) + 1):
        if n % d == 0:
            small.append(d)
            if d * d != n:
                large.append(n // d)

    return small + large[::-1]


def euler_totient(value: Number) -> int:
    """
    Функция Эйлера прямым подсчётом k в [1, n] с gcd(n, k) == 1.

    Examples:
        >>> euler_totient(9)
        6
        >>> euler_totient(1)
        1
    """
    n = require_integer(value)
    return sum(1 for k in range(1, n + 1) if gcd(n, k) == 1)


# =============================================================================
# COMBINATORICS
# =============================================================================


def n_choose_k(n: Number, k: Number) -> int:
    """
    Биномиальный коэффициент через факториалы; 0 если k > n.

    Examples:
        >>> n_choose_k(5, 2)
        10
        >>> n_choose_k(2, 5)
        0
    """
    n = require_integer(n, "n")
    k = require_integer(k, "k")
    if k > n:
        return 0
    return divide(factorial(n), factorial(k) * factorial(n - k))


def n_permute_k(n: Number, k: Number) -> int:
    """
    Число размещений через факториалы; 0 если k > n.

    Examples:
        >>> n_permute_k(5, 2)
        20
    """
    n = require_integer(n, "n")
    k = require_integer(k, "k")
    if k > n:
        return 0
    return divide(factorial(n), factorial(n - k))
