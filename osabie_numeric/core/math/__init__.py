"""
Core math modules для osabie-numeric

Числовые примитивы команд интерпретатора: арифметика, теория чисел,
системы счисления, цепные дроби, агрегатная статистика, специальные последовательности.
"""

# Arithmetic Core
from osabie_numeric.core.math.arithmetic import divide, gcd, lcm, mod, power

# Continued Fractions
from osabie_numeric.core.math.continued_fraction import (
    ContinuedFraction,
    ContinuedFractionState,
    continued_fraction,
    next_fraction_digit,
)

# Factorial & Gamma
from osabie_numeric.core.math.gamma import (
    LANCZOS_COEFFICIENTS,
    LANCZOS_G,
    factorial,
    gamma_function,
)

# Number Theory Engine
from osabie_numeric.core.math.number_theory import (
    PRIME_CACHE,
    divisors,
    euler_totient,
    get_prime_index,
    is_prime,
    n_choose_k,
    n_permute_k,
    nearest_prime,
    next_prime,
    nth_prime,
    number_from_prime_exponents,
    prev_prime,
    prime_exponents,
    prime_factors,
)

# Numeral Codec
from osabie_numeric.core.math.numeral_codec import (
    from_base,
    from_custom_base,
    list_from_base,
    to_base,
    to_base_arbitrary,
    to_custom_base,
)

# Special Sequences
from osabie_numeric.core.math.special_sequences import (
    fibonacci,
    from_roman_numeral,
    is_square,
    lucas,
    to_roman_numeral,
)

# Aggregate Statistics
from osabie_numeric.core.math.statistics import arithmetic_mean, max_of, median, min_of

__all__ = [
    # Arithmetic Core
    "divide",
    "gcd",
    "lcm",
    "mod",
    "power",
    # Continued Fractions
    "ContinuedFraction",
    "ContinuedFractionState",
    "continued_fraction",
    "next_fraction_digit",
    # Factorial & Gamma
    "LANCZOS_COEFFICIENTS",
    "LANCZOS_G",
    "factorial",
    "gamma_function",
    # Number Theory Engine
    "PRIME_CACHE",
    "divisors",
    "euler_totient",
    "get_prime_index",
    "is_prime",
    "n_choose_k",
    "n_permute_k",
    "nearest_prime",
    "next_prime",
    "nth_prime",
    "number_from_prime_exponents",
    "prev_prime",
    "prime_exponents",
    "prime_factors",
    # Numeral Codec
    "from_base",
    "from_custom_base",
    "list_from_base",
    "to_base",
    "to_base_arbitrary",
    "to_custom_base",
    # Special Sequences
    "fibonacci",
    "from_roman_numeral",
    "is_square",
    "lucas",
    "to_roman_numeral",
    # Aggregate Statistics
    "arithmetic_mean",
    "max_of",
    "median",
    "min_of",
]
