"""
Domain models and value objects.

Contains the Number tag, the canonical digit alphabet and the Roman numeral table.
The recursive value tree lives in osabie_numeric.core.domain.value_tree
(it depends on the coercion contract).
"""

from osabie_numeric.core.domain.alphabet import ALPHABET_SIZE, DIGIT_ALPHABET, DIGIT_INDEX
from osabie_numeric.core.domain.number import (
    Number,
    NumberKind,
    any_real,
    is_integer,
    is_integral,
    is_number,
    is_real,
    kind_of,
    require_integer,
)
from osabie_numeric.core.domain.roman import ROMAN_NUMERAL_TABLE, RomanNumeralEntry

__all__ = [
    # Number
    "Number",
    "NumberKind",
    "kind_of",
    "is_number",
    "is_integer",
    "is_real",
    "any_real",
    "is_integral",
    "require_integer",
    # Alphabet
    "ALPHABET_SIZE",
    "DIGIT_ALPHABET",
    "DIGIT_INDEX",
    # Roman numerals
    "ROMAN_NUMERAL_TABLE",
    "RomanNumeralEntry",
]
