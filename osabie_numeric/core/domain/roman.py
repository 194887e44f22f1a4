"""
Roman Numeral Table — таблица римских цифр

13 пар (value, symbol) в строго убывающем порядке value.
Жадное вычитание по этой таблице точно и канонично (включая вычитательные
пары CM, CD, XC, XL, IX, IV).
"""

from typing import Final

from pydantic import BaseModel, Field


class RomanNumeralEntry(BaseModel):
    """Одна строка таблицы римских цифр (immutable)."""

    value: int = Field(..., gt=0, description="Значение символа")
    symbol: str = Field(..., min_length=1, max_length=2, description="Римский символ или пара")

    model_config = {"frozen": True}


ROMAN_NUMERAL_TABLE: Final[tuple[RomanNumeralEntry, ...]] = tuple(
    RomanNumeralEntry(value=value, symbol=symbol)
    for value, symbol in (
        (1000, "M"),
        (900, "CM"),
        (500, "D"),
        (400, "CD"),
        (100, "C"),
        (90, "XC"),
        (50, "L"),
        (40, "XL"),
        (10, "X"),
        (9, "IX"),
        (5, "V"),
        (4, "IV"),
        (1, "I"),
    )
)
