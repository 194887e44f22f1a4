"""
Тесты для Numeral Codec

Проверяет:
1. to_base / from_base с каноническим алфавитом (255 символов)
2. Положительные и отрицательные основания в to_base_arbitrary
3. Пользовательский алфавит с поиском через структурное равенство
4. Ошибки InvalidBase / SymbolNotFound до начала разложения
"""

import pytest

from osabie_numeric.core.domain.alphabet import ALPHABET_SIZE, DIGIT_ALPHABET
from osabie_numeric.core.errors import InvalidBase, SymbolNotFound, UndefinedDomain
from osabie_numeric.core.math.numeral_codec import (
    from_base,
    from_custom_base,
    list_from_base,
    to_base,
    to_base_arbitrary,
    to_custom_base,
)

# =============================================================================
# ТЕСТЫ: КАНОНИЧЕСКИЙ АЛФАВИТ
# =============================================================================


class TestToBase:
    """Тесты to_base"""

    def test_common_bases(self) -> None:
        assert to_base(10, 2) == "1010"
        assert to_base(255, 16) == "FF"
        assert to_base(35, 36) == "Z"
        assert to_base(36, 36) == "10"

    def test_zero(self) -> None:
        assert to_base(0, 10) == "0"

    def test_negative_value_prefix(self) -> None:
        assert to_base(-5, 2) == "-101"

    def test_uses_code_page_beyond_alphanumerics(self) -> None:
        """Цифры >= 62 берутся из продолжения code page"""
        assert to_base(62, 255) == "ǝ"
        assert to_base(254, 255) == "ÿ"
        assert to_base(255, 255) == "10"

    def test_real_without_fraction_accepted(self) -> None:
        assert to_base(10.0, 2) == "1010"

    def test_fractional_value_raises(self) -> None:
        with pytest.raises(UndefinedDomain):
            to_base(10.5, 2)

    @pytest.mark.parametrize("base", [0, 1, -1, 256, 2.5])
    def test_invalid_base_raises(self, base) -> None:
        with pytest.raises(InvalidBase):
            to_base(10, base)

    def test_negative_base_rejected_for_text(self) -> None:
        with pytest.raises(InvalidBase, match="positive"):
            to_base(10, -2)


class TestFromBase:
    """Тесты from_base"""

    def test_common_bases(self) -> None:
        assert from_base("1010", 2) == 10
        assert from_base("FF", 16) == 255
        assert from_base("ÿ", 255) == 254

    def test_negative_prefix(self) -> None:
        """Ведущий "-" из to_base декодируется как знак"""
        assert from_base("-101", 2) == -5
        assert from_base(to_base(-5, 2), 2) == -5
        assert from_base(to_base(-255, 16), 16) == -255

    def test_empty_string(self) -> None:
        assert from_base("", 10) == 0

    def test_unknown_symbol_raises(self) -> None:
        with pytest.raises(SymbolNotFound, match="digit alphabet"):
            from_base("1•0", 10)

    def test_invalid_base_raises(self) -> None:
        with pytest.raises(InvalidBase):
            from_base("10", 1)

    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 36, 64, 100, 254])
    def test_roundtrip(self, base: int) -> None:
        """from_base(to_base(v, b), b) == v"""
        for value in (0, 1, 2, base - 1, base, base + 1, 12345, 10**20 + 7, -1, -12345):
            assert from_base(to_base(value, base), base) == value


# =============================================================================
# ТЕСТЫ: ПРОИЗВОЛЬНОЕ ОСНОВАНИЕ
# =============================================================================


class TestToBaseArbitrary:
    """Тесты to_base_arbitrary / list_from_base"""

    def test_positive_base_digits(self) -> None:
        assert to_base_arbitrary(10, 2) == [1, 0, 1, 0]
        assert to_base_arbitrary(1000, 300) == [3, 100]
        assert to_base_arbitrary(0, 7) == [0]

    def test_positive_base_negative_value(self) -> None:
        """Отрицательное значение → все цифры отрицательны"""
        assert to_base_arbitrary(-10, 2) == [-1, 0, -1, 0]
        assert list_from_base(to_base_arbitrary(-10, 2), 2) == -10

    def test_negative_base_digits(self) -> None:
        """Цифры в основании -2 неотрицательны"""
        assert to_base_arbitrary(2, -2) == [1, 1, 0]
        assert to_base_arbitrary(-3, -2) == [1, 1, 0, 1]
        assert to_base_arbitrary(-1, -2) == [1, 1]

    @pytest.mark.parametrize("base", [-2, -3, -10])
    def test_negative_base_roundtrip(self, base: int) -> None:
        for value in range(-100, 101):
            digits = to_base_arbitrary(value, base)
            assert all(0 <= d < abs(base) for d in digits)
            assert list_from_base(digits, base) == value

    def test_list_from_base(self) -> None:
        assert list_from_base([1, 2, 3], 10) == 123
        assert list_from_base([], 10) == 0
        assert list_from_base((1, 1, 0), -2) == 2

    def test_invalid_base_raises(self) -> None:
        with pytest.raises(InvalidBase):
            to_base_arbitrary(5, 0)

        with pytest.raises(InvalidBase):
            list_from_base([1, 0], 1)


# =============================================================================
# ТЕСТЫ: ПОЛЬЗОВАТЕЛЬСКИЙ АЛФАВИТ
# =============================================================================


class TestCustomBase:
    """Тесты to_custom_base / from_custom_base"""

    def test_string_alphabet(self) -> None:
        assert to_custom_base(5, "ab") == ["b", "a", "b"]
        assert from_custom_base("bab", "ab") == 5

    def test_list_alphabet(self) -> None:
        assert to_custom_base(5, ["x", "y", "z"]) == ["y", "z"]
        assert from_custom_base(["y", "z"], ["x", "y", "z"]) == 5

    def test_non_iterable_alphabet_split_into_characters(self) -> None:
        """Число как алфавит — символы его строковой записи"""
        assert to_custom_base(3, 12) == ["2", "2"]
        assert from_custom_base("21", 12) == 2

    def test_structural_equality_lookup(self) -> None:
        """Поиск символа через equals: "1" совпадает с 1"""
        assert from_custom_base(["1", "0"], [0, 1]) == 2
        assert from_custom_base([[1, 2], [3]], [[3], [1, 2]]) == 2

    def test_roundtrip(self) -> None:
        alphabet = ["α", "β", "γ", "δ"]
        for value in range(0, 300):
            assert from_custom_base(to_custom_base(value, alphabet), alphabet) == value

    def test_missing_symbol_raises(self) -> None:
        with pytest.raises(SymbolNotFound, match="custom alphabet"):
            from_custom_base("abc", "ab")

    def test_empty_alphabet_raises(self) -> None:
        with pytest.raises(InvalidBase):
            to_custom_base(5, [])

        with pytest.raises(InvalidBase):
            from_custom_base("a", "a")

    def test_negative_value_raises(self) -> None:
        with pytest.raises(UndefinedDomain):
            to_custom_base(-5, "ab")


class TestDigitAlphabet:
    """Тесты канонического алфавита"""

    def test_size_and_uniqueness(self) -> None:
        assert len(DIGIT_ALPHABET) == ALPHABET_SIZE == 255
        assert len(set(DIGIT_ALPHABET)) == 255

    def test_fixed_order(self) -> None:
        assert DIGIT_ALPHABET[:10] == "0123456789"
        assert DIGIT_ALPHABET[10] == "A"
        assert DIGIT_ALPHABET[36] == "a"
        assert DIGIT_ALPHABET[62] == "ǝ"
        assert DIGIT_ALPHABET[-1] == "ÿ"

    def test_contains_newline_and_space(self) -> None:
        assert "\n" in DIGIT_ALPHABET
        assert " " in DIGIT_ALPHABET

    def test_excludes_compression_marker(self) -> None:
        assert "•" not in DIGIT_ALPHABET
