"""
Digit Alphabet — канонический code page интерпретатора

255 символов в фиксированном порядке: сначала цифры и латиница, затем
остальные символы code page (0x00..0xff), ещё не вошедшие в список.
Индекс символа = значение цифры 0..254.

Порядок воспроизводится побайтно: от него зависят закодированные программы
и вывод интерпретатора. Символ '•' в алфавит не входит (он открывает
сжатые base-255 строки).
"""

from typing import Final

DIGIT_ALPHABET: Final[str] = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmno"
    "pqrstuvwxyzǝʒαβγδεζηθвимнт\nΓΔΘιΣΩ≠∊∍∞₁₂₃₄₅₆ !\"#$%"
    "&'()*+,-./:;<=>?@[\\]^_`{|}~Ƶ€Λ‚ƒ„…†‡ˆ‰Š‹ŒĆŽƶĀ‘’“”–"
    "—˜™š›œćžŸā¡¢£¤¥¦§¨©ª«¬λ®¯°±²³´µ¶·¸¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉ"
    "ÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞßàáâãäåæçèéêëìíîïðñòóôõö÷øùúûüýþÿ"
)

ALPHABET_SIZE: Final[int] = 255

# Обратный индекс символ → значение цифры
DIGIT_INDEX: Final[dict[str, int]] = {
    symbol: index for index, symbol in enumerate(DIGIT_ALPHABET)
}

if len(DIGIT_ALPHABET) != ALPHABET_SIZE or len(DIGIT_INDEX) != ALPHABET_SIZE:
    raise RuntimeError(
        f"Digit alphabet must hold {ALPHABET_SIZE} distinct symbols, "
        f"got {len(DIGIT_ALPHABET)} ({len(DIGIT_INDEX)} distinct)"
    )
