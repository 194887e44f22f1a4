"""
Numeric Errors — иерархия ошибок числового ядра

Все операции детерминированы и без побочных эффектов (кроме роста Prime Cache),
поэтому ошибка всегда прерывает только один вызов и никогда не портит
состояние кэша или таблиц.

Виды ошибок:
- DivisionByZero: нулевой делитель в mod/divide/lcm, 0 ** (-k)
- UndefinedDomain: аргумент вне области определения (factorial(-n), полюса Γ,
  нечисловой ввод после неудачной коэрсии)
- InvalidBase: основание 0, ±1 или слишком короткий алфавит
- SymbolNotFound: символ отсутствует в алфавите при декодировании
"""


class NumericError(Exception):
    """Базовая ошибка числового ядра."""

    pass


class DivisionByZero(NumericError, ZeroDivisionError):
    """
    Деление на ноль.

    Фатальная ошибка ввода: интерпретатор обязан её сообщить, повтор не имеет смысла.
    """

    pass


class UndefinedDomain(NumericError, ValueError):
    """Аргумент вне области определения операции."""

    pass


class InvalidBase(NumericError, ValueError):
    """
    Недопустимое основание системы счисления.

    Проверяется до начала разложения на цифры.
    """

    pass


class SymbolNotFound(NumericError, LookupError):
    """Символ отсутствует в алфавите (канонический, пользовательский или римский)."""

    pass
