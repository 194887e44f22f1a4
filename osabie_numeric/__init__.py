"""
osabie-numeric — числовая семантика стекового интерпретатора с code page

Пакет содержит арифметические, теоретико-числовые, позиционные и
статистические примитивы, вызываемые командами интерпретатора.
Диспетчер команд, стековая машина, лексер и слой коэрсии значений
находятся вне пакета (коэрсия подключается через ValueCoercion).
"""

from osabie_numeric.core.errors import (
    DivisionByZero,
    InvalidBase,
    NumericError,
    SymbolNotFound,
    UndefinedDomain,
)

__version__ = "1.0.0"

__all__ = [
    "NumericError",
    "DivisionByZero",
    "UndefinedDomain",
    "InvalidBase",
    "SymbolNotFound",
    "__version__",
]
