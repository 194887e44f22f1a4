"""
Contract Module

Граница с внешним модулем коэрсии значений интерпретатора.
"""

from .coercion import DEFAULT_COERCION, DefaultCoercion, ValueCoercion

__all__ = [
    "ValueCoercion",
    "DefaultCoercion",
    "DEFAULT_COERCION",
]
