"""
Contract Validation Module

Модуль для валидации JSON контрактов floatpp (опции печати).
"""

from .validators import (
    FormatOptionsValidator,
    SchemaLoader,
    validate_format_options,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "FormatOptionsValidator",
    # Functions
    "validate_format_options",
]
