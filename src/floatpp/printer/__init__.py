"""Printer — сборка строк из цифр ядра (позиционная и научная запись)."""

from .formatter import format_decimal, resolve_options, to_string

__all__ = [
    "format_decimal",
    "resolve_options",
    "to_string",
]
