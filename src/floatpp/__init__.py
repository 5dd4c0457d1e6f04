"""
floatpp: shortest round-trip printing of IEEE-754 doubles.

Writes the shortest, correctly rounded decimal string that reads back as the
identical double (Steele & White / Burger & Dybvig free-format algorithm),
optionally re-rounded to a fixed number of decimals or significant digits
with one of seven rounding disciplines.

Examples:
    >>> from floatpp import to_string
    >>> to_string(0.1)
    '0.1'
    >>> to_string(1.225, {"decimals": 2, "rounding": "half_up"})
    '1.23'
    >>> to_string(5e-324, {"scientific": True})
    '5.0e-324'
"""

from floatpp.core.contracts import validate_format_options
from floatpp.core.domain import (
    DecimalDigits,
    FormatOptions,
    InvalidRequest,
    RequestKind,
    RoundingMode,
    RoundingRequest,
)
from floatpp.core.math import (
    Decomposed,
    UnsupportedValue,
    decompose,
    digits_of,
    power_of_10,
    round_digits,
    significand_and_exponent,
    tiebreak,
)
from floatpp.printer import format_decimal, to_string

__version__ = "0.8.0"

__all__ = [
    "DecimalDigits",
    "Decomposed",
    "FormatOptions",
    "InvalidRequest",
    "RequestKind",
    "RoundingMode",
    "RoundingRequest",
    "UnsupportedValue",
    "decompose",
    "digits_of",
    "format_decimal",
    "power_of_10",
    "round_digits",
    "significand_and_exponent",
    "tiebreak",
    "to_string",
    "validate_format_options",
]
