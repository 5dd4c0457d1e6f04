"""
Core math modules для floatpp

Точные численные алгоритмы печати binary64.
"""

# IEEE-754 decomposition
from floatpp.core.math.ieee754 import (
    FLOAT_BIAS,
    MIN_EXPONENT,
    TWO52,
    TWO53,
    Decomposed,
    UnsupportedValue,
    bits_to_double,
    decompose,
    double_to_bits,
    significand_and_exponent,
)

# Powers of ten
from floatpp.core.math.powers_of_ten import POW10_MAX, power_of_10

# Free-format digit generation
from floatpp.core.math.free_format import LOG10_ESTIMATE_EPS, digits_of, flonum

# Rounding
from floatpp.core.math.rounding import round_digits, tiebreak

__all__ = [
    # IEEE-754 — Constants
    "FLOAT_BIAS",
    "MIN_EXPONENT",
    "TWO52",
    "TWO53",
    # IEEE-754 — Types
    "Decomposed",
    # IEEE-754 — Exceptions
    "UnsupportedValue",
    # IEEE-754 — Functions
    "bits_to_double",
    "decompose",
    "double_to_bits",
    "significand_and_exponent",
    # Powers of ten
    "POW10_MAX",
    "power_of_10",
    # Free-format
    "LOG10_ESTIMATE_EPS",
    "digits_of",
    "flonum",
    # Rounding
    "round_digits",
    "tiebreak",
]
