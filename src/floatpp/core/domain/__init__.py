"""
Domain models and value objects.

Contains the data passed between the core stages: DecimalDigits,
FormatOptions, RoundingRequest and their enums.
"""

from floatpp.core.domain.digits import DecimalDigits
from floatpp.core.domain.options import (
    FormatOptions,
    InvalidRequest,
    RequestKind,
    RoundingMode,
    RoundingRequest,
)

__all__ = [
    # Digits model
    "DecimalDigits",
    # Options models
    "FormatOptions",
    "RoundingRequest",
    "RoundingMode",
    "RequestKind",
    # Exceptions
    "InvalidRequest",
]
