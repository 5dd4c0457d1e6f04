"""Formatter — сборка строки из округлённых цифр.

Тонкий слой над ядром:
- to_string: double → строка (кратчайшая или округлённая)
- format_decimal: DecimalDigits + знак → позиционная или научная запись
- resolve_options: dict/FormatOptions → проверенные FormatOptions

Ошибки ядра (UnsupportedValue, InvalidRequest) пробрасываются без изменений.
"""

import math
from typing import Any, Mapping, Optional, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from floatpp.core.contracts import validate_format_options
from floatpp.core.domain.digits import DecimalDigits
from floatpp.core.domain.options import FormatOptions, InvalidRequest
from floatpp.core.math.free_format import digits_of
from floatpp.core.math.rounding import round_digits
from floatpp.utils.logger import get_logger

logger = get_logger(__name__)

OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> FormatOptions:
    """
    Приведение опций к FormatOptions.

    Mapping проверяется сначала JSON Schema контрактом, затем моделью.

    Raises:
        InvalidRequest: Если опции некорректны
    """
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidRequest(f"Options must be a mapping, got {type(options).__name__}")

    try:
        validate_format_options(options)
    except SchemaValidationError as e:
        logger.debug("Format options rejected by schema: %s", e.message)
        raise InvalidRequest(f"Invalid format options: {e.message}") from e

    try:
        return FormatOptions(**options)
    except ValidationError as e:
        logger.debug("Format options rejected by model: %s", e)
        raise InvalidRequest(f"Invalid format options: {e}") from e


def to_string(value: float, options: OptionsLike = None) -> str:
    """Печать double.

    Без опций — кратчайшая строка, которая читается обратно в тот же double.

    Args:
        value: Конечный double
        options: decimals / scientific / compact / rounding

    Returns:
        Строка в позиционной или научной записи

    Raises:
        TypeError: Если value не float
        UnsupportedValue: Если value равно ±inf или NaN
        InvalidRequest: Если опции некорректны

    Examples:
        >>> to_string(1.2)
        '1.2'
        >>> to_string(-0.000001)
        '-0.000001'
        >>> to_string(9.9999, {"decimals": 0, "rounding": "ceiling", "compact": True})
        '10.0'
        >>> to_string(1.7976931348623157e308, {"scientific": True})
        '1.7976931348623157e+308'
    """
    opts = resolve_options(options)
    if not isinstance(value, float):
        raise TypeError(f"Expected float, got {type(value).__name__}")

    shortest = digits_of(value)
    negative = math.copysign(1.0, value) < 0
    rounded = round_digits(shortest.digits, shortest.place, negative, opts.to_request())

    return format_decimal(rounded, negative, opts)


def format_decimal(rounded: DecimalDigits, negative: bool, options: OptionsLike = None) -> str:
    """Сборка строки из цифр, позиции точки и знака.

    Examples:
        >>> format_decimal(DecimalDigits(place=2, digits=(7,)), False, {"decimals": 20, "compact": True})
        '70.0'
        >>> format_decimal(DecimalDigits(place=1, digits=(7,)), False, {"scientific": 2})
        '7.00e+00'
    """
    opts = resolve_options(options)
    digits = "".join(str(d) for d in rounded.digits)

    if opts.is_scientific:
        body = _scientific(digits, rounded.place, _pad_width(opts))
    else:
        body = _positional(digits, rounded.place, _pad_width(opts))

    return "-" + body if negative else body


def _pad_width(opts: FormatOptions) -> Optional[int]:
    return None if opts.compact else opts.width


def _pad_fraction(fraction: str, width: Optional[int]) -> str:
    if width is not None and len(fraction) < width:
        fraction += "0" * (width - len(fraction))
    return fraction or "0"


def _positional(digits: str, place: int, width: Optional[int]) -> str:
    # Хотя бы одна цифра по обе стороны от точки
    if place <= 0:
        digits = "0" * (1 - place) + digits
        place = 1
    elif len(digits) < place + 1:
        digits += "0" * (place + 1 - len(digits))

    return f"{digits[:place]}.{_pad_fraction(digits[place:], width)}"


def _scientific(digits: str, place: int, width: Optional[int]) -> str:
    exponent = place - 1
    sign = "+" if exponent >= 0 else "-"
    return f"{digits[0]}.{_pad_fraction(digits[1:], width)}e{sign}{abs(exponent):02d}"
