"""
IEEE-754 — Декомпозиция binary64

Модуль разбирает 64-битный double на знак, порядок и мантиссу:
- decompose: аналог C frexp(), value = fraction * 2**exponent
- significand_and_exponent: целочисленная форма (f, e), value = f * 2**e,
  используемая генератором цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. |fraction| ∈ [1/2, 1) или fraction == 0.0
2. Разложение точное (без округления) для normal и subnormal значений
3. ±inf и NaN никогда не проходят дальше (UnsupportedValue)
"""

import struct
from typing import Final, NamedTuple

# =============================================================================
# BIT LAYOUT (binary64)
# =============================================================================

MANTISSA_BITS: Final[int] = 52
EXPONENT_MASK: Final[int] = 0x7FF
MANTISSA_MASK: Final[int] = (1 << MANTISSA_BITS) - 1

# Смещение порядка для frexp-нормализации: fraction ∈ [1/2, 1), а не [1, 2)
FLOAT_BIAS: Final[int] = 1022

TWO52: Final[int] = 1 << 52
TWO53: Final[int] = 1 << 53

# Порядок младшего бита наименьшего subnormal: 2**-1074
MIN_EXPONENT: Final[int] = -1074


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedValue(ValueError):
    """
    Значение не может быть напечатано: ±inf или NaN.

    Генератор цифр определён только для конечных double. Вместо правдоподобной,
    но неверной строки цифр вызывающий код получает это исключение.
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class Decomposed(NamedTuple):
    """Результат decompose: value == fraction * 2**exponent."""

    fraction: float
    exponent: int


# =============================================================================
# BIT ACCESS
# =============================================================================


def double_to_bits(value: float) -> int:
    """Битовый образ double как беззнаковое 64-битное целое."""
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def bits_to_double(bits: int) -> float:
    """Обратное преобразование к double_to_bits."""
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


def _pack(sign: int, biased_exponent: int, mantissa: int) -> float:
    return bits_to_double((sign << 63) | (biased_exponent << MANTISSA_BITS) | mantissa)


def _unpack(value: float) -> tuple[int, int, int]:
    bits = double_to_bits(value)
    return bits >> 63, (bits >> MANTISSA_BITS) & EXPONENT_MASK, bits & MANTISSA_MASK


# =============================================================================
# DECOMPOSITION
# =============================================================================


def decompose(value: float) -> Decomposed:
    """
    Разложение double на нормализованную дробь и степень двойки.

    Поведение совпадает с C frexp(): |fraction| ∈ [1/2, 1) или 0,
    value == fraction * 2**exponent. Знак сохраняется в fraction.

    Args:
        value: Конечный double

    Returns:
        Decomposed(fraction, exponent)

    Raises:
        UnsupportedValue: Если value равно ±inf или NaN

    Examples:
        >>> decompose(1.0)
        Decomposed(fraction=0.5, exponent=1)
        >>> decompose(-1.0)
        Decomposed(fraction=-0.5, exponent=1)
        >>> decompose(0.0)
        Decomposed(fraction=0.0, exponent=0)
        >>> decompose(5e-324)
        Decomposed(fraction=0.5, exponent=-1073)
    """
    sign, biased_exponent, mantissa = _unpack(value)

    if biased_exponent == EXPONENT_MASK:
        raise UnsupportedValue(f"Cannot decompose non-finite value: {value!r}")

    if biased_exponent == 0:
        if mantissa == 0:
            # ±0.0: знак нуля не переносится в fraction
            return Decomposed(0.0, 0)

        # Subnormal: старший бит мантиссы становится скрытым битом
        length = mantissa.bit_length()
        normalized = (mantissa << (MANTISSA_BITS + 1 - length)) & MANTISSA_MASK
        return Decomposed(_pack(sign, FLOAT_BIAS, normalized), length + MIN_EXPONENT)

    return Decomposed(_pack(sign, FLOAT_BIAS, mantissa), biased_exponent - FLOAT_BIAS)


def significand_and_exponent(value: float) -> tuple[int, int]:
    """
    Целочисленная форма double: |value| == significand * 2**exponent.

    Дробь из decompose масштабируется до целого (умножение на 2**53),
    порядок уменьшается на 53. Для subnormal значений мантисса сдвигается
    обратно до порядка MIN_EXPONENT, чтобы сохранить их реальную
    (уменьшенную) точность: иначе границы округления были бы слишком узкими
    и генератор выдавал бы лишние цифры.

    Args:
        value: Конечный ненулевой double

    Returns:
        (significand, exponent), significand > 0

    Raises:
        UnsupportedValue: Если value равно ±inf или NaN
        ValueError: Если value равно нулю
    """
    fraction, exponent = decompose(value)
    if fraction == 0.0:
        raise ValueError("Zero has no significand")

    # Точное умножение: результат всегда целый и < 2**53
    significand = int(abs(fraction) * TWO53)
    exponent -= 53

    if exponent < MIN_EXPONENT:
        # Без сдвига 5e-324 печатается как 4.9406564584124654e-324: 17 цифр, не кратчайшая запись.
        # Сдвинутые младшие биты равны нулю, сдвиг точный
        significand >>= MIN_EXPONENT - exponent
        exponent = MIN_EXPONENT

    return significand, exponent
