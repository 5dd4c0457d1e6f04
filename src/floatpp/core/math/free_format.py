"""
Free-Format Digits — Кратчайшая десятичная запись double

Steele & White, "How to Print Floating-Point Numbers Accurately" (PLDI 1990);
Burger & Dybvig, "Printing Floating-Point Numbers Quickly and Accurately"
(PLDI 1996).

Генерирует кратчайшую последовательность десятичных цифр, которая при
обратном чтении даёт тот же самый double (round-trip), и позицию
десятичной точки:

    value = 0.d1 d2 ... dn × 10**place

Вся арифметика после начальной оценки порядка — точная целочисленная
(r, s, m+, m-). Логарифм используется только для оценки est, ошибка которой
исправляется одним шагом fixup.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. r/s — ещё не выданный остаток значения в масштабе уже выданных цифр
2. m+/m- — половины расстояний до соседних double в том же масштабе
3. Хвостовых нулей нет; ноль даёт place=1, digits=(0,)
4. Цикл конечен: не более 17 цифр для binary64
"""

import math
from typing import Final

from floatpp.core.domain.digits import DecimalDigits
from floatpp.core.math.ieee754 import (
    MIN_EXPONENT,
    TWO52,
    UnsupportedValue,
    significand_and_exponent,
)
from floatpp.core.math.powers_of_ten import power_of_10
from floatpp.utils.logger import get_logger

logger = get_logger(__name__)

# Поправка к log10 при оценке десятичного порядка: оценка никогда не
# превышает истинный порядок и занижена не более чем на 1
LOG10_ESTIMATE_EPS: Final[float] = 1.0e-10


# =============================================================================
# PUBLIC API
# =============================================================================


def digits_of(value: float) -> DecimalDigits:
    """
    Кратчайшая round-trip последовательность цифр double.

    Знак значения не учитывается (цифры модуля).

    Args:
        value: Конечный double

    Returns:
        DecimalDigits(place, digits)

    Raises:
        TypeError: Если value не float
        UnsupportedValue: Если value равно ±inf или NaN

    Examples:
        >>> digits_of(0.0).as_tuple()
        (1, (0,))
        >>> digits_of(1.0).as_tuple()
        (1, (1,))
        >>> digits_of(-0.000123).as_tuple()
        (-3, (1, 2, 3))
        >>> digits_of(5e-324).as_tuple()
        (-323, (5,))
    """
    if not isinstance(value, float):
        raise TypeError(f"Expected float, got {type(value).__name__}")
    if not math.isfinite(value):
        raise UnsupportedValue(f"Cannot print non-finite value: {value!r}")

    if value == 0.0:
        return DecimalDigits.zero()

    frac, exp = significand_and_exponent(value)
    return flonum(value, frac, exp)


def flonum(value: float, frac: int, exp: int) -> DecimalDigits:
    """
    Начальные значения (r, s, m+, m-) по Table 1 алгоритма free-format.

    |value| == frac * 2**exp. При frac == 2**52 значение лежит на границе
    двоичного порядка: нижний сосед вдвое ближе верхнего, поэтому границы
    несимметричны (m+ = 2 * m-). Исключение: наименьший normal, у которого
    нижний сосед (наибольший subnormal) на том же расстоянии.

    Флаги включения границ берутся из чётности frac: значение ровно
    посередине между двумя double читается как double с чётной мантиссой,
    поэтому для чётного frac граница сама принадлежит интервалу округления.

    Args:
        value: Исходный double (только для оценки порядка)
        frac: Целая мантисса, 0 < frac < 2**53
        exp: Двоичный порядок, exp >= MIN_EXPONENT

    Returns:
        DecimalDigits(place, digits)
    """
    even = frac % 2 == 0

    if exp >= 0:
        b_exp = 1 << exp
        if frac != TWO52:
            return _scale(frac * b_exp * 2, 2, b_exp, b_exp, even, even, value)
        return _scale(frac * b_exp * 4, 4, b_exp * 2, b_exp, even, even, value)

    if exp == MIN_EXPONENT or frac != TWO52:
        return _scale(frac * 2, 1 << (1 - exp), 1, 1, even, even, value)
    return _scale(frac * 4, 1 << (2 - exp), 2, 1, even, even, value)


# =============================================================================
# SCALING
# =============================================================================


def _scale(
    r: int,
    s: int,
    m_plus: int,
    m_minus: int,
    low_ok: bool,
    high_ok: bool,
    value: float,
) -> DecimalDigits:
    """Масштабирование на 10**est по приближённой оценке порядка"""
    est = math.ceil(math.log10(abs(value)) - LOG10_ESTIMATE_EPS)

    if est >= 0:
        s *= power_of_10(est)
    else:
        scale = power_of_10(-est)
        r, m_plus, m_minus = r * scale, m_plus * scale, m_minus * scale

    return _fixup(r, s, m_plus, m_minus, est, low_ok, high_ok)


def _fixup(
    r: int,
    s: int,
    m_plus: int,
    m_minus: int,
    k: int,
    low_ok: bool,
    high_ok: bool,
) -> DecimalDigits:
    """Коррекция оценки порядка: не более одного шага вверх"""
    too_low = (r + m_plus >= s) if high_ok else (r + m_plus > s)

    if too_low:
        logger.debug("Decimal exponent estimate %d corrected to %d", k, k + 1)
        digits = _generate(r, s, m_plus, m_minus, low_ok, high_ok)
        return DecimalDigits(place=k + 1, digits=digits)

    digits = _generate(r * 10, s, m_plus * 10, m_minus * 10, low_ok, high_ok)
    return DecimalDigits(place=k, digits=digits)


# =============================================================================
# DIGIT GENERATION
# =============================================================================


def _generate(
    r: int,
    s: int,
    m_plus: int,
    m_minus: int,
    low_ok: bool,
    high_ok: bool,
) -> tuple[int, ...]:
    """
    Цикл генерации цифр.

    На каждом шаге d = r // s, r = r % s и проверяются две границы:
    tc1 — остаток в пределах нижнего допуска (можно остановиться на d),
    tc2 — остаток плюс верхний допуск достиг знаменателя (можно на d + 1).
    Если достигнуты обе, выбирается ближайшая; при равенстве (2r == s) — d + 1.
    """
    digits = []

    while True:
        d, r = divmod(r, s)

        tc1 = (r <= m_minus) if low_ok else (r < m_minus)
        tc2 = (r + m_plus >= s) if high_ok else (r + m_plus > s)

        if not tc1 and not tc2:
            digits.append(d)
            r, m_plus, m_minus = r * 10, m_plus * 10, m_minus * 10
            continue

        if tc1 and tc2:
            digits.append(d if r * 2 < s else d + 1)
        elif tc1:
            digits.append(d)
        else:
            digits.append(d + 1)
        return tuple(digits)
