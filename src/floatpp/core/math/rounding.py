"""
Rounding — Переквантование последовательности цифр

Округление кратчайшей последовательности цифр до заданного числа цифр
после точки (DECIMALS) или значащих цифр (SIGNIFICANT) одной из семи
дисциплин (RoundingMode).

Последовательность разбивается на:

    [kept prefix] | least_sig | tie | [rest]

Решение об увеличении least_sig — чистая функция tiebreak() от
(знак, least_sig, tie, rest, rounding). Перенос (least_sig + 1 == 10)
распространяется назад по сохранённому префиксу; перенос из старшей цифры
добавляет цифру 1 и увеличивает place (9.9999 → 10, 999.9999 → 1000).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат без хвостовых нулей; ноль — place=1, digits=(0,)
2. Повторное округление тем же запросом ничего не меняет
3. ceiling(-x) == -floor(x), floor(-x) == -ceiling(x)
"""

from typing import Optional, Sequence

from floatpp.core.domain.digits import DecimalDigits
from floatpp.core.domain.options import RequestKind, RoundingMode, RoundingRequest
from floatpp.utils.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# TIE-BREAK
# =============================================================================


def tiebreak(
    negative: bool,
    least_sig: int,
    tie: Optional[int],
    rest: Sequence[int],
    rounding: RoundingMode,
) -> int:
    """
    Новое значение младшей сохраняемой цифры.

    Args:
        negative: Знак исходного значения (важен для CEILING/FLOOR)
        least_sig: Младшая сохраняемая цифра
        tie: Первая отбрасываемая цифра (None если отбрасывать нечего)
        rest: Остальные отбрасываемые цифры
        rounding: Дисциплина округления

    Returns:
        least_sig или least_sig + 1 (может быть 10, перенос делает вызывающий код)

    Examples:
        >>> tiebreak(False, 2, 5, [], RoundingMode.HALF_EVEN)
        2
        >>> tiebreak(False, 2, 5, [], RoundingMode.HALF_UP)
        3
        >>> tiebreak(True, 2, 1, [], RoundingMode.FLOOR)
        3
    """
    inexact = tie is not None and (tie != 0 or any(rest))
    exact_half = tie == 5 and not any(rest)
    half_or_more = tie is not None and tie >= 5

    if rounding == RoundingMode.DOWN:
        return least_sig

    if rounding == RoundingMode.UP:
        return least_sig + 1 if inexact else least_sig

    if rounding == RoundingMode.CEILING:
        return least_sig + 1 if inexact and not negative else least_sig

    if rounding == RoundingMode.FLOOR:
        return least_sig + 1 if inexact and negative else least_sig

    if rounding == RoundingMode.HALF_UP:
        return least_sig + 1 if half_or_more else least_sig

    if rounding == RoundingMode.HALF_DOWN:
        if exact_half:
            return least_sig
        return least_sig + 1 if half_or_more else least_sig

    if rounding == RoundingMode.HALF_EVEN:
        if exact_half and least_sig % 2 == 0:
            return least_sig
        return least_sig + 1 if half_or_more else least_sig

    raise ValueError(f"Unknown rounding mode: {rounding!r}")


# =============================================================================
# ROUNDING ENGINE
# =============================================================================


def round_digits(
    digits: Sequence[int],
    place: int,
    negative: bool,
    request: RoundingRequest,
) -> DecimalDigits:
    """
    Округление последовательности цифр по запросу.

    Args:
        digits: Цифры, старшая первой (обычно из digits_of)
        place: Позиция десятичной точки, value = 0.d1d2... × 10**place
        negative: True если исходное значение отрицательное
        request: Запрос на округление

    Returns:
        DecimalDigits; при NONE — исходная последовательность без изменений

    Examples:
        >>> round_digits([1, 2, 2, 5], 1, False, RoundingRequest.decimals(2)).as_tuple()
        (1, (1, 2, 2))
        >>> round_digits([9, 9, 9, 9, 9], 1, False,
        ...              RoundingRequest.decimals(0, RoundingMode.CEILING)).as_tuple()
        (2, (1,))
    """
    if request.kind == RequestKind.NONE:
        return DecimalDigits(place=place, digits=tuple(digits))

    if request.kind == RequestKind.SIGNIFICANT:
        if request.precision <= 0:
            return DecimalDigits.zero()
        keep = request.precision
    else:
        keep = request.precision + place
        if keep <= 0:
            # Старшая цифра правее точки округления: добавляем ведущие нули,
            # чтобы младшая сохраняемая цифра существовала (0.6 → 1 при 0 знаков)
            padding = 1 - keep
            digits = [0] * padding + list(digits)
            place += padding
            keep = 1

    if len(digits) <= keep:
        return _normalize(list(digits), place)

    kept = list(digits[: keep - 1])
    least_sig = digits[keep - 1]
    tie = digits[keep]
    rest = digits[keep + 1 :]

    new_least = tiebreak(negative, least_sig, tie, rest, request.rounding)
    kept.append(new_least)

    return _normalize(*_carry(kept, place))


def _carry(digits: list[int], place: int) -> tuple[list[int], int]:
    """Распространение переноса из младшей цифры к старшим"""
    i = len(digits) - 1
    while i >= 0 and digits[i] == 10:
        digits[i] = 0
        if i == 0:
            digits.insert(0, 1)
            place += 1
            logger.debug("Rounding carry crossed a power of ten, place now %d", place)
            break
        digits[i - 1] += 1
        i -= 1
    return digits, place


def _normalize(digits: list[int], place: int) -> DecimalDigits:
    """Удаление хвостовых нулей; пустой результат — ноль"""
    while digits and digits[-1] == 0:
        digits.pop()
    if not digits:
        return DecimalDigits.zero()
    return DecimalDigits(place=place, digits=tuple(digits))
