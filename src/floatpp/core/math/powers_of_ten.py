"""
Powers of Ten — Таблица точных степеней 10

Точные целые 10**0 … 10**POW10_MAX для масштабирования (r, s, m+, m-)
в генераторе цифр. Диапазон покрывает все десятичные порядки binary64:
от 5e-324 (оценка -323) до 1.8e308 (оценка 309).

Таблица строится лениво при первом обращении и далее только читается.
"""

from functools import lru_cache
from typing import Final

# Наибольший показатель в таблице
POW10_MAX: Final[int] = 326


@lru_cache(maxsize=None)
def _table() -> tuple[int, ...]:
    powers = [1]
    for _ in range(POW10_MAX):
        powers.append(powers[-1] * 10)
    return tuple(powers)


def power_of_10(n: int) -> int:
    """
    Точное значение 10**n из таблицы.

    Args:
        n: Показатель, 0 <= n <= POW10_MAX

    Returns:
        10**n как int

    Raises:
        ValueError: Если n вне диапазона таблицы

    Examples:
        >>> power_of_10(0)
        1
        >>> power_of_10(3)
        1000
    """
    if not 0 <= n <= POW10_MAX:
        raise ValueError(f"Power of ten out of table range [0, {POW10_MAX}]: {n}")
    return _table()[n]
