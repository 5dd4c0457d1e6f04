"""
DecimalDigits — Десятичная последовательность цифр с позицией точки

Immutable Pydantic модель, общий формат данных между генератором цифр,
движком округления и форматтером:

    value = 0.d1 d2 d3 ... × 10**place

Ноль представлен как place=1, digits=(0,).
"""

from pydantic import BaseModel, Field, field_validator


class DecimalDigits(BaseModel):
    """
    Цифры (старшая первой) и позиция десятичной точки относительно первой цифры.

    Генератор цифр и движок округления выдают последовательность без
    хвостовых нулей; модель сама этого не требует, чтобы принимать
    произвольный ввод от вызывающего кода.
    """

    place: int = Field(..., description="Позиция десятичной точки относительно первой цифры")
    digits: tuple[int, ...] = Field(..., min_length=1, description="Десятичные цифры 0..9")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый элемент должен быть десятичной цифрой"""
        for d in v:
            if not 0 <= d <= 9:
                raise ValueError(f"digit {d} out of range 0..9")
        return v

    @classmethod
    def zero(cls) -> "DecimalDigits":
        """Каноническое представление нуля"""
        return cls(place=1, digits=(0,))

    def is_zero(self) -> bool:
        """True если все цифры нулевые"""
        return not any(self.digits)

    def as_tuple(self) -> tuple[int, tuple[int, ...]]:
        """(place, digits)"""
        return self.place, self.digits

    def __str__(self) -> str:
        return "0.{}e{}".format("".join(map(str, self.digits)), self.place)
