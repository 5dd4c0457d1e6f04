"""
Format Options — Параметры печати и запрос на округление

Immutable Pydantic модели:
- FormatOptions: конфигурация to_string (decimals / scientific / compact / rounding)
- RoundingRequest: запрос к движку округления (kind + precision + rounding)

Режимы decimals и scientific взаимоисключающие. Все нарушения приводятся
к InvalidRequest до входа в движок округления.
"""

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, Field, StrictBool, ValidationError, model_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRequest(ValueError):
    """
    Бессмысленная комбинация параметров печати или округления.

    Например: одновременно decimals и scientific, отрицательная точность,
    неизвестный тег округления или неизвестный ключ опций.
    """

    pass


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """
    Дисциплина округления.

    Directed:
    - DOWN: к нулю (truncate)
    - UP: от нуля (не IEEE)
    - CEILING: к +∞
    - FLOOR: к -∞

    Round to nearest:
    - HALF_EVEN: ничья → чётная младшая цифра (IEEE default)
    - HALF_UP: ничья → от нуля
    - HALF_DOWN: ничья → к нулю (не IEEE)
    """

    DOWN = "down"
    UP = "up"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_EVEN = "half_even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"


class RequestKind(str, Enum):
    """Вид запроса на округление"""

    NONE = "none"
    DECIMALS = "decimals"
    SIGNIFICANT = "significant"


# =============================================================================
# ROUNDING REQUEST
# =============================================================================


class RoundingRequest(BaseModel):
    """
    Запрос к движку округления.

    - NONE: кратчайшая форма без округления
    - DECIMALS: precision цифр после десятичной точки (precision >= 0)
    - SIGNIFICANT: precision значащих цифр (precision <= 0 даёт ноль)

    Прямой вызов конструктора при некорректных данных выбрасывает
    pydantic ValidationError; build() и фабричные методы none/decimals/
    significant приводят её к InvalidRequest.
    """

    kind: RequestKind = Field(RequestKind.NONE, description="Вид запроса")
    precision: Optional[int] = Field(None, strict=True, description="Число цифр")
    rounding: RoundingMode = Field(RoundingMode.HALF_EVEN, description="Дисциплина округления")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_precision(self) -> "RoundingRequest":
        """precision обязателен для DECIMALS/SIGNIFICANT, для DECIMALS неотрицателен"""
        if self.kind == RequestKind.NONE:
            return self
        if self.precision is None:
            raise ValueError(f"{self.kind.value} rounding requires a precision")
        if self.kind == RequestKind.DECIMALS and self.precision < 0:
            raise ValueError(f"decimals precision must be >= 0, got {self.precision}")
        return self

    @classmethod
    def build(cls, **data: Any) -> "RoundingRequest":
        """
        Создание запроса с приведением ошибок валидации к InvalidRequest.

        Raises:
            InvalidRequest: Если комбинация параметров некорректна
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidRequest(f"Invalid rounding request: {e}") from e

    @classmethod
    def none(cls, rounding: RoundingMode = RoundingMode.HALF_EVEN) -> "RoundingRequest":
        return cls.build(kind=RequestKind.NONE, rounding=rounding)

    @classmethod
    def decimals(
        cls, precision: int, rounding: RoundingMode = RoundingMode.HALF_EVEN
    ) -> "RoundingRequest":
        return cls.build(kind=RequestKind.DECIMALS, precision=precision, rounding=rounding)

    @classmethod
    def significant(
        cls, precision: int, rounding: RoundingMode = RoundingMode.HALF_EVEN
    ) -> "RoundingRequest":
        return cls.build(kind=RequestKind.SIGNIFICANT, precision=precision, rounding=rounding)


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class FormatOptions(BaseModel):
    """
    Конфигурация печати double в строку.

    - decimals: число цифр после точки (None: без округления)
    - scientific: True (научная нотация без округления), k >= 0 (k цифр
      мантиссы после точки, т.е. k + 1 значащих), False/None (позиционная запись)
    - compact: False дополняет дробную часть нулями до запрошенной ширины
    - rounding: дисциплина округления

    Прямой вызов конструктора выбрасывает pydantic ValidationError;
    к InvalidRequest ошибки приводит resolve_options (floatpp.printer).
    """

    decimals: Optional[int] = Field(None, ge=0, strict=True, description="Цифр после точки")
    scientific: Union[StrictBool, Annotated[int, Field(ge=0, strict=True)], None] = Field(
        None, description="Научная нотация / цифр мантиссы после точки"
    )
    compact: bool = Field(False, strict=True, description="Без дополнения нулями")
    rounding: RoundingMode = Field(RoundingMode.HALF_EVEN, description="Дисциплина округления")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_exclusive_modes(self) -> "FormatOptions":
        """decimals и scientific не могут быть заданы одновременно"""
        if self.decimals is not None and self.is_scientific:
            raise ValueError("decimals and scientific are mutually exclusive")
        return self

    @property
    def is_scientific(self) -> bool:
        """True если вывод в научной нотации"""
        return self.scientific is not None and self.scientific is not False

    @property
    def width(self) -> Optional[int]:
        """Запрошенное число цифр после точки (для дополнения нулями)"""
        if self.decimals is not None:
            return self.decimals
        if isinstance(self.scientific, bool):
            return None
        return self.scientific

    def to_request(self) -> RoundingRequest:
        """
        Запрос к движку округления, соответствующий опциям.

        Returns:
            RoundingRequest (NONE / DECIMALS / SIGNIFICANT)
        """
        if self.decimals is not None:
            return RoundingRequest.decimals(self.decimals, self.rounding)
        if self.scientific is None or isinstance(self.scientific, bool):
            return RoundingRequest.none(self.rounding)
        return RoundingRequest.significant(self.scientific + 1, self.rounding)
