"""
Instant — Точка на временной оси

Immutable Pydantic модель: знаковое количество миллисекунд от
1970-01-01T00:00:00Z. Диапазон ограничен знаковым 64-битным целым.

Формат обмена (JSON): целое число миллисекунд, см. contracts/schema/instant.json.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Final

from pydantic import BaseModel, Field, model_serializer, model_validator

from timekit.core.math.numerical_safeguards import (
    LONG_MAX,
    LONG_MIN,
    checked_add,
    require_not_none,
)

# Начало Unix-эпохи как aware datetime
_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Instant(BaseModel):
    """
    Момент времени с точностью до миллисекунды.

    Полностью упорядочен и хешируем; поддерживает позиционный конструктор
    Instant(0) наравне с Instant(millis=0).
    """

    millis: int = Field(
        ..., ge=LONG_MIN, le=LONG_MAX, description="Миллисекунды от 1970-01-01T00:00:00Z"
    )

    model_config = {"frozen": True}

    def __init__(self, millis: int, **data: Any) -> None:
        super().__init__(millis=millis, **data)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_millis(cls, data: Any) -> Any:
        """Допускает голое целое как payload (формат обмена)."""
        if isinstance(data, int) and not isinstance(data, bool):
            return {"millis": data}
        return data

    @model_serializer
    def _serialize(self) -> int:
        return self.millis

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def epoch(cls) -> "Instant":
        return cls(0)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """
        Instant из aware datetime.

        Raises:
            NullArgumentError: Если value is None
            ValueError: Если value не содержит tzinfo
        """
        require_not_none(value, "value")
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got {value!r}")
        delta = value - _EPOCH
        return cls(delta // timedelta(milliseconds=1))

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def plus_millis(self, amount: int) -> "Instant":
        """
        Сдвиг на amount миллисекунд.

        Raises:
            OverflowException: Если результат вне 64-битного диапазона
        """
        return Instant(checked_add(self.millis, amount))

    def to_datetime(self) -> datetime:
        """
        Aware datetime в UTC (пролептический григорианский календарь).

        Raises:
            OverflowError: Если момент вне диапазона datetime (годы 1..9999)
        """
        return _EPOCH + timedelta(milliseconds=self.millis)

    # -------------------------------------------------------------------------
    # Упорядочение
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis < other.millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis <= other.millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis > other.millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.millis >= other.millis

    def __str__(self) -> str:
        return f"{self.millis}ms"
