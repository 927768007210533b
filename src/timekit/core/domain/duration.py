"""
Duration — Разбор текстовых выражений длительности

Формат выражения: <число>[s|m|h|d]
- "30s" — 30 секунд, "15m" — 15 минут, "2h" — 2 часа, "7d" — 7 дней
- без суффикса число уже выражено в целевой единице

Отрицательные значения, составные ("3d3s"), повторённые ("100dd") и
неизвестные ("3M") суффиксы отклоняются.
"""

import re
from typing import Any, Dict, Final, Optional, Pattern

from pydantic import BaseModel, Field, field_serializer, field_validator

from timekit.core.domain.units import TimeUnit
from timekit.core.math.numerical_safeguards import require_not_none

# Выражение длительности целиком
_EXPRESSION: Final[Pattern[str]] = re.compile(r"(\d+)([smhd]?)", re.ASCII)

_SUFFIX_UNITS: Final[Dict[str, TimeUnit]] = {
    "s": TimeUnit.SECONDS,
    "m": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS,
    "d": TimeUnit.DAYS,
}


class Duration(BaseModel):
    """
    Разобранное выражение длительности: количество и единица.

    Immutable модель (frozen=True).
    """

    value: int = Field(..., ge=0, description="Количество единиц (неотрицательное)")
    unit: TimeUnit = Field(..., description="Единица измерения")

    model_config = {"frozen": True}

    @field_validator("unit", mode="before")
    @classmethod
    def _unit_by_name(cls, v: Any) -> Any:
        """Единица в формате обмена передаётся по имени ("SECONDS")."""
        if isinstance(v, str):
            try:
                return TimeUnit[v]
            except KeyError as exc:
                raise ValueError(f"unknown time unit: {v}") from exc
        return v

    @field_serializer("unit")
    def _unit_name(self, unit: TimeUnit) -> str:
        return unit.name

    @classmethod
    def of(cls, text: str, default_unit: Optional[TimeUnit] = None) -> "Duration":
        """
        Разбор выражения в Duration с исходной единицей.

        Args:
            text: Выражение вида "15m"
            default_unit: Единица для выражения без суффикса

        Returns:
            Duration(value, unit)

        Raises:
            NullArgumentError: Если text is None
            ValueError: Если выражение не соответствует формату, либо суффикс
                отсутствует и default_unit не задан
        """
        require_not_none(text, "text")
        match = _EXPRESSION.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid time expression: {text}")

        amount, suffix = match.groups()
        if suffix:
            unit = _SUFFIX_UNITS[suffix]
        elif default_unit is not None:
            unit = default_unit
        else:
            raise ValueError(f"invalid time expression: {text} (no unit)")
        return cls(value=int(amount), unit=unit)

    @classmethod
    def parse(cls, text: str, unit: TimeUnit) -> int:
        """
        Разбор выражения и конверсия в unit.

        Args:
            text: Выражение вида "15m"
            unit: Целевая единица

        Returns:
            Длительность в единицах unit (дробная часть отбрасывается)

        Raises:
            NullArgumentError: Если text или unit is None
            ValueError: Если выражение не соответствует формату

        Examples:
            >>> Duration.parse("15m", TimeUnit.SECONDS)
            900
            >>> Duration.parse("250", TimeUnit.MILLISECONDS)
            250
        """
        require_not_none(unit, "unit")
        return cls.of(text, default_unit=unit).to(unit)

    def to(self, unit: TimeUnit) -> int:
        """Длительность в единицах unit (с усечением)."""
        return unit.convert(self.value, self.unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"
