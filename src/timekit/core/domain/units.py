"""
Units — Единицы календарной арифметики и измерения времени

Три семейства единиц:
- DateUnit  — гранулярность add/between (от тысячелетий до миллисекунд)
- DateField — гранулярность truncate/round/is_same (от года до миллисекунды)
- TimeUnit  — фиксированные единицы длительности (от наносекунд до суток)

Каждый DateUnit сводится к одной из трёх базовых арифметик (UnitBase):
- MONTHS — сложение локальных полей год/месяц с ограничением дня месяца
- DAYS   — сложение локальной даты с сохранением времени суток
- MILLIS — сложение абсолютных миллисекунд

Член перечисления несёт свою базу и множитель, поэтому add/between
диспетчеризуются по таблице, а не через switch по имени.

ЗАПРЕЩЕНО смешивать календарные и фиксированные единицы без явного
конвертера из этого модуля.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Final

from timekit.core.math.numerical_safeguards import (
    RoundingMode,
    checked_multiply,
    divide_rounded,
    require_not_none,
)

if TYPE_CHECKING:
    from timekit.core.calendar.chronology import Chronology
    from timekit.core.domain.instant import Instant


# =============================================================================
# ФИКСИРОВАННЫЕ ДЛИТЕЛЬНОСТИ
# =============================================================================

MILLIS_PER_SECOND: Final[int] = 1_000
MILLIS_PER_MINUTE: Final[int] = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: Final[int] = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: Final[int] = 24 * MILLIS_PER_HOUR

MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_WEEK: Final[int] = 7


# =============================================================================
# TIME UNIT
# =============================================================================


class TimeUnit(Enum):
    """
    Фиксированная единица длительности.

    Значение члена — количество наносекунд в одной единице.
    """

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 3_600 * 1_000_000_000
    DAYS = 86_400 * 1_000_000_000

    @property
    def symbol(self) -> str:
        """Короткое обозначение единицы ("ms", "s", "hrs", ...)."""
        return _TIME_UNIT_SYMBOLS[self]

    def convert(
        self,
        value: int,
        source: "TimeUnit",
        mode: RoundingMode = RoundingMode.DOWN,
    ) -> int:
        """
        Конверсия value из единицы source в эту единицу.

        По умолчанию дробная часть отбрасывается (к нулю).

        Args:
            value: Количество в единицах source
            source: Исходная единица
            mode: Режим округления при переходе к более крупной единице

        Returns:
            Количество в единицах self

        Examples:
            >>> TimeUnit.SECONDS.convert(90_000, TimeUnit.MILLISECONDS)
            90
            >>> TimeUnit.MILLISECONDS.convert(2, TimeUnit.MINUTES)
            120000
        """
        require_not_none(value, "value")
        require_not_none(source, "source")
        return divide_rounded(value * source.value, self.value, mode)

    def to_millis(self, value: int) -> int:
        return TimeUnit.MILLISECONDS.convert(value, self)

    def to_nanos(self, value: int) -> int:
        return value * self.value


_TIME_UNIT_SYMBOLS: Final[Dict[TimeUnit, str]] = {
    TimeUnit.NANOSECONDS: "ns",
    TimeUnit.MICROSECONDS: "µs",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "min",
    TimeUnit.HOURS: "hrs",
    TimeUnit.DAYS: "days",
}


# =============================================================================
# DATE UNIT
# =============================================================================


class UnitBase(str, Enum):
    """Базовая арифметика, к которой сводится DateUnit."""

    MONTHS = "months"
    DAYS = "days"
    MILLIS = "millis"


class DateUnit(Enum):
    """
    Гранулярность для Chronology.add / Chronology.between.

    Значение члена — пара (база, множитель): YEARS это 12 MONTHS,
    WEEKS это 7 DAYS, HOURS это 3_600_000 MILLIS.
    """

    MILLENNIA = (UnitBase.MONTHS, 12_000)
    CENTURIES = (UnitBase.MONTHS, 1_200)
    DECADES = (UnitBase.MONTHS, 120)
    YEARS = (UnitBase.MONTHS, MONTHS_PER_YEAR)
    MONTHS = (UnitBase.MONTHS, 1)
    WEEKS = (UnitBase.DAYS, DAYS_PER_WEEK)
    DAYS = (UnitBase.DAYS, 1)
    HOURS = (UnitBase.MILLIS, MILLIS_PER_HOUR)
    MINUTES = (UnitBase.MILLIS, MILLIS_PER_MINUTE)
    SECONDS = (UnitBase.MILLIS, MILLIS_PER_SECOND)
    MILLISECONDS = (UnitBase.MILLIS, 1)

    def __init__(self, base: UnitBase, factor: int) -> None:
        self.base = base
        self.factor = factor

    def add(self, chronology: "Chronology", instant: "Instant", amount: int) -> "Instant":
        """
        Сдвиг instant на amount единиц в календаре chronology.

        Raises:
            OverflowException: Если результат вне 64-битного диапазона
        """
        adder, _ = chronology.arithmetic(self.base)
        return adder(instant, checked_multiply(amount, self.factor))

    def between(self, chronology: "Chronology", start: "Instant", end: "Instant") -> int:
        """
        Количество целых единиц от start до end (start <= end).

        Крупные единицы получаются делением базовой разницы: десятилетия
        это полные годы // 10, недели это полные дни // 7.
        """
        _, counter = chronology.arithmetic(self.base)
        return counter(start, end) // self.factor


# =============================================================================
# DATE FIELD
# =============================================================================


class DateField(str, Enum):
    """
    Гранулярность для truncate / round / is_same.

    Недельные поля исключены: откат к началу недели может увести
    результат в предыдущий месяц.
    """

    YEAR = "YEAR"
    MONTH = "MONTH"
    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
    SECOND = "SECOND"
    MILLISECOND = "MILLISECOND"

    @property
    def unit(self) -> DateUnit:
        """Единица, на которую отличаются соседние границы поля."""
        return _FIELD_UNITS[self]

    @property
    def depth(self) -> int:
        """Порядковый номер поля от самого крупного (YEAR == 0)."""
        return _FIELD_ORDER.index(self)


_FIELD_ORDER: Final[tuple] = tuple(DateField)

_FIELD_UNITS: Final[Dict[DateField, DateUnit]] = {
    DateField.YEAR: DateUnit.YEARS,
    DateField.MONTH: DateUnit.MONTHS,
    DateField.DAY: DateUnit.DAYS,
    DateField.HOUR: DateUnit.HOURS,
    DateField.MINUTE: DateUnit.MINUTES,
    DateField.SECOND: DateUnit.SECONDS,
    DateField.MILLISECOND: DateUnit.MILLISECONDS,
}
