"""Calendar enums — Day, Month, Era

Перечисления календарных значений:
- Day: дни недели, SUNDAY(1) .. SATURDAY(7), циклическая арифметика
- Month: месяцы, JANUARY(1) .. DECEMBER(12), длины и кварталы
- Era: BC / AD (года нулевого нет: год 1 BC предшествует году 1 AD)
"""

from enum import Enum
from typing import Final, Tuple

from timekit.core.math.numerical_safeguards import within


# =============================================================================
# ERA
# =============================================================================


class Era(str, Enum):
    """Эра юлианского/григорианского календаря."""

    BC = "BC"
    AD = "AD"


# =============================================================================
# DAY
# =============================================================================


class Day(Enum):
    """День недели.

    Нумерация с воскресенья: SUNDAY == 1, SATURDAY == 7.
    """

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    def plus(self, days: int) -> "Day":
        """
        День недели через days дней (по кругу).

        Examples:
            >>> Day.SATURDAY.plus(1)
            <Day.SUNDAY: 1>
            >>> Day.MONDAY.plus(-8)
            <Day.SUNDAY: 1>
        """
        return Day((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> "Day":
        """День недели days дней назад (по кругу)."""
        return self.plus(-days)

    @classmethod
    def value_of(cls, day: int) -> "Day":
        """
        День недели по номеру.

        Raises:
            ValueError: Если day вне [1, 7]
        """
        return cls(within(day, 1, 7, "day"))


# =============================================================================
# MONTH
# =============================================================================

# Длины месяцев невисокосного года
_MONTH_LENGTHS: Final[Tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Month(Enum):
    """Месяц года, JANUARY == 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def length(self, leap_year: bool) -> int:
        """
        Длина месяца в днях.

        Args:
            leap_year: Високосный ли год

        Returns:
            28..31
        """
        if self is Month.FEBRUARY and leap_year:
            return 29
        return _MONTH_LENGTHS[self.value - 1]

    def min_length(self) -> int:
        return self.length(False)

    def max_length(self) -> int:
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """
        Порядковый номер первого дня месяца в году (1-based).

        Examples:
            >>> Month.MARCH.first_day_of_year(True)
            61
        """
        leap = 1 if leap_year and self.value > Month.FEBRUARY.value else 0
        return 1 + sum(_MONTH_LENGTHS[: self.value - 1]) + leap

    def quarter(self) -> int:
        """Номер квартала, 1..4."""
        return (self.value + 2) // 3

    def first_month_of_quarter(self) -> "Month":
        return Month((self.quarter() - 1) * 3 + 1)

    def plus(self, months: int) -> "Month":
        """Месяц через months месяцев (по кругу)."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> "Month":
        return self.plus(-months)

    @classmethod
    def value_of(cls, month: int) -> "Month":
        """
        Месяц по номеру.

        Raises:
            ValueError: Если month вне [1, 12]
        """
        return cls(within(month, 1, 12, "month"))
