"""
Hybrid calendar — Julian Day Number arithmetic

Гибридный календарь с фиксированной точкой перехода:
- до 1582-10-04 (включительно) действует юлианский календарь
- после него сразу следует 1582-10-15 григорианского календаря

Все функции работают с Julian Day Number (JDN) — непрерывным счётом суток.
Годы астрономические: год 0 == 1 BC, год -1 == 2 BC.

Деление везде целочисленное с округлением к -inf (оператор // Python),
поэтому формулы корректны и для дат до нашей эры.
"""

from typing import Final, Tuple

from timekit.core.domain.calendar_enums import Month
from timekit.core.domain.units import MILLIS_PER_DAY, MONTHS_PER_YEAR


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Первый день григорианского календаря (1582-10-15)
GREGORIAN_CUTOVER_JDN: Final[int] = 2_299_161

# Год перехода на григорианский календарь
GREGORIAN_CUTOVER_YEAR: Final[int] = 1582

# 1970-01-01 (начало Unix-эпохи)
UNIX_EPOCH_JDN: Final[int] = 2_440_588

__all__ = [
    "GREGORIAN_CUTOVER_JDN",
    "GREGORIAN_CUTOVER_YEAR",
    "UNIX_EPOCH_JDN",
    "MILLIS_PER_DAY",
    "gregorian_to_jdn",
    "julian_to_jdn",
    "jdn_to_gregorian",
    "jdn_to_julian",
    "date_to_jdn",
    "jdn_to_date",
    "is_leap_year",
    "days_in_month",
    "day_of_week",
    "normalize_month",
]


# =============================================================================
# ПРОЛЕПТИЧЕСКИЕ КАЛЕНДАРИ
# =============================================================================


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN для даты пролептического григорианского календаря.

    Examples:
        >>> gregorian_to_jdn(1970, 1, 1)
        2440588
        >>> gregorian_to_jdn(1582, 10, 15)
        2299161
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN для даты пролептического юлианского календаря.

    Examples:
        >>> julian_to_jdn(1582, 10, 4)
        2299160
        >>> julian_to_jdn(1, 1, 1)
        1721424
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def _from_march_based(c: int, century_years: int) -> Tuple[int, int, int]:
    # c: сутки внутри 4-летнего цикла, отсчитанного от 1 марта
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = century_years + d - 4800 + m // 10
    return year, month, day


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """
    Дата пролептического григорианского календаря для JDN.

    Returns:
        (year, month, day), год астрономический
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    return _from_march_based(c, 100 * b)


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    """
    Дата пролептического юлианского календаря для JDN.

    Returns:
        (year, month, day), год астрономический
    """
    return _from_march_based(jdn + 32082, 0)


# =============================================================================
# ГИБРИДНЫЙ КАЛЕНДАРЬ
# =============================================================================


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """
    Перенос переполнения месяца в год.

    Examples:
        >>> normalize_month(2012, 13)
        (2013, 1)
        >>> normalize_month(2012, 0)
        (2011, 12)
    """
    carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return year + carry, month_index + 1


def date_to_jdn(year: int, month: int, day: int) -> int:
    """
    JDN для даты гибридного календаря (мягкая нормализация).

    Месяц вне [1, 12] переносится в год, день вне месяца отсчитывается
    от первого числа. Десять пропущенных дней 1582-10-05..1582-10-14
    отображаются вперёд так же, как юлианские даты (10-05 -> 10-15).

    Args:
        year: Астрономический год
        month: Месяц (1-based, допускается переполнение)
        day: День месяца (допускается переполнение)

    Returns:
        Julian Day Number
    """
    year, month = normalize_month(year, month)
    julian = julian_to_jdn(year, month, 1) + day - 1
    if julian < GREGORIAN_CUTOVER_JDN:
        return julian
    gregorian = gregorian_to_jdn(year, month, 1) + day - 1
    if gregorian >= GREGORIAN_CUTOVER_JDN:
        return gregorian
    # Дата попала в пропущенные дни октября 1582
    return julian


def jdn_to_date(jdn: int) -> Tuple[int, int, int]:
    """
    Дата гибридного календаря для JDN.

    Returns:
        (year, month, day), год астрономический
    """
    if jdn >= GREGORIAN_CUTOVER_JDN:
        return jdn_to_gregorian(jdn)
    return jdn_to_julian(jdn)


def is_leap_year(year: int) -> bool:
    """
    Високосный ли год гибридного календаря.

    До 1582 — юлианское правило (каждый четвёртый), после — григорианское.
    Сам 1582 год невисокосный в обоих календарях.

    Examples:
        >>> is_leap_year(1500)
        True
        >>> is_leap_year(1700)
        False
        >>> is_leap_year(-4)
        True
    """
    if year < GREGORIAN_CUTOVER_YEAR:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце гибридного календаря.

    Для октября 1582 возвращается 31: последний день месяца остаётся 31-м,
    хотя физически в нём 21 день.
    """
    year, month = normalize_month(year, month)
    return Month(month).length(is_leap_year(year))


def day_of_week(jdn: int) -> int:
    """
    День недели для JDN: 1 == воскресенье, 7 == суббота.

    Examples:
        >>> day_of_week(2440588)  # 1970-01-01, четверг
        5
    """
    return (jdn + 1) % 7 + 1
