"""
Chronology — Календарный движок

Календарь, привязанный к часовому поясу и первому дню недели:
- композиция/декомпозиция Instant в локальные поля (эра, год, ..., мс)
- сложение в календарных и фиксированных единицах (add)
- разница в целых единицах (between)
- усечение, округление и сравнение с точностью до поля

Календарь гибридный (см. calendar/hybrid.py): юлианский до 1582-10-04,
григорианский с 1582-10-15. Годы внутри движка астрономические
(0 == 1 BC); наружу эра и год эры отдаются отдельно в DateFields.

Арифметика единиц:
- MONTHS: сложение локальных полей год/месяц, день месяца ограничивается
  длиной целевого месяца (31 января + 1 месяц == 28/29 февраля)
- DAYS: сложение локальной даты с сохранением времени суток
- MILLIS: сложение абсолютных миллисекунд

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. between(a, b, u) == -between(b, a, u)
2. Для a <= b: add(a, between(a, b, u), u) <= b
3. Результат вне 64-битного диапазона — OverflowException, не обрезка
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Dict, Final, List, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timekit.clock.time_provider import TimeProvider
from timekit.core.calendar import hybrid
from timekit.core.domain.calendar_enums import Day, Era, Month
from timekit.core.domain.instant import Instant
from timekit.core.domain.period import Period
from timekit.core.domain.units import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MONTHS_PER_YEAR,
    DateField,
    DateUnit,
    UnitBase,
)
from timekit.core.math.numerical_safeguards import (
    RoundingMode,
    RoundingNecessaryError,
    carries_half,
    checked_subtract,
    require_not_none,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Часовой пояс по умолчанию
DEFAULT_TIMEZONE: Final[tzinfo] = timezone.utc

# Первый день недели по умолчанию (североамериканская неделя)
DEFAULT_FIRST_DAY_OF_WEEK: Final[Day] = Day.SUNDAY

# Переменные окружения для ChronologyConfig.from_env
ENV_TIMEZONE: Final[str] = "TIMEKIT_TIMEZONE"
ENV_FIRST_DAY_OF_WEEK: Final[str] = "TIMEKIT_FIRST_DAY_OF_WEEK"


@dataclass(frozen=True)
class ChronologyConfig:
    """Конфигурация календаря.

    - tz: часовой пояс локальных полей (любой tzinfo, обычно ZoneInfo)
    - first_day_of_week: первый день недели для нумерации недель
    """

    tz: tzinfo = DEFAULT_TIMEZONE
    first_day_of_week: Day = DEFAULT_FIRST_DAY_OF_WEEK

    def __post_init__(self) -> None:
        if not isinstance(self.tz, tzinfo):
            raise ValueError(f"tz must be a tzinfo, got {self.tz!r}")
        if not isinstance(self.first_day_of_week, Day):
            raise ValueError(f"first_day_of_week must be a Day, got {self.first_day_of_week!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ChronologyConfig":
        """
        Конфигурация из переменных окружения.

        TIMEKIT_TIMEZONE — IANA имя пояса ("UTC", "Europe/Moscow").
        TIMEKIT_FIRST_DAY_OF_WEEK — имя дня ("MONDAY") или номер (1..7).
        Отсутствующие переменные дают значения по умолчанию.

        Raises:
            ValueError: Если пояс неизвестен или день недели некорректен
        """
        env = os.environ if environ is None else environ
        tz = DEFAULT_TIMEZONE
        first_day = DEFAULT_FIRST_DAY_OF_WEEK

        tz_name = env.get(ENV_TIMEZONE, "").strip()
        if tz_name and tz_name.upper() != "UTC":
            try:
                tz = ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"{ENV_TIMEZONE}: unknown time zone {tz_name!r}") from exc

        day_text = env.get(ENV_FIRST_DAY_OF_WEEK, "").strip()
        if day_text:
            if day_text.isdigit():
                first_day = Day.value_of(int(day_text))
            else:
                try:
                    first_day = Day[day_text.upper()]
                except KeyError as exc:
                    raise ValueError(
                        f"{ENV_FIRST_DAY_OF_WEEK}: unknown day {day_text!r}"
                    ) from exc

        logger.debug("chronology config from env: tz=%s first_day_of_week=%s", tz, first_day.name)
        return cls(tz=tz, first_day_of_week=first_day)


# =============================================================================
# ЛОКАЛЬНЫЕ ПОЛЯ
# =============================================================================


@dataclass(frozen=True)
class DateFields:
    """Локальные поля момента времени в календаре Chronology."""

    era: Era
    year_of_era: int
    year: int  # астрономический: 0 == 1 BC
    month: int  # 1..12
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    day_of_week: Day
    day_of_year: int

    def prefix(self, field: DateField) -> Tuple[object, ...]:
        """Значения полей от эры до field включительно."""
        values = (
            self.era,
            self.year_of_era,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
        )
        return values[: field.depth + 2]

    def value(self, field: DateField) -> int:
        """Значение отдельного поля (для года — год эры)."""
        return self.prefix(field)[-1]  # type: ignore[return-value]


# =============================================================================
# ГРАНИЦЫ DATETIME
# =============================================================================

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NAIVE_EPOCH: Final[datetime] = datetime(1970, 1, 1)
_ONE_MILLI: Final[timedelta] = timedelta(milliseconds=1)

# Смещение пояса ищется через datetime, который покрывает годы 1..9999;
# запас в сутки защищает от переполнения при переводе в локальное время
_MIN_LOOKUP_MILLIS: Final[int] = (datetime(1, 1, 2) - _NAIVE_EPOCH) // _ONE_MILLI
_MAX_LOOKUP_MILLIS: Final[int] = (datetime(9999, 12, 30) - _NAIVE_EPOCH) // _ONE_MILLI


# Разряды локальных полей [год, месяц, день, час, минута, секунда, мс]:
# минимум и количество значений (для дня и месяца считаются отдельно)
_DIGIT_MINIMUM: Final[Tuple[int, ...]] = (1, 1, 1, 0, 0, 0, 0)
_DIGIT_SPAN: Final[Tuple[int, ...]] = (0, MONTHS_PER_YEAR, 0, 24, 60, 60, MILLIS_PER_SECOND)


def _to_millis(delta: Optional[timedelta]) -> int:
    if delta is None:
        return 0
    return delta // _ONE_MILLI


# =============================================================================
# CHRONOLOGY
# =============================================================================

_Adder = Callable[[Instant, int], Instant]
_Counter = Callable[[Instant, Instant], int]


class Chronology:
    """
    Гибридный юлианско-григорианский календарь в заданном часовом поясе.

    Examples:
        >>> chrono = Chronology.create()
        >>> d = chrono.new_date(2012, 1, 31)
        >>> chrono.format(chrono.add(d, 1, DateUnit.MONTHS))
        '2012-02-29 00:00:00.000 AD'
    """

    def __init__(self, config: Optional[ChronologyConfig] = None) -> None:
        self._config = config if config is not None else ChronologyConfig()
        tz = self._config.tz
        # Фиксированный пояс не требует поиска смещения
        self._fixed_offset: Optional[int] = (
            _to_millis(tz.utcoffset(None)) if isinstance(tz, timezone) else None
        )
        self._arithmetic: Dict[UnitBase, Tuple[_Adder, _Counter]] = {
            UnitBase.MONTHS: (self._add_months, self._months_between),
            UnitBase.DAYS: (self._add_days, self._days_between),
            UnitBase.MILLIS: (self._add_millis, self._millis_between),
        }

    @classmethod
    def create(
        cls,
        tz: Optional[tzinfo] = None,
        first_day_of_week: Optional[Day] = None,
    ) -> "Chronology":
        """
        Фабрика календаря.

        Args:
            tz: Часовой пояс (по умолчанию UTC)
            first_day_of_week: Первый день недели (по умолчанию воскресенье)
        """
        return cls(
            ChronologyConfig(
                tz=tz if tz is not None else DEFAULT_TIMEZONE,
                first_day_of_week=(
                    first_day_of_week if first_day_of_week is not None else DEFAULT_FIRST_DAY_OF_WEEK
                ),
            )
        )

    @property
    def config(self) -> ChronologyConfig:
        return self._config

    @property
    def timezone(self) -> tzinfo:
        return self._config.tz

    @property
    def first_day_of_week(self) -> Day:
        return self._config.first_day_of_week

    def arithmetic(self, base: UnitBase) -> Tuple[_Adder, _Counter]:
        """Пара (add, between) для базовой арифметики единицы."""
        return self._arithmetic[base]

    def __repr__(self) -> str:
        return f"Chronology(tz={self.timezone}, first_day_of_week={self.first_day_of_week.name})"

    # -------------------------------------------------------------------------
    # Смещение часового пояса
    # -------------------------------------------------------------------------

    def _clamp_lookup(self, millis: int) -> int:
        if _MIN_LOOKUP_MILLIS <= millis <= _MAX_LOOKUP_MILLIS:
            return millis
        clamped = min(max(millis, _MIN_LOOKUP_MILLIS), _MAX_LOOKUP_MILLIS)
        logger.debug(
            "offset lookup for %d ms outside datetime range, using %d ms", millis, clamped
        )
        return clamped

    def _offset_at(self, utc_millis: int) -> int:
        """Смещение пояса (мс) в момент utc_millis."""
        if self._fixed_offset is not None:
            return self._fixed_offset
        moment = _EPOCH + timedelta(milliseconds=self._clamp_lookup(utc_millis))
        return _to_millis(moment.astimezone(self.timezone).utcoffset())

    def _offset_for_local(self, local_millis: int) -> int:
        """
        Смещение пояса (мс) для локального времени.

        Неоднозначное время (перевод назад) трактуется как первое вхождение,
        несуществующее (перевод вперёд) сдвигается вперёд на величину перевода.
        """
        if self._fixed_offset is not None:
            return self._fixed_offset
        wall = _NAIVE_EPOCH + timedelta(milliseconds=self._clamp_lookup(local_millis))
        return _to_millis(wall.replace(tzinfo=self.timezone).utcoffset())

    def _local_millis(self, instant: Instant) -> int:
        return instant.millis + self._offset_at(instant.millis)

    def _from_local(self, local_millis: int) -> Instant:
        return Instant(checked_subtract(local_millis, self._offset_for_local(local_millis)))

    # -------------------------------------------------------------------------
    # Композиция и декомпозиция
    # -------------------------------------------------------------------------

    @staticmethod
    def _compose(
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        millisecond: int,
    ) -> int:
        """Локальные миллисекунды для полей (мягкая нормализация)."""
        jdn = hybrid.date_to_jdn(year, month, day)
        return (
            (jdn - hybrid.UNIX_EPOCH_JDN) * MILLIS_PER_DAY
            + hour * MILLIS_PER_HOUR
            + minute * MILLIS_PER_MINUTE
            + second * MILLIS_PER_SECOND
            + millisecond
        )

    def new_date(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        era: Era = Era.AD,
    ) -> Instant:
        """
        Instant для локальных полей в этом календаре.

        Args:
            year: Год; для Era.AD астрономический (0 == 1 BC),
                для Era.BC — год эры (1 == 1 BC)
            month: Месяц, 1-based (13 == январь следующего года)
            day: День месяца (32 переходит в следующий месяц)
            hour, minute, second, millisecond: Время суток (мягко)
            era: Эра, в которой задан year

        Returns:
            Instant

        Raises:
            NullArgumentError: Если любое поле is None
            OverflowException: Если результат вне 64-битного диапазона
        """
        for name, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("millisecond", millisecond),
            ("era", era),
        ):
            require_not_none(value, name)
        if era == Era.BC:
            year = 1 - year
        return self._from_local(
            self._compose(year, month, day, hour, minute, second, millisecond)
        )

    @staticmethod
    def _decompose(local_millis: int) -> List[int]:
        """Локальные миллисекунды → [год, месяц, день, час, минута, секунда, мс]."""
        days, ms_of_day = divmod(local_millis, MILLIS_PER_DAY)
        year, month, day = hybrid.jdn_to_date(days + hybrid.UNIX_EPOCH_JDN)
        hour, rest = divmod(ms_of_day, MILLIS_PER_HOUR)
        minute, rest = divmod(rest, MILLIS_PER_MINUTE)
        second, millisecond = divmod(rest, MILLIS_PER_SECOND)
        return [year, month, day, hour, minute, second, millisecond]

    def fields(self, instant: Instant) -> DateFields:
        """
        Локальные поля instant.

        Raises:
            NullArgumentError: Если instant is None
        """
        require_not_none(instant, "instant")
        year, month, day, hour, minute, second, millisecond = self._decompose(
            self._local_millis(instant)
        )
        jdn = hybrid.date_to_jdn(year, month, day)

        if year > 0:
            era, year_of_era = Era.AD, year
        else:
            era, year_of_era = Era.BC, 1 - year

        return DateFields(
            era=era,
            year_of_era=year_of_era,
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            day_of_week=Day(hybrid.day_of_week(jdn)),
            day_of_year=jdn - hybrid.date_to_jdn(year, 1, 1) + 1,
        )

    def format(self, instant: Instant) -> str:
        """
        Строка "yyyy-MM-dd HH:mm:ss.SSS G" в локальном времени.

        Examples:
            >>> Chronology.create().format(Instant(0))
            '1970-01-01 00:00:00.000 AD'
        """
        f = self.fields(instant)
        return (
            f"{f.year_of_era:04d}-{f.month:02d}-{f.day:02d} "
            f"{f.hour:02d}:{f.minute:02d}:{f.second:02d}.{f.millisecond:03d} {f.era.value}"
        )

    def now(self) -> Instant:
        """Текущий момент по установленному TimeProvider."""
        return Instant(TimeProvider.get().milli_time())

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_leap_year(self, instant: Instant) -> bool:
        return hybrid.is_leap_year(self.fields(instant).year)

    def is_modern_era(self, instant: Instant) -> bool:
        """Принадлежит ли instant нашей эре (AD)."""
        return self.fields(instant).era == Era.AD

    def is_first_day_of_week(self, instant: Instant) -> bool:
        return self.day_of_week(instant) == self.first_day_of_week

    def is_last_day_of_week(self, instant: Instant) -> bool:
        return self.day_of_week(instant) == self.first_day_of_week.minus(1)

    def is_last_day_of_month(self, instant: Instant) -> bool:
        f = self.fields(instant)
        return f.day == hybrid.days_in_month(f.year, f.month)

    # -------------------------------------------------------------------------
    # Производные поля
    # -------------------------------------------------------------------------

    def day_of_week(self, instant: Instant) -> Day:
        return self.fields(instant).day_of_week

    def day_of_year(self, instant: Instant) -> int:
        """Порядковый номер дня в году, 1..366."""
        return self.fields(instant).day_of_year

    def month_of_year(self, instant: Instant) -> Month:
        return Month(self.fields(instant).month)

    def _week_offset(self, day: Day) -> int:
        # Сколько дней недели прошло до day, считая от первого дня недели
        return (day.value - self.first_day_of_week.value) % 7

    def week_of_month(self, instant: Instant) -> int:
        """
        Номер недели в месяце, 1-based.

        Первая неделя — та, что содержит первое число (минимум 1 день).
        Месяц может занимать от 4 до 6 недель.
        """
        f = self.fields(instant)
        first = Day(hybrid.day_of_week(hybrid.date_to_jdn(f.year, f.month, 1)))
        return (f.day - 1 + self._week_offset(first)) // 7 + 1

    def week_of_year(self, instant: Instant) -> int:
        """
        Номер недели в году, 1-based.

        Первая неделя — та, что содержит 1 января. Последние дни декабря,
        попавшие в неделю с 1 января следующего года, относятся к неделе 1.
        """
        f = self.fields(instant)
        jdn = hybrid.date_to_jdn(f.year, 1, 1) + f.day_of_year - 1
        week_start = jdn - self._week_offset(f.day_of_week)
        if week_start + 6 >= hybrid.date_to_jdn(f.year + 1, 1, 1):
            return 1
        first = Day(hybrid.day_of_week(hybrid.date_to_jdn(f.year, 1, 1)))
        return (f.day_of_year - 1 + self._week_offset(first)) // 7 + 1

    # -------------------------------------------------------------------------
    # Базовая арифметика
    # -------------------------------------------------------------------------

    def _add_months(self, instant: Instant, amount: int) -> Instant:
        f = self.fields(instant)
        year, month = hybrid.normalize_month(f.year, f.month + amount)
        day = min(f.day, hybrid.days_in_month(year, month))
        return self._from_local(
            self._compose(year, month, day, f.hour, f.minute, f.second, f.millisecond)
        )

    def _months_between(self, start: Instant, end: Instant) -> int:
        s = self.fields(start)
        e = self.fields(end)
        months = (e.year - s.year) * 12 + (e.month - s.month)
        while months > 0 and self._add_months(start, months) > end:
            months -= 1
        return max(months, 0)

    def _add_days(self, instant: Instant, amount: int) -> Instant:
        days, ms_of_day = divmod(self._local_millis(instant), MILLIS_PER_DAY)
        return self._from_local((days + amount) * MILLIS_PER_DAY + ms_of_day)

    def _days_between(self, start: Instant, end: Instant) -> int:
        start_day, start_ms = divmod(self._local_millis(start), MILLIS_PER_DAY)
        end_day, end_ms = divmod(self._local_millis(end), MILLIS_PER_DAY)
        days = end_day - start_day
        if end_ms < start_ms:
            days -= 1
        return days

    @staticmethod
    def _add_millis(instant: Instant, amount: int) -> Instant:
        return instant.plus_millis(amount)

    @staticmethod
    def _millis_between(start: Instant, end: Instant) -> int:
        return end.millis - start.millis

    # -------------------------------------------------------------------------
    # Публичная арифметика
    # -------------------------------------------------------------------------

    def add(self, instant: Instant, amount: int, unit: DateUnit) -> Instant:
        """
        Сдвиг instant на amount единиц unit (amount < 0 — назад).

        Args:
            instant: Исходный момент
            amount: Количество единиц
            unit: Единица

        Returns:
            Новый Instant

        Raises:
            NullArgumentError: Если аргумент is None
            OverflowException: Если результат вне 64-битного диапазона
        """
        require_not_none(instant, "instant")
        require_not_none(amount, "amount")
        require_not_none(unit, "unit")
        return unit.add(self, instant, amount)

    def between(self, start: Instant, end: Instant, unit: DateUnit) -> int:
        """
        Знаковое количество целых единиц unit от start до end.

        Для start <= end это наибольшее N, при котором
        add(start, N, unit) <= end; для end < start — -between(end, start).

        Examples:
            >>> chrono = Chronology.create()
            >>> chrono.between(
            ...     chrono.new_date(2012, 1, 29), chrono.new_date(2012, 2, 28), DateUnit.MONTHS
            ... )
            0
        """
        require_not_none(start, "start")
        require_not_none(end, "end")
        require_not_none(unit, "unit")
        if end < start:
            return -unit.between(self, end, start)
        return unit.between(self, start, end)

    def between_period(self, period: Period, unit: DateUnit) -> int:
        """Количество целых единиц unit в period."""
        require_not_none(period, "period")
        return self.between(period.start, period.end, unit)

    # -------------------------------------------------------------------------
    # Точность до поля
    # -------------------------------------------------------------------------

    def is_same(self, one: Instant, two: Instant, field: DateField) -> bool:
        """
        Совпадают ли моменты во всех полях от эры до field включительно.
        """
        require_not_none(one, "one")
        require_not_none(two, "two")
        require_not_none(field, "field")
        return self.fields(one).prefix(field) == self.fields(two).prefix(field)

    def truncate(self, instant: Instant, field: DateField) -> Instant:
        """
        Начало периода точности field, содержащего instant.

        Examples:
            >>> chrono = Chronology.create()
            >>> d = chrono.new_date(2012, 10, 22, 12, 31, 44, 432)
            >>> chrono.format(chrono.truncate(d, DateField.MONTH))
            '2012-10-01 00:00:00.000 AD'
        """
        require_not_none(instant, "instant")
        require_not_none(field, "field")
        if field == DateField.MILLISECOND:
            return instant

        if field.unit.base == UnitBase.MILLIS:
            # Часы и меньше: отсекаем остаток локального времени, смещение то же
            excess = self._local_millis(instant) % field.unit.factor
            return Instant(instant.millis - excess)

        f = self.fields(instant)
        month = f.month if field != DateField.YEAR else 1
        day = f.day if field == DateField.DAY else 1
        return self._from_local(self._compose(f.year, month, day, 0, 0, 0, 0))

    def round(self, instant: Instant, field: DateField, mode: RoundingMode) -> Instant:
        """
        Округление instant до границы периода точности field.

        Выровненный момент возвращается без изменений при любом режиме.
        DOWN/FLOOR дают truncate, UP/CEILING — truncate + 1 единица поля.

        HALF_* округляют поразрядно, от миллисекунд вверх до field: каждый
        разряд сравнивается с серединой своего диапазона, при переносе
        следующий разряд увеличивается на 1, а текущий сбрасывается
        в минимум. Перенос накапливается: 12:29:29.500 до минут по HALF_UP
        даёт 12:30 (мс → 30 с → +1 минута).

        Середина диапазона: мс 500, секунды и минуты 30, часы 12,
        день — длина месяца // 2 (15 июня уже округляется вверх),
        месяц — июнь (месяцы считаются с 0, середина (11 - 0) // 2).
        Для HALF_EVEN ничья решается нечётностью следующего разряда;
        месяц для этой проверки тоже считается с 0, год — год эры.

        Examples:
            >>> chrono = Chronology.create()
            >>> d = chrono.new_date(1973, 6, 15, 12, 30, 30, 500)
            >>> chrono.format(chrono.round(d, DateField.YEAR, RoundingMode.HALF_UP))
            '1974-01-01 00:00:00.000 AD'

        Raises:
            NullArgumentError: Если аргумент is None
            RoundingNecessaryError: Если mode == UNNECESSARY и момент не выровнен
        """
        require_not_none(instant, "instant")
        require_not_none(field, "field")
        require_not_none(mode, "mode")

        floor = self.truncate(instant, field)
        if floor == instant:
            return instant
        if mode == RoundingMode.UNNECESSARY:
            raise RoundingNecessaryError(f"{self.format(instant)} is not aligned to {field.name}")
        if mode in (RoundingMode.DOWN, RoundingMode.FLOOR):
            return floor
        if mode in (RoundingMode.UP, RoundingMode.CEILING):
            return self.add(floor, 1, field.unit)

        local = self._decompose(self._local_millis(instant))
        for depth in range(DateField.MILLISECOND.depth, field.depth, -1):
            value, half = self._digit(local, depth)
            if carries_half(mode, value, half, self._digit(local, depth - 1)[0] % 2 == 1):
                local[depth - 1] += 1
                local[depth] = _DIGIT_MINIMUM[depth]
                local = self._decompose(self._compose(*local))
            else:
                local[depth] = _DIGIT_MINIMUM[depth]
        return self._from_local(self._compose(*local))

    @staticmethod
    def _digit(local: List[int], depth: int) -> Tuple[int, int]:
        """(значение, середина диапазона) разряда depth в локальных полях."""
        if depth == 0:
            year = local[0]
            return (year if year > 0 else 1 - year), 0
        if depth == 1:
            return local[1] - 1, (MONTHS_PER_YEAR - 1) // 2
        if depth == 2:
            return local[2], hybrid.days_in_month(local[0], local[1]) // 2
        return local[depth], _DIGIT_SPAN[depth] // 2
