"""
Dates — Вспомогательные функции над Instant

- max_of / min_of / equal — агрегаты над набором моментов
- before / after — предикаты для фильтрации
- gt / gte / lt / lte / between / within / contains — проверки аргументов
- parse — разбор строки с возвратом значения по умолчанию при ошибке
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

from timekit.core.domain.instant import Instant
from timekit.core.math.numerical_safeguards import (
    between,
    contains,
    gt,
    gte,
    lt,
    lte,
    max_of,
    min_of,
    require_not_none,
    within,
)

logger = logging.getLogger(__name__)

__all__ = [
    "max_of",
    "min_of",
    "equal",
    "before",
    "after",
    "gt",
    "gte",
    "lt",
    "lte",
    "between",
    "within",
    "contains",
    "parse",
]


def equal(*instants: Optional[Instant]) -> bool:
    """
    Все ли моменты равны (None равен только None).

    Returns:
        False для пустого ввода, True для одного момента
    """
    if not instants:
        return False
    first = instants[0]
    return all(other == first for other in instants[1:])


def before(instant: Instant) -> Callable[[Instant], bool]:
    """
    Предикат "строго раньше instant".

    Examples:
        >>> is_early = before(Instant(10))
        >>> is_early(Instant(5)), is_early(Instant(10))
        (True, False)
    """
    require_not_none(instant, "instant")
    return lambda candidate: candidate < instant


def after(instant: Instant) -> Callable[[Instant], bool]:
    """Предикат "строго позже instant"."""
    require_not_none(instant, "instant")
    return lambda candidate: candidate > instant


def parse(
    text: Optional[str],
    fmt: str,
    tz: Optional[tzinfo] = None,
    default: Optional[Instant] = None,
) -> Optional[Instant]:
    """
    Разбор строки в Instant по формату strptime.

    Если формат не содержит смещения (%z), строка трактуется как локальное
    время в tz (по умолчанию UTC).

    Args:
        text: Строка с датой
        fmt: Формат datetime.strptime
        tz: Часовой пояс для строк без смещения
        default: Результат при любой ошибке разбора

    Returns:
        Instant или default
    """
    require_not_none(fmt, "fmt")
    if text is None:
        return default
    try:
        parsed = datetime.strptime(text, fmt)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=tz if tz is not None else timezone.utc)
        return Instant.from_datetime(parsed)
    except (ValueError, OverflowError) as exc:
        logger.debug("parse of %r with %r failed, using default: %s", text, fmt, exc)
        return default
