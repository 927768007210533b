"""
Period — Интервал между двумя моментами времени

Period это Range[Instant] с синонимами start/end. Все операции Range
(intersection, union, sum, gap, difference) возвращают Period.
"""

from typing import TYPE_CHECKING, Any, Callable, Final, Optional, Tuple

from timekit.core.domain.instant import Instant
from timekit.core.domain.range import Range

if TYPE_CHECKING:
    from timekit.core.calendar.chronology import Chronology

# Синонимы границ: start → lower, end → upper
_ALIASES: Final[Tuple[Tuple[str, str], ...]] = (("start", "lower"), ("end", "upper"))


class Period(Range[Instant]):
    """
    Полуоткрытый интервал [start, end) на временной оси.

    Examples:
        >>> p = Period(Instant(0), Instant(1000))
        >>> p.duration_millis
        1000
    """

    def __init__(self, *bounds: Any, **data: Any) -> None:
        """Period(start, end), Period(start=..., end=...) или Period(lower=..., upper=...)."""
        for alias, name in _ALIASES:
            if alias in data:
                if name in data:
                    raise TypeError(f"Period got both {alias!r} and {name!r}")
                data[name] = data.pop(alias)
        super().__init__(*bounds, **data)

    @property
    def start(self) -> Instant:
        return self.lower

    @property
    def end(self) -> Instant:
        return self.upper

    @property
    def duration_millis(self) -> int:
        """Длина периода в миллисекундах."""
        return self.upper.millis - self.lower.millis

    def to_string(  # type: ignore[override]
        self,
        formatter: Optional["Chronology | Callable[[Instant], str]"] = None,
    ) -> str:
        """
        Строка вида "start - end".

        Args:
            formatter: Chronology (границы в её часовом поясе с эрой)
                или произвольная функция форматирования Instant
        """
        if formatter is not None and not callable(formatter):
            formatter = formatter.format
        return super().to_string(formatter)
