"""
Domain models and value objects.

Contains fundamental value objects: Instant, Range, Period, Duration and the
calendar enums and units they are measured in.
"""

from timekit.core.domain.calendar_enums import Day, Era, Month
from timekit.core.domain.duration import Duration
from timekit.core.domain.instant import Instant
from timekit.core.domain.period import Period
from timekit.core.domain.range import Range, Relation
from timekit.core.domain.units import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    DateField,
    DateUnit,
    TimeUnit,
    UnitBase,
)
from timekit.core.math.numerical_safeguards import RoundingMode

__all__ = [
    # Units module
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "DateField",
    "DateUnit",
    "TimeUnit",
    "UnitBase",
    "RoundingMode",
    # Calendar enums
    "Day",
    "Month",
    "Era",
    # Value objects
    "Instant",
    "Range",
    "Relation",
    "Period",
    "Duration",
]
