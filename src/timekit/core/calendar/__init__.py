"""
Calendar engine: hybrid Julian/Gregorian day numbers, Chronology and the
Dates helper functions.
"""

from timekit.core.calendar import dates, hybrid
from timekit.core.calendar.chronology import (
    DEFAULT_FIRST_DAY_OF_WEEK,
    DEFAULT_TIMEZONE,
    ENV_FIRST_DAY_OF_WEEK,
    ENV_TIMEZONE,
    Chronology,
    ChronologyConfig,
    DateFields,
)

__all__ = [
    "hybrid",
    "dates",
    "Chronology",
    "ChronologyConfig",
    "DateFields",
    "DEFAULT_TIMEZONE",
    "DEFAULT_FIRST_DAY_OF_WEEK",
    "ENV_TIMEZONE",
    "ENV_FIRST_DAY_OF_WEEK",
]
