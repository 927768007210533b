"""
Core calendar engine, interval algebra, value objects and safe arithmetic.

This module contains the foundational building blocks and re-exports the
public API: Chronology, Instant, Range, Period, Duration, the calendar enums
and units, the checked-arithmetic errors and the JSON contract validators.
"""

from timekit.core.math import (
    NullArgumentError,
    OverflowException,
    RoundingMode,
    RoundingNecessaryError,
)
from timekit.core.domain import (
    DateField,
    DateUnit,
    Day,
    Duration,
    Era,
    Instant,
    Month,
    Period,
    Range,
    Relation,
    TimeUnit,
)
from timekit.core.calendar import Chronology, ChronologyConfig, DateFields, dates, hybrid
from timekit.core.contracts import (
    validate_duration,
    validate_duration_expression,
    validate_instant,
    validate_period,
    validate_model,
    validate_range,
)

__all__ = [
    # Errors
    "NullArgumentError",
    "OverflowException",
    "RoundingNecessaryError",
    # Units and enums
    "RoundingMode",
    "DateField",
    "DateUnit",
    "TimeUnit",
    "Day",
    "Month",
    "Era",
    # Value objects
    "Instant",
    "Range",
    "Relation",
    "Period",
    "Duration",
    # Calendar
    "Chronology",
    "ChronologyConfig",
    "DateFields",
    "dates",
    "hybrid",
    # Contracts
    "validate_instant",
    "validate_range",
    "validate_period",
    "validate_duration",
    "validate_duration_expression",
    "validate_model",
]
