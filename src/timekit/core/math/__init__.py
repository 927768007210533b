"""
Core math modules для timekit

Проверяемая целочисленная арифметика, округление и проверки аргументов.
"""

from timekit.core.math.numerical_safeguards import (
    # 64-bit bounds
    LONG_MAX,
    LONG_MIN,
    # Exceptions
    NullArgumentError,
    OverflowException,
    RoundingNecessaryError,
    # Rounding
    RoundingMode,
    divide_rounded,
    carries_half,
    resolve_rounding,
    # Checked arithmetic
    checked_add,
    checked_multiply,
    checked_subtract,
    # Argument checks
    between,
    contains,
    gt,
    gte,
    lt,
    lte,
    require_not_none,
    within,
    # Comparables
    max_of,
    min_of,
)

__all__ = [
    # 64-bit bounds
    "LONG_MIN",
    "LONG_MAX",
    # Exceptions
    "OverflowException",
    "RoundingNecessaryError",
    "NullArgumentError",
    # Rounding
    "RoundingMode",
    "divide_rounded",
    "carries_half",
    "resolve_rounding",
    # Checked arithmetic
    "checked_add",
    "checked_subtract",
    "checked_multiply",
    # Argument checks
    "require_not_none",
    "gt",
    "gte",
    "lt",
    "lte",
    "between",
    "within",
    "contains",
    # Comparables
    "min_of",
    "max_of",
]
