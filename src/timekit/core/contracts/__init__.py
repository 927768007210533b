"""
Contract Validation Module

Модуль для валидации JSON контрактов формата обмена timekit.
"""

from .validators import (
    ContractValidator,
    DurationExpressionValidator,
    DurationValidator,
    InstantValidator,
    PeriodValidator,
    RangeValidator,
    SCHEMA_DIR,
    SchemaLoader,
    validate_duration,
    validate_duration_expression,
    validate_instant,
    validate_period,
    validate_model,
    validate_range,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InstantValidator",
    "RangeValidator",
    "PeriodValidator",
    "DurationValidator",
    "DurationExpressionValidator",
    # Functions
    "validate_instant",
    "validate_range",
    "validate_period",
    "validate_duration",
    "validate_duration_expression",
    "validate_model",
]
