"""
JSON Schema Contract Validators

Контракты формата обмена timekit (jsonschema, Draft 2020-12).

Схемы (поставляются вместе с пакетом, contracts/schema/):
- instant.json — Instant как целое число миллисекунд
- range.json — Range {lower, upper}
- period.json — Period {lower, upper} в миллисекундах
- duration.json — Duration {value, unit}
- duration_expression.json — текстовое выражение длительности ("15m")

Каждый валидатор привязан к схеме и, кроме duration_expression, к модели
домена: validate_model(model) выбирает контракт по типу модели и проверяет
model.model_dump(mode="json").
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from timekit.core.domain.duration import Duration
from timekit.core.domain.instant import Instant
from timekit.core.domain.period import Period
from timekit.core.domain.range import Range

logger = logging.getLogger(__name__)

# Каталог схем внутри пакета
SCHEMA_DIR: Path = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema документов одного каталога.

    Каждый документ при первой загрузке проходит meta-validation.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def names(self) -> List[str]:
        """Имена всех схем каталога (без расширения), по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (например, 'period').

        Raises:
            FileNotFoundError: Если файла схемы нет
            json.JSONDecodeError: Если файл не JSON
            ValueError: Если документ не является JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Загрузчик схем пакета
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка payload против одной схемы пакета.

    Подклассы задают schema_name и, если контракт описывает модель
    домена, model.
    """

    schema_name: str = ""
    model: Optional[Type[BaseModel]] = None

    def __init__(self) -> None:
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Any) -> List[str]:
        """
        Ошибки строками "путь: сообщение" в порядке путей.

        Examples:
            >>> PeriodValidator().describe_errors({"lower": "x", "upper": 1})
            ["lower: 'x' is not of type 'integer'"]
        """
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [
            f"{'/'.join(str(p) for p in error.absolute_path) or '$'}: {error.message}"
            for error in errors
        ]

    def validate_model(self, model: BaseModel) -> None:
        """
        Проверка сериализованной модели домена.

        Raises:
            TypeError: Если контракт не описывает модель этого типа
            ValidationError: Если payload модели не соответствует схеме
        """
        if self.model is None or not isinstance(model, self.model):
            raise TypeError(
                f"{type(self).__name__} does not describe {type(model).__name__}"
            )
        self.validate(model.model_dump(mode="json"))


class InstantValidator(ContractValidator):
    schema_name = "instant"
    model = Instant


class RangeValidator(ContractValidator):
    schema_name = "range"
    model = Range


class PeriodValidator(ContractValidator):
    schema_name = "period"
    model = Period


class DurationValidator(ContractValidator):
    schema_name = "duration"
    model = Duration


class DurationExpressionValidator(ContractValidator):
    """Текстовое выражение длительности, принимаемое Duration.parse."""

    schema_name = "duration_expression"


# Period проверяется раньше Range, так как Period является подклассом Range
_MODEL_CONTRACTS: Tuple[Type[ContractValidator], ...] = (
    PeriodValidator,
    RangeValidator,
    InstantValidator,
    DurationValidator,
)


@lru_cache(maxsize=None)
def _validator(contract: Type[ContractValidator]) -> ContractValidator:
    return contract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_instant(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме instant
    """
    _validator(InstantValidator).validate(data)


def validate_range(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме range
    """
    _validator(RangeValidator).validate(data)


def validate_period(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме period
    """
    _validator(PeriodValidator).validate(data)


def validate_duration(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме duration
    """
    _validator(DurationValidator).validate(data)


def validate_duration_expression(data: str) -> None:
    """
    Raises:
        ValidationError: Если строка не соответствует формату "15m"
    """
    _validator(DurationExpressionValidator).validate(data)


def validate_model(model: BaseModel) -> None:
    """
    Проверка модели домена по контракту её типа.

    Args:
        model: Instant, Range, Period или Duration

    Raises:
        TypeError: Если для типа модели нет контракта
        ValidationError: Если payload модели не соответствует схеме

    Examples:
        >>> validate_model(Period(Instant(0), Instant(1000)))
    """
    for contract in _MODEL_CONTRACTS:
        if isinstance(model, contract.model):  # type: ignore[arg-type]
            _validator(contract).validate_model(model)
            return
    raise TypeError(f"no contract for {type(model).__name__}")
