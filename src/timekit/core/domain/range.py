"""
Range — Алгебра полуоткрытых интервалов

Immutable Pydantic модель интервала (lower, upper) над любым сравнимым типом.
Инвариант: lower < upper строго; None, пустые и перевёрнутые интервалы
отклоняются при создании.

Девять взаимных положений двух интервалов (Relation):

    BEFORE     [a--a]       [b--b]
    PRECEDES   [a--a][b--b]
    LEADING    [a--[b--a]--b]
    CONTAINS   [a--[b--b]--a]
    EQUALS     [ab-------ab]
    CONTAINED  [b--[a--a]--b]
    TRAILING   [b--[a--b]--a]
    FOLLOWS    [b--b][a--a]
    AFTER      [b--b]       [a--a]

Relation инвертируется сменой знака: a.compare_to(b) == -b.compare_to(a).
"""

from enum import IntEnum
from typing import Any, Callable, Final, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")

# Имена полей-границ в порядке позиционных аргументов
_BOUND_NAMES: Final[Tuple[str, str]] = ("lower", "upper")


# =============================================================================
# RELATION
# =============================================================================


class Relation(IntEnum):
    """Взаимное положение интервала относительно другого интервала."""

    BEFORE = -4
    PRECEDES = -3
    LEADING = -2
    CONTAINS = -1
    EQUALS = 0
    CONTAINED = 1
    TRAILING = 2
    FOLLOWS = 3
    AFTER = 4

    # Историческое написание
    PRECEEDS = -3

    def inverse(self) -> "Relation":
        """Положение другого интервала относительно этого."""
        return Relation(-self.value)


# =============================================================================
# RANGE MODEL
# =============================================================================


class Range(BaseModel, Generic[T]):
    """
    Интервал [lower, upper) над сравнимым типом T.

    Immutable модель (frozen=True): все операции возвращают новые интервалы
    того же класса, что и self (Period порождает Period).
    """

    lower: T
    upper: T

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def __init__(self, *bounds: Any, **data: Any) -> None:
        """
        Range(lower, upper) или Range(lower=..., upper=...).

        Недостающая граница доходит до валидатора pydantic (ValidationError).
        """
        if len(bounds) > len(_BOUND_NAMES):
            raise TypeError(f"{type(self).__name__} takes at most 2 bounds, got {len(bounds)}")
        for name, value in zip(_BOUND_NAMES, bounds):
            if name in data:
                raise TypeError(f"{type(self).__name__} got multiple values for {name!r}")
            data[name] = value
        super().__init__(**data)

    @model_validator(mode="after")
    def _check_bounds(self) -> "Range[T]":
        """lower и upper заданы и lower < upper."""
        if self.lower is None or self.upper is None:
            raise ValueError("range bounds must not be None")
        if not self.lower < self.upper:
            raise ValueError(
                f"range lower bound {self.lower} must be less than upper bound {self.upper}"
            )
        return self

    def _derive(self, lower: T, upper: T) -> "Range[T]":
        return type(self)(lower, upper)

    # -------------------------------------------------------------------------
    # Принадлежность точки
    # -------------------------------------------------------------------------

    def contains(self, value: T) -> bool:
        """lower <= value < upper."""
        return self.lower <= value < self.upper

    def within(self, value: T) -> bool:
        """lower <= value <= upper."""
        return self.lower <= value <= self.upper

    def between(self, value: T) -> bool:
        """lower < value < upper."""
        return self.lower < value < self.upper

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    # -------------------------------------------------------------------------
    # Взаимное положение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Range[T]") -> Relation:
        """
        Взаимное положение self относительно other.

        Args:
            other: Интервал для сравнения

        Returns:
            Один из девяти Relation

        Examples:
            >>> Range(1, 3).compare_to(Range(2, 5))
            <Relation.LEADING: -2>
            >>> Range(1, 2).compare_to(Range(2, 5))
            <Relation.PRECEDES: -3>
        """
        if self.upper < other.lower:
            return Relation.BEFORE
        if self.lower > other.upper:
            return Relation.AFTER
        if self.upper == other.lower:
            return Relation.PRECEDES
        if self.lower == other.upper:
            return Relation.FOLLOWS

        if self.lower < other.lower:
            return Relation.LEADING if self.upper < other.upper else Relation.CONTAINS
        if self.lower > other.lower:
            return Relation.CONTAINED if self.upper <= other.upper else Relation.TRAILING

        # Общая нижняя граница
        if self.upper == other.upper:
            return Relation.EQUALS
        return Relation.CONTAINED if self.upper < other.upper else Relation.CONTAINS

    # -------------------------------------------------------------------------
    # Операции над интервалами
    # -------------------------------------------------------------------------

    def intersection(self, other: "Range[T]") -> Optional["Range[T]"]:
        """
        Общая часть двух интервалов; None если интервалы не перекрываются.
        """
        relation = self.compare_to(other)
        if relation == Relation.LEADING:
            return self._derive(other.lower, self.upper)
        if relation in (Relation.EQUALS, Relation.CONTAINED):
            return self
        if relation == Relation.CONTAINS:
            return self._derive(other.lower, other.upper)
        if relation == Relation.TRAILING:
            return self._derive(self.lower, other.upper)
        return None

    def union(self, other: "Range[T]") -> Optional["Range[T]"]:
        """
        Объединение перекрывающихся или смежных интервалов.

        Returns:
            Охватывающий интервал; None для BEFORE/AFTER (между ними разрыв)
        """
        if self.compare_to(other) in (Relation.BEFORE, Relation.AFTER):
            return None
        return self.sum(other)

    def sum(self, other: "Range[T]") -> "Range[T]":
        """Наименьший интервал, охватывающий оба (разрыв включается)."""
        return self._derive(min(self.lower, other.lower), max(self.upper, other.upper))

    def gap(self, other: "Range[T]") -> Optional["Range[T]"]:
        """
        Интервал строго между двумя непересекающимися интервалами.

        Returns:
            Разрыв для BEFORE/AFTER; None для любого другого положения
        """
        if self.compare_to(other) not in (Relation.BEFORE, Relation.AFTER):
            return None
        return self._derive(min(self.upper, other.upper), max(self.lower, other.lower))

    def difference(self, other: "Range[T]") -> List["Range[T]"]:
        """
        Части self, не покрытые other.

        Returns:
            Список из 0, 1 или 2 интервалов в порядке возрастания
        """
        relation = self.compare_to(other)
        if relation in (
            Relation.BEFORE,
            Relation.PRECEDES,
            Relation.FOLLOWS,
            Relation.AFTER,
        ):
            return [self]
        if relation == Relation.LEADING:
            return [self._derive(self.lower, other.lower)]
        if relation == Relation.TRAILING:
            return [self._derive(other.upper, self.upper)]
        if relation == Relation.CONTAINS:
            pieces: List[Range[T]] = []
            if self.lower < other.lower:
                pieces.append(self._derive(self.lower, other.lower))
            if self.upper > other.upper:
                pieces.append(self._derive(other.upper, self.upper))
            return pieces
        return []

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self, formatter: Optional[Callable[[T], str]] = None) -> str:
        """
        Строка вида "lower - upper".

        Args:
            formatter: Функция форматирования границы (по умолчанию str)
        """
        fmt = formatter if formatter is not None else str
        return f"{fmt(self.lower)} - {fmt(self.upper)}"

    def __str__(self) -> str:
        return self.to_string()
