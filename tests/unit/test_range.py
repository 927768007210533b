"""
Тесты для алгебры интервалов Range

Проверяет:
1. Инварианты создания (lower < upper, без None)
2. Принадлежность точки: contains / within / between / in
3. Девять взаимных положений и их инверсию
4. intersection / union / sum / gap / difference
5. Неизменяемость, равенство, хеширование, строковое представление
"""

from datetime import date
from itertools import product

import pytest
from pydantic import ValidationError

from timekit.core.domain.range import Range, Relation

# Опорный интервал для таблиц
REFERENCE = Range(10, 20)


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestConstruction:
    """Инварианты конструктора"""

    def test_positional_and_keyword(self) -> None:
        """Позиционный и именованный конструкторы эквивалентны"""
        assert Range(1, 2) == Range(lower=1, upper=2)

    @pytest.mark.parametrize("lower, upper", [(5, 5), (6, 5)])
    def test_empty_or_inverted_rejected(self, lower: int, upper: int) -> None:
        """Пустой и перевёрнутый интервалы отклоняются"""
        with pytest.raises(ValueError, match="must be less than upper bound"):
            Range(lower, upper)

    def test_none_rejected(self) -> None:
        """None в границе отклоняется"""
        with pytest.raises(ValueError, match="must not be None"):
            Range(None, 5)
        with pytest.raises(ValueError):
            Range(1, None)

    def test_parametrized_type_validates(self) -> None:
        """Range[int] проверяет тип границ"""
        assert Range[int](1, 2).upper == 2
        with pytest.raises(ValidationError):
            Range[int]("a", 2)

    def test_frozen(self) -> None:
        """Границы нельзя изменить"""
        r = Range(1, 2)
        with pytest.raises(ValidationError):
            r.lower = 0  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Равенство и хеш по границам"""
        assert Range(1, 2) == Range(1, 2)
        assert Range(1, 2) != Range(1, 3)
        assert len({Range(1, 2), Range(1, 2), Range(2, 3)}) == 2

    def test_other_comparables(self) -> None:
        """Работает с любым сравнимым типом"""
        january = Range(date(2020, 1, 1), date(2020, 2, 1))
        assert january.contains(date(2020, 1, 15))
        assert not january.contains(date(2020, 2, 1))


# =============================================================================
# ПРИНАДЛЕЖНОСТЬ ТОЧКИ
# =============================================================================


class TestMembership:
    """contains / within / between"""

    def test_contains_half_open(self) -> None:
        """[lower, upper)"""
        assert REFERENCE.contains(10)
        assert REFERENCE.contains(19)
        assert not REFERENCE.contains(20)
        assert not REFERENCE.contains(9)

    def test_within_closed(self) -> None:
        """[lower, upper]"""
        assert REFERENCE.within(10)
        assert REFERENCE.within(20)
        assert not REFERENCE.within(21)

    def test_between_open(self) -> None:
        """(lower, upper)"""
        assert not REFERENCE.between(10)
        assert REFERENCE.between(15)
        assert not REFERENCE.between(20)

    def test_in_operator(self) -> None:
        """Оператор in совпадает с contains"""
        assert 10 in REFERENCE
        assert 20 not in REFERENCE


# =============================================================================
# ВЗАИМНОЕ ПОЛОЖЕНИЕ
# =============================================================================

_RELATIONS = [
    ((1, 5), Relation.BEFORE),
    ((1, 10), Relation.PRECEDES),
    ((5, 15), Relation.LEADING),
    ((5, 25), Relation.CONTAINS),
    ((10, 25), Relation.CONTAINS),
    ((5, 20), Relation.CONTAINS),
    ((10, 20), Relation.EQUALS),
    ((10, 15), Relation.CONTAINED),
    ((12, 18), Relation.CONTAINED),
    ((12, 20), Relation.CONTAINED),
    ((15, 25), Relation.TRAILING),
    ((20, 25), Relation.FOLLOWS),
    ((25, 30), Relation.AFTER),
]


class TestCompareTo:
    """Девять положений относительно [10, 20)"""

    @pytest.mark.parametrize("bounds, relation", _RELATIONS)
    def test_relation(self, bounds: tuple, relation: Relation) -> None:
        """Положение интервала относительно опорного"""
        assert Range(*bounds).compare_to(REFERENCE) == relation

    def test_inverse_is_negation(self) -> None:
        """a.compare_to(b) == b.compare_to(a).inverse() для всех пар"""
        ranges = [Range(*bounds) for bounds, _ in _RELATIONS]
        for a, b in product(ranges, repeat=2):
            assert a.compare_to(b) == b.compare_to(a).inverse()
            assert a.compare_to(b) == -b.compare_to(a)

    def test_relation_values(self) -> None:
        """Значения от -4 до 4, инверсия — смена знака"""
        assert [r.value for r in Relation] == list(range(-4, 5))
        assert Relation.LEADING.inverse() == Relation.TRAILING
        assert Relation.EQUALS.inverse() == Relation.EQUALS
        assert Relation.PRECEEDS is Relation.PRECEDES


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


class TestIntersection:
    """Общая часть интервалов"""

    @pytest.mark.parametrize(
        "bounds, expected",
        [
            ((5, 15), (10, 15)),
            ((15, 25), (15, 20)),
            ((5, 25), (10, 20)),
            ((12, 18), (12, 18)),
            ((10, 20), (10, 20)),
        ],
    )
    def test_overlapping(self, bounds: tuple, expected: tuple) -> None:
        """Перекрывающиеся интервалы"""
        assert Range(*bounds).intersection(REFERENCE) == Range(*expected)

    @pytest.mark.parametrize("bounds", [(1, 5), (1, 10), (20, 25), (25, 30)])
    def test_disjoint(self, bounds: tuple) -> None:
        """Непересекающиеся и смежные интервалы — None"""
        assert Range(*bounds).intersection(REFERENCE) is None

    def test_symmetric(self) -> None:
        """Пересечение коммутативно"""
        for bounds, _ in _RELATIONS:
            other = Range(*bounds)
            assert other.intersection(REFERENCE) == REFERENCE.intersection(other)


class TestUnionSumGap:
    """union / sum / gap"""

    def test_union_adjacent(self) -> None:
        """Смежные интервалы объединяются"""
        assert Range(1, 10).union(REFERENCE) == Range(1, 20)
        assert Range(20, 25).union(REFERENCE) == Range(10, 25)

    def test_union_disjoint(self) -> None:
        """Между интервалами разрыв — None"""
        assert Range(1, 5).union(REFERENCE) is None
        assert Range(25, 30).union(REFERENCE) is None

    def test_union_overlapping(self) -> None:
        """Перекрывающиеся интервалы"""
        assert Range(5, 15).union(REFERENCE) == Range(5, 20)
        assert Range(12, 18).union(REFERENCE) == REFERENCE

    def test_sum_always_encloses(self) -> None:
        """sum включает разрыв"""
        assert Range(1, 5).sum(REFERENCE) == Range(1, 20)
        assert REFERENCE.sum(Range(25, 30)) == Range(10, 30)

    def test_gap(self) -> None:
        """Разрыв между непересекающимися интервалами"""
        assert Range(1, 5).gap(REFERENCE) == Range(5, 10)
        assert Range(25, 30).gap(REFERENCE) == Range(20, 25)
        assert REFERENCE.gap(Range(1, 5)) == Range(5, 10)

    @pytest.mark.parametrize("bounds", [(1, 10), (5, 15), (12, 18), (20, 25)])
    def test_no_gap(self, bounds: tuple) -> None:
        """Смежные и перекрывающиеся интервалы не имеют разрыва"""
        assert Range(*bounds).gap(REFERENCE) is None


class TestDifference:
    """Части интервала, не покрытые другим"""

    @pytest.mark.parametrize(
        "bounds, expected",
        [
            ((1, 5), [(1, 5)]),
            ((1, 10), [(1, 10)]),
            ((5, 15), [(5, 10)]),
            ((15, 25), [(20, 25)]),
            ((5, 25), [(5, 10), (20, 25)]),
            ((10, 25), [(20, 25)]),
            ((5, 20), [(5, 10)]),
            ((12, 18), []),
            ((10, 20), []),
            ((20, 25), [(20, 25)]),
            ((25, 30), [(25, 30)]),
        ],
    )
    def test_difference(self, bounds: tuple, expected: list) -> None:
        """Разность с опорным интервалом"""
        assert Range(*bounds).difference(REFERENCE) == [Range(*e) for e in expected]

    def test_pieces_preserve_class(self) -> None:
        """Результат того же класса, что и исходный интервал"""
        pieces = Range[int](5, 25).difference(Range[int](10, 20))
        assert all(type(piece) is Range[int] for piece in pieces)


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestRepresentation:
    """str / to_string / JSON"""

    def test_str(self) -> None:
        """lower - upper"""
        assert str(Range(1, 2)) == "1 - 2"

    def test_to_string_formatter(self) -> None:
        """Форматирование границ функцией"""
        assert Range(1, 2).to_string(lambda v: f"<{v}>") == "<1> - <2>"

    def test_model_dump(self) -> None:
        """Сериализация в payload формата обмена"""
        assert Range(1, 2).model_dump(mode="json") == {"lower": 1, "upper": 2}

    def test_model_validate(self) -> None:
        """Payload формата обмена восстанавливает интервал"""
        assert Range.model_validate({"lower": 1, "upper": 2}) == Range(1, 2)
        assert Range[int].model_validate(Range(1, 2).model_dump(mode="json")) == Range[int](1, 2)

    def test_model_validate_missing_bound(self) -> None:
        """Недостающая граница → ValidationError, а не TypeError"""
        with pytest.raises(ValidationError):
            Range.model_validate({"lower": 1})
        with pytest.raises(ValidationError):
            Range.model_validate({"lower": 2, "upper": 1})

    def test_bad_arguments(self) -> None:
        """Лишние и повторные границы"""
        with pytest.raises(TypeError):
            Range(1, 2, 3)
        with pytest.raises(TypeError, match="multiple values"):
            Range(1, lower=2)
