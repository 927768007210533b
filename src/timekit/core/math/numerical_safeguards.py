"""
Numerical Safeguards — Checked Integer Arithmetic

Модуль обеспечивает численную корректность всех операций календарного движка:
- Проверяемое сложение/умножение в пределах знакового 64-битного диапазона
- Целочисленное деление с явным режимом округления (RoundingMode)
- Выбор границы (floor/ceiling) для значения между двумя границами
- Проверки аргументов (None, сравнения, диапазоны) с понятными сообщениями

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не происходит молча (OverflowException)
2. Округление всегда явное; UNNECESSARY на неточном значении — ошибка
3. None никогда не пропагирует дальше публичной операции (NullArgumentError)
4. Все операции детерминированы и не имеют побочных эффектов
"""

from enum import Enum
from typing import Any, Final, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ГРАНИЦЫ 64-BIT
# =============================================================================

# Минимальное значение знакового 64-битного целого
LONG_MIN: Final[int] = -(2**63)

# Максимальное значение знакового 64-битного целого
LONG_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class OverflowException(ArithmeticError):
    """
    Результат арифметики вышел за пределы знакового 64-битного диапазона.
    """

    pass


class RoundingNecessaryError(ArithmeticError):
    """
    Запрошен режим UNNECESSARY, но значение не выровнено и требует округления.
    """

    pass


class NullArgumentError(ValueError):
    """
    Публичной операции передан None вместо обязательного аргумента.
    """

    pass


# =============================================================================
# РЕЖИМЫ ОКРУГЛЕНИЯ
# =============================================================================


class RoundingMode(str, Enum):
    """
    Режим округления для значения, лежащего между двумя границами.

    UP/DOWN — от нуля / к нулю; CEILING/FLOOR — к +inf / к -inf;
    HALF_* — к ближайшей границе с разным правилом для ничьей;
    UNNECESSARY — значение обязано быть точным.
    """

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"


# =============================================================================
# ПРОВЕРКИ АРГУМЕНТОВ
# =============================================================================


def require_not_none(value: Optional[T], name: str) -> T:
    """
    Проверка обязательного аргумента.

    Args:
        value: Значение аргумента
        name: Имя аргумента для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        NullArgumentError: Если value is None
    """
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    return value


def _check_long(value: int, operation: str) -> int:
    if value < LONG_MIN or value > LONG_MAX:
        raise OverflowException(f"{operation} overflows 64-bit range: {value}")
    return value


# =============================================================================
# ПРОВЕРЯЕМАЯ АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение с контролем 64-битного диапазона.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        a + b

    Raises:
        OverflowException: Если сумма не помещается в 64 бита

    Examples:
        >>> checked_add(1, 2)
        3
        >>> checked_add(LONG_MAX, 1)
        Traceback (most recent call last):
        ...
        OverflowException: ...
    """
    return _check_long(a + b, f"{a} + {b}")


def checked_subtract(a: int, b: int) -> int:
    """
    Вычитание с контролем 64-битного диапазона.

    Raises:
        OverflowException: Если разность не помещается в 64 бита
    """
    return _check_long(a - b, f"{a} - {b}")


def checked_multiply(a: int, b: int) -> int:
    """
    Умножение с контролем 64-битного диапазона.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        a * b

    Raises:
        OverflowException: Если произведение не помещается в 64 бита
    """
    return _check_long(a * b, f"{a} * {b}")


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def resolve_rounding(
    mode: RoundingMode,
    offset: int,
    span: int,
    floor_is_even: bool = True,
    negative: bool = False,
) -> bool:
    """
    Выбор границы для значения между floor и ceiling.

    Значение лежит на расстоянии offset от нижней границы; расстояние между
    границами равно span. Функция отвечает, нужно ли брать верхнюю границу.

    Args:
        mode: Режим округления
        offset: Расстояние от нижней границы (0 <= offset < span)
        span: Расстояние между границами (> 0)
        floor_is_even: Чётна ли нижняя граница (для HALF_EVEN)
        negative: Значение отрицательно (UP/DOWN считаются от нуля)

    Returns:
        True если выбрана верхняя граница, False если нижняя

    Raises:
        RoundingNecessaryError: Если mode == UNNECESSARY и offset != 0
        ValueError: Если span <= 0 или offset вне [0, span)
    """
    require_not_none(mode, "mode")
    if span <= 0:
        raise ValueError(f"span must be positive, got {span}")
    if offset < 0 or offset >= span:
        raise ValueError(f"offset must be in [0, {span}), got {offset}")

    if offset == 0:
        return False

    # Для отрицательных значений нижняя граница дальше от нуля
    if mode == RoundingMode.UP:
        return not negative
    if mode == RoundingMode.DOWN:
        return negative
    if mode == RoundingMode.CEILING:
        return True
    if mode == RoundingMode.FLOOR:
        return False

    twice = 2 * offset
    if mode == RoundingMode.HALF_UP:
        return twice > span or (twice == span and not negative)
    if mode == RoundingMode.HALF_DOWN:
        return twice > span or (twice == span and negative)
    if mode == RoundingMode.HALF_EVEN:
        return twice > span or (twice == span and not floor_is_even)

    raise RoundingNecessaryError(f"rounding necessary: {offset}/{span} is not exact")


def carries_half(mode: RoundingMode, value: int, half: int, next_is_odd: bool) -> bool:
    """
    Перенос в следующий разряд при поразрядном округлении.

    Разряд со значением value сравнивается с серединой half своего
    диапазона. Для HALF_EVEN ничья решается чётностью следующего разряда.

    Args:
        mode: HALF_UP, HALF_DOWN или HALF_EVEN
        value: Значение текущего разряда
        half: Середина диапазона разряда
        next_is_odd: Нечётен ли следующий (более крупный) разряд

    Returns:
        True если следующий разряд нужно увеличить на 1

    Raises:
        ValueError: Если mode не из семейства HALF_*
    """
    require_not_none(mode, "mode")
    if mode == RoundingMode.HALF_UP:
        return value >= half
    if mode == RoundingMode.HALF_DOWN:
        return value > half
    if mode == RoundingMode.HALF_EVEN:
        return value > half or (value == half and next_is_odd)
    raise ValueError(f"carries_half expects a HALF_* mode, got {mode.name}")


def divide_rounded(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Целочисленное деление с явным режимом округления.

    Args:
        numerator: Делимое
        denominator: Делитель (!= 0)
        mode: Режим округления частного

    Returns:
        Частное, округлённое согласно mode

    Raises:
        ZeroDivisionError: Если denominator == 0
        RoundingNecessaryError: Если mode == UNNECESSARY и деление неточное

    Examples:
        >>> divide_rounded(7, 2, RoundingMode.DOWN)
        3
        >>> divide_rounded(-7, 2, RoundingMode.DOWN)
        -3
        >>> divide_rounded(-7, 2, RoundingMode.FLOOR)
        -4
        >>> divide_rounded(5, 2, RoundingMode.HALF_EVEN)
        2
    """
    if denominator == 0:
        raise ZeroDivisionError("division by zero")

    # Приводим к положительному делителю, floor-деление Python
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    quotient, remainder = divmod(numerator, denominator)
    negative = numerator < 0
    if resolve_rounding(
        mode,
        remainder,
        denominator,
        floor_is_even=quotient % 2 == 0,
        negative=negative,
    ):
        quotient += 1
    return quotient


# =============================================================================
# СРАВНЕНИЯ И ДИАПАЗОНЫ
# =============================================================================


def min_of(*values: Any) -> Any:
    """
    Минимальное из значений; None для пустого ввода.
    """
    if not values:
        return None
    return min(values)


def max_of(*values: Any) -> Any:
    """
    Максимальное из значений; None для пустого ввода.
    """
    if not values:
        return None
    return max(values)


def gt(arg: T, value: Any, name: str) -> T:
    """
    Проверка arg > value.

    Args:
        arg: Проверяемый аргумент
        value: Граница
        name: Имя аргумента для сообщения

    Returns:
        arg без изменений

    Raises:
        ValueError: Если arg <= value
    """
    require_not_none(arg, name)
    if not arg > value:
        raise ValueError(f"{name}({arg}) not greater than {value}")
    return arg


def gte(arg: T, value: Any, name: str) -> T:
    """Проверка arg >= value."""
    require_not_none(arg, name)
    if not arg >= value:
        raise ValueError(f"{name}({arg}) not greater than or equal to {value}")
    return arg


def lt(arg: T, value: Any, name: str) -> T:
    """Проверка arg < value."""
    require_not_none(arg, name)
    if not arg < value:
        raise ValueError(f"{name}({arg}) not less than {value}")
    return arg


def lte(arg: T, value: Any, name: str) -> T:
    """Проверка arg <= value."""
    require_not_none(arg, name)
    if not arg <= value:
        raise ValueError(f"{name}({arg}) not less than or equal to {value}")
    return arg


def between(arg: T, lower: Any, upper: Any, name: str) -> T:
    """
    Проверка lower < arg < upper (обе границы исключены).

    Raises:
        ValueError: Если arg не лежит строго между границами
    """
    require_not_none(arg, name)
    if not lower < arg < upper:
        raise ValueError(f"{name}({arg}) not between {lower} and {upper}")
    return arg


def within(arg: T, lower: Any, upper: Any, name: str) -> T:
    """
    Проверка lower <= arg <= upper (обе границы включены).

    Raises:
        ValueError: Если arg вне [lower, upper]
    """
    require_not_none(arg, name)
    if not lower <= arg <= upper:
        raise ValueError(f"{name}({arg}) not within {lower} and {upper}")
    return arg


def contains(arg: T, lower: Any, upper: Any, name: str) -> T:
    """
    Проверка lower <= arg < upper (полуоткрытый интервал).

    Raises:
        ValueError: Если arg вне [lower, upper)
    """
    require_not_none(arg, name)
    if not lower <= arg < upper:
        raise ValueError(f"{name}({arg}) not contained by {lower} and {upper}")
    return arg
