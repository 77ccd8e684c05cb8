"""
Integer Arithmetic — примитивы для календарной арифметики

Все календарные формулы работают на целых числах (fixed day number).
Модуль фиксирует семантику деления: floor-деление и floor-остаток,
чтобы отрицательные смещения от эпохи давали корректный результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor_div(a, b) * b + floor_mod(a, b) == a для любых целых a, b != 0
2. floor_mod(a, b) имеет знак делителя b
3. ceil_div(a, b) == -floor_div(-a, b)
4. Никаких float: результат всегда точный int
"""

from typing import Any


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ
# =============================================================================


def floor_div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением вниз (к -inf).

    Args:
        a: Делимое
        b: Делитель (не ноль)

    Returns:
        floor(a / b)

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> floor_div(7, 2)
        3
        >>> floor_div(-7, 2)
        -4
    """
    return a // b


def floor_mod(a: int, b: int) -> int:
    """
    Остаток от деления, согласованный с floor_div.

    Examples:
        >>> floor_mod(7, 3)
        1
        >>> floor_mod(-7, 3)
        2
    """
    return a % b


def ceil_div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением вверх (к +inf).

    Используется для восстановления месяца из порядкового дня года.

    Examples:
        >>> ceil_div(31, 31)
        1
        >>> ceil_div(32, 31)
        2
        >>> ceil_div(-7, 2)
        -3
    """
    return -((-a) // b)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: Any, name: str) -> int:
    """
    Проверка, что значение является целым числом.

    bool формально является подклассом int, но в качестве года/месяца/дня
    это всегда ошибка вызывающего кода.

    Args:
        value: Проверяемое значение
        name: Имя поля для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    return value
