"""
GregorianConverter — пролептический григорианский календарь ↔ fixed day

Fixed day 1 = 0001-01-01 (пролептический григорианский календарь).
Алгоритмы замкнутой формы, O(1), без итерации по годам или месяцам.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gregorian_from_fixed(gregorian_to_fixed(y, m, d)) == (y, m, d) для валидных дат
2. Следующий календарный день → fixed day + 1 (строгая монотонность)
3. Нерегулярность длины месяца изолирована в январе/феврале: все формулы
   нормализуются относительно 1 марта

ФОРМУЛЫ:
    fixed = 365*(y-1) + floor((y-1)/4) - floor((y-1)/100) + floor((y-1)/400)
            + floor((367*m - 362)/12) + correction(m, y) + d
    correction = 0 (m <= 2), -1 (високосный), -2 (иначе)
"""

from typing import Final

from jalcal.core.math.fixed_day import DateTriple, FixedDay
from jalcal.core.math.arithmetic import floor_div, floor_mod, validate_int

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Fixed day начала григорианского календаря (0001-01-01)
GREGORIAN_EPOCH: Final[int] = 1

# Длины циклов в днях
DAYS_IN_400_YEARS: Final[int] = 146097
DAYS_IN_100_YEARS: Final[int] = 36524
DAYS_IN_4_YEARS: Final[int] = 1461
DAYS_IN_YEAR: Final[int] = 365

_MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ
# =============================================================================


def is_gregorian_leap_year(year: int) -> bool:
    """
    Високосный ли год в григорианском календаре.

    year mod 4 == 0 и year mod 400 не в {100, 200, 300}: эквивалент
    стандартного правила без второго деления на 100.

    Examples:
        >>> is_gregorian_leap_year(2000)
        True
        >>> is_gregorian_leap_year(1900)
        False
    """
    validate_int(year, "year")
    return floor_mod(year, 4) == 0 and floor_mod(year, 400) not in (100, 200, 300)


def gregorian_month_length(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    Raises:
        ValueError: Если month вне 1..12
    """
    validate_int(year, "year")
    validate_int(month, "month")
    if not 1 <= month <= 12:
        raise ValueError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


# =============================================================================
# ПРЯМОЕ ПРЕОБРАЗОВАНИЕ
# =============================================================================


def gregorian_to_fixed(year: int, month: int, day: int) -> FixedDay:
    """
    Григорианская дата → fixed day.

    Поля не проверяются на диапазон: вызывающий код отвечает за
    валидацию (см. CalendarBridge). Выход за пределы месяца даёт
    смещённый, но детерминированный fixed day.

    Args:
        year: Год (пролептический, может быть <= 0)
        month: Месяц 1..12
        day: День месяца

    Returns:
        Fixed day number

    Examples:
        >>> gregorian_to_fixed(1, 1, 1)
        1
        >>> gregorian_to_fixed(2014, 8, 5)
        735450
    """
    validate_int(year, "year")
    validate_int(month, "month")
    validate_int(day, "day")

    prior_years = year - 1
    if month <= 2:
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = -1
    else:
        correction = -2

    return (
        GREGORIAN_EPOCH - 1
        + DAYS_IN_YEAR * prior_years
        + floor_div(prior_years, 4)
        - floor_div(prior_years, 100)
        + floor_div(prior_years, 400)
        + floor_div(367 * month - 362, 12)
        + correction
        + day
    )


def gregorian_new_year(year: int) -> FixedDay:
    """Fixed day 1 января указанного года."""
    return gregorian_to_fixed(year, 1, 1)


# =============================================================================
# ОБРАТНОЕ ПРЕОБРАЗОВАНИЕ
# =============================================================================


def gregorian_year_from_fixed(fixed_day: FixedDay) -> int:
    """
    Григорианский год, содержащий fixed day.

    Смещение от эпохи раскладывается на блоки 400/100/4/1 лет.
    Последний день 100-летнего или 4-летнего блока (n100 == 4 или n1 == 4)
    принадлежит предыдущему году.

    Args:
        fixed_day: Fixed day number

    Returns:
        Год
    """
    validate_int(fixed_day, "fixed_day")

    d0 = fixed_day - GREGORIAN_EPOCH
    n400, d1 = divmod(d0, DAYS_IN_400_YEARS)
    n100, d2 = divmod(d1, DAYS_IN_100_YEARS)
    n4, d3 = divmod(d2, DAYS_IN_4_YEARS)
    n1 = floor_div(d3, DAYS_IN_YEAR)

    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n100 == 4 or n1 == 4:
        return year
    return year + 1


def gregorian_from_fixed(fixed_day: FixedDay) -> DateTriple:
    """
    Fixed day → григорианская дата (year, month, day).

    Месяц восстанавливается полиномиальной обратной формулой после
    коррекции на положение даты относительно 1 марта.

    Examples:
        >>> gregorian_from_fixed(735450)
        DateTriple(year=2014, month=8, day=5)
    """
    year = gregorian_year_from_fixed(fixed_day)
    prior_days = fixed_day - gregorian_new_year(year)

    if fixed_day < gregorian_to_fixed(year, 3, 1):
        correction = 0
    elif is_gregorian_leap_year(year):
        correction = 1
    else:
        correction = 2

    month = floor_div(12 * (prior_days + correction) + 373, 367)
    day = fixed_day - gregorian_to_fixed(year, month, 1) + 1
    return DateTriple(year, month, day)
