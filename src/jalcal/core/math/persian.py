"""
PersianConverter — персидский (Jalali / Solar Hijri) календарь ↔ fixed day

Арифметическое приближение 33-летнего цикла високосных лет, исправленное
фиксированной таблицей исключений (NON_LEAP_CORRECTION). Таблица получена
из астрономического расчёта и не выводится формулой: её нужно
воспроизводить точно.

Структура года:
- месяцы 1..6 по 31 дню (186 дней)
- месяцы 7..11 по 30 дней
- месяц 12 (Esfand) — 29 дней, в високосный год 30

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_persian_leap_year и persian_new_year используют одну и ту же таблицу:
   длина года y == persian_new_year(y + 1) - persian_new_year(y) == 365 + leap(y)
2. persian_from_fixed(persian_to_fixed(y, m, d)) == (y, m, d) для валидных дат
3. Обратное преобразование O(1): оценка года + одна коррекция, без итерации

ФОРМУЛЫ:
    new_year(y) = EPOCH - 1 + 365*(y-1) + floor((8*y + 21)/33)  [- 1 если y-1 в таблице]
    leap(y)     = (25*y + 11) mod 33 < 8                        [с поправками таблицы]
    offset(m)   = 31*(m-1) если m <= 7, иначе 30*(m-1) + 6
"""

from typing import Final

from jalcal.core.math.arithmetic import ceil_div, floor_div, floor_mod, validate_int
from jalcal.core.math.fixed_day import DateTriple, FixedDay

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Эпоха персидского календаря (Calendrical Calculations, precalculated).
# persian_new_year(1) == PERSIAN_EPOCH - 1
PERSIAN_EPOCH: Final[int] = 226896

# Первые 6 месяцев по 31 дню
DAYS_IN_FIRST_HALF: Final[int] = 186

# Средняя длина года в 33-летнем цикле: 12053 дня на 33 года
CYCLE_YEARS: Final[int] = 33
CYCLE_DAYS: Final[int] = 12053

# Годы, в которых арифметическое правило ошибочно даёт високосный год.
# Високосный день переносится на следующий год.
NON_LEAP_CORRECTION: Final[frozenset[int]] = frozenset(
    {
        1502,
        1601, 1634, 1667,
        1700, 1733, 1766, 1799,
        1832, 1865, 1898,
        1931, 1964, 1997,
        2030, 2059, 2063, 2096,
        2129, 2158, 2162, 2191, 2195,
        2224, 2228, 2257, 2261, 2290, 2294,
        2323, 2327, 2356, 2360, 2389, 2393,
        2422, 2426, 2455, 2459, 2488, 2492,
        2521, 2525, 2554, 2558, 2587, 2591,
        2620, 2624, 2653, 2657, 2686, 2690,
        2719, 2723, 2748, 2752, 2756, 2781, 2785, 2789,
        2818, 2822, 2847, 2851, 2855, 2880, 2884, 2888,
        2913, 2917, 2921, 2946, 2950, 2954, 2979, 2983, 2987,
    }
)


# =============================================================================
# PERSIAN LEAP YEAR ORACLE
# =============================================================================


def is_persian_leap_year(year: int) -> bool:
    """
    Високосный ли год в персидском календаре.

    Порядок проверок:
    1. year в таблице исключений → не високосный
    2. year - 1 в таблице исключений → високосный (перенесённый день)
    3. Иначе арифметическое правило: (25*year + 11) mod 33 < 8

    Args:
        year: Персидский год

    Returns:
        True если в году 366 дней

    Examples:
        >>> is_persian_leap_year(1395)
        True
        >>> is_persian_leap_year(1502)
        False
        >>> is_persian_leap_year(1503)
        True
    """
    validate_int(year, "year")
    if year in NON_LEAP_CORRECTION:
        return False
    if year - 1 in NON_LEAP_CORRECTION:
        return True
    return floor_mod(25 * year + 11, CYCLE_YEARS) < 8


def persian_month_length(year: int, month: int) -> int:
    """
    Количество дней в персидском месяце.

    Raises:
        ValueError: Если month вне 1..12
    """
    validate_int(year, "year")
    validate_int(month, "month")
    if not 1 <= month <= 12:
        raise ValueError(f"Persian month must be in 1..12, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_persian_leap_year(year) else 29


# =============================================================================
# ПРЯМОЕ ПРЕОБРАЗОВАНИЕ
# =============================================================================


def persian_new_year(year: int) -> FixedDay:
    """
    Fixed day 1 Farvardin указанного года.

    Поправка на таблицу исключений зеркалирует правило 2 оракула:
    если предыдущий год лишился високосного дня, новый год наступает
    на день раньше.
    """
    validate_int(year, "year")
    new_year = (
        PERSIAN_EPOCH - 1
        + 365 * (year - 1)
        + floor_div(8 * year + 21, CYCLE_YEARS)
    )
    if year - 1 in NON_LEAP_CORRECTION:
        new_year -= 1
    return new_year


def _day_of_year_offset(month: int) -> int:
    # дней в году до первого числа месяца
    if month <= 7:
        return 31 * (month - 1)
    return 30 * (month - 1) + 6


def persian_to_fixed(year: int, month: int, day: int) -> FixedDay:
    """
    Персидская дата → fixed day.

    Поля не проверяются на диапазон (lenient): день за пределами месяца
    даёт смещённый fixed day. Строгая проверка — в моделях и в
    CalendarBridge со strict=True.

    Args:
        year: Персидский год
        month: Месяц 1..12
        day: День месяца

    Returns:
        Fixed day number

    Examples:
        >>> persian_to_fixed(1393, 5, 14)
        735450
    """
    validate_int(month, "month")
    validate_int(day, "day")
    return persian_new_year(year) - 1 + _day_of_year_offset(month) + day


# =============================================================================
# ОБРАТНОЕ ПРЕОБРАЗОВАНИЕ
# =============================================================================


def persian_year_from_fixed(fixed_day: FixedDay) -> tuple[int, int]:
    """
    Год и порядковый день года (1..366) для fixed day.

    Оценка года по соотношению 33/12053 может ошибиться на границе цикла:
    для года из таблицы исключений день 366 на самом деле является
    1 Farvardin следующего года.

    Returns:
        (year, day_of_year)
    """
    validate_int(fixed_day, "fixed_day")
    days_since_epoch = fixed_day - persian_new_year(1)
    year = 1 + floor_div(CYCLE_YEARS * days_since_epoch + 3, CYCLE_DAYS)
    day_of_year = fixed_day - persian_new_year(year) + 1

    if day_of_year == 366 and year in NON_LEAP_CORRECTION:
        year += 1
        day_of_year = 1

    return year, day_of_year


def persian_from_fixed(fixed_day: FixedDay) -> DateTriple:
    """
    Fixed day → персидская дата (year, month, day).

    Месяц через ceiling-деление: до 186-го дня (месяцы 1..6) по 31 дню,
    далее по 30 со смещением 6.

    Examples:
        >>> persian_from_fixed(735450)
        DateTriple(year=1393, month=5, day=14)
    """
    year, day_of_year = persian_year_from_fixed(fixed_day)

    if day_of_year <= DAYS_IN_FIRST_HALF:
        month = ceil_div(day_of_year, 31)
    else:
        month = ceil_div(day_of_year - 6, 30)

    day = fixed_day - persian_to_fixed(year, month, 1) + 1
    return DateTriple(year, month, day)
