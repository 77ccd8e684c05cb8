"""
Тесты межкалендарной композиции через fixed day

Проверяемые инварианты:
1. Оба конвертера дают один и тот же fixed day для одного реального дня
2. Эталонный случай: 1393/05/14 ↔ 2014-08-05
3. Монотонность: следующий календарный день → fixed day + 1 в обоих
   календарях, включая границы месяцев, лет и високосных лет
"""

import datetime

import pytest

from jalcal.core.math.gregorian import (
    gregorian_from_fixed,
    gregorian_month_length,
    gregorian_to_fixed,
)
from jalcal.core.math.persian import (
    persian_from_fixed,
    persian_month_length,
    persian_new_year,
    persian_to_fixed,
)


def _next_day(triple, month_length):
    year, month, day = triple
    if day < month_length(year, month):
        return (year, month, day + 1)
    if month < 12:
        return (year, month + 1, 1)
    return (year + 1, 1, 1)


# =============================================================================
# ТЕСТЫ: Composition
# =============================================================================


class TestComposition:
    """Persian → fixed → Gregorian и обратно"""

    def test_reference_case(self) -> None:
        assert gregorian_from_fixed(persian_to_fixed(1393, 5, 14)) == (2014, 8, 5)
        assert persian_from_fixed(gregorian_to_fixed(2014, 8, 5)) == (1393, 5, 14)

    @pytest.mark.parametrize(
        "persian, gregorian",
        [
            ((1393, 4, 14), (2014, 7, 5)),
            ((1393, 5, 5), (2014, 7, 27)),
            ((1393, 6, 4), (2014, 8, 26)),
            ((1394, 1, 1), (2015, 3, 21)),
            ((1395, 12, 30), (2017, 3, 20)),
            ((1399, 1, 1), (2020, 3, 20)),
            ((1400, 1, 1), (2021, 3, 21)),
            ((1403, 1, 1), (2024, 3, 20)),
            ((1403, 12, 30), (2025, 3, 20)),
            ((1404, 1, 1), (2025, 3, 21)),
        ],
    )
    def test_known_dates(self, persian, gregorian) -> None:
        fixed = persian_to_fixed(*persian)
        assert fixed == gregorian_to_fixed(*gregorian)
        assert fixed == datetime.date(*gregorian).toordinal()
        assert gregorian_from_fixed(fixed) == gregorian
        assert persian_from_fixed(fixed) == persian

    def test_nowruz_in_march(self) -> None:
        """1 Farvardin всегда в марте года year + 621 на 1000..3000"""
        for year in range(1000, 3001):
            g_year, g_month, g_day = gregorian_from_fixed(persian_new_year(year))
            assert g_year == year + 621
            assert g_month == 3
            assert 18 <= g_day <= 23, (year, g_day)


# =============================================================================
# ТЕСТЫ: Monotonicity
# =============================================================================


class TestMonotonicity:
    """Следующий календарный день ↔ fixed day + 1"""

    @pytest.mark.parametrize("start, end", [(1392, 1405), (1500, 1505), (2986, 2989)])
    def test_persian(self, start: int, end: int) -> None:
        current = (start, 1, 1)
        fixed = persian_to_fixed(*current)
        while current[0] <= end:
            following = _next_day(current, persian_month_length)
            assert persian_to_fixed(*following) == fixed + 1, following
            assert persian_from_fixed(fixed + 1) == following
            current, fixed = following, fixed + 1

    @pytest.mark.parametrize("start, end", [(1899, 1901), (1999, 2001), (2013, 2025)])
    def test_gregorian(self, start: int, end: int) -> None:
        current = (start, 1, 1)
        fixed = gregorian_to_fixed(*current)
        while current[0] <= end:
            following = _next_day(current, gregorian_month_length)
            assert gregorian_to_fixed(*following) == fixed + 1, following
            assert gregorian_from_fixed(fixed + 1) == following
            current, fixed = following, fixed + 1
