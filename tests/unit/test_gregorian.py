"""
Тесты для GregorianConverter

Эталон: datetime.date.toordinal() использует ту же ось
(ordinal 1 == 0001-01-01), поэтому fixed day обязан совпадать с ordinal.

Проверяемые инварианты:
1. gregorian_to_fixed совпадает с date.toordinal()
2. gregorian_from_fixed совпадает с date.fromordinal()
3. Правило високосных лет (4 / 100 / 400)
4. Границы 400/100/4-летних блоков при восстановлении года
"""

import datetime

import pytest

from jalcal.core.math.gregorian import (
    GREGORIAN_EPOCH,
    gregorian_from_fixed,
    gregorian_month_length,
    gregorian_new_year,
    gregorian_to_fixed,
    gregorian_year_from_fixed,
    is_gregorian_leap_year,
)


# =============================================================================
# ТЕСТЫ: Leap years
# =============================================================================


class TestGregorianLeapYear:
    """Тесты is_gregorian_leap_year"""

    @pytest.mark.parametrize("year", [4, 1600, 1996, 2000, 2004, 2024, 2400])
    def test_leap(self, year: int) -> None:
        assert is_gregorian_leap_year(year) is True

    @pytest.mark.parametrize("year", [1, 100, 1700, 1800, 1900, 2014, 2100, 2200, 2300])
    def test_not_leap(self, year: int) -> None:
        assert is_gregorian_leap_year(year) is False

    def test_matches_standard_rule(self) -> None:
        """Эквивалентность стандартному правилу на 1..3000"""
        for year in range(1, 3001):
            standard = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
            assert is_gregorian_leap_year(year) == standard, year

    def test_month_length(self) -> None:
        assert gregorian_month_length(2024, 2) == 29
        assert gregorian_month_length(2023, 2) == 28
        assert gregorian_month_length(1900, 2) == 28
        assert gregorian_month_length(2014, 8) == 31
        assert gregorian_month_length(2014, 9) == 30

    def test_month_length_invalid_month(self) -> None:
        with pytest.raises(ValueError, match="1..12"):
            gregorian_month_length(2014, 13)


# =============================================================================
# ТЕСТЫ: Fixed day
# =============================================================================


class TestGregorianToFixed:
    """Тесты gregorian_to_fixed"""

    def test_epoch(self) -> None:
        assert gregorian_to_fixed(1, 1, 1) == GREGORIAN_EPOCH == 1

    def test_reference_date(self) -> None:
        assert gregorian_to_fixed(2014, 8, 5) == 735450

    def test_new_year(self) -> None:
        assert gregorian_new_year(2015) == datetime.date(2015, 1, 1).toordinal()

    @pytest.mark.parametrize(
        "date",
        [
            datetime.date(1, 12, 31),
            datetime.date(1000, 2, 28),
            datetime.date(1600, 2, 29),
            datetime.date(1900, 3, 1),
            datetime.date(2000, 2, 29),
            datetime.date(2000, 12, 31),
            datetime.date(2014, 8, 5),
            datetime.date(2100, 3, 1),
            datetime.date(9999, 12, 31),
        ],
    )
    def test_matches_ordinal(self, date: datetime.date) -> None:
        assert gregorian_to_fixed(date.year, date.month, date.day) == date.toordinal()

    def test_lenient_day_overflow(self) -> None:
        """День за пределами месяца даёт смещённый fixed day"""
        assert gregorian_to_fixed(2014, 2, 29) == gregorian_to_fixed(2014, 3, 1)


class TestGregorianFromFixed:
    """Тесты gregorian_from_fixed / gregorian_year_from_fixed"""

    def test_reference_date(self) -> None:
        assert gregorian_from_fixed(735450) == (2014, 8, 5)

    @pytest.mark.parametrize(
        "date",
        [
            datetime.date(1, 1, 1),
            datetime.date(400, 12, 31),
            datetime.date(401, 1, 1),
            datetime.date(1900, 2, 28),
            datetime.date(1900, 3, 1),
            datetime.date(2000, 2, 29),
            datetime.date(2000, 12, 31),
            datetime.date(2001, 1, 1),
            datetime.date(2024, 12, 31),
        ],
    )
    def test_block_boundaries(self, date: datetime.date) -> None:
        """Последние дни 400/100/4-летних блоков"""
        fixed = date.toordinal()
        assert gregorian_year_from_fixed(fixed) == date.year
        assert gregorian_from_fixed(fixed) == (date.year, date.month, date.day)

    def test_matches_ordinal_sweep(self) -> None:
        """Каждый 97-й день на 1..3000 годах совпадает с date.fromordinal"""
        last = datetime.date(3000, 12, 31).toordinal()
        for fixed in range(1, last, 97):
            expected = datetime.date.fromordinal(fixed)
            assert gregorian_from_fixed(fixed) == (expected.year, expected.month, expected.day)

    def test_daily_sweep_leap_century(self) -> None:
        """Ежедневно на 1899..1901 и 1999..2001"""
        for start, end in ((1899, 1901), (1999, 2001)):
            first = datetime.date(start, 1, 1).toordinal()
            last = datetime.date(end, 12, 31).toordinal()
            for fixed in range(first, last + 1):
                expected = datetime.date.fromordinal(fixed)
                assert gregorian_from_fixed(fixed) == (expected.year, expected.month, expected.day)

    def test_returns_named_triple(self) -> None:
        result = gregorian_from_fixed(735450)
        assert result.year == 2014
        assert result.month == 8
        assert result.day == 5
