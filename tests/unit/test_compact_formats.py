"""
Тесты компактных форматов (yymmdd, yyyymmdd, hhmmss)
"""

import datetime
from typing import Final

import pytest

from jalcal.bridge import calendar_bridge, compact
from jalcal.bridge import (
    CalendarBridge,
    from_jalali_compact,
    from_jalali_compact_1300,
    to_compact_time,
    to_digital_time,
    to_jalali_compact_date,
    to_jalali_slash_date,
)
from jalcal.core.config import STRICT_CONFIG
from jalcal.core.errors import ConversionError, ConversionReason


class TestFormatting:
    """Gregorian → компактные персидские строки"""

    def test_compact_date(self) -> None:
        assert to_jalali_compact_date(datetime.date(2014, 8, 26)) == "930604"

    def test_compact_date_new_century(self) -> None:
        assert to_jalali_compact_date(datetime.date(2021, 3, 21)) == "000101"

    def test_slash_date(self) -> None:
        assert to_jalali_slash_date(datetime.date(2014, 8, 26)) == "1393/06/04"

    def test_times(self) -> None:
        moment = datetime.datetime(2014, 8, 26, 15, 48, 40)
        assert to_compact_time(moment) == "154840"
        assert to_digital_time(moment) == "15:48:40"
        assert to_compact_time(datetime.time(1, 2, 3)) == "010203"


class TestParsing:
    """Компактные персидские строки → Gregorian datetime"""

    def test_eight_digit_date(self) -> None:
        result = from_jalali_compact("13930604", "154840")
        assert result == datetime.datetime(2014, 8, 26, 15, 48, 40)

    def test_six_digit_date_1300(self) -> None:
        result = from_jalali_compact_1300("930604", "154840")
        assert result == datetime.datetime(2014, 8, 26, 15, 48, 40)

    def test_surrounding_characters_allowed(self) -> None:
        result = from_jalali_compact("D13930604", "T154840Z")
        assert result == datetime.datetime(2014, 8, 26, 15, 48, 40)

    @pytest.mark.parametrize("date, time", [("1393064", "154840"), ("13930604", "1548"), ("abc", "xyz")])
    def test_format_invalid(self, date: str, time: str) -> None:
        with pytest.raises(ConversionError) as exc_info:
            from_jalali_compact(date, time)
        assert exc_info.value.reason is ConversionReason.FORMAT

    def test_bounds_still_apply(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            from_jalali_compact("13931304", "000000")
        assert exc_info.value.reason is ConversionReason.BOUNDS

    def test_custom_bridge(self) -> None:
        with pytest.raises(ConversionError):
            from_jalali_compact_1300("931230", "000000", bridge=CalendarBridge(STRICT_CONFIG))


class TestModuleDefaults:
    """Общие значения по умолчанию модуля"""

    def test_shares_default_bridge(self) -> None:
        assert compact._DEFAULT_BRIDGE is calendar_bridge._DEFAULT_BRIDGE

    def test_century_constant(self) -> None:
        assert compact.CENTURY_1300 == 1300
        assert compact.__annotations__["CENTURY_1300"] == Final[int]
