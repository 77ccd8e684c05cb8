"""
Компактные форматы персидских дат и времени.

Форматы полей без разделителей, используемые во внешних системах:
- yymmdd     — 930604 для 1393/06/04
- yyyymmdd   — 13930604
- hhmmss     — 154840 для 15:48:40

Разбор использует поиск шаблона (не полное совпадение): лишние символы
вокруг цифр допускаются.
"""

import datetime
import re
from typing import Final, Optional

from jalcal.bridge.calendar_bridge import _DEFAULT_BRIDGE, CalendarBridge
from jalcal.core.errors import ConversionError, ConversionReason

_SIX_DIGITS = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")
_EIGHT_DIGITS = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")

# Век для двузначных персидских годов в yymmdd
CENTURY_1300: Final[int] = 1300


def _bridge_or_default(bridge: Optional[CalendarBridge]) -> CalendarBridge:
    return bridge if bridge is not None else _DEFAULT_BRIDGE


# =============================================================================
# FORMATTING
# =============================================================================


def to_jalali_compact_date(value: datetime.date, bridge: Optional[CalendarBridge] = None) -> str:
    """
    Григорианская дата → персидская yymmdd.

    Examples:
        >>> to_jalali_compact_date(datetime.date(2014, 8, 26))
        '930604'
    """
    year, month, day = _bridge_or_default(bridge).gregorian_to_persian(value).to_triple()
    return f"{year % 100:02d}{month:02d}{day:02d}"


def to_jalali_slash_date(value: datetime.date, bridge: Optional[CalendarBridge] = None) -> str:
    """Григорианская дата → персидская yyyy/mm/dd."""
    return _bridge_or_default(bridge).gregorian_to_jalali_date(value, day_at_first=False)


def to_compact_time(value: datetime.datetime | datetime.time) -> str:
    """Время → hhmmss."""
    return f"{value.hour:02d}{value.minute:02d}{value.second:02d}"


def to_digital_time(value: datetime.datetime | datetime.time) -> str:
    """Время → hh:mm:ss."""
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


# =============================================================================
# PARSING
# =============================================================================


def _search(pattern: re.Pattern, text: str, what: str) -> tuple[int, int, int]:
    if not isinstance(text, str):
        raise TypeError(f"Expected str for {what}, got {type(text).__name__}")
    match = pattern.search(text)
    if match is None:
        raise ConversionError(f"{what} format invalid: {text!r}", reason=ConversionReason.FORMAT)
    first, second, third = match.groups()
    return int(first), int(second), int(third)


def from_jalali_compact(
    date: str, time: str, bridge: Optional[CalendarBridge] = None
) -> datetime.datetime:
    """
    Персидские yyyymmdd и hhmmss → григорианский datetime.

    Args:
        date: например "13930604"
        time: например "154840"

    Raises:
        ConversionError: Если формат неверен или дата вне границ
    """
    hour, minute, second = _search(_SIX_DIGITS, time, "time")
    year, month, day = _search(_EIGHT_DIGITS, date, "date")
    return _bridge_or_default(bridge).persian_to_gregorian(year, month, day, hour, minute, second)


def from_jalali_compact_1300(
    date: str, time: str, bridge: Optional[CalendarBridge] = None
) -> datetime.datetime:
    """
    Персидские yymmdd (13xx) и hhmmss → григорианский datetime.

    Args:
        date: например "930604" для 1393/06/04
        time: например "154840"
    """
    hour, minute, second = _search(_SIX_DIGITS, time, "time")
    short_year, month, day = _search(_SIX_DIGITS, date, "date")
    year = CENTURY_1300 + short_year
    return _bridge_or_default(bridge).persian_to_gregorian(year, month, day, hour, minute, second)
