"""
Calendar bridge: Persian ↔ Gregorian conversion, parsing and formatting.
"""

from jalcal.bridge.calendar_bridge import (
    CalendarBridge,
    ConversionOutcome,
    gregorian_to_jalali,
    gregorian_to_jalali_date,
    gregorian_to_jalali_time,
    gregorian_to_persian,
    jalali_to_gregorian,
    parse_jalali_datetime_to_gregorian,
    parse_jalali_to_gregorian,
)
from jalcal.bridge.compact import (
    from_jalali_compact,
    from_jalali_compact_1300,
    to_compact_time,
    to_digital_time,
    to_jalali_compact_date,
    to_jalali_slash_date,
)

__all__ = [
    # Classes
    "CalendarBridge",
    "ConversionOutcome",
    # Conversion
    "jalali_to_gregorian",
    "parse_jalali_to_gregorian",
    "parse_jalali_datetime_to_gregorian",
    "gregorian_to_persian",
    # Formatting
    "gregorian_to_jalali",
    "gregorian_to_jalali_date",
    "gregorian_to_jalali_time",
    # Compact formats
    "from_jalali_compact",
    "from_jalali_compact_1300",
    "to_compact_time",
    "to_digital_time",
    "to_jalali_compact_date",
    "to_jalali_slash_date",
]
