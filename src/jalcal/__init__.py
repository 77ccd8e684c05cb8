"""
jalcal — Persian (Jalali) ↔ Gregorian calendar conversion.

Обе календарные системы преобразуются через общую ось fixed day
(fixed day 1 = 0001-01-01 пролептического григорианского календаря).
"""

import logging

from jalcal.bridge import (
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
from jalcal.core.config import DEFAULT_CONFIG, STRICT_CONFIG, BridgeConfig
from jalcal.core.domain import DateTriple, FixedDay, GregorianDate, PersianDate, TimeOfDay
from jalcal.core.errors import ConversionError, ConversionReason
from jalcal.core.math import (
    NON_LEAP_CORRECTION,
    gregorian_from_fixed,
    gregorian_to_fixed,
    is_gregorian_leap_year,
    is_persian_leap_year,
    persian_from_fixed,
    persian_to_fixed,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Fixed day engine
    "FixedDay",
    "DateTriple",
    "NON_LEAP_CORRECTION",
    "persian_to_fixed",
    "persian_from_fixed",
    "gregorian_to_fixed",
    "gregorian_from_fixed",
    "is_persian_leap_year",
    "is_gregorian_leap_year",
    # Models
    "PersianDate",
    "GregorianDate",
    "TimeOfDay",
    # Config & errors
    "BridgeConfig",
    "DEFAULT_CONFIG",
    "STRICT_CONFIG",
    "ConversionError",
    "ConversionReason",
    # Bridge
    "CalendarBridge",
    "ConversionOutcome",
    "jalali_to_gregorian",
    "parse_jalali_to_gregorian",
    "parse_jalali_datetime_to_gregorian",
    "gregorian_to_persian",
    "gregorian_to_jalali",
    "gregorian_to_jalali_date",
    "gregorian_to_jalali_time",
]
