"""
Core math modules для jalcal

Целочисленная календарная арифметика: fixed day ↔ (year, month, day).
"""

# Integer arithmetic
from jalcal.core.math.arithmetic import (
    ceil_div,
    floor_div,
    floor_mod,
    validate_int,
)

# Fixed day axis
from jalcal.core.math.fixed_day import DateTriple, FixedDay

# Gregorian converter
from jalcal.core.math.gregorian import (
    GREGORIAN_EPOCH,
    gregorian_from_fixed,
    gregorian_month_length,
    gregorian_new_year,
    gregorian_to_fixed,
    gregorian_year_from_fixed,
    is_gregorian_leap_year,
)

# Persian converter
from jalcal.core.math.persian import (
    NON_LEAP_CORRECTION,
    PERSIAN_EPOCH,
    is_persian_leap_year,
    persian_from_fixed,
    persian_month_length,
    persian_new_year,
    persian_to_fixed,
    persian_year_from_fixed,
)

__all__ = [
    # Arithmetic
    "ceil_div",
    "floor_div",
    "floor_mod",
    "validate_int",
    # Fixed day
    "DateTriple",
    "FixedDay",
    # Gregorian: Constants
    "GREGORIAN_EPOCH",
    # Gregorian: Functions
    "gregorian_from_fixed",
    "gregorian_month_length",
    "gregorian_new_year",
    "gregorian_to_fixed",
    "gregorian_year_from_fixed",
    "is_gregorian_leap_year",
    # Persian: Constants
    "NON_LEAP_CORRECTION",
    "PERSIAN_EPOCH",
    # Persian: Functions
    "is_persian_leap_year",
    "persian_from_fixed",
    "persian_month_length",
    "persian_new_year",
    "persian_to_fixed",
    "persian_year_from_fixed",
]
