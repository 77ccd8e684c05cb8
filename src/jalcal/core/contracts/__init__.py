"""
Contract Validation Module

JSON контракт calendar_moment: дата календаря и необязательное время.
"""

from .validators import (
    CALENDAR_MOMENT,
    CalendarMomentValidator,
    iter_moment_errors,
    load_contract,
    moment_validator,
    validate_moment,
)

__all__ = [
    # Contract
    "CALENDAR_MOMENT",
    "CalendarMomentValidator",
    "load_contract",
    "moment_validator",
    # Functions
    "validate_moment",
    "iter_moment_errors",
]
