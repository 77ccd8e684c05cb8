"""
Domain models and value objects.

Contains calendar value models: PersianDate, GregorianDate, TimeOfDay.
"""

from jalcal.core.domain.dates import (
    CalendarDate,
    GregorianDate,
    PersianDate,
    TimeOfDay,
)
from jalcal.core.math.fixed_day import DateTriple, FixedDay

__all__ = [
    "CalendarDate",
    "PersianDate",
    "GregorianDate",
    "TimeOfDay",
    "DateTriple",
    "FixedDay",
]
