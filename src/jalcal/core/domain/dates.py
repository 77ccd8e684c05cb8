"""
Calendar Dates — immutable модели дат и времени суток

Pydantic модели-значения:
- PersianDate / GregorianDate: тройка (year, month, day) конкретного календаря
- TimeOfDay: (hour, minute, second), ортогонально календарю

Экземпляры разных календарей не взаимозаменяемы без преобразования
через fixed day.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= month <= 12
2. 1 <= day <= длина месяца в данном календаре и году
3. frozen=True: любое изменение создаёт новый экземпляр
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from jalcal.core.math.fixed_day import DateTriple, FixedDay
from jalcal.core.math.gregorian import (
    gregorian_from_fixed,
    gregorian_month_length,
    gregorian_to_fixed,
    is_gregorian_leap_year,
)
from jalcal.core.math.persian import (
    is_persian_leap_year,
    persian_from_fixed,
    persian_month_length,
    persian_to_fixed,
)


# =============================================================================
# BASE MODEL
# =============================================================================


class CalendarDate(BaseModel):
    """
    Общая часть моделей дат.

    Подклассы определяют календарь: длину месяца, високосность и
    преобразование в fixed day.
    """

    year: int = Field(..., description="Год календаря")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CalendarDate":
        """Проверка дня против длины месяца в данном году."""
        length = self.month_length()
        if self.day > length:
            raise ValueError(
                f"day {self.day} exceeds length {length} of month {self.month} "
                f"in {self.calendar} year {self.year}"
            )
        return self

    def month_length(self) -> int:
        raise NotImplementedError

    def is_leap_year(self) -> bool:
        raise NotImplementedError

    def to_fixed(self) -> FixedDay:
        raise NotImplementedError

    def to_triple(self) -> DateTriple:
        return DateTriple(self.year, self.month, self.day)

    def add_days(self, days: int) -> "CalendarDate":
        """Дата через days дней (отрицательное значение — назад)."""
        return type(self).from_fixed(self.to_fixed() + days)

    @classmethod
    def from_fixed(cls, fixed_day: FixedDay) -> "CalendarDate":
        raise NotImplementedError

    def format(self, day_at_first: bool = False, separator: str = "/") -> str:
        """YYYY/MM/DD или DD/MM/YYYY с ведущими нулями."""
        return self.to_triple().format(day_at_first=day_at_first, separator=separator)

    def to_payload(self) -> dict:
        """JSON-совместимое представление (поля даты контракта calendar_moment)."""
        return self.model_dump(mode="json")


# =============================================================================
# PERSIAN DATE
# =============================================================================


class PersianDate(CalendarDate):
    """
    Дата персидского (Jalali) календаря.

    Examples:
        >>> PersianDate(year=1393, month=5, day=14).to_gregorian().to_triple()
        DateTriple(year=2014, month=8, day=5)
    """

    calendar: Literal["persian"] = "persian"

    def month_length(self) -> int:
        return persian_month_length(self.year, self.month)

    def is_leap_year(self) -> bool:
        return is_persian_leap_year(self.year)

    def to_fixed(self) -> FixedDay:
        return persian_to_fixed(self.year, self.month, self.day)

    @classmethod
    def from_fixed(cls, fixed_day: FixedDay) -> "PersianDate":
        year, month, day = persian_from_fixed(fixed_day)
        return cls(year=year, month=month, day=day)

    def to_gregorian(self) -> "GregorianDate":
        return GregorianDate.from_fixed(self.to_fixed())


# =============================================================================
# GREGORIAN DATE
# =============================================================================


class GregorianDate(CalendarDate):
    """Дата пролептического григорианского календаря."""

    calendar: Literal["gregorian"] = "gregorian"

    def month_length(self) -> int:
        return gregorian_month_length(self.year, self.month)

    def is_leap_year(self) -> bool:
        return is_gregorian_leap_year(self.year)

    def to_fixed(self) -> FixedDay:
        return gregorian_to_fixed(self.year, self.month, self.day)

    @classmethod
    def from_fixed(cls, fixed_day: FixedDay) -> "GregorianDate":
        year, month, day = gregorian_from_fixed(fixed_day)
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, value: datetime.date) -> "GregorianDate":
        """
        Из datetime.date или datetime.datetime (время отбрасывается).

        Raises:
            TypeError: Если value не является datetime.date
        """
        if not isinstance(value, datetime.date):
            raise TypeError(f"Expected datetime.date, got {type(value).__name__}")
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> datetime.date:
        """
        Raises:
            ValueError: Если год вне диапазона datetime (1..9999)
        """
        return datetime.date(self.year, self.month, self.day)

    def to_persian(self) -> PersianDate:
        return PersianDate.from_fixed(self.to_fixed())


# =============================================================================
# TIME OF DAY
# =============================================================================


class TimeOfDay(BaseModel):
    """
    Время суток, переносится через преобразование без изменений.

    Календарная арифметика время не затрагивает.
    """

    hour: int = Field(0, ge=0, le=23, description="Час 0..23")
    minute: int = Field(0, ge=0, le=59, description="Минута 0..59")
    second: int = Field(0, ge=0, le=59, description="Секунда 0..59")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_time(cls, value: datetime.time | datetime.datetime) -> "TimeOfDay":
        """Из datetime.time или datetime.datetime (микросекунды отбрасываются)."""
        return cls(hour=value.hour, minute=value.minute, second=value.second)

    def to_time(self) -> datetime.time:
        return datetime.time(self.hour, self.minute, self.second)

    def format(self, separator: str = ":") -> str:
        """HH:MM:SS с ведущими нулями."""
        return f"{self.hour:02d}{separator}{self.minute:02d}{separator}{self.second:02d}"

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")
