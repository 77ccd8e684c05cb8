"""
Ошибки преобразования дат.

Единственный вид ошибки bridge-уровня — ConversionError. Частичных
результатов нет: неуспешное преобразование не возвращает дату.
"""

from enum import Enum
from typing import Optional


class ConversionReason(str, Enum):
    """Причина отказа в преобразовании"""

    BOUNDS = "bounds"  # year < min_year, month > 12, day > 31
    TOKENIZE = "tokenize"  # строка не разбирается на три целых через "/"
    TIME_OF_DAY = "time_of_day"  # hour/minute/second вне диапазона datetime
    OUT_OF_RANGE = "out_of_range"  # результат вне диапазона datetime (год 1..9999)
    FORMAT = "format"  # компактные форматы (yyyymmdd, hhmmss)


class ConversionError(ValueError):
    """
    Ошибка преобразования даты между календарями.

    Поднимается при нарушении границ входных полей или при невозможности
    разобрать строку даты. Наследует ValueError, чтобы вызывающий код,
    ловящий ValueError, продолжал работать.
    """

    def __init__(self, message: str, reason: Optional[ConversionReason] = None):
        super().__init__(message)
        self.reason = reason
