"""
Calendar Moment Contract

JSON представление даты (persian / gregorian) с необязательным временем
суток:

    {"calendar": "persian", "year": 1393, "month": 5, "day": 14,
     "time": {"hour": 10, "minute": 2, "second": 4}}

Схема: jalcal/core/contracts/schema/calendar_moment.json (Draft 2020-12).

Помимо стандартных ключевых слов схема использует собственное
ключевое слово monthLength: день проверяется против длины месяца
указанного календаря в указанном году (Esfand 30 только в високосный
персидский год, 29 февраля только в високосный григорианский).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, Final, Iterator

from jsonschema import Draft202012Validator, ValidationError, validators

from jalcal.core.math.gregorian import gregorian_month_length
from jalcal.core.math.persian import persian_month_length

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CALENDAR_MOMENT: Final[str] = "calendar_moment"

_MONTH_LENGTH: Final[Dict[str, Callable[[int, int], int]]] = {
    "persian": persian_month_length,
    "gregorian": gregorian_month_length,
}


# =============================================================================
# MONTH LENGTH KEYWORD
# =============================================================================


def _month_length(validator, enabled, instance, schema) -> Iterator[ValidationError]:
    """
    monthLength: day <= длины месяца в календаре и году экземпляра.

    Срабатывает только когда calendar, year, month, day уже корректны
    по типу и диапазону; иначе нарушение сообщают другие ключевые слова.
    """
    if not enabled or not validator.is_type(instance, "object"):
        return

    length_of = _MONTH_LENGTH.get(instance.get("calendar"))
    year, month, day = instance.get("year"), instance.get("month"), instance.get("day")
    # integer в JSON Schema допускает 1393.0; арифметика календаря только int
    if length_of is None or not all(type(v) is int for v in (year, month, day)):
        return
    if not 1 <= month <= 12:
        return

    length = length_of(year, month)
    if day > length:
        yield ValidationError(
            f"day {day} exceeds length {length} of month {month} "
            f"in {instance['calendar']} year {year}"
        )


CalendarMomentValidator = validators.extend(
    Draft202012Validator, {"monthLength": _month_length}
)


# =============================================================================
# LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_contract(name: str = CALENDAR_MOMENT) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы из SCHEMA_DIR.

    Raises:
        FileNotFoundError: Если файла схемы нет
        jsonschema.SchemaError: Если схема невалидна
    """
    with open(SCHEMA_DIR / f"{name}.json", "r", encoding="utf-8") as f:
        schema = json.load(f)
    CalendarMomentValidator.check_schema(schema)
    return schema


@lru_cache(maxsize=None)
def moment_validator():
    """Экземпляр CalendarMomentValidator для calendar_moment (кэшируется)."""
    return CalendarMomentValidator(load_contract(CALENDAR_MOMENT))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_moment(data: Dict[str, Any]) -> None:
    """
    Проверка payload против calendar_moment.

    Raises:
        jsonschema.ValidationError: Первое (наиболее релевантное) нарушение
    """
    moment_validator().validate(data)


def iter_moment_errors(data: Dict[str, Any]) -> Iterator[ValidationError]:
    """Все нарушения контракта, упорядоченные по пути в документе."""
    return iter(sorted(moment_validator().iter_errors(data), key=lambda e: list(e.path)))
