"""
CalendarBridge — прямое преобразование Persian ↔ Gregorian

Композиция PersianConverter и GregorianConverter через fixed day:

    persian (y, m, d) → persian_to_fixed → gregorian_from_fixed → datetime

Время суток (hour, minute, second) переносится без изменений.

Разбор строк "a/b/c": сначала как (year, month, day), затем как
(day, month, year). Обе интерпретации вычисляются явно как
ConversionOutcome; вторая используется только если первая неуспешна.

Валидация перед преобразованием (lenient, по умолчанию):
- year >= 1000
- month <= 12
- day <= 31
Нижние границы и длина месяца не проверяются (см. BridgeConfig.strict).
"""

import datetime
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from jalcal.core.config import DEFAULT_CONFIG, BridgeConfig
from jalcal.core.contracts import validate_moment
from jalcal.core.domain.dates import GregorianDate, PersianDate, TimeOfDay
from jalcal.core.errors import ConversionError, ConversionReason
from jalcal.core.math.arithmetic import validate_int
from jalcal.core.math.fixed_day import DateTriple
from jalcal.core.math.gregorian import gregorian_from_fixed, gregorian_to_fixed
from jalcal.core.math.persian import persian_from_fixed, persian_month_length, persian_to_fixed

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"[+-]?\d+")


# =============================================================================
# RESULT TYPE
# =============================================================================


@dataclass(frozen=True)
class ConversionOutcome:
    """Результат одной попытки преобразования: либо значение, либо ошибка."""

    value: Optional[datetime.datetime]
    error: Optional[ConversionError]

    # Поля-кандидаты (year, month, day) в порядке интерпретации
    fields: DateTriple

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> datetime.datetime:
        """
        Значение или исходная ошибка.

        Raises:
            ConversionError: Если попытка неуспешна
        """
        if self.error is not None:
            raise self.error
        return self.value


# =============================================================================
# CALENDAR BRIDGE
# =============================================================================


class CalendarBridge:
    """Преобразования Persian ↔ Gregorian с валидацией и форматированием.

    Stateless: экземпляр хранит только immutable конфигурацию и
    безопасен для одновременного использования из нескольких потоков.
    """

    def __init__(self, config: Optional[BridgeConfig] = None):
        """
        Args:
            config: конфигурация валидации и форматирования (default DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_persian_fields(self, year: int, month: int, day: int) -> None:
        """Проверка полей персидской даты перед преобразованием.

        Raises:
            TypeError: Если поле не int
            ConversionError: Если поля вне допустимых границ
        """
        validate_int(year, "year")
        validate_int(month, "month")
        validate_int(day, "day")

        cfg = self.config
        if year < cfg.min_year or month > cfg.max_month or day > cfg.max_day:
            raise ConversionError(
                f"Persian date {year}/{month}/{day} out of bounds: "
                f"year must be >= {cfg.min_year}, month <= {cfg.max_month}, day <= {cfg.max_day}",
                reason=ConversionReason.BOUNDS,
            )

        if cfg.strict:
            if month < 1 or day < 1:
                raise ConversionError(
                    f"Persian date {year}/{month}/{day}: month and day must be positive",
                    reason=ConversionReason.BOUNDS,
                )
            length = persian_month_length(year, month)
            if day > length:
                raise ConversionError(
                    f"Persian date {year}/{month}/{day}: month {month} has {length} days",
                    reason=ConversionReason.BOUNDS,
                )

    @staticmethod
    def _validate_time_of_day(hour: int, minute: int, second: int) -> None:
        validate_int(hour, "hour")
        validate_int(minute, "minute")
        validate_int(second, "second")
        if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
            raise ConversionError(
                f"Time of day {hour}:{minute}:{second} out of range",
                reason=ConversionReason.TIME_OF_DAY,
            )

    # -------------------------------------------------------------------------
    # Persian → Gregorian
    # -------------------------------------------------------------------------

    def try_persian_to_gregorian(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> ConversionOutcome:
        """Попытка преобразования без исключений ConversionError.

        Returns:
            ConversionOutcome с datetime или ошибкой
        """
        fields = DateTriple(year, month, day)
        try:
            self.validate_persian_fields(year, month, day)
            self._validate_time_of_day(hour, minute, second)
        except ConversionError as e:
            return ConversionOutcome(value=None, error=e, fields=fields)

        g_year, g_month, g_day = gregorian_from_fixed(persian_to_fixed(year, month, day))
        if not datetime.MINYEAR <= g_year <= datetime.MAXYEAR:
            error = ConversionError(
                f"Gregorian year {g_year} for Persian date {year}/{month}/{day} "
                f"is outside {datetime.MINYEAR}..{datetime.MAXYEAR}",
                reason=ConversionReason.OUT_OF_RANGE,
            )
            return ConversionOutcome(value=None, error=error, fields=fields)

        value = datetime.datetime(g_year, g_month, g_day, hour, minute, second)
        return ConversionOutcome(value=value, error=None, fields=fields)

    def persian_to_gregorian(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> datetime.datetime:
        """Персидская дата и время → григорианский datetime (naive).

        Raises:
            ConversionError: Если year < 1000, month > 12, day > 31
                (или strict-нарушение), либо время вне диапазона
        """
        return self.try_persian_to_gregorian(year, month, day, hour, minute, second).unwrap()

    # -------------------------------------------------------------------------
    # Gregorian → Persian
    # -------------------------------------------------------------------------

    @staticmethod
    def _persian_triple(value: datetime.date) -> DateTriple:
        if not isinstance(value, datetime.date):
            raise TypeError(f"Expected datetime.date or datetime.datetime, got {type(value).__name__}")
        return persian_from_fixed(gregorian_to_fixed(value.year, value.month, value.day))

    def gregorian_to_persian(self, value: datetime.date) -> PersianDate:
        """Григорианская дата → PersianDate (время отбрасывается)."""
        year, month, day = self._persian_triple(value)
        return PersianDate(year=year, month=month, day=day)

    def gregorian_to_jalali_date(self, value: datetime.date, day_at_first: bool = False) -> str:
        """Григорианская дата → строка персидской даты.

        Args:
            value: datetime.date или datetime.datetime
            day_at_first: True → DD/MM/YYYY, False → YYYY/MM/DD

        Returns:
            Строка с ведущими нулями у дня и месяца
        """
        return self._persian_triple(value).format(
            day_at_first=day_at_first, separator=self.config.separator
        )

    def gregorian_to_jalali_time(self, value: datetime.date | datetime.time) -> str:
        """Время суток → HH:MM:SS. Для datetime.date без времени — 00:00:00."""
        if isinstance(value, (datetime.datetime, datetime.time)):
            return TimeOfDay.from_time(value).format()
        if isinstance(value, datetime.date):
            return TimeOfDay().format()
        raise TypeError(f"Expected datetime, date or time, got {type(value).__name__}")

    def gregorian_to_jalali(self, value: datetime.date, day_at_first: bool = False) -> str:
        """Дата и время: "14/04/1393   10:25:01" (day_at_first=True)."""
        return (
            self.gregorian_to_jalali_date(value, day_at_first)
            + self.config.datetime_separator
            + self.gregorian_to_jalali_time(value)
        )

    # -------------------------------------------------------------------------
    # String parsing
    # -------------------------------------------------------------------------

    def _tokenize(self, text: str) -> tuple[int, int, int]:
        """Разбор "a/b/c" на три целых. Пустые токены пропускаются."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        tokens = [token for token in text.split(self.config.separator) if token]
        if len(tokens) != 3 or not all(_INTEGER_TOKEN.fullmatch(token) for token in tokens):
            raise ConversionError(
                f"Cannot tokenize {text!r} into three {self.config.separator!r}-separated integers",
                reason=ConversionReason.TOKENIZE,
            )
        first, second, third = (int(token) for token in tokens)
        return first, second, third

    def _first_success(self, text: str, outcomes: Iterable[ConversionOutcome]) -> datetime.datetime:
        """Первый успешный кандидат; иначе наиболее содержательная ошибка.

        BOUNDS означает лишь неверный порядок полей, поэтому при неуспехе
        обоих кандидатов сообщается первая ошибка другого вида (время
        суток, выход за диапазон datetime), а BOUNDS последнего кандидата
        только если других нет.
        """
        failures: list[ConversionOutcome] = []
        for outcome in outcomes:
            if outcome.ok:
                return outcome.value
            logger.debug(
                "Rejected interpretation %s of %r: %s", outcome.fields, text, outcome.error
            )
            failures.append(outcome)

        cause = next(
            (f.error for f in failures if f.error.reason is not ConversionReason.BOUNDS),
            failures[-1].error,
        )
        raise ConversionError(
            f"Cannot convert {text!r} as year/month/day or day/month/year: {cause}",
            reason=cause.reason,
        ) from cause

    def _candidates(self, a: int, b: int, c: int, hour: int, minute: int, second: int):
        # Y/M/D, затем D/M/Y; второй кандидат вычисляется только при неуспехе первого
        yield self.try_persian_to_gregorian(a, b, c, hour, minute, second)
        logger.debug("Falling back to day/month/year order for %s/%s/%s", a, b, c)
        yield self.try_persian_to_gregorian(c, b, a, hour, minute, second)

    def parse_jalali(self, text: str) -> datetime.datetime:
        """Строка "Y/M/D" или "D/M/Y" → григорианский datetime (00:00:00).

        Raises:
            ConversionError: Если строка не разбирается или ни одна
                интерпретация не проходит валидацию
        """
        a, b, c = self._tokenize(text)
        return self._first_success(text, self._candidates(a, b, c, 0, 0, 0))

    def parse_jalali_datetime(self, text: str) -> datetime.datetime:
        """Строка "Y/M/D hh:mm:ss" или "D/M/Y hh:mm:ss" → datetime.

        Пробелы между датой и временем необязательны.

        Raises:
            ConversionError: Если строка не соответствует формату
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        sep = re.escape(self.config.separator)
        pattern = rf"(\d*){sep}(\d*){sep}(\d*)\s*(\d*):(\d*):(\d*)"
        match = re.fullmatch(pattern, text)
        if match is None or not all(match.groups()):
            raise ConversionError(
                f"Cannot parse {text!r} as a date-time", reason=ConversionReason.TOKENIZE
            )
        a, b, c, hour, minute, second = (int(group) for group in match.groups())
        return self._first_success(text, self._candidates(a, b, c, hour, minute, second))

    # -------------------------------------------------------------------------
    # JSON payloads
    # -------------------------------------------------------------------------

    def convert_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """calendar_moment payload → тот же момент в другом календаре.

        Время суток (если есть) переносится без изменений.

        Examples:
            >>> CalendarBridge().convert_payload(
            ...     {"calendar": "persian", "year": 1393, "month": 5, "day": 14,
            ...      "time": {"hour": 10, "minute": 2, "second": 4}})
            {'year': 2014, 'month': 8, 'day': 5, 'calendar': 'gregorian', 'time': {'hour': 10, 'minute': 2, 'second': 4}}

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту,
                в том числе если день превышает длину месяца
        """
        validate_moment(data)
        fields = {key: data[key] for key in ("year", "month", "day")}
        if data["calendar"] == "persian":
            result = PersianDate(**fields).to_gregorian().to_payload()
        else:
            result = GregorianDate(**fields).to_persian().to_payload()
        if "time" in data:
            result["time"] = TimeOfDay(**data["time"]).to_payload()
        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_BRIDGE = CalendarBridge()


def jalali_to_gregorian(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime.datetime:
    """
    Персидская дата и время → григорианский datetime.

    Raises:
        ConversionError: Если year < 1000, month > 12 или day > 31

    Examples:
        >>> jalali_to_gregorian(1393, 5, 14, 10, 2, 4)
        datetime.datetime(2014, 8, 5, 10, 2, 4)
    """
    return _DEFAULT_BRIDGE.persian_to_gregorian(year, month, day, hour, minute, second)


def parse_jalali_to_gregorian(text: str) -> datetime.datetime:
    """
    "Y/M/D" или "D/M/Y" → григорианский datetime.

    Examples:
        >>> parse_jalali_to_gregorian("14/5/1393")
        datetime.datetime(2014, 8, 5, 0, 0)
    """
    return _DEFAULT_BRIDGE.parse_jalali(text)


def parse_jalali_datetime_to_gregorian(text: str) -> datetime.datetime:
    """Строка даты-времени в формате Y/M/D hh:mm:ss или D/M/Y hh:mm:ss → datetime."""
    return _DEFAULT_BRIDGE.parse_jalali_datetime(text)


def gregorian_to_jalali_date(value: datetime.date, day_at_first: bool = False) -> str:
    """
    Examples:
        >>> gregorian_to_jalali_date(datetime.date(2014, 7, 27), day_at_first=True)
        '05/05/1393'
    """
    return _DEFAULT_BRIDGE.gregorian_to_jalali_date(value, day_at_first)


def gregorian_to_jalali_time(value: datetime.date | datetime.time) -> str:
    return _DEFAULT_BRIDGE.gregorian_to_jalali_time(value)


def gregorian_to_jalali(value: datetime.date, day_at_first: bool = False) -> str:
    return _DEFAULT_BRIDGE.gregorian_to_jalali(value, day_at_first)


def gregorian_to_persian(value: datetime.date) -> PersianDate:
    return _DEFAULT_BRIDGE.gregorian_to_persian(value)
