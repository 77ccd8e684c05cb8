"""
Конфигурация CalendarBridge.

Immutable конфигурация: границы грубой валидации входных полей,
режим строгой проверки и разделители строковых форматов.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BridgeConfig:
    """Конфигурация валидации и форматирования.

    Грубые границы (lenient, по умолчанию):
    - year >= min_year
    - month <= max_month
    - day <= max_day
    Нижние границы месяца и дня не проверяются, длина месяца тоже:
    день 31 в 30-дневном месяце даёт смещённую, но "успешную" дату.

    strict=True дополнительно требует month >= 1, day >= 1 и
    day <= длины месяца в указанном году.
    """

    min_year: int = 1000
    max_month: int = 12
    max_day: int = 31
    strict: bool = False

    # Разделитель полей даты: "1393/05/14"
    separator: str = "/"
    # Разделитель даты и времени в gregorian_to_jalali: "14/05/1393   10:25:01"
    datetime_separator: str = "   "

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if self.max_month < 1 or self.max_day < 1:
            raise ValueError(
                f"max_month and max_day must be positive, got {self.max_month}, {self.max_day}"
            )


DEFAULT_CONFIG = BridgeConfig()

STRICT_CONFIG = BridgeConfig(strict=True)
