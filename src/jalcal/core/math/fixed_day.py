"""
FixedDay — общая ось дней для всех календарей

Fixed day — знаковое целое: количество дней от фиксированной эпохи
(fixed day 1 = 0001-01-01 пролептического григорианского календаря).
Плотная ось: каждое целое число является валидным днём.

Оба конвертера (григорианский и персидский) читают и возвращают значения
на одной и той же оси, поэтому межкалендарное преобразование — композиция:

    gregorian = gregorian_from_fixed(persian_to_fixed(y, m, d))
"""

from typing import NamedTuple, TypeAlias

# Fixed day number (дней от эпохи, знаковое целое)
FixedDay: TypeAlias = int


class DateTriple(NamedTuple):
    """
    Тройка полей (year, month, day) одного календаря.

    Результат всех from_fixed преобразований. Сравнивается с обычным tuple.
    Календарь тройки определяется функцией, которая её вернула.
    """

    year: int
    month: int
    day: int

    def format(self, day_at_first: bool = False, separator: str = "/") -> str:
        """
        Строковое представление с ведущими нулями у месяца и дня.

        Args:
            day_at_first: True → DD/MM/YYYY, False → YYYY/MM/DD
            separator: Разделитель полей

        Examples:
            >>> DateTriple(1393, 5, 14).format()
            '1393/05/14'
            >>> DateTriple(1393, 5, 5).format(day_at_first=True)
            '05/05/1393'
        """
        if day_at_first:
            return f"{self.day:02d}{separator}{self.month:02d}{separator}{self.year}"
        return f"{self.year}{separator}{self.month:02d}{separator}{self.day:02d}"
