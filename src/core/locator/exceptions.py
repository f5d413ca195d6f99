"""
Locator Exceptions — ошибки кодирования и декодирования locator-кодов

Все ошибки наследуются от LocatorError(ValueError): вызывающий код,
который ловит ValueError, продолжает работать без изменений.
"""


class LocatorError(ValueError):
    """Базовая ошибка locator-кодека."""

    pass


class NonFiniteInput(LocatorError):
    """
    Координата не является конечным вещественным числом.

    NaN, ±Inf, bool и нечисловые значения отклоняются до квантования.
    """

    pass


class OutOfRangeCoordinate(LocatorError):
    """
    Координата вне допустимого диапазона оси.

    Широта: [-90, 90], долгота: [-180, 180]. Значение никогда не
    ограничивается молча, иначе encode перестал бы быть инъективным
    незаметно для вызывающего кода.
    """

    def __init__(self, axis: str, value: float, min_value: float, max_value: float):
        self.axis = axis
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"{axis} must be in [{min_value}, {max_value}], got {value}")


class InvalidCodeFormat(LocatorError):
    """Код после удаления разделителей не состоит ровно из нужного числа символов."""

    pass


class InvalidSymbol(LocatorError):
    """
    Код содержит символ вне алфавита.

    position — индекс символа в коде без разделителей (с нуля).
    """

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid symbol {symbol!r} at position {position}")
