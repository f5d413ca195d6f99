"""
Base-N Formatter / Parser — позиционная запись индексов сетки

Индекс сетки записывается в системе счисления по основанию len(alphabet)
символами алфавита, с дополнением слева нулевым символом (alphabet[0])
до фиксированной ширины.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина результата encode_index всегда ровно width
2. Максимальный индекс base**width - 1 записывается без усечения
3. parse_index(encode_index(i)) == i для всех i в [0, base**width)
"""

from src.core.locator.exceptions import InvalidCodeFormat, InvalidSymbol


def encode_index(index: int, alphabet: str, width: int) -> str:
    """
    Запись индекса в base-N с дополнением до width символов.

    Args:
        index: Индекс в [0, len(alphabet) ** width)
        alphabet: Упорядоченные символы-цифры
        width: Фиксированная ширина результата

    Returns:
        Строка ровно из width символов алфавита

    Raises:
        ValueError: Если индекс вне диапазона

    Examples:
        >>> encode_index(0, "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZ", 5)
        '00000'
        >>> encode_index(35, "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZ", 5)
        '00010'
    """
    base = len(alphabet)
    if not 0 <= index < base**width:
        raise ValueError(f"index must be in [0, {base**width}), got {index}")

    digits: list[str] = []
    while index > 0:
        index, remainder = divmod(index, base)
        digits.append(alphabet[remainder])

    return "".join(reversed(digits)).rjust(width, alphabet[0])


def parse_index(digits: str, alphabet: str, offset: int = 0) -> int:
    """
    Разбор base-N строки в целый индекс (обратная операция к encode_index).

    Args:
        digits: Строка символов алфавита
        alphabet: Упорядоченные символы-цифры
        offset: Смещение digits внутри полного кода (для позиции в ошибке)

    Returns:
        Целый индекс

    Raises:
        InvalidCodeFormat: Если строка пустая
        InvalidSymbol: Если символ не из алфавита
    """
    if not digits:
        raise InvalidCodeFormat("digits must not be empty")

    base = len(alphabet)
    index = 0
    for position, symbol in enumerate(digits):
        value = alphabet.find(symbol)
        if value < 0:
            raise InvalidSymbol(symbol, offset + position)
        index = index * base + value

    return index
