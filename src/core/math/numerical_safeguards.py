"""
Numerical Safeguards — Safe Math Primitives для квантования координат

Модуль обеспечивает численную устойчивость операций locator-кодека:
- Проверка конечности float (NaN/Inf никогда не доходят до квантования)
- Детерминированное округление round-half-away-from-zero
- Ограничение целочисленных индексов в диапазоне сетки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют (is_valid_float → False)
2. Режим округления фиксирован: половина округляется от нуля
3. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Real

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_real_number(value: object) -> bool:
    """
    Проверка, является ли значение вещественным числом.

    bool формально подкласс int, но координатой не является.
    Decimal не зарегистрирован в numbers.Real и тоже отклоняется:
    вызывающий код приводит его к float явно.

    Args:
        value: Проверяемое значение

    Returns:
        True для int, float, Fraction и прочих numbers.Real; False для bool,
        Decimal и нечисловых значений
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половина — от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2),
    что для квантования сетки недопустимо: режим должен быть один
    и тот же для всех осей и всех значений.

    Args:
        value: Конечное значение

    Returns:
        Ближайшее целое (ties away from zero)

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2.4999)
        2
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def clamp_index(index: int, size: int) -> int:
    """
    Ограничение индекса диапазоном [0, size - 1].

    Args:
        index: Исходный индекс
        size: Количество позиций (> 0)

    Returns:
        Индекс в пределах [0, size - 1]

    Examples:
        >>> clamp_index(10, 10)
        9
        >>> clamp_index(-1, 10)
        0
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")

    return min(max(index, 0), size - 1)

