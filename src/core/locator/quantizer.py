"""
Quantizer — отображение координат на целочисленную сетку

Модуль переводит вещественную координату оси в индекс ячейки сетки
фиксированного разрешения и обратно:

    scale = resolution / (axis.max - axis.min)
    index = round_half_away_from_zero((value - axis.min) * scale)
    value ≈ axis.min + index / scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf и значения вне оси отклоняются до квантования (без clamp)
2. index всегда в [0, resolution - 1]
3. Граница: значение, округлённое до resolution (ровно axis.max или в
   пределах половины ячейки от него), хранится как resolution - 1
4. Квантование монотонно (не строго) по value
"""

import logging
import math
from dataclasses import dataclass
from typing import Final

from src.core.locator.exceptions import NonFiniteInput, OutOfRangeCoordinate
from src.core.math.numerical_safeguards import (
    clamp_index,
    is_real_number,
    is_valid_float,
    round_half_away_from_zero,
)

logger = logging.getLogger(__name__)


# =============================================================================
# AXES
# =============================================================================


@dataclass(frozen=True)
class Axis:
    """Ось координат с включёнными границами [min_value, max_value]."""

    name: str
    min_value: float
    max_value: float

    @property
    def span(self) -> float:
        """Полный диапазон оси в градусах."""
        return self.max_value - self.min_value

    def scale(self, resolution: int) -> float:
        """Число ячеек сетки на один градус оси."""
        return resolution / self.span

    def cell_size(self, resolution: int) -> float:
        """Размер одной ячейки сетки в градусах."""
        return self.span / resolution


LATITUDE: Final[Axis] = Axis(name="latitude", min_value=-90.0, max_value=90.0)
LONGITUDE: Final[Axis] = Axis(name="longitude", min_value=-180.0, max_value=180.0)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_axis_value(value: float, axis: Axis) -> float:
    """
    Проверка координаты перед квантованием.

    Args:
        value: Значение координаты
        axis: Ось (LATITUDE / LONGITUDE)

    Returns:
        value как float

    Raises:
        NonFiniteInput: Если value не вещественное число или NaN/Inf
        OutOfRangeCoordinate: Если value вне [axis.min_value, axis.max_value],
            в том числе int/Fraction, не представимые во float (value = ±inf)
    """
    if not is_real_number(value):
        logger.debug("Rejected non-numeric %s: %r", axis.name, value)
        raise NonFiniteInput(f"{axis.name} must be a real number, got {value!r}")

    try:
        value = float(value)
    except OverflowError:
        # |value| > max float: заведомо вне любой оси
        overflow = math.inf if value > 0 else -math.inf
        logger.debug("Rejected out-of-range %s: exceeds float range", axis.name)
        raise OutOfRangeCoordinate(axis.name, overflow, axis.min_value, axis.max_value)

    if not is_valid_float(value):
        logger.debug("Rejected non-finite %s: %r", axis.name, value)
        raise NonFiniteInput(f"{axis.name} must be finite (not NaN/Inf), got {value}")

    if not axis.min_value <= value <= axis.max_value:
        logger.debug("Rejected out-of-range %s: %r", axis.name, value)
        raise OutOfRangeCoordinate(axis.name, value, axis.min_value, axis.max_value)

    return value


# =============================================================================
# QUANTIZE / DEQUANTIZE
# =============================================================================


def quantize_axis(value: float, axis: Axis, resolution: int) -> int:
    """
    Квантование одной координаты в индекс ячейки.

    Args:
        value: Координата в градусах
        axis: Ось
        resolution: Число позиций сетки на ось

    Returns:
        Индекс в [0, resolution - 1]

    Raises:
        NonFiniteInput, OutOfRangeCoordinate: см. validate_axis_value

    Examples:
        >>> quantize_axis(-90.0, LATITUDE, 35**5)
        0
        >>> quantize_axis(90.0, LATITUDE, 35**5)
        52521874
    """
    value = validate_axis_value(value, axis)
    index = round_half_away_from_zero((value - axis.min_value) * axis.scale(resolution))

    if index >= resolution:
        logger.debug(
            "Clamped %s=%r from index %d to %d", axis.name, value, index, resolution - 1
        )
        index = clamp_index(index, resolution)

    return index


def dequantize_axis(index: int, axis: Axis, resolution: int) -> float:
    """
    Обратное отображение индекса ячейки в координату (центр ячейки сетки).

    Args:
        index: Индекс в [0, resolution - 1]
        axis: Ось
        resolution: Число позиций сетки на ось

    Returns:
        axis.min_value + index / scale

    Raises:
        ValueError: Если индекс вне диапазона
    """
    if not 0 <= index < resolution:
        raise ValueError(f"index must be in [0, {resolution}), got {index}")

    return axis.min_value + index / axis.scale(resolution)


def axis_cell_bounds(index: int, axis: Axis, resolution: int) -> tuple[float, float]:
    """
    Границы ячейки: все значения оси, квантующиеся в index.

    Округление к ближайшему даёт полуячейку с каждой стороны от центра.
    Крайние ячейки обрезаны границами оси; последняя ячейка включает
    axis.max_value (clamp).

    Returns:
        (lower, upper) в градусах
    """
    center = dequantize_axis(index, axis, resolution)
    half = axis.cell_size(resolution) / 2

    lower = max(center - half, axis.min_value)
    upper = axis.max_value if index == resolution - 1 else min(center + half, axis.max_value)
    return lower, upper


def quantize(lat: float, lng: float, resolution: int) -> tuple[int, int]:
    """
    Квантование пары координат.

    Returns:
        (lat_index, lng_index)
    """
    return (
        quantize_axis(lat, LATITUDE, resolution),
        quantize_axis(lng, LONGITUDE, resolution),
    )


def dequantize(lat_index: int, lng_index: int, resolution: int) -> tuple[float, float]:
    """
    Обратное отображение пары индексов.

    Returns:
        (lat, lng) — приближение исходной координаты в пределах ячейки
    """
    return (
        dequantize_axis(lat_index, LATITUDE, resolution),
        dequantize_axis(lng_index, LONGITUDE, resolution),
    )
