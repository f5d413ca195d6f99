"""
Locator Codec — координаты ⇄ locator-код

Конвейер encode:
    (lat, lng) → quantize → (lat_index, lng_index)
               → encode_index ×2 → 10 символов → group_code → "XXXX-XX-XX-XX"

Конвейер decode — обратный: strip_code → проверка длины и алфавита
→ parse_index ×2 → dequantize. Decode с потерями: результат совпадает с
исходной координатой с точностью до одной ячейки сетки
(≈180/35^5° по широте, ≈360/35^5° по долготе).

Кодек не хранит состояния между вызовами и безопасен для конкурентного
использования. Конфигурация сетки передаётся при создании LocatorCodec;
модульные encode/decode используют кодек с конфигурацией по умолчанию.
"""

import logging
from typing import Final

from src.core.domain.locator import Coordinate, LocatorCell, LocatorResult
from src.core.locator.base_n import encode_index, parse_index
from src.core.locator.config import DEFAULT_GRID_CONFIG, LocatorGridConfig
from src.core.locator.exceptions import InvalidCodeFormat, LocatorError
from src.core.locator.formatter import group_code, strip_code
from src.core.locator.quantizer import (
    LATITUDE,
    LONGITUDE,
    axis_cell_bounds,
    dequantize,
    quantize,
)

logger = logging.getLogger(__name__)


class LocatorCodec:
    """
    Кодек locator-кодов для заданной конфигурации сетки.

    Экземпляр неизменяем; один экземпляр можно разделять между потоками.
    """

    def __init__(self, config: LocatorGridConfig = DEFAULT_GRID_CONFIG):
        self.config = config

    @property
    def resolution(self) -> int:
        return self.config.resolution

    # -------------------------------------------------------------------------
    # ENCODE
    # -------------------------------------------------------------------------

    def encode_raw(self, lat: float, lng: float) -> str:
        """
        Кодирование координат в код без разделителей.

        Raises:
            NonFiniteInput: lat/lng NaN, Inf или не число
            OutOfRangeCoordinate: lat/lng вне диапазона оси
        """
        lat_index, lng_index = quantize(lat, lng, self.resolution)
        width = self.config.digits_per_axis
        alphabet = self.config.alphabet

        return encode_index(lat_index, alphabet, width) + encode_index(lng_index, alphabet, width)

    def encode(self, lat: float, lng: float) -> str:
        """
        Кодирование координат в locator-код.

        Args:
            lat: Широта в [-90, 90]
            lng: Долгота в [-180, 180]

        Returns:
            Код вида "XXXX-XX-XX-XX"

        Raises:
            NonFiniteInput: lat/lng NaN, Inf или не число
            OutOfRangeCoordinate: lat/lng вне диапазона оси

        Examples:
            >>> LocatorCodec().encode(31.2, 29.9)
            'NJU5-UK-E8-HR'
            >>> LocatorCodec().encode(-90, -180)
            '0000-00-00-00'
        """
        raw = self.encode_raw(lat, lng)
        return group_code(raw, self.config.group_sizes, self.config.separator)

    def encode_coordinate(self, coordinate: Coordinate) -> str:
        """Кодирование pydantic-модели Coordinate."""
        return self.encode(coordinate.latitude, coordinate.longitude)

    def locate(self, lat: float, lng: float) -> LocatorResult:
        """
        Кодирование координат в результат для JSON-ответа.

        Returns:
            LocatorResult с кодом и исходными координатами
        """
        return LocatorResult(code=self.encode(lat, lng), latitude=lat, longitude=lng)

    # -------------------------------------------------------------------------
    # DECODE
    # -------------------------------------------------------------------------

    def split_indices(self, code: str) -> tuple[int, int]:
        """
        Разбор кода в пару индексов сетки.

        Returns:
            (lat_index, lng_index)

        Raises:
            InvalidCodeFormat: code не строка или неверная длина без разделителей
            InvalidSymbol: символ вне алфавита (с позицией в коде без разделителей)
        """
        if not isinstance(code, str):
            logger.debug("Rejected non-string code: %r", code)
            raise InvalidCodeFormat(f"code must be a string, got {type(code).__name__}")

        raw = strip_code(code, self.config.separator)
        if len(raw) != self.config.code_length:
            logger.debug("Rejected code %r: %d symbols after stripping", code, len(raw))
            raise InvalidCodeFormat(
                f"code must have {self.config.code_length} symbols "
                f"without separators, got {len(raw)}"
            )

        width = self.config.digits_per_axis
        alphabet = self.config.alphabet
        lat_index = parse_index(raw[:width], alphabet, offset=0)
        lng_index = parse_index(raw[width:], alphabet, offset=width)

        return lat_index, lng_index

    def decode(self, code: str) -> tuple[float, float]:
        """
        Декодирование locator-кода в координаты.

        Args:
            code: Код с разделителями или без

        Returns:
            (lat, lng) — точка сетки, ближайшая к исходной координате

        Raises:
            InvalidCodeFormat: неверная длина после удаления разделителей
            InvalidSymbol: символ вне алфавита
        """
        lat_index, lng_index = self.split_indices(code)
        return dequantize(lat_index, lng_index, self.resolution)

    def decode_cell(self, code: str) -> LocatorCell:
        """
        Декодирование кода в ячейку сетки (границы + центр).

        Все координаты, кодирующиеся в code, лежат внутри ячейки.
        """
        lat_index, lng_index = self.split_indices(code)
        south, north = axis_cell_bounds(lat_index, LATITUDE, self.resolution)
        west, east = axis_cell_bounds(lng_index, LONGITUDE, self.resolution)
        lat, lng = dequantize(lat_index, lng_index, self.resolution)

        return LocatorCell(
            code=self.normalize(code),
            center=Coordinate(latitude=lat, longitude=lng),
            south=south,
            west=west,
            north=north,
            east=east,
        )

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def normalize(self, code: str) -> str:
        """
        Каноническая форма валидного кода ("NJU5UKE8HR" → "NJU5-UK-E8-HR").

        Raises:
            InvalidCodeFormat, InvalidSymbol: если код невалиден
        """
        self.split_indices(code)
        raw = strip_code(code, self.config.separator)
        return group_code(raw, self.config.group_sizes, self.config.separator)

    def is_valid(self, code: str) -> bool:
        """Проверка валидности кода без exception."""
        try:
            self.split_indices(code)
        except LocatorError:
            return False
        return True


# =============================================================================
# DEFAULT CODEC
# =============================================================================

_DEFAULT_CODEC: Final[LocatorCodec] = LocatorCodec()


def encode(lat: float, lng: float) -> str:
    """Кодирование координат кодеком по умолчанию. См. LocatorCodec.encode."""
    return _DEFAULT_CODEC.encode(lat, lng)


def decode(code: str) -> tuple[float, float]:
    """Декодирование кода кодеком по умолчанию. См. LocatorCodec.decode."""
    return _DEFAULT_CODEC.decode(code)


def encode_coordinate(coordinate: Coordinate) -> str:
    return _DEFAULT_CODEC.encode_coordinate(coordinate)


def decode_cell(code: str) -> LocatorCell:
    return _DEFAULT_CODEC.decode_cell(code)


def locate(lat: float, lng: float) -> LocatorResult:
    return _DEFAULT_CODEC.locate(lat, lng)


def normalize_code(code: str) -> str:
    return _DEFAULT_CODEC.normalize(code)


def is_valid_code(code: str) -> bool:
    return _DEFAULT_CODEC.is_valid(code)
