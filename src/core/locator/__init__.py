"""
Locator Codec — компактные коды для географических координат

(lat, lng) ⇄ "XXXX-XX-XX-XX": 10 символов base-35 (0-9, A-Z без O),
по 5 символов на ось, сетка 35^5 позиций на ось.
"""

from src.core.locator.base_n import encode_index, parse_index
from src.core.locator.codec import (
    LocatorCodec,
    decode,
    decode_cell,
    encode,
    encode_coordinate,
    is_valid_code,
    locate,
    normalize_code,
)
from src.core.locator.config import (
    DEFAULT_ALPHABET,
    DEFAULT_DIGITS_PER_AXIS,
    DEFAULT_GRID_CONFIG,
    DEFAULT_GROUP_SIZES,
    DEFAULT_SEPARATOR,
    LocatorGridConfig,
)
from src.core.locator.exceptions import (
    InvalidCodeFormat,
    InvalidSymbol,
    LocatorError,
    NonFiniteInput,
    OutOfRangeCoordinate,
)
from src.core.locator.formatter import group_code, strip_code
from src.core.locator.quantizer import (
    LATITUDE,
    LONGITUDE,
    Axis,
    axis_cell_bounds,
    dequantize,
    dequantize_axis,
    quantize,
    quantize_axis,
    validate_axis_value,
)

__all__ = [
    # Codec
    "LocatorCodec",
    "encode",
    "decode",
    "encode_coordinate",
    "decode_cell",
    "locate",
    "normalize_code",
    "is_valid_code",
    # Config
    "DEFAULT_ALPHABET",
    "DEFAULT_DIGITS_PER_AXIS",
    "DEFAULT_GROUP_SIZES",
    "DEFAULT_SEPARATOR",
    "DEFAULT_GRID_CONFIG",
    "LocatorGridConfig",
    # Exceptions
    "LocatorError",
    "NonFiniteInput",
    "OutOfRangeCoordinate",
    "InvalidCodeFormat",
    "InvalidSymbol",
    # Quantizer
    "Axis",
    "LATITUDE",
    "LONGITUDE",
    "validate_axis_value",
    "quantize_axis",
    "dequantize_axis",
    "axis_cell_bounds",
    "quantize",
    "dequantize",
    # Base-N / Formatter
    "encode_index",
    "parse_index",
    "group_code",
    "strip_code",
]
