"""
Locator Domain Models — координаты, ячейки сетки и результат кодирования

Immutable Pydantic модели (frozen=True). Используются структурированными
вызывающими сторонами; функциональный API кодека работает с float.
"""

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# COORDINATE
# =============================================================================


class Coordinate(BaseModel):
    """
    Географическая координата в десятичных градусах.

    Границы включены: широта [-90, 90], долгота [-180, 180].
    NaN/Inf отклоняются (allow_inf_nan=False).
    """

    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False, description="Широта")
    longitude: float = Field(
        ..., ge=-180.0, le=180.0, allow_inf_nan=False, description="Долгота"
    )

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[float, float]:
        """(latitude, longitude)"""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


# =============================================================================
# LOCATOR CELL
# =============================================================================


class LocatorCell(BaseModel):
    """
    Ячейка сетки, которую обозначает locator-код.

    Все координаты, кодирующиеся в code, лежат в
    [south, north] × [west, east]. center — результат decode(code).
    """

    code: str = Field(..., min_length=1, description="Locator-код в канонической форме")
    center: Coordinate = Field(..., description="Точка сетки, возвращаемая decode")

    south: float = Field(..., ge=-90.0, le=90.0, description="Южная граница")
    west: float = Field(..., ge=-180.0, le=180.0, description="Западная граница")
    north: float = Field(..., ge=-90.0, le=90.0, description="Северная граница")
    east: float = Field(..., ge=-180.0, le=180.0, description="Восточная граница")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bounds(self) -> "LocatorCell":
        """Центр внутри ячейки, границы упорядочены."""
        if not self.south <= self.center.latitude <= self.north:
            raise ValueError(
                f"center latitude {self.center.latitude} outside [{self.south}, {self.north}]"
            )
        if not self.west <= self.center.longitude <= self.east:
            raise ValueError(
                f"center longitude {self.center.longitude} outside [{self.west}, {self.east}]"
            )
        return self

    def contains(self, latitude: float, longitude: float) -> bool:
        """Проверка, лежит ли точка внутри ячейки (границы включены)."""
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    @property
    def height(self) -> float:
        """Высота ячейки в градусах широты."""
        return self.north - self.south

    @property
    def width(self) -> float:
        """Ширина ячейки в градусах долготы."""
        return self.east - self.west

    def to_contract(self) -> dict:
        """Сериализация в dict по контракту locator_cell."""
        return self.model_dump(mode="json")


# =============================================================================
# LOCATOR RESULT
# =============================================================================


class LocatorResult(BaseModel):
    """
    Результат кодирования для JSON-ответа внешнего сервиса.

    Соответствует контракту contracts/schema/locator_result.json.
    """

    code: str = Field(..., min_length=1, description="Locator-код")
    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False, description="Широта")
    longitude: float = Field(
        ..., ge=-180.0, le=180.0, allow_inf_nan=False, description="Долгота"
    )

    model_config = {"frozen": True}  # Immutable

    def to_contract(self) -> dict:
        """Сериализация в dict по контракту locator_result."""
        return self.model_dump(mode="json")
