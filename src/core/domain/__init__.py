"""
Domain models and value objects.

Contains the locator value objects: Coordinate, LocatorCell, LocatorResult.
"""

from src.core.domain.locator import Coordinate, LocatorCell, LocatorResult

__all__ = [
    "Coordinate",
    "LocatorCell",
    "LocatorResult",
]
