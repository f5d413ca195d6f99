"""
Core math modules для 3Locators

Математические примитивы квантования с гарантией детерминизма.
"""

from src.core.math.numerical_safeguards import (
    clamp_index,
    is_real_number,
    is_valid_float,
    round_half_away_from_zero,
)

__all__ = [
    # NaN/Inf checks
    "is_real_number",
    "is_valid_float",
    # Rounding
    "clamp_index",
    "round_half_away_from_zero",
]
