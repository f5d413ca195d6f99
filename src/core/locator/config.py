"""
LocatorGridConfig — параметры сетки и формата locator-кода

Конфигурация передаётся в LocatorCodec явно при создании. Глобального
изменяемого состояния (кэша выбранной реализации и т.п.) нет.

Значения по умолчанию:
- Алфавит: 0-9 и A-Z без O (визуально совпадает с 0), 35 символов
- 5 символов на ось → 35^5 = 52 521 875 позиций на ось
- Группы 4-2-2-2, разделитель "-"
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZ"

DEFAULT_DIGITS_PER_AXIS: Final[int] = 5

DEFAULT_GROUP_SIZES: Final[tuple[int, ...]] = (4, 2, 2, 2)

DEFAULT_SEPARATOR: Final[str] = "-"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LocatorGridConfig:
    """Конфигурация locator-сетки.

    Инварианты (проверяются в __post_init__):
    - алфавит из >= 2 различных символов, без разделителя и пробелов
    - digits_per_axis >= 1
    - сумма group_sizes == 2 * digits_per_axis, все группы > 0
    - разделитель — ровно один символ
    """

    alphabet: str = DEFAULT_ALPHABET
    digits_per_axis: int = DEFAULT_DIGITS_PER_AXIS
    group_sizes: tuple[int, ...] = DEFAULT_GROUP_SIZES
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if len(self.alphabet) < 2:
            raise ValueError(f"alphabet must have at least 2 symbols, got {self.alphabet!r}")

        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"alphabet symbols must be distinct, got {self.alphabet!r}")

        if len(self.separator) != 1 or self.separator.isspace():
            raise ValueError(f"separator must be one non-space character, got {self.separator!r}")

        if self.separator in self.alphabet or any(c.isspace() for c in self.alphabet):
            raise ValueError("alphabet must not contain the separator or whitespace")

        if self.digits_per_axis < 1:
            raise ValueError(f"digits_per_axis must be >= 1, got {self.digits_per_axis}")

        if not self.group_sizes or any(size <= 0 for size in self.group_sizes):
            raise ValueError(f"group_sizes must be positive, got {self.group_sizes}")

        if sum(self.group_sizes) != self.code_length:
            raise ValueError(
                f"group_sizes {self.group_sizes} must sum to code length {self.code_length}"
            )

    @property
    def base(self) -> int:
        """Основание системы счисления (размер алфавита)."""
        return len(self.alphabet)

    @property
    def resolution(self) -> int:
        """Число позиций сетки на ось: base ** digits_per_axis."""
        return self.base**self.digits_per_axis

    @property
    def code_length(self) -> int:
        """Длина кода без разделителей."""
        return 2 * self.digits_per_axis


DEFAULT_GRID_CONFIG: Final[LocatorGridConfig] = LocatorGridConfig()
