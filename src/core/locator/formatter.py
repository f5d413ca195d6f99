"""
Formatter — пунктуация locator-кода для чтения человеком

"NJU5UKE8HR" ⇄ "NJU5-UK-E8-HR" (группы 4-2-2-2).
"""


def group_code(raw: str, group_sizes: tuple[int, ...], separator: str) -> str:
    """
    Разбиение сырого кода на группы через разделитель.

    Args:
        raw: Код без разделителей, длина == sum(group_sizes)
        group_sizes: Размеры групп
        separator: Разделитель групп

    Returns:
        Код с разделителями

    Raises:
        ValueError: Если длина raw не совпадает с суммой групп

    Examples:
        >>> group_code("NJU5UKE8HR", (4, 2, 2, 2), "-")
        'NJU5-UK-E8-HR'
    """
    if len(raw) != sum(group_sizes):
        raise ValueError(f"raw code must have {sum(group_sizes)} symbols, got {len(raw)}")

    groups = []
    start = 0
    for size in group_sizes:
        groups.append(raw[start : start + size])
        start += size

    return separator.join(groups)


def strip_code(code: str, separator: str) -> str:
    """
    Удаление разделителей и пробельных символов из кода.

    Расстановка разделителей не проверяется: "NJU5UKE8HR", "NJU5-UK-E8-HR"
    и " NJU5-UKE8-HR " дают один и тот же результат.
    """
    return "".join(c for c in code if c != separator and not c.isspace())
