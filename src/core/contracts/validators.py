"""
JSON Schema Contract Validators

Проверка payload, который locator-кодек отдаёт внешнему сервису
(LocatorResult, LocatorCell), по JSON Schema контрактам из contracts/schema/.

Валидатор принимает как pydantic-модель кодека (сериализуется через
to_contract()), так и готовый dict из JSON-ответа. Схемы читаются лениво,
один раз на процесс: путь encode/decode файловой системы не касается.

Схемы:
- locator_result.json → LocatorResult
- locator_cell.json → LocatorCell
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.locator import LocatorCell, LocatorResult

ContractPayload = Union[LocatorResult, LocatorCell, Dict[str, Any]]

# Корень проекта: 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"

# Модель кодека → имя схемы
SCHEMA_BY_MODEL: Dict[type, str] = {
    LocatorResult: "locator_result",
    LocatorCell: "locator_cell",
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем и meta-validation.
    """

    def __init__(self, schema_dir: Path = DEFAULT_SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'locator_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}")

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем проекта (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


def to_payload(data: ContractPayload) -> Dict[str, Any]:
    """Модель кодека → dict контракта; dict возвращается как есть."""
    if isinstance(data, (LocatorResult, LocatorCell)):
        return data.to_contract()
    return data


class ContractValidator:
    """
    Валидатор одного контракта.

    Args:
        schema_name: Имя схемы в contracts/schema/
        loader: Загрузчик схем (по умолчанию общий загрузчик проекта)
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: ContractPayload) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
        """
        self._validator.validate(to_payload(data))

    def is_valid(self, data: ContractPayload) -> bool:
        return self._validator.is_valid(to_payload(data))

    def error_messages(self, data: ContractPayload) -> list[str]:
        """
        Все нарушения контракта в виде "<json path>: <сообщение>".

        Отсортированы по пути, чтобы вывод был детерминированным.
        """
        errors = sorted(
            self._validator.iter_errors(to_payload(data)), key=lambda e: e.json_path
        )
        return [f"{error.json_path}: {error.message}" for error in errors]


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Кэшированный валидатор контракта по имени схемы."""
    return ContractValidator(schema_name)


def validator_for(data: ContractPayload, schema_name: str | None = None) -> ContractValidator:
    """
    Выбор валидатора для payload.

    Для моделей кодека схема определяется по типу; для dict имя схемы
    обязательно.

    Raises:
        ValueError: Если схему определить нельзя
    """
    if schema_name is None:
        schema_name = SCHEMA_BY_MODEL.get(type(data))
    if schema_name is None:
        raise ValueError(f"schema_name is required for {type(data).__name__} payload")
    return get_validator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_contract(data: ContractPayload, schema_name: str | None = None) -> None:
    """
    Валидация payload кодека по его контракту.

    Raises:
        jsonschema.ValidationError: Если payload не соответствует схеме
        ValueError: Если схему определить нельзя
    """
    validator_for(data, schema_name).validate(data)


def validate_locator_result(data: Union[LocatorResult, Dict[str, Any]]) -> None:
    """Валидация результата locate() или dict из JSON-ответа."""
    validate_contract(data, "locator_result")


def validate_locator_cell(data: Union[LocatorCell, Dict[str, Any]]) -> None:
    """Валидация результата decode_cell() или dict из JSON-ответа."""
    validate_contract(data, "locator_cell")
