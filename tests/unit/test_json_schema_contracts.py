"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/max/pattern)
- Интеграция с кодеком и Pydantic моделями
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    get_validator,
    validate_contract,
    validate_locator_cell,
    validate_locator_result,
    validator_for,
)
from src.core.domain import LocatorResult
from src.core.locator import decode_cell, encode, locate


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_locator_result():
    """Валидный locator_result для тестирования."""
    return {"code": "NJU5-UK-E8-HR", "latitude": 31.2, "longitude": 29.9}


@pytest.fixture
def valid_locator_cell():
    """Валидный locator_cell для тестирования."""
    return {
        "code": "NJU5-UK-E8-HR",
        "center": {"latitude": 31.1999994, "longitude": 29.8999999},
        "south": 31.1999977,
        "west": 29.8999965,
        "north": 31.2000011,
        "east": 29.9000034,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schemas_are_valid_json_schema(self) -> None:
        loader = SchemaLoader()
        for name in ("locator_result", "locator_cell"):
            schema = loader.load_schema(name)
            assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("locator_result") is loader.load_schema("locator_result")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# LOCATOR RESULT CONTRACT
# =============================================================================


class TestLocatorResultContract:
    """Тесты для locator_result контракта"""

    def test_valid(self, valid_locator_result) -> None:
        validate_locator_result(valid_locator_result)
        assert get_validator("locator_result").is_valid(valid_locator_result)

    @pytest.mark.parametrize("field", ["code", "latitude", "longitude"])
    def test_missing_required(self, valid_locator_result, field) -> None:
        del valid_locator_result[field]
        with pytest.raises(ValidationError):
            validate_locator_result(valid_locator_result)

    @pytest.mark.parametrize(
        "code",
        [
            "NJU5UKE8HR",  # без разделителей
            "nju5-uk-e8-hr",  # нижний регистр
            "NJU5-UK-E8-HO",  # O вне алфавита
            "ZZZZ-ZZ-ZZ-ZZZ",  # неверная длина
        ],
    )
    def test_code_pattern(self, valid_locator_result, code) -> None:
        valid_locator_result["code"] = code
        assert not get_validator("locator_result").is_valid(valid_locator_result)

    def test_latitude_range(self, valid_locator_result) -> None:
        valid_locator_result["latitude"] = 90.5
        with pytest.raises(ValidationError):
            validate_locator_result(valid_locator_result)

    def test_additional_properties_rejected(self, valid_locator_result) -> None:
        valid_locator_result["city"] = "ALX"
        messages = get_validator("locator_result").error_messages(valid_locator_result)
        assert messages == ["$: Additional properties are not allowed ('city' was unexpected)"]

    def test_codec_output_conforms(self) -> None:
        for lat, lng in [(31.2, 29.9), (-90, -180), (90, 180), (0.0, 0.0), (-33.87, 151.21)]:
            validate_locator_result(locate(lat, lng))


# =============================================================================
# LOCATOR CELL CONTRACT
# =============================================================================


class TestLocatorCellContract:
    """Тесты для locator_cell контракта"""

    def test_valid(self, valid_locator_cell) -> None:
        validate_locator_cell(valid_locator_cell)

    def test_missing_center(self, valid_locator_cell) -> None:
        del valid_locator_cell["center"]
        assert not get_validator("locator_cell").is_valid(valid_locator_cell)

    def test_wrong_type(self, valid_locator_cell) -> None:
        valid_locator_cell["south"] = "31.19"
        with pytest.raises(ValidationError):
            validate_locator_cell(valid_locator_cell)

    def test_codec_output_conforms(self) -> None:
        for lat, lng in [(31.2, 29.9), (-90, -180), (90, 180)]:
            validate_locator_cell(decode_cell(encode(lat, lng)))


# =============================================================================
# CODEC MODELS AS PAYLOAD
# =============================================================================


class TestModelPayload:
    """Тесты валидации моделей кодека без ручной сериализации"""

    def test_schema_chosen_by_model_type(self) -> None:
        result = locate(31.2, 29.9)
        cell = decode_cell(result.code)

        assert validator_for(result).schema_name == "locator_result"
        assert validator_for(cell).schema_name == "locator_cell"
        validate_contract(result)
        validate_contract(cell)

    def test_dict_requires_schema_name(self, valid_locator_result) -> None:
        with pytest.raises(ValueError, match="schema_name is required"):
            validate_contract(valid_locator_result)

        validate_contract(valid_locator_result, "locator_result")

    def test_model_violating_contract(self) -> None:
        """Модель допускает код без разделителей, контракт — нет"""
        result = LocatorResult(code="NJU5UKE8HR", latitude=31.2, longitude=29.9)

        assert not get_validator("locator_result").is_valid(result)
        messages = get_validator("locator_result").error_messages(result)
        assert len(messages) == 1
        assert messages[0].startswith("$.code: 'NJU5UKE8HR' does not match")

    def test_error_messages_sorted_by_path(self, valid_locator_cell) -> None:
        valid_locator_cell["south"] = "31.19"
        valid_locator_cell["east"] = 200
        messages = get_validator("locator_cell").error_messages(valid_locator_cell)

        assert messages == [
            "$.east: 200 is greater than the maximum of 180",
            "$.south: '31.19' is not of type 'number'",
        ]

    def test_conforming_payload_has_no_messages(self) -> None:
        assert get_validator("locator_cell").error_messages(decode_cell("HHHH-IH-HH-HI")) == []


class TestSharedLoader:
    """Тесты общего загрузчика и кэша валидаторов"""

    def test_loader_shared(self) -> None:
        assert get_schema_loader() is get_schema_loader()

    def test_validator_cached(self) -> None:
        assert get_validator("locator_cell") is get_validator("locator_cell")

    def test_custom_loader(self, tmp_path: Path) -> None:
        schema = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "required": ["code"],
        }
        (tmp_path / "code_only.json").write_text(json.dumps(schema), encoding="utf-8")

        validator = ContractValidator("code_only", loader=SchemaLoader(tmp_path))
        assert validator.is_valid(locate(-33.87, 151.21))
        assert validator.error_messages({}) == ["$: 'code' is a required property"]
