"""
Contract Validation Module

Модуль для валидации JSON контрактов locator-кодека.
"""

from .validators import (
    SCHEMA_BY_MODEL,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    get_validator,
    validate_contract,
    validate_locator_cell,
    validate_locator_result,
    validator_for,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SCHEMA_BY_MODEL",
    # Functions
    "get_schema_loader",
    "get_validator",
    "validator_for",
    "validate_contract",
    "validate_locator_result",
    "validate_locator_cell",
]
