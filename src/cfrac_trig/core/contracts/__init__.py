"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованного результата разложения.
"""

from .validators import (
    EXPANSION_RESULT_SCHEMA,
    SCHEMA_DIR,
    is_valid_expansion_result,
    load_schema,
    validate_expansion_result,
)

__all__ = [
    # Constants
    "EXPANSION_RESULT_SCHEMA",
    "SCHEMA_DIR",
    # Functions
    "is_valid_expansion_result",
    "load_schema",
    "validate_expansion_result",
]
