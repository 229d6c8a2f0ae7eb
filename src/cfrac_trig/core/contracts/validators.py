"""
JSON Schema контракт сериализованного ExpansionResult

Схема schema/expansion_result.json поставляется вместе с пакетом и
проверяется на корректность (meta-validation) при первой загрузке.
Использует библиотеку jsonschema (Draft 2020-12).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем рядом с модулем
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

EXPANSION_RESULT_SCHEMA: Final[str] = "expansion_result"


def load_schema(schema_path: Path) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


@lru_cache(maxsize=None)
def _expansion_result_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(SCHEMA_DIR / f"{EXPANSION_RESULT_SCHEMA}.json"))


def validate_expansion_result(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного ExpansionResult.

    Args:
        data: Результат ExpansionResult.to_dict()

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _expansion_result_validator().validate(data)


def is_valid_expansion_result(data: Dict[str, Any]) -> bool:
    return _expansion_result_validator().is_valid(data)
