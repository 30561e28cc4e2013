"""
JSON Schema Contract Validators

Модуль для валидации каталога тестовых векторов согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema для проверки
соответствия данных схеме, затем Pydantic для построения моделей.

Схемы:
- vector_catalog.json

Данные:
- contracts/vectors/magic_numbers.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.vectors import VectorCatalog

# Корень проекта (4 уровня вверх от этого файла)
_PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Каталог векторов по умолчанию
DEFAULT_VECTORS_PATH = _PROJECT_ROOT / "contracts" / "vectors" / "magic_numbers.json"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or _PROJECT_ROOT / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vector_catalog')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class VectorCatalogValidator(ContractValidator):
    """Валидатор для vector_catalog контракта."""

    def __init__(self):
        super().__init__("vector_catalog")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector_catalog(data: Dict[str, Any]) -> None:
    """
    Валидация данных каталога векторов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    VectorCatalogValidator().validate(data)


def parse_vector_catalog(data: Dict[str, Any]) -> VectorCatalog:
    """
    Валидация (JSON Schema) и построение VectorCatalog (Pydantic).

    Raises:
        jsonschema.ValidationError: Нарушение схемы
        pydantic.ValidationError: Нарушение инвариантов модели (from > to и т.д.)
    """
    validate_vector_catalog(data)
    return VectorCatalog.model_validate(data)


def load_vector_catalog(path: Path | str | None = None) -> VectorCatalog:
    """
    Загрузка каталога векторов из JSON файла.

    Args:
        path: Путь к файлу (default: DEFAULT_VECTORS_PATH)

    Returns:
        Валидированный VectorCatalog

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Нарушение схемы
        pydantic.ValidationError: Нарушение инвариантов модели
    """
    vectors_path = Path(path) if path is not None else DEFAULT_VECTORS_PATH
    if not vectors_path.exists():
        raise FileNotFoundError(f"Vector catalog not found: {vectors_path}")

    with open(vectors_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_vector_catalog(data)
