"""
Contract Validation Module

Модуль для валидации JSON контрактов: каталог тестовых векторов.
"""

from .validators import (
    DEFAULT_VECTORS_PATH,
    ContractValidator,
    SchemaLoader,
    VectorCatalogValidator,
    load_vector_catalog,
    parse_vector_catalog,
    validate_vector_catalog,
)

__all__ = [
    # Constants
    "DEFAULT_VECTORS_PATH",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorCatalogValidator",
    # Functions
    "validate_vector_catalog",
    "parse_vector_catalog",
    "load_vector_catalog",
]
