"""
Vectors — модели наборов тестовых векторов

Наборы фиксированы заранее (contracts/vectors/*.json), загружаются один раз
за прогон и никогда не мутируются.

Виды наборов:
- BooleanVectorSet: значения + ожидаемый bool для предиката
- IntervalCountVector: интервал + ожидаемое число простых
- RangeCrossCheckVector: интервал для сверки is_prime с эталоном
- FibonacciBoundVector: разрядность + ожидаемый наибольший индекс F(k)

Immutable Pydantic модели (frozen=True).
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.core.domain.interval import Interval


# =============================================================================
# ENUMS
# =============================================================================


class PredicateName(str, Enum):
    """Проверяемый предикат"""

    IS_PRIME = "is_prime"
    IS_FIBONACCI = "is_fibonacci"


# =============================================================================
# VECTOR MODELS
# =============================================================================


class BooleanVectorSet(BaseModel):
    """
    Именованный упорядоченный набор значений с общим ожидаемым результатом.

    Например: strong pseudoprimes → is_prime == False для каждого элемента.
    """

    name: str = Field(..., min_length=1, description="Имя категории")
    predicate: PredicateName = Field(..., description="Проверяемый предикат")
    expected: bool = Field(..., strict=True, description="Ожидаемый результат для каждого элемента")
    values: tuple[StrictInt, ...] = Field(..., min_length=1, description="Входные значения")
    description: str = Field("", description="Комментарий")

    model_config = {"frozen": True}

    @field_validator("values")
    @classmethod
    def validate_values_non_negative(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Все значения >= 0"""
        negative = [value for value in v if value < 0]
        if negative:
            raise ValueError(f"values must be non-negative, got {negative}")
        return v


class IntervalCountVector(BaseModel):
    """Интервал и ожидаемое количество простых в нём."""

    name: str = Field(..., min_length=1, description="Имя категории")
    interval: Interval = Field(..., description="Замкнутый интервал [from, to]")
    expected_count: int = Field(..., ge=0, strict=True, description="Ожидаемое число простых")

    model_config = {"frozen": True}

    @field_validator("expected_count")
    @classmethod
    def validate_count_fits_interval(cls, v: int, info) -> int:
        """Число простых не превышает длину интервала"""
        if "interval" in info.data and v > info.data["interval"].size:
            raise ValueError(
                f"expected_count {v} exceeds interval size {info.data['interval'].size}"
            )
        return v


class RangeCrossCheckVector(BaseModel):
    """Интервал, на котором is_prime сверяется с независимым эталоном."""

    name: str = Field(..., min_length=1, description="Имя категории")
    interval: Interval = Field(..., description="Замкнутый интервал [from, to]")

    model_config = {"frozen": True}


class FibonacciBoundVector(BaseModel):
    """
    Разрядность и ожидаемый наибольший индекс k: F(k) <= 2^bits - 1.
    """

    name: str = Field(..., min_length=1, description="Имя категории")
    bits: int = Field(..., ge=1, strict=True, description="Разрядность без знака")
    expected_index: int = Field(..., ge=0, strict=True, description="Ожидаемый индекс")

    model_config = {"frozen": True}


# =============================================================================
# CATALOG
# =============================================================================


class VectorCatalog(BaseModel):
    """
    Полный каталог векторов одного прогона.

    Имена категорий уникальны в пределах каталога.
    """

    schema_version: str = Field(..., min_length=1, description="Версия формата каталога")
    boolean_sets: tuple[BooleanVectorSet, ...] = Field(default_factory=tuple)
    interval_counts: tuple[IntervalCountVector, ...] = Field(default_factory=tuple)
    range_cross_checks: tuple[RangeCrossCheckVector, ...] = Field(default_factory=tuple)
    fibonacci_bounds: tuple[FibonacciBoundVector, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_names(self) -> "VectorCatalog":
        """Имена категорий не повторяются"""
        names = self.category_names()
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate vector set names: {duplicates}")
        return self

    def category_names(self) -> list[str]:
        """Имена всех категорий в порядке каталога"""
        return [
            item.name
            for group in (
                self.boolean_sets,
                self.interval_counts,
                self.range_cross_checks,
                self.fibonacci_bounds,
            )
            for item in group
        ]

    def boolean_set(self, name: str) -> BooleanVectorSet:
        """
        Поиск BooleanVectorSet по имени.

        Raises:
            KeyError: Если набор не найден
        """
        for vector_set in self.boolean_sets:
            if vector_set.name == name:
                return vector_set
        raise KeyError(f"Boolean vector set not found: {name}")
