"""
Тесты для доменных моделей: Interval и наборы тестовых векторов

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты интервала (0 <= from <= to)
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON (alias from/to)
5. Граничные случаи и невалидные данные
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import (
    BooleanVectorSet,
    FibonacciBoundVector,
    Interval,
    IntervalCountVector,
    PredicateName,
    RangeCrossCheckVector,
    VectorCatalog,
)


# =============================================================================
# INTERVAL TESTS
# =============================================================================


class TestInterval:
    """Тесты для модели Interval"""

    def test_create_by_field_name(self):
        interval = Interval(start=7098260, end=7098384)
        assert interval.start == 7098260
        assert interval.end == 7098384

    def test_create_by_alias(self):
        """JSON использует ключи from / to"""
        interval = Interval.model_validate({"from": 10, "to": 20})
        assert interval.as_tuple() == (10, 20)

    def test_single_point_interval(self):
        interval = Interval(start=5, end=5)
        assert interval.size == 1
        assert list(interval.integers()) == [5]

    def test_size_and_integers(self):
        interval = Interval(start=7112646, end=7112773)
        assert interval.size == 128
        assert len(interval.integers()) == 128
        assert interval.integers()[0] == 7112646
        assert interval.integers()[-1] == 7112773

    def test_contains(self):
        interval = Interval(start=10, end=20)
        assert 10 in interval
        assert 20 in interval
        assert 15 in interval
        assert 9 not in interval
        assert 21 not in interval
        assert "15" not in interval

    def test_reversed_interval_rejected(self):
        with pytest.raises(ValidationError, match="must be >= from"):
            Interval(start=20, end=10)

    def test_negative_bound_rejected(self):
        with pytest.raises(ValidationError):
            Interval(start=-1, end=10)

    def test_non_integer_bounds_rejected(self):
        """strict: float, str и bool не принимаются"""
        for bad in (1.0, "1", True):
            with pytest.raises(ValidationError):
                Interval(start=bad, end=10)

    def test_big_integer_bounds(self):
        interval = Interval(start=2**64, end=2**64 + 199)
        assert interval.size == 200

    def test_immutability(self):
        interval = Interval(start=1, end=2)
        with pytest.raises(ValidationError):
            interval.start = 0

    def test_json_roundtrip_uses_aliases(self):
        interval = Interval(start=3, end=7)
        data = json.loads(interval.model_dump_json(by_alias=True))
        assert data == {"from": 3, "to": 7}
        assert Interval.model_validate(data) == interval


# =============================================================================
# VECTOR MODEL TESTS
# =============================================================================


class TestBooleanVectorSet:
    """Тесты для модели BooleanVectorSet"""

    @pytest.fixture
    def pseudoprimes(self) -> BooleanVectorSet:
        return BooleanVectorSet(
            name="strong_pseudoprimes",
            predicate=PredicateName.IS_PRIME,
            expected=False,
            values=(2047, 3277, 4033),
        )

    def test_valid_set(self, pseudoprimes):
        assert pseudoprimes.predicate is PredicateName.IS_PRIME
        assert pseudoprimes.values == (2047, 3277, 4033)
        assert pseudoprimes.description == ""

    def test_predicate_from_string(self):
        vector_set = BooleanVectorSet.model_validate(
            {"name": "fibs", "predicate": "is_fibonacci", "expected": True, "values": [0, 1, 2]}
        )
        assert vector_set.predicate is PredicateName.IS_FIBONACCI
        assert vector_set.values == (0, 1, 2)

    def test_order_preserved(self):
        vector_set = BooleanVectorSet(name="x", predicate="is_prime", expected=True, values=(7, 3, 5))
        assert vector_set.values == (7, 3, 5)

    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            BooleanVectorSet(name="x", predicate="is_prime", expected=True, values=())

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            BooleanVectorSet(name="x", predicate="is_prime", expected=True, values=(2, -3))

    def test_non_integer_value_rejected(self):
        with pytest.raises(ValidationError):
            BooleanVectorSet(name="x", predicate="is_prime", expected=True, values=(2, 3.0))

    def test_unknown_predicate_rejected(self):
        with pytest.raises(ValidationError):
            BooleanVectorSet(name="x", predicate="is_square", expected=True, values=(4,))

    def test_expected_must_be_bool(self):
        with pytest.raises(ValidationError):
            BooleanVectorSet(name="x", predicate="is_prime", expected=1, values=(2,))

    def test_immutability(self, pseudoprimes):
        with pytest.raises(ValidationError):
            pseudoprimes.expected = True


class TestIntervalCountVector:
    """Тесты для модели IntervalCountVector"""

    def test_valid_vector(self):
        vector = IntervalCountVector.model_validate(
            {"name": "interval_prime_count", "interval": {"from": 7098260, "to": 7098384}, "expected_count": 12}
        )
        assert vector.interval.as_tuple() == (7098260, 7098384)
        assert vector.expected_count == 12

    def test_count_exceeding_interval_rejected(self):
        with pytest.raises(ValidationError, match="exceeds interval size"):
            IntervalCountVector(name="x", interval=Interval(start=0, end=9), expected_count=11)

    def test_count_equal_to_size_allowed(self):
        vector = IntervalCountVector(name="x", interval=Interval(start=2, end=3), expected_count=2)
        assert vector.expected_count == 2

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            IntervalCountVector(name="x", interval=Interval(start=0, end=9), expected_count=-1)

    def test_reversed_interval_rejected(self):
        with pytest.raises(ValidationError):
            IntervalCountVector.model_validate(
                {"name": "x", "interval": {"from": 10, "to": 1}, "expected_count": 0}
            )


class TestRangeCrossCheckVector:
    """Тесты для модели RangeCrossCheckVector"""

    def test_valid_vector(self):
        vector = RangeCrossCheckVector.model_validate(
            {"name": "range_cross_check", "interval": {"from": 7112646, "to": 7112773}}
        )
        assert vector.interval.size == 128


class TestFibonacciBoundVector:
    """Тесты для модели FibonacciBoundVector"""

    def test_valid_vector(self):
        vector = FibonacciBoundVector(name="fibonacci_bound_62_bit", bits=62, expected_index=90)
        assert vector.bits == 62
        assert vector.expected_index == 90

    def test_zero_bits_rejected(self):
        with pytest.raises(ValidationError):
            FibonacciBoundVector(name="x", bits=0, expected_index=0)

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            FibonacciBoundVector(name="x", bits=8, expected_index=-1)


# =============================================================================
# CATALOG TESTS
# =============================================================================


class TestVectorCatalog:
    """Тесты для модели VectorCatalog"""

    @pytest.fixture
    def catalog(self) -> VectorCatalog:
        return VectorCatalog(
            schema_version="1",
            boolean_sets=(
                BooleanVectorSet(name="true_primes", predicate="is_prime", expected=True, values=(2, 3, 5)),
                BooleanVectorSet(name="true_fibonacci", predicate="is_fibonacci", expected=True, values=(8, 13)),
            ),
            interval_counts=(
                IntervalCountVector(name="small_count", interval=Interval(start=0, end=10), expected_count=4),
            ),
            fibonacci_bounds=(FibonacciBoundVector(name="bound_8_bit", bits=8, expected_index=13),),
        )

    def test_defaults_are_empty(self):
        catalog = VectorCatalog(schema_version="1")
        assert catalog.boolean_sets == ()
        assert catalog.interval_counts == ()
        assert catalog.range_cross_checks == ()
        assert catalog.fibonacci_bounds == ()
        assert catalog.category_names() == []

    def test_category_names_in_order(self, catalog):
        assert catalog.category_names() == ["true_primes", "true_fibonacci", "small_count", "bound_8_bit"]

    def test_boolean_set_lookup(self, catalog):
        assert catalog.boolean_set("true_fibonacci").values == (8, 13)

    def test_boolean_set_missing(self, catalog):
        with pytest.raises(KeyError, match="not_there"):
            catalog.boolean_set("not_there")

    def test_duplicate_names_rejected(self):
        """Имена уникальны и между разными видами наборов"""
        with pytest.raises(ValidationError, match="Duplicate"):
            VectorCatalog(
                schema_version="1",
                boolean_sets=(
                    BooleanVectorSet(name="dup", predicate="is_prime", expected=True, values=(2,)),
                ),
                fibonacci_bounds=(FibonacciBoundVector(name="dup", bits=8, expected_index=13),),
            )

    def test_immutability(self, catalog):
        with pytest.raises(ValidationError):
            catalog.schema_version = "2"
