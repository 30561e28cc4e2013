"""Checks — категории проверок числовых предикатов.

Каждая проверка:
- Stateless по отношению к проверяемым входам (только вызывает и сравнивает)
- Проверяет каждый элемент категории отдельно
- Возвращает frozen CheckResult со списком локализованных CheckFailure

Категории:
- BooleanVectorCheck: набор значений → ожидаемый bool предиката
- IntervalCountCheck: find_primes(from, to) == expected_count + сверка с is_prime
- RangeCrossCheck: is_prime(k) == reference_is_prime(k) для каждого k
- FibonacciSequenceCheck: первые члены FibonacciSequence распознаются is_fibonacci
- FibonacciBoundCheck: наибольший индекс F(k) <= 2^bits - 1
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.core.domain.vectors import (
    BooleanVectorSet,
    FibonacciBoundVector,
    IntervalCountVector,
    PredicateName,
    RangeCrossCheckVector,
)
from src.core.math.fibonacci import (
    FibonacciSequence,
    fibonacci,
    is_fibonacci,
    largest_fibonacci_index,
)
from src.core.math.primality import is_prime
from src.core.math.sieve import find_primes, primes_in_range
from src.verification.reference import reference_is_prime
from src.verification.timing import TimingCollector

logger = logging.getLogger(__name__)

Predicate = Callable[[int], bool]

PREDICATES: dict[PredicateName, Predicate] = {
    PredicateName.IS_PRIME: is_prime,
    PredicateName.IS_FIBONACCI: is_fibonacci,
}

# Соседи F(k) ± 1 не являются числами Фибоначчи начиная с этого индекса
FIBONACCI_NEIGHBOUR_MIN_INDEX = 5


@dataclass(frozen=True)
class CheckFailure:
    """Несовпадение для одного входа."""

    value: object
    expected: object
    actual: object
    details: str


@dataclass(frozen=True)
class CheckResult:
    """Результат одной категории."""

    name: str
    kind: str
    passed: bool
    checked: int
    failures: tuple[CheckFailure, ...]
    details: str


def _build_result(name: str, kind: str, checked: int, failures: list[CheckFailure], summary: str) -> CheckResult:
    passed = not failures
    status = "PASS" if passed else f"FAIL ({len(failures)} of {checked})"
    return CheckResult(
        name=name,
        kind=kind,
        passed=passed,
        checked=checked,
        failures=tuple(failures),
        details=f"{status}: {summary}",
    )


class _TimedCheck:
    """Общая часть проверок: замер вызовов и диагностический вывод."""

    def __init__(self, timing: Optional[TimingCollector] = None, extra_print: bool = False):
        self.timing = timing or TimingCollector()
        self.extra_print = extra_print

    def _call(self, operation: str, fn: Callable[..., object], *args: int) -> object:
        """Вызов fn(*args) с замером; domain-ошибки возвращаются как текст."""
        with self.timing.time_operation(operation) as timer:
            try:
                result = fn(*args)
            except (TypeError, ValueError) as e:
                result = f"{type(e).__name__}: {e}"
        if self.extra_print:
            logger.info(f"{operation}{args} -> {result} ({timer.duration_ms:.3f}ms)")
        return result

    def _fibonacci_term_failures(self, index: int, term: int) -> list[CheckFailure]:
        """F(k) распознаётся; F(k) ± 1 отвергаются (для k >= 5)."""
        failures = []
        actual = self._call("is_fibonacci", is_fibonacci, term)
        if actual is not True:
            failures.append(
                CheckFailure(value=term, expected=True, actual=actual, details=f"bad Fib? F({index}) = {term}")
            )

        if index >= FIBONACCI_NEIGHBOUR_MIN_INDEX:
            for neighbour in (term - 1, term + 1):
                actual = self._call("is_fibonacci", is_fibonacci, neighbour)
                if actual is not False:
                    failures.append(
                        CheckFailure(
                            value=neighbour,
                            expected=False,
                            actual=actual,
                            details=f"good Fib? {neighbour} is a neighbour of F({index})",
                        )
                    )
        return failures


# =============================================================================
# VECTOR SETS
# =============================================================================


class BooleanVectorCheck(_TimedCheck):
    """Проверка набора значений с общим ожидаемым bool.

    Ни одного частичного зачёта: любое несовпадение проваливает категорию,
    но каждый элемент проверяется и отчитывается отдельно.
    """

    def evaluate(self, vector_set: BooleanVectorSet) -> CheckResult:
        predicate = PREDICATES[vector_set.predicate]
        operation = vector_set.predicate.value
        failures = []

        for value in vector_set.values:
            actual = self._call(operation, predicate, value)
            if actual is not vector_set.expected:
                failures.append(
                    CheckFailure(
                        value=value,
                        expected=vector_set.expected,
                        actual=actual,
                        details=f"{operation}({value}) returned {actual}, expected {vector_set.expected}",
                    )
                )

        return _build_result(
            vector_set.name,
            "boolean_set",
            len(vector_set.values),
            failures,
            f"{operation} == {vector_set.expected} for {len(vector_set.values)} values",
        )


# =============================================================================
# PRIME COUNTING
# =============================================================================


class IntervalCountCheck(_TimedCheck):
    """find_primes(from, to) == expected_count.

    Дополнительно сверяет решето с поэлементным is_prime: каждое k, по
    которому они расходятся, отчитывается отдельно.
    """

    def evaluate(self, vector: IntervalCountVector) -> CheckResult:
        start, end = vector.interval.as_tuple()
        failures = []

        count = self._call("find_primes", find_primes, start, end)
        if count != vector.expected_count:
            failures.append(
                CheckFailure(
                    value=(start, end),
                    expected=vector.expected_count,
                    actual=count,
                    details=f"find_primes({start}, {end}) returned {count}, expected {vector.expected_count}",
                )
            )

        sieved = set(primes_in_range(start, end))
        for k in vector.interval.integers():
            actual = self._call("is_prime", is_prime, k)
            if actual is not (k in sieved):
                failures.append(
                    CheckFailure(
                        value=k,
                        expected=k in sieved,
                        actual=actual,
                        details=f"is_prime({k}) disagrees with sieve",
                    )
                )

        return _build_result(
            vector.name,
            "interval_count",
            vector.interval.size + 1,
            failures,
            f"find_primes({start}, {end}) == {vector.expected_count}",
        )


class RangeCrossCheck(_TimedCheck):
    """is_prime(k) совпадает с независимым reference_is_prime(k) для всех k."""

    def evaluate(self, vector: RangeCrossCheckVector) -> CheckResult:
        failures = []
        primes = 0

        for k in vector.interval.integers():
            expected = reference_is_prime(k)
            actual = self._call("is_prime", is_prime, k)
            if expected:
                primes += 1
            if actual is not expected:
                failures.append(
                    CheckFailure(
                        value=k,
                        expected=expected,
                        actual=actual,
                        details=f"bad prime {k}: is_prime returned {actual}",
                    )
                )

        start, end = vector.interval.as_tuple()
        return _build_result(
            vector.name,
            "range_cross_check",
            vector.interval.size,
            failures,
            f"{primes} primes in [{start}, {end}] agree with reference",
        )


# =============================================================================
# FIBONACCI
# =============================================================================


class FibonacciSequenceCheck(_TimedCheck):
    """Первые limit + 1 членов: is_fibonacci, соседи и fibonacci(k)."""

    def evaluate(self, limit: int = 90, name: str = "fibonacci_sequence") -> CheckResult:
        failures = []
        checked = 0

        for index, term in enumerate(FibonacciSequence(limit)):
            checked += 1
            failures.extend(self._fibonacci_term_failures(index, term))
            direct = fibonacci(index)
            if direct != term:
                failures.append(
                    CheckFailure(
                        value=index,
                        expected=term,
                        actual=direct,
                        details=f"fibonacci({index}) disagrees with sequence",
                    )
                )

        return _build_result(name, "fibonacci_sequence", checked, failures, f"F(0) .. F({limit})")


class FibonacciBoundCheck(_TimedCheck):
    """Наибольший индекс k: F(k) <= 2^bits - 1, по локальной генерации."""

    def evaluate(self, vector: FibonacciBoundVector) -> CheckResult:
        bound = 2**vector.bits - 1
        failures = []

        last_index = -1
        for last_index, term in enumerate(FibonacciSequence().up_to(bound)):
            failures.extend(self._fibonacci_term_failures(last_index, term))

        if last_index != vector.expected_index:
            failures.append(
                CheckFailure(
                    value=vector.bits,
                    expected=vector.expected_index,
                    actual=last_index,
                    details=f"largest Fibonacci index under 2^{vector.bits} - 1 is {last_index}",
                )
            )

        module_index = self._call("largest_fibonacci_index", largest_fibonacci_index, vector.bits)
        if module_index != vector.expected_index:
            failures.append(
                CheckFailure(
                    value=vector.bits,
                    expected=vector.expected_index,
                    actual=module_index,
                    details=f"largest_fibonacci_index({vector.bits}) returned {module_index}",
                )
            )

        return _build_result(
            vector.name,
            "fibonacci_bound",
            last_index + 1,
            failures,
            f"F({vector.expected_index}) is the largest Fibonacci number below 2^{vector.bits}",
        )
