"""Verification Harness — прогон всех категорий против каталога векторов.

Порядок категорий:
1. interval_counts (find_primes)
2. boolean_sets (is_prime / is_fibonacci)
3. range_cross_checks (is_prime vs reference)
4. fibonacci_sequence (первые члены последовательности)
5. fibonacci_bounds (наибольший индекс под 2^bits - 1)

Harness только вызывает и сравнивает: входы и выходы модуля не мутируются.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from src.core.config import Config
from src.core.contracts.validators import DEFAULT_VECTORS_PATH, load_vector_catalog
from src.core.domain.vectors import VectorCatalog
from src.verification.checks import (
    BooleanVectorCheck,
    CheckResult,
    FibonacciBoundCheck,
    FibonacciSequenceCheck,
    IntervalCountCheck,
    RangeCrossCheck,
)
from src.verification.timing import TimingCollector

logger = logging.getLogger(__name__)

# Последний индекс в категории fibonacci_sequence: F(0) .. F(90)
FIBONACCI_SEQUENCE_LIMIT = 90


@lru_cache(maxsize=4)
def _load_catalog_cached(path: str) -> VectorCatalog:
    return load_vector_catalog(path)


def get_vector_catalog(path: Path | str | None = None) -> VectorCatalog:
    """Каталог векторов; загружается и валидируется один раз на путь."""
    resolved = Path(path) if path is not None else DEFAULT_VECTORS_PATH
    return _load_catalog_cached(str(resolved.resolve()))


@dataclass(frozen=True)
class VerificationReport:
    """Результат прогона всех категорий."""

    results: tuple[CheckResult, ...]
    timing_stats: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def failed_categories(self) -> list[str]:
        return [result.name for result in self.results if not result.passed]

    def result(self, name: str) -> CheckResult:
        """
        Результат категории по имени.

        Raises:
            KeyError: Если категория не найдена
        """
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(f"Category not found: {name}")


class VerificationHarness:
    """Последовательный прогон категорий проверок.

    Args:
        catalog: Каталог векторов (default: из config.VECTORS_PATH или
            contracts/vectors/magic_numbers.json)
        config: Настройки прогона (default: Config.from_env())
        fibonacci_sequence_limit: Последний индекс категории fibonacci_sequence
    """

    def __init__(
        self,
        catalog: Optional[VectorCatalog] = None,
        config: Optional[Config] = None,
        fibonacci_sequence_limit: int = FIBONACCI_SEQUENCE_LIMIT,
    ):
        self.config = config or Config.from_env()
        self.catalog = catalog if catalog is not None else get_vector_catalog(self.config.VECTORS_PATH)
        self.fibonacci_sequence_limit = fibonacci_sequence_limit
        self.timing = TimingCollector()

        extra_print = self.config.EXTRA_PRINT
        self._boolean_check = BooleanVectorCheck(self.timing, extra_print)
        self._interval_check = IntervalCountCheck(self.timing, extra_print)
        self._range_check = RangeCrossCheck(self.timing, extra_print)
        self._sequence_check = FibonacciSequenceCheck(self.timing, extra_print)
        self._bound_check = FibonacciBoundCheck(self.timing, extra_print)

    def run(self) -> VerificationReport:
        """Прогон всех категорий каталога."""
        results = []

        for vector in self.catalog.interval_counts:
            results.append(self._record(self._interval_check.evaluate(vector)))

        for vector_set in self.catalog.boolean_sets:
            results.append(self._record(self._boolean_check.evaluate(vector_set)))

        for vector in self.catalog.range_cross_checks:
            results.append(self._record(self._range_check.evaluate(vector)))

        results.append(self._record(self._sequence_check.evaluate(self.fibonacci_sequence_limit)))

        for vector in self.catalog.fibonacci_bounds:
            results.append(self._record(self._bound_check.evaluate(vector)))

        report = VerificationReport(results=tuple(results), timing_stats=self.timing.get_stats())
        if report.passed:
            logger.info(f"All {len(report.results)} categories passed")
        else:
            logger.error(f"Failed categories: {', '.join(report.failed_categories())}")
        return report

    def _record(self, result: CheckResult) -> CheckResult:
        if result.passed:
            logger.info(f"[{result.name}] {result.details}")
        else:
            logger.error(f"[{result.name}] {result.details}")
            for failure in result.failures:
                logger.error(f"[{result.name}] {failure.details}")
        return result
