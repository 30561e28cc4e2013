"""Verification — прогон числовых предикатов против фиксированных векторов.

- checks: категории проверок с локализованными несовпадениями
- harness: последовательный прогон каталога
- reference: независимая эталонная проверка простоты
- timing: замер времени вызовов
"""

from .checks import CheckFailure, CheckResult
from .harness import VerificationHarness, VerificationReport, get_vector_catalog

__all__ = [
    "CheckFailure",
    "CheckResult",
    "VerificationHarness",
    "VerificationReport",
    "get_vector_catalog",
]
