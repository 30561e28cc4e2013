"""
Domain models and value objects.

Contains the interval and test-vector models consumed by the verification harness.
"""

from src.core.domain.interval import Interval
from src.core.domain.vectors import (
    BooleanVectorSet,
    FibonacciBoundVector,
    IntervalCountVector,
    PredicateName,
    RangeCrossCheckVector,
    VectorCatalog,
)

__all__ = [
    # Interval model
    "Interval",
    # Vector models
    "PredicateName",
    "BooleanVectorSet",
    "IntervalCountVector",
    "RangeCrossCheckVector",
    "FibonacciBoundVector",
    "VectorCatalog",
]
