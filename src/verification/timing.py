"""
Timing — замер времени вызовов предикатов

Замена измерения стоимости исполнения: каждая проверка элемента
оборачивается в time_operation(), статистика агрегируется по имени операции.
"""

import logging
import statistics
import time
from typing import Dict, List

logger = logging.getLogger(__name__)


class TimingCollector:
    """Collect timing data for predicate calls."""

    def __init__(self, verbose: bool = False):
        self.timings: List[Dict] = []
        self.verbose = verbose
        self.active_timers: Dict[str, float] = {}

    def start_timer(self, operation: str) -> str:
        """Start timing an operation. Returns timer_id for ending."""
        timer_id = f"{operation}_{len(self.timings)}_{len(self.active_timers)}"
        self.active_timers[timer_id] = time.perf_counter()
        return timer_id

    def end_timer(self, timer_id: str, operation: str, **metadata) -> float:
        """End timing, record the result and return duration in ms."""
        end_time = time.perf_counter()
        start_time = self.active_timers.pop(timer_id, end_time)
        duration_ms = (end_time - start_time) * 1000

        self.timings.append({"operation": operation, "duration_ms": duration_ms, **metadata})

        if self.verbose:
            logger.info(f"Completed: {operation} in {duration_ms:.3f}ms")
        return duration_ms

    def time_operation(self, operation: str, **metadata) -> "TimingContext":
        """Context manager for timing operations."""
        return TimingContext(self, operation, **metadata)

    def get_stats(self) -> Dict[str, Dict[str, float]]:
        """Per-operation statistics: count, mean/median/min/max/std in ms."""
        grouped: Dict[str, List[float]] = {}
        for record in self.timings:
            grouped.setdefault(record["operation"], []).append(record["duration_ms"])

        stats = {}
        for operation, durations in grouped.items():
            stats[operation] = {
                "count": len(durations),
                "mean_ms": statistics.fmean(durations),
                "median_ms": statistics.median(durations),
                "min_ms": min(durations),
                "max_ms": max(durations),
                "std_ms": statistics.stdev(durations) if len(durations) > 1 else 0.0,
            }
        return stats

    def log_summary(self) -> None:
        """Log timing summary."""
        stats = self.get_stats()
        if not stats:
            logger.info("No timing data collected")
            return

        logger.info("=== TIMING SUMMARY ===")
        for operation, data in stats.items():
            logger.info(
                f"{operation:25s}: {data['mean_ms']:8.3f}ms avg, "
                f"{data['max_ms']:8.3f}ms max ({data['count']:4d} calls)"
            )


class TimingContext:
    """Context manager for timing operations."""

    def __init__(self, collector: TimingCollector, operation: str, **metadata):
        self.collector = collector
        self.operation = operation
        self.metadata = metadata
        self.timer_id: str | None = None
        self.duration_ms: float | None = None

    def __enter__(self) -> "TimingContext":
        self.timer_id = self.collector.start_timer(self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.timer_id:
            self.duration_ms = self.collector.end_timer(
                self.timer_id, self.operation, **self.metadata
            )
