"""
Sieve — подсчёт простых в замкнутом интервале [from, to]

Сегментированное решето Эратосфена:
- Базовые простые до isqrt(to) — обычным решетом
- Интервал обрабатывается сегментами фиксированного размера (память O(segment))
- Если isqrt(to) > SIEVE_BASE_LIMIT, базовое решето слишком дорого →
  поэлементная проверка через is_prime

ИНВАРИАНТ:
    find_primes(a, b) == sum(is_prime(k) for k in range(a, b + 1))
"""

import math
from typing import Final, Iterator

from src.core.math.integer_safeguards import validate_interval_bounds
from src.core.math.primality import is_prime

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальный isqrt(to), при котором строится базовое решето
SIEVE_BASE_LIMIT: Final[int] = 2**24

# Размер сегмента (байт bytearray на сегмент)
SIEVE_SEGMENT_SIZE: Final[int] = 2**18


# =============================================================================
# РЕШЕТО
# =============================================================================


def simple_sieve(limit: int) -> list[int]:
    """
    Все простые p <= limit (обычное решето Эратосфена).

    Examples:
        >>> simple_sieve(30)
        [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    """
    if limit < 2:
        return []

    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(flags) if flag]


def _sieve_segment(low: int, high: int, base_primes: list[int]) -> bytearray:
    """Флаги простоты для [low, high): 1 — простое."""
    size = high - low
    flags = bytearray([1]) * size

    for p in base_primes:
        square = p * p
        if square >= high:
            break
        first = max(square, -(-low // p) * p)
        offset = first - low
        flags[offset::p] = bytes(len(range(offset, size, p)))

    # 0 и 1 не простые
    for k in range(low, min(2, high)):
        flags[k - low] = 0
    return flags


def _segments(start: int, end: int) -> Iterator[tuple[int, bytearray]]:
    """Сегменты [low, high) покрывающие [start, end] с их флагами."""
    base_primes = simple_sieve(math.isqrt(end))
    low = start
    stop = end + 1
    while low < stop:
        high = min(low + SIEVE_SEGMENT_SIZE, stop)
        yield low, _sieve_segment(low, high, base_primes)
        low = high


def _sieve_applicable(end: int) -> bool:
    return math.isqrt(end) <= SIEVE_BASE_LIMIT


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def iter_primes(start: int, end: int) -> Iterator[int]:
    """
    Итератор по простым в [start, end] в порядке возрастания.

    Raises:
        TypeError: Если границы не int
        IntegerDomainViolation: Если граница < 0 или start > end
    """
    validate_interval_bounds(start, end)

    if not _sieve_applicable(end):
        yield from (k for k in range(start, end + 1) if is_prime(k))
        return

    for low, flags in _segments(start, end):
        for offset, flag in enumerate(flags):
            if flag:
                yield low + offset


def primes_in_range(start: int, end: int) -> list[int]:
    """Список простых в [start, end] (по возрастанию)."""
    return list(iter_primes(start, end))


def find_primes(start: int, end: int) -> int:
    """
    Количество простых в замкнутом интервале [start, end].

    Args:
        start: Нижняя граница (включительно), >= 0
        end: Верхняя граница (включительно), >= start

    Returns:
        Число простых p, start <= p <= end

    Raises:
        TypeError: Если границы не int
        IntegerDomainViolation: Если граница < 0 или start > end

    Examples:
        >>> find_primes(0, 100)
        25
        >>> find_primes(7098260, 7098384)
        12
    """
    validate_interval_bounds(start, end)

    if not _sieve_applicable(end):
        return sum(1 for k in range(start, end + 1) if is_prime(k))

    return sum(flags.count(1) for _, flags in _segments(start, end))
