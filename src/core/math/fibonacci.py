"""
Fibonacci — распознавание и генерация чисел Фибоначчи

F(0) = 0, F(1) = 1, F(k) = F(k-1) + F(k-2)

Модуль обеспечивает:
- is_fibonacci(n): точная проверка принадлежности последовательности
- fibonacci(k): F(k) методом fast doubling
- FibonacciSequence: перезапускаемый ленивый генератор
- largest_fibonacci_index(bits): наибольший k с F(k) <= 2^bits - 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка квадратов только через math.isqrt (без float)
2. Соседи F ± 1 числа Фибоначчи F >= 5 никогда не распознаются
3. Все операции корректны для целых произвольной величины

ФОРМУЛЫ:
    n ∈ F  ⇔  5n² + 4 или 5n² - 4 — точный квадрат
    F(2k)   = F(k) * (2F(k+1) - F(k))
    F(2k+1) = F(k)² + F(k+1)²
"""

from itertools import islice, takewhile
from typing import Iterator

from src.core.math.integer_safeguards import (
    IntegerDomainViolation,
    is_perfect_square,
    validate_integer,
    validate_non_negative_int,
)

# =============================================================================
# ПРОВЕРКА ПРИНАДЛЕЖНОСТИ
# =============================================================================


def is_fibonacci(n: int) -> bool:
    """
    Проверка, является ли n числом Фибоначчи.

    Алгоритм (тождество Gessel):
        n ∈ F ⇔ 5n² + 4 или 5n² − 4 — точный квадрат

    Args:
        n: Неотрицательное целое произвольной величины

    Returns:
        True если n = F(k) для некоторого k >= 0

    Raises:
        TypeError: Если n не int (в т.ч. bool, float)
        IntegerDomainViolation: Если n < 0

    Examples:
        >>> is_fibonacci(2880067194370816120)  # F(90)
        True
        >>> is_fibonacci(2880067194370816121)
        False
    """
    validate_non_negative_int(n, "n")

    t = 5 * n * n
    if is_perfect_square(t + 4):
        return True
    return t >= 4 and is_perfect_square(t - 4)


# =============================================================================
# ВЫЧИСЛЕНИЕ F(k)
# =============================================================================


def _fibonacci_pair(k: int) -> tuple[int, int]:
    """(F(k), F(k+1)) методом fast doubling."""
    a, b = 0, 1
    for bit in bin(k)[2:]:
        c = a * (2 * b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a, b


def fibonacci(k: int) -> int:
    """
    k-е число Фибоначчи F(k).

    O(log k) умножений больших целых.

    Raises:
        TypeError: Если k не int
        IntegerDomainViolation: Если k < 0

    Examples:
        >>> fibonacci(0), fibonacci(1), fibonacci(10)
        (0, 1, 55)
        >>> fibonacci(90)
        2880067194370816120
    """
    validate_non_negative_int(k, "k")
    return _fibonacci_pair(k)[0]


def fibonacci_index(n: int) -> int | None:
    """
    Индекс k такой, что F(k) == n, либо None.

    Для n == 1 возвращается наименьший индекс (1).
    """
    if not is_fibonacci(n):
        return None
    for index, value in enumerate(FibonacciSequence()):
        if value == n:
            return index
    raise AssertionError("unreachable")  # pragma: no cover


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТЬ
# =============================================================================


class FibonacciSequence:
    """
    Ленивая последовательность Фибоначчи 0, 1, 1, 2, 3, 5, ...

    Каждый вызов iter() начинает генерацию заново (перезапускаемая),
    состояние между обходами не разделяется.

    Args:
        limit: Последний выдаваемый индекс (включительно).
            None — бесконечная последовательность.
            FibonacciSequence(90) выдаёт 91 член: F(0) .. F(90).
    """

    def __init__(self, limit: int | None = None):
        if limit is not None:
            validate_non_negative_int(limit, "limit")
        self.limit = limit

    def __iter__(self) -> Iterator[int]:
        a, b = 0, 1
        index = 0
        while self.limit is None or index <= self.limit:
            yield a
            a, b = b, a + b
            index += 1

    def __repr__(self) -> str:
        return f"FibonacciSequence(limit={self.limit!r})"

    def take(self, count: int) -> list[int]:
        """Первые count членов (не более limit + 1)."""
        validate_non_negative_int(count, "count")
        return list(islice(self, count))

    def up_to(self, max_value: int) -> Iterator[int]:
        """Члены F(k) <= max_value, по возрастанию k."""
        validate_integer(max_value, "max_value")
        return takewhile(lambda value: value <= max_value, self)


def largest_fibonacci_index(bits: int = 256) -> int:
    """
    Наибольший индекс k, при котором F(k) помещается в bits бит без знака.

    Условие: F(k) <= 2^bits - 1 < F(k + 1)

    Args:
        bits: Разрядность (>= 1), по умолчанию 256

    Returns:
        Индекс k

    Raises:
        TypeError: Если bits не int
        IntegerDomainViolation: Если bits < 1

    Examples:
        >>> largest_fibonacci_index(62)
        90
        >>> largest_fibonacci_index(64)
        93
    """
    validate_integer(bits, "bits")
    if bits < 1:
        raise IntegerDomainViolation(f"bits must be >= 1, got {bits}")

    bound = 2**bits - 1
    index = -1
    for index, _ in enumerate(FibonacciSequence().up_to(bound)):
        pass
    return index
