"""
Integer Safeguards — валидация целочисленного домена и точная арифметика

Модуль обеспечивает корректность всех теоретико-числовых операций:
- Валидация входов (только int, без bool/float/str)
- Domain restriction: неотрицательные целые, упорядоченные интервалы
- Точный целочисленный квадратный корень (math.isqrt) без float
- Быстрый отсев не-квадратов через квадратичные вычеты

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float никогда не используется для проверки квадратов (потеря точности > 2^53)
2. Невалидный вход никогда не превращается в произвольный bool
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================


def _residue_table(modulus: int) -> frozenset[int]:
    return frozenset((k * k) % modulus for k in range(modulus))


# Квадратичные вычеты: если n % m не в таблице, n точно не квадрат
_SQUARE_RESIDUES_64: Final[frozenset[int]] = _residue_table(64)
_SQUARE_RESIDUES_63: Final[frozenset[int]] = _residue_table(63)
_SQUARE_RESIDUES_65: Final[frozenset[int]] = _residue_table(65)
_SQUARE_RESIDUES_11: Final[frozenset[int]] = _residue_table(11)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerDomainViolation(ValueError):
    """
    Нарушение целочисленного домена.

    Возникает при:
    - отрицательном значении там, где требуется n >= 0
    - интервале с from > to
    - отрицательном индексе Фибоначчи или bits < 1
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_integer(value: object) -> bool:
    """
    Проверка, является ли значение валидным целым (int, но не bool).

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int и не bool

    Examples:
        >>> is_valid_integer(7)
        True
        >>> is_valid_integer(True)
        False
        >>> is_valid_integer(7.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_integer(value: object, name: str) -> int:
    """
    Валидация, что значение — целое число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
    """
    if not is_valid_integer(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    return value


def validate_non_negative_int(value: object, name: str) -> int:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int
        IntegerDomainViolation: Если value < 0
    """
    validate_integer(value, name)
    if value < 0:
        raise IntegerDomainViolation(f"{name} must be non-negative, got {value}")
    return value


def validate_interval_bounds(start: object, end: object) -> tuple[int, int]:
    """
    Валидация границ замкнутого интервала [start, end].

    Args:
        start: Нижняя граница (включительно)
        end: Верхняя граница (включительно)

    Returns:
        (start, end)

    Raises:
        TypeError: Если границы не int
        IntegerDomainViolation: Если граница < 0 или start > end
    """
    validate_non_negative_int(start, "from")
    validate_non_negative_int(end, "to")
    if start > end:
        raise IntegerDomainViolation(f"Interval bounds reversed: from={start} > to={end}")
    return start, end


# =============================================================================
# ТОЧНЫЕ КВАДРАТЫ
# =============================================================================


def exact_isqrt(n: int) -> int:
    """
    Точный целочисленный квадратный корень floor(sqrt(n)).

    В отличие от math.sqrt, корректен для любых n (в т.ч. > 2^53).

    Raises:
        TypeError: Если n не int
        IntegerDomainViolation: Если n < 0
    """
    validate_non_negative_int(n, "n")
    return math.isqrt(n)


def is_perfect_square(n: int) -> bool:
    """
    Проверка, является ли n точным квадратом.

    Алгоритм:
        1. Отсев по квадратичным вычетам mod 64, 63, 65, 11
           (отбрасывает ~99% не-квадратов без извлечения корня)
        2. r = isqrt(n), проверка r * r == n

    Args:
        n: Неотрицательное целое

    Returns:
        True если n = k^2 для некоторого целого k

    Examples:
        >>> is_perfect_square(0)
        True
        >>> is_perfect_square(2**200)
        True
        >>> is_perfect_square(2**200 + 1)
        False
    """
    validate_non_negative_int(n, "n")

    if (n & 63) not in _SQUARE_RESIDUES_64:
        return False

    r = n % 45045  # 63 * 65 * 11
    if r % 63 not in _SQUARE_RESIDUES_63:
        return False
    if r % 65 not in _SQUARE_RESIDUES_65:
        return False
    if r % 11 not in _SQUARE_RESIDUES_11:
        return False

    root = math.isqrt(n)
    return root * root == n
