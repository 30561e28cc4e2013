"""
Reference — независимая эталонная проверка простоты для сверки

Намеренно простой алгоритм (пробное деление 6k ± 1 до isqrt(n)), не
разделяющий кода с src.core.math.primality. Граница деления считается
через math.isqrt: float sqrt теряет точность при n > 2^53.
"""

import math


def reference_is_prime(n: int) -> bool:
    """
    Эталонная проверка простоты пробным делением.

    O(sqrt(n)); предназначена для n порядка 10^7 и ниже.
    Невалидный вход (не int, bool, n < 2) → False.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = math.isqrt(n)
    i = 5
    while i <= limit:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def reference_prime_count(start: int, end: int) -> int:
    """Число простых в [start, end] по reference_is_prime."""
    return sum(1 for k in range(start, end + 1) if reference_is_prime(k))
