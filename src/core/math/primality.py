"""
Primality — детерминированная проверка простоты

Модуль реализует точную проверку простоты для целых произвольной точности:
- Пробное деление на малые простые (быстрый отсев)
- Детерминированный Miller–Rabin с базами 2..41 (точен для n < 3.3e24)
- Baillie–PSW (strong MR base 2 + strong Lucas) для n выше этой границы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Strong pseudoprimes (2047, 3277, ...) и числа Кармайкла отвергаются
2. 0 и 1 не простые
3. Отрицательный или не-int вход → exception, а не bool
4. Только целочисленная арифметика (pow с модулем), без float
"""

from typing import Final

from src.core.math.integer_safeguards import (
    is_perfect_square,
    validate_non_negative_int,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Простые для пробного деления перед Miller–Rabin
SMALL_PRIMES: Final[tuple[int, ...]] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229,
)

# Базы детерминированного Miller–Rabin (первые 13 простых)
MILLER_RABIN_BASES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

# Граница, ниже которой MILLER_RABIN_BASES дают точный ответ
# (наименьший strong pseudoprime по всем 13 базам)
MILLER_RABIN_DETERMINISTIC_LIMIT: Final[int] = 3_317_044_064_679_887_385_961_981

_SMALL_PRIME_SQUARE_LIMIT: Final[int] = SMALL_PRIMES[-1] ** 2


# =============================================================================
# MILLER–RABIN
# =============================================================================


def _decompose(n: int) -> tuple[int, int]:
    """n - 1 = d * 2^s, d нечётное."""
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return d, s


def is_strong_probable_prime(n: int, base: int) -> bool:
    """
    Strong probable prime тест (один раунд Miller–Rabin).

    Args:
        n: Нечётное n > 2
        base: База теста, 2 <= base (берётся по модулю n)

    Returns:
        True если n — strong probable prime по базе base.
        False гарантирует, что n составное.
    """
    a = base % n
    if a == 0:
        return True

    d, s = _decompose(n)
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True

    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return True
    return False


# =============================================================================
# STRONG LUCAS (Selfridge method A)
# =============================================================================


def _jacobi(a: int, n: int) -> int:
    """Символ Якоби (a/n) для нечётного n > 0."""
    a %= n
    result = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def _selfridge_parameters(n: int) -> tuple[int, int, int] | None:
    """
    Поиск D в последовательности 5, -7, 9, -11, ... с (D/n) = -1.

    Returns:
        (D, P, Q) или None если найден нетривиальный делитель n
    """
    d = 5
    while True:
        j = _jacobi(d, n)
        if j == -1:
            return d, 1, (1 - d) // 4
        if j == 0 and abs(d) != n:
            return None
        d = -d - 2 if d > 0 else -d + 2


def is_strong_lucas_probable_prime(n: int) -> bool:
    """
    Strong Lucas probable prime тест с параметрами Selfridge.

    Args:
        n: Нечётное n > 2, не являющееся точным квадратом

    Returns:
        True если n — strong Lucas probable prime.
        False гарантирует, что n составное.
    """
    params = _selfridge_parameters(n)
    if params is None:
        return False
    disc, p, q = params

    # n + 1 = d * 2^s
    d = n + 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    # Бинарный подъём U_k, V_k, Q^k от старшего бита d
    u, v, qk = 1, p, q % n
    inv2 = (n + 1) // 2
    for bit in bin(d)[3:]:
        u, v = (u * v) % n, (v * v - 2 * qk) % n
        qk = (qk * qk) % n
        if bit == "1":
            u, v = ((p * u + v) * inv2) % n, ((disc * u + p * v) * inv2) % n
            qk = (qk * q) % n

    if u == 0 or v == 0:
        return True

    for _ in range(s - 1):
        v = (v * v - 2 * qk) % n
        if v == 0:
            return True
        qk = (qk * qk) % n
    return False


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Точная проверка простоты n.

    Алгоритм:
        1. n < 2 → False
        2. Пробное деление на SMALL_PRIMES
        3. n < 229^2 без малых делителей → True
        4. n < MILLER_RABIN_DETERMINISTIC_LIMIT → Miller–Rabin по 13 базам (точно)
        5. Иначе → Baillie–PSW

    Args:
        n: Неотрицательное целое произвольной величины

    Returns:
        True если n простое

    Raises:
        TypeError: Если n не int (в т.ч. bool, float)
        IntegerDomainViolation: Если n < 0

    Examples:
        >>> is_prime(281)
        True
        >>> is_prime(2047)  # strong pseudoprime по базе 2
        False
        >>> is_prime(3215031751)  # strong pseudoprime по базам 2, 3, 5, 7
        False
    """
    validate_non_negative_int(n, "n")

    if n < 2:
        return False

    for p in SMALL_PRIMES:
        if n % p == 0:
            return n == p

    if n < _SMALL_PRIME_SQUARE_LIMIT:
        return True

    if n < MILLER_RABIN_DETERMINISTIC_LIMIT:
        return all(is_strong_probable_prime(n, a) for a in MILLER_RABIN_BASES)

    # Baillie–PSW
    if not is_strong_probable_prime(n, 2):
        return False
    if is_perfect_square(n):
        return False
    return is_strong_lucas_probable_prime(n)
