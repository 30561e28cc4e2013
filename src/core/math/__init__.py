"""
Core math modules для Magic Numbers

Теоретико-числовые предикаты над целыми произвольной точности.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    IntegerDomainViolation,
    exact_isqrt,
    is_perfect_square,
    is_valid_integer,
    validate_integer,
    validate_interval_bounds,
    validate_non_negative_int,
)

# Primality
from src.core.math.primality import (
    MILLER_RABIN_BASES,
    MILLER_RABIN_DETERMINISTIC_LIMIT,
    SMALL_PRIMES,
    is_prime,
    is_strong_lucas_probable_prime,
    is_strong_probable_prime,
)

# Sieve
from src.core.math.sieve import (
    SIEVE_BASE_LIMIT,
    SIEVE_SEGMENT_SIZE,
    find_primes,
    iter_primes,
    primes_in_range,
    simple_sieve,
)

# Fibonacci
from src.core.math.fibonacci import (
    FibonacciSequence,
    fibonacci,
    fibonacci_index,
    is_fibonacci,
    largest_fibonacci_index,
)

__all__ = [
    # Integer Safeguards — Exceptions
    "IntegerDomainViolation",
    # Integer Safeguards — Functions
    "exact_isqrt",
    "is_perfect_square",
    "is_valid_integer",
    "validate_integer",
    "validate_interval_bounds",
    "validate_non_negative_int",
    # Primality — Constants
    "MILLER_RABIN_BASES",
    "MILLER_RABIN_DETERMINISTIC_LIMIT",
    "SMALL_PRIMES",
    # Primality — Functions
    "is_prime",
    "is_strong_lucas_probable_prime",
    "is_strong_probable_prime",
    # Sieve — Constants
    "SIEVE_BASE_LIMIT",
    "SIEVE_SEGMENT_SIZE",
    # Sieve — Functions
    "find_primes",
    "iter_primes",
    "primes_in_range",
    "simple_sieve",
    # Fibonacci — Types
    "FibonacciSequence",
    # Fibonacci — Functions
    "fibonacci",
    "fibonacci_index",
    "is_fibonacci",
    "largest_fibonacci_index",
]
