"""Number exercises: digits, factorials, primes, bases and powers."""

from __future__ import annotations

import math


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; non-positive values give 0."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def factorial(n: int) -> int:
    """Return ``n!``; values below 1 give 1."""
    return math.prod(range(1, n + 1))


def n_cr(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items out of ``n``."""
    if r < 0 or r > n:
        raise ValueError("r must lie between 0 and n")
    return factorial(n) // (factorial(r) * factorial(n - r))


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    return sum(range(1, n + 1))


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    terms = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime by trial division up to ``n // 2``."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def primes_up_to(limit: int) -> list[int]:
    """Return the primes from 2 to ``limit`` inclusive."""
    return [candidate for candidate in range(2, limit + 1) if is_prime(candidate)]


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return their value."""
    if n < 0:
        raise ValueError("n must not be negative")
    value, weight = 0, 1
    while n > 0:
        n, bit = divmod(n, 10)
        if bit > 1:
            raise ValueError("binary digits must be 0 or 1")
        value += bit * weight
        weight *= 2
    return value


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in binary."""
    if n < 0:
        raise ValueError("n must not be negative")
    result, weight = 0, 1
    while n > 0:
        n, bit = divmod(n, 2)
        result += bit * weight
        weight *= 10
    return result


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; non-positive values give 0."""
    result = 0
    while n > 0:
        n, digit = divmod(n, 10)
        result = result * 10 + digit
    return result


def is_even(n: int) -> bool:
    """Tell whether ``n`` is even."""
    return n % 2 == 0


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer ``n`` by binary exponentiation."""
    if n == 0:
        return 1.0
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x == -1:
        return 1.0 if n % 2 == 0 else -1.0
    exponent = n
    if n < 0:
        x = 1 / x
        exponent = -n
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= x
        x *= x
        exponent //= 2
    return result