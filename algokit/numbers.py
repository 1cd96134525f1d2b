"""Number theory and combinatorics, with results taken modulo 1e9+7."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import NamedTuple

MOD = 1_000_000_007


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")


class _FactorialTable:
    """Factorials and inverse factorials modulo MOD, grown on demand."""

    def __init__(self) -> None:
        self._fact = [1]
        self._inv = [1]

    def _grow(self, n: int) -> None:
        old = len(self._fact)
        if n < old:
            return
        for i in range(old, n + 1):
            self._fact.append(self._fact[-1] * i % MOD)
        self._inv.extend([0] * (n + 1 - old))
        self._inv[n] = pow(self._fact[n], MOD - 2, MOD)
        for i in range(n, old, -1):
            self._inv[i - 1] = self._inv[i] * i % MOD

    def factorial(self, n: int) -> int:
        self._grow(n)
        return self._fact[n]

    def inverse_factorial(self, n: int) -> int:
        self._grow(n)
        return self._inv[n]


_FACTORIALS = _FactorialTable()


def exponentiation(base: int, exponent: int) -> int:
    """``base ** exponent`` modulo 1e9+7."""
    _require_non_negative("exponent", exponent)
    return pow(base, exponent, MOD)


def exponentiation_tower(base: int, middle: int, top: int) -> int:
    """``base ** (middle ** top)`` modulo 1e9+7, reducing the exponent by Fermat's theorem."""
    _require_non_negative("middle", middle)
    _require_non_negative("top", top)
    exponent = pow(middle, top, MOD - 1)
    return pow(base, exponent, MOD)


def _divisors(n: int) -> set[int]:
    found: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.update((i, n // i))
    return found


def count_divisors(n: int) -> int:
    """Number of positive divisors of ``n``."""
    _require_positive("n", n)
    return len(_divisors(n))


def sum_divisors(n: int) -> int:
    """Sum of the positive divisors of ``n``, modulo 1e9+7."""
    _require_positive("n", n)
    return sum(_divisors(n)) % MOD


def max_common_divisor(values: Sequence[int]) -> int:
    """Largest number dividing at least two of the values; 1 if there is no pair."""
    if not values:
        raise ValueError("values must not be empty")
    for value in values:
        _require_positive("value", value)
    largest = max(values)
    freq = Counter(values)
    for d in range(largest, 0, -1):
        if sum(freq[m] for m in range(d, largest + 1, d)) >= 2:
            return d
    return 1


class DivisorSummary(NamedTuple):
    """Count, sum and product of the divisors of a number, each modulo 1e9+7."""

    count: int
    total: int
    product: int


def divisor_analysis(factors: Iterable[tuple[int, int]]) -> DivisorSummary:
    """Summarise the divisors of the number given as ``(prime, exponent)`` pairs."""
    count = 1
    count_reduced = 1  # divisor count modulo MOD - 1, used as an exponent
    total = 1
    product = 1
    for prime, power in factors:
        if prime < 2:
            raise ValueError(f"prime must be at least 2, got {prime}")
        _require_non_negative("exponent", power)
        count = count * (power + 1) % MOD

        residue = prime % MOD
        if residue == 1:
            series = (power + 1) % MOD
        else:
            numerator = (pow(prime, power + 1, MOD) - 1) % MOD
            series = numerator * pow(residue - 1, MOD - 2, MOD) % MOD
        total = total * series % MOD

        triangle = power * (power + 1) // 2
        product = (
            pow(product, power + 1, MOD)
            * pow(prime, triangle * count_reduced, MOD)
            % MOD
        )
        count_reduced = count_reduced * (power + 1) % (MOD - 1)
    return DivisorSummary(count, total, product)


def _bounded_product(factors: Iterable[int], limit: int) -> int | None:
    result = 1
    for factor in factors:
        result *= factor
        if result > limit:
            return None
    return result


def count_prime_multiples(n: int, primes: Sequence[int]) -> int:
    """How many of 1..n are divisible by at least one of the primes."""
    _require_non_negative("n", n)
    for p in primes:
        _require_positive("prime", p)
    total = 0
    for size in range(1, len(primes) + 1):
        sign = 1 if size % 2 else -1
        for group in combinations(primes, size):
            product = _bounded_product(group, n)
            if product is not None:
                total += sign * (n // product)
    return total


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than ``n``."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def binomial(n: int, k: int) -> int:
    """``C(n, k)`` modulo 1e9+7; zero when ``k`` lies outside 0..n."""
    _require_non_negative("n", n)
    if k < 0 or k > n:
        return 0
    return (
        _FACTORIALS.factorial(n)
        * _FACTORIALS.inverse_factorial(k)
        % MOD
        * _FACTORIALS.inverse_factorial(n - k)
        % MOD
    )


def count_string_arrangements(text: str) -> int:
    """Distinct strings formed by reordering the characters of ``text``, modulo 1e9+7."""
    result = _FACTORIALS.factorial(len(text))
    for occurrences in Counter(text).values():
        result = result * _FACTORIALS.inverse_factorial(occurrences) % MOD
    return result


def distributing_apples(children: int, apples: int) -> int:
    """Ways to hand out identical apples among children, modulo 1e9+7."""
    _require_positive("children", children)
    _require_non_negative("apples", apples)
    return binomial(children + apples - 1, apples)


def derangements(n: int) -> int:
    """Permutations of ``n`` items leaving none in place, modulo 1e9+7."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    previous, current = 1, 0
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (previous + current) % MOD
    return current


def count_bracket_sequences(n: int) -> int:
    """Balanced bracket sequences of length ``n``, modulo 1e9+7."""
    _require_non_negative("n", n)
    if n % 2:
        return 0
    half = n // 2
    return (binomial(n, half) - binomial(n, half + 1)) % MOD


def count_bracket_completions(n: int, prefix: str) -> int:
    """Balanced bracket sequences of length ``n`` starting with ``prefix``, modulo 1e9+7."""
    _require_non_negative("n", n)
    if set(prefix) - {"(", ")"}:
        raise ValueError("prefix may contain only '(' and ')'")
    balance = 0
    for ch in prefix:
        balance += 1 if ch == "(" else -1
        if balance < 0:
            return 0
    if n % 2:
        return 0
    opens = prefix.count("(")
    closes = len(prefix) - opens
    half = n // 2
    remaining_open = half - opens
    remaining_close = half - closes
    if remaining_open < 0 or remaining_close < 0:
        return 0
    length = remaining_open + remaining_close
    return (binomial(length, remaining_open) - binomial(length, remaining_open - 1)) % MOD