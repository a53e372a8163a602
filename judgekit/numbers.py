"""Number theory exercises: bases, primes, divisors and card sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from math import isqrt

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PICK_CARDS = 3


def sieve(limit: int) -> list[bool]:
    """Return flags for 0..limit telling which numbers are prime."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    flags = [True] * (limit + 1)
    for small in range(min(2, limit + 1)):
        flags[small] = False
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i::i] = [False] * len(range(i * i, limit + 1, i))
    return flags


def to_base(n: int, base: int) -> str:
    """Write the non-negative integer n in `base` using digits 0-9 and A-Z."""
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be within 2..{len(DIGITS)}")
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rest = divmod(n, base)
        digits.append(DIGITS[rest])
    return "".join(reversed(digits))


def from_base(digits: str, base: int) -> int:
    """Read a number written in `base` with digits 0-9 and A-Z."""
    result = 0
    for ch in digits:
        value = DIGITS.find(ch)
        if value < 0:
            raise ValueError(f"not a digit: {ch!r}")
        result = result * base + value
    return result


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of n in ascending order, with repetition."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def count_primes(values: Iterable[int]) -> int:
    """Return how many of `values` are prime."""
    items = list(values)
    flags = sieve(max([0, *items]))
    return sum(1 for value in items if value >= 2 and flags[value])


def prime_sum_and_min(low: int, high: int) -> tuple[int, int] | None:
    """Return the sum and the smallest of the primes in low..high, or None."""
    if high < low:
        return None
    flags = sieve(max(high, 1))
    primes = [i for i in range(max(low, 2), high + 1) if flags[i]]
    if not primes:
        return None
    return sum(primes), primes[0]


def smallest_generator(n: int) -> int:
    """Return the smallest m with m plus its digit sum equal to n, or 0."""
    for candidate in range(1, n):
        if candidate + sum(int(ch) for ch in str(candidate)) == n:
            return candidate
    return 0


def kth_divisor(n: int, k: int) -> int:
    """Return the k-th smallest divisor of n, or 0 when n has fewer."""
    if k < 1:
        raise ValueError("k must be positive")
    divisors = [d for d in range(1, n + 1) if n % d == 0]
    return divisors[k - 1] if k <= len(divisors) else 0


def divisibility(a: int, b: int) -> str:
    """Return 'multiple', 'factor' or 'neither' describing a against b."""
    if a % b == 0:
        return "multiple"
    if b % a == 0:
        return "factor"
    return "neither"


def perfect_number_report(n: int) -> str:
    """Describe whether n is perfect, listing its proper divisors if it is."""
    divisors = [d for d in range(1, n // 2 + 1) if n % d == 0]
    if divisors and sum(divisors) == n:
        return f"{n} = " + " + ".join(str(d) for d in divisors)
    return f"{n} is NOT perfect."


def closest_blackjack(cards: Sequence[int], limit: int) -> int:
    """Return the largest sum of three distinct cards not exceeding `limit`."""
    if len(cards) < PICK_CARDS:
        raise ValueError(f"at least {PICK_CARDS} cards are needed")
    sums = (sum(combo) for combo in combinations(cards, PICK_CARDS))
    best = max((total for total in sums if total <= limit), default=None)
    if best is None:
        raise ValueError("no three cards fit under the limit")
    return best