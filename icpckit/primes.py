"""Primality tests, sieves and integer factorisation."""

from __future__ import annotations

import math
from collections.abc import Sequence

WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int) -> bool:
    """Primality by trial division over ``6k +/- 1``."""
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


def miller_rabin(n: int, a: int) -> bool:
    """One Miller-Rabin round: True if ``n`` is a probable prime to base ``a``."""
    if n <= 1 or a <= 1 or a >= n:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(r - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_prime_mr(n: int) -> bool:
    """Deterministic Miller-Rabin test with the first twelve prime bases."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    for a in WITNESSES:
        if a >= n:
            break
        if not miller_rabin(n, a):
            return False
    return True


def sieve(n: int) -> list[bool]:
    """Sieve of Eratosthenes: entry ``i`` tells whether ``i`` is prime."""
    if n < 0:
        raise ValueError("n must be non-negative")
    flags = [True] * (n + 1)
    for i in range(min(2, n + 1)):
        flags[i] = False
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return flags


def _linear_sieve(n: int) -> tuple[list[int], list[int]]:
    spf = [0] * (n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if spf[i] == 0:
            spf[i] = i
            primes.append(i)
        for p in primes:
            if p > spf[i] or i * p > n:
                break
            spf[i * p] = p
    return spf, primes


def linear_sieve(n: int) -> list[int]:
    """All primes up to ``n`` by the linear sieve."""
    return _linear_sieve(n)[1]


def smallest_prime_factors(n: int) -> list[int]:
    """Smallest prime factor of every integer up to ``n`` (0 for 0 and 1)."""
    return _linear_sieve(n)[0]


def primes_up_to(n: int) -> list[int]:
    """All primes up to ``n``, in increasing order."""
    if n < 2:
        return []
    return [i for i, flag in enumerate(sieve(n)) if flag]


def factorize(n: int) -> list[tuple[int, int]]:
    """Prime factorisation by trial division, as ``(prime, exponent)`` pairs."""
    factors = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            count = 0
            while n % i == 0:
                n //= i
                count += 1
            factors.append((i, count))
        i += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def factorize_with_spf(n: int, spf: Sequence[int]) -> list[tuple[int, int]]:
    """Prime factorisation using a table of smallest prime factors."""
    factors = []
    while n > 1:
        p = spf[n]
        count = 0
        while n % p == 0:
            n //= p
            count += 1
        factors.append((p, count))
    return factors


def pollard_rho(n: int) -> int:
    """A divisor of ``n`` found by Pollard's rho; ``n`` itself on failure."""
    if n % 2 == 0:
        return 2
    for c in range(1, n):
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = math.gcd(abs(x - y), n)
        if d != n:
            return d
    return n


def factorize_rho(n: int) -> list[int]:
    """Sorted list of prime factors of ``n``, with multiplicity."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    pending = [n]
    while pending:
        num = pending.pop()
        if num == 1:
            continue
        if is_prime_mr(num):
            factors.append(num)
            continue
        d = pollard_rho(num)
        pending.extend((d, num // d))
    return sorted(factors)


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Entry ``i`` tells whether ``low + i`` is prime, for ``low..high``."""
    if high < low:
        return []
    flags = [True] * (high - low + 1)
    for p in primes_up_to(math.isqrt(high) if high > 0 else 0):
        start = max(p * p, (low + p - 1) // p * p)
        if start <= high:
            flags[start - low :: p] = [False] * len(range(start, high + 1, p))
    for value in range(low, min(2, high + 1)):
        flags[value - low] = False
    return flags


def count_primes(n: int) -> int:
    """Number of primes not exceeding ``n``."""
    if n < 2:
        return 0
    return sum(segmented_sieve(2, n))


def next_prime(n: int) -> int:
    """Smallest prime greater than ``n``."""
    if n < 2:
        return 2
    n += 1
    while not is_prime_mr(n):
        n += 1
    return n


def prev_prime(n: int) -> int:
    """Largest prime smaller than ``n``; ValueError if there is none."""
    n -= 1
    while n >= 2 and not is_prime_mr(n):
        n -= 1
    if n < 2:
        raise ValueError("there is no prime below 2")
    return n


def _kth_root(n: int, k: int) -> int:
    if n < 2:
        return n
    lo, hi = 1, 1 << (n.bit_length() // k + 1)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if mid ** k <= n:
            lo = mid
        else:
            hi = mid - 1
    return lo


def prime_power(n: int) -> tuple[int, int] | None:
    """``(p, k)`` with ``n == p ** k`` and ``p`` prime, or None."""
    if n <= 1:
        return None
    for k in range(2, max(60, n.bit_length()) + 1):
        root = _kth_root(n, k)
        if root < 2:
            break
        if root ** k == n and is_prime_mr(root):
            return root, k
    if is_prime_mr(n):
        return n, 1
    return None


def twin_primes(n: int) -> list[tuple[int, int]]:
    """Pairs ``(p, p + 2)`` of primes with ``p + 2 <= n``."""
    if n < 5:
        return []
    flags = sieve(n)
    return [(i, i + 2) for i in range(3, n - 1) if flags[i] and flags[i + 2]]


def goldbach(n: int) -> tuple[int, int] | None:
    """Two primes summing to the even number ``n``, smallest first, or None."""
    if n <= 2 or n % 2 != 0:
        return None
    flags = sieve(n)
    for i in range(2, n // 2 + 1):
        if flags[i] and flags[n - i]:
            return i, n - i
    return None