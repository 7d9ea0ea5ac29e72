"""Counting functions backed by precomputed factorial tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

MOD = 1_000_000_007
MAXN = 1_000_005


class FactorialTable:
    """Factorials and inverse factorials modulo a prime, up to ``size - 1``."""

    def __init__(self, size: int = MAXN, mod: int = MOD) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.mod = mod
        fact = [1] * size
        for i in range(1, size):
            fact[i] = fact[i - 1] * i % mod
        inv_fact = [1] * size
        inv_fact[-1] = pow(fact[-1], mod - 2, mod)
        for i in range(size - 1, 0, -1):
            inv_fact[i - 1] = inv_fact[i] * i % mod
        self._fact = fact
        self._inv_fact = inv_fact

    @property
    def size(self) -> int:
        return len(self._fact)

    def _check(self, n: int) -> None:
        if not 0 <= n < len(self._fact):
            raise ValueError(f"{n} is outside the table of size {len(self._fact)}")

    def factorial(self, n: int) -> int:
        """``n!`` modulo the table's modulus."""
        self._check(n)
        return self._fact[n]

    def binomial(self, n: int, k: int) -> int:
        """``C(n, k)``; zero when ``k`` is out of range."""
        if k > n or k < 0:
            return 0
        self._check(n)
        return self._fact[n] * self._inv_fact[k] % self.mod * self._inv_fact[n - k] % self.mod

    def permutations(self, n: int, k: int) -> int:
        """``P(n, k) = n! / (n - k)!``; zero when ``k`` is out of range."""
        if k > n or k < 0:
            return 0
        self._check(n)
        return self._fact[n] * self._inv_fact[n - k] % self.mod

    def catalan(self, n: int) -> int:
        """The ``n``-th Catalan number."""
        return self.binomial(2 * n, n) * pow(n + 1, self.mod - 2, self.mod) % self.mod

    def stirling2(self, n: int, k: int) -> int:
        """Stirling number of the second kind by the explicit formula."""
        if k > n or k == 0:
            return 0
        if k == 1 or k == n:
            return 1
        self._check(k)
        total = 0
        for i in range(k + 1):
            term = self.binomial(k, i) * pow(k - i, n, self.mod) % self.mod
            total = total - term if i % 2 else total + term
        return total % self.mod * self._inv_fact[k] % self.mod

    def stars_and_bars(self, n: int, k: int) -> int:
        """Ways to put ``n`` identical objects into ``k`` bins."""
        return self.binomial(n + k - 1, k - 1)

    def multinomial(self, counts: Iterable[int]) -> int:
        """``(k1 + ... + km)! / (k1! * ... * km!)``."""
        counts = list(counts)
        n = sum(counts)
        self._check(n)
        result = self._fact[n]
        for count in counts:
            self._check(count)
            result = result * self._inv_fact[count] % self.mod
        return result


def bell_numbers(n: int) -> list[int]:
    """Bell numbers ``B_0 .. B_n`` modulo ``MOD``, from the Bell triangle."""
    if n < 0:
        raise ValueError("n must be non-negative")
    row = [1]
    result = [1]
    for _ in range(n):
        new_row = [row[-1]]
        for value in row:
            new_row.append((new_row[-1] + value) % MOD)
        row = new_row
        result.append(row[0])
    return result


def derangement(n: int) -> int:
    """Number of permutations of ``n`` items with no fixed point, modulo ``MOD``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    previous, current = 1, 0
    for i in range(2, n + 1):
        previous, current = current, (i - 1) * (previous + current) % MOD
    return current


def lucas_binomial(n: int, k: int, p: int) -> int:
    """``C(n, k)`` modulo a prime ``p`` by Lucas' theorem."""
    result = 1
    while True:
        if k > n:
            return 0
        if k == 0 or k == n:
            return result
        n_digit, k_digit = n % p, k % p
        if k_digit > n_digit:
            return 0
        for i in range(k_digit):
            result = result * (n_digit - i) % p
            result = result * pow(i + 1, p - 2, p) % p
        n //= p
        k //= p


def inclusion_exclusion(sets: Sequence[int]) -> int:
    """Alternating sum over all non-empty selections, taking each
    selection's intersection size as the smallest of its sizes."""
    total = 0
    for size in range(1, len(sets) + 1):
        sign = 1 if size % 2 else -1
        for chosen in combinations(sets, size):
            total += sign * min(chosen)
    return total