"""Modular arithmetic, integer roots and basic counting functions."""

from __future__ import annotations

import math
from collections.abc import Sequence

MOD = 1_000_000_007

IntMatrix = list[list[int]]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return a // gcd(a, b) * b


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def power(base: int, exp: int, mod: int = MOD) -> int:
    """``base ** exp`` modulo ``mod``; a non-positive exponent gives 1."""
    if exp <= 0:
        return 1
    return pow(base % mod, exp, mod)


def modinv(a: int, m: int = MOD) -> int:
    """Modular inverse of ``a`` modulo ``m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    g, x, _ = extgcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def modinv_fermat(a: int, mod: int = MOD) -> int:
    """Modular inverse by Fermat's little theorem (``mod`` must be prime)."""
    return power(a, mod - 2, mod)


def mulmod(a: int, b: int, mod: int) -> int:
    """``a * b`` modulo ``mod``."""
    return (a % mod) * (b % mod) % mod


def addmod(a: int, b: int, mod: int = MOD) -> int:
    """``a + b`` modulo ``mod``."""
    return ((a % mod) + (b % mod)) % mod


def submod(a: int, b: int, mod: int = MOD) -> int:
    """``a - b`` modulo ``mod``, always non-negative."""
    return ((a % mod) - (b % mod)) % mod


def binpow(base: int, exp: int) -> int:
    """``base ** exp`` by repeated squaring, without a modulus."""
    result = 1
    while exp > 0:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result


def matmul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> IntMatrix:
    """Product of two integer matrices modulo ``mod``."""
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) % mod for column in columns]
        for row in a
    ]


def _identity(n: int) -> IntMatrix:
    return [[int(i == j) for j in range(n)] for i in range(n)]


def matpow(mat: Sequence[Sequence[int]], exp: int, mod: int = MOD) -> IntMatrix:
    """Square matrix raised to ``exp`` modulo ``mod``."""
    result = _identity(len(mat))
    base = [list(row) for row in mat]
    while exp > 0:
        if exp & 1:
            result = matmul(result, base, mod)
        base = matmul(base, base, mod)
        exp >>= 1
    return result


def fibonacci(n: int, mod: int = MOD) -> int:
    """The ``n``-th Fibonacci number modulo ``mod``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    if n == 1:
        return 1
    return matpow([[1, 1], [1, 0]], n - 1, mod)[0][0]


def is_perfect_square(n: int) -> bool:
    """True if ``n`` is the square of an integer."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def isqrt(n: int) -> int:
    """Floor of the square root of ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def _kth_root(n: int, k: int) -> int:
    """Largest integer ``r`` with ``r ** k <= n`` for ``n >= 0``."""
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


def is_perfect_power(n: int, k: int) -> bool:
    """True if ``n == r ** k`` for some positive integer ``r``."""
    if k < 1:
        raise ValueError("k must be positive")
    if n <= 1:
        return n == 1
    return binpow(_kth_root(n, k), k) == n


def catalan(n: int, mod: int = MOD) -> int:
    """The ``n``-th Catalan number modulo a prime ``mod``."""
    if n <= 1:
        return 1
    result = 1
    for i in range(n):
        result = mulmod(result, 2 * n - i, mod)
        result = mulmod(result, modinv_fermat(i + 1, mod), mod)
    return mulmod(result, modinv_fermat(n + 1, mod), mod)


def binomial(n: int, k: int, mod: int = MOD) -> int:
    """Binomial coefficient ``C(n, k)`` modulo a prime ``mod``."""
    if k > n or k < 0:
        return 0
    if k == 0 or k == n:
        return 1
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = mulmod(result, n - i, mod)
        result = mulmod(result, modinv_fermat(i + 1, mod), mod)
    return result


def stirling2(n: int, k: int, mod: int = MOD) -> int:
    """Stirling number of the second kind ``S(n, k)`` modulo ``mod``."""
    if n == 0 and k == 0:
        return 1
    if n == 0 or k == 0 or k > n:
        return 0
    row = [1] + [0] * k
    for i in range(1, n + 1):
        new_row = [0] * (k + 1)
        for j in range(1, min(i, k) + 1):
            new_row[j] = addmod(mulmod(j, row[j], mod), row[j - 1], mod)
        row = new_row
    return row[k]