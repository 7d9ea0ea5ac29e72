"""Arithmetic functions, Chinese remaindering and quadratic residues."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .arithmetic import extgcd, modinv
from .primes import factorize


def _check_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be positive")


def phi(n: int) -> int:
    """Euler's totient of ``n``."""
    _check_positive(n)
    result = n
    for p, _ in factorize(n):
        result -= result // p
    return result


def phi_sieve(n: int) -> list[int]:
    """Totients of ``0..n`` by a sieve."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = list(range(n + 1))
    for i in range(2, n + 1):
        if result[i] == i:
            for j in range(i, n + 1, i):
                result[j] -= result[j] // i
    return result


def sum_phi(n: int) -> int:
    """Sum of the totients of ``1..n``."""
    if n < 1:
        return 0
    return sum(phi_sieve(n)[1:])


def count_divisors(n: int) -> int:
    """Number of positive divisors of ``n``."""
    _check_positive(n)
    return math.prod(e + 1 for _, e in factorize(n))


def sum_divisors(n: int) -> int:
    """Sum of the positive divisors of ``n``."""
    _check_positive(n)
    return math.prod((p ** (e + 1) - 1) // (p - 1) for p, e in factorize(n))


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in increasing order."""
    _check_positive(n)
    small, large = [], []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
    return small + large[::-1]


def sum_divisors_power(n: int, k: int) -> int:
    """``sigma_k(n)``: the sum of ``d ** k`` over the divisors ``d`` of ``n``."""
    _check_positive(n)
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return count_divisors(n)
    result = 1
    for p, e in factorize(n):
        pk = p ** k
        result *= (pk ** (e + 1) - 1) // (pk - 1)
    return result


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> tuple[int, int]:
    """Solve ``x = a_i (mod m_i)`` for pairwise coprime moduli.

    Returns ``(x, M)`` with ``M`` the product of the moduli. Raises
    ValueError when the moduli are not pairwise coprime.
    """
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli differ in length")
    total = math.prod(moduli)
    result = 0
    for a, m in zip(remainders, moduli):
        partial = total // m
        result = (result + a * partial * modinv(partial, m)) % total
    return result, total


def extended_crt(remainders: Sequence[int], moduli: Sequence[int]) -> tuple[int, int]:
    """Solve a system of congruences whose moduli need not be coprime.

    Returns ``(x, L)`` with ``L`` the lcm of the moduli. Raises ValueError
    when the system has no solution.
    """
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli differ in length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    x, lcm = remainders[0] % moduli[0], moduli[0]
    for a2, m2 in zip(remainders[1:], moduli[1:]):
        g = math.gcd(lcm, m2)
        diff = a2 - x
        if diff % g:
            raise ValueError("the congruences are inconsistent")
        _, p, _ = extgcd(lcm // g, m2 // g)
        combined = lcm // g * m2
        x = (x + lcm * (diff // g * p % (m2 // g))) % combined
        lcm = combined
    return x, lcm


def mobius(n: int) -> int:
    """Moebius function of ``n``."""
    _check_positive(n)
    factors = factorize(n)
    if any(e > 1 for _, e in factors):
        return 0
    return -1 if len(factors) % 2 else 1


def mobius_sieve(n: int) -> list[int]:
    """Moebius function of ``0..n`` by a sieve (entry 0 is meaningless)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    mu = [1] * (n + 1)
    composite = [False] * (n + 1)
    for i in range(2, n + 1):
        if not composite[i]:
            for j in range(i, n + 1, i):
                composite[j] = True
                mu[j] = -mu[j]
            for j in range(i * i, n + 1, i * i):
                mu[j] = 0
    return mu


def carmichael(n: int) -> int:
    """Carmichael function: the least ``e`` with ``a ** e = 1 (mod n)`` for all units."""
    _check_positive(n)
    result = 1
    for p, e in factorize(n):
        if p == 2:
            value = 1 if e == 1 else 2 if e == 2 else 2 ** (e - 2)
        else:
            value = p ** (e - 1) * (p - 1)
        result = math.lcm(result, value)
    return result


def jordan_totient(n: int, k: int) -> int:
    """Jordan's totient ``J_k(n)``."""
    _check_positive(n)
    result = n ** k
    for p, _ in factorize(n):
        result -= result // p ** k
    return result


def legendre(a: int, p: int) -> int:
    """Legendre symbol ``(a / p)`` for an odd prime ``p``."""
    if a % p == 0:
        return 0
    return 1 if pow(a, (p - 1) // 2, p) == 1 else -1


def jacobi(a: int, n: int) -> int:
    """Jacobi symbol ``(a / n)`` for a positive odd ``n``."""
    if n <= 0 or n % 2 == 0:
        raise ValueError("n must be a positive odd number")
    if math.gcd(a, n) != 1:
        return 0
    result = 1
    a %= n
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def is_quadratic_residue(a: int, p: int) -> bool:
    """True if ``a`` is a non-zero square modulo the prime ``p``."""
    return legendre(a, p) == 1


def modular_sqrt(a: int, p: int) -> int | None:
    """A square root of ``a`` modulo the prime ``p`` by Tonelli-Shanks.

    Returns None when ``a`` is not a non-zero quadratic residue.
    """
    if legendre(a, p) != 1:
        return None
    a %= p
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)
    z = 2
    while legendre(z, p) != -1:
        z += 1
    m = s
    c = pow(z, q, p)
    t = pow(a, q, p)
    r = pow(a, (q + 1) // 2, p)
    while t != 1:
        i, temp = 1, t * t % p
        while temp != 1:
            temp = temp * temp % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r