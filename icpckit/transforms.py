"""Fast Fourier, number-theoretic and Walsh-Hadamard transforms."""

from __future__ import annotations

import cmath
import math
from collections.abc import Callable, Sequence
from itertools import zip_longest

MOD = 998244353
ROOT = 3


def _check_power_of_two(n: int) -> None:
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")


def _padded_size(total: int) -> int:
    return 1 if total <= 1 else 1 << (total - 1).bit_length()


def _bit_reverse(values: list) -> None:
    n = len(values)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            values[i], values[j] = values[j], values[i]


def _trim(values: list, is_zero: Callable[[object], bool]) -> list:
    while len(values) > 1 and is_zero(values[-1]):
        values.pop()
    return values


def fft(values: Sequence[complex], invert: bool = False) -> list[complex]:
    """Discrete Fourier transform of a power-of-two-length sequence."""
    a = [complex(v) for v in values]
    n = len(a)
    _check_power_of_two(n)
    _bit_reverse(a)
    length = 2
    while length <= n:
        angle = 2 * math.pi / length * (-1 if invert else 1)
        wlen = cmath.rect(1.0, angle)
        half = length // 2
        for start in range(0, n, length):
            w = 1 + 0j
            for j in range(start, start + half):
                u, v = a[j], a[j + half] * w
                a[j] = u + v
                a[j + half] = u - v
                w *= wlen
        length <<= 1
    if invert and n:
        a = [x / n for x in a]
    return a


def _fft_product(a: Sequence[float], b: Sequence[float]) -> list[complex]:
    n = _padded_size(len(a) + len(b))
    fa = fft(list(a) + [0] * (n - len(a)))
    fb = fft(list(b) + [0] * (n - len(b)))
    return fft([x * y for x, y in zip(fa, fb)], invert=True)


def fft_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two integer polynomials, trailing zeros removed."""
    result = [round(v.real) for v in _fft_product(a, b)]
    return _trim(result, lambda v: v == 0)


def convolution(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Convolution of two real sequences, trailing near-zeros removed."""
    result = [v.real for v in _fft_product(a, b)]
    return _trim(result, lambda v: abs(v) < 1e-9)


def ntt(values: Sequence[int], invert: bool = False) -> list[int]:
    """Number-theoretic transform modulo 998244353."""
    a = [v % MOD for v in values]
    n = len(a)
    _check_power_of_two(n)
    _bit_reverse(a)
    length = 2
    while length <= n:
        exponent = (MOD - 1) // length
        wlen = pow(ROOT, MOD - 1 - exponent if invert else exponent, MOD)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for j in range(start, start + half):
                u, v = a[j], a[j + half] * w % MOD
                a[j] = (u + v) % MOD
                a[j + half] = (u - v) % MOD
                w = w * wlen % MOD
        length <<= 1
    if invert and n:
        n_inv = pow(n, MOD - 2, MOD)
        a = [x * n_inv % MOD for x in a]
    return a


def ntt_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials modulo 998244353, trailing zeros removed."""
    n = _padded_size(len(a) + len(b))
    fa = ntt(list(a) + [0] * (n - len(a)))
    fb = ntt(list(b) + [0] * (n - len(b)))
    result = ntt([x * y % MOD for x, y in zip(fa, fb)], invert=True)
    return _trim(result, lambda v: v == 0)


def poly_add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise sum modulo 998244353."""
    return [(x + y) % MOD for x, y in zip_longest(a, b, fillvalue=0)]


def poly_subtract(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficient-wise difference modulo 998244353."""
    return [(x - y) % MOD for x, y in zip_longest(a, b, fillvalue=0)]


def poly_inverse(a: Sequence[int], n: int) -> list[int]:
    """First ``n`` coefficients of ``1 / a(x)`` modulo 998244353."""
    if n <= 0:
        return []
    if not a or a[0] % MOD == 0:
        raise ValueError("the constant term must be invertible")
    b = [pow(a[0], MOD - 2, MOD)]
    while len(b) < n:
        size = 2 * len(b)
        target = min(n, size)
        product = ntt_multiply(a[:size], b)[:size]
        b = poly_subtract(poly_add(b, b), ntt_multiply(product, b))[:target]
        b += [0] * (target - len(b))
    return b


def _div_toward_zero(x: int, n: int) -> int:
    q = abs(x) // n
    return q if x >= 0 else -q


def wht(values: Sequence[int], invert: bool = False) -> list[int]:
    """Walsh-Hadamard transform of a power-of-two-length integer sequence."""
    a = list(values)
    n = len(a)
    _check_power_of_two(n)
    length = 1
    while length < n:
        for start in range(0, n, 2 * length):
            for j in range(start, start + length):
                u, v = a[j], a[j + length]
                a[j] = u + v
                a[j + length] = u - v
        length <<= 1
    if invert and n:
        a = [_div_toward_zero(x, n) for x in a]
    return a


def xor_convolution(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """``c[k] = sum(a[i] * b[j] for i ^ j == k)``."""
    n = _padded_size(max(len(a), len(b)))
    fa = wht(list(a) + [0] * (n - len(a)))
    fb = wht(list(b) + [0] * (n - len(b)))
    return wht([x * y for x, y in zip(fa, fb)], invert=True)