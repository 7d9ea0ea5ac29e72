import math

import pytest

from icpckit import arithmetic as ar

PAIRS = [(48, 18), (17, 5), (0, 9), (9, 0), (1024, 768), (123456789, 987654321)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_math(a, b):
    assert ar.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_lcm_matches_math(a, b):
    assert ar.lcm(a, b) == math.lcm(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_extgcd_bezout_identity(a, b):
    g, x, y = ar.extgcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("base,exp,mod", [(2, 10, ar.MOD), (3, 200, 1000), (7, 0, 13), (-4, 5, 11)])
def test_power_matches_pow(base, exp, mod):
    assert ar.power(base, exp, mod) == pow(base, exp, mod)


@pytest.mark.parametrize("a,m", [(3, ar.MOD), (10, 17), (7, 40), (123, 1000)])
def test_modinv_is_inverse(a, m):
    inv = ar.modinv(a, m)
    assert 0 <= inv < m
    assert a * inv % m == 1


def test_modinv_without_inverse_raises():
    with pytest.raises(ValueError):
        ar.modinv(2, 4)


@pytest.mark.parametrize("a", [2, 3, 999, 123456])
def test_modinv_fermat_agrees(a):
    assert ar.modinv_fermat(a) == ar.modinv(a)


@pytest.mark.parametrize("a,b,m", [(10**12, 10**12 + 3, ar.MOD), (-5, 7, 13), (4, -9, 11)])
def test_modular_ops(a, b, m):
    assert ar.mulmod(a, b, m) == a * b % m
    assert ar.addmod(a, b, m) == (a + b) % m
    assert ar.submod(a, b, m) == (a - b) % m


@pytest.mark.parametrize("base,exp", [(2, 62), (3, 0), (-3, 5), (10, 20)])
def test_binpow_matches_power_operator(base, exp):
    assert ar.binpow(base, exp) == base ** exp


def test_matmul_with_identity():
    a = [[1, 2], [3, 4]]
    assert ar.matmul([[1, 0], [0, 1]], a) == a
    assert ar.matmul(a, [[1, 0], [0, 1]]) == a


def test_matpow_consistency():
    a = [[2, 1, 0], [1, 3, 1], [0, 1, 4]]
    assert ar.matpow(a, 0) == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert ar.matpow(a, 3) == ar.matmul(a, ar.matmul(a, a))
    assert ar.matpow(a, 7) == ar.matmul(ar.matpow(a, 3), ar.matpow(a, 4))


def test_fibonacci_base_cases():
    assert ar.fibonacci(0) == 0
    assert ar.fibonacci(1) == 1


@pytest.mark.parametrize("n", [0, 1, 5, 30, 1000, 10**15])
def test_fibonacci_recurrence(n):
    assert ar.fibonacci(n + 2) == (ar.fibonacci(n + 1) + ar.fibonacci(n)) % ar.MOD


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        ar.fibonacci(-1)


@pytest.mark.parametrize("r", [0, 1, 12, 99999, 10**9 + 7])
def test_perfect_square(r):
    assert ar.is_perfect_square(r * r)
    assert ar.is_perfect_square(r * r + 2) is (r == 0 and False)


def test_negative_is_not_perfect_square():
    assert not ar.is_perfect_square(-4)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 17, 10**18, 10**30 + 5])
def test_isqrt_matches_math(n):
    assert ar.isqrt(n) == math.isqrt(n)


def test_isqrt_negative_raises():
    with pytest.raises(ValueError):
        ar.isqrt(-1)


@pytest.mark.parametrize("r,k", [(2, 10), (3, 5), (10, 18), (7, 3), (123, 4)])
def test_is_perfect_power(r, k):
    assert ar.is_perfect_power(r ** k, k)
    assert not ar.is_perfect_power(r ** k + 1, k)


def test_is_perfect_power_of_one():
    assert ar.is_perfect_power(1, 5)
    assert not ar.is_perfect_power(0, 5)


@pytest.mark.parametrize("n", range(0, 25))
def test_catalan_matches_formula(n):
    assert ar.catalan(n) == math.comb(2 * n, n) // (n + 1) % ar.MOD


@pytest.mark.parametrize("n,k", [(10, 3), (50, 25), (1000, 7), (5, 0), (5, 5), (3, 5), (4, -1)])
def test_binomial_matches_math(n, k):
    expected = math.comb(n, k) % ar.MOD if 0 <= k <= n else 0
    assert ar.binomial(n, k) == expected


def test_stirling2_edges():
    assert ar.stirling2(0, 0) == 1
    assert ar.stirling2(3, 0) == 0
    assert ar.stirling2(3, 4) == 0


@pytest.mark.parametrize("n", range(1, 15))
def test_stirling2_recurrence(n):
    for k in range(1, n + 1):
        expected = (k * ar.stirling2(n - 1, k) + ar.stirling2(n - 1, k - 1)) % ar.MOD
        assert ar.stirling2(n, k) == expected