import math

import pytest

from icpckit.number_theory import (
    carmichael,
    count_divisors,
    crt,
    divisors,
    extended_crt,
    is_quadratic_residue,
    jacobi,
    jordan_totient,
    legendre,
    mobius,
    mobius_sieve,
    modular_sqrt,
    phi,
    phi_sieve,
    sum_divisors,
    sum_divisors_power,
    sum_phi,
)
from icpckit.primes import primes_up_to


def test_phi_matches_sieve():
    table = phi_sieve(120)
    assert [phi(n) for n in range(1, 121)] == table[1:]


def test_phi_of_primes():
    for p in primes_up_to(200):
        assert phi(p) == p - 1


def test_phi_counts_coprime_residues():
    for n in (30, 36, 97, 100):
        assert phi(n) == sum(1 for a in range(1, n + 1) if math.gcd(a, n) == 1)


def test_sum_phi_matches_sieve():
    assert sum_phi(50) == sum(phi_sieve(50)[1:])
    assert sum_phi(0) == 0


def test_divisors_example():
    assert divisors(12) == [1, 2, 3, 4, 6, 12]


@pytest.mark.parametrize("n", [1, 2, 12, 36, 97, 360, 1001, 4096])
def test_divisor_functions_agree(n):
    ds = divisors(n)
    assert ds == sorted(ds)
    assert all(n % d == 0 for d in ds)
    assert count_divisors(n) == len(ds)
    assert sum_divisors(n) == sum(ds)
    assert sum_divisors_power(n, 0) == len(ds)
    assert sum_divisors_power(n, 1) == sum(ds)
    assert sum_divisors_power(n, 2) == sum(d * d for d in ds)


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


def test_crt_solves_system():
    remainders, moduli = [2, 3, 2], [3, 5, 7]
    x, total = crt(remainders, moduli)
    assert total == math.prod(moduli)
    assert 0 <= x < total
    assert all(x % m == a for a, m in zip(remainders, moduli))


def test_crt_rejects_non_coprime():
    with pytest.raises(ValueError):
        crt([1, 2], [4, 6])


def test_extended_crt_non_coprime():
    remainders, moduli = [2, 4], [4, 6]
    x, lcm = extended_crt(remainders, moduli)
    assert lcm == math.lcm(*moduli)
    assert all(x % m == a for a, m in zip(remainders, moduli))


def test_extended_crt_agrees_with_crt():
    remainders, moduli = [1, 4, 6], [5, 7, 11]
    assert extended_crt(remainders, moduli) == crt(remainders, moduli)


def test_extended_crt_inconsistent():
    with pytest.raises(ValueError):
        extended_crt([1, 2], [4, 6])


def test_mobius_example():
    assert mobius(12) == 0


def test_mobius_matches_sieve():
    table = mobius_sieve(200)
    assert [mobius(n) for n in range(1, 201)] == table[1:]


def test_mobius_sums_over_divisors():
    for n in range(2, 100):
        assert sum(mobius(d) for d in divisors(n)) == 0


@pytest.mark.parametrize("n", range(1, 61))
def test_carmichael_is_least_universal_exponent(n):
    lam = carmichael(n)
    units = [a for a in range(1, n + 1) if math.gcd(a, n) == 1]
    assert all(pow(a, lam, n) == 1 % n for a in units)
    for e in range(1, lam):
        assert not all(pow(a, e, n) == 1 % n for a in units)
    assert phi(n) % lam == 0


@pytest.mark.parametrize("n", [1, 6, 12, 30, 49, 100])
def test_jordan_totient(n):
    assert jordan_totient(n, 1) == phi(n)
    for k in (1, 2, 3):
        assert sum(jordan_totient(d, k) for d in divisors(n)) == n ** k


@pytest.mark.parametrize("p", [3, 7, 13, 17, 41])
def test_legendre_against_squares(p):
    squares = {x * x % p for x in range(1, p)}
    for a in range(1, p):
        expected = 1 if a in squares else -1
        assert legendre(a, p) == expected
        assert is_quadratic_residue(a, p) == (a in squares)
    assert legendre(2 * p, p) == 0


def test_jacobi_example():
    assert jacobi(3, 9) == 0


def test_jacobi_equals_legendre_for_primes():
    for p in primes_up_to(60)[1:]:
        for a in range(1, p):
            assert jacobi(a, p) == legendre(a, p)


def test_jacobi_is_multiplicative_in_modulus():
    for a in range(1, 30):
        assert jacobi(a, 15 * 7) == jacobi(a, 15) * jacobi(a, 7)


def test_jacobi_rejects_even_modulus():
    with pytest.raises(ValueError):
        jacobi(3, 10)


@pytest.mark.parametrize("p", [7, 13, 17, 41, 97, 998244353, 1000000007])
def test_modular_sqrt_squares_back(p):
    for a in range(1, 60):
        root = modular_sqrt(a, p)
        if is_quadratic_residue(a, p):
            assert root is not None and root * root % p == a % p
        else:
            assert root is None