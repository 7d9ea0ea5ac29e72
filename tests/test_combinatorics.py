import math
from itertools import permutations

import pytest

from icpckit import arithmetic
from icpckit.combinatorics import (
    MOD,
    FactorialTable,
    bell_numbers,
    derangement,
    inclusion_exclusion,
    lucas_binomial,
)


@pytest.fixture(scope="module")
def table():
    return FactorialTable(300)


@pytest.mark.parametrize("n", [0, 1, 10, 100, 299])
def test_factorial(table, n):
    assert table.factorial(n) == math.factorial(n) % MOD


@pytest.mark.parametrize("n,k", [(10, 3), (100, 50), (299, 1), (7, 0), (7, 7), (3, 4), (3, -1)])
def test_binomial(table, n, k):
    expected = math.comb(n, k) % MOD if 0 <= k <= n else 0
    assert table.binomial(n, k) == expected


@pytest.mark.parametrize("n,k", [(10, 3), (100, 20), (5, 5), (5, 6)])
def test_permutations(table, n, k):
    expected = math.perm(n, k) % MOD if k <= n else 0
    assert table.permutations(n, k) == expected


@pytest.mark.parametrize("n", range(0, 40))
def test_catalan_agrees_with_arithmetic(table, n):
    assert table.catalan(n) == arithmetic.catalan(n)


@pytest.mark.parametrize("n", range(1, 13))
def test_stirling2_agrees_with_arithmetic(table, n):
    for k in range(0, n + 2):
        assert table.stirling2(n, k) == arithmetic.stirling2(n, k)


@pytest.mark.parametrize("n,k", [(5, 3), (0, 4), (10, 1), (20, 6)])
def test_stars_and_bars(table, n, k):
    assert table.stars_and_bars(n, k) == math.comb(n + k - 1, k - 1) % MOD


@pytest.mark.parametrize("counts", [[2, 3, 1], [4], [1, 1, 1, 1], [10, 20, 30]])
def test_multinomial(table, counts):
    expected = math.factorial(sum(counts))
    for c in counts:
        expected //= math.factorial(c)
    assert table.multinomial(counts) == expected % MOD


def test_out_of_table_raises(table):
    with pytest.raises(ValueError):
        table.factorial(300)
    with pytest.raises(ValueError):
        table.binomial(1000, 2)


def test_invalid_table_size():
    with pytest.raises(ValueError):
        FactorialTable(0)


def test_bell_numbers_are_row_sums_of_stirling():
    bells = bell_numbers(15)
    assert len(bells) == 16
    for n, bell in enumerate(bells):
        assert bell == sum(arithmetic.stirling2(n, k) for k in range(n + 1)) % MOD


def test_bell_numbers_negative_raises():
    with pytest.raises(ValueError):
        bell_numbers(-1)


@pytest.mark.parametrize("n", range(0, 8))
def test_derangement_matches_enumeration(n):
    count = sum(
        all(p[i] != i for i in range(n)) for p in permutations(range(n))
    )
    assert derangement(n) == count


def test_derangement_recurrence_large():
    for n in range(2, 200):
        expected = (n - 1) * (derangement(n - 1) + derangement(n - 2)) % MOD
        assert derangement(n) == expected


@pytest.mark.parametrize("p", [2, 3, 5, 7, 13])
def test_lucas_binomial(p):
    for n in range(0, 60):
        for k in range(0, n + 2):
            assert lucas_binomial(n, k, p) == math.comb(n, k) % p


@pytest.mark.parametrize("sets", [[5], [3, 5], [7, 2, 9, 4], [1, 1, 1]])
def test_inclusion_exclusion_gives_largest(sets):
    assert inclusion_exclusion(sets) == max(sets)


def test_inclusion_exclusion_empty():
    assert inclusion_exclusion([]) == 0