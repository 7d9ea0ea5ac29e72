"""Polynomial rolling hashes over strings and Zobrist hashing of grids."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence

MOD = 1_000_000_007
MOD2 = 1_000_000_009


def _letter_value(ch: str) -> int:
    return ord(ch) - ord("a") + 1


class _PrefixHash:
    """Prefix hashes of a string for one base and modulus."""

    __slots__ = ("_prefix", "_powers", "_mod")

    def __init__(self, text: str, base: int, mod: int, value: Callable[[str], int] = ord) -> None:
        self._mod = mod
        prefix = [0]
        powers = [1]
        for ch in text:
            prefix.append((prefix[-1] * base + value(ch)) % mod)
            powers.append(powers[-1] * base % mod)
        self._prefix = prefix
        self._powers = powers

    def get(self, left: int, right: int) -> int:
        if not (0 <= left <= right + 1 <= len(self._prefix) - 1):
            raise IndexError(f"range [{left}, {right}] lies outside the string")
        length = right - left + 1
        return (self._prefix[right + 1] - self._prefix[left] * self._powers[length]) % self._mod

    def full(self) -> int:
        return self._prefix[-1]


class SingleHash:
    """Rolling hash with base 31 modulo 1e9+7 over character codes."""

    BASE = 31

    def __init__(self, text: str) -> None:
        self.text = text
        self._hash = _PrefixHash(text, self.BASE, MOD)

    def get(self, left: int, right: int) -> int:
        """Hash of ``text[left:right + 1]``."""
        return self._hash.get(left, right)

    def equal(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """True if the two inclusive ranges have equal hashes."""
        return self.get(l1, r1) == self.get(l2, r2)


class DoubleHash:
    """Two rolling hashes (bases 31 and 37, moduli 1e9+7 and 1e9+9) combined."""

    BASE1 = 31
    BASE2 = 37

    def __init__(self, text: str) -> None:
        self.text = text
        self._first = _PrefixHash(text, self.BASE1, MOD)
        self._second = _PrefixHash(text, self.BASE2, MOD2)

    def get(self, left: int, right: int) -> tuple[int, int]:
        """Pair of hashes of ``text[left:right + 1]``."""
        return self._first.get(left, right), self._second.get(left, right)

    def equal(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """True if the two inclusive ranges have equal hash pairs."""
        return self.get(l1, r1) == self.get(l2, r2)


class PolynomialHash:
    """Rolling hash modulo 1e9+7 mapping ``'a'`` to 1, ``'b'`` to 2 and so on."""

    def __init__(self, text: str, base: int = 31) -> None:
        self.text = text
        self.base = base
        self._hash = _PrefixHash(text, base, MOD, _letter_value)

    def get(self, left: int, right: int) -> int:
        """Hash of ``text[left:right + 1]``."""
        return self._hash.get(left, right)

    def full_hash(self) -> int:
        """Hash of the whole text."""
        return self._hash.full()


def compute_hash(s: str, base: int = 31, mod: int = MOD) -> int:
    """``sum((c - 'a' + 1) * base**i)`` modulo ``mod``, lowest power first."""
    value = 0
    power = 1
    for ch in s:
        value = (value + _letter_value(ch) * power) % mod
        power = power * base % mod
    return value


def compare_substrings(h1: DoubleHash, l1: int, r1: int, h2: DoubleHash, l2: int, r2: int) -> bool:
    """True if a range of one hashed string matches a range of another."""
    return h1.get(l1, r1) == h2.get(l2, r2)


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Start positions of ``pattern`` in ``text`` by comparing double hashes."""
    m = len(pattern)
    if m > len(text):
        return []
    text_hash = DoubleHash(text)
    target = DoubleHash(pattern).get(0, m - 1)
    return [i for i in range(len(text) - m + 1) if text_hash.get(i, i + m - 1) == target]


def longest_common_prefix(h1: DoubleHash, start1: int, h2: DoubleHash, start2: int) -> int:
    """Length of the common prefix of ``h1.text[start1:]`` and ``h2.text[start2:]``."""
    if not (0 <= start1 <= len(h1.text) and 0 <= start2 <= len(h2.text)):
        raise IndexError("start position lies outside the string")
    left, right = 0, min(len(h1.text) - start1, len(h2.text) - start2)
    result = 0
    while left <= right:
        mid = (left + right) // 2
        if h1.get(start1, start1 + mid - 1) == h2.get(start2, start2 + mid - 1):
            result = mid
            left = mid + 1
        else:
            right = mid - 1
    return result


def is_periodic(s: str, period: int) -> bool:
    """True if ``s`` is made of whole repeats of its first ``period`` characters."""
    if period <= 0:
        raise ValueError("period must be positive")
    if len(s) % period:
        return False
    hashed = DoubleHash(s)
    first = hashed.get(0, period - 1)
    return all(hashed.get(i, i + period - 1) == first for i in range(period, len(s), period))


def smallest_period(s: str) -> int:
    """Smallest period dividing the length of ``s``."""
    return next((p for p in range(1, len(s) + 1) if is_periodic(s, p)), len(s))


class ZobristHash:
    """Random 64-bit keys per cell; a grid hashes to the XOR of its set cells."""

    def __init__(self, rows: int, cols: int, seed: int | None = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must be non-negative")
        rng = random.Random(seed)
        self.rows = rows
        self.cols = cols
        self._keys = [[rng.getrandbits(64) for _ in range(cols)] for _ in range(rows)]

    def hash(self, grid: Sequence[Sequence[int]]) -> int:
        """XOR of the keys of all non-zero cells."""
        if len(grid) < self.rows or any(len(row) < self.cols for row in grid[: self.rows]):
            raise ValueError("grid is smaller than the hash table")
        value = 0
        for keys, row in zip(self._keys, grid):
            for key, cell in zip(keys, row):
                if cell:
                    value ^= key
        return value


def cyclic_hash(s: str) -> int:
    """Rotation-invariant hash: the smallest first-component hash over all rotations."""
    if not s:
        raise ValueError("cannot hash the rotations of an empty string")
    n = len(s)
    hashed = DoubleHash(s + s)
    return min(hashed.get(i, i + n - 1)[0] for i in range(n))


def multiset_hash(strings: Iterable[str]) -> int:
    """Order-independent hash: XOR of the first-component hashes of the strings."""
    value = 0
    for s in strings:
        value ^= DoubleHash(s).get(0, len(s) - 1)[0]
    return value