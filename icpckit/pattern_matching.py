"""Exact string matching: KMP, Z-function, Rabin-Karp, Boyer-Moore and Aho-Corasick."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

_RK_MOD = 1_000_000_007
_RK_BASE = 31


def compute_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start positions of ``pattern`` in ``text`` by Knuth-Morris-Pratt."""
    m = len(pattern)
    if m == 0:
        return []
    lps = compute_lps(pattern)
    result = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == m:
            result.append(i - m + 1)
            j = lps[j - 1]
    return result


def z_function(s: str) -> list[int]:
    """``z[i]`` is the length of the longest common prefix of ``s`` and ``s[i:]`` (``z[0] == 0``)."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def z_search(text: str, pattern: str) -> list[int]:
    """Start positions of ``pattern`` in ``text`` using the Z-function."""
    m = len(pattern)
    z = z_function(pattern + "#" + text)
    return [i - m - 1 for i in range(m + 1, len(z)) if z[i] == m]


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Start positions of ``pattern`` in ``text`` by rolling hash, verified exactly."""
    n, m = len(text), len(pattern)
    if m == 0 or m > n:
        return []
    high = pow(_RK_BASE, m - 1, _RK_MOD)
    pattern_hash = text_hash = 0
    for p_ch, t_ch in zip(pattern, text):
        pattern_hash = (pattern_hash * _RK_BASE + ord(p_ch)) % _RK_MOD
        text_hash = (text_hash * _RK_BASE + ord(t_ch)) % _RK_MOD
    result = []
    for i in range(n - m + 1):
        if pattern_hash == text_hash and text[i : i + m] == pattern:
            result.append(i)
        if i < n - m:
            text_hash = (
                _RK_BASE * (text_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % _RK_MOD
    return result


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Start positions of ``pattern`` in ``text`` by Boyer-Moore with the bad-character rule."""
    n, m = len(text), len(pattern)
    if m == 0 or m > n:
        return []
    last = {ch: i for i, ch in enumerate(pattern)}
    result = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            result.append(shift)
            shift += m - last.get(text[shift + m], -1) if shift + m < n else 1
        else:
            shift += max(1, j - last.get(text[shift + j], -1))
    return result


@dataclass
class _Node:
    children: dict[str, int] = field(default_factory=dict)
    output: list[int] = field(default_factory=list)
    fail: int = 0


class AhoCorasick:
    """Automaton that finds every occurrence of a set of patterns in one pass."""

    def __init__(self) -> None:
        self._trie = [_Node()]
        self.patterns: list[str] = []
        self._built = True

    def add_pattern(self, pattern: str) -> int:
        """Add a pattern and return its id."""
        current = 0
        for ch in pattern:
            node = self._trie[current]
            if ch not in node.children:
                node.children[ch] = len(self._trie)
                self._trie.append(_Node())
            current = node.children[ch]
        pattern_id = len(self.patterns)
        self._trie[current].output.append(pattern_id)
        self.patterns.append(pattern)
        self._built = False
        return pattern_id

    def build(self) -> None:
        """Compute failure links and merged outputs."""
        trie = self._trie
        queue = deque()
        for child in trie[0].children.values():
            trie[child].fail = 0
            queue.append(child)
        while queue:
            current = queue.popleft()
            for ch, child in trie[current].children.items():
                queue.append(child)
                fail = trie[current].fail
                while fail and ch not in trie[fail].children:
                    fail = trie[fail].fail
                target = trie[fail].children.get(ch)
                trie[child].fail = target if target is not None and target != child else 0
                trie[child].output.extend(trie[trie[child].fail].output)
        self._built = True

    def search(self, text: str) -> list[tuple[int, int]]:
        """All matches as ``(start, pattern_id)`` in order of their end position."""
        if not self._built:
            self.build()
        trie = self._trie
        matches = []
        current = 0
        for i, ch in enumerate(text):
            while current and ch not in trie[current].children:
                current = trie[current].fail
            current = trie[current].children.get(ch, current)
            for pattern_id in trie[current].output:
                matches.append((i - len(self.patterns[pattern_id]) + 1, pattern_id))
        return matches