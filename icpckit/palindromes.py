"""Palindrome detection, counting and partitioning."""

from __future__ import annotations

from dataclasses import dataclass, field


def manacher(s: str) -> list[int]:
    """Palindrome radii over ``s`` interleaved with ``#`` separators.

    Entry ``i`` is the radius of the longest palindrome centred at position
    ``i`` of ``"#" + "#".join(s) + "#"``, which equals the length of the
    corresponding palindrome in ``s``.
    """
    t = "#" + "".join(ch + "#" for ch in s)
    n = len(t)
    p = [0] * n
    center = right = 0
    for i in range(n):
        if i < right:
            p[i] = min(right - i, p[2 * center - i])
        while i + p[i] + 1 < n and i - p[i] - 1 >= 0 and t[i + p[i] + 1] == t[i - p[i] - 1]:
            p[i] += 1
        if i + p[i] > right:
            center, right = i, i + p[i]
    return p


def longest_palindrome(s: str) -> str:
    """The leftmost longest palindromic substring, found with Manacher's algorithm."""
    if not s:
        return ""
    p = manacher(s)
    max_len = max(p)
    center = p.index(max_len)
    start = (center - max_len) // 2
    return s[start : start + max_len]


def all_palindromes(s: str) -> list[tuple[int, int]]:
    """The maximal palindrome at every centre, as inclusive ``(start, end)`` pairs."""
    return [((i - radius) // 2, (i - radius) // 2 + radius - 1) for i, radius in enumerate(manacher(s)) if radius > 0]


def is_palindrome(s: str, left: int = 0, right: int | None = None) -> bool:
    """True if ``s[left:right + 1]`` reads the same both ways.

    ``right`` defaults to the last index; an empty range is a palindrome.
    """
    if right is None:
        right = len(s) - 1
    if left <= right and not (0 <= left and right < len(s)):
        raise IndexError("range lies outside the string")
    part = s[left : right + 1] if left <= right else ""
    return part == part[::-1]


@dataclass
class _Node:
    length: int
    link: int = 0
    count: int = 0
    end: int = -1
    children: dict[str, int] = field(default_factory=dict)


class PalindromicTree:
    """Eertree: one node per distinct palindromic substring of the text built so far."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._nodes = [_Node(-1), _Node(0)]
        self._last = 1

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def _suffix_for(self, node: int, pos: int, c: str) -> int:
        while True:
            length = self._nodes[node].length
            start = pos - length - 1
            if start >= 0 and self._chars[start] == c:
                return node
            node = self._nodes[node].link

    def add_char(self, c: str) -> None:
        """Append one character to the text."""
        if len(c) != 1:
            raise ValueError("exactly one character is expected")
        self._chars.append(c)
        pos = len(self._chars) - 1
        nodes = self._nodes
        current = self._suffix_for(self._last, pos, c)
        existing = nodes[current].children.get(c)
        if existing is not None:
            self._last = existing
            nodes[existing].count += 1
            return
        new_index = len(nodes)
        new_node = _Node(nodes[current].length + 2, count=1, end=pos)
        nodes.append(new_node)
        nodes[current].children[c] = new_index
        if new_node.length == 1:
            new_node.link = 1
        else:
            parent = self._suffix_for(nodes[current].link, pos, c)
            new_node.link = nodes[parent].children[c]
        self._last = new_index

    def count_distinct(self) -> int:
        """Number of distinct palindromic substrings."""
        return len(self._nodes) - 2

    def _occurrences(self) -> list[int]:
        counts = [node.count for node in self._nodes]
        for i in range(len(self._nodes) - 1, 1, -1):
            counts[self._nodes[i].link] += counts[i]
        return counts

    def count_all(self) -> int:
        """Number of palindromic substrings, counted with multiplicity."""
        return sum(self._occurrences()[2:])

    def palindromes(self) -> list[tuple[int, int]]:
        """``(length, occurrences)`` for every distinct palindrome, in creation order."""
        counts = self._occurrences()
        return [(node.length, counts[i]) for i, node in enumerate(self._nodes) if i >= 2]

    def longest(self) -> str:
        """The longest palindromic substring (the first one found on a tie)."""
        best = None
        for node in self._nodes[2:]:
            if best is None or node.length > best.length:
                best = node
        if best is None:
            return ""
        return "".join(self._chars[best.end - best.length + 1 : best.end + 1])


def longest_palindrome_expand(s: str) -> str:
    """The leftmost longest palindromic substring, by expanding around centres."""
    if not s:
        return ""
    start, max_len = 0, 1
    n = len(s)
    for i in range(n):
        for left, right in ((i, i), (i, i + 1)):
            while left >= 0 and right < n and s[left] == s[right]:
                if right - left + 1 > max_len:
                    start, max_len = left, right - left + 1
                left -= 1
                right += 1
    return s[start : start + max_len]


def count_palindromic_substrings(s: str) -> int:
    """Number of palindromic substrings, counted by position."""
    count = 0
    n = len(s)
    for i in range(n):
        for left, right in ((i, i), (i, i + 1)):
            while left >= 0 and right < n and s[left] == s[right]:
                count += 1
                left -= 1
                right += 1
    return count


def min_insertions(s: str) -> int:
    """Fewest characters to insert to make ``s`` a palindrome."""
    n = len(s)
    if n == 0:
        return 0
    dp = [[0] * n for _ in range(n)]
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                dp[i][j] = dp[i + 1][j - 1] if length > 2 else 0
            else:
                dp[i][j] = 1 + min(dp[i + 1][j], dp[i][j - 1])
    return dp[0][n - 1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Every way to split ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    current: list[str] = []

    def backtrack(start: int) -> None:
        if start == len(s):
            result.append(list(current))
            return
        for end in range(start, len(s)):
            if is_palindrome(s, start, end):
                current.append(s[start : end + 1])
                backtrack(end + 1)
                current.pop()

    backtrack(0)
    return result


def min_palindrome_cuts(s: str) -> int:
    """Fewest cuts that split ``s`` into palindromes."""
    n = len(s)
    if n == 0:
        return 0
    palin = [[False] * n for _ in range(n)]
    for i in range(n):
        palin[i][i] = True
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                palin[i][j] = length == 2 or palin[i + 1][j - 1]
    cuts = [0] * n
    for i in range(n):
        if palin[0][i]:
            cuts[i] = 0
        else:
            cuts[i] = min(cuts[j] + 1 for j in range(i) if palin[j + 1][i])
    return cuts[-1]