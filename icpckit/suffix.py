"""Suffix array with LCP, suffix tree (Ukkonen) and suffix automaton."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field

_TERMINATOR = "$"


class SuffixArray:
    """Sorted suffixes of ``text + "$"`` with the LCP of neighbouring suffixes."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.s = text + _TERMINATOR
        self.sa = self._build_suffix_array(self.s)
        self.rank = [0] * len(self.s)
        for position, start in enumerate(self.sa):
            self.rank[start] = position
        self.lcp = self._build_lcp()

    @staticmethod
    def _build_suffix_array(s: str) -> list[int]:
        n = len(s)
        rank = [ord(ch) for ch in s]
        sa = list(range(n))
        k = 1
        while k < n:
            def key(i: int, k: int = k) -> tuple[int, int]:
                return rank[i], rank[i + k] if i + k < n else -1

            sa.sort(key=key)
            new_rank = [0] * n
            for prev, cur in zip(sa, sa[1:]):
                new_rank[cur] = new_rank[prev] + (key(prev) < key(cur))
            rank = new_rank
            if rank[sa[-1]] == n - 1:
                break
            k *= 2
        return sa

    def _build_lcp(self) -> list[int]:
        s, sa, rank = self.s, self.sa, self.rank
        n = len(s)
        lcp = [0] * (n - 1)
        k = 0
        for i in range(n):
            if rank[i] == 0:
                k = 0
                continue
            j = sa[rank[i] - 1]
            while i + k < n and j + k < n and s[i + k] == s[j + k]:
                k += 1
            lcp[rank[i] - 1] = k
            if k:
                k -= 1
        return lcp

    def find_occurrences(self, pattern: str) -> list[int]:
        """Start positions of ``pattern`` in the text, in suffix-array order."""
        m = len(pattern)
        s = self.s

        def prefix(start: int) -> str:
            return s[start:start + m]

        low = bisect_left(self.sa, pattern, key=prefix)
        high = bisect_right(self.sa, pattern, key=prefix)
        last = len(s) - 1
        return [start for start in self.sa[low:high] if start < last]

    def lcp_between(self, i: int, j: int) -> int:
        """Longest common prefix of the suffixes at suffix-array positions ``i`` and ``j``."""
        n = len(self.sa)
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError("suffix-array position out of range")
        if i == j:
            return len(self.s) - self.sa[i] - 1
        if i > j:
            i, j = j, i
        return min(self.lcp[i:j])

    def longest_repeated_substring(self) -> str:
        """The longest substring occurring at least twice (first in suffix order on a tie)."""
        if not self.lcp:
            return ""
        best = max(self.lcp)
        index = self.lcp.index(best)
        start = self.sa[index]
        return self.s[start:start + best]


class SuffixTree:
    """Suffix tree of ``text + "$"`` built online by Ukkonen's algorithm."""

    def __init__(self, text: str) -> None:
        if _TERMINATOR in text:
            raise ValueError(f"text must not contain {_TERMINATOR!r}")
        self.text = text + _TERMINATOR
        self._start: list[int] = []
        self._end: list[int | None] = []
        self._link: list[int] = []
        self._children: list[dict[str, int]] = []
        self._leaf_end = -1
        self._root = self._new_node(-1, -1)
        self._build()

    def _new_node(self, start: int, end: int | None) -> int:
        self._start.append(start)
        self._end.append(end)
        self._link.append(0)
        self._children.append({})
        return len(self._start) - 1

    def _edge_end(self, node: int) -> int:
        end = self._end[node]
        return self._leaf_end if end is None else end

    def _edge_length(self, node: int) -> int:
        return self._edge_end(node) - self._start[node] + 1

    def _build(self) -> None:
        t = self.text
        root = self._root
        start, link, children = self._start, self._link, self._children
        active_node, active_edge, active_length = root, 0, 0
        remaining = 0
        for pos, ch in enumerate(t):
            self._leaf_end = pos
            remaining += 1
            last_new: int | None = None
            while remaining:
                if active_length == 0:
                    active_edge = pos
                edge_ch = t[active_edge]
                nxt = children[active_node].get(edge_ch)
                if nxt is None:
                    children[active_node][edge_ch] = self._new_node(pos, None)
                    if last_new is not None:
                        link[last_new] = active_node
                        last_new = None
                else:
                    length = self._edge_length(nxt)
                    if active_length >= length:
                        active_edge += length
                        active_length -= length
                        active_node = nxt
                        continue
                    if t[start[nxt] + active_length] == ch:
                        if last_new is not None and active_node != root:
                            link[last_new] = active_node
                            last_new = None
                        active_length += 1
                        break
                    split = self._new_node(start[nxt], start[nxt] + active_length - 1)
                    children[active_node][edge_ch] = split
                    children[split][ch] = self._new_node(pos, None)
                    start[nxt] += active_length
                    children[split][t[start[nxt]]] = nxt
                    if last_new is not None:
                        link[last_new] = split
                    last_new = split
                remaining -= 1
                if active_node == root and active_length > 0:
                    active_length -= 1
                    active_edge = pos - remaining + 1
                elif active_node != root:
                    active_node = link[active_node]

    def _locate(self, pattern: str) -> int | None:
        node = self._root
        i = 0
        while i < len(pattern):
            nxt = self._children[node].get(pattern[i])
            if nxt is None:
                return None
            edge = self.text[self._start[nxt]:self._edge_end(nxt) + 1]
            piece = pattern[i:i + len(edge)]
            if not edge.startswith(piece):
                return None
            i += len(piece)
            node = nxt
        return node

    def contains(self, pattern: str) -> bool:
        """True if ``pattern`` is a substring of the text."""
        return self._locate(pattern) is not None

    def count_occurrences(self, pattern: str) -> int:
        """Number of (possibly overlapping) occurrences of ``pattern``."""
        node = self._locate(pattern)
        if node is None:
            return 0
        leaves = 0
        stack = [node]
        while stack:
            current = stack.pop()
            kids = self._children[current]
            if kids:
                stack.extend(kids.values())
            else:
                leaves += 1
        return leaves


@dataclass
class _State:
    length: int = 0
    link: int = -1
    transitions: dict[str, int] = field(default_factory=dict)


class SuffixAutomaton:
    """Minimal automaton accepting every substring of the text fed to it."""

    def __init__(self, text: str = "") -> None:
        self._states = [_State()]
        self._last = 0
        for ch in text:
            self.add_char(ch)

    def add_char(self, c: str) -> None:
        """Extend the text by one character."""
        states = self._states
        current = len(states)
        states.append(_State(states[self._last].length + 1))
        p = self._last
        while p != -1 and c not in states[p].transitions:
            states[p].transitions[c] = current
            p = states[p].link
        if p == -1:
            states[current].link = 0
        else:
            q = states[p].transitions[c]
            if states[p].length + 1 == states[q].length:
                states[current].link = q
            else:
                clone = len(states)
                states.append(
                    _State(states[p].length + 1, states[q].link, dict(states[q].transitions))
                )
                while p != -1 and states[p].transitions.get(c) == q:
                    states[p].transitions[c] = clone
                    p = states[p].link
                states[q].link = states[current].link = clone
        self._last = current

    def contains(self, s: str) -> bool:
        """True if ``s`` is a substring of the text."""
        state = 0
        for ch in s:
            nxt = self._states[state].transitions.get(ch)
            if nxt is None:
                return False
            state = nxt
        return True

    def count_distinct_substrings(self) -> int:
        """Number of distinct non-empty substrings of the text."""
        states = self._states
        paths = [1] * len(states)
        for v in sorted(range(len(states)), key=lambda i: states[i].length, reverse=True):
            paths[v] += sum(paths[u] for u in states[v].transitions.values())
        return paths[0] - 1