"""Prefix tries over strings and a binary trie for XOR queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    count: int = 0
    prefix_count: int = 0


class Trie:
    """A multiset of words stored by their characters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, prefix: str) -> _TrieNode | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add one copy of ``word``."""
        node = self._root
        node.prefix_count += 1
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.prefix_count += 1
        node.count += 1

    def search(self, word: str) -> bool:
        """True if ``word`` is stored."""
        node = self._find(word)
        return node is not None and node.count > 0

    def starts_with(self, prefix: str) -> bool:
        """True if some stored word begins with ``prefix``."""
        return self._find(prefix) is not None

    def count_prefix(self, prefix: str) -> int:
        """Number of stored words, with multiplicity, that begin with ``prefix``."""
        node = self._find(prefix)
        return node.prefix_count if node is not None else 0

    def remove(self, word: str) -> bool:
        """Remove one copy of ``word``; False if it was not stored."""
        path = [self._root]
        for ch in word:
            child = path[-1].children.get(ch)
            if child is None:
                return False
            path.append(child)
        if path[-1].count == 0:
            return False
        path[-1].count -= 1
        for node in path:
            node.prefix_count -= 1
        for i in range(len(word), 0, -1):
            node = path[i]
            if node.count or node.children:
                break
            del path[i - 1].children[word[i - 1]]
        return True

    @staticmethod
    def _collect(node: _TrieNode, prefix: str, out: list[str]) -> None:
        out.extend([prefix] * node.count)
        for ch in sorted(node.children):
            Trie._collect(node.children[ch], prefix + ch, out)

    def words(self) -> list[str]:
        """All stored words with multiplicity, in lexicographic order."""
        result: list[str] = []
        self._collect(self._root, "", result)
        return result

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Stored words beginning with ``prefix``, in lexicographic order."""
        node = self._find(prefix)
        result: list[str] = []
        if node is not None:
            self._collect(node, prefix, result)
        return result

    def longest_common_prefix(self) -> str:
        """Longest prefix shared by every stored word."""
        chars = []
        node = self._root
        while len(node.children) == 1 and node.count == 0:
            (ch, node), = node.children.items()
            chars.append(ch)
        return "".join(chars)


class _BitNode:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[_BitNode | None] = [None, None]
        self.count = 0


class BinaryTrie:
    """A multiset of non-negative integers keyed on bits ``bits`` down to 0."""

    def __init__(self, bits: int = 30) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self._root = _BitNode()

    def _bits_of(self, num: int):
        for i in range(self.bits, -1, -1):
            yield i, (num >> i) & 1

    def insert(self, num: int) -> None:
        """Add one copy of ``num``."""
        node = self._root
        node.count += 1
        for _, bit in self._bits_of(num):
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _BitNode()
            node = child
            node.count += 1

    def __contains__(self, num: int) -> bool:
        node = self._root
        for _, bit in self._bits_of(num):
            child = node.children[bit]
            if child is None or child.count == 0:
                return False
            node = child
        return True

    def remove(self, num: int) -> bool:
        """Remove one copy of ``num``; False if it was not stored."""
        if num not in self:
            return False
        node = self._root
        node.count -= 1
        for _, bit in self._bits_of(num):
            node = node.children[bit]
            node.count -= 1
        return True

    @staticmethod
    def _live(node: _BitNode | None) -> bool:
        return node is not None and node.count > 0

    def _walk(self, num: int, prefer_opposite: bool) -> int:
        if not self._live(self._root):
            raise ValueError("the trie is empty")
        node = self._root
        result = 0
        for i, bit in self._bits_of(num):
            wanted = 1 - bit if prefer_opposite else bit
            if self._live(node.children[wanted]):
                node = node.children[wanted]
                if wanted != bit:
                    result |= 1 << i
            else:
                node = node.children[1 - wanted]
                if wanted == bit:
                    result |= 1 << i
        return result

    def max_xor(self, num: int) -> int:
        """Largest ``num ^ x`` over stored ``x``; ValueError if empty."""
        return self._walk(num, prefer_opposite=True)

    def min_xor(self, num: int) -> int:
        """Smallest ``num ^ x`` over stored ``x``; ValueError if empty."""
        return self._walk(num, prefer_opposite=False)