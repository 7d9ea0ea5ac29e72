"""Compressed (radix) tries and persistent tries over strings."""

from __future__ import annotations

from dataclasses import dataclass, field


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


@dataclass
class _RadixNode:
    label: str = ""
    terminal: bool = False
    children: dict[str, _RadixNode] = field(default_factory=dict)


class CompressedTrie:
    """A set of words in a trie whose single-child chains are merged into one edge."""

    def __init__(self) -> None:
        self._root = _RadixNode()

    def insert(self, word: str) -> None:
        """Add ``word``, splitting an edge where it diverges from a stored label."""
        node = self._root
        rest = word
        while rest:
            child = node.children.get(rest[0])
            if child is None:
                node.children[rest[0]] = _RadixNode(rest, terminal=True)
                return
            common = _common_prefix_length(rest, child.label)
            if common < len(child.label):
                split = _RadixNode(child.label[:common])
                child.label = child.label[common:]
                split.children[child.label[0]] = child
                node.children[rest[0]] = split
                child = split
            node = child
            rest = rest[common:]
        node.terminal = True

    def search(self, word: str) -> bool:
        """True if ``word`` itself was inserted."""
        node = self._root
        rest = word
        while rest:
            child = node.children.get(rest[0])
            if child is None or not rest.startswith(child.label):
                return False
            rest = rest[len(child.label):]
            node = child
        return node.terminal


@dataclass
class _PersistentNode:
    terminal: bool = False
    children: dict[str, _PersistentNode] = field(default_factory=dict)

    def copy(self) -> _PersistentNode:
        return _PersistentNode(self.terminal, dict(self.children))


class PersistentTrie:
    """A trie keeping every earlier version; version 0 is empty, each insert adds one."""

    def __init__(self) -> None:
        self._roots = [_PersistentNode()]

    @property
    def version(self) -> int:
        """The number of the latest version."""
        return len(self._roots) - 1

    def insert(self, word: str) -> int:
        """Insert ``word`` into a new version by path copying and return its number."""
        root = self._roots[-1].copy()
        node = root
        for ch in word:
            child = node.children.get(ch)
            child = _PersistentNode() if child is None else child.copy()
            node.children[ch] = child
            node = child
        node.terminal = True
        self._roots.append(root)
        return self.version

    def search(self, word: str, version: int | None = None) -> bool:
        """True if ``word`` is present in ``version`` (the latest by default).

        An unknown version holds nothing.
        """
        if version is None:
            version = self.version
        if not 0 <= version < len(self._roots):
            return False
        node = self._roots[version]
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal