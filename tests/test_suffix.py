import os

import pytest

from icpckit.string_utils import count_distinct_substrings
from icpckit.suffix import SuffixArray, SuffixAutomaton, SuffixTree

TEXTS = ["banana", "mississippi", "abcabxabcd", "aaaaa", "abab", "x", "abcdefg"]


def _positions(text, pattern):
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def _probes(text):
    subs = {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}
    return sorted(subs | {"zz", text + "a", "q", "ba" * 4})


@pytest.mark.parametrize("text", TEXTS)
def test_suffix_array_is_sorted_permutation(text):
    sa = SuffixArray(text)
    s = text + "$"
    assert sorted(sa.sa) == list(range(len(s)))
    suffixes = [s[i:] for i in sa.sa]
    assert suffixes == sorted(suffixes)
    assert all(sa.rank[start] == pos for pos, start in enumerate(sa.sa))


@pytest.mark.parametrize("text", TEXTS)
def test_lcp_matches_neighbouring_suffixes(text):
    sa = SuffixArray(text)
    s = text + "$"
    expected = [
        len(os.path.commonprefix([s[a:], s[b:]])) for a, b in zip(sa.sa, sa.sa[1:])
    ]
    assert sa.lcp == expected


@pytest.mark.parametrize("text", TEXTS)
def test_find_occurrences_matches_scan(text):
    sa = SuffixArray(text)
    for pattern in _probes(text):
        assert sorted(sa.find_occurrences(pattern)) == _positions(text, pattern)


def test_find_occurrences_in_suffix_order():
    sa = SuffixArray("banana")
    found = sa.find_occurrences("ana")
    s = "banana$"
    assert sorted(found) == [1, 3]
    assert [s[i:] for i in found] == sorted(s[i:] for i in found)


def test_longest_repeated_substring():
    assert SuffixArray("banana").longest_repeated_substring() == "ana"
    assert SuffixArray("abcdefg").longest_repeated_substring() == ""
    assert SuffixArray("").longest_repeated_substring() == ""


def test_lcp_between():
    sa = SuffixArray("mississippi")
    s = "mississippi$"
    n = len(sa.sa)
    for i in range(n):
        assert sa.lcp_between(i, i) == len(s) - sa.sa[i] - 1
        for j in range(n):
            if i != j:
                expected = len(os.path.commonprefix([s[sa.sa[i]:], s[sa.sa[j]:]]))
                assert sa.lcp_between(i, j) == expected
    with pytest.raises(IndexError):
        sa.lcp_between(0, n)


@pytest.mark.parametrize("text", TEXTS)
def test_suffix_tree_contains_and_counts(text):
    tree = SuffixTree(text)
    for pattern in _probes(text):
        assert tree.contains(pattern) == (pattern in text)
        assert tree.count_occurrences(pattern) == len(_positions(text, pattern))


def test_suffix_tree_empty_pattern_counts_every_suffix():
    tree = SuffixTree("banana")
    assert tree.contains("")
    assert tree.count_occurrences("") == len("banana$")


def test_suffix_tree_rejects_terminator():
    with pytest.raises(ValueError):
        SuffixTree("a$b")


@pytest.mark.parametrize("text", TEXTS)
def test_automaton_contains(text):
    sam = SuffixAutomaton(text)
    for pattern in _probes(text):
        assert sam.contains(pattern) == (pattern in text)


@pytest.mark.parametrize("text", TEXTS + [""])
def test_automaton_counts_distinct_substrings(text):
    assert SuffixAutomaton(text).count_distinct_substrings() == count_distinct_substrings(text)


def test_automaton_built_incrementally_matches_constructor():
    sam = SuffixAutomaton()
    for ch in "mississippi":
        sam.add_char(ch)
    whole = SuffixAutomaton("mississippi")
    assert sam.count_distinct_substrings() == whole.count_distinct_substrings()
    assert sam.contains("ssip")
    assert not sam.contains("ssis" + "z")