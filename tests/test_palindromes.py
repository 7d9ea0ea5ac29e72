import pytest

from icpckit.palindromes import (
    PalindromicTree,
    all_palindromes,
    count_palindromic_substrings,
    is_palindrome,
    longest_palindrome,
    longest_palindrome_expand,
    manacher,
    min_insertions,
    min_palindrome_cuts,
    palindrome_partitions,
)

SAMPLES = ["aabaa", "banana", "abacdfgdcaba", "abcd", "aaaa", "forgeeksskeegfor", "x", "abba"]


def build_tree(text):
    tree = PalindromicTree()
    for ch in text:
        tree.add_char(ch)
    return tree


def test_manacher_length_matches_separated_string():
    assert len(manacher("abc")) == 7
    assert manacher("") == [0]


def test_longest_palindrome_source_example():
    assert longest_palindrome("aabaa") == "aabaa"
    assert longest_palindrome("") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_longest_palindrome_agrees_with_expansion(text):
    result = longest_palindrome(text)
    assert result == longest_palindrome_expand(text)
    assert is_palindrome(result)
    assert result in text


@pytest.mark.parametrize("text", SAMPLES)
def test_all_palindromes_are_palindromes(text):
    pairs = all_palindromes(text)
    assert len(pairs) == 2 * len(text) - 1 or len(pairs) >= len(text)
    for start, end in pairs:
        assert 0 <= start <= end < len(text)
        assert is_palindrome(text, start, end)


def test_is_palindrome_ranges():
    assert is_palindrome("racecar")
    assert not is_palindrome("abca")
    assert is_palindrome("xabay", 1, 3)
    assert not is_palindrome("xabcy", 1, 3)
    assert is_palindrome("abc", 2, 1)


def test_is_palindrome_out_of_range():
    with pytest.raises(IndexError):
        is_palindrome("abc", 1, 5)


@pytest.mark.parametrize("text", SAMPLES)
def test_tree_counts_agree_with_direct_counting(text):
    tree = build_tree(text)
    assert tree.count_all() == count_palindromic_substrings(text)
    substrings = {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}
    assert tree.count_distinct() == sum(is_palindrome(sub) for sub in substrings)


@pytest.mark.parametrize("text", SAMPLES)
def test_tree_palindromes_and_longest(text):
    tree = build_tree(text)
    entries = tree.palindromes()
    assert len(entries) == tree.count_distinct()
    assert sum(count for _, count in entries) == tree.count_all()
    longest = tree.longest()
    assert is_palindrome(longest)
    assert longest in text
    assert len(longest) == len(longest_palindrome(text))
    assert tree.text == text


def test_tree_count_all_is_repeatable():
    tree = build_tree("aabaa")
    first = tree.count_all()
    second = tree.count_all()
    assert first == 9
    assert second == 9


def test_empty_tree():
    tree = PalindromicTree()
    assert tree.count_distinct() == 0
    assert tree.longest() == ""


def test_add_char_rejects_strings():
    with pytest.raises(ValueError):
        PalindromicTree().add_char("ab")


def test_min_insertions():
    assert min_insertions("racecar") == 0
    assert min_insertions("") == 0
    assert min_insertions("ab") == 1
    for text in SAMPLES:
        assert 0 <= min_insertions(text) <= len(text) - 1
        assert min_insertions(text) == min_insertions(text[::-1])


@pytest.mark.parametrize("text", ["aab", "abba", "banana", "abc"])
def test_partitions_are_valid(text):
    parts = palindrome_partitions(text)
    assert parts
    for partition in parts:
        assert "".join(partition) == text
        assert all(is_palindrome(piece) for piece in partition)
    assert [text] in parts or not is_palindrome(text)
    assert min(len(p) for p in parts) - 1 == min_palindrome_cuts(text)


def test_min_cuts():
    assert min_palindrome_cuts("abba") == 0
    assert min_palindrome_cuts("") == 0
    assert min_palindrome_cuts("ab") == 1