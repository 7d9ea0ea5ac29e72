import pytest

from icpckit.radix_tries import CompressedTrie, PersistentTrie


@pytest.fixture
def words():
    return ["apple", "app", "application", "apply", "banana", "band", "bandana", "b"]


def test_compressed_finds_inserted_words(words):
    trie = CompressedTrie()
    for word in words:
        trie.insert(word)
    assert all(trie.search(word) for word in words)


def test_compressed_rejects_prefixes_and_extensions(words):
    trie = CompressedTrie()
    for word in words:
        trie.insert(word)
    absent = ["ap", "appl", "applications", "ban", "bandanas", "c", "", "banan"]
    assert [trie.search(w) for w in absent] == [False] * len(absent)


def test_compressed_split_then_insert_prefix():
    trie = CompressedTrie()
    trie.insert("test")
    trie.insert("team")
    assert trie.search("test")
    assert trie.search("team")
    assert not trie.search("te")
    trie.insert("te")
    assert trie.search("te")
    assert not trie.search("tea")
    assert trie.search("test")


def test_compressed_empty_word():
    trie = CompressedTrie()
    assert not trie.search("")
    trie.insert("")
    assert trie.search("")


def test_compressed_insert_is_idempotent():
    trie = CompressedTrie()
    trie.insert("romane")
    trie.insert("romane")
    trie.insert("romanus")
    assert trie.search("romane")
    assert trie.search("romanus")
    assert not trie.search("roman")


def test_persistent_versions_are_kept():
    trie = PersistentTrie()
    assert trie.insert("apple") == 1
    assert trie.insert("app") == 2
    assert trie.version == 2
    assert trie.search("apple")
    assert trie.search("app")
    assert trie.search("apple", 1)
    assert not trie.search("app", 1)
    assert not trie.search("apple", 0)


def test_persistent_unknown_version_holds_nothing():
    trie = PersistentTrie()
    trie.insert("word")
    assert not trie.search("word", 5)
    assert not trie.search("word", -1)


def test_persistent_old_versions_unchanged_by_shared_paths():
    trie = PersistentTrie()
    trie.insert("abc")
    trie.insert("abd")
    trie.insert("ab")
    assert [trie.search("ab", v) for v in range(4)] == [False, False, False, True]
    assert [trie.search("abd", v) for v in range(4)] == [False, False, True, True]
    assert [trie.search("abc", v) for v in range(4)] == [False, True, True, True]