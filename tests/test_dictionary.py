import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from dictionary import Dictionary
from metric import edit_distance
from trie import WordTrie


def test_load_deduplicates_and_keeps_first_seen_order():
    d = Dictionary.load(["b", "a", "b", "", "c", "a"])
    assert list(d.all()) == ["b", "a", "c"]
    assert d.size() == 3
    assert len(d) == 3
    assert d.index_of("c") == 2


def test_membership():
    d = Dictionary.load(["cat", "bat"])
    assert d.contains("cat")
    assert "bat" in d
    assert not d.contains("rat")
    assert "" not in d


def test_all_is_restartable():
    d = Dictionary.load(["one", "two", "three"])
    first = d.all()
    assert next(first) == "one"
    assert list(d.all()) == ["one", "two", "three"]
    assert list(d) == list(d.all())


def test_length_index_and_alphabet():
    d = Dictionary.load(["cat", "at", "cart", "bat"])
    assert d.words_of_length(3) == ("cat", "bat")
    assert d.words_of_length(2) == ("at",)
    assert d.words_of_length(7) == ()
    assert d.alphabet == frozenset("catrb")


def test_dictionary_cannot_grow_attributes():
    d = Dictionary.load(["cat"])
    with pytest.raises(AttributeError):
        d.extra = 1


def test_trie_is_built_once_from_the_words():
    d = Dictionary.load(["cat", "cart"])
    trie = d.trie
    assert trie is d.trie
    assert len(trie) == 2
    assert trie.is_word("cart")
    assert not trie.is_word("car")
    assert trie.has_prefix("car")
    assert not trie.has_prefix("dog")


def test_trie_build_skips_empty_and_duplicates():
    trie = WordTrie.build(["", "a", "a", "ab"])
    assert len(trie) == 2
    assert trie.has_prefix("")


def test_trie_within_matches_brute_force():
    words = ["cat", "cart", "cast", "bat", "at", "dog", "catalog", "c"]
    trie = WordTrie.build(words)
    assert sorted(trie.within("cat", 1)) == [
        ("at", 1), ("bat", 1), ("cart", 1), ("cast", 1), ("cat", 0),
    ]
    for query in ["cat", "dot", "ca", "catalogue", "x"]:
        for limit in range(0, 4):
            expected = sorted(
                (w, edit_distance(query, w)) for w in words if edit_distance(query, w) <= limit
            )
            assert sorted(trie.within(query, limit)) == expected
