# dictionary.py
# Immutable word set shared read-only by every search of a run.

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Iterator, Tuple

from trie import WordTrie


class Dictionary:
    """
    Deduplicated, frozen collection of words.

    Iteration follows first-seen order, which also gives every word a rank
    (``index_of``) used to order neighbors deterministically. The per-length
    index, the alphabet and the trie are derived once and never change.
    """

    __slots__ = ("_words", "_ranks", "_by_length", "_alphabet", "_trie")

    def __init__(self, words: Tuple[str, ...]):
        self._words = words
        self._ranks: Dict[str, int] = {w: i for i, w in enumerate(words)}
        by_length = defaultdict(list)
        for w in words:
            by_length[len(w)].append(w)
        self._by_length: Dict[int, Tuple[str, ...]] = {
            n: tuple(ws) for n, ws in by_length.items()
        }
        self._alphabet: FrozenSet[str] = frozenset(ch for w in words for ch in w)
        self._trie = None

    @classmethod
    def load(cls, words: Iterable[str]) -> "Dictionary":
        """Deduplicate and freeze ``words``; empty entries are skipped."""
        seen = {}
        for w in words:
            if w and w not in seen:
                seen[w] = None
        return cls(tuple(seen))

    def contains(self, word: str) -> bool:
        return word in self._ranks

    def __contains__(self, word):
        return word in self._ranks

    def size(self) -> int:
        return len(self._words)

    def __len__(self):
        return len(self._words)

    def all(self) -> Iterator[str]:
        """Lazy iterator over every word; call again to restart."""
        return iter(self._words)

    def __iter__(self):
        return iter(self._words)

    def index_of(self, word: str) -> int:
        return self._ranks[word]

    def words_of_length(self, n: int) -> Tuple[str, ...]:
        return self._by_length.get(n, ())

    @property
    def alphabet(self) -> FrozenSet[str]:
        return self._alphabet

    @property
    def trie(self) -> WordTrie:
        # Built on first use; the result depends only on the frozen word tuple.
        if self._trie is None:
            self._trie = WordTrie.build(self._words)
        return self._trie

    def __repr__(self):
        return f"Dictionary({len(self._words)} words)"
