# neighbors.py
# On-demand edge generation: the dictionary words within ``max_hop`` edits of
# a word, each paired with its exact edit distance.

import time
from typing import Iterator, List, Tuple

from dictionary import Dictionary
from metric import InvariantViolation, bounded_distance
from neighbor_cache import ComputeCache
from utils import MAX_HOP_DEFAULT, NEIGHBOR_CACHE_SIZE, Strategy, vlog

Edge = Tuple[str, int]


def single_edits(word: str, alphabet) -> Iterator[str]:
    """Every string one insert, substitution or deletion away from ``word``."""
    for i in range(len(word) + 1):
        head, tail = word[:i], word[i:]
        for letter in alphabet:
            yield head + letter + tail  # insert before position i
            if tail and letter != tail[0]:
                yield head + letter + tail[1:]  # substitute position i
        if tail:
            yield head + tail[1:]  # delete position i


def _check_max_hop(max_hop):
    if max_hop < 1:
        raise ValueError(f"max_hop must be at least 1, got {max_hop}")


class NeighborGenerator:
    """
    Produce the weighted neighbors of a word against a fixed dictionary.

    Three strategies give the same result:

    * ``scan``: bounded distance against every word in the length window
      ``len(word) +/- max_hop``. Cost grows with the dictionary.
    * ``structural``: breadth-first expansion in edit-string space; the level
      at which a string first appears is its exact distance. Cost grows with
      the alphabet and word length, not with the dictionary.
    * ``trie``: Levenshtein rows walked over the dictionary trie.

    Results come back ordered by weight, then by dictionary rank, and are
    memoized per ``(word, max_hop)``.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_hop: int = MAX_HOP_DEFAULT,
        strategy=Strategy.SCAN,
        cache_size: int = NEIGHBOR_CACHE_SIZE,
    ):
        _check_max_hop(max_hop)
        self.dictionary = dictionary
        self.max_hop = max_hop
        self.strategy = Strategy(strategy)
        self._alphabet = sorted(dictionary.alphabet)
        self._generate = {
            Strategy.SCAN: self._scan,
            Strategy.STRUCTURAL: self._structural,
            Strategy.TRIE: self._trie,
        }[self.strategy]
        self.cache = ComputeCache("neighbors", self._compute, cache_size)

    def neighbors(self, word: str, max_hop: int = None) -> Tuple[Edge, ...]:
        if max_hop is None:
            max_hop = self.max_hop
        _check_max_hop(max_hop)
        return self.cache.get(word, max_hop)

    def _compute(self, word, max_hop):
        t0 = time.time()
        found = self._generate(word, max_hop)
        rank = self.dictionary.index_of
        for candidate, weight in found:
            if not 1 <= weight <= max_hop:
                raise InvariantViolation(
                    f"edge {word!r} -> {candidate!r} has weight {weight}, "
                    f"expected 1..{max_hop}"
                )
        found.sort(key=lambda edge: (edge[1], rank(edge[0])))
        vlog(f"{self.strategy} neighbors of {word!r}: {len(found)}", t0)
        return tuple(found)

    # ---------- Strategies ----------
    def _scan(self, word, max_hop) -> List[Edge]:
        found = []
        n = len(word)
        for length in range(max(1, n - max_hop), n + max_hop + 1):
            for candidate in self.dictionary.words_of_length(length):
                if candidate == word:
                    continue
                d = bounded_distance(word, candidate, max_hop)
                if d is not None:
                    found.append((candidate, d))
        return found

    def _structural(self, word, max_hop) -> List[Edge]:
        dictionary = self.dictionary
        seen = {word}
        frontier = [word]
        found = []
        for level in range(1, max_hop + 1):
            next_frontier = []
            for s in frontier:
                for edit in single_edits(s, self._alphabet):
                    if edit in seen:
                        continue
                    seen.add(edit)
                    next_frontier.append(edit)
                    if edit in dictionary:
                        found.append((edit, level))
            frontier = next_frontier
        return found

    def _trie(self, word, max_hop) -> List[Edge]:
        return [
            (candidate, d)
            for candidate, d in self.dictionary.trie.within(word, max_hop)
            if candidate != word
        ]
