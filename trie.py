# trie.py
# Prefix tree over the dictionary with a bounded Levenshtein walk, so that
# neighbor lookups can prune whole subtrees instead of scanning every word.

from typing import Dict, Iterable, Iterator, List, Optional, Tuple


class WordTrie:
    """
    Compact trie with the API we want:
      - WordTrie.build(words) -> WordTrie
      - has_prefix(str) -> bool
      - is_word(str) -> bool
      - within(word, limit) -> Iterator[(word, distance)]
    Internals:
      nodes: List[{'term': bool, 'edges': Dict[str, int]}]
      node 0 is the root.
    """

    __slots__ = ("_nodes", "_size")

    def __init__(self, nodes: List[Dict], size: int):
        # nodes[i] = {'term': bool, 'edges': {char: child_index}}
        self._nodes = nodes
        self._size = size

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "WordTrie":
        """Build a trie from the given words, stored as-is (no normalization)."""
        nodes: List[Dict[str, object]] = [{"term": False, "edges": {}}]  # root at 0
        size = 0

        for w in words:
            if not w:
                continue
            cur = 0
            for ch in w:
                edges = nodes[cur]["edges"]
                nxt = edges.get(ch)
                if nxt is None:
                    nodes.append({"term": False, "edges": {}})
                    nxt = len(nodes) - 1
                    edges[ch] = nxt
                cur = nxt
            if not nodes[cur]["term"]:
                nodes[cur]["term"] = True
                size += 1

        return cls(nodes, size)

    def __len__(self):
        return self._size

    def has_prefix(self, s: str) -> bool:
        """True if s is a path from the root (empty string is always a prefix)."""
        return self._walk(s) is not None

    def is_word(self, s: str) -> bool:
        """True if s is in the trie as a terminal word."""
        idx = self._walk(s)
        return (idx is not None) and bool(self._nodes[idx]["term"])

    def within(self, word: str, limit: int) -> Iterator[Tuple[str, int]]:
        """
        Yield (candidate, distance) for every stored word whose edit distance
        to ``word`` is <= ``limit``, ``word`` itself included when stored.

        Each trie edge extends the previous Levenshtein row by one character;
        a subtree is abandoned once the smallest value of its row exceeds
        ``limit``, since no extension can bring the distance back down.
        """
        nodes = self._nodes
        cols = len(word) + 1

        def walk(idx, prefix, prev_row):
            for ch, child in nodes[idx]["edges"].items():
                row = [prev_row[0] + 1]
                for j in range(1, cols):
                    row.append(min(
                        row[j - 1] + 1,
                        prev_row[j] + 1,
                        prev_row[j - 1] + (word[j - 1] != ch),
                    ))
                candidate = prefix + ch
                if nodes[child]["term"] and row[-1] <= limit:
                    yield candidate, row[-1]
                if min(row) <= limit:
                    yield from walk(child, candidate, row)

        yield from walk(0, "", list(range(cols)))

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for ch in s:
            edges: Dict[str, int] = nodes[idx]["edges"]  # type: ignore[assignment]
            nxt = edges.get(ch)
            if nxt is None:
                return None
            idx = nxt
        return idx
