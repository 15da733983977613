# path.py
# Search results and the cost vectors the algorithms order paths by.
#
# A cost vector is (total, hops of weight max_hop, ..., hops of weight 2).
# Vectors compare lexicographically, so the total edit distance decides
# first and, among equal totals, paths with fewer multi-letter hops win.

from collections import Counter
from typing import Dict, Iterable, Sequence, Tuple

Cost = Tuple[int, ...]


def zero_cost(max_hop: int) -> Cost:
    return (0,) * max_hop


def hop_cost(weight: int, max_hop: int) -> Cost:
    """Cost vector of a single edge of the given weight."""
    return (weight,) + tuple(int(weight == w) for w in range(max_hop, 1, -1))


def estimate_cost(distance: int, max_hop: int) -> Cost:
    """Heuristic lower bound as a cost vector: no multi-letter hop assumed."""
    return (distance,) + (0,) * (max_hop - 1)


def add_costs(a: Cost, b: Cost) -> Cost:
    return tuple(x + y for x, y in zip(a, b))


class PathResult:
    """Ordered words from start to goal plus the weight of every hop."""

    __slots__ = ("words", "weights")

    def __init__(self, words: Sequence[str], weights: Iterable[int]):
        words = tuple(words)
        weights = tuple(weights)
        if not words:
            raise ValueError("a path holds at least one word")
        if len(weights) != len(words) - 1:
            raise ValueError(
                f"{len(words)} words need {len(words) - 1} hop weights, got {len(weights)}"
            )
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "weights", weights)

    def __setattr__(self, name, value):
        raise AttributeError("PathResult is immutable")

    @property
    def start(self) -> str:
        return self.words[0]

    @property
    def goal(self) -> str:
        return self.words[-1]

    @property
    def cost(self) -> int:
        return sum(self.weights)

    @property
    def hops(self) -> int:
        return len(self.weights)

    def breakdown(self) -> Dict[int, int]:
        """``{weight: number of hops}``, heaviest first."""
        counts = Counter(self.weights)
        return {w: counts[w] for w in sorted(counts, reverse=True)}

    def summary(self) -> str:
        """e.g. ``1 2-letter mutation + 3 1-letter mutation``."""
        parts = [f"{n} {w}-letter mutation" for w, n in self.breakdown().items()]
        return " + ".join(parts) if parts else "0 mutation"

    def __iter__(self):
        return iter(self.words)

    def __len__(self):
        return len(self.words)

    def __eq__(self, other):
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.words == other.words and self.weights == other.weights

    def __hash__(self):
        return hash((self.words, self.weights))

    def __str__(self):
        return "->".join(self.words)

    def __repr__(self):
        return f"PathResult({list(self.words)!r}, cost={self.cost})"
