# graph.py
# Implicit word graph: edges are generated per expansion, never stored.

from dictionary import Dictionary
from metric import InvariantViolation, edit_distance
from neighbor_cache import ComputeCache, log_cache_summary
from neighbors import NeighborGenerator
from path import estimate_cost, hop_cost, zero_cost
from utils import HEURISTIC_CACHE_SIZE, MAX_HOP_DEFAULT, NEIGHBOR_CACHE_SIZE, Strategy


class WordGraph:
    """What the search algorithms see of the dictionary.

    ``successors`` yields ``(word, weight)`` edges with weights in
    ``1..max_hop``; ``heuristic`` is the edit distance to the goal, which the
    triangle inequality makes admissible and consistent.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        max_hop: int = MAX_HOP_DEFAULT,
        strategy=Strategy.SCAN,
        cache_size: int = NEIGHBOR_CACHE_SIZE,
        heuristic_cache_size: int = HEURISTIC_CACHE_SIZE,
    ):
        self.dictionary = dictionary
        self.generator = NeighborGenerator(
            dictionary, max_hop=max_hop, strategy=strategy, cache_size=cache_size
        )
        self.max_hop = self.generator.max_hop
        self._heuristics = ComputeCache("heuristic", self._distance, heuristic_cache_size)

    def contains(self, word: str) -> bool:
        return word in self.dictionary

    def successors(self, word: str):
        return self.generator.neighbors(word)

    def heuristic(self, word: str, goal: str) -> int:
        return self._heuristics.get(word, goal)

    @staticmethod
    def _distance(word, goal):
        d = edit_distance(word, goal)
        if d < 0 or (d == 0) != (word == goal):
            raise InvariantViolation(f"edit_distance({word!r}, {goal!r}) returned {d}")
        return d

    # ---------- Cost vectors ----------
    def zero_cost(self):
        return zero_cost(self.max_hop)

    def edge_cost(self, weight: int):
        if not 1 <= weight <= self.max_hop:
            raise InvariantViolation(f"edge weight {weight} outside 1..{self.max_hop}")
        return hop_cost(weight, self.max_hop)

    def estimate(self, word: str, goal: str):
        return estimate_cost(self.heuristic(word, goal), self.max_hop)

    def log_cache_summary(self):
        log_cache_summary(self.generator.cache, self._heuristics)
