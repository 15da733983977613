import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from dictionary import Dictionary
from graph import WordGraph
from metric import InvariantViolation, edit_distance
from utils import Strategy

CHAIN = ["adrien", "adrian", "adria", "aria", "iria", "ira", "iera", "piera", "piere", "pierre"]


@pytest.fixture
def graph():
    return WordGraph(Dictionary.load(CHAIN), max_hop=2)


def test_successors_delegate_to_generator(graph):
    assert graph.successors("adrien") == graph.generator.neighbors("adrien", 2)
    assert graph.successors("iera") == (("ira", 1), ("piera", 1), ("iria", 2), ("piere", 2))


def test_heuristic_is_edit_distance_to_goal(graph):
    for word in CHAIN:
        assert graph.heuristic(word, "pierre") == edit_distance(word, "pierre")
    assert graph.heuristic("pierre", "pierre") == 0


def test_heuristic_never_overestimates_a_hop(graph):
    for word in CHAIN:
        for succ, weight in graph.successors(word):
            assert graph.heuristic(word, "pierre") <= weight + graph.heuristic(succ, "pierre")


def test_cost_vectors(graph):
    assert graph.zero_cost() == (0, 0)
    assert graph.edge_cost(1) == (1, 0)
    assert graph.edge_cost(2) == (2, 1)
    assert graph.estimate("piere", "pierre") == (1, 0)
    with pytest.raises(InvariantViolation):
        graph.edge_cost(3)
    with pytest.raises(InvariantViolation):
        graph.edge_cost(0)


def test_contains(graph):
    assert graph.contains("aria")
    assert not graph.contains("maria")


def test_graph_configuration_reaches_generator():
    g = WordGraph(Dictionary.load(CHAIN), max_hop=1, strategy=Strategy.STRUCTURAL, cache_size=0)
    assert g.max_hop == 1
    assert g.generator.strategy is Strategy.STRUCTURAL
    assert g.successors("adrien") == (("adrian", 1),)
    assert g.zero_cost() == (0,)
