import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import requests

import solver
import utils
from solver import EXIT_FOUND, EXIT_LOAD_ERROR, EXIT_NO_PATH, load_dictionary, run_solver

CHAIN = ["adrien", "adrian", "adria", "aria", "iria", "ira", "iera", "piera", "piere", "pierre"]


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(utils, "VERBOSE", False)


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(w.upper() for w in CHAIN) + "\n\n  Aria  \n", encoding="utf-8")
    return str(path)


def test_load_dictionary_normalizes_lines(dict_file):
    dictionary = load_dictionary(dict_file)
    assert list(dictionary.all()) == CHAIN


def test_load_dictionary_from_url(monkeypatch):
    class DummyResponse:
        text = "Cat\nbat\n"
        def raise_for_status(self):
            pass

    seen = {}

    def fake_get(url, timeout=None):
        seen["url"] = url
        return DummyResponse()

    monkeypatch.setattr(solver.requests, "get", fake_get)
    dictionary = load_dictionary("https://example.org/words.txt")
    assert seen["url"] == "https://example.org/words.txt"
    assert list(dictionary.all()) == ["cat", "bat"]


def test_run_solver_prints_path(dict_file, capsys):
    code = run_solver([dict_file, "Adrien", "PIERRE", "--algorithm", "fringe"])
    out = capsys.readouterr().out
    assert code == EXIT_FOUND
    assert "->".join(CHAIN) in out
    assert "9 1-letter mutation" in out
    assert "Total cost 9" in out


def test_run_solver_positional_algorithm(dict_file, capsys):
    assert run_solver([dict_file, "adrien", "pierre", "idastar"]) == EXIT_FOUND
    assert "[idastar] Shortest path found" in capsys.readouterr().out


@pytest.mark.parametrize("strategy", ["scan", "structural", "trie"])
def test_run_solver_strategies(dict_file, capsys, strategy):
    assert run_solver([dict_file, "adrien", "pierre", "--strategy", strategy, "--no-cache"]) == EXIT_FOUND
    assert "->".join(CHAIN) in capsys.readouterr().out


def test_run_solver_unknown_word(dict_file, capsys):
    assert run_solver([dict_file, "adrien", "paris"]) == EXIT_NO_PATH
    assert "Not in dictionary: paris" in capsys.readouterr().out


def test_run_solver_include_goal(dict_file, capsys):
    code = run_solver([dict_file, "adrien", "adriens", "--include-goal"])
    assert code == EXIT_FOUND
    assert "adrien->adriens" in capsys.readouterr().out


def test_run_solver_not_found(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("cat\nbat\nxylophone\n", encoding="utf-8")
    assert run_solver([str(path), "cat", "xylophone", "--max-hop", "1"]) == EXIT_NO_PATH
    assert "No path found" in capsys.readouterr().out


def test_run_solver_compare(dict_file, capsys):
    assert run_solver([dict_file, "adrien", "pierre", "--compare"]) == EXIT_FOUND
    out = capsys.readouterr().out
    for name in ["astar", "idastar", "dijkstra", "fringe"]:
        assert f"[{name}] Shortest path found" in out


def test_run_solver_cancelled(dict_file, capsys):
    assert run_solver([dict_file, "adrien", "pierre", "--seconds", "0"]) == EXIT_NO_PATH
    assert "Search cancelled" in capsys.readouterr().out


def test_run_solver_missing_dictionary(tmp_path, capsys):
    missing = str(tmp_path / "nope.txt")
    assert run_solver([missing, "a", "b"]) == EXIT_LOAD_ERROR
    assert "Could not load dictionary" in capsys.readouterr().out


def test_run_solver_http_error(monkeypatch, capsys):
    def failing_get(url, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(solver.requests, "get", failing_get)
    assert run_solver(["http://example.org/words.txt", "a", "b"]) == EXIT_LOAD_ERROR
    assert "offline" in capsys.readouterr().out


def test_run_solver_rejects_bad_arguments(dict_file):
    with pytest.raises(SystemExit):
        run_solver([dict_file, "adrien", "pierre", "--algorithm", "bfs"])
    with pytest.raises(SystemExit):
        run_solver([dict_file, "adrien", "pierre", "--max-hop", "0"])
