import argparse
import time

import requests
from colorama import Fore

import utils
from utils import Algorithm, MAX_HOP_DEFAULT, NEIGHBOR_CACHE_SIZE, SearchStatus, Strategy, log_with_time, vlog
from dictionary import Dictionary
from graph import WordGraph
from search import CancelToken, compare_algorithms, find_path


EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_LOAD_ERROR = 2


def read_words(source):
    """Raw dictionary lines from a local file or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        resp = requests.get(source, timeout=30)
        resp.raise_for_status()
        return resp.text.splitlines()
    with open(source, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def load_dictionary(source, extra_words=()):
    t0 = time.time()
    log_with_time(f"⟳ Loading dictionary from {source}…")
    words = [w.strip().lower() for w in read_words(source)]
    words.extend(extra_words)
    dictionary = Dictionary.load(w for w in words if w)
    vlog(f"Dictionary loaded and deduplicated ({len(words)} lines)", t0)
    log_with_time(f"✅ {len(dictionary)} words loaded into memory")
    return dictionary


def report_outcome(outcome, elapsed=None):
    """Print one search outcome; returns the matching exit status."""
    algorithm = outcome.algorithm
    took = f" in {elapsed:.3f}s" if elapsed is not None else ""
    if outcome.status is SearchStatus.FOUND:
        path = outcome.path
        log_with_time(
            f"[{algorithm}] Shortest path found{took}: {path} (achieved in {path.summary()})",
            color=Fore.GREEN,
        )
        log_with_time(
            f"[{algorithm}] Total cost {path.cost} over {path.hops} hop(s), "
            f"{outcome.stats.expanded} word(s) expanded",
            color=Fore.GREEN,
        )
        return EXIT_FOUND
    if outcome.status is SearchStatus.UNKNOWN_WORD:
        missing = ", ".join(outcome.unknown)
        log_with_time(f"[{algorithm}] Not in dictionary: {missing}", color=Fore.RED)
    elif outcome.status is SearchStatus.CANCELLED:
        log_with_time(
            f"[{algorithm}] Search cancelled{took} after {outcome.stats.expanded} expansion(s)",
            color=Fore.YELLOW,
        )
    else:
        log_with_time(
            f"[{algorithm}] No path found{took} with hops of at most the configured edit distance",
            color=Fore.YELLOW,
        )
    return EXIT_NO_PATH


def build_parser():
    parser = argparse.ArgumentParser(description="Find a shortest edit-path between two input words")
    parser.add_argument("dictionary", help="Dictionary file (one word per line) or http(s) URL")
    parser.add_argument("start", help="Starting word")
    parser.add_argument("end", help="Ending word")
    parser.add_argument(
        "algorithm_pos",
        nargs="?",
        choices=[a.value for a in Algorithm],
        default=None,
        metavar="ALGORITHM",
        help="Algorithm to use (same as --algorithm)",
    )
    parser.add_argument(
        "-a", "--algorithm",
        choices=[a.value for a in Algorithm],
        default=None,
        help=f"Algorithm used to compute the shortest path (default: {Algorithm.ASTAR})",
    )
    parser.add_argument(
        "--max-hop", type=int, default=MAX_HOP_DEFAULT,
        help=f"Largest edit distance a single hop may span (default: {MAX_HOP_DEFAULT})",
    )
    parser.add_argument(
        "--strategy", choices=[s.value for s in Strategy], default=Strategy.SCAN.value,
        help="Neighbor generation strategy (default: scan)",
    )
    parser.add_argument("--compare", action="store_true", help="Run all four algorithms and compare them")
    parser.add_argument("--seconds", type=float, default=None, help="Time budget per search, in seconds")
    parser.add_argument(
        "--include-goal", action="store_true", help="Add the ending word to the dictionary before searching"
    )
    parser.add_argument("--no-cache", action="store_true", help="Disable neighbor and heuristic caching")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def run_solver(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_hop < 1:
        parser.error("--max-hop must be at least 1")

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    start = args.start.lower()
    end = args.end.lower()
    algorithm = Algorithm(args.algorithm or args.algorithm_pos or Algorithm.ASTAR.value)

    try:
        dictionary = load_dictionary(args.dictionary, extra_words=[end] if args.include_goal else ())
    except (OSError, requests.RequestException) as e:
        log_with_time(f"Could not load dictionary {args.dictionary}: {e}", color=Fore.RED)
        return EXIT_LOAD_ERROR

    cache_size = 0 if args.no_cache else NEIGHBOR_CACHE_SIZE
    graph = WordGraph(
        dictionary,
        max_hop=args.max_hop,
        strategy=Strategy(args.strategy),
        cache_size=cache_size,
        heuristic_cache_size=cache_size,
    )

    if args.compare:
        log_with_time(
            f"Comparing {', '.join(a.value for a in Algorithm)} between {start} and {end}",
            color=Fore.CYAN,
        )
        outcomes = compare_algorithms(graph, start, end, seconds=args.seconds)
        codes = [report_outcome(o, o.stats.elapsed) for o in outcomes]
        graph.log_cache_summary()
        return EXIT_FOUND if EXIT_FOUND in codes else EXIT_NO_PATH

    log_with_time(
        f"Using {algorithm} algorithm to compute shortest path between {start} and {end}",
        color=Fore.CYAN,
    )
    t0 = time.time()
    outcome = find_path(graph, start, end, algorithm, CancelToken(args.seconds))
    code = report_outcome(outcome, time.time() - t0)
    graph.log_cache_summary()

    total_elapsed = time.time() - utils.start_time
    print(f"Total time: {int(total_elapsed // 60)}m {total_elapsed % 60:.1f}s")
    return code
