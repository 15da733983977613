# --- utils.py ---

import time
import threading
from enum import Enum
from colorama import Fore, Style, init

init()

# Largest edit distance a single graph edge may span
MAX_HOP_DEFAULT = 2

# Cache sizes (entries)
NEIGHBOR_CACHE_SIZE = 50_000
HEURISTIC_CACHE_SIZE = 200_000

VERBOSE = False
start_time = time.time()

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()


class Algorithm(Enum):
    ASTAR = "astar"
    IDASTAR = "idastar"
    DIJKSTRA = "dijkstra"
    FRINGE = "fringe"

    def __str__(self):
        return self.value


class Strategy(Enum):
    SCAN = "scan"
    STRUCTURAL = "structural"
    TRIE = "trie"

    def __str__(self):
        return self.value


class SearchStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNKNOWN_WORD = "unknown_word"
    CANCELLED = "cancelled"


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)


def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
