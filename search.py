# search.py
# Four interchangeable shortest-path searches over the implicit word graph.
#
# Every variant has the same signature, ``search(graph, start, goal,
# cancel=None) -> SearchOutcome``, and the same preconditions and trivial
# cases, handled once by ``_search_entry``. Costs are the vectors of path.py;
# ties between equal keys go to discovery order.

from collections import deque
import concurrent.futures
import functools
import heapq
import itertools
import time

from metric import InvariantViolation
from path import PathResult, add_costs
from utils import Algorithm, SearchStatus, vlog


class CancelToken:
    """Cancellation flag checked at every expansion, with an optional time budget."""

    def __init__(self, seconds=None):
        self._cancelled = False
        self._deadline = None if seconds is None else time.monotonic() + seconds

    def cancel(self):
        self._cancelled = True

    def is_cancelled(self):
        if not self._cancelled and self._deadline is not None:
            if time.monotonic() >= self._deadline:
                self._cancelled = True
        return self._cancelled


class SearchStats:
    __slots__ = ("expanded", "generated", "iterations", "max_frontier", "elapsed")

    def __init__(self):
        self.expanded = 0       # successor lists requested
        self.generated = 0      # edges examined
        self.iterations = 0     # threshold rounds (1 for Dijkstra/A*)
        self.max_frontier = 0
        self.elapsed = 0.0

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self):
        return f"SearchStats({self.as_dict()})"


class SearchOutcome:
    """Terminal result of one search: a status, the path when found, and stats."""

    def __init__(self, algorithm, status, path=None, stats=None, unknown=()):
        self.algorithm = algorithm
        self.status = status
        self.path = path
        self.stats = stats if stats is not None else SearchStats()
        self.unknown = tuple(unknown)

    @property
    def found(self):
        return self.status is SearchStatus.FOUND

    @property
    def cost(self):
        return self.path.cost if self.path is not None else None

    def __repr__(self):
        return (
            f"SearchOutcome({self.algorithm}, {self.status.value}, "
            f"path={self.path!r}, expanded={self.stats.expanded})"
        )


def _reconstruct(parents, goal):
    """Walk ``parents`` (word -> (parent, weight), start -> None) back from goal."""
    words = [goal]
    weights = []
    edge = parents[goal]
    while edge is not None:
        parent, weight = edge
        words.append(parent)
        weights.append(weight)
        edge = parents[parent]
    words.reverse()
    weights.reverse()
    return PathResult(words, weights)


def _search_entry(algorithm):
    """Wrap a search core with the checks and bookkeeping every variant shares."""
    def decorate(core):
        @functools.wraps(core)
        def search(graph, start, goal, cancel=None):
            t0 = time.time()
            stats = SearchStats()
            unknown = [w for w in (start, goal) if not graph.contains(w)]
            if unknown:
                vlog(f"{algorithm}: unknown word(s) {', '.join(map(repr, unknown))}")
                return SearchOutcome(algorithm, SearchStatus.UNKNOWN_WORD, stats=stats, unknown=unknown)
            if start == goal:
                return SearchOutcome(algorithm, SearchStatus.FOUND, PathResult([start], []), stats)

            status, path = core(graph, start, goal, cancel or CancelToken(), stats)
            stats.elapsed = time.time() - t0
            vlog(
                f"{algorithm}: {status.value} after {stats.expanded} expansions, "
                f"{stats.iterations} iteration(s), frontier peak {stats.max_frontier}",
                t0,
            )
            return SearchOutcome(algorithm, status, path, stats)

        search.algorithm = algorithm
        return search
    return decorate


# ============== Dijkstra / A* ==============
def _best_first(graph, start, goal, cancel, stats, use_heuristic):
    counter = itertools.count()
    zero = graph.zero_cost()
    if use_heuristic:
        def estimate(word):
            return graph.estimate(word, goal)
    else:
        def estimate(word):
            return zero

    stats.iterations = 1
    best = {start: zero}
    parents = {start: None}
    closed = set()
    frontier = [(estimate(start), next(counter), zero, start)]

    while frontier:
        if cancel.is_cancelled():
            return SearchStatus.CANCELLED, None
        _, _, g, word = heapq.heappop(frontier)
        if word in closed:
            # stale entry, a cheaper one was settled first
            continue
        if word == goal:
            return SearchStatus.FOUND, _reconstruct(parents, goal)
        closed.add(word)
        stats.expanded += 1
        for succ, weight in graph.successors(word):
            stats.generated += 1
            if succ in closed:
                continue
            g_succ = add_costs(g, graph.edge_cost(weight))
            known = best.get(succ)
            if known is not None and known <= g_succ:
                continue
            best[succ] = g_succ
            parents[succ] = (word, weight)
            heapq.heappush(frontier, (add_costs(g_succ, estimate(succ)), next(counter), g_succ, succ))
        if len(frontier) > stats.max_frontier:
            stats.max_frontier = len(frontier)

    return SearchStatus.NOT_FOUND, None


@_search_entry(Algorithm.DIJKSTRA)
def dijkstra_search(graph, start, goal, cancel, stats):
    """Uniform-cost search: settle the cheapest unsettled word until goal is settled."""
    return _best_first(graph, start, goal, cancel, stats, use_heuristic=False)


@_search_entry(Algorithm.ASTAR)
def astar_search(graph, start, goal, cancel, stats):
    """A*: Dijkstra ordered by g + edit distance to goal."""
    return _best_first(graph, start, goal, cancel, stats, use_heuristic=True)


# ============== IDA* ==============
@_search_entry(Algorithm.IDASTAR)
def idastar_search(graph, start, goal, cancel, stats):
    """
    Iterative-deepening A*: repeated depth-first passes bounded by a cost
    threshold, starting at h(start). Each pass records the smallest f that
    overshot the threshold and uses it as the next one. Memory is the current
    path only; words already on the path are skipped to avoid cycles.
    """
    path = [start]
    weights = []
    on_path = {start}

    def dfs(word, g, threshold):
        # Returns FOUND, CANCELLED, or the smallest f above threshold
        # (None when nothing overshot).
        f = add_costs(g, graph.estimate(word, goal))
        if f > threshold:
            return f
        if word == goal:
            return SearchStatus.FOUND
        if cancel.is_cancelled():
            return SearchStatus.CANCELLED
        stats.expanded += 1

        children = []
        for succ, weight in graph.successors(word):
            stats.generated += 1
            if succ in on_path:
                continue
            g_succ = add_costs(g, graph.edge_cost(weight))
            f_succ = add_costs(g_succ, graph.estimate(succ, goal))
            children.append((f_succ, len(children), succ, weight, g_succ))
        children.sort()

        minimum = None
        for _, _, succ, weight, g_succ in children:
            path.append(succ)
            weights.append(weight)
            on_path.add(succ)
            if len(path) > stats.max_frontier:
                stats.max_frontier = len(path)
            t = dfs(succ, g_succ, threshold)
            if t is SearchStatus.FOUND or t is SearchStatus.CANCELLED:
                return t
            path.pop()
            weights.pop()
            on_path.discard(succ)
            if t is not None and (minimum is None or t < minimum):
                minimum = t
        return minimum

    threshold = graph.estimate(start, goal)
    while True:
        stats.iterations += 1
        vlog(f"idastar: pass {stats.iterations}, threshold {threshold[0]}")
        t = dfs(start, graph.zero_cost(), threshold)
        if t is SearchStatus.FOUND:
            return SearchStatus.FOUND, PathResult(path, weights)
        if t is SearchStatus.CANCELLED:
            return SearchStatus.CANCELLED, None
        if t is None:
            return SearchStatus.NOT_FOUND, None
        if t <= threshold:
            raise InvariantViolation(f"idastar threshold did not grow: {threshold} -> {t}")
        threshold = t


# ============== Fringe ==============
@_search_entry(Algorithm.FRINGE)
def fringe_search(graph, start, goal, cancel, stats):
    """
    Fringe search: A* without a priority queue. Words are scanned from a
    ``now`` list in list order; those whose f exceeds the current threshold
    move to ``later``. When ``now`` runs dry the threshold rises to the
    smallest deferred f and ``later`` becomes ``now``. A per-word best-g cache
    replaces the open/closed sets.
    """
    zero = graph.zero_cost()
    best = {start: zero}
    parents = {start: None}
    now = deque([start])
    later = deque()
    in_now = {start}
    in_later = set()
    flimit = graph.estimate(start, goal)

    while now:
        stats.iterations += 1
        fmin = None
        while now:
            if cancel.is_cancelled():
                return SearchStatus.CANCELLED, None
            word = now.popleft()
            in_now.discard(word)
            g = best[word]
            f = add_costs(g, graph.estimate(word, goal))
            if f > flimit:
                if fmin is None or f < fmin:
                    fmin = f
                later.append(word)
                in_later.add(word)
                continue
            if word == goal:
                return SearchStatus.FOUND, _reconstruct(parents, goal)

            stats.expanded += 1
            fresh = []
            for succ, weight in graph.successors(word):
                stats.generated += 1
                g_succ = add_costs(g, graph.edge_cost(weight))
                known = best.get(succ)
                if known is not None and known <= g_succ:
                    continue
                best[succ] = g_succ
                parents[succ] = (word, weight)
                if succ in in_later:
                    later.remove(succ)
                    in_later.discard(succ)
                elif succ in in_now:
                    now.remove(succ)
                    in_now.discard(succ)
                fresh.append(succ)
            # children go right after their parent, first discovered first
            for succ in reversed(fresh):
                now.appendleft(succ)
                in_now.add(succ)
            size = len(now) + len(later)
            if size > stats.max_frontier:
                stats.max_frontier = size

        vlog(f"fringe: pass {stats.iterations} done, {len(later)} deferred")
        flimit = fmin
        now, later = later, now
        in_now, in_later = in_later, in_now

    return SearchStatus.NOT_FOUND, None


ALGORITHMS = {
    Algorithm.ASTAR: astar_search,
    Algorithm.IDASTAR: idastar_search,
    Algorithm.DIJKSTRA: dijkstra_search,
    Algorithm.FRINGE: fringe_search,
}


def find_path(graph, start, goal, algorithm=Algorithm.ASTAR, cancel=None):
    """Run one algorithm (an ``Algorithm`` or its name) from start to goal."""
    return ALGORITHMS[Algorithm(algorithm)](graph, start, goal, cancel)


def compare_algorithms(graph, start, goal, algorithms=None, seconds=None, max_workers=None):
    """
    Run several algorithms side by side on the same graph and return their
    outcomes in the requested order. Each run gets its own cancel token, so
    ``seconds`` is a per-algorithm budget. Optimal algorithms that all find a
    path must agree on its cost; a disagreement is a bug and raises.
    """
    algorithms = [Algorithm(a) for a in (algorithms or ALGORITHMS)]
    outcomes = {}
    t0 = time.time()
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_algorithm = {
            executor.submit(find_path, graph, start, goal, algorithm, CancelToken(seconds)): algorithm
            for algorithm in algorithms
        }
        for future in concurrent.futures.as_completed(future_to_algorithm):
            algorithm = future_to_algorithm[future]
            outcomes[algorithm] = future.result()
            vlog(f"compare: {algorithm} finished with {outcomes[algorithm].status.value}", t0)

    costs = {o.cost for o in outcomes.values() if o.found}
    if len(costs) > 1:
        detail = ", ".join(f"{a}={o.cost}" for a, o in outcomes.items() if o.found)
        raise InvariantViolation(f"algorithms disagree on the optimal cost: {detail}")
    return [outcomes[a] for a in algorithms]
