import threading
from collections import OrderedDict

from utils import vlog


# LRU cache using OrderedDict
class LRUCache(OrderedDict):
    def __init__(self, maxsize, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maxsize = maxsize
    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value
    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]


class ComputeCache:
    """Memoize ``compute(*key)`` behind a size-capped, lock-guarded LRU.

    Entries are pure functions of their key, so hits never change results.
    A ``maxsize`` of 0 disables caching and always recomputes without
    touching the hit/miss counters.
    """

    def __init__(self, name, compute, maxsize):
        self.name = name
        self._compute = compute
        self._cache = LRUCache(maxsize) if maxsize > 0 else None
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def disabled(self):
        return self._cache is None

    def get(self, *key):
        if self._cache is None:
            return self._compute(*key)

        with self._lock:
            if key in self._cache:
                self.hits += 1
                return self._cache[key]

        val = self._compute(*key)
        with self._lock:
            self.misses += 1
            self._cache[key] = val
        return val

    def __len__(self):
        return 0 if self._cache is None else len(self._cache)

    def clear(self):
        if self._cache is not None:
            with self._lock:
                self._cache.clear()
        self.hits = 0
        self.misses = 0


def log_cache_summary(*caches):
    for cache in caches:
        if cache.disabled:
            vlog(f"[CACHE SUMMARY] {cache.name}: disabled")
            continue
        vlog(
            f"[CACHE SUMMARY] {cache.name}: {len(cache)} entries, "
            f"{cache.hits} hits, {cache.misses} misses"
        )
