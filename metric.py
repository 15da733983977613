# metric.py
# Levenshtein distance (unit-cost insert/delete/substitute) and a banded,
# early-abandoning variant used for neighbor scans.

from typing import Optional


class InvariantViolation(RuntimeError):
    """A metric or graph value that cannot happen (e.g. a negative distance)."""


def edit_distance(a: str, b: str) -> int:
    """Exact Levenshtein distance between ``a`` and ``b``."""
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        current_row = [i + 1]
        for j, cb in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (ca != cb)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def bounded_distance(a: str, b: str, limit: int) -> Optional[int]:
    """
    Levenshtein distance between ``a`` and ``b`` if it is <= ``limit``,
    otherwise None.

    Only the diagonal band of width 2*limit+1 is tracked, so the cost is
    O(len(a) * limit). Row layout: band[k] holds dp[i][j] with
    j = i + k - limit; cells outside the band are clamped to limit+1.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    n, m = len(a), len(b)
    if abs(n - m) > limit:
        return None
    if a == b:
        return 0

    width = 2 * limit + 1
    over = limit + 1
    prev = [k - limit if 0 <= k - limit <= m else over for k in range(width)]

    for i in range(1, n + 1):
        cur = [over] * width
        ca = a[i - 1]
        row_min = over
        for k in range(width):
            j = i + k - limit
            if j < 0 or j > m:
                continue
            if j == 0:
                v = i
            else:
                v = prev[k] + (ca != b[j - 1])
                if k + 1 < width and prev[k + 1] + 1 < v:
                    v = prev[k + 1] + 1
                if k > 0 and cur[k - 1] + 1 < v:
                    v = cur[k - 1] + 1
            if v > over:
                v = over
            cur[k] = v
            if v < row_min:
                row_min = v
        if row_min > limit:
            return None
        prev = cur

    d = prev[m - n + limit]
    return d if d <= limit else None
