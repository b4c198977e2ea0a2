"""Dynamic-programming problems: frogs, vacation, knapsack, LCS and longest path."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def frog1(heights: Sequence[int]) -> int:
    """Minimum total cost for a frog jumping one or two stones at a time."""
    return frog2(heights, 2)


def frog2(heights: Sequence[int], k: int) -> int:
    """Minimum total cost for a frog jumping up to ``k`` stones at a time.

    A jump from stone ``i`` to stone ``j`` costs ``|h[i] - h[j]|``.  A jump of
    one stone is always allowed, even when ``k`` is below one.
    """
    heights = list(heights)
    if not heights:
        raise ValueError("at least one stone is required")
    reach = max(k, 1)
    cost = [0] * len(heights)
    for i, height in enumerate(heights[1:], start=1):
        start = max(0, i - reach)
        cost[i] = min(
            prev_cost + abs(height - prev_height)
            for prev_cost, prev_height in zip(cost[start:i], heights[start:i])
        )
    return cost[-1]


def vacation(days: Iterable[Sequence[int]]) -> int:
    """Maximum happiness over the days, never doing the same activity twice in a row.

    Each day offers three activities.  As in the reference solution, the best
    total from any day onwards is never allowed to drop below zero.
    """
    rows = [tuple(row) for row in days]
    for row in rows:
        if len(row) != 3:
            raise ValueError("each day must offer exactly three activities")
    following = [0, 0, 0]
    best = 0
    for row in reversed(rows):
        gains = [value + after for value, after in zip(row, following)]
        best = max(0, *gains)
        following = [
            max(0, *(gain for activity, gain in enumerate(gains) if activity != last))
            for last in range(3)
        ]
    return best


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Maximum total value of ``(weight, value)`` items fitting in ``capacity``."""
    if capacity < 0:
        return 0
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weights must not be negative")
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs(s: str, t: str) -> str:
    """One longest common subsequence of ``s`` and ``t``."""
    table = [[0] * (len(t) + 1) for _ in range(len(s) + 1)]
    for i, a in enumerate(s, start=1):
        above, row = table[i - 1], table[i]
        for j, b in enumerate(t, start=1):
            row[j] = above[j - 1] + 1 if a == b else max(row[j - 1], above[j])

    picked: list[str] = []
    i, j = len(s), len(t)
    while i > 0 and j > 0:
        if s[i - 1] == t[j - 1]:
            picked.append(s[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_path(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest directed path of a graph on vertices ``1..n``.

    Vertices are processed in topological order; a graph without edges gives -1.
    """
    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 1..{n}")
        neighbours[x].append(y)
        neighbours[y].append(x)
        indegree[y] += 1

    queue = deque(v for v in range(1, n + 1) if indegree[v] == 0)
    depth = [0] * (n + 1)
    while queue:
        u = queue.popleft()
        for v in neighbours[u]:
            depth[v] = max(depth[v], depth[u] + 1)
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return max(depth) - 1