"""Sorting and searching problems: binary searches, sweeps, windows and prefix sums."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate


def _fits_in_parts(values: Sequence[int], k: int, limit: int) -> bool:
    """Whether ``values`` split greedily into at most ``k`` parts each summing to ``limit`` or less."""
    room = 0
    parts = 0
    for value in values:
        if room >= value:
            room -= value
            continue
        parts += 1
        if parts > k or limit < value:
            return False
        room = limit - value
    return True


def array_division(values: Iterable[int], k: int) -> int:
    """Smallest possible largest part sum when ``values`` is cut into ``k`` contiguous parts."""
    numbers = list(values)
    total = sum(numbers)
    if k == 1:
        return total
    lo, hi, best = 0, total, total
    while lo <= hi:
        mid = (lo + hi) // 2
        if _fits_in_parts(numbers, k, mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def distinct_numbers(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def _produces(machines: Sequence[int], k: int, elapsed: int) -> bool:
    produced = 0
    for duration in machines:
        produced += elapsed // duration
        if produced >= k:
            return True
    return False


def factory_machines(times: Iterable[int], k: int) -> int:
    """Shortest time in which machines with the given cycle times make ``k`` products."""
    machines = list(times)
    if not machines:
        raise ValueError("at least one machine is required")
    if min(machines) < 1:
        raise ValueError("machine times must be positive")
    lo, hi = 0, k * machines[0]
    best = hi
    while lo <= hi:
        mid = (lo + hi) // 2
        if _produces(machines, k, mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Most ``(start, end)`` movies that can be watched in full, one after another."""
    watched = 0
    free_from = 0
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if start >= free_from:
            free_from = end
            watched += 1
    return watched


def playlist(songs: Iterable[int]) -> int:
    """Length of the longest run of consecutive songs with no song repeated."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for position, song in enumerate(songs):
        if song in last_seen:
            start = max(start, last_seen[song] + 1)
        last_seen[song] = position
        best = max(best, position - start + 1)
    return best


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Greatest number of customers present at once, given arrival and leaving times."""
    changes: dict[int, int] = {}
    for arrival, leaving in intervals:
        changes[arrival] = 1
        changes[leaving] = -1
    running = accumulate(delta for _, delta in sorted(changes.items()))
    return max(0, max(running, default=0))


def subarray_divisibility(values: Iterable[int]) -> int:
    """Number of contiguous subarrays whose sum is divisible by the array length."""
    numbers = list(values)
    n = len(numbers)
    if n == 0:
        return 0
    seen: Counter[int] = Counter({0: 1})
    remainder = 0
    found = 0
    for value in numbers:
        remainder = (remainder + value) % n
        found += seen[remainder]
        seen[remainder] += 1
    return found


def subarray_sums_1(values: Iterable[int], x: int) -> int:
    """Number of contiguous subarrays of positive values summing to ``x``."""
    window: deque[int] = deque()
    window_sum = 0
    found = 0
    for value in values:
        window.append(value)
        window_sum += value
        while window_sum > x and window:
            window_sum -= window.popleft()
        if window_sum == x:
            found += 1
    return found


def subarray_sums_2(values: Iterable[int], x: int) -> int:
    """Number of contiguous subarrays summing to ``x``; values may be negative."""
    prefixes: Counter[int] = Counter({0: 1})
    total = 0
    found = 0
    for value in values:
        total += value
        found += prefixes[total - x]
        prefixes[total] += 1
    return found


def sum_of_three_values(values: Iterable[int], x: int) -> tuple[int, int, int] | None:
    """1-based positions of three distinct values summing to ``x``, or ``None``."""
    indexed = sorted((value, position) for position, value in enumerate(values, start=1))
    last = len(indexed) - 1
    for pivot, (value, position) in enumerate(indexed):
        target = x - value
        lo, hi = 0, last
        while lo != hi:
            pair = indexed[lo][0] + indexed[hi][0]
            if lo != pivot and hi != pivot and pair == target:
                return position, indexed[lo][1], indexed[hi][1]
            if pair < target:
                lo += 1
            else:
                hi -= 1
    return None


def sum_of_two_values(values: Iterable[int], x: int) -> tuple[int, int] | None:
    """1-based positions of two values summing to ``x``, or ``None``.

    When several pairs exist, the one completed last is reported.
    """
    wanted: dict[int, int] = {}
    found: tuple[int, int] | None = None
    for position, value in enumerate(values, start=1):
        if value in wanted:
            found = (wanted[value], position)
        else:
            wanted[x - value] = position
    return found