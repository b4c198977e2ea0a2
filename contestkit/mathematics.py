"""Number problems: multiplication table median and largest common divisor."""

from __future__ import annotations

from collections.abc import Iterable


def multiplication_table_median(n: int) -> int:
    """Median of the ``n`` x ``n`` multiplication table (0 when ``n`` is 0)."""
    if n < 0:
        raise ValueError("n must not be negative")
    needed = (n * n + 1) // 2
    lo, hi = 1, n * n
    while lo < hi:
        mid = (lo + hi) // 2
        at_most = sum(min(n, mid // row) for row in range(1, n + 1))
        if at_most >= needed:
            hi = mid
        else:
            lo = mid + 1
    return hi


def common_divisors(values: Iterable[int]) -> int:
    """Largest greatest common divisor of any two of ``values``."""
    numbers = list(values)
    if len(numbers) < 2:
        raise ValueError("at least two values are required")
    if min(numbers) < 1:
        raise ValueError("values must be positive integers")
    top = max(numbers)
    counts = [0] * (top + 1)
    for number in numbers:
        counts[number] += 1
    for divisor in range(top, 0, -1):
        if sum(counts[divisor::divisor]) > 1:
            return divisor
    return 1