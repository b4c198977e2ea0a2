"""Introductory problems: arrays, missing numbers, palindromes, runs and Collatz."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby


def increasing_array(values: Iterable[int]) -> int:
    """Total amount added to make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def missing_number(n: int, values: Iterable[int]) -> int:
    """The number from ``1..n`` that is absent from the ``n - 1`` given values."""
    ordered = sorted(values)
    if len(ordered) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(ordered)}")
    for expected, value in enumerate(ordered, start=1):
        if value != expected:
            return expected
    return n


def palindrome_reorder(s: str) -> str | None:
    """A palindrome made of the letters of ``s``, or ``None`` if there is none.

    Letters are laid out in sorted order; the single letter with an odd count,
    if any, goes whole into the middle.
    """
    half: list[str] = []
    middle = ""
    odd_seen = False
    for letter, count in sorted(Counter(s).items()):
        if count % 2:
            if odd_seen:
                return None
            odd_seen = True
            middle = letter * count
        else:
            half.append(letter * (count // 2))
    left = "".join(half)
    return left + middle + left[::-1]


def repetitions(s: str) -> int:
    """Length of the longest run of one repeated character (1 for an empty string)."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=1)


def weird_algorithm(n: int) -> list[int]:
    """The sequence from ``n`` down to 1: halve even values, map odd ``x`` to ``3x + 1``."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = 3 * n + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence