"""Command line: read a problem's input from standard input and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable

from contestkit.dpcontest import frog1, frog2, knapsack, lcs, longest_path, vacation
from contestkit.introductory import (
    increasing_array,
    missing_number,
    palindrome_reorder,
    repetitions,
    weird_algorithm,
)
from contestkit.mathematics import common_divisors, multiplication_table_median
from contestkit.searching import (
    array_division,
    distinct_numbers,
    factory_machines,
    movie_festival,
    playlist,
    restaurant_customers,
    subarray_divisibility,
    subarray_sums_1,
    subarray_sums_2,
    sum_of_three_values,
    sum_of_two_values,
)


class _Tokens:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {}


def _problem(name: str) -> Callable[[Callable[[_Tokens], str]], Callable[[_Tokens], str]]:
    def register(handler: Callable[[_Tokens], str]) -> Callable[[_Tokens], str]:
        _PROBLEMS[name] = handler
        return handler

    return register


def _joined(numbers: Iterable[int] | None) -> str:
    return "IMPOSSIBLE" if numbers is None else " ".join(map(str, numbers))


@_problem("frog1")
def _frog1(tokens: _Tokens) -> str:
    return str(frog1(tokens.numbers(tokens.number())))


@_problem("frog2")
def _frog2(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return str(frog2(tokens.numbers(n), k))


@_problem("vacation")
def _vacation(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(vacation([tokens.numbers(3) for _ in range(n)]))


@_problem("knapsack")
def _knapsack(tokens: _Tokens) -> str:
    n, capacity = tokens.number(), tokens.number()
    return str(knapsack(tokens.pairs(n), capacity))


@_problem("lcs")
def _lcs(tokens: _Tokens) -> str:
    s, t = tokens.word(), tokens.word()
    return lcs(s, t)


@_problem("longest-path")
def _longest_path(tokens: _Tokens) -> str:
    n, m = tokens.number(), tokens.number()
    return str(longest_path(n, tokens.pairs(m)))


@_problem("multiplication-table")
def _multiplication_table(tokens: _Tokens) -> str:
    return str(multiplication_table_median(tokens.number()))


@_problem("increasing-array")
def _increasing_array(tokens: _Tokens) -> str:
    return str(increasing_array(tokens.numbers(tokens.number())))


@_problem("missing-number")
def _missing_number(tokens: _Tokens) -> str:
    n = tokens.number()
    return str(missing_number(n, tokens.numbers(n - 1)))


@_problem("palindrome-reorder")
def _palindrome_reorder(tokens: _Tokens) -> str:
    result = palindrome_reorder(tokens.word())
    return "NO SOLUTION" if result is None else result


@_problem("repetitions")
def _repetitions(tokens: _Tokens) -> str:
    return str(repetitions(tokens.word()))


@_problem("weird-algorithm")
def _weird_algorithm(tokens: _Tokens) -> str:
    return _joined(weird_algorithm(tokens.number()))


@_problem("common-divisors")
def _common_divisors(tokens: _Tokens) -> str:
    return str(common_divisors(tokens.numbers(tokens.number())))


@_problem("array-division")
def _array_division(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return str(array_division(tokens.numbers(n), k))


@_problem("distinct-numbers")
def _distinct_numbers(tokens: _Tokens) -> str:
    return str(distinct_numbers(tokens.numbers(tokens.number())))


@_problem("factory-machines")
def _factory_machines(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return str(factory_machines(tokens.numbers(n), k))


@_problem("movie-festival")
def _movie_festival(tokens: _Tokens) -> str:
    return str(movie_festival(tokens.pairs(tokens.number())))


@_problem("playlist")
def _playlist(tokens: _Tokens) -> str:
    return str(playlist(tokens.numbers(tokens.number())))


@_problem("restaurant-customers")
def _restaurant_customers(tokens: _Tokens) -> str:
    return str(restaurant_customers(tokens.pairs(tokens.number())))


@_problem("subarray-divisibility")
def _subarray_divisibility(tokens: _Tokens) -> str:
    return str(subarray_divisibility(tokens.numbers(tokens.number())))


@_problem("subarray-sums-1")
def _subarray_sums_1(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    return str(subarray_sums_1(tokens.numbers(n), x))


@_problem("subarray-sums-2")
def _subarray_sums_2(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    return str(subarray_sums_2(tokens.numbers(n), x))


@_problem("sum-of-three-values")
def _sum_of_three_values(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    return _joined(sum_of_three_values(tokens.numbers(n), x))


@_problem("sum-of-two-values")
def _sum_of_two_values(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    return _joined(sum_of_two_values(tokens.numbers(n), x))


def solve(problem: str, text: str) -> str:
    """Answer for ``problem`` given its input ``text``, ending with a newline."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return handler(_Tokens(text)) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read the named problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve a contest problem read from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())