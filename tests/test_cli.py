import io

import pytest

from contestkit.cli import main, solve
from contestkit.dpcontest import frog1, frog2, knapsack, lcs, longest_path, vacation
from contestkit.introductory import increasing_array, weird_algorithm
from contestkit.mathematics import common_divisors
from contestkit.searching import (
    factory_machines,
    restaurant_customers,
    subarray_sums_2,
    sum_of_three_values,
)


@pytest.mark.parametrize(
    ("problem", "text", "expected"),
    [
        ("frog1", "4\n10 30 40 20\n", lambda: frog1([10, 30, 40, 20])),
        ("frog2", "5 3\n10 30 40 50 20\n", lambda: frog2([10, 30, 40, 50, 20], 3)),
        ("vacation", "2\n10 40 70\n20 50 80\n", lambda: vacation([(10, 40, 70), (20, 50, 80)])),
        ("knapsack", "3 8\n3 30\n4 50\n5 60\n", lambda: knapsack([(3, 30), (4, 50), (5, 60)], 8)),
        ("longest-path", "4 5\n1 2\n1 3\n3 2\n2 4\n3 4\n",
         lambda: longest_path(4, [(1, 2), (1, 3), (3, 2), (2, 4), (3, 4)])),
        ("increasing-array", "5\n3 2 5 1 7\n", lambda: increasing_array([3, 2, 5, 1, 7])),
        ("common-divisors", "5\n3 14 15 7 9\n", lambda: common_divisors([3, 14, 15, 7, 9])),
        ("factory-machines", "3 7\n3 2 5\n", lambda: factory_machines([3, 2, 5], 7)),
        ("restaurant-customers", "3\n5 8\n2 4\n3 9\n",
         lambda: restaurant_customers([(5, 8), (2, 4), (3, 9)])),
        ("subarray-sums-2", "5 7\n2 -1 3 5 -2\n", lambda: subarray_sums_2([2, -1, 3, 5, -2], 7)),
    ],
)
def test_solve_matches_library(problem, text, expected):
    assert solve(problem, text) == f"{expected()}\n"


def test_solve_lcs():
    assert solve("lcs", "axyb\nabyxb\n") == lcs("axyb", "abyxb") + "\n"


def test_solve_weird_algorithm_joins_with_spaces():
    expected = " ".join(map(str, weird_algorithm(3))) + "\n"
    assert solve("weird-algorithm", "3") == expected


def test_solve_palindrome_without_solution():
    assert solve("palindrome-reorder", "AB\n") == "NO SOLUTION\n"


def test_solve_sum_of_two_values_impossible():
    assert solve("sum-of-two-values", "2 10\n1 2\n") == "IMPOSSIBLE\n"


def test_solve_sum_of_three_values_reports_positions():
    values = [2, 7, 5, 1]
    output = solve("sum-of-three-values", "4 8\n2 7 5 1\n")
    assert tuple(int(part) for part in output.split()) == sum_of_three_values(values, 8)


def test_solve_unknown_problem():
    with pytest.raises(ValueError, match="unknown problem"):
        solve("no-such-problem", "1")


def test_solve_truncated_input():
    with pytest.raises(ValueError, match="unexpected end of input"):
        solve("frog1", "4\n10 30\n")


def test_solve_non_integer_input():
    with pytest.raises(ValueError, match="expected an integer"):
        solve("playlist", "2\n1 x\n")


def test_main_prints_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n10 30 40 20\n"))
    assert main(["frog1"]) == 0
    assert capsys.readouterr().out == f"{frog1([10, 30, 40, 20])}\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["playlist"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["no-such-problem"])