import pytest

from contestkit.introductory import (
    increasing_array,
    missing_number,
    palindrome_reorder,
    repetitions,
    weird_algorithm,
)


def test_increasing_array_sample():
    assert increasing_array([3, 2, 5, 1, 7]) == 5


def test_increasing_array_sorted_needs_nothing():
    assert increasing_array([1, 2, 2, 3, 10]) == 0


def test_increasing_array_empty():
    assert increasing_array([]) == 0


def test_increasing_array_single_drop():
    assert increasing_array([9, 4]) == 9 - 4


@pytest.mark.parametrize("gone", range(1, 8))
def test_missing_number_finds_removed(gone):
    values = [v for v in range(7, 0, -1) if v != gone]
    assert missing_number(7, values) == gone


def test_missing_number_length_mismatch():
    with pytest.raises(ValueError):
        missing_number(5, [1, 2])


def test_palindrome_reorder_layout():
    assert palindrome_reorder("AAAACACBA") == "AAACBCAAA"


@pytest.mark.parametrize("s", ["AAAACACBA", "ABBA", "XYZZYXQ", "Q", "ABABCCCCD"[:-1]])
def test_palindrome_reorder_is_permutation_palindrome(s):
    result = palindrome_reorder(s)
    assert result == result[::-1]
    assert sorted(result) == sorted(s)


def test_palindrome_reorder_impossible():
    assert palindrome_reorder("ABC") is None


def test_palindrome_reorder_empty():
    assert palindrome_reorder("") == ""


def test_repetitions_sample():
    assert repetitions("ATTCGGGA") == 3


@pytest.mark.parametrize("k", [1, 2, 5, 20])
def test_repetitions_single_run(k):
    assert repetitions("G" * k) == k


def test_repetitions_run_at_end():
    assert repetitions("ACGT" + "T" * 6) == 7


def test_weird_algorithm_sample():
    assert weird_algorithm(3) == [3, 10, 5, 16, 8, 4, 2, 1]


def test_weird_algorithm_one():
    assert weird_algorithm(1) == [1]


@pytest.mark.parametrize("n", [2, 7, 27, 100])
def test_weird_algorithm_follows_rule(n):
    seq = weird_algorithm(n)
    assert seq[0] == n
    assert seq[-1] == 1
    assert seq.count(1) == 1
    for a, b in zip(seq, seq[1:]):
        assert b == (3 * a + 1 if a % 2 else a // 2)


@pytest.mark.parametrize("n", [0, -4])
def test_weird_algorithm_rejects_non_positive(n):
    with pytest.raises(ValueError):
        weird_algorithm(n)