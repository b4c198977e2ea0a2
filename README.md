# contestkit

Well-known competitive-programming problems solved as ordinary Python
functions. Each function takes already parsed input and returns the answer,
so the solutions can be imported, tested and reused. A command-line runner
reads judge-style input from standard input and prints the answer.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `contestkit.dpcontest`: dynamic programming

- `frog1(heights)`: least total cost for a frog jumping one or two stones at a
  time; a jump costs the absolute difference of the two heights.
- `frog2(heights, k)`: the same with jumps of up to `k` stones (a jump of one
  stone is always allowed). Raises `ValueError` for an empty list.
- `vacation(days)`: best total happiness over days of three activities each,
  never doing the same activity two days in a row. Every day must have exactly
  three values, otherwise `ValueError`.
- `knapsack(items, capacity)`: 0/1 knapsack over `(weight, value)` pairs;
  a negative capacity gives 0, a negative weight raises `ValueError`.
- `lcs(s, t)`: one longest common subsequence of two strings.
- `longest_path(n, edges)`: walks the graph on vertices `1..n` in topological
  order and returns the greatest depth reached minus one (so a graph without
  edges gives -1). Vertices outside `1..n` raise `ValueError`.

### `contestkit.introductory`

- `increasing_array(values)`: total amount that must be added to the values to
  make the list non-decreasing.
- `missing_number(n, values)`: the number from `1..n` absent from the `n - 1`
  given values; a different count of values raises `ValueError`.
- `palindrome_reorder(s)`: a palindrome made of the letters of `s`, built in
  sorted letter order, or `None` when none exists.
- `repetitions(s)`: length of the longest run of one repeated character
  (1 for an empty string).
- `weird_algorithm(n)`: the sequence from `n` down to 1, halving even values
  and mapping odd `x` to `3x + 1`. `n` below 1 raises `ValueError`.

### `contestkit.mathematics`

- `multiplication_table_median(n)`: median entry of an `n` by `n`
  multiplication table (0 for `n == 0`; negative `n` raises `ValueError`).
- `common_divisors(values)`: largest greatest common divisor of any two of the
  values. Needs at least two positive integers, otherwise `ValueError`.

### `contestkit.searching`: sorting and searching

- `array_division(values, k)`: smallest possible largest part sum when the
  values are cut into `k` contiguous parts.
- `distinct_numbers(values)`: number of distinct values.
- `factory_machines(times, k)`: least time for machines with the given cycle
  times to make `k` products. Times must be positive and non-empty.
- `movie_festival(movies)`: most `(start, end)` movies that can be watched in
  full, one after another.
- `playlist(songs)`: longest run of consecutive songs with no song repeated.
- `restaurant_customers(intervals)`: greatest number of customers present at
  once, given `(arrival, leaving)` times.
- `subarray_divisibility(values)`: number of contiguous subarrays whose sum is
  divisible by the length of the whole list.
- `subarray_sums_1(values, x)`: number of contiguous subarrays of positive
  values summing to `x`.
- `subarray_sums_2(values, x)`: number of contiguous subarrays summing to `x`;
  values may be negative.
- `sum_of_three_values(values, x)`: 1-based positions of three values summing
  to `x`, or `None`.
- `sum_of_two_values(values, x)`: 1-based positions of two values summing to
  `x`, or `None`; when several pairs exist, the one completed last is returned.

## Example

```python
from contestkit.dpcontest import frog1, lcs
from contestkit.introductory import weird_algorithm

frog1([10, 30, 40, 20])      # 30
lcs("axyb", "abyxb")         # "ayb"
weird_algorithm(3)           # [3, 10, 5, 16, 8, 4, 2, 1]
```

## Command line

The `contestkit` command takes the name of a problem and reads that problem's
input from standard input, in the layout a judge would give (counts first,
then the values, all separated by whitespace):

```
contestkit frog1 < input.txt
```

Problem names: `frog1`, `frog2`, `vacation`, `knapsack`, `lcs`,
`longest-path`, `multiplication-table`, `increasing-array`, `missing-number`,
`palindrome-reorder`, `repetitions`, `weird-algorithm`, `common-divisors`,
`array-division`, `distinct-numbers`, `factory-machines`, `movie-festival`,
`playlist`, `restaurant-customers`, `subarray-divisibility`,
`subarray-sums-1`, `subarray-sums-2`, `sum-of-three-values`,
`sum-of-two-values`.

Sequences are printed space-separated. When no answer exists,
`palindrome-reorder` prints `NO SOLUTION` and the two sum problems print
`IMPOSSIBLE`. Malformed input or a rejected value prints `error: ...` to
standard error and exits with status 1.

The same work is available from Python through
`contestkit.cli.solve(problem, text)`, which returns the text that would be
printed (ending in a newline) and raises `ValueError` for an unknown problem
or bad input.