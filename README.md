# puzzlekit

puzzlekit is a small library of solutions to well-known algorithmic puzzles.
Each solution is a plain function that takes Python values and returns Python
values. One solution is a small class. When a puzzle has no answer for the
input given, the function returns `None`. When an argument is outside what the
function accepts, it raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlekit.greedy`

- `candies(ratings)`: the fewest candies to hand out. Every child gets at
  least one. A child rated higher than a neighbour gets more candies than that
  neighbour.
- `fair_rations(loaves)`: how many loaves must be given out so that everyone
  holds an even number. Loaves are always given in pairs to two neighbours.
  Returns `None` when this is impossible.
- `goodland_electricity(k, towns)`: the fewest power plants needed to light
  every town. `towns` lists each town as `1` if it has a plant and `0` if it
  does not. A plant lights every town fewer than `k` positions away. Returns
  `None` when this is impossible.
- `greedy_florist(k, prices)`: the lowest total cost for `k` friends to buy
  every flower. A friend's n-th purchase costs `n` times the base price.
  Raises `ValueError` if `k < 1`.
- `luck_balance(k, contests)`: the most luck that can be kept when at most `k`
  important contests may be lost. Each contest is a `(luck, important)` pair.
- `truck_tour(pumps)`: the index of the first pump from which the whole circle
  can be driven. Each pump is a `(petrol, distance_to_next)` pair.

### `puzzlekit.numbers`

- `acm_team(topics)`: a `(topics, teams)` tuple. The first value is the largest
  number of topics a two-person team knows. The second is how many teams know
  that many. Each topic string holds one `0` or `1` per topic.
- `count_divisible_subarrays(numbers, k)`: how many contiguous subarrays have a
  sum divisible by `k`. Raises `ValueError` if `k < 1`.
- `manasa_stones(n, a, b)`: every possible value of the last stone, in
  ascending order.
- `non_divisible_subset(numbers, k)`: the size of the largest subset in which
  no two elements sum to a multiple of `k`. Raises `ValueError` if `k < 1`.
- `sansa_xor(values)`: the XOR of the XORs of all contiguous subarrays.
- `special_multiple(n)`: the smallest positive multiple of `n` written only
  with the digits 9 and 0. Raises `ValueError` if `n < 1`.
- `primes(count)`: a list of the first `count` primes.
- `waiter(plates, q)`: the order in which plates are served after `q` rounds.
  The last element of `plates` is the top of the stack.

### `puzzlekit.strings`

- `highest_value_palindrome(s, k)`: the largest palindrome that can be made
  from the digit string `s` with at most `k` digit changes. Returns `None` when
  no palindrome can be reached within `k` changes.
- `substring_sum(digits)`: the sum of all substrings of `digits`, each read as
  a number, modulo 1 000 000 007. Raises `ValueError` for an empty string.

### `puzzlekit.median`

- `RunningMedian`: `add(value)` inserts a value and returns the median of
  everything added so far. `len()` gives how many values have been added.
- `running_medians(values)`: a list of the median after each value in turn.

```python
from puzzlekit.median import running_medians

running_medians([12, 4, 5, 3, 8, 7])
# [12.0, 8.0, 5.0, 4.5, 5.0, 6.0]
```

### `puzzlekit.chess`

- `queens_attack(n, row, col, obstacles)`: how many squares a queen at
  `(row, col)` attacks on an `n` by `n` board. Rows and columns count from 1.
  `obstacles` is a list of `(row, col)` pairs, and each obstacle blocks the
  queen's line of sight.

### `puzzlekit.trees`

- `TreeNode`: a binary tree node with `val`, `left` and `right`.
- `bst_insert(root, value)` inserts a value into a binary search tree and
  returns the root. `build_bst(values)` builds a tree by inserting values in
  order. A value equal to a node's value goes to that node's left.
- `top_view(root)`: the values seen from above, ordered from the leftmost
  column to the rightmost.
- `distribute_coins(root)`: the fewest moves that leave every node holding
  exactly one coin. Each move passes one coin along one edge.

```python
from puzzlekit.trees import build_bst, top_view

top_view(build_bst([1, 2, 5, 3, 6, 4]))
# [1, 2, 5, 6]
```

## What it does not do

puzzlekit is a library only. It has no command-line program. It does not read
puzzle input from standard input or from files. You parse the input yourself
and call the functions with Python values.