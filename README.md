# arraykit

A small library of classic algorithms over integer sequences. The functions
take plain Python lists and use only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `arraykit.greedy`

- `max_profit(prices)`: the most profit from any number of buy/sell
  transactions. This is the sum of every day-over-day rise, and it is `0` for
  fewer than two prices.
- `candy(ratings)`: the fewest candies for a line of children. Each child gets
  at least one, and a child rated higher than a neighbour gets more than that
  neighbour.
- `can_complete_circuit(gas, cost)`: the index of the station to start from so
  that one full lap of a circular route can be driven, or `None` if no such
  station exists. Raises `ValueError` if `gas` and `cost` differ in length.
- `can_jump(nums)`: whether the last index can be reached from the first. Each
  element is the longest jump allowed from its position.
- `min_jumps(nums)`: the fewest jumps needed to reach the last index. Raises
  `ValueError` for an empty sequence.

### `arraykit.counting`

- `h_index(citations)`: the largest `h` such that `h` papers have at least `h`
  citations each.
- `majority_element(nums)`: the element that appears more than half the time,
  found with Boyer–Moore voting. The input is assumed to have such an element,
  and this is not checked. Raises `ValueError` for empty input.

### `arraykit.scans`

- `product_except_self(nums)`: a new list that holds, for each position, the
  product of every other element. No division is used, so zeros are handled.
- `trap(height)`: how much rain water an elevation map of unit-width bars
  holds.

### `arraykit.inplace`

These functions change the list they are given:

- `merge(nums1, m, nums2, n)`: merge the sorted `nums2[:n]` into the sorted
  `nums1[:m]`, filling `nums1[:m + n]`. An empty `nums1` takes on the contents
  of `nums2`. Raises `ValueError` if the counts do not fit the lists.
- `remove_duplicates(nums)`: in a sorted list, keep each value at most twice at
  the front and return how many were kept.
- `remove_element(nums, val)`: move every element not equal to `val` to the
  front and return how many there are. Order is not kept.
- `rotate(nums, k)`: rotate the list right by `k` steps. Raises `ValueError`
  for a negative `k`.

### `arraykit.randomized_set`

`RandomizedSet` holds integers and supports `insert`, `remove` and
`get_random`, each in average constant time. It also supports `len()` and
`in`. An optional `random.Random` instance can be passed to make the choices
repeatable. `get_random` raises `IndexError` on an empty set.

```python
import random
from arraykit.randomized_set import RandomizedSet

s = RandomizedSet(random.Random(42))
s.insert(1)        # True
s.insert(1)        # False: already present
s.insert(2)        # True
s.remove(1)        # True
2 in s             # True
len(s)             # 1
s.get_random()     # 2
```

## Example

```python
from arraykit.greedy import max_profit, min_jumps
from arraykit.scans import trap

max_profit([7, 1, 5, 3, 6, 4])                  # 7
min_jumps([2, 3, 1, 1, 4])                      # 2
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])      # 6
```

## What it does not do

This is a library only. It has no command-line tool. The functions do not
check that their input meets the stated conditions, such as sortedness for
`merge` and `remove_duplicates`, or the presence of a majority element.