"""Greedy single-pass algorithms over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from any number of buy/sell transactions.

    The result is the sum of every positive day-to-day price increase.
    """
    return sum(max(today - yesterday, 0) for yesterday, today in pairwise(prices))


def _climb(ratings: Iterable[int]) -> Iterator[int]:
    """Yield the candy count each child needs with respect to its predecessor."""
    count = 0
    previous: int | None = None
    for rating in ratings:
        count = count + 1 if previous is not None and rating > previous else 1
        yield count
        previous = rating


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children whose ratings are given in line order.

    Every child gets at least one candy, and a child rated higher than a
    neighbour gets more candies than that neighbour.
    """
    from_left = list(_climb(ratings))
    from_right = list(_climb(reversed(ratings)))[::-1]
    return sum(map(max, from_left, from_right))


def can_complete_circuit(gas: Iterable[int], cost: Iterable[int]) -> int | None:
    """Return the station index from which the circular route can be driven.

    ``gas[i]`` is the fuel at station ``i`` and ``cost[i]`` the fuel needed to
    reach station ``i + 1``. Returns ``None`` when no start works.

    Raises:
        ValueError: if ``gas`` and ``cost`` differ in length.
    """
    total = 0
    tank = 0
    start = 0
    for index, (fuel, needed) in enumerate(zip(gas, cost, strict=True)):
        gain = fuel - needed
        total += gain
        tank += gain
        if tank < 0:
            start = index + 1
            tank = 0
    return start if total >= 0 else None


def can_jump(nums: Iterable[int]) -> bool:
    """Return whether the last index is reachable from the first.

    Each element is the maximum jump length from its position.
    """
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last index.

    Each element is the maximum jump length from its position.

    Raises:
        ValueError: if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("min_jumps() requires a non-empty sequence")
    jumps = 0
    reach = 0
    current_end = 0
    for index, step in enumerate(list(nums)[:-1]):
        reach = max(reach, index + step)
        if index == current_end:
            jumps += 1
            current_end = reach
    return jumps