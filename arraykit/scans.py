"""Prefix and suffix scans over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate
from operator import mul


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements.

    No division is used, so zeros are handled correctly.
    """
    if not nums:
        return []
    values = list(nums)
    left = accumulate(values[:-1], mul, initial=1)
    right = list(accumulate(reversed(values[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(left, right)]


def trap(height: Sequence[int]) -> int:
    """Return how much rain water an elevation map of unit-width bars holds."""
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - bar
        for left, right, bar in zip(left_max, right_max, height)
    )