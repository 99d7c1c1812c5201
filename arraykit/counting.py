"""Algorithms that answer questions by counting elements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def h_index(citations: Sequence[int]) -> int:
    """Return the h-index for the given per-paper citation counts.

    The h-index is the largest ``h`` such that ``h`` papers have at least
    ``h`` citations each.
    """
    n = len(citations)
    by_count = Counter(min(cited, n) for cited in citations)
    papers = 0
    for h in range(n, -1, -1):
        papers += by_count[h]
        if papers >= h:
            return h
    return 0


def majority_element(nums: Iterable[T]) -> T:
    """Return the element occurring more than half the time.

    Uses Boyer-Moore voting; the input is assumed to have a majority element.

    Raises:
        ValueError: if ``nums`` is empty.
    """
    count = 0
    candidate: T | None = None
    seen = False
    for num in nums:
        seen = True
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    if not seen:
        raise ValueError("majority_element() requires a non-empty iterable")
    return candidate  # type: ignore[return-value]