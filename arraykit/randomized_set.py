"""A set with constant-time insert, remove and uniform random choice."""

from __future__ import annotations

import random


class RandomizedSet:
    """Set of integers supporting average O(1) insert, remove and random pick."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._items: list[int] = []
        self._positions: dict[int, int] = {}

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._items)
        self._items.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was not present."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._items.pop()
        if last != val:
            self._items[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen element.

        Raises:
            IndexError: if the set is empty.
        """
        if not self._items:
            raise IndexError("get_random() from an empty set")
        return self._rng.choice(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, val: object) -> bool:
        return val in self._positions