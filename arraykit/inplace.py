"""Algorithms that rearrange a list in place."""

from __future__ import annotations

from heapq import merge as _merge_sorted


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the sorted ``nums2[:n]`` into the sorted ``nums1[:m]`` in place.

    ``nums1`` must have room for ``m + n`` elements. The merged run fills
    ``nums1[:m + n]``. An empty ``nums1`` simply takes on the contents of
    ``nums2``.

    Raises:
        ValueError: if the counts do not fit the lists.
    """
    if not nums1:
        nums1[:] = nums2
        return
    if m < 0 or n < 0 or n > len(nums2) or m + n > len(nums1):
        raise ValueError(
            f"cannot merge {n} elements into {m} within a list of {len(nums1)}"
        )
    nums1[: m + n] = list(_merge_sorted(nums1[:m], nums2[:n]))


def remove_duplicates(nums: list[int]) -> int:
    """Keep each value of a sorted list at most twice, in place.

    The kept values are moved to the front in order; the returned count
    says how many there are. The rest of the list is left as it was.
    """
    kept = 0
    for value in nums:
        if kept < 2 or value != nums[kept - 2]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front, in place.

    Matching elements are swapped towards the back, so the order of the
    remaining elements may change. Returns how many elements remain.
    """
    front = 0
    back = len(nums) - 1
    while front <= back:
        if nums[front] == val:
            nums[front], nums[back] = nums[back], nums[front]
            back -= 1
        else:
            front += 1
    return front


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place.

    Raises:
        ValueError: if ``k`` is negative.
    """
    if k < 0:
        raise ValueError("rotate() requires a non-negative step count")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]