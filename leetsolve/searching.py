"""Lookup problems: pair sums, insert positions, intersections."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first index pair [i, j], i != j, summing to target, else [-1, -1]."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(nums):
        positions[value].append(index)
    for i, value in enumerate(nums):
        for j in positions.get(target - value, ()):
            if j != i:
                return [i, j]
    return [-1, -1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target in sorted nums, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if target < nums[mid]:
            right = mid - 1
        elif target > nums[mid]:
            left = mid + 1
        else:
            return mid
    return left


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both, in ascending order."""
    return sorted(set(nums1) & set(nums2))