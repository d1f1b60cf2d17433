"""Problems over integer sequences: areas, profits, sums and rearrangements."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area held between two lines, using two pointers."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def max_area_brute_force(height: Sequence[int]) -> int:
    """Return the largest water area held between two lines by trying every pair."""
    return max(
        (
            min(height[i], height[j]) * (j - i)
            for i, j in combinations(range(len(height)), 2)
        ),
        default=0,
    )


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - h for left, right, h in zip(left_max, right_max, height)
    )


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first digits."""
    result: list[int] = []
    carry = 1
    total = 0
    for digit in reversed(digits):
        total = carry + digit
        if total > 9:
            total = 0
            carry = 1
        else:
            carry = 0
        result.append(total)
    result.reverse()
    if total == 0:
        result.insert(0, 1)
    return result


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sell."""
    lowest: float = 1 << 32
    profit = 0
    for price in prices:
        if price < lowest:
            lowest = price
        elif price - lowest > profit:
            profit = int(price - lowest)
    return profit


def rob(nums: Iterable[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    before, best = 0, 0
    for value in nums:
        before, best = best, max(best, before + value)
    return best


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    pos = 0
    for i, value in enumerate(nums):
        if value != 0:
            nums[i], nums[pos] = nums[pos], value
            pos += 1


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average of any k consecutive values."""
    if k <= 0 or k > len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} values")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def check_straight_line(coordinates: Sequence[Sequence[int]]) -> bool:
    """Tell whether all points lie on one straight line."""
    if len(coordinates) == 2:
        return True
    for (ax, ay), (bx, by), (cx, cy) in zip(
        coordinates, coordinates[1:], coordinates[2:]
    ):
        if ax * (by - cy) + bx * (cy - ay) + cx * (ay - by) != 0:
            return False
    return True


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell for each kid whether the extra candies would give them the most."""
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of nums."""
    return list(accumulate(nums))


__all__ = [
    "max_area",
    "max_area_brute_force",
    "trap",
    "plus_one",
    "max_profit",
    "rob",
    "move_zeroes",
    "find_max_average",
    "check_straight_line",
    "kids_with_candies",
    "running_sum",
]

_ = math  # kept for callers comparing float averages with math.isclose