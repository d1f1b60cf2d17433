"""Counting and frequency problems over integers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence


def single_number(nums: Iterable[int]) -> int:
    """Return a value that occurs exactly once, or 0 if there is none."""
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count == 1), 0)


def is_prime(n: int) -> bool:
    """Tell whether n is a prime number."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def count_primes(n: int) -> int:
    """Count the primes strictly less than n."""
    return sum(1 for i in range(n) if is_prime(i))


def missing_number(nums: Sequence[int]) -> int:
    """Return the number missing from a range 0..n."""
    top = max([0, len(nums), *nums])
    return top * (top + 1) // 2 - sum(nums)


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the k most frequent values; -1 fills places past the distinct values."""
    ranked = [value for value, _ in Counter(nums).most_common(max(k, 0))]
    return ranked + [-1] * (k - len(ranked))


def num_identical_pairs(nums: Iterable[int]) -> int:
    """Count index pairs i < j with equal values."""
    return sum(c * (c - 1) // 2 for c in Counter(nums).values())