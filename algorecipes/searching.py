"""Lookups over integer lists: duplicates, differences, gaps and intersections."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def count_k_difference(nums: Iterable[int], k: int) -> int:
    """Count the pairs i < j whose values differ by exactly ``k`` in absolute value."""
    if k < 0:
        return 0
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        pairs += seen[value - k]
        if k:
            pairs += seen[value + k]
        seen[value] += 1
    return pairs


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the numbers of 1..len(nums) absent from ``nums``.

    Raises ValueError when a value lies outside 1..len(nums).
    """
    size = len(nums)
    present = set(nums)
    out_of_range = [value for value in present if not 1 <= value <= size]
    if out_of_range:
        raise ValueError(
            f"values must lie between 1 and {size}, got {sorted(out_of_range)}"
        )
    return [number for number in range(1, size + 1) if number not in present]


def get_common(nums1: Iterable[int], nums2: Iterable[int]) -> int:
    """Return the smallest value found in both lists, or -1 when there is none."""
    common = set(nums1).intersection(nums2)
    return min(common) if common else -1


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both lists, in ascending order."""
    return sorted(set(nums1).intersection(nums2))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the multiset intersection of the two lists.

    Each common value appears as many times as it does in the list holding
    fewer copies of it; values come in the order they are met in ``nums2``.
    """
    available = Counter(nums1)
    result: list[int] = []
    for value in nums2:
        if available[value] > 0:
            available[value] -= 1
            result.append(value)
    return result