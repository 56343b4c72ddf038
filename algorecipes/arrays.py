"""Routines over integer lists: majorities, profits, counts, merging and maxima."""

from __future__ import annotations

from itertools import combinations_with_replacement
from typing import Iterable, MutableSequence, Sequence


def majority_element(nums: Iterable[int]) -> int:
    """Return the element that occurs more than half the time.

    Uses a single voting pass; the answer is only meaningful when such an
    element exists. Raises ValueError on empty input.
    """
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is None:
        raise ValueError("majority_element() arg is an empty sequence")
    return candidate


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from buying once and selling later, or 0 if none."""
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def maximum_count(nums: Iterable[int]) -> int:
    """Return the larger of the count of positive and the count of negative values."""
    positives = negatives = 0
    for value in nums:
        if value > 0:
            positives += 1
        elif value < 0:
            negatives += 1
    return max(positives, negatives)


def maximum_strong_pair_xor(nums: Sequence[int]) -> int:
    """Return the largest x ^ y over strong pairs, where |x - y| <= min(x, y).

    A value may be paired with itself; the result is 0 when no pair does better.
    """
    return max(
        (
            x ^ y
            for x, y in combinations_with_replacement(nums, 2)
            if abs(x - y) <= min(x, y)
        ),
        default=0,
    )


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` meaningful values followed by room for ``n`` more;
    afterwards its first ``m + n`` slots are in ascending order.
    """
    if m < 0 or n < 0:
        raise ValueError(f"m and n must not be negative, got m={m}, n={n}")
    if len(nums1) < m + n:
        raise ValueError(f"nums1 has room for {len(nums1)} values, needs {m + n}")
    if len(nums2) < n:
        raise ValueError(f"nums2 holds {len(nums2)} values, expected at least {n}")
    nums1[m : m + n] = nums2[:n]
    nums1[: m + n] = sorted(nums1[: m + n])


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..len(nums) that is absent from ``nums``."""
    size = len(nums)
    return size * (size + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def third_max(nums: Iterable[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer.

    Raises ValueError on empty input.
    """
    top: list[int] = []
    for value in nums:
        if value in top:
            continue
        top.append(value)
        top.sort(reverse=True)
        del top[3:]
    if not top:
        raise ValueError("third_max() arg is an empty sequence")
    return top[2] if len(top) == 3 else top[0]