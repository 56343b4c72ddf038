"""Small container classes: a stack built on a queue, and range-sum queries."""

from __future__ import annotations

from collections import deque
from itertools import accumulate
from typing import Iterable


class QueueStack:
    """A last-in, first-out stack that only uses queue operations internally."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top element; IndexError when empty."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it; IndexError when empty."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class NumArray:
    """Answers inclusive range-sum queries over a fixed list in constant time."""

    def __init__(self, nums: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(nums)]

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of elements ``left`` through ``right`` inclusive."""
        size = len(self._prefix) - 1
        if not 0 <= left <= right < size:
            raise IndexError(
                f"range [{left}, {right}] is not within 0..{size - 1}"
            )
        return self._prefix[right + 1] - self._prefix[left]