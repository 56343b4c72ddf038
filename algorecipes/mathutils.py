"""Small numeric routines: stairs, bit counts, square roots, Pascal's triangle."""

from __future__ import annotations

from math import isqrt


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n in (1, 2):
        return n
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` seen as a 32-bit unsigned integer."""
    return bin(n & 0xFFFFFFFF).count("1")


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of an integer."""
    if num < 0:
        return False
    root = isqrt(num)
    return root * root == num


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down; 0 for x < 2."""
    if x == 1:
        return 1
    if x < 2:
        return 0
    return isqrt(x)


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError(f"num_rows must not be negative, got {num_rows}")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if rows:
            above = rows[-1]
            rows.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
        else:
            rows.append([1])
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError(f"row_index must not be negative, got {row_index}")
    return generate_pascal(row_index + 1)[-1]