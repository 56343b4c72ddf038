"""Routines over strings: letter counts, column titles, digit sums and matching."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase, ascii_uppercase

_ALPHABET_SIZE = 26


def are_occurrences_equal(s: str) -> bool:
    """Tell whether every character present in ``s`` occurs equally often."""
    return len(set(Counter(s).values())) <= 1


def convert_to_title(column_number: int) -> str:
    """Return the spreadsheet column title for a 1-based column number.

    Raises ValueError when ``column_number`` is below 1.
    """
    if column_number < 1:
        raise ValueError(f"column_number must be at least 1, got {column_number}")
    letters: list[str] = []
    remaining = column_number
    while remaining > 0:
        remaining, offset = divmod(remaining - 1, _ALPHABET_SIZE)
        letters.append(ascii_uppercase[offset])
    return "".join(reversed(letters))


def title_to_number(title: str) -> int:
    """Return the 1-based column number of a spreadsheet column title.

    Raises ValueError when ``title`` holds anything but the letters A to Z.
    """
    number = 0
    for letter in title:
        position = ascii_uppercase.find(letter)
        if len(letter) != 1 or position < 0:
            raise ValueError(f"column titles use the letters A-Z only, got {title!r}")
        number = number * _ALPHABET_SIZE + position + 1
    return number


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def get_lucky(s: str, k: int) -> int:
    """Spell ``s`` as alphabet positions, then sum the digits ``k`` times.

    Raises ValueError when ``s`` holds anything but lowercase letters a to z,
    or when ``k`` is below 1.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    digits: list[str] = []
    for letter in s:
        position = ascii_lowercase.find(letter)
        if len(letter) != 1 or position < 0:
            raise ValueError(f"only the letters a-z may be converted, got {s!r}")
        digits.append(str(position + 1))
    total = sum(int(digit) for digit in "".join(digits))
    for _ in range(k - 1):
        total = _digit_sum(total)
    return total


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways.

    Case is ignored; every other character is skipped.
    """
    kept = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the characters of ``s``, counts included."""
    return len(s) == len(t) and Counter(s) == Counter(t)