"""String routines: runs, Z-function matching and missing substrings."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from itertools import groupby, product

DNA_ALPHABET = "ACGT"
_LONGEST_CANDIDATE = 3

# Compares unequal to every character, so it can never extend a match.
_SEPARATOR = object()


def longest_repetition(text: str) -> int:
    """Length of the longest block of one repeated character; 0 for empty text."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)


def z_array(text: Sequence[Hashable]) -> list[int]:
    """Z-function of ``text``: entry ``i`` is the longest common prefix of
    ``text`` and ``text[i:]``; entry 0 is 0."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def count_occurrences(text: str, pattern: str) -> int:
    """Number of positions, overlaps included, at which ``pattern`` occurs in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    size = len(pattern)
    return sum(1 for length in z_array(combined)[size + 1:] if length == size)


def shortest_missing_substring(dna: str) -> str | None:
    """Shortest string over ``ACGT`` (at most three letters) that is not a
    substring of ``dna``.

    Shorter candidates come first, then alphabetical order. ``None`` when every
    candidate occurs.
    """
    present = {
        dna[start:start + length]
        for length in range(1, _LONGEST_CANDIDATE + 1)
        for start in range(len(dna) - length + 1)
    }
    for length in range(1, _LONGEST_CANDIDATE + 1):
        for letters in product(DNA_ALPHABET, repeat=length):
            candidate = "".join(letters)
            if candidate not in present:
                return candidate
    return None


def balance_difference(bits: str) -> int:
    """Absolute difference between the number of ``'0'`` characters and all others."""
    zeros = bits.count("0")
    return abs(zeros - (len(bits) - zeros))