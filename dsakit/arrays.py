"""Prefix/suffix sums, sub-array enumeration and maximum sub-array problems."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


def prefix_sums(values: Sequence[int]) -> list[int]:
    """Running totals from the left: element i is sum(values[:i + 1])."""
    return list(accumulate(values))


def suffix_sums(values: Sequence[int]) -> list[int]:
    """Running totals from the right: element i is sum(values[i:])."""
    return list(accumulate(reversed(values)))[::-1]


def can_split_equal_sum(values: Sequence[int]) -> bool:
    """Whether the sequence can be cut into two non-empty parts of equal sum."""
    total = sum(values)
    running = 0
    for value in values[:-1]:
        running += value
        if running * 2 == total:
            return True
    return False


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, checking every run."""
    if not values:
        raise ValueError("max_subarray_sum_brute() arg is an empty sequence")
    best = values[0]
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("max_subarray_sum() arg is an empty sequence")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def suffix_max(values: Sequence[int]) -> list[int]:
    """Running maxima from the right: element i is max(values[i:])."""
    return list(accumulate(reversed(values), max))[::-1]


def max_forward_difference(values: Sequence[int]) -> int:
    """Largest values[j] - values[i] with j >= i."""
    if not values:
        raise ValueError("max_forward_difference() arg is an empty sequence")
    return max(high - value for high, value in zip(suffix_max(values), values))


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous sub-array, shortest first, then left to right."""
    items = list(values)
    for length in range(1, len(items) + 1):
        for start in range(len(items) - length + 1):
            yield items[start:start + length]