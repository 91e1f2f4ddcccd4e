"""Two-pointer techniques on arrays: pairs, triples, partitioning, rain water."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate, combinations


def segregate_binary(values: Sequence[int]) -> list[int]:
    """Return a copy with all zeros moved in front of every non-zero value."""
    items = list(values)
    start, end = 0, len(items) - 1
    while start < end:
        if items[start] == 0:
            start += 1
        elif items[end] == 0:
            items[start], items[end] = items[end], items[start]
            start += 1
            end -= 1
        else:
            end -= 1
    return items


def pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two elements of a sorted sequence summing to target."""
    start, end = 0, len(values) - 1
    while start < end:
        total = values[start] + values[end]
        if total == target:
            return values[start], values[end]
        if total > target:
            end -= 1
        else:
            start += 1
    return None


def pair_with_difference(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find (larger, smaller) in a sorted sequence with larger - smaller == target."""
    start, end = 0, 1
    while end < len(values):
        if start == end:
            end += 1
            continue
        diff = values[end] - values[start]
        if diff == target:
            return values[end], values[start]
        if diff < target:
            end += 1
        else:
            start += 1
    return None


def three_sum_brute(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Find three elements summing to target by trying every triple."""
    for triple in combinations(values, 3):
        if sum(triple) == target:
            return triple
    return None


def three_sum_binary(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Find three elements of a sorted sequence summing to target.

    Fixes two elements and binary-searches the rest for the third.
    """
    n = len(values)
    for i in range(n - 2):
        for j in range(i + 1, n - 1):
            wanted = target - (values[i] + values[j])
            k = bisect_left(values, wanted, j + 1)
            if k < n and values[k] == wanted:
                return values[i], values[j], values[k]
    return None


def three_sum(values: Sequence[int], target: int) -> tuple[int, int, int] | None:
    """Find three elements of a sorted sequence summing to target.

    Fixes one element and closes two pointers over the rest.
    """
    n = len(values)
    for i in range(n - 2):
        wanted = target - values[i]
        start, end = i + 1, n - 1
        while start < end:
            total = values[start] + values[end]
            if total == wanted:
                return values[i], values[start], values[end]
            if total > wanted:
                end -= 1
            else:
                start += 1
    return None


def trapped_water(heights: Sequence[int]) -> int:
    """Water held between bars, using left and right running maxima."""
    if not heights:
        return 0
    max_left = [0, *accumulate(heights[:-1], max)]
    max_right = [*accumulate(reversed(heights[1:]), max)][::-1] + [0]
    return sum(
        max(min(left, right) - height, 0)
        for left, right, height in zip(max_left, max_right, heights)
    )


def trapped_water_peak(heights: Sequence[int]) -> int:
    """Water held between bars, scanning inwards from both ends to the tallest bar."""
    if not heights:
        return 0
    peak = max(range(len(heights)), key=heights.__getitem__)

    def _side(bars: Sequence[int]) -> int:
        water = 0
        highest = 0
        for height in bars:
            water += max(highest - height, 0)
            highest = max(highest, height)
        return water

    return _side(heights[:peak]) + _side(heights[peak + 1:][::-1])