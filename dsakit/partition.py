"""Answer-space binary searches: placing, splitting and pacing problems."""

from __future__ import annotations

from collections.abc import Sequence


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance at which the cows can be put into the stalls."""
    if cows < 1:
        raise ValueError("cows must be positive")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    positions = sorted(stalls)
    start, end = 1, positions[-1] - positions[0]
    best = 0
    while start <= end:
        mid = start + (end - start) // 2
        placed, last = 1, positions[0]
        for position in positions[1:]:
            if last + mid <= position:
                placed += 1
                last = position
        if placed >= cows:
            best = mid
            start = mid + 1
        else:
            end = mid - 1
    return best


def _min_largest_segment(values: Sequence[int], parts: int) -> int:
    """Smallest possible largest sum when splitting values into contiguous runs."""
    start, end = max(values, default=0), sum(values)
    best = end
    while start <= end:
        mid = start + (end - start) // 2
        load, needed = 0, 1
        for value in values:
            load += value
            if load > mid:
                needed += 1
                load = value
        if needed <= parts:
            best = mid
            end = mid - 1
        else:
            start = mid + 1
    return best


def book_allocation(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages read when books go in order to students."""
    if students < 1:
        raise ValueError("students must be positive")
    if students > len(pages):
        raise ValueError("more students than books")
    return _min_largest_segment(pages, students)


def painter_partition(boards: Sequence[int], painters: int) -> int:
    """Smallest possible longest painting time when boards go in order to painters."""
    if painters < 1:
        raise ValueError("painters must be positive")
    return _min_largest_segment(boards, painters)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Slowest eating speed that finishes every pile within the given hours."""
    if not piles:
        raise ValueError("min_eating_speed() arg is an empty sequence")
    if hours < len(piles):
        raise ValueError("not enough hours to finish every pile")
    start = max(sum(piles) // hours, 1)
    end = max(piles)
    best = end
    while start <= end:
        mid = start + (end - start) // 2
        total = sum(-(-pile // mid) for pile in piles)
        if total <= hours:
            best = mid
            end = mid - 1
        else:
            start = mid + 1
    return best