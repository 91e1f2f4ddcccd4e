"""Elementary comparison sorts.

Each function returns a new sorted list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops after the first pass if that pass made no swaps.
    """
    items = list(values)
    swapped = False
    for last in range(len(items) - 1, 0, -1):
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by sinking each element left until it is in place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items