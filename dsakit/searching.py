"""Binary search and its variants on sorted, rotated and two-dimensional data.

Searches that look for a position return it, or None when nothing matches.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of key in an ascending sequence, or None if it is absent.

    The lowest index still in range is checked before each halving.
    """
    first, last = 0, len(values) - 1
    while first <= last:
        if values[first] == key:
            return first
        mid = first + (last - first) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            first = mid + 1
        else:
            last = mid - 1
    return None


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Lowest index of key in an ascending sequence, or None."""
    first, last = 0, len(values) - 1
    found = None
    while first <= last:
        mid = first + (last - first) // 2
        if values[mid] == key:
            found = mid
            last = mid - 1
        elif values[mid] < key:
            first = mid + 1
        else:
            last = mid - 1
    return found


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Highest index of key in an ascending sequence, or None."""
    first, last = 0, len(values) - 1
    found = None
    while first <= last:
        mid = first + (last - first) // 2
        if values[mid] == key:
            found = mid
            first = mid + 1
        elif values[mid] < key:
            first = mid + 1
        else:
            last = mid - 1
    return found


def count_occurrences(values: Sequence[int], key: int) -> int:
    """How many times key appears in an ascending sequence."""
    first = first_occurrence(values, key)
    if first is None:
        return 0
    last = last_occurrence(values, key)
    return last - first + 1


def search_insert_position(values: Sequence[int], key: int) -> int:
    """Index of key, or where it would be inserted to keep the order."""
    return bisect_left(values, key)


def kth_missing(values: Sequence[int], k: int) -> int:
    """The k-th positive integer absent from a strictly increasing sequence."""
    if k < 1:
        raise ValueError("k must be positive")
    start, end = 0, len(values) - 1
    index = len(values)
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] - mid - 1 >= k:
            index = mid
            end = mid - 1
        else:
            start = mid + 1
    return index + k


def peak_index(values: Sequence[int]) -> int | None:
    """Index of the peak of a mountain sequence, or None if none is found."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        left = values[mid - 1] if mid > 0 else None
        right = values[mid + 1] if mid + 1 < len(values) else None
        if (left is None or values[mid] > left) and (right is None or values[mid] > right):
            return mid
        if right is not None and values[mid] < right:
            start = mid + 1
        else:
            end = mid - 1
    return None


def rotated_minimum(values: Sequence[int]) -> int:
    """Smallest element of an ascending sequence that has been rotated."""
    if not values:
        raise ValueError("rotated_minimum() arg is an empty sequence")
    start, end = 0, len(values) - 1
    smallest = values[0]
    while start <= end:
        mid = end - (end - start) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            smallest = values[mid]
            end = mid - 1
    return smallest


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Index of target in a rotated ascending sequence of distinct values."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] >= values[0]:
            if values[start] <= target < values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] < target <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_matrix_rows(
    matrix: Sequence[Sequence[int]], target: int
) -> tuple[int, int] | None:
    """(row, column) of target, binary-searching each row whose range covers it.

    Every row must be in ascending order.
    """
    for row_index, row in enumerate(matrix):
        if row and row[0] <= target <= row[-1]:
            col_index = bisect_left(row, target)
            if col_index < len(row) and row[col_index] == target:
                return row_index, col_index
    return None


def search_matrix_flat(
    matrix: Sequence[Sequence[int]], target: int
) -> tuple[int, int] | None:
    """(row, column) of target in a matrix that is ascending when read row by row."""
    if not matrix or not matrix[0]:
        return None
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = start + (end - start) // 2
        row_index, col_index = divmod(mid, cols)
        value = matrix[row_index][col_index]
        if value == target:
            return row_index, col_index
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether target is in a matrix whose rows and columns are all ascending.

    Walks from the top-right corner, stepping left or down.
    """
    if not matrix or not matrix[0]:
        return False
    col, row = len(matrix[0]) - 1, 0
    while col >= 0 and row < len(matrix):
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False