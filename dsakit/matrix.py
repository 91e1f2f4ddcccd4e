"""Two-dimensional array helpers: indexing, traversal orders and rotations.

Matrices are sequences of equal-length rows. Every function returns new
lists and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _rows(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Copy the matrix into lists, rejecting ragged input."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def _square(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Copy the matrix into lists, rejecting anything that is not square."""
    rows = _rows(matrix)
    if rows and len(rows) != len(rows[0]):
        raise ValueError("matrix must be square")
    return rows


def flat_index(row_index: int, col_index: int, cols: int) -> int:
    """Row-major position of the cell (row_index, col_index)."""
    if cols <= 0:
        raise ValueError("cols must be positive")
    return row_index * cols + col_index


def row_col_index(index: int, cols: int) -> tuple[int, int]:
    """(row, column) of the cell at a row-major position."""
    if cols <= 0:
        raise ValueError("cols must be positive")
    return divmod(index, cols)


def contains(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether any cell equals target."""
    return any(target in row for row in matrix)


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    left, right = _rows(a), _rows(b)
    if len(left) != len(right) or any(len(x) != len(y) for x, y in zip(left, right)):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(left, right)]


def row_with_max_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Index of the first row whose sum is largest."""
    rows = _rows(matrix)
    if not rows:
        raise ValueError("row_with_max_sum() arg is an empty matrix")
    totals = [sum(row) for row in rows]
    return totals.index(max(totals))


def diagonal_sums(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Sums of the main diagonal and of the anti-diagonal of a square matrix."""
    rows = _square(matrix)
    size = len(rows)
    main = sum(rows[i][i] for i in range(size))
    anti = sum(rows[i][size - 1 - i] for i in range(size))
    return main, anti


def reverse_rows(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Reverse the order of the elements within every row."""
    return [row[::-1] for row in _rows(matrix)]


def zeros(rows: int, cols: int) -> Matrix:
    """A rows x cols matrix filled with zeros."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    return [[0] * cols for _ in range(rows)]


def wave_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Walk the columns left to right, going down even columns and up odd ones."""
    rows = _rows(matrix)
    if not rows:
        return []
    out: list[int] = []
    for col in range(len(rows[0])):
        column = [row[col] for row in rows]
        out.extend(column if col % 2 == 0 else reversed(column))
    return out


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Walk the matrix clockwise from the top-left corner, spiralling inwards."""
    rows = _rows(matrix)
    if not rows or not rows[0]:
        return []
    out: list[int] = []
    top, bottom = 0, len(rows) - 1
    left, right = 0, len(rows[0]) - 1
    while top <= bottom and left <= right:
        out.extend(rows[top][left:right + 1])
        top += 1
        out.extend(rows[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            out.extend(reversed(rows[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            out.extend(rows[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return out


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Swap rows and columns."""
    return [list(column) for column in zip(*_rows(matrix))]


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rotate a quarter turn clockwise."""
    return [list(column) for column in zip(*reversed(_rows(matrix)))]


def rotate_180(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rotate a half turn."""
    return [row[::-1] for row in reversed(_rows(matrix))]


def rotate_anticlockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rotate a quarter turn anticlockwise."""
    return [list(column) for column in zip(*_rows(matrix))][::-1]


def rotate_k(matrix: Sequence[Sequence[int]], k: int) -> Matrix:
    """Rotate k quarter turns clockwise; a negative k turns anticlockwise."""
    result = _rows(matrix)
    for _ in range(k % 4):
        result = rotate_clockwise(result)
    return result