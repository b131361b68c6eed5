"""A sparse matrix that stores only its non-null cells."""

from __future__ import annotations

from typing import Iterator

NULL_ELEMENT = 0


class SparseMatrix:
    """Matrix of fixed size in which only cells that are not null are stored.

    Iteration goes column by column, and top to bottom within a column. It
    visits only the cells that hold a value other than the null element.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("a matrix needs at least one row and one column")
        self._rows = rows
        self._cols = cols
        self._cells: dict[tuple[int, int], int] = {}

    def rows(self) -> int:
        """Return the number of rows."""
        return self._rows

    def cols(self) -> int:
        """Return the number of columns."""
        return self._cols

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"invalid position ({i}, {j})")

    def get(self, i: int, j: int) -> int:
        """Return the value at (i, j); raise IndexError if the position is invalid."""
        self._check(i, j)
        return self._cells.get((i, j), NULL_ELEMENT)

    def set(self, i: int, j: int, elem: int) -> int:
        """Store ``elem`` at (i, j).

        Return the previous value when a stored value is replaced by another
        non-null one. Setting a cell to the null element clears it and
        returns the null element.
        """
        self._check(i, j)
        if elem == NULL_ELEMENT:
            self._cells.pop((i, j), None)
            return NULL_ELEMENT
        old = self._cells.get((i, j), NULL_ELEMENT)
        self._cells[(i, j)] = elem
        return old

    def iterator(self) -> "SparseMatrixIterator":
        """Return a cursor-style iterator positioned on the first stored value."""
        return SparseMatrixIterator(self)

    def __iter__(self) -> Iterator[int]:
        ordered = sorted(self._cells.items(), key=lambda item: (item[0][1], item[0][0]))
        return (value for _, value in ordered)


class SparseMatrixIterator:
    """Cursor over the non-null cells of a sparse matrix, column by column."""

    def __init__(self, matrix: SparseMatrix) -> None:
        self._matrix = matrix
        self._row = 0
        self._col = 0
        self.first()

    def _step(self) -> None:
        if self._row < self._matrix.rows() - 1:
            self._row += 1
        else:
            self._col += 1
            self._row = 0

    def _skip_nulls(self) -> None:
        while self.valid() and self._matrix.get(self._row, self._col) == NULL_ELEMENT:
            self._step()

    def first(self) -> None:
        """Reset the cursor to the first stored value."""
        self._row = 0
        self._col = 0
        self._skip_nulls()

    def advance(self) -> None:
        """Move to the next stored value; raise ValueError if the cursor is invalid."""
        if not self.valid():
            raise ValueError("iterator is not valid")
        self._step()
        self._skip_nulls()

    def valid(self) -> bool:
        """Return True while the cursor points inside the matrix."""
        return self._row < self._matrix.rows() and self._col < self._matrix.cols()

    def element(self) -> int:
        """Return the current value; raise ValueError if the cursor is invalid."""
        if not self.valid():
            raise ValueError("iterator is not valid")
        return self._matrix.get(self._row, self._col)