"""A small dense matrix type with element-wise and product operations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions do not fit the requested operation."""


class Matrix:
    """A rows-by-cols matrix of floats, zero-filled unless data is given."""

    def __init__(
        self,
        rows: int,
        cols: int,
        data: Iterable[Iterable[float]] | None = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        if data is None:
            self._data = [[0.0] * cols for _ in range(rows)]
            return
        self._data = [[float(value) for value in row] for row in data]
        if len(self._data) != rows or any(len(row) != cols for row in self._data):
            raise MatrixShapeError(f"data does not form a {rows}-by-{cols} matrix")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        cols = len(rows[0]) if rows else 0
        return cls(len(rows), cols, rows)

    def is_vector(self) -> bool:
        """A matrix of one row or one column is a vector."""
        return self.rows == 1 or self.cols == 1

    def transpose(self) -> Matrix:
        return Matrix(self.cols, self.rows, zip(*self._data))

    def _check_same_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise MatrixShapeError(
                f"cannot combine {self.rows}-by-{self.cols} and "
                f"{other.rows}-by-{other.cols} matrices"
            )

    def add(self, other: Matrix) -> Matrix:
        self._check_same_shape(other)
        return Matrix(
            self.rows,
            self.cols,
            ([a + b for a, b in zip(mine, theirs)] for mine, theirs in zip(self._data, other._data)),
        )

    def minus(self, other: Matrix) -> Matrix:
        self._check_same_shape(other)
        return Matrix(
            self.rows,
            self.cols,
            ([a - b for a, b in zip(mine, theirs)] for mine, theirs in zip(self._data, other._data)),
        )

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product; the left column count must equal the right row count."""
        if self.cols != other.rows:
            raise MatrixShapeError(
                f"cannot multiply {self.rows}-by-{self.cols} by "
                f"{other.rows}-by-{other.cols}"
            )
        columns = list(zip(*other._data))
        return Matrix(
            self.rows,
            other.cols,
            ([sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._data),
        )

    def to_rows(self) -> list[list[float]]:
        return [list(row) for row in self._data]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._data!r})"