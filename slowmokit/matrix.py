"""A small dense two-dimensional matrix."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Number
from typing import Any

_NON_POSITIVE = "Cannot have non-positive dimension."


class Matrix:
    """A rectangular matrix of numbers with at least one row and one column."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Iterable[Iterable[Any]]) -> None:
        rows = [list(row) for row in data]
        if not rows or not rows[0]:
            raise ValueError(_NON_POSITIVE)
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have same dimension")
        self._rows = rows

    @classmethod
    def zeros(cls, n: int, m: int) -> "Matrix":
        """Return an ``n`` by ``m`` matrix filled with zeros."""
        if n <= 0 or m <= 0:
            raise ValueError(_NON_POSITIVE)
        return cls([[0] * m for _ in range(n)])

    @property
    def shape(self) -> tuple[int, int]:
        """The (rows, columns) dimension of the matrix."""
        return len(self._rows), len(self._rows[0])

    def _check_row(self, i: int) -> None:
        n = len(self._rows)
        if not 0 <= i < n:
            raise IndexError(f"i should be between 0 and {n - 1} inclusive")

    def _check_col(self, j: int) -> None:
        m = len(self._rows[0])
        if not 0 <= j < m:
            raise IndexError(f"j should be between 0 and {m - 1} inclusive")

    def __getitem__(self, key):
        """``m[i]`` returns a copy of row ``i``; ``m[i, j]`` returns an element."""
        if isinstance(key, tuple):
            i, j = key
            self._check_row(i)
            self._check_col(j)
            return self._rows[i][j]
        self._check_row(key)
        return list(self._rows[key])

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self._check_row(i)
        self._check_col(j)
        self._rows[i][j] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(
                "Both Dimension of matrix-1 must be equal to that of matrix-2"
            )

    def __imul__(self, other):
        if isinstance(other, Matrix):
            if self.shape[1] != other.shape[0]:
                raise ValueError(
                    "Column dimension of matrix-1 must be equal "
                    "to row dimension of matrix-2"
                )
            columns = list(zip(*other._rows))
            self._rows = [
                [sum((a * b for a, b in zip(row, col)), 0) for col in columns]
                for row in self._rows
            ]
            return self
        if isinstance(other, Number):
            self._rows = [[value * other for value in row] for row in self._rows]
            return self
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, (Matrix, Number)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return Matrix([[other * value for value in row] for row in self._rows])

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._rows = [
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        ]
        return self

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._rows = [
            [a - b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        ]
        return self

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def copy(self) -> "Matrix":
        """Return an independent copy of the matrix."""
        return Matrix(self._rows)

    def tolist(self) -> list[list[Any]]:
        """Return the contents as a fresh list of row lists."""
        return [list(row) for row in self._rows]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"