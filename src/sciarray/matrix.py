"""Matrix and vector handles over nested Python lists."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SciShapeError, SciUnsupportedError
from .orientation import Orientation, as_column, as_row, column_vector, flatten, orientation_of, row_vector
from .shape import classify
from .values import is_sequence


def _dense():
    try:
        from . import dense
    except ModuleNotFoundError as exc:
        if exc.name and exc.name.startswith("jax"):
            raise SciUnsupportedError("the dense backend requires jax. Install runtime deps first.") from exc
        raise
    dense.require_backend()
    return dense


def _copy_rows(raw) -> list:
    if not is_sequence(raw):
        raise SciShapeError(f"matrix must be a sequence of rows, got {type(raw).__name__}")
    return [list(row) if is_sequence(row) else row for row in raw]


@dataclass(frozen=True)
class Matrix:
    """A nested list treated as a matrix.

    Every construction path, ``Matrix(rows)`` included, copies the outer
    containers, so nothing done through the handle is visible in the array it
    was built from. Handles compare by value and are not hashable.
    """

    rows: list

    __hash__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _copy_rows(self.rows))

    @classmethod
    def from_array(cls, raw) -> "Matrix":
        return cls(raw)

    @classmethod
    def row_vector(cls, data) -> "Matrix":
        return cls(row_vector(data))

    @classmethod
    def column_vector(cls, data) -> "Matrix":
        return cls(column_vector(data))

    @classmethod
    def from_dense(cls, arr) -> "Matrix":
        return cls(_dense().from_dense(arr))

    def to_array(self) -> list:
        return _copy_rows(self.rows)

    def size(self) -> list[int]:
        return list(classify(self.rows).sizes)

    @property
    def orientation(self) -> Orientation:
        return orientation_of(self.rows)

    def as_row(self) -> "Matrix | None":
        out = as_row(self.rows)
        return None if out is None else Matrix(out)

    def as_column(self) -> "Matrix | None":
        out = as_column(self.rows)
        return None if out is None else Matrix(out)

    def to_vector(self) -> "Vector":
        if self.orientation not in {Orientation.ROW, Orientation.COLUMN}:
            raise SciShapeError(f"only a row or column vector converts to a vector, got shape {self.size()}")
        return Vector(flatten(self.rows))

    # Dense-routed operations: results always carry float elements.

    def to_dense(self):
        return _dense().to_dense(self.rows)

    def transpose(self) -> "Matrix":
        dense = _dense()
        return Matrix(dense.from_dense(dense.dense_transpose(dense.to_dense(self.rows))))

    def concat_h(self, other: "Matrix") -> "Matrix":
        dense = _dense()
        stacked = dense.dense_hstack(dense.to_dense(self.rows), dense.to_dense(unwrap(other)))
        return Matrix(dense.from_dense(stacked))

    def concat_v(self, other: "Matrix") -> "Matrix":
        dense = _dense()
        stacked = dense.dense_vstack(dense.to_dense(self.rows), dense.to_dense(unwrap(other)))
        return Matrix(dense.from_dense(stacked))

    def inv(self) -> "Matrix":
        return Matrix(_dense().inv(self.rows))


@dataclass(frozen=True)
class Vector:
    """A flat numeric sequence; related to 1×N / N×1 matrices only by explicit conversion."""

    values: list

    __hash__ = None

    def __post_init__(self) -> None:
        if not is_sequence(self.values):
            raise SciShapeError(f"vector must be a list, got {type(self.values).__name__}")
        object.__setattr__(self, "values", list(self.values))

    @classmethod
    def from_array(cls, raw) -> "Vector":
        return cls(raw)

    @classmethod
    def from_dense(cls, arr) -> "Vector":
        return cls(_dense().from_dense_vector(arr))

    def __len__(self) -> int:
        return len(self.values)

    def to_array(self) -> list:
        return list(self.values)

    def to_dense(self):
        return _dense().to_dense_vector(self.values)

    def as_row_matrix(self) -> Matrix:
        return Matrix.row_vector(self.values)

    def as_column_matrix(self) -> Matrix:
        return Matrix.column_vector(self.values)


def from_array(raw) -> Matrix:
    return Matrix.from_array(raw)


def to_array(matrix) -> list:
    if isinstance(matrix, (Matrix, Vector)):
        return matrix.to_array()
    if is_sequence(matrix):
        return _copy_rows(matrix)
    raise SciShapeError(f"to_array expects a Matrix, Vector or nested list, got {type(matrix).__name__}")


def unwrap(value):
    """Raw nested list behind a handle; anything else passes through."""
    if isinstance(value, Matrix):
        return value.rows
    if isinstance(value, Vector):
        return value.values
    return value
