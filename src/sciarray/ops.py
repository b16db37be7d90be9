"""Structural matrix operations over nested lists.

These work directly on the nested representation, so integer elements stay
integers. A flat list is read the way a MATLAB literal ``[1, 2, 3]`` is: as a
1×N row. Every operation validates rectangularity and element kinds before
building its result.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SciShapeError
from .matrix import Matrix, Vector, unwrap
from . import orientation
from .orientation import Orientation, as_list, orientation_of, row_vector
from .shape import require_matrix, require_numeric_elements
from .values import as_python_int, is_sequence


def _matrix_rows(value, *, where: str) -> tuple[list, int, int]:
    raw = unwrap(value)
    if is_sequence(raw) and raw and orientation_of(raw) is Orientation.LIST:
        raw = row_vector(raw)
    rows, cols = require_matrix(raw, where=where)
    return raw, rows, cols


def _count(value, *, where: str) -> int:
    n = as_python_int(value, where=where)
    if n < 0:
        raise SciShapeError(f"{where} dimensions must be non-negative")
    return n


def as_row(m) -> Matrix | None:
    """``m`` as a 1×N matrix, or None when it is neither a row nor a column vector."""
    out = orientation.as_row(unwrap(m))
    return None if out is None else Matrix(out)


def as_column(m) -> Matrix | None:
    out = orientation.as_column(unwrap(m))
    return None if out is None else Matrix(out)


def transpose(m) -> Matrix:
    raw, rows, cols = _matrix_rows(m, where="transpose")
    return Matrix([[raw[i][j] for i in range(rows)] for j in range(cols)])


def horzcat(a, b) -> Matrix:
    left, left_rows, _ = _matrix_rows(a, where="horzcat")
    right, right_rows, _ = _matrix_rows(b, where="horzcat")
    if left_rows != right_rows:
        raise SciShapeError(f"matrices must have the same number of rows ({left_rows} vs {right_rows})")
    return Matrix([[*left[i], *right[i]] for i in range(left_rows)])


def vertcat(a, b) -> Matrix:
    top, _, top_cols = _matrix_rows(a, where="vertcat")
    bottom, _, bottom_cols = _matrix_rows(b, where="vertcat")
    if top_cols != bottom_cols:
        raise SciShapeError(f"matrices must have the same number of columns ({top_cols} vs {bottom_cols})")
    return Matrix([list(row) for row in top] + [list(row) for row in bottom])


def repmat(m, row_mult, col_mult) -> Matrix:
    """Tile ``m`` ``row_mult`` times down and ``col_mult`` times across."""
    raw, rows, cols = _matrix_rows(m, where="repmat")
    mr = _count(row_mult, where="repmat")
    mc = _count(col_mult, where="repmat")
    if rows == 0 or cols == 0:
        return Matrix([[] for _ in range(rows * mr)])
    return Matrix([[raw[i % rows][j % cols] for j in range(cols * mc)] for i in range(rows * mr)])


@dataclass(frozen=True)
class MeshGrid:
    x: Matrix
    y: Matrix

    def __getitem__(self, key: str) -> Matrix:
        if key == "x":
            return self.x
        if key == "y":
            return self.y
        raise KeyError(key)

    def to_dict(self) -> dict[str, list]:
        return {"x": self.x.to_array(), "y": self.y.to_array()}


def meshgrid(x, y) -> MeshGrid:
    """Paired coordinate grids, both of shape ``[len(y), len(x)]``.

    ``x`` and ``y`` may each be a flat list, a row vector or a column vector.
    """
    xs = as_list(unwrap(x), where="meshgrid")
    ys = as_list(unwrap(y), where="meshgrid")
    require_numeric_elements(xs, noun="meshgrid")
    require_numeric_elements(ys, noun="meshgrid")
    return MeshGrid(
        x=Matrix([list(xs) for _ in ys]),
        y=Matrix([[value] * len(xs) for value in ys]),
    )


def inv(m) -> Matrix:
    raw = unwrap(m)
    if is_sequence(raw) and raw and orientation_of(raw) is Orientation.LIST:
        raw = row_vector(raw)
    return Matrix.from_array(raw).inv()


def eye(*dims) -> Matrix:
    """Identity matrix: ``eye(n)``, ``eye(rows, cols)``, ``eye([n])`` or ``eye([rows, cols])``."""
    if len(dims) == 1 and is_sequence(unwrap(dims[0])):
        dims = tuple(as_list(unwrap(dims[0]), where="eye"))
    if len(dims) == 1:
        rows = cols = _count(dims[0], where="eye")
    elif len(dims) == 2:
        rows = _count(dims[0], where="eye")
        cols = _count(dims[1], where="eye")
    else:
        raise SciShapeError(f"eye takes one or two dimensions, got {len(dims)}")
    return Matrix([[1 if i == j else 0 for j in range(cols)] for i in range(rows)])


def diag(v) -> Matrix | Vector:
    """Vector in, square diagonal matrix out; matrix in, main diagonal as a flat list out."""
    raw = unwrap(v)
    orientation = orientation_of(raw)
    if orientation in {Orientation.LIST, Orientation.ROW, Orientation.COLUMN}:
        values = as_list(raw, where="diag")
        require_numeric_elements(values, noun="diag")
        n = len(values)
        return Matrix([[values[i] if i == j else 0 for j in range(n)] for i in range(n)])
    rows, cols = require_matrix(raw, where="diag")
    return Vector([raw[i][i] for i in range(min(rows, cols))])
