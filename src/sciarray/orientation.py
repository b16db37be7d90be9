"""Conversions between flat lists, row vectors (1×N) and column vectors (N×1)."""

from __future__ import annotations

from enum import Enum

from .errors import SciShapeError
from .shape import classify
from .values import is_sequence


class Orientation(str, Enum):
    SCALAR = "scalar"
    LIST = "list"
    ROW = "row"
    COLUMN = "column"
    MATRIX = "matrix"
    IRREGULAR = "irregular"


def row_vector(data) -> list:
    return [list(data)]


def column_vector(data) -> list:
    return [[value] for value in data]


def flatten(raw) -> list:
    """Row-major traversal of any nested sequence into a new flat list."""
    if not is_sequence(raw):
        return [raw]
    out: list = []
    stack = [iter(raw)]
    while stack:
        for item in stack[-1]:
            if is_sequence(item):
                stack.append(iter(item))
                break
            out.append(item)
        else:
            stack.pop()
    return out


def orientation_of(raw) -> Orientation:
    info = classify(raw)
    if not info.regular:
        return Orientation.IRREGULAR
    if info.ndims == 0:
        return Orientation.SCALAR
    if info.ndims == 1:
        return Orientation.LIST
    if info.ndims == 2:
        rows, cols = info.sizes
        if rows == 1:
            return Orientation.ROW
        if cols == 1:
            return Orientation.COLUMN
    return Orientation.MATRIX


def as_row(raw) -> list | None:
    """Return ``raw`` as a 1×N matrix, or None when it is neither a row nor a column."""
    orientation = orientation_of(raw)
    if orientation is Orientation.ROW:
        return [list(raw[0])]
    if orientation is Orientation.COLUMN:
        return row_vector(flatten(raw))
    return None


def as_column(raw) -> list | None:
    """Return ``raw`` as an N×1 matrix, or None when it is neither a row nor a column."""
    orientation = orientation_of(raw)
    # 1×1 reports ROW; it is also a valid column.
    if orientation is Orientation.COLUMN or (orientation is Orientation.ROW and len(raw[0]) == 1):
        return [list(row) for row in raw]
    if orientation is Orientation.ROW:
        return column_vector(flatten(raw))
    return None


def as_list(raw, *, where: str = "argument") -> list:
    """Normalize a flat list, a row vector or a column vector to a new flat list."""
    orientation = orientation_of(raw)
    if orientation is Orientation.LIST:
        return list(raw)
    if orientation in {Orientation.ROW, Orientation.COLUMN}:
        return flatten(raw)
    raise SciShapeError(f"{where} requires a list, row vector or column vector")


def orient_like(values, like) -> list:
    """Re-wrap a flat result in the orientation ``like`` was supplied in."""
    orientation = orientation_of(like)
    if orientation is Orientation.ROW:
        return row_vector(values)
    if orientation is Orientation.COLUMN:
        return column_vector(values)
    return list(values)
