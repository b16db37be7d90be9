"""Shape classification for nested numeric arrays.

Classification is read-only: nothing here mutates or copies the caller's
value. Extents follow the first element at every depth (the way MATLAB's
``size`` reports them) and the ``regular`` flag records whether every
sub-sequence actually agrees with those extents.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import SciShapeError, SciTypeError
from .values import is_numeric, is_sequence


@dataclass(frozen=True)
class ShapeInfo:
    sizes: tuple[int, ...]
    numel: int
    depth: int
    regular: bool

    @property
    def ndims(self) -> int:
        return len(self.sizes)

    @property
    def is_list(self) -> bool:
        return self.regular and self.ndims == 1

    @property
    def is_matrix(self) -> bool:
        return self.regular and self.ndims == 2 and math.prod(self.sizes) == self.numel


def _leading_sizes(raw: object) -> tuple[int, ...]:
    sizes: list[int] = []
    cur = raw
    while is_sequence(cur):
        sizes.append(len(cur))
        if not cur:
            break
        cur = cur[0]
    return tuple(sizes)


def _count_leaves(raw: object) -> int:
    count = 0
    stack = [raw]
    while stack:
        item = stack.pop()
        if is_sequence(item):
            stack.extend(item)
        else:
            count += 1
    return count


def _agrees(raw: object, sizes: tuple[int, ...]) -> bool:
    # Explicit stack: nesting depth is caller-controlled.
    stack = [(raw, 0)]
    while stack:
        node, axis = stack.pop()
        if axis == len(sizes):
            if is_sequence(node):
                return False
            continue
        if not is_sequence(node) or len(node) != sizes[axis]:
            return False
        stack.extend((item, axis + 1) for item in node)
    return True


def classify(raw: object) -> ShapeInfo:
    """Describe ``raw`` without raising; irregular input reports ``regular=False``."""
    if not is_sequence(raw):
        return ShapeInfo(sizes=(), numel=1, depth=0, regular=True)
    sizes = _leading_sizes(raw)
    return ShapeInfo(
        sizes=sizes,
        numel=_count_leaves(raw),
        depth=len(sizes),
        regular=_agrees(raw, sizes),
    )


def matrix_size(raw: object) -> list[int]:
    return list(classify(raw).sizes)


def numel(raw: object) -> int:
    return _count_leaves(raw)


def ndims(raw: object) -> int:
    return len(_leading_sizes(raw))


def require_numeric_elements(raw: object, *, noun: str = "matrix") -> None:
    """Raise unless every leaf of ``raw`` is an INT or a FLOAT."""
    stack = [raw]
    while stack:
        item = stack.pop()
        if is_sequence(item):
            stack.extend(item)
        elif not is_numeric(item):
            raise SciTypeError(f"{noun} elements must be INT or FLOAT")


def require_matrix(raw: object, *, where: str = "matrix") -> tuple[int, int]:
    """Validate a rectangular, all-numeric depth-2 array and return ``(rows, cols)``.

    An empty sequence is the 0×0 matrix.
    """
    if not is_sequence(raw):
        raise SciShapeError(f"{where} requires a matrix argument")
    if not raw:
        return 0, 0
    first = raw[0]
    if not is_sequence(first):
        raise SciShapeError("matrix must contain row arrays")
    cols = len(first)
    for row in raw:
        if not is_sequence(row):
            raise SciShapeError("matrix must contain row arrays")
        if len(row) != cols:
            raise SciShapeError("matrix rows must have equal length")
        for value in row:
            if not is_numeric(value):
                raise SciTypeError("matrix elements must be INT or FLOAT")
    return len(raw), cols
