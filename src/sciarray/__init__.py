"""sciarray public API."""

import logging

from .config import HAS_DENSE_BACKEND
from .errors import (
    SciArithmeticError,
    SciError,
    SciShapeError,
    SciTypeError,
    SciUnsupportedError,
)
from .matrix import Matrix, Vector, from_array, to_array
from .ops import MeshGrid, as_column, as_row, diag, eye, horzcat, inv, meshgrid, repmat, transpose, vertcat
from .orientation import Orientation, as_list, flatten, orient_like
from .registry import SciPackage
from .shape import ShapeInfo, classify, matrix_size, ndims, numel
from .stats import argmax, argmin, movmax, movmean, movmedian, movmin, movsum
from .validate import (
    is_column_vector,
    is_float_list,
    is_int_list,
    is_list,
    is_matrix,
    is_numeric_array,
    is_numeric_list,
    is_row_vector,
)

row_vector = Matrix.row_vector
column_vector = Matrix.column_vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HAS_DENSE_BACKEND",
    "Matrix",
    "Vector",
    "MeshGrid",
    "Orientation",
    "ShapeInfo",
    "SciPackage",
    "from_array",
    "to_array",
    "row_vector",
    "column_vector",
    "as_row",
    "as_column",
    "as_list",
    "orient_like",
    "flatten",
    "transpose",
    "horzcat",
    "vertcat",
    "repmat",
    "meshgrid",
    "inv",
    "eye",
    "diag",
    "classify",
    "matrix_size",
    "numel",
    "ndims",
    "is_list",
    "is_numeric_array",
    "is_numeric_list",
    "is_int_list",
    "is_float_list",
    "is_row_vector",
    "is_column_vector",
    "is_matrix",
    "movmean",
    "movsum",
    "movmin",
    "movmax",
    "movmedian",
    "argmax",
    "argmin",
    "SciError",
    "SciArithmeticError",
    "SciShapeError",
    "SciTypeError",
    "SciUnsupportedError",
]
