"""Name → function table for embedding the operations in a script engine.

Script glue only ever sees plain nested lists: handle results are unwrapped
before they are returned from :meth:`SciPackage.call`.
"""

from __future__ import annotations

import inspect
import logging
from typing import Callable, Final

from . import ops, orientation, shape, stats, validate
from .config import HAS_DENSE_BACKEND
from .errors import SciTypeError, SciUnsupportedError
from .matrix import Matrix, Vector
from .ops import MeshGrid

logger = logging.getLogger(__name__)

_BASE_FUNCTIONS: Final[dict[str, Callable]] = {
    "row_vector": orientation.row_vector,
    "column_vector": orientation.column_vector,
    "as_row": ops.as_row,
    "as_column": ops.as_column,
    "flatten": orientation.flatten,
    "transpose": ops.transpose,
    "horzcat": ops.horzcat,
    "vertcat": ops.vertcat,
    "repmat": ops.repmat,
    "meshgrid": ops.meshgrid,
    "eye": ops.eye,
    "diag": ops.diag,
    "matrix_size": shape.matrix_size,
    "numel": shape.numel,
    "ndims": shape.ndims,
    "is_list": validate.is_list,
    "is_numeric_array": validate.is_numeric_array,
    "is_numeric_list": validate.is_numeric_list,
    "is_int_list": validate.is_int_list,
    "is_float_list": validate.is_float_list,
    "is_row_vector": validate.is_row_vector,
    "is_column_vector": validate.is_column_vector,
    "is_matrix": validate.is_matrix,
    "movmean": stats.movmean,
    "movsum": stats.movsum,
    "movmin": stats.movmin,
    "movmax": stats.movmax,
    "movmedian": stats.movmedian,
    "argmax": stats.argmax,
    "argmin": stats.argmin,
}

_DENSE_FUNCTIONS: Final[dict[str, Callable]] = {
    "inv": ops.inv,
}


def _to_script_value(value):
    if isinstance(value, (Matrix, Vector)):
        return value.to_array()
    if isinstance(value, MeshGrid):
        return value.to_dict()
    return value


class SciPackage:
    """Every public operation under the name scripts call it by."""

    def __init__(self, *, include_dense: bool | None = None) -> None:
        if include_dense is None:
            include_dense = HAS_DENSE_BACKEND
        self._functions = dict(_BASE_FUNCTIONS)
        if include_dense:
            self._functions.update(_DENSE_FUNCTIONS)
        else:
            logger.debug("SciPackage: dense backend unavailable; omitting %s", ", ".join(sorted(_DENSE_FUNCTIONS)))

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def names(self) -> list[str]:
        return sorted(self._functions)

    def functions(self) -> dict[str, Callable]:
        return dict(self._functions)

    def call(self, name: str, *args):
        fn = self._functions.get(name)
        if fn is None:
            raise SciUnsupportedError(f"unknown or unavailable function {name!r}")
        # Only a call that does not fit the signature is a script-level type error.
        try:
            inspect.signature(fn).bind(*args)
        except TypeError as exc:
            raise SciTypeError(f"{name}: {exc}") from exc
        return _to_script_value(fn(*args))
