"""Structured error types for shape/type/arithmetic failures."""

from __future__ import annotations


class SciError(Exception):
    """Base class for structured sciarray errors."""


class SciArithmeticError(SciError):
    """Arithmetic failure in a transforming operation (e.g. singular matrix)."""


class SciShapeError(SciArithmeticError):
    """Ragged rows, dimension mismatch or otherwise unusable shape."""


class SciTypeError(SciArithmeticError):
    """Element or argument of the wrong kind (e.g. a string inside a matrix)."""


class SciUnsupportedError(SciError):
    """Operation exists but is not available in this installation."""


def classify_runtime_exception(err: Exception) -> SciError:
    """Best-effort classification of a foreign exception into the sciarray hierarchy."""
    if isinstance(err, SciError):
        return err
    message = str(err)
    lowered = message.lower()

    shape_markers = (
        "shape",
        "rank",
        "square",
        "dimension",
        "length",
        "rows",
        "columns",
    )
    if any(marker in lowered for marker in shape_markers):
        return SciShapeError(message)

    type_markers = (
        "type",
        "dtype",
        "integer",
        "float",
        "must be",
    )
    if any(marker in lowered for marker in type_markers):
        return SciTypeError(message)

    return SciArithmeticError(message)
