"""Bridge between nested arrays and dense ``jax.numpy`` matrices.

Only decomposition-style work (inversion) needs to come through here. Going
dense widens every element to float; ``from_dense`` never hands back ints.
"""

from __future__ import annotations

import logging
import math

import jax
import jax.numpy as jnp

from .config import DENSE_X64, HAS_DENSE_BACKEND, SINGULAR_RCOND
from .errors import SciArithmeticError, SciShapeError, SciTypeError, SciUnsupportedError, classify_runtime_exception
from .shape import require_matrix
from .values import as_float, is_numeric, is_sequence

logger = logging.getLogger(__name__)

# jax 64-bit mode is process-wide; SCIARRAY_DENSE_X64=0 leaves it untouched.
if DENSE_X64:
    jax.config.update("jax_enable_x64", True)
    logger.debug("dense: enabled jax 64-bit mode")


def require_backend() -> None:
    if not HAS_DENSE_BACKEND:
        raise SciUnsupportedError("dense backend is disabled (SCIARRAY_DISABLE_DENSE_BACKEND=1)")


def to_dense(raw) -> jnp.ndarray:
    require_backend()
    if is_sequence(raw) and not raw:
        return jnp.zeros((0, 0), dtype=float)
    rows, cols = require_matrix(raw, where="to_dense")
    data = [[as_float(value, where="to_dense") for value in row] for row in raw]
    logger.debug("to_dense: %dx%d", rows, cols)
    return jnp.asarray(data, dtype=float).reshape(rows, cols)


def from_dense(arr) -> list[list[float]]:
    arr = jnp.asarray(arr)
    if arr.ndim != 2:
        raise SciShapeError(f"from_dense requires a rank-2 array, got rank {arr.ndim}")
    return [[float(value) for value in row] for row in arr.tolist()]


def to_dense_vector(raw) -> jnp.ndarray:
    require_backend()
    if not is_sequence(raw):
        raise SciShapeError("vector must be a list")
    for value in raw:
        if is_sequence(value) or not is_numeric(value):
            raise SciTypeError("vector elements must be INT or FLOAT")
    return jnp.asarray([as_float(value, where="to_dense_vector") for value in raw], dtype=float).reshape(len(raw))


def from_dense_vector(arr) -> list[float]:
    arr = jnp.asarray(arr)
    if arr.ndim != 1:
        raise SciShapeError(f"from_dense_vector requires a rank-1 array, got rank {arr.ndim}")
    return [float(value) for value in arr.tolist()]


def dense_transpose(arr: jnp.ndarray) -> jnp.ndarray:
    return jnp.transpose(arr)


def dense_hstack(left: jnp.ndarray, right: jnp.ndarray) -> jnp.ndarray:
    if left.shape[0] != right.shape[0]:
        raise SciShapeError("matrices must have the same number of rows")
    return jnp.concatenate((left, right), axis=1)


def dense_vstack(top: jnp.ndarray, bottom: jnp.ndarray) -> jnp.ndarray:
    if top.shape[1] != bottom.shape[1]:
        raise SciShapeError("matrices must have the same number of columns")
    return jnp.concatenate((top, bottom), axis=0)


def dense_inv(arr: jnp.ndarray) -> jnp.ndarray:
    rows, cols = arr.shape
    if rows != cols:
        raise SciShapeError(f"matrix must be square, got {rows}x{cols}")
    if rows == 0:
        return arr

    if SINGULAR_RCOND > 0.0:
        cond = float(jnp.linalg.cond(arr))
        if not math.isfinite(cond) or 1.0 / cond < SINGULAR_RCOND:
            logger.debug("dense_inv: rejected %dx%d matrix with condition number %s", rows, cols, cond)
            raise SciArithmeticError("matrix is singular to working precision")

    try:
        result = jnp.linalg.inv(arr)
    except (TypeError, ValueError) as exc:
        raise classify_runtime_exception(exc) from exc
    # LU on a singular matrix divides by a zero pivot instead of raising.
    if not bool(jnp.all(jnp.isfinite(result))):
        raise SciArithmeticError("matrix is singular")
    logger.debug("dense_inv: inverted %dx%d matrix", rows, cols)
    return result


def inv(raw) -> list[list[float]]:
    """Invert a square numeric matrix given as nested rows."""
    require_backend()
    if not is_sequence(raw):
        raise SciShapeError("inv requires a matrix argument")
    for row in raw:
        if is_sequence(row):
            for value in row:
                if not is_numeric(value):
                    raise SciTypeError("matrix elements must be INT or FLOAT")
    return from_dense(dense_inv(to_dense(raw)))
