"""Reductions that take a list, a row vector or a column vector interchangeably.

Moving-window functions follow MATLAB's window placement: an odd window is
centred on the current element, an even one on the current and previous
elements, and windows are truncated at the ends.
"""

from __future__ import annotations

import math
import statistics
from typing import Callable

from .errors import SciShapeError
from .matrix import unwrap
from .orientation import as_list, orient_like
from .values import as_float, as_python_int


def _float_list(data, *, where: str) -> list[float]:
    return [as_float(value, where=where) for value in as_list(data, where=where)]


def _window_bounds(n: int, k: int) -> list[tuple[int, int]]:
    before = k // 2
    after = (k - 1) // 2
    return [(max(0, i - before), min(n, i + after + 1)) for i in range(n)]


def _moving(data, k, reduce: Callable[[list[float]], float], *, where: str, preserve_orientation: bool) -> list:
    raw = unwrap(data)
    values = _float_list(raw, where=where)
    width = as_python_int(k, where=where)
    if width < 1:
        raise SciShapeError(f"{where} window length must be a positive integer")
    out = [float(reduce(values[lo:hi])) for lo, hi in _window_bounds(len(values), width)]
    if preserve_orientation:
        return orient_like(out, raw)
    return out


def _mean(window: list[float]) -> float:
    return math.fsum(window) / len(window)


def movmean(data, k, *, preserve_orientation: bool = False) -> list:
    return _moving(data, k, _mean, where="movmean", preserve_orientation=preserve_orientation)


def movsum(data, k, *, preserve_orientation: bool = False) -> list:
    return _moving(data, k, math.fsum, where="movsum", preserve_orientation=preserve_orientation)


def movmin(data, k, *, preserve_orientation: bool = False) -> list:
    return _moving(data, k, min, where="movmin", preserve_orientation=preserve_orientation)


def movmax(data, k, *, preserve_orientation: bool = False) -> list:
    return _moving(data, k, max, where="movmax", preserve_orientation=preserve_orientation)


def movmedian(data, k, *, preserve_orientation: bool = False) -> list:
    return _moving(data, k, statistics.median, where="movmedian", preserve_orientation=preserve_orientation)


def _arg_extreme(data, *, where: str, pick: Callable) -> int:
    values = _float_list(unwrap(data), where=where)
    if not values:
        raise SciShapeError(f"{where} requires a non-empty list")
    # min/max return the first index among ties.
    return pick(range(len(values)), key=values.__getitem__)


def argmax(data) -> int:
    return _arg_extreme(data, where="argmax", pick=max)


def argmin(data) -> int:
    return _arg_extreme(data, where="argmin", pick=min)
