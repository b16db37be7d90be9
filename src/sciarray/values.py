"""Element value model: every leaf is an INT, a FLOAT or something non-numeric."""

from __future__ import annotations

import numbers
from enum import Enum

from .errors import SciArithmeticError, SciTypeError


class ValueKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    NON_NUMERIC = "non_numeric"


def is_sequence(value: object) -> bool:
    """True for the container types that make up a nested array."""
    return isinstance(value, (list, tuple))


def kind_of(value: object) -> ValueKind:
    # bool is an Integral subclass but is never a number here.
    if isinstance(value, bool):
        return ValueKind.NON_NUMERIC
    if isinstance(value, numbers.Integral):
        return ValueKind.INT
    if isinstance(value, numbers.Real):
        return ValueKind.FLOAT
    return ValueKind.NON_NUMERIC


def is_int(value: object) -> bool:
    return kind_of(value) is ValueKind.INT


def is_float(value: object) -> bool:
    return kind_of(value) is ValueKind.FLOAT


def is_numeric(value: object) -> bool:
    return kind_of(value) is not ValueKind.NON_NUMERIC


def as_float(value: object, *, where: str = "value") -> float:
    kind = kind_of(value)
    try:
        if kind is ValueKind.FLOAT:
            return float(value)
        if kind is ValueKind.INT:
            return float(int(value))
    except OverflowError as exc:
        raise SciArithmeticError(f"{where} element is out of float range") from exc
    raise SciTypeError(f"{where} has unsupported element type {type(value).__name__}")


def as_python_int(value: object, *, where: str) -> int:
    """Accept an INT, or a FLOAT holding an integral value, and return a Python int."""
    kind = kind_of(value)
    if kind is ValueKind.INT:
        return int(value)
    if kind is ValueKind.FLOAT:
        real = float(value)
        if real.is_integer():
            return int(real)
    raise SciTypeError(f"{where} requires an integer argument")


def kind_totals(raw: object) -> tuple[int, int, int]:
    """Count (ints, floats, total) over every leaf of a nested array."""
    ints = 0
    floats = 0
    total = 0
    stack = [raw]
    while stack:
        item = stack.pop()
        if is_sequence(item):
            stack.extend(item)
            continue
        total += 1
        kind = kind_of(item)
        if kind is ValueKind.INT:
            ints += 1
        elif kind is ValueKind.FLOAT:
            floats += 1
    return ints, floats, total
