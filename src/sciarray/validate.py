"""Boolean shape/type predicates. None of these raise; malformed input is just ``False``."""

from __future__ import annotations

from .shape import classify
from .values import is_sequence, kind_totals


def is_list(raw) -> bool:
    return classify(raw).is_list


def is_numeric_array(raw) -> bool:
    if not is_sequence(raw):
        return False
    ints, floats, total = kind_totals(raw)
    return ints + floats == total


def is_numeric_list(raw) -> bool:
    return is_list(raw) and is_numeric_array(raw)


def is_int_list(raw) -> bool:
    # Every element is checked, not just the first.
    if not is_list(raw):
        return False
    ints, _, total = kind_totals(raw)
    return ints == total


def is_float_list(raw) -> bool:
    if not is_list(raw):
        return False
    _, floats, total = kind_totals(raw)
    return floats == total


def is_row_vector(raw) -> bool:
    info = classify(raw)
    return info.regular and info.ndims == 2 and info.sizes[0] == 1


def is_column_vector(raw) -> bool:
    info = classify(raw)
    return info.regular and info.ndims == 2 and info.sizes[1] == 1


def is_matrix(raw) -> bool:
    return classify(raw).is_matrix
