"""
Explicit nets: the generating value *is* the generating matrix.

Size parameter: ``(num_rows, num_cols)``.  The built matrix is the
value object itself, so it is shared rather than copied.
"""
from __future__ import annotations

from core.generating_matrix import GeneratingMatrix
from constructions.explicit.validator import validate


def num_rows(shape: tuple[int, int]) -> int:
    return shape[0]


def num_cols(shape: tuple[int, int]) -> int:
    return shape[1]


def default_size_parameter() -> tuple[int, int]:
    return (0, 0)


def build_matrix(value: GeneratingMatrix, shape: tuple[int, int], coord: int) -> GeneratingMatrix:
    validate(value, shape, coord).raise_if_invalid()
    return value
