"""
Left matrix scramble: ``C_j = L_j @ B_j`` over GF(2), where ``B_j`` is
the base net's matrix of coordinate ``j`` and ``L_j`` the scrambling
matrix given as generating value.
"""
from __future__ import annotations

from core.generating_matrix import GeneratingMatrix
from constructions.lms.size_parameter import LMSSizeParameter
from constructions.lms.validator import validate


def num_rows(size: LMSSizeParameter) -> int:
    return size.num_rows


def num_cols(size: LMSSizeParameter) -> int:
    return size.base_net.num_columns if size.base_net is not None else 0


def default_size_parameter() -> LMSSizeParameter:
    return LMSSizeParameter()


def build_matrix(value: GeneratingMatrix, size: LMSSizeParameter, coord: int) -> GeneratingMatrix:
    validate(value, size, coord).raise_if_invalid()
    return value @ size.base_net.generating_matrix(coord)
