"""
Sobol generating matrices.

Size parameter: number of columns ``m`` (the matrices are ``m x m``).
Column ``k - 1`` holds the ``k``-bit expansion of the direction number
``m_k``, most significant bit in row 0.
"""
from __future__ import annotations

import numpy as np

from core.generating_matrix import GeneratingMatrix
from constructions.sobol.direction_numbers import primitive_polynomial
from constructions.sobol.validator import validate


def num_rows(num_cols: int) -> int:
    return num_cols


def num_cols(num_cols: int) -> int:
    return num_cols


def default_size_parameter() -> int:
    return 0


def direction_numbers(value: tuple[int, ...], coord: int, count: int) -> list[int]:
    """Extend the initial numbers ``m_1..m_s`` to ``m_1..m_count``."""
    if coord == 0:
        return [1] * count
    poly = primitive_polynomial(coord)
    s = poly.degree
    m = list(value[:count])
    for k in range(s, count):
        # 0-based: m[k] from m[k-1] ... m[k-s]
        new = m[k - s] ^ (m[k - s] << s)
        for i in range(1, s):
            if (poly.a >> (s - 1 - i)) & 1:
                new ^= m[k - i] << i
        m.append(new)
    return m


def build_matrix(value: tuple[int, ...], num_cols: int, coord: int) -> GeneratingMatrix:
    validate(value, num_cols, coord).raise_if_invalid()
    bits = np.zeros((num_cols, num_cols), dtype=np.uint8)
    for k, m_k in enumerate(direction_numbers(value, coord, num_cols), start=1):
        for i in range(k):
            bits[i, k - 1] = (m_k >> (k - 1 - i)) & 1
    return GeneratingMatrix(bits)
