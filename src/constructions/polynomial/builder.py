"""
Polynomial lattice rule generating matrices.

Size parameter: the modulus ``P`` (``deg P`` rows and columns).  The
matrix of generating polynomial ``q`` is the Hankel matrix
``C[i][j] = u_{i+j+1}`` of the expansion ``q / P = sum u_l x^-l``.
"""
from __future__ import annotations

import numpy as np

from core import gf2_polynomial
from core.generating_matrix import GeneratingMatrix
from constructions.polynomial.validator import validate


def num_rows(modulus: int) -> int:
    return max(gf2_polynomial.degree(modulus), 0)


def num_cols(modulus: int) -> int:
    return max(gf2_polynomial.degree(modulus), 0)


def default_size_parameter() -> int:
    return 1


def build_matrix(value: int, modulus: int, coord: int) -> GeneratingMatrix:
    validate(value, modulus, coord).raise_if_invalid()
    m = gf2_polynomial.degree(modulus)
    digits = gf2_polynomial.laurent_digits(value, modulus, 2 * m - 1)
    bits = np.array(
        [[digits[i + j] for j in range(m)] for i in range(m)],
        dtype=np.uint8,
    )
    return GeneratingMatrix(bits)
