"""
Exploration of the polynomial lattice rule generating-value space:
every non-zero polynomial of degree below ``deg P`` coprime with ``P``.
"""
from __future__ import annotations

from typing import Iterator

import numpy as np

from core import gf2_polynomial
from core.errors import NetConstructionError


def enumerate_values(modulus: int, coord: int) -> Iterator[int]:
    m = gf2_polynomial.degree(modulus)
    return (q for q in range(1, 1 << max(m, 0)) if gf2_polynomial.gcd(modulus, q) == 1)


def random_value(modulus: int, coord: int, rng: np.random.Generator) -> int:
    m = gf2_polynomial.degree(modulus)
    if m < 1:
        raise NetConstructionError(f"Modulus {modulus} must have degree at least 1.")
    # 1 is always coprime, so rejection sampling terminates.
    while True:
        q = int(rng.integers(1, 1 << m))
        if gf2_polynomial.gcd(modulus, q) == 1:
            return q
