"""
Primitive polynomials and reference direction numbers for Sobol nets.

Coordinate ``j >= 1`` of a Sobol net is attached to the ``j``-th
primitive polynomial over GF(2), ordered by degree and then by the
integer ``a`` formed by its inner coefficients ``a_1 ... a_{s-1}``
(the ordering used by Joe and Kuo).  Coordinate 0 is the identity.
"""
from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

from core import gf2_polynomial


class PrimitivePolynomial(NamedTuple):
    degree: int
    a: int           # inner coefficients a_1 (high bit) ... a_{s-1}
    polynomial: int  # full polynomial, bit i = coefficient of x^i


# new-joe-kuo-6.21201, coordinates 1 to 12 (coordinate 0 takes no numbers).
JOE_KUO_DIRECTION_NUMBERS: tuple[tuple[int, ...], ...] = (
    (),
    (1,),
    (1, 3),
    (1, 3, 1),
    (1, 1, 1),
    (1, 1, 3, 3),
    (1, 3, 5, 13),
    (1, 1, 5, 5, 17),
    (1, 1, 5, 5, 5),
    (1, 1, 7, 11, 19),
    (1, 1, 5, 1, 1),
    (1, 1, 1, 3, 11),
    (1, 3, 5, 5, 31),
)


@lru_cache(maxsize=None)
def primitive_polynomial(coord: int) -> PrimitivePolynomial:
    """Primitive polynomial of coordinate ``coord`` (``coord >= 1``)."""
    if coord < 1:
        raise ValueError(f"Coordinate {coord} has no primitive polynomial")
    remaining = coord
    deg = 1
    while True:
        candidates = gf2_polynomial.primitive_polynomials(deg)
        if remaining <= len(candidates):
            poly = candidates[remaining - 1]
            a = (poly >> 1) & ((1 << (deg - 1)) - 1)
            return PrimitivePolynomial(deg, a, poly)
        remaining -= len(candidates)
        deg += 1


def degree_for(coord: int) -> int:
    """Number of direction numbers coordinate ``coord`` takes."""
    return 0 if coord == 0 else primitive_polynomial(coord).degree


def joe_kuo_values(dimension: int) -> list[tuple[int, ...]]:
    """Reference direction numbers for the first ``dimension`` coordinates."""
    if dimension > len(JOE_KUO_DIRECTION_NUMBERS):
        raise ValueError(
            f"Reference direction numbers cover {len(JOE_KUO_DIRECTION_NUMBERS)} "
            f"coordinates, {dimension} requested"
        )
    return list(JOE_KUO_DIRECTION_NUMBERS[:dimension])
