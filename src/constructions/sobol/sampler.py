"""
Exploration of the Sobol generating-value space.

The space of coordinate ``j`` is every tuple ``(m_1, ..., m_s)`` with
``m_k`` odd and below ``2^k``; it has ``2^(s(s-1)/2)`` elements.
"""
from __future__ import annotations

import itertools
from typing import Iterator

import numpy as np

from constructions.sobol.direction_numbers import degree_for


def random_value(num_cols: int, coord: int, rng: np.random.Generator) -> tuple[int, ...]:
    s = degree_for(coord)
    return tuple(
        2 * int(rng.integers(0, 1 << (k - 1))) + 1
        for k in range(1, s + 1)
    )


def enumerate_values(num_cols: int, coord: int) -> Iterator[tuple[int, ...]]:
    s = degree_for(coord)
    choices = [range(1, 1 << k, 2) for k in range(1, s + 1)]
    return iter(itertools.product(*choices))
