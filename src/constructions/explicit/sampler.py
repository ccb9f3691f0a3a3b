"""
Exploration of the explicit generating-value space: every bit matrix of
the given shape, ``2^(rows * cols)`` of them.
"""
from __future__ import annotations

import itertools
from typing import Iterator

import numpy as np

from core.generating_matrix import GeneratingMatrix


def random_value(shape: tuple[int, int], coord: int, rng: np.random.Generator) -> GeneratingMatrix:
    return GeneratingMatrix(rng.integers(0, 2, size=shape, dtype=np.uint8))


def enumerate_values(shape: tuple[int, int], coord: int) -> Iterator[GeneratingMatrix]:
    """All matrices, in lexicographic order of their row-major bits."""
    num_rows, num_cols = shape
    for flat in itertools.product((0, 1), repeat=num_rows * num_cols):
        yield GeneratingMatrix(np.array(flat, dtype=np.uint8).reshape(num_rows, num_cols))
