"""
Exploration of the scrambling-matrix space: lower unit-triangular
``num_rows x base rows`` matrices.  Random draws follow Matousek's
linear scramble (free entries below the diagonal are fair coin flips).
"""
from __future__ import annotations

import itertools
from typing import Iterator

import numpy as np

from core.errors import NetConstructionError
from core.generating_matrix import GeneratingMatrix
from constructions.lms.size_parameter import LMSSizeParameter


def _shape(size: LMSSizeParameter) -> tuple[int, int]:
    if size.base_net is None:
        raise NetConstructionError("Left matrix scramble requires a base net.")
    return size.num_rows, size.base_net.num_rows


def _free_positions(num_rows: int, num_cols: int) -> list[tuple[int, int]]:
    return [(i, j) for i in range(num_rows) for j in range(min(i, num_cols))]


def random_value(size: LMSSizeParameter, coord: int, rng: np.random.Generator) -> GeneratingMatrix:
    num_rows, num_cols = _shape(size)
    bits = np.eye(num_rows, num_cols, dtype=np.uint8)
    lower = np.tril(rng.integers(0, 2, size=(num_rows, num_cols), dtype=np.uint8), k=-1)
    return GeneratingMatrix(bits | lower)


def enumerate_values(size: LMSSizeParameter, coord: int) -> Iterator[GeneratingMatrix]:
    num_rows, num_cols = _shape(size)
    positions = _free_positions(num_rows, num_cols)
    for choice in itertools.product((0, 1), repeat=len(positions)):
        bits = np.eye(num_rows, num_cols, dtype=np.uint8)
        for (i, j), bit in zip(positions, choice):
            bits[i, j] = bit
        yield GeneratingMatrix(bits)
