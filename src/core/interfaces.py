"""
Core interfaces and abstract base classes for digital nets in base 2.

This module defines the contract every net satisfies regardless of the
construction method that produced it:
- AbstractDigitalNet: a vector of generating matrices with shared sizes
- HasGeneratingMatrices: protocol consumed by code that only reads matrices

Digital nets in other bases are not implemented.
"""
from __future__ import annotations

import abc
from typing import Protocol, Sequence

import numpy as np

from core.errors import NetCapacityError
from core.generating_matrix import GeneratingMatrix
from core.output_style import OutputStyle

# Point indices must fit an unsigned 64-bit integer.
MAX_NUM_COLUMNS = 63


class HasGeneratingMatrices(Protocol):
    """Anything that exposes one generating matrix per coordinate."""
    @property
    def dimension(self) -> int: ...

    def generating_matrix(self, coord: int) -> GeneratingMatrix: ...


class AbstractDigitalNet(abc.ABC):
    """
    Construction-method-agnostic view of a digital net.

    Used to reason about nets whenever the construction method does not
    matter, e.g. to compute figures of merit from the matrices.  The
    matrix sequence is populated once by the concrete subclass and never
    modified afterwards.
    """

    __slots__ = ("_num_rows", "_num_cols", "_generating_matrices")

    def __init__(
        self,
        num_rows: int = 0,
        num_cols: int = 0,
        generating_matrices: Sequence[GeneratingMatrix] = (),
    ):
        self._num_rows: int = num_rows
        self._num_cols: int = num_cols
        self._generating_matrices: tuple[GeneratingMatrix, ...] = tuple(generating_matrices)

    # ------------------------------------------------------------------
    # Sizes
    # ------------------------------------------------------------------

    @property
    def num_columns(self) -> int:
        return self._num_cols

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_points(self) -> int:
        """``2 ** num_columns``.  Raises ``NetCapacityError`` past ``MAX_NUM_COLUMNS``."""
        if self._num_cols > MAX_NUM_COLUMNS:
            raise NetCapacityError(
                f"Cannot represent 2^{self._num_cols} points; "
                f"at most {MAX_NUM_COLUMNS} columns are supported"
            )
        return 1 << self._num_cols

    @property
    def dimension(self) -> int:
        return len(self._generating_matrices)

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------

    @property
    def generating_matrices(self) -> tuple[GeneratingMatrix, ...]:
        return self._generating_matrices

    def generating_matrix(self, coord: int) -> GeneratingMatrix:
        """Return the matrix of coordinate ``coord`` (``0 <= coord < dimension``)."""
        if not 0 <= coord < len(self._generating_matrices):
            raise IndexError(
                f"Coordinate {coord} out of range for a net of dimension {self.dimension}"
            )
        return self._generating_matrices[coord]

    def points(self) -> np.ndarray:
        """
        All points of the net as a ``(num_points, dimension)`` array.

        Point ``i`` has coordinate ``j`` equal to ``sum_r y_r 2^-(r+1)``
        where ``y = C_j . digits(i)`` over GF(2) and ``digits(i)`` lists
        the binary digits of ``i``, least significant first.
        """
        n = self.num_points
        index = np.arange(n, dtype=np.uint64)
        shifts = np.arange(self._num_cols, dtype=np.uint64)
        digits = ((index[:, None] >> shifts[None, :]) & np.uint64(1)).astype(np.int64)
        weights = 0.5 ** np.arange(1, self._num_rows + 1)
        result = np.empty((n, self.dimension), dtype=np.float64)
        for j, matrix in enumerate(self._generating_matrices):
            output = (digits @ matrix.bits.T.astype(np.int64)) % 2
            result[:, j] = output @ weights
        return result

    # ------------------------------------------------------------------
    # Construction-specific behaviour
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def format(self, output_style: OutputStyle = OutputStyle.TERMINAL, interlacing_factor: int = 1) -> str:
        """Render the net as text in the requested style."""
        ...

    @abc.abstractmethod
    def is_sequence_viewable(self) -> bool:
        """Whether the points form a prefix of an infinite digital sequence."""
        ...
