"""
GeneratingMatrix — immutable binary matrix over GF(2).

Backed by a read-only ``numpy`` array of ``uint8`` zeros and ones.
Instances are never modified after construction, which is what lets
several nets hold references to the same matrix object.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

# Number of binary output digits ("r") written to net files.
OUTPUT_DIGITS = 31


class GeneratingMatrix:
    """Fixed-size binary matrix mapping index digits to coordinate digits."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[Iterable[int]] | np.ndarray, num_cols: int | None = None):
        array = np.asarray(bits)
        if array.ndim == 1 and array.size == 0:
            # An empty row list carries no column count.
            array = np.zeros((0, num_cols or 0), dtype=np.uint8)
        if array.ndim != 2:
            raise ValueError(f"Generating matrix must be 2-dimensional, got shape {array.shape}")
        if array.dtype.kind not in "biuf":
            raise ValueError(f"Generating matrix entries must be numbers, got dtype {array.dtype}")
        if np.any((array != 0) & (array != 1)):
            raise ValueError("Generating matrix entries must be 0 or 1")
        # astype copies, so the caller's array stays independent.
        array = array.astype(np.uint8)
        array.flags.writeable = False
        self._bits = array

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> GeneratingMatrix:
        return cls(np.zeros((num_rows, num_cols), dtype=np.uint8))

    @classmethod
    def identity(cls, size: int) -> GeneratingMatrix:
        return cls(np.eye(size, dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], num_cols: int = 0) -> GeneratingMatrix:
        """Build from nested lists; ``num_cols`` is only used when ``rows`` is empty."""
        return cls(rows, num_cols=num_cols)

    @classmethod
    def from_columns_reverse(
        cls,
        columns: Sequence[int],
        num_rows: int = OUTPUT_DIGITS,
        output_digits: int = OUTPUT_DIGITS,
    ) -> GeneratingMatrix:
        """Inverse of :meth:`format_to_columns_reverse` (row 0 is the high bit)."""
        if num_rows > output_digits:
            raise ValueError(
                f"Cannot recover {num_rows} rows from {output_digits} output digits"
            )
        bits = np.zeros((num_rows, len(columns)), dtype=np.uint8)
        for j, value in enumerate(columns):
            if value < 0 or value >= 1 << output_digits:
                raise ValueError(f"Column value {value} does not fit in {output_digits} digits")
            for i in range(num_rows):
                bits[i, j] = (value >> (output_digits - 1 - i)) & 1
        return cls(bits)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        return self._bits.shape[0]

    @property
    def num_cols(self) -> int:
        return self._bits.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._bits

    def __getitem__(self, index: tuple[int, int]) -> int:
        return int(self._bits[index])

    def rows(self) -> list[list[int]]:
        return self._bits.tolist()

    def is_lower_unit_triangular(self) -> bool:
        """Ones on the main diagonal, zeros above it (non-square allowed)."""
        if self.num_rows < self.num_cols:
            return False
        upper = np.triu(self._bits[: self.num_cols], k=1)
        diagonal = np.diagonal(self._bits)
        return not upper.any() and bool(np.all(diagonal == 1))

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __matmul__(self, other: GeneratingMatrix) -> GeneratingMatrix:
        """Matrix product over GF(2)."""
        if not isinstance(other, GeneratingMatrix):
            return NotImplemented
        if self.num_cols != other.num_rows:
            raise ValueError(f"Cannot multiply {self.shape} by {other.shape}")
        product = self._bits.astype(np.int64) @ other._bits.astype(np.int64)
        return GeneratingMatrix(product % 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratingMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._bits, other._bits))

    def __hash__(self) -> int:
        return hash((self.shape, self._bits.tobytes()))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_to_columns_reverse(self, output_digits: int = OUTPUT_DIGITS) -> str:
        """
        One integer per column, separated by spaces.

        Row ``i`` becomes bit ``output_digits - 1 - i`` of its column's
        integer, so the first row is the most significant digit.  Rows
        past ``output_digits`` are not representable and are dropped.
        """
        digits = min(self.num_rows, output_digits)
        weights = [1 << (output_digits - 1 - i) for i in range(digits)]
        columns = []
        for j in range(self.num_cols):
            columns.append(sum(w for w, bit in zip(weights, self._bits[:digits, j]) if bit))
        return " ".join(str(c) for c in columns)

    def __repr__(self) -> str:
        return f"GeneratingMatrix({self.rows()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(b) for b in row) for row in self.rows())
