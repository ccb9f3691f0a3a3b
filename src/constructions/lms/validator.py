"""
Left matrix scramble validation.

The scrambling matrix of a coordinate must be ``num_rows x base rows``,
lower triangular with a unit diagonal, and the coordinate must exist
in the base net.
"""
from __future__ import annotations

from core.generating_matrix import GeneratingMatrix
from core.validation_result import ValidationResult
from constructions.lms.size_parameter import LMSSizeParameter


def validate(value: GeneratingMatrix, size: LMSSizeParameter, coord: int) -> ValidationResult:
    errors: list[str] = []
    base = size.base_net

    if base is None:
        errors.append("Left matrix scramble requires a base net.")
        return ValidationResult(errors=errors)

    if size.num_rows < base.num_rows:
        errors.append(
            f"Scrambled matrices need at least {base.num_rows} rows, got {size.num_rows}."
        )
    if not 0 <= coord < base.dimension:
        errors.append(
            f"Coordinate {coord} does not exist in a base net of dimension {base.dimension}."
        )
    if not isinstance(value, GeneratingMatrix):
        errors.append(f"Scrambling matrix must be a GeneratingMatrix, got {type(value).__name__}.")
        return ValidationResult(errors=errors)

    expected = (size.num_rows, base.num_rows)
    if value.shape != expected:
        errors.append(f"Scrambling matrix has shape {value.shape}, expected {expected}.")
    elif not value.is_lower_unit_triangular():
        errors.append("Scrambling matrix must be lower triangular with a unit diagonal.")

    return ValidationResult(errors=errors)
