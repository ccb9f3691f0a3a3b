from __future__ import annotations

from core.generating_matrix import GeneratingMatrix
from core.validation_result import ValidationResult


def validate(value: GeneratingMatrix, shape: tuple[int, int], coord: int) -> ValidationResult:
    """An explicit generating value must be a matrix of exactly ``shape``."""
    errors: list[str] = []
    num_rows, num_cols = shape

    if num_rows < 0 or num_cols < 0:
        errors.append(f"Matrix shape {shape} must be non-negative.")
    elif not isinstance(value, GeneratingMatrix):
        errors.append(f"Generating value must be a GeneratingMatrix, got {type(value).__name__}.")
    elif value.shape != (num_rows, num_cols):
        errors.append(
            f"Matrix of coordinate {coord} has shape {value.shape}, expected {(num_rows, num_cols)}."
        )

    return ValidationResult(errors=errors)
