"""
Sobol generating-value validation.

A generating value is the tuple of initial direction numbers
``(m_1, ..., m_s)`` where ``s`` is the degree of the coordinate's
primitive polynomial.  Each ``m_k`` must be odd and below ``2^k``.
"""
from __future__ import annotations

from core.validation_result import ValidationResult
from constructions.sobol.direction_numbers import degree_for


def validate(value: tuple[int, ...], num_cols: int, coord: int) -> ValidationResult:
    errors: list[str] = []

    if num_cols < 0:
        errors.append(f"Number of columns must be non-negative, got {num_cols}.")
    if coord < 0:
        errors.append(f"Coordinate must be non-negative, got {coord}.")
        return ValidationResult(errors=errors)

    expected = degree_for(coord)
    if len(value) != expected:
        errors.append(
            f"Coordinate {coord} takes {expected} direction numbers, got {len(value)}."
        )

    for k, m in enumerate(value, start=1):
        if m % 2 == 0 or not 0 < m < (1 << k):
            errors.append(
                f"Direction number m_{k} = {m} must be odd and lie in (0, 2^{k})."
            )

    return ValidationResult(errors=errors)
