"""
Polynomial lattice rule generating-value validation.

Layer 1 (errors) checks the degrees.  Layer 2 (warnings) flags a
generating polynomial sharing a factor with the modulus: the matrix is
still well defined but the rule loses points to repeated coordinates.
"""
from __future__ import annotations

from core import gf2_polynomial
from core.validation_result import ValidationResult


def validate(value: int, modulus: int, coord: int) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    deg_modulus = gf2_polynomial.degree(modulus)
    if modulus < 0 or deg_modulus < 1:
        errors.append(f"Modulus {modulus} must have degree at least 1.")
    if value < 0:
        errors.append(f"Generating polynomial {value} must be non-negative.")

    if errors:
        return ValidationResult(errors=errors)

    if gf2_polynomial.degree(value) >= deg_modulus:
        errors.append(
            f"Generating polynomial {value} has degree {gf2_polynomial.degree(value)}, "
            f"must be below the modulus degree {deg_modulus}."
        )
    elif gf2_polynomial.gcd(modulus, value) != 1:
        warnings.append(
            f"Generating polynomial {value} is not coprime with the modulus {modulus}."
        )

    return ValidationResult(errors=errors, warnings=warnings)
