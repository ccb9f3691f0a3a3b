from __future__ import annotations

from dataclasses import dataclass, field

from core.errors import NetConstructionError


@dataclass(slots=True)
class ValidationResult:
    """
    Outcome of checking a generating value against a size parameter.

    ``errors`` make the pair illegal: building a matrix from it raises
    :class:`NetConstructionError`.  ``warnings`` flag legal but poor
    choices (e.g. a polynomial sharing a factor with the modulus) and
    never block construction.
    """
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def raise_if_invalid(self) -> None:
        """Raise ``NetConstructionError`` carrying every error message."""
        if self.errors:
            raise NetConstructionError("; ".join(self.errors))

    def to_json(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }

    def __bool__(self) -> bool:
        return self.is_valid
