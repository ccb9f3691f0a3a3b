"""
JSON helpers for polynomial lattice rules.

Polynomials travel as integers (bit ``i`` is the coefficient of ``x^i``).
"""
from __future__ import annotations

from typing import Any, Callable


def size_from_json(fields: dict, resolve_net: Callable[[str], Any]) -> int:
    return int(fields.get("modulus", 1))


def value_from_json(raw: Any) -> int:
    return int(raw)


def value_to_json(value: int) -> int:
    return value
