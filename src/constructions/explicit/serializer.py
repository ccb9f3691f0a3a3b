"""
JSON helpers for explicit nets.  Matrices travel as lists of rows.
"""
from __future__ import annotations

from typing import Any, Callable

from core.generating_matrix import GeneratingMatrix


def size_from_json(fields: dict, resolve_net: Callable[[str], Any]) -> tuple[int, int]:
    return int(fields.get("num_rows", 0)), int(fields.get("num_cols", 0))


def value_from_json(raw: Any) -> GeneratingMatrix:
    return GeneratingMatrix.from_rows(raw)


def value_to_json(value: GeneratingMatrix) -> list[list[int]]:
    return value.rows()
