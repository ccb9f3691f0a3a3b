"""
JSON helpers for Sobol size parameters and generating values.
"""
from __future__ import annotations

from typing import Any, Callable


def size_from_json(fields: dict, resolve_net: Callable[[str], Any]) -> int:
    return int(fields.get("num_columns", 0))


def value_from_json(raw: Any) -> tuple[int, ...]:
    return tuple(int(m) for m in raw)


def value_to_json(value: tuple[int, ...]) -> list[int]:
    return list(value)
