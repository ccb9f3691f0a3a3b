"""
JSON helpers for left matrix scrambles.

The base net is referenced by id and resolved by the caller; the
scrambling matrices travel as lists of rows.
"""
from __future__ import annotations

from typing import Any, Callable

from core.generating_matrix import GeneratingMatrix
from core.interfaces import AbstractDigitalNet
from constructions.lms.size_parameter import LMSSizeParameter


def size_from_json(
    fields: dict,
    resolve_net: Callable[[str], AbstractDigitalNet],
) -> LMSSizeParameter:
    base_id = fields.get("base_net")
    if base_id is None:
        return LMSSizeParameter()
    base = resolve_net(base_id)
    return LMSSizeParameter(base, int(fields.get("num_rows", base.num_rows)))


def value_from_json(raw: Any) -> GeneratingMatrix:
    return GeneratingMatrix.from_rows(raw)


def value_to_json(value: GeneratingMatrix) -> list[list[int]]:
    return value.rows()
