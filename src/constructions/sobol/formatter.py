from __future__ import annotations

from typing import Sequence

from core.generating_matrix import GeneratingMatrix
from core.output_style import OutputStyle


def format_extra(
    matrices: Sequence[GeneratingMatrix],
    values: Sequence[tuple[int, ...]],
    num_cols: int,
    output_style: OutputStyle,
    interlacing_factor: int,
) -> str:
    """Direction numbers of every coordinate past the first (terminal style only)."""
    if output_style != OutputStyle.TERMINAL:
        return ""
    return "".join(
        f"{' '.join(str(m) for m in value)}  // Direction numbers of coordinate {coord + 1}\n"
        for coord, value in enumerate(values)
        if coord > 0
    )
