from __future__ import annotations

from typing import Sequence

from core.generating_matrix import GeneratingMatrix
from core.output_style import OutputStyle


def format_extra(
    matrices: Sequence[GeneratingMatrix],
    values: Sequence[int],
    modulus: int,
    output_style: OutputStyle,
    interlacing_factor: int,
) -> str:
    """Modulus and generating vector (terminal style only)."""
    if output_style != OutputStyle.TERMINAL:
        return ""
    lines = [f"{modulus}  // Modulus"]
    lines.extend(
        f"{value}  // Generating polynomial of coordinate {coord + 1}"
        for coord, value in enumerate(values)
    )
    return "".join(line + "\n" for line in lines)
