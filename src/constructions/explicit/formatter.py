from __future__ import annotations

from typing import Sequence

from core.generating_matrix import GeneratingMatrix
from core.output_style import OutputStyle


def format_extra(
    matrices: Sequence[GeneratingMatrix],
    values: Sequence[GeneratingMatrix],
    shape: tuple[int, int],
    output_style: OutputStyle,
    interlacing_factor: int,
) -> str:
    # The generic rendering already shows every matrix.
    return ""
