from __future__ import annotations

from typing import Sequence

from core.generating_matrix import GeneratingMatrix
from core.output_style import OutputStyle
from constructions.lms.size_parameter import LMSSizeParameter


def format_extra(
    matrices: Sequence[GeneratingMatrix],
    values: Sequence[GeneratingMatrix],
    size: LMSSizeParameter,
    output_style: OutputStyle,
    interlacing_factor: int,
) -> str:
    if output_style != OutputStyle.TERMINAL or size.base_net is None:
        return ""
    return f"{size.base_net.dimension}  // Dimension of the scrambled base net\n"
