from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.interfaces import AbstractDigitalNet


@dataclass(frozen=True, slots=True)
class LMSSizeParameter:
    """Base net to scramble and number of rows of the scrambled matrices."""
    base_net: Optional[AbstractDigitalNet] = None
    num_rows: int = 0
