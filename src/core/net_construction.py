from __future__ import annotations

from enum import Enum


class NetConstruction(Enum):
    """Determines which construction traits build the generating matrices."""
    SOBOL = "sobol"
    POLYNOMIAL = "polynomial"
    EXPLICIT = "explicit"
    LMS = "lms"
