"""
Base error hierarchy for digital net construction.

All construction-method-specific errors should inherit from
``NetError`` so callers can catch a single base type.
"""
from __future__ import annotations


class NetError(Exception):
    """Base class for all digital net errors."""


class NetConstructionError(NetError, ValueError):
    """Raised when a generating value is incompatible with its size parameter."""


class NetCapacityError(NetError, OverflowError):
    """Raised when the number of points exceeds the supported maximum."""
