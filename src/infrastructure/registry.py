"""
Construction traits and the registry that maps each NetConstruction to them.

A construction method is fully described by one ``ConstructionTraits``
record.  Its sizing functions (``num_rows``, ``num_cols``) derive the
matrix shape from the size parameter alone, so every coordinate of a
net shares it.  ``build_matrix`` must raise ``NetConstructionError``
for any value ``validate`` reports errors on, and may use the
coordinate index.  ``is_sequence_viewable`` is a fixed property of the
method, not of any particular net.  ``format_extra`` appends
method-specific text after the generic rendering and returns an empty
string when it has nothing to add.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar, TYPE_CHECKING

from core.net_construction import NetConstruction

if TYPE_CHECKING:
    import numpy as np

    from core.generating_matrix import GeneratingMatrix
    from core.interfaces import AbstractDigitalNet
    from core.output_style import OutputStyle
    from core.validation_result import ValidationResult

V = TypeVar("V")
S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class ConstructionTraits(Generic[V, S]):
    """Bundle of functions that know how to handle one construction method.

    Generic over the generating-value type ``V`` (e.g. a tuple of
    direction numbers) and the size-parameter type ``S`` (e.g. a
    polynomial modulus).  The registry erases both parameters so
    callers after ``get_traits()`` operate on ``Any``.
    """
    num_rows: Callable[[S], int]
    num_cols: Callable[[S], int]
    build_matrix: Callable[[V, S, int], "GeneratingMatrix"]
    validate: Callable[[V, S, int], "ValidationResult"]
    is_sequence_viewable: bool
    format_extra: Callable[
        [Sequence["GeneratingMatrix"], Sequence[V], S, "OutputStyle", int], str
    ]
    default_size_parameter: Callable[[], S]
    random_value: Callable[[S, int, "np.random.Generator"], V]
    enumerate_values: Callable[[S, int], Iterator[V]]
    size_from_json: Callable[[dict, Callable[[str], "AbstractDigitalNet"]], S]
    value_from_json: Callable[[Any], V]
    value_to_json: Callable[[V], Any]


_traits: dict[NetConstruction, ConstructionTraits[Any, Any]] = {}


def register(construction: NetConstruction, traits: ConstructionTraits[Any, Any]) -> None:
    """Register the traits of a construction method.  Raises on duplicates."""
    if construction in _traits:
        raise ValueError(f"Traits already registered for {construction!r}")
    _traits[construction] = traits


def get_traits(construction: NetConstruction) -> ConstructionTraits[Any, Any]:
    """Look up the traits of a construction method.  Raises on missing."""
    try:
        return _traits[construction]
    except KeyError:
        raise ValueError(
            f"No traits registered for {construction!r}. "
            f"Did you forget to add a register() call in registrations.py?"
        ) from None


def registered_constructions() -> list[NetConstruction]:
    return list(_traits)
