"""
DigitalNet — a net built by one construction method.

A construction method is defined by two variables:

- the *size parameter*, shared by every coordinate and never optimized
  (number of columns for Sobol, modulus for polynomial lattice rules,
  matrix shape for explicit nets, base net for left matrix scrambles);
- one *generating value* per coordinate, the quantity explored by
  search code (direction numbers, generating polynomial, the matrix
  itself, the scrambling matrix).

The method-specific functions live in a ``ConstructionTraits`` bundle
resolved from the registry.  ``DigitalNet`` only sequences the calls:
it never validates or builds a matrix on its own.

Nets are immutable.  ``append_new_coordinate`` returns a new net whose
first ``d`` matrices and values are the very same objects as the
receiver's, so extending costs exactly one matrix build.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Iterable, Optional, TypeVar

from core.generating_matrix import GeneratingMatrix
from core.interfaces import AbstractDigitalNet
from core.net_construction import NetConstruction
from core.output_style import OutputStyle

if TYPE_CHECKING:
    from infrastructure.registry import ConstructionTraits

logger = logging.getLogger(__name__)

V = TypeVar("V")
S = TypeVar("S")


def _traits_for(construction: NetConstruction) -> ConstructionTraits[Any, Any]:
    # Imported here: the registrations import every construction package,
    # and those packages import core.
    from infrastructure.registry import get_traits
    import infrastructure.registrations  # noqa: F401  (side-effect: populates the registry)
    return get_traits(construction)


class DigitalNet(AbstractDigitalNet, Generic[V, S]):
    """
    Concrete net parameterized by a :class:`NetConstruction`.

    Usage::

        net = DigitalNet(NetConstruction.SOBOL, 10, [(), (1,), (1, 3)])
        bigger = net.append_new_coordinate((1, 3, 1))   # net is unchanged

    ``DigitalNet(construction)`` with no size parameter and no values is
    a dimension-0 placeholder, used as the seed of a growth loop.
    """

    __slots__ = ("_construction", "_traits", "_size_parameter", "_generating_values")

    def __init__(
        self,
        construction: NetConstruction,
        size_parameter: Optional[S] = None,
        generating_values: Iterable[V] = (),
        dimension: Optional[int] = None,
    ):
        traits = _traits_for(construction)
        if size_parameter is None:
            size_parameter = traits.default_size_parameter()
        values = tuple(generating_values)
        if dimension is not None and dimension != len(values):
            raise ValueError(
                f"Dimension {dimension} does not match the {len(values)} generating values given"
            )

        # Coordinates are built in order: some methods use the index.
        matrices = [
            traits.build_matrix(value, size_parameter, coord)
            for coord, value in enumerate(values)
        ]

        super().__init__(
            traits.num_rows(size_parameter),
            traits.num_cols(size_parameter),
            matrices,
        )
        self._construction: NetConstruction = construction
        self._traits: ConstructionTraits[V, S] = traits
        self._size_parameter: S = size_parameter
        self._generating_values: tuple[V, ...] = values
        logger.debug("Built %s net of dimension %d", construction.value, len(values))

    @classmethod
    def _from_shared(
        cls,
        construction: NetConstruction,
        traits: ConstructionTraits[V, S],
        size_parameter: S,
        generating_values: tuple[V, ...],
        generating_matrices: tuple[GeneratingMatrix, ...],
    ) -> DigitalNet[V, S]:
        """Assemble a net from already-built parts without recomputing them."""
        net = cls.__new__(cls)
        AbstractDigitalNet.__init__(
            net,
            traits.num_rows(size_parameter),
            traits.num_cols(size_parameter),
            generating_matrices,
        )
        net._construction = construction
        net._traits = traits
        net._size_parameter = size_parameter
        net._generating_values = generating_values
        return net

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def construction(self) -> NetConstruction:
        return self._construction

    @property
    def traits(self) -> ConstructionTraits[V, S]:
        return self._traits

    @property
    def size_parameter(self) -> S:
        return self._size_parameter

    @property
    def generating_values(self) -> tuple[V, ...]:
        return self._generating_values

    def generating_value(self, coord: int) -> V:
        if not 0 <= coord < len(self._generating_values):
            raise IndexError(
                f"Coordinate {coord} out of range for a net of dimension {self.dimension}"
            )
        return self._generating_values[coord]

    # ------------------------------------------------------------------
    # Extension
    # ------------------------------------------------------------------

    def append_new_coordinate(self, new_value: V) -> DigitalNet[V, S]:
        """
        Return a net with one more coordinate generated by ``new_value``.

        The receiver is left untouched and shares its matrices and values
        with the result.  Raises ``NetConstructionError`` if the value is
        illegal for this net's size parameter.
        """
        coord = self.dimension
        new_matrix = self._traits.build_matrix(new_value, self._size_parameter, coord)
        extended = self._from_shared(
            self._construction,
            self._traits,
            self._size_parameter,
            self._generating_values + (new_value,),
            self._generating_matrices + (new_matrix,),
        )
        logger.debug("Extended %s net to dimension %d", self._construction.value, coord + 1)
        return extended

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, output_style: OutputStyle = OutputStyle.TERMINAL, interlacing_factor: int = 1) -> str:
        if interlacing_factor < 1:
            raise ValueError(f"Interlacing factor must be positive, got {interlacing_factor}")

        if output_style == OutputStyle.TERMINAL:
            lines = [
                f"{self.num_columns}  // Number of columns",
                f"{self.num_rows}  // Number of rows",
                f"{self.num_points}  // Number of points",
                f"{self.dimension // interlacing_factor}  // Dimension of points",
            ]
            if interlacing_factor > 1:
                lines.append(f"{interlacing_factor}  // Interlacing factor")
                lines.append(f"{self.dimension}  // Number of components = interlacing factor x dimension")
            res = "".join(line + "\n" for line in lines)

        elif output_style == OutputStyle.NET:
            dim = self.dimension
            k = self.num_columns
            lines = [
                "# Parameters for a digital net in base 2",
                f"{dim}    # {dim} dimensions",
            ]
            if interlacing_factor > 1:
                lines.append(f"{interlacing_factor}  // Interlacing factor")
                lines.append(f"{dim}  // Number of components = interlacing factor x dimension")
            lines.append(f"{k}   # k = {k},  n = 2^{k} = {self.num_points} points")
            lines.append("31   # r = 31 binary output digits")
            if interlacing_factor == 1:
                lines.append("# Columns of gen. matrices C_1,...,C_s, one matrix per line:")
            else:
                lines.append("# Columns of gen. matrices C_1,...,C_{ds}, one matrix per line:")
            lines.extend(m.format_to_columns_reverse() for m in self._generating_matrices)
            res = "\n".join(lines)

        else:
            raise ValueError(f"Unsupported output style: {output_style!r}")

        res += self._traits.format_extra(
            self._generating_matrices,
            self._generating_values,
            self._size_parameter,
            output_style,
            interlacing_factor,
        )
        return res

    def is_sequence_viewable(self) -> bool:
        return self._traits.is_sequence_viewable

    def __repr__(self) -> str:
        return (
            f"DigitalNet({self._construction.value}, dimension={self.dimension}, "
            f"rows={self.num_rows}, columns={self.num_columns})"
        )
