"""
NetService — the bridge between the API layer and the core domain.

Manages:
- Named nets (keyed by a net_id string)
- JSON conversion of size parameters and generating values through the
  construction traits
- Growth: ``extend`` stores the extended net under a new id and leaves
  the original in place, so several candidates can share one parent

Nets are immutable; nothing here edits a stored net.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from core import DigitalNet, NetCapacityError, NetConstruction, NetConstructionError, OutputStyle
from infrastructure import ConstructionTraits, get_traits, load_net, save_net

logger = logging.getLogger(__name__)


def _decode_value(net_traits: ConstructionTraits, raw: Any) -> Any:
    """Decode a JSON generating value, reporting malformed input as a construction error."""
    try:
        return net_traits.value_from_json(raw)
    except (TypeError, ValueError) as exc:
        raise NetConstructionError(f"Malformed generating value {raw!r}: {exc}") from exc


class NetService:
    """
    Facade that the API layer calls. One instance per application.
    """

    def __init__(self, seed: Optional[int] = None):
        self._nets: dict[str, DigitalNet] = {}
        self._rng: np.random.Generator = np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Net lifecycle
    # ------------------------------------------------------------------

    def create(
        self,
        net_id: str,
        construction: NetConstruction,
        size: Optional[dict] = None,
        values: Optional[list[Any]] = None,
    ) -> dict:
        """Build a net from JSON size fields and values and store it.

        With no *size* the construction's default size parameter is
        used; with no *values* the net is a dimension-0 placeholder.
        """
        traits = get_traits(construction)
        size_parameter = None
        if size is not None:
            try:
                size_parameter = traits.size_from_json(size, self.get_net)
            except (TypeError, ValueError) as exc:
                raise NetConstructionError(f"Malformed size parameter {size!r}: {exc}") from exc
        gen_values = [_decode_value(traits, v) for v in values or []]
        net = DigitalNet(construction, size_parameter, gen_values)
        logger.info("Created %s net %s of dimension %d", construction.value, net_id, net.dimension)
        return self._store(net_id, net)

    def get_net(self, net_id: str) -> DigitalNet:
        return self._nets[net_id]

    def summary(self, net_id: str) -> dict:
        return self._net_summary(net_id, self._nets[net_id])

    def list_nets(self) -> list[dict]:
        return [
            self._net_summary(nid, net)
            for nid, net in self._nets.items()
        ]

    def close_net(self, net_id: str) -> None:
        """Forget a net.  Nets extended from it keep their shared data."""
        self._nets.pop(net_id, None)
        logger.info("Closed net %s", net_id)

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def extend(self, net_id: str, new_id: str, value: Any) -> dict:
        """Store ``net_id`` extended by one coordinate under ``new_id``."""
        net = self._nets[net_id]
        gen_value = _decode_value(net.traits, value)
        extended = net.append_new_coordinate(gen_value)
        logger.info("Extended net %s into %s (dimension %d)", net_id, new_id, extended.dimension)
        return self._store(new_id, extended)

    def extend_random(self, net_id: str, new_id: str) -> dict:
        """Like :meth:`extend` with a value sampled by the construction traits."""
        net = self._nets[net_id]
        gen_value = net.traits.random_value(net.size_parameter, net.dimension, self._rng)
        return self.extend(net_id, new_id, net.traits.value_to_json(gen_value))

    def validate_value(self, net_id: str, value: Any) -> dict:
        """Check a candidate value for the next coordinate without building it."""
        net = self._nets[net_id]
        gen_value = _decode_value(net.traits, value)
        vr = net.traits.validate(gen_value, net.size_parameter, net.dimension)
        return vr.to_json()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def get_matrix(self, net_id: str, coord: int) -> dict:
        net = self._nets[net_id]
        matrix = net.generating_matrix(coord)
        return {
            "coordinate": coord,
            "generating_value": net.traits.value_to_json(net.generating_value(coord)),
            "rows": matrix.rows(),
        }

    def format(
        self,
        net_id: str,
        output_style: OutputStyle = OutputStyle.TERMINAL,
        interlacing_factor: int = 1,
    ) -> str:
        return self._nets[net_id].format(output_style, interlacing_factor)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def save(
        self,
        net_id: str,
        file_path: str,
        output_style: OutputStyle = OutputStyle.NET,
        interlacing_factor: int = 1,
    ) -> dict:
        save_net(self._nets[net_id], file_path, output_style, interlacing_factor)
        return {"net_id": net_id, "file_path": file_path, "saved": True}

    def load(self, net_id: str, file_path: str, num_rows: Optional[int] = None) -> dict:
        """Load a net file as an explicit net."""
        logger.info("Loading net %s from %s", net_id, file_path)
        net = load_net(file_path, num_rows)
        return self._store(net_id, net)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _store(self, net_id: str, net: DigitalNet) -> dict:
        """Register a net under a fresh id and return its summary."""
        if net_id in self._nets:
            raise ValueError(f"Net id already in use: {net_id}")
        summary = self._net_summary(net_id, net)
        self._nets[net_id] = net
        return summary

    def _net_summary(self, net_id: str, net: DigitalNet) -> dict:
        try:
            num_points: Optional[int] = net.num_points
        except NetCapacityError:
            # Nets past MAX_NUM_COLUMNS are legal; only their point count is not.
            num_points = None
        return {
            "net_id": net_id,
            "construction": net.construction.value,
            "dimension": net.dimension,
            "num_rows": net.num_rows,
            "num_columns": net.num_columns,
            "num_points": num_points,
            "sequence_viewable": net.is_sequence_viewable(),
            "generating_values": [net.traits.value_to_json(v) for v in net.generating_values],
        }
