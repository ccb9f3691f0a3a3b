"""
Net I/O — write a net's text rendering to a file, read a net file back.

This is a functional module.  NetService delegates here for the actual
file <-> net conversion.

Save flow:
    net.format(style, interlacing_factor) + "\\n" → file

Load flow (net-file style only):
    file → skip "#" comment lines → strip trailing comments →
    dimension, k, r, then one line of reversed column integers per
    coordinate → explicit DigitalNet
"""
from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import Optional

from core.digital_net import DigitalNet
from core.errors import NetConstructionError
from core.generating_matrix import GeneratingMatrix
from core.interfaces import AbstractDigitalNet
from core.net_construction import NetConstruction
from core.output_style import OutputStyle

import infrastructure.registrations  # noqa: F401  (side-effect: populates the registry)

logger = logging.getLogger(__name__)

COMMENT_INDICATOR = "#"


# ------------------------------------------------------------------
# File helpers (plain text or gzip)
# ------------------------------------------------------------------

def _is_gz(path: Path) -> bool:
    return path.suffix == ".gz"


def _read_text(path: Path) -> str:
    if _is_gz(path):
        with gzip.open(path, "rt", encoding="utf-8") as f:
            return f.read()
    return path.read_text(encoding="utf-8")


def _write_text(path: Path, content: str) -> None:
    if _is_gz(path):
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write(content)
    else:
        path.write_text(content, encoding="utf-8")


# ------------------------------------------------------------------
# Save
# ------------------------------------------------------------------

def save_net(
    net: AbstractDigitalNet,
    file_path: str | Path,
    output_style: OutputStyle = OutputStyle.NET,
    interlacing_factor: int = 1,
) -> None:
    """Write ``net.format(...)`` to disk, terminated by a newline."""
    path = Path(file_path)
    text = net.format(output_style, interlacing_factor)
    _write_text(path, text if text.endswith("\n") else text + "\n")
    logger.info("Saved net of dimension %d to %s", net.dimension, path)


# ------------------------------------------------------------------
# Load
# ------------------------------------------------------------------

def _data_fields(text: str) -> list[list[str]]:
    """Whitespace-split fields of every data line, trailing comments removed."""
    rows: list[list[str]] = []
    for raw in text.splitlines():
        content = raw.strip()
        if not content or content.startswith(COMMENT_INDICATOR):
            continue
        for marker in (COMMENT_INDICATOR, "//"):
            content = content.split(marker, 1)[0]
        rows.append(content.split())
    return rows


def _header_int(rows: list[list[str]], position: int, name: str) -> int:
    try:
        return int(rows[position][0])
    except (IndexError, ValueError):
        raise NetConstructionError(f"Net file is missing the {name} header line") from None


def parse_net(text: str, num_rows: Optional[int] = None) -> DigitalNet:
    """
    Parse a net-file rendering into an explicit net.

    ``num_rows`` defaults to the declared number of output digits ``r``;
    the matrices of a net with fewer rows come back padded with zero rows.
    Interlaced renderings are not accepted.
    """
    if "// Interlacing factor" in text:
        raise NetConstructionError("Interlaced net files cannot be loaded")
    rows = _data_fields(text)
    dimension = _header_int(rows, 0, "dimension")
    num_cols = _header_int(rows, 1, "number of columns")
    output_digits = _header_int(rows, 2, "output digits")
    matrix_rows = rows[3:]
    if num_cols == 0 and not matrix_rows:
        # Matrices without columns render as empty lines.
        matrix_rows = [[] for _ in range(dimension)]

    if len(matrix_rows) != dimension:
        raise NetConstructionError(
            f"Net file declares {dimension} dimensions but holds {len(matrix_rows)} matrices"
        )
    if num_rows is None:
        num_rows = output_digits

    matrices: list[GeneratingMatrix] = []
    for coord, fields in enumerate(matrix_rows):
        if len(fields) != num_cols:
            raise NetConstructionError(
                f"Matrix {coord + 1} has {len(fields)} columns, expected {num_cols}"
            )
        try:
            columns = [int(f) for f in fields]
            matrices.append(
                GeneratingMatrix.from_columns_reverse(columns, num_rows, output_digits)
            )
        except ValueError as exc:
            raise NetConstructionError(f"Matrix {coord + 1}: {exc}") from exc

    return DigitalNet(NetConstruction.EXPLICIT, (num_rows, num_cols), matrices)


def load_net(file_path: str | Path, num_rows: Optional[int] = None) -> DigitalNet:
    """Read a net file (plain or gzip) and return an explicit net."""
    path = Path(file_path)
    net = parse_net(_read_text(path), num_rows)
    logger.info("Loaded net of dimension %d from %s", net.dimension, path)
    return net
