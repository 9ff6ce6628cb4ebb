"""CSV serialisation of placeholder measure positions."""

from __future__ import annotations

import csv
import io
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from pmxl.models import MeasurePosition

logger = logging.getLogger(__name__)

CSV_HEADER: Final[list[str]] = [
    "measure_number",
    "part_id",
    "top",
    "left",
    "width",
    "height",
]
DEFAULT_SUFFIX: Final[str] = "_measures.csv"


def _position_row(position: MeasurePosition) -> list[str | int]:
    return [
        position.number,
        position.part_id,
        position.top,
        position.left,
        position.width,
        position.height,
    ]


def format_positions_as_csv(positions: Iterable[MeasurePosition]) -> str:
    """Render positions as CSV text with a header row, one row per position."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(_position_row(position) for position in positions)
    return buffer.getvalue()


def default_output_path(input_path: str | Path) -> str:
    """
    Derive the CSV destination from the input path.

    The last extension is dropped and ``_measures.csv`` appended, keeping the
    path as given: ``./scores/song.musicxml`` becomes ``./scores/song_measures.csv``.
    """
    stem, _ = os.path.splitext(os.fspath(input_path))
    return f"{stem}{DEFAULT_SUFFIX}"


def write_positions_csv(positions: Iterable[MeasurePosition], output_path: str | Path) -> None:
    """
    Write positions to ``output_path``, replacing any existing file.

    Raises:
        OSError: If the output file cannot be written.
    """
    content = format_positions_as_csv(positions)
    with open(output_path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    logger.debug("Wrote measure positions to %s", output_path)
