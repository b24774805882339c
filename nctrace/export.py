"""
Output helpers for decoded programs and position traces.

- format_program: human-readable dump of a Program (decode mode)
- write_trace_csv: delimited text with a header row, unknown axes left empty
- save_trace_npy: NumPy array form of the trace (unknown axes as NaN)
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import numpy as np

from nctrace import config
from nctrace.program.parser import Program
from nctrace.program.positions import PositionRow, trace_to_array

logger = logging.getLogger(__name__)

__all__ = ["format_program", "write_trace_csv", "save_trace_npy"]


def format_program(program: Program) -> str:
    """
    Render a Program as one entry per line with its instructions indented below.

    Example::

        Line 0 N10 (source line 1)
            G(1)
            X(1.0)
    """
    out = [f"Program ({len(program)} lines)"]
    for i, line in enumerate(program):
        header = f"Line {i}"
        if line.number is not None:
            header += f" {config.LINE_NUMBER_CODE}{line.number}"
        if line.source_index is not None:
            header += f" (source line {line.source_index + 1})"
        out.append(header)
        for instruction in line.instructions:
            out.append(f"    {instruction.code.name}({instruction.value!r})")
    return "\n".join(out) + "\n"


def _csv_field(value: float | None) -> str:
    return "" if value is None else repr(value)


def write_trace_csv(
    rows: Sequence[PositionRow], stream: TextIO, delimiter: str = config.CSV_DELIMITER
) -> None:
    """
    Write a position trace as CSV.

    Args:
        rows: Trace rows from PositionTracker
        stream: Text stream opened with newline=""
        delimiter: Field delimiter
    """
    writer = csv.writer(stream, delimiter=delimiter, lineterminator="\n")
    writer.writerow(config.TRACE_COLUMNS)
    for row in rows:
        writer.writerow([row.index, _csv_field(row.x), _csv_field(row.y), _csv_field(row.z)])
    logger.debug(f"Wrote {len(rows)} trace rows as CSV")


def save_trace_npy(rows: Sequence[PositionRow], path: str | Path) -> None:
    """Save the trace as an (n, 4) ``.npy`` array (index, x, y, z; NaN = unknown)."""
    path = Path(path)
    np.save(path, trace_to_array(rows))
    logger.info(f"Saved {len(rows)} trace rows to {path}")
