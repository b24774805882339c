"""
Tool position trace for decoded G-code programs.

Lines usually set only some of X/Y/Z. The tracker carries the last value of
each axis forward so every line gets the full position known at that point.
An axis that has never been set stays unknown (None); it is never assumed to
be zero.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

import numpy as np

from nctrace.config import TRACE
from nctrace.program.instructions import AXIS_CODES
from nctrace.program.parser import Line, Program

logger = logging.getLogger(__name__)

__all__ = ["AxisState", "PositionRow", "PositionTracker", "trace_to_array"]

_AXES = ("x", "y", "z")


@dataclass(frozen=True)
class AxisState:
    """Last known X/Y/Z values; None means never set"""

    x: float | None = None
    y: float | None = None
    z: float | None = None

    def apply(self, line: Line) -> "AxisState":
        """Return the state after a line's axis words (last word per axis wins)."""
        updates: dict[str, float] = {}
        for instruction in line.instructions:
            if instruction.code in AXIS_CODES:
                updates[instruction.code.value.lower()] = float(instruction.value)
        if not updates:
            return self
        return replace(self, **updates)

    @classmethod
    def from_line(cls, line: Line) -> "AxisState":
        return cls().apply(line)


@dataclass(frozen=True)
class PositionRow:
    """Position snapshot after one line"""

    index: int
    x: float | None = None
    y: float | None = None
    z: float | None = None

    def is_known(self, axis: str) -> bool:
        name = axis.lower()
        if name not in _AXES:
            raise ValueError(f"Unknown axis: {axis!r} (expected one of x, y, z)")
        return getattr(self, name) is not None

    def as_tuple(self) -> tuple[int, float | None, float | None, float | None]:
        return (self.index, self.x, self.y, self.z)


class PositionTracker:
    """
    Folds a program's lines into a position trace.

    Each row is emitted after its line's axis words have been applied. By
    default tracking starts with every axis unknown; pass ``seed`` to start
    from a known position instead.
    """

    def __init__(self, seed: AxisState | None = None):
        """
        Args:
            seed: Initial axis state (defaults to all axes unknown)
        """
        self.seed = seed if seed is not None else AxisState()
        self.state = self.seed
        self.rows_emitted = 0

    @classmethod
    def seeded_from_first_line(cls, program: Program) -> "PositionTracker":
        """Tracker whose initial state holds the first line's own axis values."""
        if not program.lines:
            return cls()
        return cls(seed=AxisState.from_line(program.lines[0]))

    def reset(self) -> None:
        """Return to the seed state and restart row numbering."""
        self.state = self.seed
        self.rows_emitted = 0

    def iter_rows(self, lines: Iterable[Line]) -> Iterator[PositionRow]:
        """
        Yield one row per line, continuing from the current state.

        Can be called repeatedly on consecutive chunks of a program; the axis
        state and the row index carry over between calls.
        """
        for line in lines:
            self.state = self.state.apply(line)
            row = PositionRow(self.rows_emitted, self.state.x, self.state.y, self.state.z)
            self.rows_emitted += 1
            logger.log(TRACE, "position_row index=%d x=%s y=%s z=%s", *row.as_tuple())
            yield row

    def track(self, program: Program | Iterable[Line]) -> list[PositionRow]:
        """Reset, then return the full trace for ``program``."""
        self.reset()
        rows = list(self.iter_rows(program))
        logger.debug(f"Tracked {len(rows)} positions")
        return rows


def trace_to_array(rows: Sequence[PositionRow]) -> np.ndarray:
    """
    Convert a trace to an (n, 4) float array of index, x, y, z.

    Unknown axis values become NaN.
    """
    array = np.full((len(rows), 4), np.nan, dtype=np.float64)
    for i, row in enumerate(rows):
        array[i] = [np.nan if v is None else v for v in row.as_tuple()]
    return array
