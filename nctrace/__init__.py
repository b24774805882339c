"""
nctrace Python Package

Decodes NC/G-code program text into typed instructions and derives a
carried-forward X/Y/Z tool position trace.

Key components:
- parse_string / parse_file: build a Program from source text
- PositionTracker: per-line position trace with unknown axes kept as None
- format_program / write_trace_csv: decode dump and CSV trace output
"""

from ._version import __version__
from .export import format_program, save_trace_npy, write_trace_csv
from .program import (
    Code,
    Instruction,
    Line,
    PositionRow,
    PositionTracker,
    Program,
    parse_file,
    parse_string,
)
from .utils.errors import MalformedTokenStreamError, MalformedValueError, NCDecodeError

__all__ = [
    "__version__",
    "Code",
    "Instruction",
    "Line",
    "Program",
    "PositionRow",
    "PositionTracker",
    "parse_file",
    "parse_string",
    "format_program",
    "write_trace_csv",
    "save_trace_npy",
    "NCDecodeError",
    "MalformedValueError",
    "MalformedTokenStreamError",
]
