"""
G-code program decoding for nctrace

Main components:
- tokenizer.py: splits a line into code/value segments
- instructions.py: typed instructions and the letter decoder
- parser.py: line, program and file parsing
- positions.py: carried-forward X/Y/Z position trace
"""

from .instructions import Code, Instruction, decode_instruction
from .parser import Line, Program, parse_file, parse_line, parse_lines, parse_string, strip_comment
from .positions import AxisState, PositionRow, PositionTracker, trace_to_array
from .tokenizer import pair_tokens, tokenize

__all__ = [
    "Code",
    "Instruction",
    "decode_instruction",
    "Line",
    "Program",
    "parse_file",
    "parse_line",
    "parse_lines",
    "parse_string",
    "strip_comment",
    "AxisState",
    "PositionRow",
    "PositionTracker",
    "trace_to_array",
    "pair_tokens",
    "tokenize",
]
