"""
G-code program parser.

Turns raw program text into a Program: an ordered list of Lines, each with an
optional N line number and the decoded instructions in source order.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from nctrace import config
from nctrace.program.instructions import Instruction, decode_instruction, parse_unsigned
from nctrace.program.tokenizer import pair_tokens, tokenize
from nctrace.utils.errors import NCDecodeError

logger = logging.getLogger(__name__)

__all__ = [
    "Line",
    "Program",
    "strip_comment",
    "parse_line",
    "parse_lines",
    "parse_string",
    "parse_file",
]


@dataclass
class Line:
    """One decoded source line"""

    number: int | None = None
    instructions: list[Instruction] = field(default_factory=list)
    source: str = ""  # comment-stripped text the line was parsed from
    source_index: int | None = None  # zero-based line in the source text

    def __str__(self):
        parts = [str(i) for i in self.instructions]
        if self.number is not None:
            parts.insert(0, f"{config.LINE_NUMBER_CODE}{self.number}")
        return " ".join(parts)


@dataclass
class Program:
    """Ordered sequence of decoded lines"""

    lines: list[Line] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]


def strip_comment(text: str, comment_char: str = config.COMMENT_CHAR) -> str:
    """
    Remove everything from the first comment opener to the end of the line.

    The result never contains ``comment_char``, so stripping twice is the
    same as stripping once.
    """
    return text.partition(comment_char)[0]


def parse_line(text: str) -> Line:
    """
    Parse one comment-free line into a Line.

    ``N`` sets the line number (last one wins). Other codes are decoded in
    order; unrecognized codes are logged and dropped.

    Args:
        text: Source line without comments

    Returns:
        Parsed Line (empty text gives an empty Line)

    Raises:
        MalformedTokenStreamError: If the line does not split into code/value pairs
        MalformedValueError: If a recognized code has an invalid value
    """
    line = Line(source=text)
    for code, value in pair_tokens(tokenize(text)):
        if code == config.LINE_NUMBER_CODE:
            line.number = parse_unsigned(code, value)
            continue
        instruction = decode_instruction(code, value)
        if instruction is not None:
            line.instructions.append(instruction)
    return line


def parse_lines(lines: Iterable[str]) -> Program:
    """
    Build a Program from raw source lines.

    Comments are stripped and blank lines skipped. The first line that fails
    to decode aborts the whole parse; the raised error carries the source
    line index and text.

    Raises:
        NCDecodeError: On the first line that cannot be decoded
    """
    program = Program()
    for index, raw in enumerate(lines):
        text = strip_comment(raw)
        if not text.strip():
            continue
        try:
            line = parse_line(text)
        except NCDecodeError as e:
            raise e.annotate(index, raw)
        line.source_index = index
        program.lines.append(line)

    logger.debug(f"Parsed {len(program)} lines")
    return program


def parse_string(text: str) -> Program:
    """Parse a whole program held in a string."""
    return parse_lines(text.splitlines())


def parse_file(path: str | Path, encoding: str = config.DEFAULT_ENCODING) -> Program:
    """
    Read a program file into memory and parse it.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid text in ``encoding``
        NCDecodeError: If a line cannot be decoded
    """
    path = Path(path)
    text = path.read_text(encoding=encoding)
    logger.info(f"Loaded {path} ({len(text)} characters)")
    return parse_string(text)
