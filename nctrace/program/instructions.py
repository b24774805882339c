"""
Typed G-code instructions and the (letter, value) decoder.

Recognized letters:
- G, T, M, S: unsigned integer payload
- X, Y, Z, I, J, K, F, R: float payload

R decodes to the F variant. R is usually an arc radius, so an F value may
come from either letter.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from nctrace.utils.errors import MalformedValueError

logger = logging.getLogger(__name__)

__all__ = [
    "Code",
    "Instruction",
    "INTEGER_CODES",
    "AXIS_CODES",
    "decode_instruction",
    "parse_unsigned",
    "parse_float",
]

UINT_MAX = 2**32 - 1

_UNSIGNED_PATTERN = re.compile(r"\s*\+?[0-9]+\s*")


class Code(Enum):
    """Closed set of instruction letters."""

    G = "G"
    T = "T"
    M = "M"
    S = "S"
    X = "X"
    Y = "Y"
    Z = "Z"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    F = "F"
    R = "R"

    @property
    def is_integer(self) -> bool:
        return self in INTEGER_CODES


INTEGER_CODES = frozenset({Code.G, Code.T, Code.M, Code.S})
AXIS_CODES = (Code.X, Code.Y, Code.Z)

# Letter -> decoded variant
_VARIANTS: dict[str, Code] = {code.value: code for code in Code}
_VARIANTS["R"] = Code.F


@dataclass(frozen=True)
class Instruction:
    """A single decoded instruction, e.g. ``G1`` or ``X1.5``"""

    code: Code
    value: int | float

    def __str__(self):
        if self.code.is_integer:
            return f"{self.code.value}{self.value}"
        return f"{self.code.value}{self.value:.10g}"


def parse_unsigned(code: str, text: str) -> int:
    """
    Parse an unsigned 32-bit decimal integer.

    Surrounding whitespace and a leading '+' are accepted; signs, separators
    and embedded whitespace are not.

    Raises:
        MalformedValueError: If ``text`` is not a valid unsigned integer
    """
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise MalformedValueError(code, text, "unsigned integer")
    value = int(text)
    if value > UINT_MAX:
        raise MalformedValueError(code, text, "unsigned integer")
    return value


def parse_float(code: str, text: str) -> float:
    """
    Parse a floating point number (``float()`` syntax without '_' separators).

    Raises:
        MalformedValueError: If ``text`` is not a valid number
    """
    if "_" in text:
        raise MalformedValueError(code, text, "number")
    try:
        return float(text)
    except ValueError as e:
        raise MalformedValueError(code, text, "number") from e


def decode_instruction(letter: str, value: str) -> Instruction | None:
    """
    Decode one (letter, value-text) pair.

    Args:
        letter: Code letter as it appeared in the source
        value: Raw value text following the letter

    Returns:
        The decoded Instruction, or None if the letter is not recognized
        (a warning is logged and the caller should skip the token)

    Raises:
        MalformedValueError: If the letter is recognized but the value is not
    """
    code = _VARIANTS.get(letter)
    if code is None:
        logger.warning(f"UNKNOWN CODE: {letter} => {value}")
        return None

    if code.is_integer:
        return Instruction(code, parse_unsigned(letter, value))
    return Instruction(code, parse_float(letter, value))
