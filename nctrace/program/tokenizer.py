"""
Line tokenizer for G-code text.

Splits a comment-free source line into alternating value/code segments.
Codes are maximal runs of alphabetic characters; everything else (digits,
signs, dots, whitespace) belongs to the surrounding value segment.
"""

import logging
from itertools import groupby

from nctrace.config import TRACE
from nctrace.utils.errors import MalformedTokenStreamError

logger = logging.getLogger(__name__)

__all__ = ["tokenize", "pair_tokens"]


def tokenize(text: str) -> list[str]:
    """
    Split a line into segments: value, code, value, code, ..., value.

    The first and last segments are always values and may be empty.
    Joining the result gives back ``text`` unchanged.

    Args:
        text: One source line with comments already removed

    Returns:
        List of segments (always odd length)
    """
    segments: list[str] = []
    ends_with_code = True  # an empty line still yields one value segment
    for is_code, run in groupby(text, key=str.isalpha):
        if is_code and not segments:
            segments.append("")
        segments.append("".join(run))
        ends_with_code = is_code
    if ends_with_code:
        segments.append("")
    return segments


def pair_tokens(segments: list[str]) -> list[tuple[str, str]]:
    """
    Group tokenizer output into (code, value) pairs.

    A leading empty value segment is dropped. Anything else in front of the
    first code (a bare number, leading whitespace) leaves an odd number of
    segments and is rejected.

    Raises:
        MalformedTokenStreamError: If the segments do not pair up
    """
    body = segments[1:] if segments and segments[0] == "" else segments
    if len(body) % 2 != 0:
        raise MalformedTokenStreamError(segments)
    pairs = list(zip(body[0::2], body[1::2]))
    logger.log(TRACE, "paired_tokens count=%d pairs=%s", len(pairs), pairs)
    return pairs
