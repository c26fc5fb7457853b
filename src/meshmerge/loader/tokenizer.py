# src/meshmerge/loader/tokenizer.py

from __future__ import annotations

import re
from typing import List, Optional

# Every character with code <= 0x20 counts as padding around a token.
CONTROL_CHARS = "".join(chr(c) for c in range(0x21))
DEFAULT_DELIMITERS = " \t"

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def trim(text: str) -> str:
    """Strip leading and trailing characters with code <= 0x20."""
    return text.strip(CONTROL_CHARS)


def trim_leading(text: str) -> str:
    return text.lstrip(CONTROL_CHARS)


def split_tokens(line: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """
    Break a line into the maximal runs of non-delimiter characters.

    Each run is trimmed of control characters and empty results are
    dropped, so ``"  1\\t 2  3 "`` gives ``["1", "2", "3"]``.

    Args:
        line: Text to split.
        delimiters: Set of single delimiter characters.

    Returns:
        Tokens in order of appearance (possibly empty).
    """
    if not line:
        return []

    if delimiters:
        pattern = "[" + re.escape(delimiters) + "]+"
        pieces = re.split(pattern, line)
    else:
        pieces = [line]

    tokens: List[str] = []
    for piece in pieces:
        token = trim(piece)
        if token:
            tokens.append(token)
    return tokens


def parse_float_prefix(text: str) -> Optional[float]:
    """
    Parse the longest leading decimal literal of ``text``.

    Leading padding is skipped and anything after the literal is ignored,
    so ``"1.5e3 extra"`` gives ``1500.0``. Returns None when the text does
    not start with a number.
    """
    match = _FLOAT_PREFIX.match(trim_leading(text))
    if match is None:
        return None
    return float(match.group(0))


def parse_int_prefix(text: str) -> Optional[int]:
    """Integer counterpart of :func:`parse_float_prefix`."""
    match = _INT_PREFIX.match(trim_leading(text))
    if match is None:
        return None
    return int(match.group(0))


def snap_zero(value: float, precision: float) -> float:
    """Replace values within ``precision`` of zero with +0.0."""
    if abs(value) < precision:
        return 0.0
    return value
