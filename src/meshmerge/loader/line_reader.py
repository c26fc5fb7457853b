# src/meshmerge/loader/line_reader.py

"""
Line reader with one-line push-back.

The header reader and both record parsers need to look at a line and,
when it belongs to the next stage, hand it back so the next consumer sees
it untouched. ``LineReader`` wraps any iterable of text lines, strips the
line terminator, and keeps a small push-back stack for that purpose.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


class LineReader:
    """
    Sequential reader over text lines with ``unread`` support.

    Iterating the reader yields lines until the source is exhausted; a line
    passed to :meth:`unread` is yielded again by the next read, even while
    an iteration is in progress.
    """

    def __init__(self, source: Iterable[str]):
        self._source: Iterator[str] = iter(source)
        self._pushed: List[str] = []
        self.lineno = 0

    @classmethod
    def from_text(cls, text: str) -> "LineReader":
        return cls(text.splitlines())

    def readline(self) -> Optional[str]:
        """Return the next line without its terminator, or None at EOF."""
        if self._pushed:
            self.lineno += 1
            return self._pushed.pop()

        try:
            raw = next(self._source)
        except StopIteration:
            return None

        self.lineno += 1
        return _strip_eol(raw)

    def unread(self, line: str) -> None:
        """Push ``line`` back so the next read returns it again."""
        self._pushed.append(line)
        self.lineno -= 1

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line
