"""Split text into prose, code and math segments.

Used by passes that should only touch prose: anything inside inline code,
fences, or existing math (``$...$``, ``$$...$$``, ``\\(...\\)``,
``\\[...\\]``) comes back as its own segment, delimiters included.
Unterminated math openers are treated as prose.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from pizarra.lexer.core import CodeScanner
from pizarra.lexer.delimiters import find_closing_pair, is_escaped_delimiter
from pizarra.stringbuilder import StringBuilder


class SegmentKind(Enum):
    """What a segment of source text holds."""

    TEXT = auto()
    CODE = auto()
    MATH = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """A contiguous slice of the source with a single kind.

    Attributes:
        kind: What the slice holds
        text: The slice itself, delimiters included
        start: Offset of the slice in the source
    """

    kind: SegmentKind
    text: str
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class SegmentLexer(CodeScanner):
    """Single-pass splitter producing Segment objects in source order."""

    __slots__ = ("_kind", "_buffer", "_start")

    def __init__(self, source: str) -> None:
        super().__init__(source)
        self._kind = SegmentKind.TEXT
        self._buffer = StringBuilder()
        self._start = 0

    def tokenize(self) -> Iterator[Segment]:
        """Yield segments covering the whole source exactly once."""
        source = self._source

        while self._pos < self._source_len:
            run_start = self._pos
            run = self._consume_marker_run()
            if run is not None:
                yield from self._push(SegmentKind.CODE, run, run_start)
                continue

            if not self.in_plain:
                yield from self._push(SegmentKind.CODE, source[self._pos], self._pos)
                self._pos += 1
                continue

            end = self._math_end()
            if end != -1:
                yield from self._push(SegmentKind.MATH, source[self._pos:end], self._pos)
                self._pos = end
                continue

            yield from self._push(SegmentKind.TEXT, source[self._pos], self._pos)
            self._pos += 1

        if self._buffer:
            yield Segment(self._kind, self._buffer.build(), self._start)

    def _push(self, kind: SegmentKind, chunk: str, start: int) -> Iterator[Segment]:
        if kind is not self._kind and self._buffer:
            yield Segment(self._kind, self._buffer.build(), self._start)
            self._buffer = StringBuilder()
        if not self._buffer:
            self._start = start
        self._kind = kind
        self._buffer.append(chunk)

    def _math_end(self) -> int:
        """Return the end index of a math span opening at the cursor, or -1."""
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == "$":
            if is_escaped_delimiter(source, pos):
                return -1
            if source.startswith("$$", pos):
                close = find_closing_pair(source, pos + 2, "$", "$")
                return close + 2 if close != -1 else -1
            close = self._find_single_dollar(pos + 1)
            return close + 1 if close != -1 else -1

        if char == "\\" and pos + 1 < self._source_len:
            closer = {"(": ")", "[": "]"}.get(source[pos + 1])
            if closer is None or is_escaped_delimiter(source, pos):
                return -1
            close = find_closing_pair(source, pos + 2, "\\", closer)
            return close + 2 if close != -1 else -1

        return -1

    def _find_single_dollar(self, start: int) -> int:
        source = self._source
        for pos in range(start, self._source_len):
            if source[pos] == "$" and not is_escaped_delimiter(source, pos):
                return pos
        return -1


def split_segments(text: str) -> list[Segment]:
    """Split ``text`` into TEXT, CODE and MATH segments.

    Example:
        >>> [s.kind.name for s in split_segments("a $x$ `b`")]
        ['TEXT', 'MATH', 'TEXT', 'CODE']
    """
    if not text:
        return []
    return list(SegmentLexer(text).tokenize())
