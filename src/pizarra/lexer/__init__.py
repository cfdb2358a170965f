"""Delimiter-aware single-pass scanners.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── modes.py             # LexState tagged union and run transitions
├── delimiters.py        # Stateless escape/run/closing-marker helpers
├── core.py              # CodeScanner base (cursor + code-context tracking)
├── display_math.py      # \\[ ... \\] to $$ block normalizer
└── segments.py          # Prose / code / math splitter

Usage:
    >>> from pizarra.lexer import normalize_display_math
    >>> normalize_display_math("\\\\[ a \\\\]")
    '$$\\na\\n$$\\n'

"""

from pizarra.lexer.core import CodeScanner
from pizarra.lexer.delimiters import (
    count_run,
    find_closing_display,
    find_closing_pair,
    is_display_open,
    is_escaped_delimiter,
)
from pizarra.lexer.display_math import DisplayMathLexer, normalize_display_math
from pizarra.lexer.modes import PLAIN, Fenced, InlineCode, LexState, Plain, next_state
from pizarra.lexer.segments import Segment, SegmentKind, SegmentLexer, split_segments

__all__ = [
    "PLAIN",
    "CodeScanner",
    "DisplayMathLexer",
    "Fenced",
    "InlineCode",
    "LexState",
    "Plain",
    "Segment",
    "SegmentKind",
    "SegmentLexer",
    "count_run",
    "find_closing_display",
    "find_closing_pair",
    "is_display_open",
    "is_escaped_delimiter",
    "next_state",
    "normalize_display_math",
    "split_segments",
]
