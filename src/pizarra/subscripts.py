"""Inline-math wrapping for bare subscript tokens in flashcards.

Flashcard prompts frequently say ``x_1`` where ``$x_1$`` was meant. This pass
wraps such tokens in inline math. It only touches prose: code spans, fences
and existing math are left alone, and so is anything glued to a backslash
(``\\theta_0`` is already a command) or to a dollar sign.
"""

import re
from bisect import bisect_right

from pizarra.lexer.segments import SegmentKind, split_segments

# One underscore between two word parts (letters or digits, any script);
# snake_case_names don't match because the lookarounds reject a neighbouring
# word character.
_SUBSCRIPT_PATTERN = re.compile(
    r"(?<![\\$\w])([^\W_]+_[^\W_]+)(?![\w$])"
)


def wrap_subscripts(text: str) -> str:
    """Wrap bare ``name_sub`` tokens in inline math delimiters.

    Example:
        >>> wrap_subscripts("x_1 and \\\\theta_0")
        '$x_1$ and \\\\theta_0'
    """
    if not text:
        return ""

    prose = [s for s in split_segments(text) if s.kind is SegmentKind.TEXT]
    if not prose:
        return text
    starts = [s.start for s in prose]

    def wrap(match: re.Match[str]) -> str:
        idx = bisect_right(starts, match.start()) - 1
        if idx >= 0 and match.end() <= prose[idx].end:
            return f"${match.group(1)}$"
        return match.group(0)

    return _SUBSCRIPT_PATTERN.sub(wrap, text)
