"""Display-math normalization.

Rewrites ``\\[ ... \\]`` display math into the canonical block form::

    $$
    interior
    $$

while leaving delimiters inside inline code and fences alone. Unterminated
``\\[`` is copied through as ordinary text.
"""

from __future__ import annotations

from pizarra.lexer.core import CodeScanner
from pizarra.lexer.delimiters import find_closing_display, is_display_open
from pizarra.stringbuilder import StringBuilder

BLOCK_MATH_MARKER = "$$"


class DisplayMathLexer(CodeScanner):
    """Single-pass display-math normalizer.

    Usage:
            >>> DisplayMathLexer("Solve \\\\[ x \\\\]").normalize()
            'Solve \\n$$\\nx\\n$$\\n'

    """

    __slots__ = ("_out",)

    def __init__(self, source: str) -> None:
        super().__init__(source)
        self._out = StringBuilder()

    def normalize(self) -> str:
        """Run the scan and return the normalized text."""
        source = self._source
        out = self._out

        while self._pos < self._source_len:
            run = self._consume_marker_run()
            if run is not None:
                out.append(run)
                continue

            if self.in_plain and is_display_open(source, self._pos):
                if self._emit_display_block():
                    continue

            out.append(source[self._pos])
            self._pos += 1

        return out.build()

    def _emit_display_block(self) -> bool:
        """Emit the block starting at the cursor if it has a closing marker."""
        start = self._pos + 2
        close = find_closing_display(self._source, start)
        if close == -1:
            return False

        interior = self._source[start:close].strip()
        out = self._out
        if out and not out.ends_with_newline():
            out.append_line()
        out.append_line(BLOCK_MATH_MARKER)
        out.append_line(interior)
        out.append_line(BLOCK_MATH_MARKER)
        self._pos = close + 2
        return True


def normalize_display_math(text: str) -> str:
    """Convert ``\\[ ... \\]`` display math outside code into ``$$`` blocks.

    Args:
        text: Markdown text with LaTeX-style math.

    Returns:
        Text with every terminated display-math span in canonical block form
        and all other characters untouched.

    Example:
        >>> normalize_display_math("`\\\\[x\\\\]`")
        '`\\\\[x\\\\]`'
    """
    if not text:
        return ""
    return DisplayMathLexer(text).normalize()
