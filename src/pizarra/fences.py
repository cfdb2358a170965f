"""Fenced code block balancing.

AI output is often cut off mid-answer, leaving a code fence open and the rest
of the page rendered as code. ``ensure_closed_markdown_fences`` appends the
missing closing fence.
"""

from __future__ import annotations

from dataclasses import dataclass

from pizarra.lexer.modes import CODE_MARKERS, FENCE_MIN_LENGTH


@dataclass(frozen=True, slots=True)
class FenceLine:
    """A physical line that starts with a fence run.

    Attributes:
        marker: Fence character (backtick or tilde)
        length: Number of repeated fence characters
        indent: Leading whitespace characters before the run
        info: Whatever follows the run, stripped (language hint, usually)
    """

    marker: str
    length: int
    indent: int = 0
    info: str = ""

    @property
    def fence(self) -> str:
        return self.marker * self.length

    def closes(self, opening: FenceLine) -> bool:
        """Check if this line closes a fence opened by ``opening``."""
        return self.marker == opening.marker and self.length >= opening.length


def classify_fence_line(line: str) -> FenceLine | None:
    """Classify a line as a fence line.

    A fence line is optional leading whitespace followed by three or more
    backticks or three or more tildes. Anything may follow the run.

    Args:
        line: One physical line, without its newline

    Returns:
        FenceLine if the line starts with a fence run, None otherwise.

    Example:
        >>> classify_fence_line("```python")
        FenceLine(marker='`', length=3, indent=0, info='python')
        >>> classify_fence_line("`` not a fence") is None
        True
    """
    stripped = line.lstrip()
    if not stripped:
        return None

    marker = stripped[0]
    if marker not in CODE_MARKERS:
        return None

    length = 0
    while length < len(stripped) and stripped[length] == marker:
        length += 1

    if length < FENCE_MIN_LENGTH:
        return None

    return FenceLine(
        marker=marker,
        length=length,
        indent=len(line) - len(stripped),
        info=stripped[length:].strip(),
    )


def find_open_fence(text: str) -> FenceLine | None:
    """Return the fence still open at the end of ``text``, if any."""
    opening: FenceLine | None = None
    for line in text.split("\n"):
        fence = classify_fence_line(line)
        if fence is None:
            continue
        if opening is None:
            opening = fence
        elif fence.closes(opening):
            opening = None
    return opening


def ensure_closed_markdown_fences(text: str) -> str:
    """Append a closing fence if ``text`` ends inside a fenced code block.

    The closing run repeats the opening fence's character and length on a
    new line. Running it again on its own output changes nothing.

    Example:
        >>> ensure_closed_markdown_fences("```js\\nconsole.log(1);")
        '```js\\nconsole.log(1);\\n```'
    """
    if not text:
        return ""

    opening = find_open_fence(text)
    if opening is None:
        return text
    return f"{text}\n{opening.fence}"
