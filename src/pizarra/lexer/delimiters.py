"""Stateless delimiter helpers shared by the scanners.

All functions take the full source and an index and never mutate anything,
so they can be tested in isolation and reused by every scanner.

Escape classification counts the backslashes immediately before a candidate
character. An odd count means the character is escaped by the backslash
right before it; an even count (including zero) means any backslashes pair
up among themselves and the character stands on its own.
"""

from __future__ import annotations


def is_escaped_delimiter(text: str, index: int) -> bool:
    """Return True if the character at ``index`` follows an odd backslash run.

    Example:
        >>> is_escaped_delimiter("a\\\\$", 2)
        True
        >>> is_escaped_delimiter("a\\\\\\\\$", 3)
        False
    """
    count = 0
    pos = index - 1
    while pos >= 0 and text[pos] == "\\":
        count += 1
        pos -= 1
    return count % 2 == 1


def count_run(text: str, index: int) -> int:
    """Count consecutive copies of ``text[index]`` starting at ``index``."""
    char = text[index]
    end = index
    text_len = len(text)
    while end < text_len and text[end] == char:
        end += 1
    return end - index


def find_closing_pair(text: str, start: int, first: str, second: str) -> int:
    """Find the nearest unescaped ``first + second`` pair at or after ``start``.

    The pair counts only when the backslash run before ``first`` is even.

    Returns:
        Index of ``first``, or -1 if no such pair exists.
    """
    pos = start
    last = len(text) - 1
    while pos < last:
        if (
            text[pos] == first
            and text[pos + 1] == second
            and not is_escaped_delimiter(text, pos)
        ):
            return pos
        pos += 1
    return -1


def find_closing_display(text: str, start: int) -> int:
    """Find the nearest unescaped ``\\]`` at or after ``start``, or -1."""
    return find_closing_pair(text, start, "\\", "]")


def is_display_open(text: str, index: int) -> bool:
    """Return True if a functioning ``\\[`` starts at ``index``."""
    return (
        text[index] == "\\"
        and index + 1 < len(text)
        and text[index + 1] == "["
        and not is_escaped_delimiter(text, index)
    )
