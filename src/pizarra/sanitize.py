"""Composable sanitization policies for lesson and flashcard text.

Every step of the pipeline is a ``str -> str`` function wrapped in a Policy.
Policies compose via the | operator, left to right.

Example:
    >>> from pizarra.sanitize import decode, drop_control_chars, sanitize
    >>> sanitize("a\\\\nb\\x07", policy=decode | drop_control_chars)
    'a\\nb'
"""

from collections.abc import Callable

from pizarra.config import get_sanitize_config
from pizarra.escapes import decode_escapes, strip_control_chars
from pizarra.fences import ensure_closed_markdown_fences
from pizarra.lexer.display_math import normalize_display_math
from pizarra.metadata import strip_lesson_metadata
from pizarra.subscripts import wrap_subscripts


class Policy:
    """Wrapper for str -> str transform, supports composition via |."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[str], str]) -> None:
        self._fn = fn

    def __call__(self, text: str) -> str:
        return self._fn(text)

    def __or__(self, other: "Policy") -> "Policy":
        """Chain policies: (self | other)(text) applies self then other."""

        def chained(text: str) -> str:
            return other._fn(self._fn(text))

        return Policy(chained)


def _strip_metadata(text: str) -> str:
    if not get_sanitize_config().strip_metadata:
        return text
    return strip_lesson_metadata(text)


def _wrap_subscripts(text: str) -> str:
    if not get_sanitize_config().wrap_subscripts:
        return text
    return wrap_subscripts(text)


# Composable Policy instances (use with | operator)
strip_metadata = Policy(_strip_metadata)
decode = Policy(decode_escapes)
drop_control_chars = Policy(strip_control_chars)
display_math = Policy(normalize_display_math)
close_fences = Policy(ensure_closed_markdown_fences)
subscripts = Policy(_wrap_subscripts)


# Pre-built policy sets
lesson_body: Policy = strip_metadata | decode | drop_control_chars
flashcard: Policy = decode | drop_control_chars | subscripts
lesson_render: Policy = lesson_body | display_math | close_fences


def sanitize(text: str, *, policy: Policy | Callable[[str], str]) -> str:
    """Apply a sanitization policy to text.

    Args:
        text: Raw text. Empty input always yields an empty string.
        policy: Policy or callable str -> str.

    Returns:
        Sanitized text.
    """
    if not text:
        return ""
    return policy(text)


def sanitize_lesson_body(raw: str) -> str:
    """Strip metadata, decode escapes, and drop control characters.

    Display math and fences are left to the caller; see ``lesson_render``
    for the full chain.
    """
    return sanitize(raw, policy=lesson_body)


def sanitize_flashcard_content(raw: str) -> str:
    """Decode escapes, drop control characters, and wrap bare subscripts."""
    return sanitize(raw, policy=flashcard)
