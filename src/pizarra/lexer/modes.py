"""Lexical states for the delimiter-aware scanners.

Exactly one state is active at any scan position:

- Plain: ordinary prose, where math delimiters are significant
- InlineCode: inside a run-delimited code span such as ``x`` or ``y``
- Fenced: inside a fenced code block opened by a run of 3+ markers

The states are a closed tagged union, so an impossible combination such as
"inline code inside a fence" cannot be represented.
"""

from __future__ import annotations

from dataclasses import dataclass

# Characters that open code spans and fences
CODE_MARKERS = "`~"

# Minimum run length that opens or closes a fence
FENCE_MIN_LENGTH = 3


@dataclass(frozen=True, slots=True)
class Plain:
    """Outside any code context."""


@dataclass(frozen=True, slots=True)
class InlineCode:
    """Inside an inline code span.

    Attributes:
        marker: The opening character (backtick or tilde)
        length: How many repeated markers opened the span
    """

    marker: str
    length: int


@dataclass(frozen=True, slots=True)
class Fenced:
    """Inside a fenced code block.

    Attributes:
        marker: The fence character (backtick or tilde)
        length: Length of the opening run
    """

    marker: str
    length: int


LexState = Plain | InlineCode | Fenced

PLAIN = Plain()


def next_state(state: LexState, marker: str, length: int) -> LexState:
    """Return the state after reading a run of ``length`` ``marker`` characters.

    Runs of three or more toggle fences; shorter runs toggle inline code. A
    span or fence only closes on a run identical to the one that opened it.
    Runs that match nothing leave the state untouched.

    Example:
        >>> next_state(PLAIN, "`", 3)
        Fenced(marker='`', length=3)
        >>> next_state(Fenced("`", 3), "`", 3)
        Plain()
        >>> next_state(InlineCode("`", 2), "`", 1)
        InlineCode(marker='`', length=2)
    """
    match state:
        case Plain():
            if length >= FENCE_MIN_LENGTH:
                return Fenced(marker, length)
            return InlineCode(marker, length)
        case Fenced():
            if state.marker == marker and state.length == length:
                return PLAIN
            return state
        case InlineCode():
            if state.marker == marker and state.length == length:
                return PLAIN
            return state
    return state
