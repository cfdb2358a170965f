"""Code-context tracking shared by the single-pass scanners.

Every scanner in Pizarra walks the source once, left to right, with an
explicit cursor. Runs of backticks or tildes are consumed whole and fed
through ``next_state``; subclasses only decide what to do with everything
else.

No regex in the hot path. The cursor always advances, so every scan is O(n)
plus the short backward escape checks.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from pizarra.lexer.delimiters import count_run
from pizarra.lexer.modes import CODE_MARKERS, PLAIN, LexState, Plain, next_state


class CodeScanner:
    """Base class for scanners that must ignore code spans and fences.

    Subclasses drive the loop themselves and call ``_consume_marker_run``
    at each position before looking for their own delimiters.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_state",
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Text to scan
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._state: LexState = PLAIN

    @property
    def state(self) -> LexState:
        """The lexical state at the current cursor position."""
        return self._state

    @property
    def in_plain(self) -> bool:
        """True when the cursor is outside inline code and fences."""
        return isinstance(self._state, Plain)

    def _consume_marker_run(self) -> str | None:
        """Consume a run of code markers at the cursor, updating state.

        Returns:
            The consumed run, or None if the cursor is not on a marker.
        """
        char = self._source[self._pos]
        if char not in CODE_MARKERS:
            return None

        length = count_run(self._source, self._pos)
        self._state = next_state(self._state, char, length)
        self._pos += length
        return char * length
