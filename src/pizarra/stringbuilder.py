"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation in the character-by-character scanners.

Thread Safety:
StringBuilder instances are local to each scan call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end. Remembers the last
    character written so scanners can ask about the output tail
    without joining.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Solve")
            >>> sb.ends_with_newline()
            False
            >>> sb.append_line()
            >>> sb.build()
            'Solve\\n'

    """

    __slots__ = ("_parts", "_last")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._last = ""

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._last = s[-1]
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline.

        Args:
            s: String to append (empty = just newline)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        self._last = "\n"
        return self

    def ends_with_newline(self) -> bool:
        """Return True if the last appended character is a newline."""
        return self._last == "\n"

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
