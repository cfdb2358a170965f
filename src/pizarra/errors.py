"""Exception classes for Pizarra.

The sanitization pipeline itself is total and never raises. These exceptions
are reserved for opt-in strict helpers that surface authoring mistakes to
the caller.
"""

from __future__ import annotations


class PizarraError(Exception):
    """Base exception for all Pizarra errors.

    Subclass this for specific error categories.
    """

    pass


class MetadataError(PizarraError):
    """Error while parsing a lesson metadata block.

    Raised by the strict metadata parser when the JSON block is malformed.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize metadata error with optional location.

        Args:
            message: Error description
            lineno: Line number inside the metadata block (1-indexed)
            col_offset: Column offset inside the metadata block (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")
