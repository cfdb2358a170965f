"""Escape decoding and control-character filtering.

AI-generated text often arrives with newlines double-encoded as the literal
two-character sequence backslash-n. These helpers turn such sequences into
real line breaks and drop control bytes the renderer cannot cope with.

Literal backslash-t is never decoded: ``\\tan`` and ``\\theta`` begin with it.
"""

import re

from pizarra.config import get_sanitize_config
from pizarra.utils.logger import get_logger

logger = get_logger(__name__)

# C0 controls and DEL, keeping \t (0x09) and \n (0x0A)
_CONTROL_CHARS_PATTERN = re.compile("[\x00-\x08\x0b-\x1f\x7f]")


def _decode_once(text: str) -> str:
    return (
        text.replace("\r\n", "\n")
        .replace("\\r\\n", "\n")
        .replace("\\n", "\n")
    )


def decode_escapes(text: str) -> str:
    """Replace literal newline escapes with real line breaks.

    Repeats until the text stops changing, up to
    ``SanitizeConfig.max_escape_passes`` passes. Anything still escaped after
    the last pass is left in place.

    Args:
        text: Raw text, possibly containing literal ``\\n`` or ``\\r\\n``.

    Returns:
        Text with those sequences decoded.

    Example:
        >>> decode_escapes("line one\\\\nline two")
        'line one\\nline two'
        >>> decode_escapes("\\\\theta")
        '\\\\theta'
    """
    if not text:
        return ""

    max_passes = get_sanitize_config().max_escape_passes
    previous = None
    current = text
    passes = 0
    while current != previous and passes < max_passes:
        previous = current
        current = _decode_once(current)
        passes += 1

    if current != previous:
        logger.debug("Escape decoding stopped after %d passes without settling", passes)
    return current


def strip_control_chars(text: str) -> str:
    """Remove C0 control characters and DEL, keeping newline and tab."""
    if not text:
        return ""
    return _CONTROL_CHARS_PATTERN.sub("", text)
