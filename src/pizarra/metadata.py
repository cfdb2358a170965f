"""Lesson metadata extraction.

Generated lessons may open with a fenced JSON block describing the lesson::

    ```json
    {"title": "Limits", "tags": ["calculus"], "readingTimeMinutes": 7}
    ```

    # Limits
    ...

``extract_lesson_metadata`` splits that block from the body and cleans its
values. A missing, half-streamed, or malformed block is not an error: the
metadata is simply ``None`` and the body is the whole text.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field, fields
from typing import Any

from pizarra.config import get_sanitize_config
from pizarra.errors import MetadataError
from pizarra.escapes import strip_control_chars
from pizarra.utils.logger import get_logger

logger = get_logger(__name__)

_METADATA_PATTERN = re.compile(r"^\s*```json\s*\r?\n(.*?)```", re.IGNORECASE | re.DOTALL)

_BOM = "\ufeff"

# Debug previews of the raw block are cut to this many characters
_PREVIEW_CHARS = 1000

# JSON keys mapped onto LessonMetadata fields; everything else lands in extra
_STRING_FIELDS = {"title": "title", "summary": "summary"}
_LIST_FIELDS = {
    "bulletSummary": "bullet_summary",
    "objectives": "objectives",
    "tags": "tags",
    "keyTakeaways": "key_takeaways",
    "sections": "sections",
}
_RESERVED_KEYS = frozenset(
    [*_STRING_FIELDS, *_LIST_FIELDS, "readingTimeMinutes", "quiz"]
)


@dataclass(frozen=True, slots=True)
class QuizItem:
    """One quiz question from a metadata block."""

    question: str
    answer: str | None = None
    explanation: str | None = None
    difficulty: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True)
class LessonMetadata:
    """Cleaned lesson metadata.

    Attributes:
        title: Lesson title
        summary: One-paragraph summary
        bullet_summary: Summary as bullet points
        objectives: Learning objectives
        tags: Free-form tags
        key_takeaways: Key takeaways
        sections: Section titles
        reading_time_minutes: Estimated reading time, at least 1
        quiz: Quiz questions
        extra: Any other keys, cleaned recursively
    """

    title: str | None = None
    summary: str | None = None
    bullet_summary: tuple[str, ...] | None = None
    objectives: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None
    key_takeaways: tuple[str, ...] | None = None
    sections: tuple[str, ...] | None = None
    reading_time_minutes: int | None = None
    quiz: tuple[QuizItem, ...] | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class MetadataExtraction:
    """Result of splitting a lesson into metadata and body.

    Attributes:
        metadata: Cleaned metadata, or None if no usable block was found
        metadata_block: The raw fenced block as it appeared, or None
        body: Lesson text without the block, leading whitespace removed
        normalized: Whole input after BOM and CRLF normalization
    """

    metadata: LessonMetadata | None
    metadata_block: str | None
    body: str
    normalized: str


def _clean_text(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return strip_control_chars(value).removeprefix(_BOM).strip()


def _clean_string_list(value: object) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    cleaned = tuple(item for item in map(_clean_text, value) if item)
    return cleaned or None


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _finite_float(value: object) -> float | None:
    """Convert to float, treating ints too large for a float as infinite."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (OverflowError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _clean_number(value: object) -> float | None:
    if _is_number(value) or (isinstance(value, str) and value.strip()):
        return _finite_float(value)
    return None


# Marks a value that did not survive cleaning; None is a kept JSON null
_DROPPED = object()


def _clean_unknown(value: Any) -> Any:
    """Clean an arbitrary JSON value, returning _DROPPED when nothing survives."""
    if isinstance(value, str):
        return _clean_text(value) or _DROPPED
    if value is None or isinstance(value, bool):
        return value
    if _is_number(value):
        return value if _finite_float(value) is not None else _DROPPED
    if isinstance(value, list):
        items = [c for c in map(_clean_unknown, value) if c is not _DROPPED]
        return items or _DROPPED
    if isinstance(value, dict):
        out = {}
        for key, val in value.items():
            cleaned = _clean_unknown(val)
            if cleaned is not _DROPPED:
                out[str(key)] = cleaned
        return out or _DROPPED
    return _DROPPED


def _clean_quiz(value: object) -> tuple[QuizItem, ...] | None:
    if not isinstance(value, list):
        return None

    items: list[QuizItem] = []
    for entry in value:
        if isinstance(entry, str):
            question = _clean_text(entry)
            if question:
                items.append(QuizItem(question=question))
            continue
        if not isinstance(entry, dict):
            continue
        question = (
            _clean_text(entry.get("question"))
            or _clean_text(entry.get("prompt"))
            or _clean_text(entry.get("q"))
        )
        if not question:
            continue
        items.append(
            QuizItem(
                question=question,
                answer=_clean_text(entry.get("answer")) or None,
                explanation=_clean_text(entry.get("explanation")) or None,
                difficulty=_clean_text(entry.get("difficulty")) or None,
                id=_clean_text(entry.get("id")) or None,
            )
        )
    return tuple(items) or None


def clean_metadata(raw: object) -> LessonMetadata | None:
    """Build LessonMetadata from a decoded JSON object.

    Returns:
        LessonMetadata, or None if ``raw`` is not an object or nothing in it
        survives cleaning.
    """
    if not isinstance(raw, dict):
        return None

    values: dict[str, Any] = {}
    for key, name in _STRING_FIELDS.items():
        text = _clean_text(raw.get(key))
        if text:
            values[name] = text
    for key, name in _LIST_FIELDS.items():
        items = _clean_string_list(raw.get(key))
        if items:
            values[name] = items

    reading_time = _clean_number(raw.get("readingTimeMinutes"))
    if reading_time is not None:
        # Round half up
        values["reading_time_minutes"] = max(1, math.floor(reading_time + 0.5))

    quiz = _clean_quiz(raw.get("quiz"))
    if quiz:
        values["quiz"] = quiz

    extra = {}
    for key, value in raw.items():
        if key in _RESERVED_KEYS:
            continue
        cleaned = _clean_unknown(value)
        if cleaned is not _DROPPED:
            extra[str(key)] = cleaned
    if extra:
        values["extra"] = extra

    if not values:
        return None
    return LessonMetadata(**values)


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def _load_json(block: str) -> Any:
    """Decode strict JSON: NaN and Infinity literals are rejected.

    Raises:
        ValueError: Malformed JSON (JSONDecodeError), a rejected constant, or
            an integer literal over the int conversion limit.
        RecursionError: Arrays or objects nested too deeply.
    """
    return json.loads(block, parse_constant=_reject_constant)


def parse_lesson_metadata(block: str) -> LessonMetadata | None:
    """Strictly parse the JSON inside a metadata block.

    Unlike ``extract_lesson_metadata``, malformed input is reported instead
    of ignored.

    Args:
        block: The JSON text (without the surrounding fence)

    Returns:
        Cleaned metadata, or None if the object holds nothing usable.

    Raises:
        MetadataError: If the JSON is malformed or not an object.
    """
    try:
        raw = _load_json(block)
    except json.JSONDecodeError as e:
        raise MetadataError(e.msg, e.lineno, e.colno) from e
    except (ValueError, RecursionError) as e:
        raise MetadataError(f"Metadata JSON could not be loaded: {e}") from e
    if not isinstance(raw, dict):
        raise MetadataError(f"Metadata must be a JSON object, got {type(raw).__name__}")
    try:
        return clean_metadata(raw)
    except RecursionError as e:
        raise MetadataError("Metadata is nested too deeply") from e


def _normalize(markdown: object) -> str:
    text = markdown if isinstance(markdown, str) else str(markdown or "")
    return text.removeprefix(_BOM).replace("\r\n", "\n")


def _without_block(normalized: str) -> MetadataExtraction:
    body = normalized.lstrip()
    return MetadataExtraction(metadata=None, metadata_block=None, body=body, normalized=body)


def extract_lesson_metadata(markdown: str) -> MetadataExtraction:
    """Split a leading ```json metadata block from a lesson.

    The block is only removed when it is complete: balanced, non-empty braces
    and valid JSON. A block that is still streaming in stays part of the body.

    Example:
        >>> result = extract_lesson_metadata('```json\\n{"title": "Limits"}\\n```\\n# Limits')
        >>> result.metadata.title
        'Limits'
        >>> result.body
        '# Limits'
    """
    debug = get_sanitize_config().debug
    normalized = _normalize(markdown)
    match = _METADATA_PATTERN.match(normalized)

    if match is None:
        if debug:
            logger.debug("No metadata block found")
        return _without_block(normalized)

    raw_block = match.group(1).strip()

    open_braces = raw_block.count("{")
    close_braces = raw_block.count("}")
    if open_braces == 0 or open_braces != close_braces:
        if debug:
            logger.debug(
                "Incomplete metadata block (open=%d, close=%d): %s",
                open_braces,
                close_braces,
                raw_block[:_PREVIEW_CHARS],
            )
        return _without_block(normalized)

    try:
        metadata = clean_metadata(_load_json(raw_block))
    except (ValueError, RecursionError) as e:
        if debug:
            logger.debug("Metadata JSON parse failed: %s: %s", e, raw_block[:_PREVIEW_CHARS])
        return _without_block(normalized)

    if debug:
        present = [f.name for f in fields(metadata) if getattr(metadata, f.name)] if metadata else None
        logger.debug("Parsed metadata fields: %s", present)

    return MetadataExtraction(
        metadata=metadata,
        metadata_block=match.group(0),
        body=normalized[match.end():].lstrip(),
        normalized=normalized.lstrip(),
    )


def strip_lesson_metadata(markdown: str) -> str:
    """Return the lesson body without its leading metadata block."""
    return extract_lesson_metadata(markdown).body
