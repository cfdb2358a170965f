"""
Pizarra: renderer-safe Markdown + math for generated lessons and flashcards

Rewrites AI-generated or user-supplied lesson text into a canonical form a
Markdown + KaTeX renderer can display: metadata stripped, escaped newlines
decoded, control characters dropped, ``\\[ ... \\]`` display math turned into
``$$`` blocks, and unterminated code fences closed. Every function is pure
and total; malformed input degrades to literal text instead of raising.

Quick Start:
    >>> from pizarra import sanitize_lesson_body, normalize_display_math
    >>> body = sanitize_lesson_body("Solve \\\\[ x^2 + 1 = 0 \\\\]\\\\nDone.")
    >>> normalize_display_math(body)
    'Solve \\n$$\\nx^2 + 1 = 0\\n$$\\n\\nDone.'

    >>> from pizarra import sanitize_flashcard_content
    >>> sanitize_flashcard_content("x_1 and \\\\theta_0")
    '$x_1$ and \\\\theta_0'

Installation:
    pip install pizarra              # zero runtime dependencies
"""

from pizarra.config import (
    SanitizeConfig,
    get_sanitize_config,
    reset_sanitize_config,
    sanitize_config_context,
    set_sanitize_config,
)
from pizarra.errors import MetadataError, PizarraError
from pizarra.escapes import decode_escapes, strip_control_chars
from pizarra.fences import FenceLine, classify_fence_line, ensure_closed_markdown_fences
from pizarra.lexer import (
    Fenced,
    InlineCode,
    LexState,
    Plain,
    Segment,
    SegmentKind,
    is_escaped_delimiter,
    normalize_display_math,
    split_segments,
)
from pizarra.metadata import (
    LessonMetadata,
    MetadataExtraction,
    QuizItem,
    extract_lesson_metadata,
    parse_lesson_metadata,
    strip_lesson_metadata,
)
from pizarra.sanitize import (
    Policy,
    sanitize,
    sanitize_flashcard_content,
    sanitize_lesson_body,
)
from pizarra.sections import (
    PracticeProblem,
    PracticeProblems,
    QuizSection,
    extract_practice_problems,
    extract_quiz_section,
)
from pizarra.subscripts import wrap_subscripts

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "sanitize",
    "sanitize_lesson_body",
    "sanitize_flashcard_content",
    "Policy",
    # Steps
    "decode_escapes",
    "strip_control_chars",
    "normalize_display_math",
    "ensure_closed_markdown_fences",
    "wrap_subscripts",
    # Lexer
    "LexState",
    "Plain",
    "InlineCode",
    "Fenced",
    "Segment",
    "SegmentKind",
    "split_segments",
    "is_escaped_delimiter",
    "FenceLine",
    "classify_fence_line",
    # Metadata and sections
    "LessonMetadata",
    "QuizItem",
    "MetadataExtraction",
    "extract_lesson_metadata",
    "strip_lesson_metadata",
    "parse_lesson_metadata",
    "QuizSection",
    "PracticeProblem",
    "PracticeProblems",
    "extract_quiz_section",
    "extract_practice_problems",
    # Configuration
    "SanitizeConfig",
    "get_sanitize_config",
    "set_sanitize_config",
    "reset_sanitize_config",
    "sanitize_config_context",
    # Errors
    "PizarraError",
    "MetadataError",
    # Version
    "__version__",
]
