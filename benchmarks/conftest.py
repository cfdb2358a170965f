"""Benchmark fixtures and configuration."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def large_lesson() -> str:
    """Generate a large generated-lesson document (~100KB) with escaped newlines."""
    metadata = json.dumps(
        {
            "title": "Benchmark Lesson",
            "tags": ["calculus", "limits"],
            "readingTimeMinutes": 42,
        }
    )
    sections = [f"```json\n{metadata}\n```"]
    for i in range(100):
        sections.append(
            f"## Section {i}\\n\\n"
            f"Let x_{i} be a point. Then \\[ \\int_0^{i} x^2 \\, dx \\] holds.\\n"
            f"Inline $a_{i}$ and `code_{i}` stay put.\\n\\n"
            f"```python\\ndef f_{i}(x):\\n    return x_{i} \\\\[0]\\n```\\n"
            f"\\(y_{i}\\) and plain y_{i} follow.\r\n"
        )
    return "\n".join(sections)


@pytest.fixture
def flashcards() -> list[str]:
    """A deck of short flashcard strings."""
    return [
        f"Q: what is x_{i}?\\nA: the {i}th term, see `a_{i}` and $b_{i}$" for i in range(500)
    ]


@pytest.fixture
def streaming_prefixes(large_lesson: str) -> list[str]:
    """Prefixes of a lesson as they arrive during streaming."""
    step = max(1, len(large_lesson) // 50)
    return [large_lesson[:end] for end in range(step, len(large_lesson), step)]
