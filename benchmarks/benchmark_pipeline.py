"""Benchmark the sanitization pipeline.

Run with:
    pytest benchmarks/benchmark_pipeline.py -v --benchmark-only
"""

from __future__ import annotations

from pizarra import (
    ensure_closed_markdown_fences,
    normalize_display_math,
    sanitize,
    sanitize_flashcard_content,
    sanitize_lesson_body,
    wrap_subscripts,
)
from pizarra.sanitize import lesson_render


def test_lesson_body(benchmark, large_lesson: str) -> None:
    result = benchmark(sanitize_lesson_body, large_lesson)
    assert not result.startswith("```json")


def test_display_math(benchmark, large_lesson: str) -> None:
    body = sanitize_lesson_body(large_lesson)
    result = benchmark(normalize_display_math, body)
    assert "$$" in result


def test_close_fences(benchmark, large_lesson: str) -> None:
    body = sanitize_lesson_body(large_lesson)
    benchmark(ensure_closed_markdown_fences, body)


def test_wrap_subscripts(benchmark, large_lesson: str) -> None:
    body = sanitize_lesson_body(large_lesson)
    result = benchmark(wrap_subscripts, body)
    assert "$x_0$" in result


def test_full_render(benchmark, large_lesson: str) -> None:
    benchmark(sanitize, large_lesson, policy=lesson_render)


def test_flashcard_deck(benchmark, flashcards: list[str]) -> None:
    def run() -> list[str]:
        return [sanitize_flashcard_content(card) for card in flashcards]

    result = benchmark(run)
    assert len(result) == len(flashcards)


def test_streaming_rerender(benchmark, streaming_prefixes: list[str]) -> None:
    """Re-sanitize every prefix, as a streaming UI does on each chunk."""

    def run() -> None:
        for prefix in streaming_prefixes:
            sanitize(prefix, policy=lesson_render)

    benchmark(run)
