"""Tests for fenced code block balancing."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pizarra.fences import (
    FenceLine,
    classify_fence_line,
    ensure_closed_markdown_fences,
    find_open_fence,
)


class TestClassifyFenceLine:
    def test_backtick_fence_with_info(self) -> None:
        assert classify_fence_line("```python") == FenceLine(
            marker="`", length=3, indent=0, info="python"
        )

    def test_tilde_fence(self) -> None:
        fence = classify_fence_line("~~~~~")
        assert fence is not None
        assert fence.marker == "~"
        assert fence.length == 5
        assert fence.fence == "~~~~~"

    def test_indented_fence(self) -> None:
        fence = classify_fence_line("   ```")
        assert fence is not None
        assert fence.indent == 3

    @pytest.mark.parametrize("line", ["", "text", "``", "~~ x", "a ```", "   "])
    def test_not_a_fence(self, line: str) -> None:
        assert classify_fence_line(line) is None

    def test_closes_requires_same_marker_and_length(self) -> None:
        opening = FenceLine(marker="`", length=4)
        assert FenceLine(marker="`", length=4).closes(opening)
        assert FenceLine(marker="`", length=6).closes(opening)
        assert not FenceLine(marker="`", length=3).closes(opening)
        assert not FenceLine(marker="~", length=4).closes(opening)


class TestEnsureClosedMarkdownFences:
    def test_appends_closing_fence(self) -> None:
        source = "```js\nconsole.log(1);"
        result = ensure_closed_markdown_fences(source)
        assert result == "```js\nconsole.log(1);\n```"
        assert ensure_closed_markdown_fences(result) == result

    def test_balanced_document_unchanged(self) -> None:
        source = "Text\n```\ncode\n```\nMore"
        assert ensure_closed_markdown_fences(source) == source

    def test_matches_opening_length_and_char(self) -> None:
        assert ensure_closed_markdown_fences("~~~~\ncode") == "~~~~\ncode\n~~~~"

    def test_longer_run_closes(self) -> None:
        source = "```\ncode\n`````"
        assert ensure_closed_markdown_fences(source) == source

    def test_shorter_run_does_not_close(self) -> None:
        assert ensure_closed_markdown_fences("````\ncode\n```") == "````\ncode\n```\n````"

    def test_other_marker_does_not_close(self) -> None:
        assert ensure_closed_markdown_fences("```\n~~~") == "```\n~~~\n```"

    def test_indented_opening(self) -> None:
        assert ensure_closed_markdown_fences("  ```\ncode") == "  ```\ncode\n```"

    def test_second_block_left_open(self) -> None:
        source = "```\na\n```\n\n```py\nb"
        assert ensure_closed_markdown_fences(source) == source + "\n```"

    def test_two_backticks_are_not_a_fence(self) -> None:
        assert ensure_closed_markdown_fences("``\ncode") == "``\ncode"

    def test_empty(self) -> None:
        assert ensure_closed_markdown_fences("") == ""

    def test_find_open_fence(self) -> None:
        assert find_open_fence("```\nx\n```") is None
        opening = find_open_fence("text\n~~~ math\nx")
        assert opening is not None
        assert opening.info == "math"


class TestFenceProperties:
    @given(st.text(alphabet="`~ ab\n", max_size=200))
    @settings(max_examples=200)
    def test_result_has_no_open_fence(self, source: str) -> None:
        assert find_open_fence(ensure_closed_markdown_fences(source)) is None

    @given(st.text(alphabet="`~ ab\n", max_size=200))
    @settings(max_examples=200)
    def test_idempotent(self, source: str) -> None:
        once = ensure_closed_markdown_fences(source)
        assert ensure_closed_markdown_fences(once) == once

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_only_appends(self, source: str) -> None:
        assert ensure_closed_markdown_fences(source).startswith(source)
