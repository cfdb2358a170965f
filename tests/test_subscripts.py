"""Tests for flashcard subscript wrapping."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pizarra.subscripts import wrap_subscripts


class TestWrapSubscripts:
    def test_wraps_bare_token_and_skips_command(self) -> None:
        assert wrap_subscripts("x_1 and \\theta_0") == "$x_1$ and \\theta_0"

    def test_wraps_several_tokens(self) -> None:
        assert wrap_subscripts("a_i + b_j = c_k") == "$a_i$ + $b_j$ = $c_k$"

    def test_letters_after_underscore(self) -> None:
        assert wrap_subscripts("v_max is fast") == "$v_max$ is fast"

    def test_non_ascii_word_characters(self) -> None:
        assert wrap_subscripts("α_1 and x_β") == "$α_1$ and $x_β$"
        assert wrap_subscripts("naïve_snake_case") == "naïve_snake_case"

    @pytest.mark.parametrize(
        "source",
        [
            "$x_1$",
            "$a + x_1$",
            "$$x_1 + y_2$$",
            "\\(x_1\\)",
            "\\[x_1\\]",
            "`x_1`",
            "```\nx_1\n```",
            "snake_case_name",
            "__init__",
            "x_",
            "_1",
            "\\alpha_1",
        ],
    )
    def test_leaves_protected_tokens_alone(self, source: str) -> None:
        assert wrap_subscripts(source) == source

    def test_token_glued_to_math_is_left_alone(self) -> None:
        assert wrap_subscripts("$a$x_1") == "$a$x_1"
        assert wrap_subscripts("x_1$") == "x_1$"

    def test_escaped_dollar_is_not_math(self) -> None:
        assert wrap_subscripts("costs \\$5 for x_1") == "costs \\$5 for $x_1$"

    def test_prose_after_code_is_wrapped(self) -> None:
        assert wrap_subscripts("`code` then y_2") == "`code` then $y_2$"

    def test_empty(self) -> None:
        assert wrap_subscripts("") == ""

    @given(st.text(alphabet="xy_12 $`\\\n", max_size=100))
    @settings(max_examples=200)
    def test_idempotent(self, source: str) -> None:
        once = wrap_subscripts(source)
        assert wrap_subscripts(once) == once
