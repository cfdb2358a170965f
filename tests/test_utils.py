"""Tests for Pizarra utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_adds_prefix(self) -> None:
        from pizarra.utils.logger import get_logger

        assert get_logger("mymodule").name == "pizarra.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from pizarra.utils.logger import get_logger

        assert get_logger("pizarra.escapes").name == "pizarra.escapes"
        assert get_logger("pizarra").name == "pizarra"

    def test_returns_stdlib_logger(self) -> None:
        from pizarra.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_build_joins_parts(self) -> None:
        from pizarra.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append("").append("b").append_line("c")
        assert sb.build() == "abc\n"

    def test_ends_with_newline(self) -> None:
        from pizarra.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert not sb.ends_with_newline()
        sb.append("x\n")
        assert sb.ends_with_newline()
        sb.append("y")
        assert not sb.ends_with_newline()
        sb.append_line()
        assert sb.ends_with_newline()

    def test_bool_reflects_content(self) -> None:
        from pizarra.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert not sb
        sb.append("")
        assert not sb
        sb.append("x")
        assert sb
        assert len(sb) == 1
