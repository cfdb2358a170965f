"""Tests for quiz and practice-problem extraction."""

from pizarra.sections import (
    PracticeProblem,
    extract_practice_problems,
    extract_quiz_section,
)


class TestExtractQuizSection:
    def test_collects_questions_and_drops_details(self) -> None:
        source = (
            "Body\n## Quiz\n1. Q1\ncontinued\n- Q2\n"
            "<details>answers</details>\n## Next\nMore"
        )
        section = extract_quiz_section(source)
        assert section.questions == ("Q1\ncontinued", "Q2")
        assert section.body == "Body\n\n## Next\nMore"

    def test_quiz_at_end(self) -> None:
        section = extract_quiz_section("Intro\n\n## Quiz Time\n1. A?\n2. B?\n")
        assert section.questions == ("A?", "B?")
        assert section.body == "Intro"

    def test_lines_before_first_item_ignored(self) -> None:
        section = extract_quiz_section("## Quiz\nAnswer these:\n1. A?")
        assert section.questions == ("A?",)

    def test_no_quiz(self) -> None:
        section = extract_quiz_section("Just text\r\nmore")
        assert section.questions == ()
        assert section.body == "Just text\nmore"

    def test_empty(self) -> None:
        section = extract_quiz_section("")
        assert section.questions == ()
        assert section.body == ""


class TestExtractPracticeProblems:
    def test_collects_problems(self) -> None:
        source = (
            ":::practice-problem\nP1\n:::\nS1\n"
            ":::practice-problem\nP2\n:::\nS2\n## After\nTail"
        )
        result = extract_practice_problems(source)
        assert result.problems == (
            PracticeProblem(problem="P1", solution="S1"),
            PracticeProblem(problem="P2", solution="S2"),
        )
        assert result.body == "## After\nTail"

    def test_removes_practice_section(self) -> None:
        result = extract_practice_problems("Intro\n## Practice Problems\nold stuff\n## Next\nText")
        assert result.problems == ()
        assert result.body == "Intro\n\n## Next\nText"

    def test_empty(self) -> None:
        result = extract_practice_problems("")
        assert result.problems == ()
        assert result.body == ""
