"""Pull quiz and practice-problem sections out of a lesson body.

Lessons sometimes carry their quiz and practice problems inline. The reader
shows those in dedicated widgets, so they are cut out of the body here and
returned separately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_QUIZ_SECTION_PATTERN = re.compile(
    r"(^|\n)##\s+Quiz[^\n]*\n(.*?)(?=\n##\s|\n<details|\Z)",
    re.IGNORECASE | re.DOTALL,
)
_QUIZ_ITEM_PATTERN = re.compile(r"^(?:\d+\.\s+|-+\s+)(.+)")
_DETAILS_PATTERN = re.compile(r"<details.*?</details>", re.IGNORECASE | re.DOTALL)

_PRACTICE_SECTION_PATTERN = re.compile(
    r"(^|\n)##\s+Practice Problems[^\n]*\n.*?(?=\n##\s|\Z)",
    re.IGNORECASE | re.DOTALL,
)
_PRACTICE_PROBLEM_PATTERN = re.compile(
    r":::practice-problem\s*\n(.*?)\n:::\s*\n(.*?)(?=\n:::practice-problem|\n##\s|\Z)",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class QuizSection:
    """Questions found under a ``## Quiz`` heading and the remaining body."""

    questions: tuple[str, ...]
    body: str


@dataclass(frozen=True, slots=True)
class PracticeProblem:
    problem: str
    solution: str


@dataclass(frozen=True, slots=True)
class PracticeProblems:
    """Practice problems cut from a lesson and the remaining body."""

    problems: tuple[PracticeProblem, ...]
    body: str


def _quiz_questions(block: str) -> tuple[str, ...]:
    """Group numbered or dashed lines (and their continuations) into questions."""
    questions: list[str] = []
    current: list[str] = []
    for raw_line in re.split(r"\n+", block):
        line = raw_line.strip()
        if not line:
            continue
        match = _QUIZ_ITEM_PATTERN.match(line)
        if match:
            if current:
                questions.append("\n".join(current).strip())
            current = [match.group(1)]
        elif current:
            current.append(line)
    if current:
        questions.append("\n".join(current).strip())
    return tuple(questions)


def extract_quiz_section(markdown: str) -> QuizSection:
    """Split the first ``## Quiz`` section out of a lesson.

    The quiz section runs until the next ``##`` heading, a ``<details>``
    block, or the end of the text. ``<details>`` blocks (usually the answer
    key) are dropped from the returned body as well.

    Example:
        >>> section = extract_quiz_section("Intro\\n## Quiz\\n1. What is 2+2?\\n")
        >>> section.questions
        ('What is 2+2?',)
        >>> section.body
        'Intro'
    """
    if not markdown:
        return QuizSection(questions=(), body="")

    normalized = markdown.replace("\r\n", "\n")
    match = _QUIZ_SECTION_PATTERN.search(normalized)
    if match is None:
        return QuizSection(questions=(), body=normalized)

    body = normalized[: match.start()] + normalized[match.end():]
    return QuizSection(
        questions=_quiz_questions(match.group(2)),
        body=_DETAILS_PATTERN.sub("", body).strip(),
    )


def extract_practice_problems(markdown: str) -> PracticeProblems:
    """Cut practice problems out of a lesson.

    Removes any ``## Practice Problems`` section, then collects every
    ``:::practice-problem`` container together with the solution text that
    follows its closing ``:::``.

    Example:
        >>> result = extract_practice_problems(
        ...     "Body\\n:::practice-problem\\nAdd 1 and 1.\\n:::\\nIt is 2."
        ... )
        >>> result.problems[0]
        PracticeProblem(problem='Add 1 and 1.', solution='It is 2.')
        >>> result.body
        'Body'
    """
    if not markdown:
        return PracticeProblems(problems=(), body="")

    normalized = markdown.replace("\r\n", "\n")
    normalized = _PRACTICE_SECTION_PATTERN.sub(r"\1", normalized)

    problems: list[PracticeProblem] = []
    parts: list[str] = []
    last = 0
    for match in _PRACTICE_PROBLEM_PATTERN.finditer(normalized):
        problem = match.group(1).strip()
        if problem:
            problems.append(PracticeProblem(problem=problem, solution=match.group(2).strip()))
        parts.append(normalized[last : match.start()])
        last = match.end()
    parts.append(normalized[last:])

    return PracticeProblems(problems=tuple(problems), body="".join(parts).strip())
