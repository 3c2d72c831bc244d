"""
Survey tallying and trivia scoring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from wedding.content import SurveyQuestion, TriviaQuestion
from wedding.db import SurveyAnswerRecord, TriviaResultRecord
from wedding.errors import ValidationFailedError


def same_guest(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


def validate_survey_answers(
    questions: Sequence[SurveyQuestion], answers: Mapping[int, str]
) -> dict[int, str]:
    """Every question must be answered with one of its own options."""
    validated: dict[int, str] = {}
    for question in questions:
        answer = answers.get(question.id)
        if answer is None:
            raise ValidationFailedError("Please answer every question.")
        if answer not in question.options:
            raise ValidationFailedError(
                f"Invalid option for question {question.id}: {answer!r}"
            )
        validated[question.id] = answer
    unknown = set(answers) - {q.id for q in questions}
    if unknown:
        raise ValidationFailedError(f"Unknown questions: {sorted(unknown)}")
    return validated


def answers_by_guest(
    answers: Iterable[SurveyAnswerRecord], guest_name: str
) -> dict[int, str]:
    return {
        a.question_id: a.answer for a in answers if same_guest(a.guest_name, guest_name)
    }


@dataclass
class OptionResult:
    option: str
    votes: int
    percent: int


@dataclass
class QuestionResult:
    question_id: int
    question: str
    total: int
    options: list[OptionResult] = field(default_factory=list)


def tally_survey(
    questions: Sequence[SurveyQuestion], answers: Iterable[SurveyAnswerRecord]
) -> list[QuestionResult]:
    counts: dict[int, dict[str, int]] = {}
    for answer in answers:
        per_question = counts.setdefault(answer.question_id, {})
        per_question[answer.answer] = per_question.get(answer.answer, 0) + 1

    results = []
    for question in questions:
        per_question = counts.get(question.id, {})
        total = sum(per_question.values())
        results.append(
            QuestionResult(
                question_id=question.id,
                question=question.question,
                total=total,
                options=[
                    OptionResult(
                        option=option,
                        votes=per_question.get(option, 0),
                        percent=0
                        if total == 0
                        else round(per_question.get(option, 0) / total * 100),
                    )
                    for option in question.options
                ],
            )
        )
    return results


def score_trivia(
    questions: Sequence[TriviaQuestion], answers: Mapping[int, int]
) -> tuple[int, dict[int, bool]]:
    """Return the score and a per-question correctness map; unanswered is wrong."""
    correctness = {q.id: answers.get(q.id) == q.answer for q in questions}
    unknown = set(answers) - set(correctness)
    if unknown:
        raise ValidationFailedError(f"Unknown questions: {sorted(unknown)}")
    return sum(correctness.values()), correctness


def leaderboard(results: Iterable[TriviaResultRecord]) -> list[TriviaResultRecord]:
    return sorted(results, key=lambda r: (-r.score, r.created_at))
