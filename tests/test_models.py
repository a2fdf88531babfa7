from datetime import datetime, timezone

import pytest

from maksehat.models import Answer, Assessment, Question


def test_question_fields_and_equality():
    q = Question("Q01", "Apa kabar?")
    assert q.question_id == "Q01"
    assert q.question_text == "Apa kabar?"
    assert q == Question("Q01", "Apa kabar?")
    assert q != Question("Q02", "Apa kabar?")


def test_answer_is_immutable():
    a = Answer("Q03", 4)
    with pytest.raises(AttributeError):
        a.answer = 5  # type: ignore[misc]
    assert a.answer == 4


def test_assessment_holds_answers():
    date = datetime(2025, 3, 4, 10, 0, 0, tzinfo=timezone.utc)
    answers = [Answer("Q01", 1), Answer("Q02", 5)]
    a = Assessment("A250310001", date, "2506120001", "BUDI", answers, 12, "Stabil")
    assert a.answers == answers
    assert a.date.month == 3
    assert a.user_name == "BUDI"


def test_assessment_default_answers_not_shared():
    date = datetime(2025, 1, 1, tzinfo=timezone.utc)
    first = Assessment("A", date, "u1", "X")
    second = Assessment("B", date, "u2", "Y")
    first.answers.append(Answer("Q01", 2))
    assert second.answers == []
    assert len(first.answers) == 1