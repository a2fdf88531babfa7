"""Data records for questions, answers and completed assessments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Question:
    """A questionnaire item identified by a short code such as ``Q01``."""

    question_id: str
    question_text: str


@dataclass(frozen=True)
class Answer:
    """A user's Likert-scale answer (1-5) to one question."""

    question_id: str
    answer: int


@dataclass
class Assessment:
    """A completed self-assessment with its score and category."""

    assessment_id: str
    date: datetime
    user_id: str
    user_name: str
    answers: list[Answer] = field(default_factory=list)
    total_score: int = 0
    category: str = ""