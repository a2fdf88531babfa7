"""Operations that create and store assessments."""

from __future__ import annotations

import random
from collections.abc import Iterable

from maksehat.datastore import DataStore
from maksehat.models import Answer, Assessment
from maksehat.util import (
    categorization,
    generate_assessment_id,
    generate_date,
    score_calculation,
    to_upper_case,
)


def add_assessment(
    store: DataStore,
    name: str,
    user_id: str,
    answers: Iterable[Answer],
    rng: random.Random | None = None,
) -> Assessment:
    """Score the answers, build a new assessment, save it in the store and return it."""
    answers = list(answers)
    total_score = score_calculation(answers)
    date = generate_date(rng)
    assessment = Assessment(
        assessment_id=generate_assessment_id(store, date, total_score),
        date=date,
        user_id=user_id,
        user_name=to_upper_case(name),
        answers=answers,
        total_score=total_score,
        category=categorization(total_score),
    )
    store.assessments.append(assessment)
    return assessment