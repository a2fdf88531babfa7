import random

from maksehat.datastore import DataStore
from maksehat.models import Answer
from maksehat.service import add_assessment
from maksehat.util import categorization, score_calculation


def _answers(value):
    return [Answer(f"Q{i:02d}", value) for i in range(1, 11)]


def test_add_assessment_appends_to_store():
    store = DataStore()
    result = add_assessment(store, "Budi Santoso", "2406120001", _answers(3), random.Random(1))
    assert store.assessments == [result]


def test_add_assessment_uppercases_name_and_keeps_user_id():
    store = DataStore()
    result = add_assessment(store, "Budi Santoso", "2406120001", _answers(2), random.Random(2))
    assert result.user_name == "Budi Santoso".upper()
    assert result.user_id == "2406120001"


def test_add_assessment_score_and_category_consistent():
    store = DataStore()
    answers = _answers(1)
    result = add_assessment(store, "Ani", "u1", answers, random.Random(3))
    assert result.total_score == score_calculation(answers)
    assert result.category == categorization(result.total_score)
    assert result.answers == answers


def test_add_assessment_id_matches_date():
    store = DataStore()
    result = add_assessment(store, "Ani", "u1", _answers(4), random.Random(4))
    assert result.assessment_id.startswith("A")
    assert result.assessment_id[1:3] == f"{result.date.year % 100}"
    assert result.assessment_id[3:5] == f"{result.date.month:02d}"
    assert result.assessment_id[5] in "12345"


def test_first_assessment_has_count_one():
    store = DataStore()
    result = add_assessment(store, "Ani", "u1", _answers(5), random.Random(5))
    assert result.assessment_id.endswith("0001")


def test_add_assessment_accepts_generator():
    store = DataStore()
    result = add_assessment(store, "Ani", "u1", (a for a in _answers(3)), random.Random(6))
    assert len(result.answers) == 10