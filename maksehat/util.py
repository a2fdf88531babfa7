"""Validation, identifier generation, question selection and scoring."""

from __future__ import annotations

import calendar
import random
import re
from collections.abc import Iterable
from datetime import datetime, timezone

from maksehat.datastore import DataStore
from maksehat.models import Answer, Question

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_default_rng = random.Random()


class ValidationError(ValueError):
    """Raised when user input does not satisfy the expected format."""


class UserNotFoundError(LookupError):
    """Raised when no saved assessment belongs to the given user name."""


def to_lower_case(text: str) -> str:
    return text.lower()


def to_upper_case(text: str) -> str:
    return text.upper()


def validate_string_input(text: str) -> None:
    """Accept only letters separated by single spaces, without leading or trailing spaces."""
    if not text.strip():
        raise ValidationError("input tidak boleh kosong")
    if text[0] == " " or text[-1] == " ":
        raise ValidationError("tidak boleh diawali atau diakhiri dengan spasi")
    prev_space = False
    for char in text:
        if char == " ":
            if prev_space:
                raise ValidationError("tidak boleh mengandung spasi ganda")
            prev_space = True
        else:
            if not char.isalpha():
                raise ValidationError("harus huruf")
            prev_space = False


def _parse_int(text: str) -> int | None:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def validate_int_input(text: str) -> int:
    """Check that the text is a decimal integer and return its value."""
    if not text.strip():
        raise ValidationError("tidak boleh kosong")
    value = _parse_int(text)
    if value is None:
        raise ValidationError("harus angka integer")
    return value


def _score_band(score: int) -> int:
    if score >= 85:
        return 1
    if score >= 70:
        return 2
    if score >= 55:
        return 3
    if score >= 40:
        return 4
    return 5


def generate_assessment_id(store: DataStore, date: datetime, score: int) -> str:
    """Build an ID of the form A<yy><mm><band><nnnn>."""
    year = date.year % 100
    month = date.month
    band = _score_band(score)

    if store.assessments:
        current = f"{year}{month:02d}"
        max_count = 0
        for saved in store.assessments:
            if f"{saved.date.year}{saved.date.month:02d}" == current:
                count = _parse_int(saved.assessment_id[4:]) or 0
                max_count = max(max_count, count)
        new_count = max_count + 1
    else:
        new_count = 1

    return f"A{year}{month:02d}{band}{new_count:04d}"


def generate_user_id(rng: random.Random | None = None) -> str:
    """Build a user ID from the current year and a random number 1-9999."""
    rng = rng or _default_rng
    year = generate_date(rng).year % 100
    count = rng.randrange(9999) + 1
    return f"{year}0612{count:04d}"


def get_user_id(store: DataStore, name: str) -> str:
    """Return the user ID of the first saved assessment with this user name."""
    for assessment in store.assessments:
        if assessment.user_name == name:
            return assessment.user_id
    raise UserNotFoundError("pengguna tidak ditemukan")


def generate_date(rng: random.Random | None = None) -> datetime:
    """Return a UTC date in the current year on a random month and day, at the current time."""
    rng = rng or _default_rng
    now = datetime.now()
    month = rng.randrange(12) + 1
    days = calendar.monthrange(now.year, month)[1]
    day = rng.randrange(days) + 1
    return datetime(
        now.year, month, day, now.hour, now.minute, now.second, tzinfo=timezone.utc
    )


def select_questions(
    store: DataStore, n: int, rng: random.Random | None = None
) -> list[Question]:
    """Fill the store's selection with random distinct questions until it holds n."""
    rng = rng or _default_rng
    available = {q.question_id for q in store.question_bank}
    available.update(q.question_id for q in store.selected_questions)
    if n > len(available):
        raise ValueError(
            f"cannot select {n} distinct questions from {len(available)} available"
        )
    while len(store.selected_questions) < n:
        candidate = store.question_bank[rng.randrange(len(store.question_bank))]
        used = any(q.question_id == candidate.question_id for q in store.selected_questions)
        if not used:
            store.selected_questions.append(
                Question(candidate.question_id, candidate.question_text)
            )
    return store.selected_questions


def reset_selected_questions(store: DataStore) -> None:
    store.selected_questions = []


def score_calculation(answers: Iterable[Answer]) -> int:
    """Sum (6 - answer) * 2 over all answers."""
    return sum((6 - a.answer) * 2 for a in answers)


def categorization(score: int) -> str:
    if score >= 85:
        return "Stabil"
    if score >= 70:
        return "Cukup Stabil"
    if score >= 55:
        return "Tidak Stabil"
    if score >= 40:
        return "Depresi Ringan"
    return "Depresi Berat"