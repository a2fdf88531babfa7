"""In-memory storage for assessments and the question bank."""

from __future__ import annotations

from dataclasses import dataclass, field

from maksehat.models import Assessment, Question

QUESTION_BANK: tuple[Question, ...] = (
    Question("Q01", "Seberapa sering Anda merasa cemas atau gugup tanpa alasan yang jelas?"),
    Question("Q02", "Seberapa mudah Anda tertidur di malam hari?"),
    Question("Q03", "Seberapa sering Anda merasa lelah tanpa energi?"),
    Question("Q04", "Seberapa sering Anda menikmati aktivitas sehari-hari?"),
    Question("Q05", "Seberapa sering Anda merasa sulit berkonsentrasi?"),
    Question("Q06", "Seberapa sering Anda merasa dihargai oleh orang sekitar?"),
    Question("Q07", "Seberapa sering Anda merasa putus asa atau tidak ada harapan?"),
    Question("Q08", "Seberapa baik nafsu makan Anda belakangan ini?"),
    Question("Q09", "Seberapa sering Anda merasa puas dengan kehidupan Anda saat ini?"),
    Question("Q10", "Seberapa sering Anda berpikir untuk mencari bantuan profesional?"),
)


@dataclass
class DataStore:
    """Holds saved assessments, the question bank and the current question selection."""

    assessments: list[Assessment] = field(default_factory=list)
    question_bank: list[Question] = field(default_factory=lambda: list(QUESTION_BANK))
    selected_questions: list[Question] = field(default_factory=list)