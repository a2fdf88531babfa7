"""Interactive text interface for taking and listing assessments."""

from __future__ import annotations

import random
import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from maksehat.datastore import DataStore
from maksehat.models import Answer
from maksehat.service import add_assessment
from maksehat.util import (
    UserNotFoundError,
    ValidationError,
    generate_user_id,
    get_user_id,
    reset_selected_questions,
    select_questions,
    to_lower_case,
    to_upper_case,
    validate_int_input,
    validate_string_input,
)

QUESTION_COUNT = 10

_MENU_RULE = "=" * 57
_VERIFY_RULE = "=" * 64
_QUESTIONNAIRE_RULE = "=" * 75
_QUESTIONNAIRE_LINE = "-" * 75


def yes_no_validation(text: str) -> str:
    """Return the text if it is exactly "y" or "n", otherwise raise ValidationError."""
    validate_string_input(text)
    if text not in ("y", "n"):
        raise ValidationError("input harus y/n")
    return text


def clear_console() -> None:
    """Clear the terminal using the platform's clear command."""
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class Cli:
    """Menu-driven console session over a data store."""

    def __init__(
        self,
        store: DataStore | None = None,
        rng: random.Random | None = None,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.store = store if store is not None else DataStore()
        self.rng = rng or random.Random()
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output if output is not None else sys.stdout
        self._clear = clear if clear is not None else clear_console

    def _print(self, *lines: str) -> None:
        for line in lines or ("",):
            print(line, file=self._out)

    def _prompt(self, text: str) -> None:
        print(text, end="", file=self._out)
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.strip()

    def _read_int(self) -> int:
        text = self._read_line()
        try:
            return validate_int_input(text)
        except ValidationError:
            raise ValidationError("harus angka") from None

    def _press_enter(self) -> None:
        self._print("Tekan ENTER untuk melanjutkan ...")
        self._prompt("\033[?25l")
        self._in.readline()
        self._prompt("\033[?25h")

    def _show_error(self, error: Exception) -> None:
        self._print("", f"  Error: {error}", "")

    def _show_menu(self) -> None:
        for saved in self.store.assessments:
            self._print(
                saved.assessment_id,
                saved.date.strftime("%d-%m-%Y"),
                saved.user_id,
                saved.user_name,
            )
            self._print("".join(f"{a.question_id}, " for a in saved.answers))
            self._print("".join(f"{a.answer}, " for a in saved.answers))
            self._print(str(saved.total_score), saved.category)
        self._print(
            _MENU_RULE,
            "               SELAMAT DATANG di makSehat",
            "  Aplikasi Manajemen Kesehatan Mental - Self Assessment",
            _MENU_RULE,
            "",
            "1. Kerjakan Assessment",
            "2. Perbaiki Data Assessment",
            "3. Hapus Data Assessment",
            "4. Tampilkan Data Assessment",
            "5. Cari Data Assessment",
            "6. Urutkan Data Assessment",
            "7. Laporan Ringkasan",
            "8. Keluar",
            "",
            "-" * 57,
        )
        self._prompt("Pilih menu [1-8]: ")

    def _show_verification_header(self) -> None:
        self._print(
            _VERIFY_RULE,
            "                    VERIFIKASI DATA PENGGUNA",
            _VERIFY_RULE,
            "",
            "Silakan verifikasi diri Anda sebelum mengisi kuesioner.",
            "",
        )

    def _show_questionnaire_header(self) -> None:
        self._print(
            _QUESTIONNAIRE_RULE,
            "                    KUESIONER KESEHATAN MENTAL makSehat",
            _QUESTIONNAIRE_RULE,
            "",
            "Petunjuk pengisian kuesioner:",
            "",
            "Anda akan diminta untuk menjawab 10 pertanyaan",
            "menggunakan skala Likert 1-5 dengan ketentuan sebagai berikut:",
            "",
            "1 = Tidak Pernah",
            "2 = Jarang",
            "3 = Kadang-kadang",
            "4 = Sering",
            "5 = Selalu",
            "",
            "Contoh penggunaan skala:",
            "Seberapa sering Anda merasa cemas akhir-akhir ini?",
            "Jawaban : 5",
            "",
            _QUESTIONNAIRE_LINE,
        )

    def run(self) -> None:
        """Show the main menu until the user chooses to quit or input ends."""
        try:
            while True:
                self._clear()
                self._show_menu()
                try:
                    choice = self._read_int()
                except ValidationError:
                    choice = 0
                if choice == 1:
                    self.add_assessment()
                elif 2 <= choice <= 7:
                    continue
                elif choice == 8:
                    self._print(
                        "",
                        "Program selesai, semua data yang belum disimpan telah dihapus.",
                        "",
                    )
                    return
                else:
                    self._print("", "Pilihan tidak valid, coba lagi.", "")
                    self._press_enter()
        except EOFError:
            return

    def _ask_new_user(self) -> str:
        while True:
            self._prompt("- Apakah Anda adalah pengguna baru? (y/n): ")
            answer = to_lower_case(self._read_line())
            try:
                return yes_no_validation(answer)
            except ValidationError as error:
                self._show_error(error)

    def _ask_identity(self, is_new_user: bool) -> tuple[str, str] | None:
        failures = 0
        while True:
            self._prompt("- Masukkan nama lengkap Anda: ")
            name = self._read_line()
            try:
                validate_string_input(name)
            except ValidationError as error:
                self._show_error(error)
                continue
            if is_new_user:
                return name, generate_user_id(self.rng)
            try:
                return name, get_user_id(self.store, to_upper_case(name))
            except UserNotFoundError as error:
                self._show_error(error)
                failures += 1
                if failures > 2:
                    self._clear()
                    self._print("", "Yuh koh kelalen jenenge dewek wkwkwk", "")
                    self._press_enter()
                    return None

    def _ask_answer(self, indent: str) -> int:
        while True:
            self._prompt(f"{indent}Jawabanmu: ")
            try:
                value = self._read_int()
            except ValidationError as error:
                self._print(f"{indent}Error: Jawaban {error}")
                continue
            if not 1 <= value <= 5:
                self._print(f"{indent}Error: Jawaban harus diantara 1-5!")
                continue
            return value

    def add_assessment(self) -> None:
        """Verify the user, ask the questionnaire and save the result."""
        self._clear()
        self._show_verification_header()

        is_new_user = self._ask_new_user() == "y"
        self._print()

        identity = self._ask_identity(is_new_user)
        if identity is None:
            return
        name, user_id = identity

        self._print()
        self._press_enter()
        self._clear()
        self._show_questionnaire_header()
        self._print()

        questions = select_questions(self.store, QUESTION_COUNT, self.rng)
        answers: list[Answer] = []
        for number, question in enumerate(questions[:QUESTION_COUNT], start=1):
            self._print(f"{number}. {question.question_text}")
            indent = "   " if number < QUESTION_COUNT else "    "
            answers.append(Answer(question.question_id, self._ask_answer(indent)))
            self._print()

        add_assessment(self.store, name, user_id, answers, self.rng)

        reset_selected_questions(self.store)
        self._print(_QUESTIONNAIRE_LINE, "", "Jawaban berhasil disimpan!", "")
        self._press_enter()