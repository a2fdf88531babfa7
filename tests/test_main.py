import io
from unittest import mock

from maksehat.main import USAGE, gui_mode, main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == USAGE


def test_gui_mode_prints_in_progress(capsys):
    gui_mode()
    assert capsys.readouterr().out == "In Progress!\n"


def test_main_gui(capsys):
    main(["gui"])
    assert "In Progress!" in capsys.readouterr().out


def test_main_unknown_mode(capsys):
    main(["xyz"])
    assert "Perintah tidak dikenali: xyz" in capsys.readouterr().out


def test_main_cli_quits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    with mock.patch("maksehat.cli.subprocess.run") as run:
        main(["cli"])
    out = capsys.readouterr().out
    assert "Program selesai, semua data yang belum disimpan telah dihapus." in out
    assert run.call_count == 1