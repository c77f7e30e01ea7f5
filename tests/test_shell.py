import io
import sys

import pytest

from gestorecsv.shell import GestoreShell, main
from gestorecsv.table import HEADER, StudentTable

ROWS = [
    "C1,Informatica,M1,Analisi,1001,Rossi,Mario",
    "C1,Informatica,M2,Fisica,1002,Bianchi,Anna",
    "C2,Matematica,M1,Analisi,1001,Rossi,Mario",
]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "studenti.csv"
    path.write_text(HEADER + "\n" + "\n".join(ROWS) + "\n", encoding="utf-8")
    return path


def make_shell(tmp_path):
    out = io.StringIO()
    shell = GestoreShell(StudentTable(), tmp_path / "path.txt", io.StringIO(), out)
    return shell, out


def test_open_rejects_other_extension(tmp_path):
    shell, out = make_shell(tmp_path)
    shell.onecmd("open dati.txt")
    assert "Il file deve essere un file CSV." in out.getvalue()
    assert len(shell.table) == 0


def test_open_rejects_short_name(tmp_path):
    shell, out = make_shell(tmp_path)
    shell.onecmd("open a")
    assert "Impossibile aprire il file CSV." in out.getvalue()


def test_open_missing_file(tmp_path):
    shell, out = make_shell(tmp_path)
    shell.onecmd(f"open {tmp_path / 'nope.csv'}")
    assert "Impossibile aprire il file CSV." in out.getvalue()
    assert not (tmp_path / "path.txt").exists()


def test_open_loads_and_remembers(tmp_path, csv_file):
    shell, out = make_shell(tmp_path)
    shell.onecmd(f"open {csv_file}")
    assert len(shell.table) == 3
    assert (tmp_path / "path.txt").read_text(encoding="utf-8") == str(csv_file)


def test_open_bad_header_reports_and_remembers(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("x,y\n", encoding="utf-8")
    shell, out = make_shell(tmp_path)
    shell.onecmd(f"open {bad}")
    assert "CSV non corrisponde al formato atteso." in out.getvalue()
    assert (tmp_path / "path.txt").read_text(encoding="utf-8") == str(bad)


def test_startup_reopens_remembered_file(tmp_path, csv_file):
    (tmp_path / "path.txt").write_text(str(csv_file), encoding="utf-8")
    shell, _ = make_shell(tmp_path)
    assert len(shell.table) == 3


def test_search_filter_and_duplicates(tmp_path, csv_file):
    shell, out = make_shell(tmp_path)
    shell.onecmd(f"open {csv_file}")
    shell.onecmd("duplicates on")
    assert shell.table.visible_count() == 2
    shell.onecmd("filter Cognome")
    shell.onecmd("search bianchi")
    assert [n for n, _ in shell.table.visible_rows()] == [2]
    shell.onecmd("duplicates off")
    assert shell.table.duplicates_enabled is False


def test_duplicates_on_empty_table(tmp_path):
    shell, out = make_shell(tmp_path)
    shell.onecmd("duplicates on")
    assert "File .csv non trovato." in out.getvalue()


def test_add_and_remove(tmp_path, csv_file):
    shell, out = make_shell(tmp_path)
    shell.onecmd(f"open {csv_file}")
    shell.onecmd("add c3,corso,m2,fisica,1004,verdi,luca")
    assert len(shell.table) == 4
    assert shell.table.records[-1].name == "Luca"
    shell.onecmd("remove 1")
    assert len(shell.table) == 3
    shell.onecmd("remove 9")
    assert "Elemento non trovato" in out.getvalue()


def test_empty_line_does_not_repeat(tmp_path, csv_file):
    shell, _ = make_shell(tmp_path)
    shell.onecmd(f"open {csv_file}")
    shell.onecmd("remove 1")
    shell.onecmd("")
    assert len(shell.table) == 2


def test_quit_saves(tmp_path, csv_file):
    shell, _ = make_shell(tmp_path)
    shell.onecmd(f"open {csv_file}")
    shell.onecmd("remove 3")
    assert shell.onecmd("quit") is True
    assert csv_file.read_text(encoding="utf-8").splitlines() == [HEADER] + ROWS[:2]


def test_main_runs_commands(tmp_path, csv_file, monkeypatch, capsys):
    path_file = tmp_path / "path.txt"
    path_file.write_text(str(csv_file), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("show\nquit\n"))
    assert main(["--path-file", str(path_file)]) == 0
    output = capsys.readouterr().out
    assert "Materie per corso: " in output
    assert "Bianchi" in output