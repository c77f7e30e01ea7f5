"""Interactive command shell for the student CSV table."""

from __future__ import annotations

import argparse
import cmd
from typing import Optional

from .table import (
    Column,
    FormatError,
    GestoreError,
    Record,
    StudentTable,
    read_remembered_path,
    remember_path,
)

PATH_FILE = "path.txt"
_CANNOT_OPEN = "Impossibile aprire il file CSV."


class GestoreShell(cmd.Cmd):
    """Command loop over a StudentTable; reopens the last file on start."""

    intro = "Gestore CSV"
    prompt = "gestore> "

    def __init__(self, table: Optional[StudentTable] = None, path_file=PATH_FILE,
                 stdin=None, stdout=None) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.table = table if table is not None else StudentTable()
        self.path_file = path_file
        remembered = read_remembered_path(path_file)
        if remembered is not None:
            self._load(remembered, report_missing=False)

    def _say(self, text: str) -> None:
        print(text, file=self.stdout)

    def _error(self, text) -> None:
        self._say(f"Errore: {text}")

    def _load(self, path: str, report_missing: bool) -> None:
        try:
            self.table.load(path)
        except FormatError as exc:
            self._remember(path)
            self._error(exc)
            return
        except OSError:
            if report_missing:
                self._error(_CANNOT_OPEN)
            return
        self._remember(path)
        self._say(self.table.student_label())

    def _remember(self, path: str) -> None:
        try:
            remember_path(self.path_file, path)
        except OSError:
            pass

    def emptyline(self) -> bool:
        return False

    def do_open(self, arg: str) -> None:
        """open PATH: load a CSV file."""
        if len(arg) < 4:
            self._error(_CANNOT_OPEN)
            return
        if not arg.endswith(".csv"):
            self._error("Il file deve essere un file CSV.")
            return
        self._load(arg, report_missing=True)

    def do_search(self, arg: str) -> None:
        """search [TEXT]: show rows containing TEXT in the current filter column."""
        self.table.search(arg)
        self._say(self.table.student_label())

    def do_filter(self, arg: str) -> None:
        """filter [NAME]: choose the searched column, or list the columns."""
        if not arg:
            for column in Column:
                marker = "*" if column is self.table.column else " "
                self._say(f"{marker} {column.value}")
            return
        wanted = arg.casefold()
        for column in Column:
            if wanted in (column.value.casefold(), column.name.casefold()):
                self.table.set_filter(column)
                self._say(self.table.student_label())
                return
        self._error(f"Filtro sconosciuto: {arg}")

    def do_duplicates(self, arg: str) -> None:
        """duplicates [on|off]: hide repeated students, or show them again."""
        mode = arg.casefold()
        if mode not in ("", "on", "off"):
            self._error(f"Valore non valido: {arg}")
            return
        enable = not self.table.duplicates_enabled if mode == "" else mode == "on"
        try:
            if enable:
                self.table.enable_duplicate_filter()
            else:
                self.table.disable_duplicate_filter()
        except GestoreError as exc:
            self._error(exc)
            return
        self._say(self.table.student_label())

    def do_add(self, arg: str) -> None:
        """add CODICE_CORSO,CORSO,CODICE_MATERIA,MATERIA,MATRICOLA,COGNOME,NOME"""
        values = arg.split(",")
        if len(self.table) and len(values) != 7:
            self._error("Tutti i campi devono essere riempiti.")
            return
        try:
            record = Record(*values) if len(values) == 7 else Record.from_line(arg)
            self.table.add(record)
        except GestoreError as exc:
            self._error(exc)
            return
        self._say(self.table.student_label())

    def do_remove(self, arg: str) -> None:
        """remove N: delete the row numbered N."""
        try:
            row = int(arg) - 1
            self.table.remove(row)
        except ValueError:
            self._error("Elemento non trovato")
            return
        except GestoreError as exc:
            self._error(exc)
            return
        self._say(self.table.student_label())

    def do_save(self, arg: str) -> None:
        """save: write the table back to its file."""
        try:
            self.table.save()
        except (GestoreError, OSError) as exc:
            self._error(exc)
            return
        self.stdout.write("\a")
        self.stdout.flush()

    def do_show(self, arg: str) -> None:
        """show: print the visible rows and the counters."""
        for number, record in self.table.visible_rows():
            self._say(f"{number:>4}  " + " | ".join(record.fields()))
        self._say(self.table.student_label())
        self._say(self.table.subject_label())

    def do_quit(self, arg: str) -> bool:
        """quit: save the loaded file and leave."""
        if self.table.path is not None:
            try:
                self.table.save()
            except OSError as exc:
                self._error(exc)
        return True

    do_EOF = do_quit


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="gestorecsv", description="Gestore CSV")
    parser.add_argument("--path-file", default=PATH_FILE,
                        help="file remembering the last opened CSV")
    args = parser.parse_args(argv)
    GestoreShell(path_file=args.path_file).cmdloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())