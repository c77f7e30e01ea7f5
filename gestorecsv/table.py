"""Student enrolment table backed by a CSV file."""

from __future__ import annotations

import os
from dataclasses import astuple, dataclass
from enum import Enum
from typing import Optional

HEADER = (
    "codice_corso,descrizione_corso,codice_materia,descrizione_materia,"
    "matricola_studente,cognome_studente,nome_studente"
)
FIELD_COUNT = 7
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class GestoreError(Exception):
    """Base class for table errors."""


class FormatError(GestoreError):
    """The CSV file does not have the expected header."""

    def __init__(self, message: str = "CSV non corrisponde al formato atteso.") -> None:
        super().__init__(message)


class EmptyTableError(GestoreError):
    """An operation needs a loaded, non-empty table."""

    def __init__(self, message: str = "File .csv non trovato.") -> None:
        super().__init__(message)


class ValidationError(GestoreError):
    """A new record was rejected."""


class RowNotFoundError(GestoreError):
    """The requested row does not exist."""

    def __init__(self, message: str = "Elemento non trovato") -> None:
        super().__init__(message)


class Column(Enum):
    """Search filters, by their display names."""

    ALL = "Tutti"
    COURSE_CODE = "Codice Corso"
    COURSE = "Corso"
    SUBJECT = "Materia"
    SUBJECT_CODE = "Codice Materia"
    STUDENT_ID = "Matricola"
    SURNAME = "Cognome"
    NAME = "Nome"

    @property
    def field(self) -> Optional[str]:
        """Name of the record attribute searched by this filter, or None for all."""
        return _COLUMN_FIELDS[self]


_COLUMN_FIELDS = {
    Column.ALL: None,
    Column.COURSE_CODE: "course_code",
    Column.COURSE: "course_name",
    Column.SUBJECT: "subject_code",
    Column.SUBJECT_CODE: "subject_name",
    Column.STUDENT_ID: "student_id",
    Column.SURNAME: "surname",
    Column.NAME: "name",
}


@dataclass(frozen=True)
class Record:
    """One row of the table."""

    course_code: str
    course_name: str
    subject_code: str
    subject_name: str
    student_id: str
    surname: str
    name: str

    @classmethod
    def from_line(cls, line: str) -> "Record":
        """Parse a data line; the last field takes the rest of the line.

        When the line runs out of fields, the missing ones repeat the last
        field read.
        """
        parts = line.split(",", FIELD_COUNT - 1)
        parts += [parts[-1]] * (FIELD_COUNT - len(parts))
        return cls(*parts)

    def to_line(self) -> str:
        return ",".join(self.fields())

    def fields(self) -> tuple[str, ...]:
        return astuple(self)

    def full_name(self) -> str:
        return f"{self.name.strip()} {self.surname.strip()}"

    def matches(self, text: str, column: Column = Column.ALL) -> bool:
        """Case-insensitive substring match on one column or on all of them."""
        needle = text.casefold()
        if column.field is None:
            return any(needle in value.casefold() for value in self.fields())
        return needle in getattr(self, column.field).casefold()


def title_case(text: str) -> str:
    """Lower-case the text, capitalise each word and collapse runs of spaces."""
    words = [word for word in text.lower().split(" ") if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def read_remembered_path(path_file) -> Optional[str]:
    """Return the first line of the path file, or None if it cannot be read."""
    try:
        with open(path_file, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            return handle.read().split("\n", 1)[0]
    except OSError:
        return None


def remember_path(path_file, path) -> None:
    with open(path_file, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        handle.write(os.fspath(path))


class StudentTable:
    """Rows of a student CSV with search, column filter and duplicate hiding."""

    def __init__(self) -> None:
        self._records: list[Record] = []
        self._hidden: list[bool] = []
        self.path: Optional[str] = None
        self.column = Column.ALL
        self.search_text = ""
        self.duplicates_enabled = False

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def load(self, path) -> None:
        """Replace the contents with the rows of a CSV file.

        Raises OSError if the file cannot be opened and FormatError if its
        header is wrong; in the latter case the table is left empty.
        """
        with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            self.path = os.fspath(path)
            self._records.clear()
            self._hidden.clear()
            header, *rows = handle.read().split("\n")
        if header != HEADER:
            raise FormatError()
        for row in rows:
            if row:
                self._records.append(Record.from_line(row))
                self._hidden.append(False)
        self.duplicates_enabled = False

    def save(self, path=None) -> None:
        target = path if path is not None else self.path
        if target is None:
            raise GestoreError("Nessun file CSV caricato.")
        with open(target, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
            handle.write(HEADER + "\n")
            for record in self._records:
                handle.write(record.to_line() + "\n")

    def search(self, text: str) -> None:
        """Show only rows matching the text in the current filter column."""
        self.search_text = text
        self._hidden = [not record.matches(text, self.column) for record in self._records]
        if self.duplicates_enabled:
            self._hide_duplicates()

    def set_filter(self, column: Column) -> None:
        self.column = column
        self.search(self.search_text)

    def enable_duplicate_filter(self) -> None:
        if not self._records:
            raise EmptyTableError()
        self._hide_duplicates()
        self.duplicates_enabled = True

    def disable_duplicate_filter(self) -> None:
        if not self._records:
            raise EmptyTableError()
        self.duplicates_enabled = False
        self.search(self.search_text)

    def _hide_duplicates(self) -> None:
        seen: set[str] = set()
        for index, record in enumerate(self._records):
            if self._hidden[index]:
                continue
            key = record.full_name()
            if key in seen:
                self._hidden[index] = True
            else:
                seen.add(key)

    def add(self, record: Record) -> Record:
        """Append a title-cased copy of the record and return it.

        The record's subject code and name must already appear together in
        the table.
        """
        if not self._records:
            raise EmptyTableError()
        if not all(record.fields()):
            raise ValidationError("Tutti i campi devono essere riempiti.")
        code = record.subject_code.strip().casefold()
        name = record.subject_name.strip().casefold()
        if not any(
            existing.subject_code.strip().casefold() == code
            and existing.subject_name.strip().casefold() == name
            for existing in self._records
        ):
            raise ValidationError("Questa materia o il codice materia non esistono.")
        added = Record(*(title_case(value) for value in record.fields()))
        self._records.append(added)
        self._hidden.append(False)
        return added

    def remove(self, row: int) -> Record:
        """Remove and return the record at a zero-based row index."""
        if not 0 <= row < len(self._records):
            raise RowNotFoundError()
        del self._hidden[row]
        return self._records.pop(row)

    def visible_rows(self) -> list[tuple[int, Record]]:
        """Visible rows with their one-based row numbers."""
        return [
            (number, record)
            for number, (record, hidden) in enumerate(zip(self._records, self._hidden), 1)
            if not hidden
        ]

    def visible_count(self) -> int:
        return self._hidden.count(False)

    def subject_count(self) -> int:
        """Number of distinct non-blank subject names among visible rows."""
        return len({
            record.subject_name.strip()
            for _, record in self.visible_rows()
            if record.subject_name.strip()
        })

    def student_label(self) -> str:
        kind = "non duplicati" if self.duplicates_enabled else "duplicati"
        return f"Studenti ({kind}): {self.visible_count()}"

    def subject_label(self) -> str:
        return f"Materie per corso: {self.subject_count()}"