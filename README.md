# gestorecsv

A small tool for working with student roster CSV files. Each row of a roster links a
student to a course and a subject. You can load a roster, search it, hide duplicate
students, add or remove rows and write the result back to disk.

## Expected file format

The first line of the file must be exactly:

```
codice_corso,descrizione_corso,codice_materia,descrizione_materia,matricola_studente,cognome_studente,nome_studente
```

After that line, each non-empty line is one record. Fields are separated by commas and
are not quoted. The last field, the student's first name, takes the rest of the line.
If a file has the wrong header, loading fails with `FormatError` and the table is left
empty.

## Installing

```
pip install .
```

## Interactive use

```
gestorecsv [--path-file FILE]
```

The shell remembers the last file it opened in a path file (`path.txt` in the current
directory unless `--path-file` says otherwise) and reopens it at start-up. On `quit`, or
at end of input, a loaded table is saved back to the file it came from.

Commands:

| Command | What it does |
|---|---|
| `open PATH` | load a roster; the name must end in `.csv` |
| `search [TEXT]` | show only rows containing TEXT (case-insensitive) in the current filter column |
| `filter [COLUMN]` | with no argument, list the columns and mark the current one; otherwise choose the column searched |
| `duplicates [on\|off]` | hide or show repeated students, compared by first name and surname; with no argument, toggle |
| `add F1,F2,F3,F4,F5,F6,F7` | append a row given as seven comma-separated fields |
| `remove N` | delete row N; the rows after it move up one number |
| `show` | print the visible rows with their numbers, the student count and the subject count |
| `save` | write the table back to its file |
| `quit` | save and exit |

The column names for `filter` are `Tutti` (all columns), `Codice Corso`, `Corso`,
`Materia`, `Codice Materia`, `Matricola`, `Cognome` and `Nome`, matched without regard
to case. The names of the `Column` members (`ALL`, `COURSE_CODE`, ...) are accepted too.

A new row is accepted only when every field is non-empty and its subject code and
subject name already appear together in the table (compared case-insensitively, ignoring
surrounding spaces). Each field is stored in title case, with runs of spaces collapsed.

Messages are in Italian, as are the labels `Studenti (duplicati): N` /
`Studenti (non duplicati): N` and `Materie per corso: N`.

## Use as a library

```python
from gestorecsv.table import Column, Record, StudentTable

table = StudentTable()
table.load("roster.csv")
table.set_filter(Column.SURNAME)
table.search("rossi")
table.enable_duplicate_filter()
print(table.student_label())
print(table.subject_label())
for number, record in table.visible_rows():
    print(number, record.full_name())
table.save()
```

`Record.from_line` and `Record.to_line` convert between a record and a data line;
`title_case` is the function applied to added rows. `read_remembered_path` and
`remember_path` read and write the path file used by the shell.

Problems are reported as subclasses of `GestoreError`: `FormatError`,
`EmptyTableError`, `ValidationError` and `RowNotFoundError`. A file that cannot be
opened raises `OSError`.

## What it does not do

There is no graphical window: the package offers the table as a library and a
line-based command shell only. Fields containing commas or quotes are not supported,
since the file is split on every comma.

## Running the tests

```
pip install .[test]
pytest
```