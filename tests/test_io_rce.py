from __future__ import annotations

import pytest

from datebook.config import DatebookConfig
from datebook.errors import DatebookError, ErrorKind
from datebook.io_rce import find_entry_files, load_directory, load_file, read_entry_lines
from datebook.models import PartialDate


GOOD_AND_BAD = """\
# family
person = Santa, CLAUS, St Nicholas ; 25,12 ; 06,12 ;
person = ; 25,12 ;

holiday = Summer ; 01,07 ; 31,08,2023
special = IMPORTANT ; 04,07,2023
"""


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_read_entry_lines_skips_comments_and_blanks(tmp_path):
    path = _write(tmp_path / "a.rce", GOOD_AND_BAD)
    numbers = [n for n, _ in read_entry_lines(path)]
    assert numbers == [2, 3, 5, 6]


def test_load_file_keeps_going_after_bad_lines(tmp_path):
    path = _write(tmp_path / "family.rce", GOOD_AND_BAD)
    result = load_file(path)

    assert [e.label for e in result.events] == [
        "Santa CLAUS birthday",
        "Santa CLAUS saint_day",
        "IMPORTANT",
    ]
    assert not result.ok
    kinds = [(p.kind, p.line) for p in result.problems]
    assert kinds == [
        (ErrorKind.MISSING_REQUIRED_FIELD, 3),
        (ErrorKind.MISSING_YEAR, 5),
    ]
    assert all(p.filename == str(path) for p in result.problems)
    assert "line 3" in str(result.problems[0])


def test_load_file_reports_unreadable_file(tmp_path):
    path = tmp_path / "broken.rce"
    path.write_bytes(b"special = X ; 1,1,2020\n\xff\xfe\xfa\n")
    result = load_file(path)
    assert result.events == []
    assert len(result.problems) == 1
    assert result.problems[0].kind is ErrorKind.UNREADABLE_FILE
    assert result.problems[0].kind.is_io


def test_find_entry_files_filters_by_extension(tmp_path):
    _write(tmp_path / "b.rce", "")
    _write(tmp_path / "a.rce", "")
    _write(tmp_path / "notes.txt", "")
    (tmp_path / "sub.rce").mkdir()

    paths = find_entry_files(DatebookConfig(directory=tmp_path))
    assert [p.name for p in paths] == ["a.rce", "b.rce"]

    txt = find_entry_files(DatebookConfig(directory=tmp_path, extension="txt"))
    assert [p.name for p in txt] == ["notes.txt"]


def test_find_entry_files_missing_directory(tmp_path):
    with pytest.raises(DatebookError) as info:
        find_entry_files(DatebookConfig(directory=tmp_path / "missing"))
    assert info.value.kind is ErrorKind.MISSING_DIRECTORY
    assert info.value.kind.is_io


def test_load_directory_merges_files_in_date_order(tmp_path):
    _write(tmp_path / "holidays.rce", "holiday = Easter ; 09,04,2023\nspecial = Launch ; 01,01,2023\n")
    _write(tmp_path / "other.rce", "special = Party ; 04,07,2023\nthis line is broken\n")

    result = load_directory(DatebookConfig(directory=tmp_path))
    assert [(e.label, e.date) for e in result.events] == [
        ("Launch", PartialDate(1, 1, 2023)),
        ("Easter", PartialDate(9, 4, 2023)),
        ("Party", PartialDate(4, 7, 2023)),
    ]
    assert [(p.kind, p.line) for p in result.problems] == [(ErrorKind.MALFORMED_LINE, 2)]


def test_load_directory_survives_span_on_last_supported_day(tmp_path):
    _write(tmp_path / "far.rce", "holiday = End ; 30,12,9999 ; 31,12,9999\nspecial = Party ; 04,07,2023\n")

    result = load_directory(DatebookConfig(directory=tmp_path))
    assert result.ok
    assert [e.label for e in result.events] == ["Party", "End", "End"]
