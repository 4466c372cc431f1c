from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import DatebookConfig
from .errors import DatebookError, ErrorKind
from .expand import expand
from .models import Event
from .parsing import parse_line, strip_comment

_LOGGER = logging.getLogger(__name__)


@dataclass
class LoadResult:
    events: List[Event] = field(default_factory=list)
    problems: List[DatebookError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems

    def merge(self, other: "LoadResult") -> None:
        self.events.extend(other.events)
        self.problems.extend(other.problems)


def sort_events(events: List[Event]) -> List[Event]:
    """Chronological order; year-less dates come first, by month and day."""
    return sorted(events, key=lambda e: (e.date.sort_key(), e.label))


def find_entry_files(config: DatebookConfig) -> List[Path]:
    """Regular files in the configured directory with the configured suffix."""
    directory = config.directory
    if not directory.is_dir():
        raise DatebookError(ErrorKind.MISSING_DIRECTORY, "could not read data folder", filename=str(directory))
    try:
        paths = [p for p in directory.iterdir() if p.is_file() and p.suffix == config.extension]
    except OSError as e:
        raise DatebookError(ErrorKind.MISSING_DIRECTORY, str(e), filename=str(directory)) from e
    return sorted(paths, key=lambda p: p.name)


def read_entry_lines(path: Path) -> Iterator[Tuple[int, str]]:
    """(line number, text) for every line holding something besides a comment."""
    try:
        # tolerant to a BOM at the start of the file
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DatebookError(ErrorKind.UNREADABLE_FILE, str(e), filename=str(path)) from e

    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not strip_comment(raw):
            _LOGGER.debug("%s:%d skipped", path, lineno)
            continue
        yield lineno, raw


def load_file(path: Path) -> LoadResult:
    """
    Parses and expands every entry of one file. A bad line is recorded with
    its location and the next line is processed; an I/O failure stops this
    file only.
    """
    result = LoadResult()
    try:
        for lineno, raw in read_entry_lines(path):
            try:
                entry = parse_line(raw)
                if entry is not None:
                    result.events.extend(expand(entry))
            except DatebookError as e:
                problem = e.at(str(path), lineno)
                _LOGGER.warning("%s", problem)
                result.problems.append(problem)
    except DatebookError as e:
        _LOGGER.warning("%s", e)
        result.problems.append(e)
    return result


def load_directory(config: DatebookConfig) -> LoadResult:
    """Loads every entry file of the configured directory, events sorted by date."""
    result = LoadResult()
    for path in find_entry_files(config):
        _LOGGER.info("found file \"%s\"", path)
        result.merge(load_file(path))
    result.events = sort_events(result.events)
    return result
