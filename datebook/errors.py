"""Error kinds raised while reading entry files.

All failures go through :class:`DatebookError`; the ``kind`` attribute tells
format problems (one bad line) apart from I/O problems (a whole file or the
data directory).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    # format layer
    MALFORMED_LINE = "MalformedLine"
    UNKNOWN_ENTRY_KIND = "UnknownEntryKind"
    INVALID_DATE_ARITY = "InvalidDateArity"
    INVALID_DATE_VALUE = "InvalidDateValue"
    UNEXPECTED_YEAR = "UnexpectedYear"
    MISSING_YEAR = "MissingYear"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    TOO_MANY_FIELDS = "TooManyFields"
    INVALID_RANGE = "InvalidRange"
    # I/O layer
    MISSING_DIRECTORY = "MissingDirectory"
    UNREADABLE_FILE = "UnreadableFile"

    @property
    def is_io(self) -> bool:
        return self in (ErrorKind.MISSING_DIRECTORY, ErrorKind.UNREADABLE_FILE)


class DatebookError(Exception):

    def __init__(
            self,
            kind: ErrorKind,
            message: Optional[str] = None,
            *,
            filename: Optional[str] = None,
            line: Optional[int] = None,
            text: Optional[str] = None,
    ) -> None:
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message
        self.filename = filename
        self.line = line
        self.text = text

    def at(self, filename: Optional[str], line: Optional[int] = None) -> "DatebookError":
        """Copy of this error located at ``filename``/``line``."""
        return DatebookError(
            self.kind,
            self.message,
            filename=filename,
            line=line,
            text=self.text,
        )

    def __str__(self) -> str:
        pieces = ["I/O error" if self.kind.is_io else "Parse error"]
        if self.filename is not None:
            pieces.append(f" in {self.filename!r}")
        if self.line is not None:
            pieces.append(f" at line {self.line}")
        pieces.append(f" [{self.kind.value}]")
        if self.message is not None:
            pieces.append(": ")
            pieces.append(self.message)
        if self.text is not None:
            pieces.append(": ")
            pieces.append(f"{self.text!r}")
        return "".join(pieces)
