from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DIRECTORY = "data"
DEFAULT_EXTENSION = ".rce"


def normalize_extension(ext: str) -> str:
    ext = (ext or "").strip()
    if not ext:
        return DEFAULT_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class DatebookConfig:
    directory: Path = field(default_factory=lambda: Path(DEFAULT_DIRECTORY))
    extension: str = DEFAULT_EXTENSION      # entry file suffix, leading dot included

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory", Path(self.directory).expanduser())
        object.__setattr__(self, "extension", normalize_extension(self.extension))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DatebookConfig":
        """Reads DATEBOOK_DIR / DATEBOOK_EXT, falling back to the defaults."""
        env = os.environ if environ is None else environ
        return cls(
            directory=Path(env.get("DATEBOOK_DIR") or DEFAULT_DIRECTORY),
            extension=env.get("DATEBOOK_EXT") or DEFAULT_EXTENSION,
        )

    def replace(self, directory: Optional[str] = None, extension: Optional[str] = None) -> "DatebookConfig":
        return DatebookConfig(
            directory=Path(directory) if directory else self.directory,
            extension=extension if extension else self.extension,
        )
