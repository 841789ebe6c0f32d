"""Concrete source: a plain text file.

The file is the terminal participant of every chain. It owns the backing
location; decorators only own the object they wrap.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.config import AppSettings
from core.interfaces.data_source import DataSource

logger = logging.getLogger(__name__)


class FileDataSource(DataSource):
    """Stores text in a single file, replacing its contents on every write.

    Text goes through without newline translation, so `read_data` returns
    exactly what `write_data` stored. I/O errors (`FileNotFoundError`,
    `IsADirectoryError`, `PermissionError`, ...) are raised to the caller.
    """

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @classmethod
    def from_settings(
        cls, settings: AppSettings | None = None, *, path: Path | None = None
    ) -> "FileDataSource":
        """Source at `settings.data_path`, or at `path` when given."""

        settings = settings or AppSettings()
        return cls(path or settings.data_path, encoding=settings.encoding)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def encoding(self) -> str:
        return self._encoding

    def write_data(self, text: str) -> None:
        logger.debug("Writing %d characters to %s", len(text), self._path)
        with open(self._path, "w", encoding=self._encoding, newline="") as fh:
            fh.write(text)

    def read_data(self) -> str:
        logger.debug("Reading %s", self._path)
        with open(self._path, "r", encoding=self._encoding, newline="") as fh:
            return fh.read()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"
