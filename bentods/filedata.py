"""Whole-file loading into memory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_log = logging.getLogger(__name__)


class FileDataError(Exception):
    """A file could not be loaded."""


def _read(filename: str | os.PathLike[str]) -> bytes:
    if not filename or not str(filename):
        raise FileDataError("FileData: empty filename")
    try:
        content = Path(filename).read_bytes()
    except OSError as exc:
        raise FileDataError(f"FileData: open failed, {filename}") from exc
    if not content:
        raise FileDataError(f"FileData: file is empty, {filename}")
    return content


class FileData:
    """The complete contents of one file, held in memory."""

    def __init__(self, filename: str | os.PathLike[str] | None = None) -> None:
        self.data: bytes | None = None
        if filename is not None:
            self.load(filename)

    @property
    def length(self) -> int:
        """Number of bytes held, zero when nothing is loaded."""
        return len(self.data) if self.data is not None else 0

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Read the whole file, replacing anything loaded before."""
        if self.is_valid():
            self.unload()
        try:
            self.data = _read(filename)
        except FileDataError as exc:
            _log.error("%s", exc)
            _log.debug("FileData: load failed, %s", filename)
            self.unload()
            raise
        _log.debug("FileData: load success, %s", filename)

    def unload(self) -> None:
        """Release the loaded contents."""
        self.data = None

    def is_valid(self) -> bool:
        return self.data is not None