"""Loader for the 'sillyimg' image container."""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from enum import IntEnum

from .filedata import FileData, FileDataError

_log = logging.getLogger(__name__)

HEADER = 0x676D69796C6C6973
_METADATA = struct.Struct("<QBBBHHBI")
METADATA_SIZE = _METADATA.size


class ImageType(IntEnum):
    """Pixel layout of an image."""

    R8G8B8A8 = 0
    R5G5B5A1 = 1
    INDEXED_4 = 2  # 2bpp
    INDEXED_16 = 3  # 4bpp
    INDEXED_256 = 4  # 8bpp
    INDEXED_32_A3 = 5  # 5bpp, bits 5-7 alpha
    INDEXED_8_A5 = 6  # 3bpp, bits 3-7 alpha
    PALETTE_16 = 7
    INVALID = 8


class SillyImageError(Exception):
    """An image file could not be loaded."""


@dataclass(frozen=True)
class SillyImageMetadata:
    """The packed little-endian header at the start of an image file."""

    header: int = HEADER
    version: int = 0
    format: int = 0
    paletteid: int = 0
    width: int = 0
    height: int = 0
    compression: int = 0
    length: int = 0

    @classmethod
    def parse(cls, data: bytes) -> SillyImageMetadata:
        """Read the metadata from the start of a buffer."""
        if len(data) < METADATA_SIZE:
            raise SillyImageError(
                f"SillyImage: need {METADATA_SIZE} bytes of metadata, got {len(data)}"
            )
        return cls(*_METADATA.unpack_from(data))

    def pack(self) -> bytes:
        try:
            return _METADATA.pack(
                self.header,
                self.version,
                self.format,
                self.paletteid,
                self.width,
                self.height,
                self.compression,
                self.length,
            )
        except struct.error as exc:
            raise ValueError(f"metadata field out of range: {exc}") from exc


class SillyImage:
    """Pixel data and dimensions of a loaded image."""

    def __init__(self, filename: str | os.PathLike[str] | None = None) -> None:
        self.data: bytes | None = None
        self.width = 0
        self.height = 0
        self.paletteid = 0
        self.format = ImageType.INVALID
        self._original = FileData()
        if filename is not None:
            self.load(filename)

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Read and validate an image file."""
        try:
            self._original.load(filename)
            raw = self._original.data
            if len(raw) <= METADATA_SIZE:
                raise SillyImageError(f"SillyImage: length < metadata, {filename}")
            meta = SillyImageMetadata.parse(raw)
            if meta.header != HEADER:
                raise SillyImageError(f"SillyImage: invalid meta header, {filename}")
            if meta.version != 0:
                raise SillyImageError(f"SillyImage: invalid meta version, {filename}")
            if meta.format > ImageType.PALETTE_16:
                raise SillyImageError(f"SillyImage: invalid meta format, {filename}")
        except FileDataError as exc:
            _log.debug("SillyImage: load failed, %s", filename)
            self.unload()
            raise SillyImageError(f"SillyImage: load failed, {filename}") from exc
        except SillyImageError as exc:
            _log.error("%s", exc)
            _log.debug("SillyImage: load failed, %s", filename)
            self.unload()
            raise

        self.format = ImageType(meta.format)
        self.paletteid = meta.paletteid
        self.width = meta.width
        self.height = meta.height
        self.data = raw[METADATA_SIZE:]

    def unload(self) -> None:
        if self._original.is_valid():
            self._original.unload()
        self.data = None
        self.format = ImageType.INVALID
        self.width = 0
        self.height = 0

    def is_valid(self) -> bool:
        return self.data is not None or self.format != ImageType.INVALID