"""Pillow-backed provider for EXIF and Windows XP image properties."""

import contextlib
import logging
import struct
from datetime import datetime
from typing import Any, ClassVar

from PIL import ExifTags, Image, UnidentifiedImageError

from photoaudit.errors import MetadataUnavailable
from photoaudit.extractors.base import BaseMetadataProvider, EmbeddedMetadata
from photoaudit.models import GPSRawTagBlock
from photoaudit.utils.tiff import read_gps_block

logger = logging.getLogger(__name__)

Tag = ExifTags.Base

ORIENTATIONS = {
    1: "Normal",
    2: "Flip horizontal",
    3: "Rotate 180",
    4: "Flip vertical",
    5: "Transpose",
    6: "Rotate 90 CW",
    7: "Transverse",
    8: "Rotate 270 CW",
}

# EXIF date formats
DATE_FORMATS = [
    "%Y:%m:%d %H:%M:%S",  # 2024:01:15 12:30:45
    "%Y:%m:%d %H:%M:%S%z",  # 2024:01:15 12:30:45+08:00
    "%Y-%m-%dT%H:%M:%S",  # ISO format
]

OUTPUT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Formats whose file is itself the TIFF container holding the EXIF IFDs
TIFF_FORMATS = {"TIFF"}


def _clean_text(value: Any) -> str | None:
    """Normalize an ASCII EXIF value to a stripped string."""
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).replace("\x00", "").strip()
    return text or None


def _decode_xp(value: Any) -> str | None:
    """Decode a Windows XP* tag (UTF-16LE stored as BYTE values)."""
    if value is None:
        return None
    if isinstance(value, (tuple, list)):
        value = bytes(value)
    if isinstance(value, bytes):
        value = value.decode("utf-16-le", errors="replace")
    return _clean_text(value)


def format_exif_date(value: str | None) -> str | None:
    """Reformat an EXIF date as ``YYYY-MM-DD HH:MM:SS``; unknown formats pass through."""
    if not value:
        return None
    for fmt in DATE_FORMATS:
        with contextlib.suppress(ValueError):
            return datetime.strptime(value, fmt).strftime(OUTPUT_DATE_FORMAT)
    return value


class PillowMetadata(EmbeddedMetadata):
    """Properties captured from an image opened with Pillow."""

    def __init__(
        self,
        tags: dict[int, Any],
        width: int,
        height: int,
        exif_block: bytes | None = None,
    ) -> None:
        self._tags = tags
        self._width = width
        self._height = height
        self._exif_block = exif_block

    def camera_make(self) -> str | None:
        return _clean_text(self._tags.get(Tag.Make))

    def camera_model(self) -> str | None:
        return _clean_text(self._tags.get(Tag.Model))

    def dimensions(self) -> str | None:
        if not self._width or not self._height:
            return None
        return f"{self._width} x {self._height}"

    def date_taken(self) -> str | None:
        raw = _clean_text(self._tags.get(Tag.DateTimeOriginal)) or _clean_text(
            self._tags.get(Tag.DateTime)
        )
        return format_exif_date(raw)

    def orientation(self) -> str | None:
        value = self._tags.get(Tag.Orientation)
        if value is None:
            return None
        try:
            return ORIENTATIONS.get(int(value), str(value))
        except (TypeError, ValueError):
            return _clean_text(value)

    def title(self) -> str | None:
        return _decode_xp(self._tags.get(Tag.XPTitle)) or _clean_text(
            self._tags.get(Tag.ImageDescription)
        )

    def subject(self) -> str | None:
        return _decode_xp(self._tags.get(Tag.XPSubject))

    def description(self) -> str | None:
        return _clean_text(self._tags.get(Tag.ImageDescription)) or _decode_xp(
            self._tags.get(Tag.XPComment)
        )

    def keywords(self) -> list[str]:
        text = _decode_xp(self._tags.get(Tag.XPKeywords))
        if not text:
            return []
        return [k.strip() for k in text.split(";") if k.strip()]

    def gps_block(self) -> GPSRawTagBlock:
        return read_gps_block(self._exif_block)


class PillowMetadataProvider(BaseMetadataProvider):
    """Read embedded image properties with Pillow.

    IFD0 and the Exif sub-IFD supply camera, date and description tags; the
    raw EXIF block is kept so GPS payloads can be decoded byte for byte.
    """

    name: ClassVar[str] = "pillow"
    priority: ClassVar[int] = 10

    @classmethod
    def is_available(cls) -> bool:
        """Pillow is a hard dependency, so this is always True."""
        return True

    def open(self, path: str) -> PillowMetadata:
        try:
            img = Image.open(path)
        except (UnidentifiedImageError, Image.DecompressionBombError) as e:
            raise MetadataUnavailable(f"cannot read {path} as an image: {e}") from e

        with img:
            tags: dict[int, Any] = {}
            try:
                exif = img.getexif()
                tags.update(exif)
                tags.update(exif.get_ifd(ExifTags.IFD.Exif))
            except (KeyError, ValueError, SyntaxError, OSError, struct.error) as e:
                logger.debug("EXIF tags unreadable in %s: %s", path, e)

            exif_block = img.info.get("exif")
            if not exif_block and img.format in TIFF_FORMATS:
                with open(path, "rb") as f:
                    exif_block = f.read()

            return PillowMetadata(
                tags=tags,
                width=img.width,
                height=img.height,
                exif_block=exif_block,
            )
