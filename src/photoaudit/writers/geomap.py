"""KML placemark writer for geotagged images."""

import logging
import os
import re
from typing import IO
from xml.sax.saxutils import escape

from photoaudit.builder import format_decimal
from photoaudit.models import ImageRecord

logger = logging.getLogger(__name__)

KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

PROLOGUE = """<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="{namespace}">
<Document>
<name>{title}</name>
<Folder>
<name>{title}</name>
"""

EPILOGUE = """</Folder>
</Document>
</kml>
"""

PLACEMARK = """<Placemark>
<name>{name}</name>
<description>{description}</description>
<Point>
<coordinates>{coordinates}</coordinates>
</Point>
</Placemark>
"""


def format_coordinates(longitude: float, latitude: float, altitude: float) -> str:
    """Format a KML coordinate tuple; KML orders it longitude,latitude,altitude."""
    return ",".join(format_decimal(v) for v in (longitude, latitude, altitude))


def xml_text(text: str) -> str:
    """Escape text for an XML element, replacing characters XML cannot carry."""
    return escape(INVALID_XML_CHARS.sub("\uFFFD", text))


def describe_record(record: ImageRecord) -> str:
    """Build the multi-line placemark description for a record."""
    meta = record.metadata
    loc = record.location
    lines = [
        f"Name: {record.name}",
        f"Path: {record.path}",
        f"Date Taken: {meta.date_taken or 'N/A'}",
        f"Date Created: {meta.date_created or 'N/A'}",
        f"Date Modified: {meta.date_modified or 'N/A'}",
        f"Camera: {' '.join(v for v in (meta.camera_make, meta.camera_model) if v) or 'N/A'}",
        f"MD5: {record.hashes.md5}",
        f"SHA1: {record.hashes.sha1}",
        f"SHA256: {record.hashes.sha256}",
        f"Latitude: {format_decimal(loc.latitude)}",
        f"Longitude: {format_decimal(loc.longitude)}",
        f"Altitude: {format_decimal(loc.altitude)}",
        f"Sea Level: {loc.sea_level_flag}",
    ]
    return "\n".join(lines)


class GeoMapWriter:
    """Stream placemarks for geotagged images into a KML document."""

    def __init__(self) -> None:
        self._file: IO[str] | None = None
        self.path: str | None = None
        self.placemarks_written = 0

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path: str | os.PathLike[str], title: str) -> None:
        """Create the document and open a folder named ``title``.

        Raises:
            OSError: If the file cannot be created
            RuntimeError: If the writer is already open
        """
        if self._file is not None:
            raise RuntimeError(f"Map already open: {self.path}")
        self._file = open(path, "w", encoding="utf-8")
        self.path = os.fspath(path)
        self._write(PROLOGUE.format(namespace=KML_NAMESPACE, title=xml_text(title)))
        logger.debug("Opened map %s", self.path)

    def append_placemark(
        self,
        name: str,
        description: str,
        longitude: float,
        latitude: float,
        altitude: float,
    ) -> None:
        """Write one placemark."""
        self._write(
            PLACEMARK.format(
                name=xml_text(name),
                description=xml_text(description),
                coordinates=format_coordinates(longitude, latitude, altitude),
            )
        )
        self.placemarks_written += 1

    def append_record(self, record: ImageRecord) -> bool:
        """Write a placemark for a record if it has a usable GPS position.

        Returns:
            True if a placemark was written
        """
        loc = record.location
        if not loc.is_mappable:
            return False
        self.append_placemark(
            record.name, describe_record(record), loc.longitude, loc.latitude, loc.altitude
        )
        return True

    def close(self) -> None:
        """Close the folder and document and release the file."""
        if self._file is None:
            return
        file = self._file
        try:
            self._write(EPILOGUE)
        finally:
            self._file = None
            file.close()
        logger.debug("Closed map %s (%d placemarks)", self.path, self.placemarks_written)

    def _write(self, text: str) -> None:
        if self._file is None:
            raise RuntimeError("Map is not open")
        self._file.write(text)
        self._file.flush()

    def __enter__(self) -> "GeoMapWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
