"""EXIF/TIFF container parsing utilities.

Only enough of the TIFF layout is understood to locate the GPS IFD and
return each GPS entry's raw payload bytes; decoding those bytes is left to
``photoaudit.gps``.
"""

import logging
import struct
from typing import NamedTuple

from photoaudit.models import GPSRawTagBlock

logger = logging.getLogger(__name__)

EXIF_HEADER = b"Exif\x00\x00"
TIFF_MAGIC = 42
GPS_IFD_POINTER = 0x8825

# TIFF field type -> size in bytes of one value
TIFF_TYPE_SIZES = {
    1: 1,  # BYTE
    2: 1,  # ASCII
    3: 2,  # SHORT
    4: 4,  # LONG
    5: 8,  # RATIONAL
    6: 1,  # SBYTE
    7: 1,  # UNDEFINED
    8: 2,  # SSHORT
    9: 4,  # SLONG
    10: 8,  # SRATIONAL
    11: 4,  # FLOAT
    12: 8,  # DOUBLE
    13: 4,  # IFD
}


class IFDEntry(NamedTuple):
    """A single IFD entry with its payload resolved."""

    tag: int
    type: int
    count: int
    payload: bytes


def strip_exif_header(data: bytes) -> bytes:
    """Drop the JPEG APP1 ``Exif\\0\\0`` prefix if present."""
    if data.startswith(EXIF_HEADER):
        return data[len(EXIF_HEADER) :]
    return data


def read_byte_order(data: bytes) -> str | None:
    """Return the struct byte-order character for a TIFF block, or None."""
    if len(data) < 8:
        return None
    mark = data[:2]
    if mark == b"II":
        order = "<"
    elif mark == b"MM":
        order = ">"
    else:
        return None
    if struct.unpack_from(f"{order}H", data, 2)[0] != TIFF_MAGIC:
        return None
    return order


def parse_ifd(data: bytes, offset: int, byte_order: str) -> dict[int, IFDEntry]:
    """Parse the IFD at ``offset`` into entries keyed by tag.

    Entries whose type is unknown or whose payload runs past the end of the
    block are skipped.
    """
    entries: dict[int, IFDEntry] = {}
    if offset < 8 or offset + 2 > len(data):
        return entries

    (count,) = struct.unpack_from(f"{byte_order}H", data, offset)
    pos = offset + 2
    for _ in range(count):
        if pos + 12 > len(data):
            break
        tag, field_type, value_count = struct.unpack_from(f"{byte_order}HHI", data, pos)
        value_field = data[pos + 8 : pos + 12]
        pos += 12

        unit = TIFF_TYPE_SIZES.get(field_type)
        if unit is None:
            continue
        size = unit * value_count
        if size <= 4:
            payload = value_field[:size]
        else:
            (value_offset,) = struct.unpack(f"{byte_order}I", value_field)
            if value_offset + size > len(data):
                logger.debug("IFD entry 0x%04x truncated (offset %d, size %d)", tag, value_offset, size)
                continue
            payload = data[value_offset : value_offset + size]
        entries[tag] = IFDEntry(tag, field_type, value_count, payload)
    return entries


def read_gps_block(exif: bytes | None) -> GPSRawTagBlock:
    """Extract raw GPS tag payloads from an EXIF/TIFF block.

    Args:
        exif: Raw EXIF data (with or without the ``Exif\\0\\0`` prefix)

    Returns:
        GPSRawTagBlock; empty when the block is missing, malformed, or has
        no GPS IFD
    """
    if not exif:
        return GPSRawTagBlock()

    data = strip_exif_header(exif)
    byte_order = read_byte_order(data)
    if byte_order is None:
        logger.debug("EXIF block has no valid TIFF header")
        return GPSRawTagBlock()

    (ifd0_offset,) = struct.unpack_from(f"{byte_order}I", data, 4)
    ifd0 = parse_ifd(data, ifd0_offset, byte_order)
    pointer = ifd0.get(GPS_IFD_POINTER)
    if pointer is None or len(pointer.payload) < 4:
        return GPSRawTagBlock(byte_order=byte_order)

    (gps_offset,) = struct.unpack_from(f"{byte_order}I", pointer.payload, 0)
    gps_ifd = parse_ifd(data, gps_offset, byte_order)
    return GPSRawTagBlock(
        byte_order=byte_order,
        tags={tag: entry.payload for tag, entry in gps_ifd.items()},
    )
