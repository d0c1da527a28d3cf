"""Pytest configuration and fixtures."""

import struct
from pathlib import Path

import pytest
from PIL import Image

from photoaudit.models import GPSRawTagBlock
from photoaudit.sources import make_file_ref

ASCII, BYTE, LONG, RATIONAL = 2, 1, 4, 5


def ascii_entry(text: str) -> tuple[int, int, bytes]:
    data = text.encode("ascii") + b"\x00"
    return ASCII, len(data), data


def byte_entry(value: int) -> tuple[int, int, bytes]:
    return BYTE, 1, bytes([value])


def rational_entry(pairs: list[tuple[int, int]], byte_order: str = "<") -> tuple[int, int, bytes]:
    data = b"".join(struct.pack(f"{byte_order}II", n, d) for n, d in pairs)
    return RATIONAL, len(pairs), data


def gps_tags(
    lat: tuple[str, list[tuple[int, int]]] | None = ("N", [(40, 1), (0, 1), (0, 1)]),
    lon: tuple[str, list[tuple[int, int]]] | None = ("E", [(74, 1), (0, 1), (0, 1)]),
    altitude: tuple[int, tuple[int, int]] | None = (0, (10, 1)),
    byte_order: str = "<",
) -> dict[int, tuple[int, int, bytes]]:
    """GPS IFD entries keyed by tag id."""
    tags = {}
    if lat is not None:
        tags[1] = ascii_entry(lat[0])
        tags[2] = rational_entry(lat[1], byte_order)
    if lon is not None:
        tags[3] = ascii_entry(lon[0])
        tags[4] = rational_entry(lon[1], byte_order)
    if altitude is not None:
        tags[5] = byte_entry(altitude[0])
        tags[6] = rational_entry([altitude[1]], byte_order)
    return tags


def gps_block(byte_order: str = "<", **kwargs) -> GPSRawTagBlock:
    """A decoded-ready GPSRawTagBlock built from gps_tags()."""
    tags = gps_tags(byte_order=byte_order, **kwargs)
    return GPSRawTagBlock(
        byte_order=byte_order, tags={tag: payload for tag, (_, _, payload) in tags.items()}
    )


def _ifd(entries: dict[int, tuple[int, int, bytes]], start: int, byte_order: str) -> bytes:
    """Serialize one IFD at ``start`` with its out-of-line data right after it."""
    count = len(entries)
    data_offset = start + 2 + 12 * count + 4
    table = struct.pack(f"{byte_order}H", count)
    data = b""
    for tag in sorted(entries):
        field_type, value_count, payload = entries[tag]
        if len(payload) <= 4:
            value = payload.ljust(4, b"\x00")
        else:
            value = struct.pack(f"{byte_order}I", data_offset + len(data))
            data += payload + (b"\x00" if len(payload) % 2 else b"")
        table += struct.pack(f"{byte_order}HHI", tag, field_type, value_count) + value
    table += struct.pack(f"{byte_order}I", 0)
    return table + data


def build_exif(
    ifd0: dict[int, tuple[int, int, bytes]] | None = None,
    gps: dict[int, tuple[int, int, bytes]] | None = None,
    byte_order: str = "<",
) -> bytes:
    """Build an APP1 EXIF payload (``Exif\\0\\0`` + TIFF block)."""
    header = (b"II" if byte_order == "<" else b"MM") + struct.pack(f"{byte_order}HI", 42, 8)
    entries = dict(ifd0 or {})
    if gps is not None:
        entries[0x8825] = (LONG, 1, struct.pack(f"{byte_order}I", 0))
        gps_offset = 8 + len(_ifd(entries, 8, byte_order))
        entries[0x8825] = (LONG, 1, struct.pack(f"{byte_order}I", gps_offset))
        body = _ifd(entries, 8, byte_order) + _ifd(gps, gps_offset, byte_order)
    else:
        body = _ifd(entries, 8, byte_order)
    return b"Exif\x00\x00" + header + body


def camera_ifd0(make: str = "Canon", model: str = "EOS 5D") -> dict[int, tuple[int, int, bytes]]:
    return {0x010F: ascii_entry(make), 0x0110: ascii_entry(model)}


def write_jpeg(path: Path, exif: bytes | None = None, size: tuple[int, int] = (8, 6)) -> Path:
    image = Image.new("RGB", size, "red")
    if exif is None:
        image.save(path, "JPEG")
    else:
        image.save(path, "JPEG", exif=exif)
    return path


@pytest.fixture
def evidence_dir(tmp_path: Path) -> Path:
    """Empty folder the image fixtures are written into."""
    path = tmp_path / "evidence"
    path.mkdir()
    return path


@pytest.fixture
def gps_jpeg(evidence_dir: Path) -> Path:
    """JPEG at N 40°, E 74°, 10 m above sea level."""
    return write_jpeg(evidence_dir / "b_gps.jpg", build_exif(camera_ifd0(), gps_tags()))


@pytest.fixture
def plain_jpeg(evidence_dir: Path) -> Path:
    """JPEG with camera tags but no GPS."""
    return write_jpeg(evidence_dir / "c_plain.jpg", build_exif(camera_ifd0("Nikon", "D750")))


@pytest.fixture
def not_an_image(evidence_dir: Path) -> Path:
    """File with an image extension the codec cannot read."""
    path = evidence_dir / "a_broken.jpg"
    path.write_bytes(b"this is not image data\n" * 10)
    return path


@pytest.fixture
def evidence(evidence_dir: Path, gps_jpeg: Path, plain_jpeg: Path, not_an_image: Path) -> Path:
    """Folder holding the three fixture files (A: unreadable, B: GPS, C: no GPS)."""
    return evidence_dir


@pytest.fixture
def file_ref():
    """Factory turning a path into an ImageFileRef."""
    return make_file_ref
