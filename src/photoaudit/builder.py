"""Composition of per-file results into ImageRecords."""

from typing import Any

from photoaudit.models import (
    REPORT_COLUMNS,
    GeoCoordinate,
    HashTriple,
    ImageFileRef,
    ImageRecord,
    RawMetadataSet,
    RecordStatus,
)


def format_decimal(value: float, places: int = 7) -> str:
    """Render a float in plain decimal notation, never scientific."""
    text = f"{value:.{places}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return "0.0" if text == "-0.0" else text


def render_value(value: Any) -> str:
    """Render one field as a single-line string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float):
        return format_decimal(value)
    text = str(value)
    return " ".join(text.splitlines()) if ("\n" in text or "\r" in text) else text


def render_row(
    ref: ImageFileRef,
    metadata: RawMetadataSet,
    hashes: HashTriple,
    location: GeoCoordinate,
) -> tuple[str, ...]:
    """Render the report row in REPORT_COLUMNS order."""
    values = {
        "File Name": ref.name,
        "Extension": ref.extension,
        "Directory": metadata.folder_path or ref.directory,
        "Date Created": metadata.date_created,
        "Date Accessed": metadata.date_accessed,
        "Date Modified": metadata.date_modified,
        "File Size": metadata.size,
        "Attributes": metadata.attributes,
        "Read Only": ref.read_only,
        "MD5 Hash": hashes.md5,
        "SHA1 Hash": hashes.sha1,
        "SHA256 Hash": hashes.sha256,
        "URL": metadata.url,
        "Owner": metadata.owner,
        "Date Taken": metadata.date_taken,
        "Tags": metadata.tags,
        "Camera Model": metadata.camera_model,
        "Dimensions": metadata.dimensions,
        "Camera Make": metadata.camera_make,
        "Location": metadata.location,
        "Subject": metadata.subject,
        "Title": metadata.title,
        "File Description": metadata.file_description,
        "Keywords1": metadata.keyword1,
        "Keywords2": metadata.keyword2,
        "Orientation": metadata.orientation,
        "GPS Data": location.has_gps,
        "Latitude": location.latitude,
        "Longitude": location.longitude,
        "Altitude": location.altitude,
        "Sea Level": location.sea_level_flag,
    }
    return tuple(render_value(values[column]) for column in REPORT_COLUMNS)


def build_record(
    ref: ImageFileRef,
    metadata: RawMetadataSet,
    hashes: HashTriple,
    location: GeoCoordinate,
    status: RecordStatus | None = None,
) -> ImageRecord:
    """Compose one ImageRecord. Pure; performs no I/O."""
    return ImageRecord(
        file=ref,
        metadata=metadata,
        hashes=hashes,
        location=location,
        status=status or RecordStatus(),
        row=render_row(ref, metadata, hashes, location),
    )


def fallback_record(ref: ImageFileRef, error: str) -> ImageRecord:
    """Build a complete-shaped record for a file whose analysis failed."""
    metadata = RawMetadataSet(name=ref.name, folder_path=ref.directory)
    status = RecordStatus(read_failed=True, errors=(error,))
    return build_record(ref, metadata, HashTriple(), GeoCoordinate(), status)
