"""Per-file attribute extraction.

Combines filesystem attributes (``os.stat``) with the embedded properties
exposed by a metadata provider into a single RawMetadataSet.
"""

import logging
import os
import stat
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from photoaudit.errors import MetadataUnavailable
from photoaudit.extractors import BaseMetadataProvider, EmbeddedMetadata, get_default_provider
from photoaudit.models import GPSRawTagBlock, ImageFileRef, MetadataKey, RawMetadataSet, format_size

try:
    import pwd
except ImportError:  # Windows has no password database
    pwd = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ExtractionResult(BaseModel):
    """Output of metadata extraction for one file."""

    model_config = ConfigDict(frozen=True)

    metadata: RawMetadataSet = Field(default_factory=RawMetadataSet)
    gps_block: GPSRawTagBlock = Field(default_factory=GPSRawTagBlock)
    metadata_available: bool = True
    error: str | None = None


def format_timestamp(timestamp: float | None) -> str:
    """Format a POSIX timestamp for the report."""
    if timestamp is None:
        return ""
    return datetime.fromtimestamp(timestamp).strftime(DATE_FORMAT)


def file_owner(st: os.stat_result) -> str:
    """Return the owning user name, or the numeric uid if it has no name."""
    if pwd is None:
        return ""
    try:
        return pwd.getpwuid(st.st_uid).pw_name
    except KeyError:
        return str(st.st_uid)


def filesystem_attributes(path: str) -> dict[str, str]:
    """Read filesystem attributes of a file.

    Args:
        path: Path to the file

    Returns:
        Dict keyed by RawMetadataSet field names

    Raises:
        OSError: If the file cannot be stat'ed
    """
    st = os.stat(path)
    abs_path = Path(path).resolve()

    # st_birthtime is macOS/BSD-only; fall back to inode change time
    created = getattr(st, "st_birthtime", None) or st.st_ctime

    return {
        "name": abs_path.name,
        "size": format_size(st.st_size),
        "date_created": format_timestamp(created),
        "date_accessed": format_timestamp(st.st_atime),
        "date_modified": format_timestamp(st.st_mtime),
        "attributes": stat.filemode(st.st_mode),
        "url": abs_path.as_uri(),
        "owner": file_owner(st),
        "folder_path": str(abs_path.parent),
        "location": abs_path.parent.name,
    }


def _safe(path: str, key: MetadataKey, accessor: Callable[[], str | None]) -> str:
    """Call one embedded accessor, degrading any failure to an empty string."""
    try:
        value = accessor()
    except Exception as e:
        logger.debug("%s unavailable for %s: %s", key.value, path, e)
        return ""
    return value or ""


def embedded_attributes(path: str, embedded: EmbeddedMetadata) -> dict[str, str]:
    """Map a provider's named accessors onto RawMetadataSet fields."""
    try:
        keywords = embedded.keywords()
    except Exception as e:
        logger.debug("Keywords unavailable for %s: %s", path, e)
        keywords = []

    accessors: dict[MetadataKey, Callable[[], str | None]] = {
        MetadataKey.DATE_TAKEN: embedded.date_taken,
        MetadataKey.CAMERA_MODEL: embedded.camera_model,
        MetadataKey.DIMENSIONS: embedded.dimensions,
        MetadataKey.CAMERA_MAKE: embedded.camera_make,
        MetadataKey.SUBJECT: embedded.subject,
        MetadataKey.TITLE: embedded.title,
        MetadataKey.FILE_DESCRIPTION: embedded.description,
        MetadataKey.ORIENTATION: embedded.orientation,
    }
    values = {
        RawMetadataSet.field_for(key): _safe(path, key, accessor)
        for key, accessor in accessors.items()
    }
    values["tags"] = "; ".join(keywords)
    values["keyword1"] = keywords[0] if len(keywords) > 0 else ""
    values["keyword2"] = keywords[1] if len(keywords) > 1 else ""
    return values


def extract_metadata(
    ref: ImageFileRef, provider: BaseMetadataProvider | None = None
) -> ExtractionResult:
    """Extract filesystem and embedded metadata for one file.

    A file the codec cannot open is not an error: the result carries only
    filesystem attributes and ``metadata_available`` is False.

    Args:
        ref: File to read
        provider: Embedded-metadata provider (default: highest priority available)

    Returns:
        ExtractionResult

    Raises:
        OSError: If the file cannot be stat'ed or read
    """
    values = filesystem_attributes(ref.path)
    provider = provider or get_default_provider()

    try:
        embedded = provider.open(ref.path)
    except MetadataUnavailable as e:
        logger.info("Metadata unavailable for %s: %s", ref.path, e)
        return ExtractionResult(
            metadata=RawMetadataSet(**values),
            metadata_available=False,
            error=str(e),
        )
    except Exception as e:
        logger.warning("Provider %s failed on %s: %s", provider.name, ref.path, e)
        return ExtractionResult(
            metadata=RawMetadataSet(**values),
            metadata_available=False,
            error=f"metadata: {e}",
        )

    values.update(embedded_attributes(ref.path, embedded))
    try:
        gps_block = embedded.gps_block()
    except Exception as e:
        logger.debug("GPS tags unreadable for %s: %s", ref.path, e)
        gps_block = GPSRawTagBlock()

    return ExtractionResult(metadata=RawMetadataSet(**values), gps_block=gps_block)
