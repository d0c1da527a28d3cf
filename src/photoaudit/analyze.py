"""Core analysis functions."""

import logging
import os

from photoaudit.builder import build_record
from photoaudit.extractors import BaseMetadataProvider
from photoaudit.gps import decode_gps_safe
from photoaudit.hashing import DEFAULT_CHUNK_SIZE, compute_hashes
from photoaudit.metadata import ExtractionResult, extract_metadata, filesystem_attributes
from photoaudit.models import (
    GeoCoordinate,
    HashTriple,
    ImageFileRef,
    ImageRecord,
    RawMetadataSet,
    RecordStatus,
)

logger = logging.getLogger(__name__)


def _filesystem_only(ref: ImageFileRef) -> ExtractionResult:
    try:
        values = filesystem_attributes(ref.path)
    except OSError:
        values = {"name": ref.name, "folder_path": os.path.dirname(ref.path)}
    return ExtractionResult(metadata=RawMetadataSet(**values), metadata_available=False)


def analyze_file(
    ref: ImageFileRef,
    provider: BaseMetadataProvider | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ImageRecord:
    """Analyze one image and build its record.

    This is the per-file task run by the pipeline. It:
    1. Hashes the file content
    2. Reads filesystem and embedded metadata
    3. Decodes GPS tags, if present
    4. Composes the ImageRecord

    Per-file failures are logged and replaced by fallback values, so a
    record is always returned.

    Args:
        ref: File to analyze
        provider: Embedded-metadata provider (default: highest priority available)
        chunk_size: Read size used while hashing

    Returns:
        ImageRecord for the file
    """
    errors: list[str] = []
    read_failed = False

    try:
        hashes = compute_hashes(ref.path, chunk_size=chunk_size)
    except OSError as e:
        logger.error("Cannot hash %s: %s", ref.path, e)
        errors.append(f"hash: {e}")
        read_failed = True
        hashes = HashTriple()

    try:
        extraction = extract_metadata(ref, provider)
    except OSError as e:
        logger.error("Cannot read metadata of %s: %s", ref.path, e)
        errors.append(f"metadata: {e}")
        read_failed = True
        extraction = ExtractionResult(
            metadata=RawMetadataSet(name=ref.name, folder_path=os.path.dirname(ref.path)),
            metadata_available=False,
        )
    except Exception as e:
        logger.exception("Metadata extraction failed for %s", ref.path)
        errors.append(f"metadata: {e}")
        extraction = _filesystem_only(ref)
    else:
        if extraction.error:
            errors.append(extraction.error)

    if extraction.metadata_available:
        location = decode_gps_safe(extraction.gps_block, ref.path)
    else:
        location = GeoCoordinate()
    if location.decode_failed:
        errors.append("gps: undecodable GPS tags")

    status = RecordStatus(
        metadata_unavailable=not extraction.metadata_available and not read_failed,
        gps_decode_failed=location.decode_failed,
        read_failed=read_failed,
        errors=tuple(errors),
    )
    return build_record(ref, extraction.metadata, hashes, location, status)
