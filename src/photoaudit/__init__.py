"""photoaudit - forensic image inventory.

Hash every image in a folder, collect its filesystem and EXIF metadata,
and place geotagged images on a map.

Usage:
    from photoaudit import Pipeline, iter_image_files

    pipeline = Pipeline("report.csv", "map.kml", map_title="Case 42")
    summary = pipeline.run(iter_image_files("/evidence/photos"))
    print(f"{summary.processed} images, {summary.geotagged} geotagged")

    # Analyze a single file
    from photoaudit import analyze_file, make_file_ref

    record = analyze_file(make_file_ref("IMG_0001.jpg"))
    if record.location.has_gps:
        print(record.location.latitude, record.location.longitude)
"""

from photoaudit._version import __version__
from photoaudit.analyze import analyze_file
from photoaudit.builder import build_record, fallback_record
from photoaudit.errors import GPSDecodeError, MetadataUnavailable, OutputError, PhotoAuditError
from photoaudit.extractors import (
    BaseMetadataProvider,
    EmbeddedMetadata,
    PillowMetadataProvider,
    get_available_providers,
    get_provider_status,
)
from photoaudit.formatters import format_quiet, format_summary
from photoaudit.gps import decode_gps, decode_gps_safe
from photoaudit.hashing import compute_hashes
from photoaudit.metadata import ExtractionResult, extract_metadata
from photoaudit.models import (
    REPORT_COLUMNS,
    GeoCoordinate,
    GPSRawTagBlock,
    HashTriple,
    ImageFileRef,
    ImageRecord,
    MetadataKey,
    RawMetadataSet,
    RecordStatus,
    RunSummary,
)
from photoaudit.pipeline import Pipeline, PipelineState
from photoaudit.sources import extract_archive, iter_image_files, make_file_ref
from photoaudit.writers import GeoMapWriter, ReportWriter

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze_file",
    "compute_hashes",
    "decode_gps",
    "decode_gps_safe",
    "extract_metadata",
    "build_record",
    "fallback_record",
    # Pipeline
    "Pipeline",
    "PipelineState",
    # Sources
    "iter_image_files",
    "make_file_ref",
    "extract_archive",
    # Models
    "ImageRecord",
    "ImageFileRef",
    "RawMetadataSet",
    "MetadataKey",
    "HashTriple",
    "GPSRawTagBlock",
    "GeoCoordinate",
    "RecordStatus",
    "RunSummary",
    "ExtractionResult",
    "REPORT_COLUMNS",
    # Writers
    "ReportWriter",
    "GeoMapWriter",
    # Formatters
    "format_summary",
    "format_quiet",
    # Providers
    "BaseMetadataProvider",
    "EmbeddedMetadata",
    "PillowMetadataProvider",
    "get_available_providers",
    "get_provider_status",
    # Errors
    "PhotoAuditError",
    "MetadataUnavailable",
    "GPSDecodeError",
    "OutputError",
]
