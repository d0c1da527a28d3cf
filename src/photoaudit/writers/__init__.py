"""Output writers for photoaudit."""

from .geomap import KML_NAMESPACE, GeoMapWriter, describe_record, format_coordinates
from .report import ReportWriter

__all__ = [
    "ReportWriter",
    "GeoMapWriter",
    "KML_NAMESPACE",
    "describe_record",
    "format_coordinates",
]
