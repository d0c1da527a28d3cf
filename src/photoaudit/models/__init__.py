"""Pydantic models for photoaudit."""

from .file import ImageFileRef, format_size
from .gps import (
    GPS_ALTITUDE,
    GPS_ALTITUDE_REF,
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    GeoCoordinate,
    GPSRawTagBlock,
)
from .hashes import HashTriple
from .metadata import EMBEDDED_KEYS, MetadataKey, RawMetadataSet
from .record import REPORT_COLUMNS, ImageRecord, RecordStatus
from .summary import RunSummary

__all__ = [
    # Main model
    "ImageRecord",
    "RecordStatus",
    "REPORT_COLUMNS",
    # File
    "ImageFileRef",
    "format_size",
    # Metadata
    "RawMetadataSet",
    "MetadataKey",
    "EMBEDDED_KEYS",
    # Hashes
    "HashTriple",
    # GPS
    "GPSRawTagBlock",
    "GeoCoordinate",
    "GPS_LATITUDE_REF",
    "GPS_LATITUDE",
    "GPS_LONGITUDE_REF",
    "GPS_LONGITUDE",
    "GPS_ALTITUDE_REF",
    "GPS_ALTITUDE",
    # Summary
    "RunSummary",
]
