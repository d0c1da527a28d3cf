"""Utility functions for photoaudit."""

from photoaudit.models.file import format_size

from .deps import (
    check_all_dependencies,
    check_python_dependencies,
    print_dependency_status,
)
from .tiff import (
    EXIF_HEADER,
    GPS_IFD_POINTER,
    IFDEntry,
    parse_ifd,
    read_byte_order,
    read_gps_block,
    strip_exif_header,
)

__all__ = [
    # Formatting
    "format_size",
    # Dependency checking
    "check_python_dependencies",
    "check_all_dependencies",
    "print_dependency_status",
    # EXIF/TIFF parsing
    "read_gps_block",
    "parse_ifd",
    "read_byte_order",
    "strip_exif_header",
    "IFDEntry",
    "EXIF_HEADER",
    "GPS_IFD_POINTER",
]
