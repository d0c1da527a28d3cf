"""Exceptions raised by photoaudit."""


class PhotoAuditError(Exception):
    """Base class for photoaudit errors."""

    pass


class MetadataUnavailable(PhotoAuditError):
    """The image codec could not open the file; only filesystem data is usable."""

    pass


class GPSDecodeError(PhotoAuditError):
    """GPS tags are present but their payload cannot be decoded."""

    pass


class OutputError(PhotoAuditError):
    """The report or map file could not be created, written or closed."""

    pass
