"""Run summary model."""

from pydantic import BaseModel

from .record import ImageRecord


class RunSummary(BaseModel):
    """Counts reported at the end of a pipeline run."""

    processed: int = 0
    geotagged: int = 0
    metadata_unavailable: int = 0
    gps_decode_failed: int = 0
    failed: int = 0
    cancelled: bool = False

    def add(self, record: ImageRecord) -> None:
        """Fold one record into the counters."""
        self.processed += 1
        status = record.status
        if record.location.is_mappable:
            self.geotagged += 1
        if status.metadata_unavailable:
            self.metadata_unavailable += 1
        if status.gps_decode_failed:
            self.gps_decode_failed += 1
        if status.read_failed:
            self.failed += 1

    @property
    def has_failures(self) -> bool:
        return self.failed > 0
