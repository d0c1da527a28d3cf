"""Tests for the run summary and one-line record formatters."""

import logging

from photoaudit.builder import build_record, fallback_record
from photoaudit.formatters import format_quiet, format_summary
from photoaudit.models import (
    GeoCoordinate,
    HashTriple,
    ImageFileRef,
    RawMetadataSet,
    RecordStatus,
    RunSummary,
)
from photoaudit.pipeline import Pipeline
from photoaudit.sources import iter_image_files

REF = ImageFileRef(path="/evidence/b.jpg", name="b.jpg", extension=".jpg")


def make_record(location=None, status=None):
    return build_record(
        REF,
        RawMetadataSet(name="b.jpg", dimensions="8 x 6"),
        HashTriple(),
        location or GeoCoordinate(),
        status,
    )


class TestFormatQuiet:
    """Test format_quiet."""

    def test_geotagged(self):
        """Test a geotagged record shows its position."""
        location = GeoCoordinate(latitude=40.0, longitude=-74.5, has_gps=True)
        assert format_quiet(make_record(location)) == (
            "b.jpg | 8 x 6 | GPS: 40.000000, -74.500000 | ok"
        )

    def test_undecodable_gps(self):
        """Test undecodable GPS is called out."""
        location = GeoCoordinate(has_gps=True, decode_failed=True)
        status = RecordStatus(gps_decode_failed=True)
        assert "GPS: undecodable" in format_quiet(make_record(location, status))

    def test_metadata_unavailable(self):
        """Test a soft-flagged record."""
        line = format_quiet(make_record(status=RecordStatus(metadata_unavailable=True)))
        assert line.endswith("GPS: no | metadata unavailable")

    def test_failed(self):
        """Test a fallback record reads as failed with no dimensions."""
        line = format_quiet(fallback_record(REF, "boom"))
        assert line == "b.jpg | N/A | GPS: no | FAILED"


class TestFormatSummary:
    """Test format_summary."""

    def test_counts_and_paths(self):
        """Test every counter and both output paths are listed."""
        summary = RunSummary(
            processed=3, geotagged=1, metadata_unavailable=1, gps_decode_failed=0, failed=1
        )
        text = format_summary(summary, "out/report.csv", "out/map.kml")
        assert "Processed:             3" in text
        assert "Geotagged:             1" in text
        assert "Metadata unavailable:  1" in text
        assert "GPS decode failed:     0" in text
        assert "Failed:                1" in text
        assert "Report: out/report.csv" in text
        assert "Map:    out/map.kml" in text
        assert "cancelled" not in text

    def test_cancelled(self):
        """Test a cancelled run is noted."""
        text = format_summary(RunSummary(cancelled=True))
        assert "run cancelled" in text
        assert "Report:" not in text

    def test_pipeline_logs_each_record(self, evidence, tmp_path, caplog):
        """Test the pipeline logs a one-line summary per record at debug level."""
        caplog.set_level(logging.DEBUG, logger="photoaudit.pipeline")
        Pipeline(tmp_path / "r.csv", tmp_path / "m.kml").run(iter_image_files(evidence))
        lines = [r.getMessage() for r in caplog.records if r.name == "photoaudit.pipeline"]
        assert "Processed b_gps.jpg | 8 x 6 | GPS: 40.000000, 74.000000 | ok" in lines
        assert any(line.startswith("Processed a_broken.jpg") for line in lines)
