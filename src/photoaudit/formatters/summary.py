"""Run summary formatter."""

from photoaudit.models import ImageRecord, RunSummary


def format_summary(summary: RunSummary, report_path: str = "", map_path: str = "") -> str:
    """Format the end-of-run summary block."""
    lines = ["=" * 50, "Run summary", "=" * 50]
    lines.append(f"  Processed:             {summary.processed}")
    lines.append(f"  Geotagged:             {summary.geotagged}")
    lines.append(f"  Metadata unavailable:  {summary.metadata_unavailable}")
    lines.append(f"  GPS decode failed:     {summary.gps_decode_failed}")
    lines.append(f"  Failed:                {summary.failed}")
    if summary.cancelled:
        lines.append("  (run cancelled before all files were processed)")
    if report_path:
        lines.append(f"  Report: {report_path}")
    if map_path:
        lines.append(f"  Map:    {map_path}")
    return "\n".join(lines)


def format_quiet(record: ImageRecord) -> str:
    """Format a record as one-line summary.

    Format: filename | dimensions | GPS: lat, lon | status
    """
    parts = [record.name, record.metadata.dimensions or "N/A"]

    loc = record.location
    if loc.is_mappable:
        parts.append(f"GPS: {loc.latitude:.6f}, {loc.longitude:.6f}")
    elif loc.decode_failed:
        parts.append("GPS: undecodable")
    else:
        parts.append("GPS: no")

    status = record.status
    if status.read_failed:
        parts.append("FAILED")
    elif status.metadata_unavailable:
        parts.append("metadata unavailable")
    else:
        parts.append("ok")

    return " | ".join(parts)
