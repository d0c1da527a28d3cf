"""
Command-line interface for photoaudit.

Usage:
  photoaudit /evidence/photos                 # Report + map in ./photoaudit_output
  photoaudit photos.zip -o /cases/42          # Extract archive, then process
  photoaudit /evidence -j 8 --title "Case 42" # Eight workers, custom map title
  photoaudit --status                         # Show provider/dependency status
"""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sys

from photoaudit._version import __version__
from photoaudit.config import get_config
from photoaudit.errors import OutputError
from photoaudit.extractors import get_provider_status
from photoaudit.formatters import format_summary
from photoaudit.pipeline import Pipeline
from photoaudit.sources import extract_archive, is_archive, iter_image_files, prepare_output_paths
from photoaudit.utils import print_dependency_status

logger = logging.getLogger("photoaudit")

EXIT_OK = 0
EXIT_FILE_FAILURES = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photoaudit",
        description="Forensic inventory of an image folder: hashes, metadata, and GPS map.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Outputs:
  <output>/image_report.csv   One quoted row per image (31 columns)
  <output>/image_map.kml      One placemark per geotagged image

The Sea Level column is 1 when the altitude is above sea level, 0 when below.

Examples:
  photoaudit /evidence/photos
  photoaudit photos.zip -o /cases/42
  photoaudit /evidence -j 8 --title "Case 42"
        """,
    )
    parser.add_argument("source", nargs="?", help="Image folder or archive (zip/tar)")
    parser.add_argument("-o", "--output", help="Output directory")
    parser.add_argument("--report-name", help="Report file name")
    parser.add_argument("--map-name", help="Map file name")
    parser.add_argument("--title", help="Map folder title")
    parser.add_argument("-j", "--workers", type=int, help="Number of worker threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show metadata provider and dependency status",
    )
    return parser


def print_status() -> None:
    print("photoaudit status:")
    print("=" * 50)
    print("\nMetadata providers:")
    print("-" * 50)
    for name, available in sorted(get_provider_status().items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")
    print()
    print_dependency_status()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for photoaudit CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.status:
        print_status()
        return EXIT_OK

    if not args.source:
        parser.error("the following arguments are required: source")
    if not os.path.exists(args.source):
        print(f"Error: Source not found: {args.source}", file=sys.stderr)
        return EXIT_FATAL

    config = get_config()
    output_dir = args.output or config.output.output_dir

    try:
        report_path, map_path = prepare_output_paths(
            output_dir,
            args.report_name or config.output.report_name,
            args.map_name or config.output.map_name,
        )
        source = args.source
        if is_archive(source):
            source = extract_archive(source, os.path.join(output_dir, "extracted"))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL

    pipeline = Pipeline(
        report_path,
        map_path,
        map_title=args.title or config.output.map_title,
        max_workers=args.workers or config.processing.max_workers,
        chunk_size=config.processing.hash_chunk_size,
    )

    def _cancel(signum: int, frame: object) -> None:
        logger.warning("Interrupted; finishing files in flight")
        pipeline.cancel()

    previous = signal.signal(signal.SIGINT, _cancel)
    try:
        summary = pipeline.run(iter_image_files(source, config.processing.extensions))
    except OutputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL
    finally:
        signal.signal(signal.SIGINT, previous)

    print(format_summary(summary, str(report_path), str(map_path)))
    return EXIT_FILE_FAILURES if summary.has_failures else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
