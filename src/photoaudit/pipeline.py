"""Pipeline orchestration: analyze files in parallel, write results in order."""

import logging
import os
import threading
from collections import deque
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum

from photoaudit.analyze import analyze_file
from photoaudit.builder import fallback_record
from photoaudit.errors import OutputError
from photoaudit.extractors import BaseMetadataProvider, get_default_provider
from photoaudit.formatters import format_quiet
from photoaudit.hashing import DEFAULT_CHUNK_SIZE
from photoaudit.models import ImageFileRef, ImageRecord, RunSummary
from photoaudit.writers import GeoMapWriter, ReportWriter

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """Lifecycle of a pipeline run."""

    IDLE = "idle"
    INITIALIZED = "initialized"
    PROCESSING = "processing"
    FINALIZED = "finalized"


class Pipeline:
    """Drive per-file analysis and feed the report and map writers.

    Files are analyzed on a thread pool, but records reach the writers in
    enumeration order and only from the calling thread. At most
    ``2 * max_workers`` files are in flight, so ``cancel()`` stops dispatch
    promptly; files already submitted still finish and are written.

    Usage:
        pipeline = Pipeline("report.csv", "map.kml", "Case 42")
        summary = pipeline.run(iter_image_files("/evidence"))
    """

    def __init__(
        self,
        report_path: str | os.PathLike[str],
        map_path: str | os.PathLike[str],
        map_title: str = "Image Locations",
        max_workers: int | None = None,
        provider: BaseMetadataProvider | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.report_path = report_path
        self.map_path = map_path
        self.map_title = map_title
        self.max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)
        self.provider = provider or get_default_provider()
        self.chunk_size = chunk_size

        self.report = ReportWriter()
        self.geomap = GeoMapWriter()
        self.summary = RunSummary()
        self.state = PipelineState.IDLE
        self._cancel = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        """Stop dispatching new files; in-flight files are still written."""
        self._cancel.set()

    def open(self) -> None:
        """Open both writers.

        Raises:
            OutputError: If either output file cannot be created
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError(f"Cannot open pipeline in state {self.state.value}")
        try:
            self.report.open(self.report_path)
            self.geomap.open(self.map_path, self.map_title)
        except OSError as e:
            self.report.close()
            raise OutputError(f"Cannot create output: {e}") from e
        self.state = PipelineState.INITIALIZED
        logger.info("Writing report to %s and map to %s", self.report_path, self.map_path)

    def run(self, files: Iterable[ImageFileRef]) -> RunSummary:
        """Process every file and finalize the outputs.

        Args:
            files: Files in enumeration order

        Returns:
            RunSummary with per-category counts

        Raises:
            OutputError: If the outputs cannot be created, written or closed
        """
        if self.state is PipelineState.IDLE:
            self.open()
        if self.state is not PipelineState.INITIALIZED:
            raise RuntimeError(f"Cannot run pipeline in state {self.state.value}")

        self.state = PipelineState.PROCESSING
        try:
            self._process(files)
        finally:
            self.close()
        return self.summary

    def close(self) -> None:
        """Close both writers.

        Raises:
            OutputError: If either writer fails to close
        """
        if self.state in (PipelineState.IDLE, PipelineState.FINALIZED):
            return
        failures = []
        for writer in (self.report, self.geomap):
            try:
                writer.close()
            except OSError as e:
                failures.append(f"{writer.path}: {e}")
        self.state = PipelineState.FINALIZED
        if failures:
            raise OutputError("Cannot close output: " + "; ".join(failures))

    def _process(self, files: Iterable[ImageFileRef]) -> None:
        window = self.max_workers * 2
        pending: deque[Future[ImageRecord]] = deque()
        remaining = iter(files)
        exhausted = False

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            while True:
                while not exhausted and not self.cancelled and len(pending) < window:
                    ref = next(remaining, None)
                    if ref is None:
                        exhausted = True
                        break
                    pending.append(executor.submit(self._analyze, ref))
                if not pending:
                    break
                self._emit(pending.popleft().result())

        if self.cancelled and not exhausted:
            self.summary.cancelled = True
            logger.warning("Run cancelled after %d files", self.summary.processed)

    def _analyze(self, ref: ImageFileRef) -> ImageRecord:
        try:
            return analyze_file(ref, self.provider, self.chunk_size)
        except Exception as e:
            logger.exception("Unexpected failure analyzing %s", ref.path)
            return fallback_record(ref, str(e))

    def _emit(self, record: ImageRecord) -> None:
        try:
            self.report.append(record)
            self.geomap.append_record(record)
        except OSError as e:
            raise OutputError(f"Cannot write output: {e}") from e
        self.summary.add(record)
        logger.debug("Processed %s", format_quiet(record))

    def __enter__(self) -> "Pipeline":
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
