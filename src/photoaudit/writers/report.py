"""Delimited text report writer."""

import csv
import io
import logging
import os
from typing import IO

from photoaudit.models import REPORT_COLUMNS, ImageRecord

logger = logging.getLogger(__name__)


class ReportWriter:
    """Write ImageRecords as a fully quoted CSV report.

    The header row is written by ``open``; each ``append`` renders one
    complete row and hands it to the file in a single write.
    """

    def __init__(self) -> None:
        self._file: IO[str] | None = None
        self.path: str | None = None
        self.rows_written = 0

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path: str | os.PathLike[str]) -> None:
        """Create the report and write the header row.

        Raises:
            OSError: If the file cannot be created
            RuntimeError: If the writer is already open
        """
        if self._file is not None:
            raise RuntimeError(f"Report already open: {self.path}")
        self._file = open(path, "w", encoding="utf-8", newline="")
        self.path = os.fspath(path)
        self._write_row(REPORT_COLUMNS)
        logger.debug("Opened report %s", self.path)

    def append(self, record: ImageRecord) -> None:
        """Write one record as a row."""
        if len(record.row) != len(REPORT_COLUMNS):
            raise ValueError(
                f"Record for {record.path} has {len(record.row)} fields, "
                f"expected {len(REPORT_COLUMNS)}"
            )
        self._write_row(record.row)
        self.rows_written += 1

    def close(self) -> None:
        """Flush and close the report."""
        if self._file is None:
            return
        try:
            self._file.close()
        finally:
            self._file = None
        logger.debug("Closed report %s (%d rows)", self.path, self.rows_written)

    def _write_row(self, values: tuple[str, ...]) -> None:
        if self._file is None:
            raise RuntimeError("Report is not open")
        buffer = io.StringIO()
        csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n").writerow(values)
        self._file.write(buffer.getvalue())
        self._file.flush()

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
