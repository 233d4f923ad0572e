"""CSV serialization and output file rotation."""

import csv
from io import StringIO
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from .models import CSV_HEADER, ConversionError

MAX_LINES_PER_FILE = 100
LINE_TERMINATOR = "\r\n"


class OutputError(ConversionError):
    """Raised when an output file cannot be created."""


def _make_writer(stream: TextIO):
    # QUOTE_MINIMAL quotes only fields holding the delimiter, a quote, CR or LF.
    return csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator=LINE_TERMINATOR)


def csv_line(fields: Sequence[str]) -> str:
    """Serialize one row, CRLF included."""
    output = StringIO()
    _make_writer(output).writerow(fields)
    return output.getvalue()


def make_out_name(base_path: Path, seq: int) -> Path:
    """Build a numbered output path: save.csv -> save_001.csv.

    Args:
        base_path: Output base path given on the command line
        seq: 1-based file number

    Returns:
        Path in the same directory as base_path
    """
    name, dot, ext = base_path.name.rpartition(".")
    if not dot:
        name, ext = ext, ""
    else:
        ext = dot + ext
    return base_path.parent / f"{name}_{seq:03d}{ext}"


class SplitCsvWriter:
    """Write rows into numbered CSV files of at most max_lines lines each.

    Every file starts with a UTF-8 BOM and the header line. Use as a context
    manager so the last file is closed on every exit path.
    """

    def __init__(
        self,
        base_path: Path,
        header: Sequence[str] = CSV_HEADER,
        max_lines: int = MAX_LINES_PER_FILE,
        on_open: Optional[Callable[[Path], None]] = None,
    ):
        if max_lines < 2:
            raise ValueError("max_lines must leave room for the header and a row")
        self.base_path = Path(base_path)
        self.header = list(header)
        self.max_lines = max_lines
        self.on_open = on_open
        self.paths: list[Path] = []
        self.lines_in_file = 0
        self._file: Optional[TextIO] = None
        self._writer = None

    def __enter__(self) -> "SplitCsvWriter":
        self.open_next()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open_next(self) -> Path:
        """Close the current file and start the next numbered one."""
        self.close()
        path = make_out_name(self.base_path, len(self.paths) + 1)
        try:
            # utf-8-sig writes the BOM ahead of the first line
            self._file = open(path, "w", encoding="utf-8-sig", newline="")
        except OSError as e:
            raise OutputError(f"Failed to open output: {path}") from e

        self.paths.append(path)
        self._writer = _make_writer(self._file)
        self._write(self.header)
        self.lines_in_file = 1

        if self.on_open:
            self.on_open(path)
        return path

    def write_row(self, fields: Sequence[str]) -> None:
        """Write one data row, rotating first if the file is full."""
        if self._file is None or self.lines_in_file + 1 > self.max_lines:
            self.open_next()
        self._write(fields)
        self.lines_in_file += 1

    def _write(self, fields: Sequence[str]) -> None:
        try:
            self._writer.writerow(fields)
        except OSError as e:
            raise OutputError(f"Failed to write output: {self.paths[-1]}") from e

    def close(self) -> None:
        if self._file is None:
            return
        # Buffered rows are flushed here, so a full disk can surface on close.
        try:
            self._file.close()
        except OSError as e:
            raise OutputError(f"Failed to write output: {self.paths[-1]}") from e
        finally:
            self._file = None
            self._writer = None
