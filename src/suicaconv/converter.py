import random
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from .dates import today_local
from .loader import read_input_lines
from .models import RawRecord
from .sequencer import Sequencer
from .transform import SkipReason, transform_record
from .writer import MAX_LINES_PER_FILE, SplitCsvWriter


@dataclass
class ConversionSummary:
    """Outcome of one conversion run."""

    rows_written: int = 0
    skipped: Counter = field(default_factory=Counter)
    paths: list[Path] = field(default_factory=list)


def convert_lines(
    lines: Iterable[str],
    writer: SplitCsvWriter,
    sequencer: Sequencer,
    today: date,
    expense_only: bool = False,
) -> ConversionSummary:
    """Transform history lines (header first) and write the accepted rows."""
    summary = ConversionSummary()
    data_lines = iter(lines)
    next(data_lines, None)  # TSV header

    for line in data_lines:
        record = RawRecord.from_line(line)
        row, reason = transform_record(record, sequencer, today, expense_only)
        if row is None:
            summary.skipped[reason] += 1
            continue
        writer.write_row(row.as_fields())
        summary.rows_written += 1

    summary.paths = list(writer.paths)
    return summary


def run_conversion(
    in_path: Path,
    out_path: Path,
    expense_only: bool = False,
    today: Optional[date] = None,
    seed: Optional[int] = None,
    max_lines: int = MAX_LINES_PER_FILE,
    verbose: bool = False,
) -> ConversionSummary:
    """Convert a history file into numbered CSV files and report progress.

    Args:
        in_path: Input TSV path
        out_path: Output base path (files are written as name_001.ext, ...)
        expense_only: Whether to export only payments
        today: Reference date for year inference (default: today in Asia/Tokyo)
        seed: Seed for reproducible transaction numbers
        max_lines: Maximum lines per output file, header included
        verbose: If True, print status messages during execution

    Raises:
        InputError: If the input cannot be used; no output file is created
        OutputError: If an output file cannot be opened
    """
    lines = read_input_lines(in_path)
    if verbose:
        print(f"Read {len(lines) - 1} data lines from {in_path}")

    if today is None:
        today = today_local()
    rng = random.Random(seed) if seed is not None else None
    sequencer = Sequencer(rng)

    with SplitCsvWriter(
        out_path,
        max_lines=max_lines,
        on_open=lambda path: print(f"Writing: {path}"),
    ) as writer:
        summary = convert_lines(lines, writer, sequencer, today, expense_only)

    if verbose:
        print(f"Wrote {summary.rows_written} rows to {len(summary.paths)} file(s)")
        for reason in SkipReason:
            if summary.skipped[reason]:
                print(f"Skipped ({reason.value}): {summary.skipped[reason]}")

    return summary
