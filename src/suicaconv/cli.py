import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from .converter import run_conversion
from .models import ConversionError
from .writer import MAX_LINES_PER_FILE

DEFAULT_IN = Path("load.txt")
DEFAULT_OUT = Path("save.csv")

app = typer.Typer(
    help="Convert a Suica SF payment history into MoneyForward CSV files.",
    add_completion=False,
)


@app.command()
def convert(
    in_path: Path = typer.Option(
        DEFAULT_IN, "--in", help="Input TSV file (card history export)."
    ),
    out_path: Path = typer.Option(
        DEFAULT_OUT,
        "--out",
        help="Output CSV base path. Files are written as NAME_001.EXT, NAME_002.EXT, ...",
    ),
    expense_only: bool = typer.Option(
        False, "--expense-only", help="Export only payments (charges are skipped)."
    ),
    today: Optional[datetime] = typer.Option(
        None,
        "--today",
        formats=["%Y-%m-%d"],
        help="Reference date for year inference. Defaults to today in Asia/Tokyo.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed transaction number suffixes for reproducible output."
    ),
    max_lines: int = typer.Option(
        MAX_LINES_PER_FILE,
        "--max-lines",
        min=2,
        help="Maximum lines per output file, header included.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show detailed status messages during execution."
    ),
):
    """
    Convert the history in --in into one or more CSV files based on --out.
    """
    try:
        run_conversion(
            in_path,
            out_path,
            expense_only=expense_only,
            today=today.date() if today else None,
            seed=seed,
            max_lines=max_lines,
            verbose=verbose,
        )
    except ConversionError as e:
        print(e, file=sys.stderr)
        raise typer.Exit(code=1)

    print("OK")