from pathlib import Path

from .models import ConversionError
from .normalize import trim_wide

# Card readers and export tools commonly emit Shift_JIS variants.
# cp932 is a superset of shift_jis, so the latter is not listed.
CANDIDATE_ENCODINGS = ["utf-8-sig", "cp932", "euc_jp"]

# ISO-2022-JP is 7-bit and would always pass as utf-8; its escape sequences
# (ESC $ B, ESC ( B) mark it.
ESCAPED_ENCODING = "iso2022_jp"


class InputError(ConversionError):
    """Raised when the history file is missing, unreadable or empty."""


def detect_encoding(raw: bytes) -> str:
    """Return the first candidate encoding that decodes raw strictly.

    Falls back to utf-8 when no candidate fits.
    """
    candidates = CANDIDATE_ENCODINGS
    if b"\x1b" in raw:
        candidates = [ESCAPED_ENCODING] + candidates

    for encoding in candidates:
        try:
            raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        return encoding
    return "utf-8"


def decode_lines(raw: bytes) -> list[str]:
    """Decode raw bytes and split into non-blank lines."""
    text = raw.decode(detect_encoding(raw), errors="replace")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line for line in text.split("\n") if trim_wide(line)]


def read_input_lines(path: Path) -> list[str]:
    """Read the history file into a list of lines, header first.

    Args:
        path: Input TSV path

    Returns:
        Non-blank lines with newlines normalized

    Raises:
        InputError: If the file is missing, unreadable or has no data lines
    """
    path = Path(path)
    if not path.is_file():
        raise InputError(f"Input file not found: {path}")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InputError(f"Failed to read input: {path}") from e

    lines = decode_lines(raw)
    if len(lines) <= 1:
        raise InputError("No data lines found.")
    return lines
