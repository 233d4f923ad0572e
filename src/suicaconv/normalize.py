import re
from typing import Iterable, Optional

# ASCII whitespace plus the full-width (ideographic) space
_WIDE_WHITESPACE = " \t\n\r\x0b\x0c\u3000"

_AMOUNT_NOISE = ("\\", "￥", ",", " ")
_AMOUNT_RE = re.compile(r"[+-]?[0-9]+")


def trim_wide(s: str) -> str:
    """Trim ASCII whitespace and full-width spaces from both ends."""
    return s.strip(_WIDE_WHITESPACE)


def parse_amount(s: str) -> Optional[int]:
    """Parse an amount like "+1,000", "-389" or "￥1,200".

    Args:
        s: Raw amount column

    Returns:
        Signed integer value, or None if the text is empty or not a plain integer
    """
    s = trim_wide(s)
    if not s:
        return None

    for noise in _AMOUNT_NOISE:
        s = s.replace(noise, "")

    if not _AMOUNT_RE.fullmatch(s):
        return None
    return int(s)


def format_amount(n: int) -> str:
    """Format an absolute amount, with thousands separators from 1,000 up."""
    return f"{n:,}" if n >= 1000 else str(n)


def build_payee(tokens: Iterable[str]) -> str:
    """Join the non-empty trimmed tokens with a single space."""
    clean = [trim_wide(t) for t in tokens]
    return " ".join(t for t in clean if t)
