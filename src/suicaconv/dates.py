"""Calendar helpers: month/day parsing and year inference."""

import re
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from .normalize import trim_wide

TIMEZONE = "Asia/Tokyo"

_MONTH_DAY_RE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})")


def today_local(tz: str = TIMEZONE) -> date:
    """Return today's date in the card issuer's timezone."""
    return datetime.now(ZoneInfo(tz)).date()


def parse_month_day(token: str) -> Optional[tuple[int, int]]:
    """Parse a "MM/DD" token (one or two digits each).

    Returns:
        Tuple of (month, day), or None if the token does not match
    """
    match = _MONTH_DAY_RE.fullmatch(trim_wide(token))
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def resolve_year(month: int, day: int, today: date) -> int:
    """Infer the year of a month/day pair relative to today.

    The history only carries month and day. A date that would fall after
    today in the current year belongs to the previous year.

    Args:
        month: Month number (1-12)
        day: Day of month
        today: Reference date

    Returns:
        today.year, or today.year - 1 when the pair is later than today
    """
    # Compared as pairs so 02/29 in a non-leap year does not raise.
    if (month, day) > (today.month, today.day):
        return today.year - 1
    return today.year


def day_key(year: int, month: int, day: int) -> str:
    """Build the YYYYMMDD key used for per-day sequencing."""
    return f"{year:04d}{month:02d}{day:02d}"
