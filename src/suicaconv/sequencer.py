import random
from datetime import datetime, timedelta
from typing import Optional

from .dates import day_key

BASE_HOUR = 10


class Sequencer:
    """Per-run ordering state for accepted records.

    Rows on the same day get synthetic times counting down one minute from
    10:00:00, and every row gets a transaction number made of the day key,
    a run-wide index and a random hex suffix.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.SystemRandom()
        self.day_counter: dict[str, int] = {}
        self.index = 0

    def next_timestamp(self, year: int, month: int, day: int) -> datetime:
        """Return the trade time for the next row on the given day."""
        base = datetime(year, month, day, BASE_HOUR, 0, 0)
        key = day_key(year, month, day)
        offset = self.day_counter.get(key, 0)
        self.day_counter[key] = offset + 1
        return base - timedelta(minutes=offset)

    def next_transaction_no(self, key: str) -> str:
        """Return a transaction number like 20240124000103fa9c2e."""
        self.index += 1
        suffix = f"{self.rng.getrandbits(32):08x}"
        return f"{key}{self.index:04d}{suffix}"
