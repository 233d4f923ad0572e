from datetime import date
from enum import Enum
from typing import Optional

from .dates import day_key, parse_month_day, resolve_year
from .models import (
    CONTENT_CHARGE,
    CONTENT_PAYMENT,
    METHOD_CARD,
    METHOD_SUICA,
    METHOD_VIEW_CARD,
    METHOD_WALLET,
    PLACEHOLDER,
    TYPE_AUTO_CHARGE,
    TYPE_CASH,
    USER_SELF,
    OutputRow,
    RawRecord,
)
from .normalize import build_payee, format_amount, parse_amount, trim_wide
from .sequencer import Sequencer

TRADE_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class SkipReason(str, Enum):
    """Why a record produced no output row."""

    amount = "amount"
    expense_only = "expense_only"
    date = "date"


def _charge_method(type1: str) -> str:
    """Pick the payment method label for a charge based on its type column."""
    if type1 == TYPE_CASH:
        return METHOD_WALLET
    if type1 == TYPE_AUTO_CHARGE:
        return METHOD_VIEW_CARD
    return METHOD_CARD


def classify(amount: int, type1: str) -> dict[str, str]:
    """Split a signed amount into withdrawal/deposit columns and labels.

    Args:
        amount: Non-zero signed amount (negative for payments)
        type1: Trimmed first type column

    Returns:
        Dict with withdrawal, deposit, content, method and user
    """
    formatted = format_amount(abs(amount))
    if amount < 0:
        return {
            "withdrawal": formatted,
            "deposit": PLACEHOLDER,
            "content": CONTENT_PAYMENT,
            "method": METHOD_SUICA,
            "user": USER_SELF,
        }
    return {
        "withdrawal": PLACEHOLDER,
        "deposit": formatted,
        "content": CONTENT_CHARGE,
        "method": _charge_method(type1),
        "user": PLACEHOLDER,
    }


def _resolve_date(month_day: str, today: date) -> Optional[date]:
    """Turn a MM/DD token into a full date, or None if it is not a real day."""
    parsed = parse_month_day(month_day)
    if parsed is None:
        return None

    month, day = parsed
    year = resolve_year(month, day, today)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def transform_record(
    record: RawRecord,
    sequencer: Sequencer,
    today: date,
    expense_only: bool = False,
) -> tuple[Optional[OutputRow], Optional[SkipReason]]:
    """Transform one raw record into an output row.

    The sequencer is only advanced for records that produce a row.

    Args:
        record: Parsed TSV record
        sequencer: Run state for timestamps and transaction numbers
        today: Reference date for year inference
        expense_only: Skip records with a positive amount

    Returns:
        (row, None) for an accepted record, (None, reason) otherwise
    """
    amount = parse_amount(record.amount_raw)
    if not amount:
        return None, SkipReason.amount

    if expense_only and amount > 0:
        return None, SkipReason.expense_only

    trade_day = _resolve_date(record.month_day, today)
    if trade_day is None:
        return None, SkipReason.date

    type1 = trim_wide(record.type1)
    timestamp = sequencer.next_timestamp(trade_day.year, trade_day.month, trade_day.day)
    columns = classify(amount, type1)
    payee = build_payee([type1, record.place1, record.type2, record.place2])
    key = day_key(trade_day.year, trade_day.month, trade_day.day)

    row = OutputRow(
        trade_date=timestamp.strftime(TRADE_DATE_FORMAT),
        payee=payee,
        transaction_no=sequencer.next_transaction_no(key),
        **columns,
    )
    return row, None
