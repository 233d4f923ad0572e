"""Data models for suicaconv input records and output rows."""

from dataclasses import dataclass

PLACEHOLDER = "-"

CSV_HEADER = [
    "取引日",
    "出金金額（円）",
    "入金金額（円）",
    "海外出金金額",
    "通貨",
    "変換レート（円）",
    "利用国",
    "取引内容",
    "取引先",
    "取引方法",
    "支払い区分",
    "利用者",
    "取引番号",
]

# 取引内容
CONTENT_PAYMENT = "支払い"
CONTENT_CHARGE = "チャージ"

# 取引方法
METHOD_SUICA = "Suica"
METHOD_WALLET = "財布"
METHOD_VIEW_CARD = "VIEWカード"
METHOD_CARD = "カード"

# 利用者
USER_SELF = "本人"

# type1 tokens that decide how a charge was paid
TYPE_CASH = "現金"
TYPE_AUTO_CHARGE = "ｵｰﾄ"

RAW_FIELD_COUNT = 7


class ConversionError(Exception):
    """Base class for errors that abort a conversion run."""


@dataclass
class RawRecord:
    """One tab-separated line of the card history."""

    month_day: str
    type1: str
    place1: str
    type2: str
    place2: str
    balance: str
    amount_raw: str

    @classmethod
    def from_line(cls, line: str) -> "RawRecord":
        """Split a TSV line into exactly seven positional fields.

        Missing trailing columns become empty strings, extra columns are ignored.
        """
        cols = line.split("\t")[:RAW_FIELD_COUNT]
        cols += [""] * (RAW_FIELD_COUNT - len(cols))
        return cls(*cols)


@dataclass(frozen=True)
class OutputRow:
    """Container for one MoneyForward import row."""

    trade_date: str  # YYYY/MM/DD HH:MM:SS
    withdrawal: str
    deposit: str
    content: str
    payee: str
    method: str
    user: str
    transaction_no: str
    foreign_withdrawal: str = PLACEHOLDER
    currency: str = PLACEHOLDER
    exchange_rate: str = PLACEHOLDER
    country: str = PLACEHOLDER
    payment_category: str = PLACEHOLDER

    def as_fields(self) -> list[str]:
        """Return the fields in CSV_HEADER order."""
        return [
            self.trade_date,
            self.withdrawal,
            self.deposit,
            self.foreign_withdrawal,
            self.currency,
            self.exchange_rate,
            self.country,
            self.content,
            self.payee,
            self.method,
            self.payment_category,
            self.user,
            self.transaction_no,
        ]
