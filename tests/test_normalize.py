import pytest

from suicaconv.normalize import build_payee, format_amount, parse_amount, trim_wide


# Tests for trim_wide
def test_trim_wide_ascii_whitespace():
    """Test trimming spaces, tabs and newlines."""
    assert trim_wide(" \t ATM \r\n") == "ATM"


def test_trim_wide_full_width_space():
    """Test trimming ideographic spaces on both ends."""
    assert trim_wide("　現金　 ") == "現金"


def test_trim_wide_keeps_inner_spaces():
    """Test that inner spaces are preserved."""
    assert trim_wide(" 新宿 駅　東口 ") == "新宿 駅　東口"


def test_trim_wide_idempotent():
    """Test trimming twice gives the same result."""
    once = trim_wide("　 物販 \t")
    assert trim_wide(once) == once


def test_trim_wide_empty():
    """Test trimming whitespace-only input."""
    assert trim_wide(" 　\t") == ""


# Tests for parse_amount
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("-389", -389),
        ("+1,000", 1000),
        ("1000", 1000),
        ("  -1,234,567 ", -1234567),
        ("￥1,200", 1200),
        ("\\500", 500),
        ("- 200", -200),
        ("　+30　", 30),
        ("0", 0),
        ("-0", 0),
    ],
)
def test_parse_amount_valid(raw, expected):
    """Test parsing well-formed amounts."""
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "　", "abc", "12a", "1.5", "+-3", "--3", "+", "¥100", "１２３"],
)
def test_parse_amount_invalid(raw):
    """Test that malformed amounts return None."""
    assert parse_amount(raw) is None


# Tests for format_amount
def test_format_amount_below_thousand():
    """Test that small amounts are plain digits."""
    assert format_amount(0) == "0"
    assert format_amount(389) == "389"
    assert format_amount(999) == "999"


def test_format_amount_thousands_separator():
    """Test thousands separators from 1,000 up."""
    assert format_amount(1000) == "1,000"
    assert format_amount(12345) == "12,345"
    assert format_amount(1234567) == "1,234,567"


@pytest.mark.parametrize("n", [0, 7, 999, 1000, 1001, 99999, 100000, 10**9 + 7])
def test_format_amount_round_trip(n):
    """Test that removing separators gives back the number."""
    assert int(format_amount(n).replace(",", "")) == n


# Tests for build_payee
def test_build_payee_skips_empty_tokens():
    """Test joining with empty columns in between."""
    assert build_payee(["現金", "ATM", "", ""]) == "現金 ATM"


def test_build_payee_trims_tokens():
    """Test that tokens are trimmed before joining."""
    assert build_payee([" 入 ", "　新宿　", "出", " 渋谷"]) == "入 新宿 出 渋谷"


def test_build_payee_all_empty():
    """Test that whitespace-only tokens give an empty payee."""
    assert build_payee(["", " ", "　", ""]) == ""
