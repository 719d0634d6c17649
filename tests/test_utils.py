from datetime import datetime

from sales_core.parsing import parse_date, try_parse_amount
from sales_core.utils import fmt_date_range, fmt_money, fmt_txn_date


def test_fmt_money():
    assert fmt_money(25) == "$25.00"
    assert fmt_money(-5) == "-$5.00"
    assert fmt_money(1234.5) == "$1,234.50"
    assert fmt_money(0) == "$0.00"
    assert fmt_money(-0.001) == "$0.00"


def test_fmt_txn_date():
    assert fmt_txn_date("2024-01-01 14:05:00") == "01/01/24, 02:05 PM"
    assert fmt_txn_date("1/2/2024") == "01/02/24, 12:00 AM"
    assert fmt_txn_date("whenever") == "whenever"


def test_fmt_date_range():
    d1 = datetime(2024, 1, 1, 9)
    d2 = datetime(2024, 1, 1, 21)
    d3 = datetime(2024, 1, 3)
    assert fmt_date_range(d1, d2) == "01/01/2024"
    assert fmt_date_range(d1, d3) == "01/01/2024 - 01/03/2024"
    assert fmt_date_range(None, None) == ""


def test_parsing_edges():
    assert try_parse_amount("nan") is None
    assert try_parse_amount(" 3 ") == 3.0
    assert parse_date("2024-01-05T18:00:00Z") == datetime(2024, 1, 5)
    assert parse_date("2024-01-05T18:00:00") == datetime(2024, 1, 5, 18, 0)
