"""
sales_core.utils
Small reusable helpers + the report formatter.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from .parsing import parse_date

ZERO_MONEY = "$0.00"

def fmt_money(n: float) -> str:
    """US currency, sign in front of the symbol: -$5.00"""
    n = round(float(n), 2)
    if n == 0:
        return ZERO_MONEY
    sign = "-" if n < 0 else ""
    return f"{sign}${abs(n):,.2f}"

def fmt_txn_date(raw: str) -> str:
    d = parse_date(raw)
    if d is None:
        return raw
    return d.strftime("%m/%d/%y, %I:%M %p")

def fmt_day(d: datetime) -> str:
    return d.strftime("%m/%d/%Y")

def fmt_date_range(start: Optional[datetime], end: Optional[datetime]) -> str:
    if start is None or end is None:
        return ""
    a, b = fmt_day(start), fmt_day(end)
    return a if a == b else f"{a} - {b}"


class UsdFormatter:
    """Formatting interface used by the layout planner and the backends."""

    zero = ZERO_MONEY

    def money(self, amount: float) -> str:
        return fmt_money(amount)

    def date(self, raw: str) -> str:
        return fmt_txn_date(raw)

    def date_range(self, start: Optional[datetime], end: Optional[datetime]) -> str:
        return fmt_date_range(start, end)


DEFAULT_FORMATTER = UsdFormatter()
