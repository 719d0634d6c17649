"""
sales_core.parsing
Date/amount parsing.
"""
from __future__ import annotations
import math
from datetime import datetime
from typing import Optional
from .config import DATE_FORMATS, DATETIME_FORMATS

def try_parse_amount(value) -> Optional[float]:
    """'$1,234.56', '1234.56', '(123.45)' -> float; anything else -> None."""
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    s = s.replace("$", "").replace(",", "")
    try:
        n = float(s)
    except ValueError:
        return None
    if not math.isfinite(n):
        return None
    return -n if neg else n

def parse_date(value: str) -> Optional[datetime]:
    s = " ".join(("" if value is None else str(value)).split())
    if not s:
        return None
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    # date-only fallback: drop time parts
    s = s.split()[0]
    if "T" in s:
        s = s.split("T")[0]
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None
