"""
sales_core.normalize
Raw CSV row -> canonical record. Column aliasing + summary-row skipping.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence
from .config import (
    AMOUNT_FIELDS,
    CARD_TYPE_FIELDS,
    CATEGORY_FIELDS,
    DATE_FIELDS,
    ID_FIELDS,
    PAYMENT_DETAILS_FIELDS,
    SKIP_CATEGORY_MARKERS,
    UNCATEGORIZED,
)
from .models import Transaction
from .parsing import parse_date, try_parse_amount

RawRow = Dict[str, str]


@dataclass(frozen=True)
class NormalizedRow:
    category: str
    date: str
    id: str
    payment_details: str
    card_type: str
    amount: float

    @property
    def has_date(self) -> bool:
        # rows without a date are bookkeeping rows, not sales
        return bool(self.date.strip())

    def to_transaction(self) -> Transaction:
        return Transaction(
            id=self.id,
            date=self.date,
            payment_details=self.payment_details,
            card_type=self.card_type,
            amount=self.amount,
        )


def resolve_field(row: RawRow, candidates: Sequence[str]) -> str:
    """First candidate column that is present and non-empty, else ''.

    The value is returned exactly as exported; callers that care about
    whitespace-only values (the date rule) test ``value.strip()`` themselves.
    """
    for name in candidates:
        value = row.get(name)
        if value is None:
            continue
        value = str(value)
        if value != "":
            return value
    return ""

def resolve_amount(row: RawRow, candidates: Sequence[str] = AMOUNT_FIELDS) -> float:
    for name in candidates:
        n = try_parse_amount(row.get(name))
        if n is not None:
            return n
    return 0.0

def resolve_category(row: RawRow) -> str:
    return resolve_field(row, CATEGORY_FIELDS) or UNCATEGORIZED

def is_skipped_category(category: str) -> bool:
    if not category:
        return True
    return any(marker in category for marker in SKIP_CATEGORY_MARKERS)

def row_date(row: RawRow) -> Optional[datetime]:
    return parse_date(resolve_field(row, DATE_FIELDS))

def normalize_row(row: RawRow) -> Optional[NormalizedRow]:
    """None means the row is skipped from grouping (summary/empty category)."""
    category = resolve_category(row)
    if is_skipped_category(category):
        return None
    return NormalizedRow(
        category=category,
        date=resolve_field(row, DATE_FIELDS),
        id=resolve_field(row, ID_FIELDS),
        payment_details=resolve_field(row, PAYMENT_DETAILS_FIELDS),
        card_type=resolve_field(row, CARD_TYPE_FIELDS),
        amount=resolve_amount(row),
    )
