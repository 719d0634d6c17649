"""
sales_core.models
Report data: transactions, category groups, date range, layout instructions.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Transaction:
    id: str
    date: str  # raw, as exported
    payment_details: str
    card_type: str
    amount: float


@dataclass(frozen=True)
class CategoryGroup:
    category: str
    transactions: Tuple[Transaction, ...] = ()
    total: float = 0.0

    @property
    def count(self) -> int:
        return len(self.transactions)


@dataclass(frozen=True)
class DateRange:
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def extend(self, d: Optional[datetime]) -> "DateRange":
        if d is None:
            return self
        start = d if self.start is None or d < self.start else self.start
        end = d if self.end is None or d > self.end else self.end
        return DateRange(start, end)

    @property
    def is_empty(self) -> bool:
        return self.start is None


@dataclass(frozen=True)
class AggregatedReport:
    groups: Dict[str, CategoryGroup] = field(default_factory=dict)
    grand_total: float = 0.0
    date_range: DateRange = DateRange()

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def transaction_count(self) -> int:
        return sum(g.count for g in self.groups.values())


class Highlight(Enum):
    NORMAL = "normal"
    REFUND = "refund"
    ZERO = "zero"


# -----------------------------
# Layout instructions
# -----------------------------
@dataclass(frozen=True)
class SectionHeader:
    category: str


@dataclass(frozen=True)
class TableBlock:
    category: str
    head: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    highlights: Tuple[Highlight, ...]


@dataclass(frozen=True)
class SubtotalLine:
    category: str
    amount: float


@dataclass(frozen=True)
class PageBreak:
    pass


@dataclass(frozen=True)
class GrandTotalBlock:
    amount: float


LayoutInstruction = Union[SectionHeader, TableBlock, SubtotalLine, PageBreak, GrandTotalBlock]
