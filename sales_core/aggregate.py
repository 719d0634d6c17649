"""
sales_core.aggregate
Fold raw rows into category groups + grand total + observed date range.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable
from .models import AggregatedReport, CategoryGroup, DateRange
from .normalize import RawRow, normalize_row, row_date

log = logging.getLogger(__name__)

def aggregate(rows: Iterable[RawRow]) -> AggregatedReport:
    building: Dict[str, Dict[str, Any]] = {}
    date_range = DateRange()
    seen = skipped = undated = 0

    for r in rows:
        seen += 1
        # date range covers the whole export, skipped rows included
        date_range = date_range.extend(row_date(r))

        norm = normalize_row(r)
        if norm is None:
            skipped += 1
            continue

        acc = building.setdefault(norm.category, {"txns": [], "total": 0.0})
        if not norm.has_date:
            undated += 1
            continue
        acc["txns"].append(norm.to_transaction())
        acc["total"] += norm.amount

    groups = {
        name: CategoryGroup(category=name, transactions=tuple(acc["txns"]), total=acc["total"])
        for name, acc in building.items()
    }
    grand_total = sum(g.total for g in groups.values())

    log.info(
        "Aggregated %d rows: %d groups, %d skipped, %d undated, grand total %.2f",
        seen, len(groups), skipped, undated, grand_total,
    )
    return AggregatedReport(groups=groups, grand_total=grand_total, date_range=date_range)
