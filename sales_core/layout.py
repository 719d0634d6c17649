"""
sales_core.layout
Turns an aggregated report into an ordered list of layout instructions.

The planner does not draw. It walks the groups with a single vertical cursor
(millimetres from the top of the current page) and decides where sections,
tables, subtotals, page breaks and the grand total go. Table heights come from
a ``measure`` callable supplied by the rendering backend, since row wrapping
depends on fonts and column widths only the backend knows about.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional
from .config import (
    BOTTOM_MARGIN_MM,
    EST_BODY_ROW_MM,
    EST_HEAD_ROW_MM,
    FIRST_PAGE_TOP_MM,
    PAGE_BREAK_MARGIN_MM,
    PAGE_HEIGHT_MM,
    SECTION_HEADER_MM,
    SUBTOTAL_GAP_MM,
    SUBTOTAL_LINE_MM,
    SUMMARY_BREAK_MARGIN_MM,
    TABLE_GAP_MM,
    TABLE_HEAD,
    TOP_MARGIN_MM,
)
from .models import (
    AggregatedReport,
    CategoryGroup,
    GrandTotalBlock,
    LayoutInstruction,
    PageBreak,
    SectionHeader,
    SubtotalLine,
    TableBlock,
)
from .style import classify_amount
from .utils import DEFAULT_FORMATTER, UsdFormatter

log = logging.getLogger(__name__)

Measure = Callable[[TableBlock], float]


@dataclass(frozen=True)
class PageGeometry:
    page_height: float = PAGE_HEIGHT_MM
    page_break_margin: float = PAGE_BREAK_MARGIN_MM
    summary_break_margin: float = SUMMARY_BREAK_MARGIN_MM
    top_margin: float = TOP_MARGIN_MM
    first_page_top: float = FIRST_PAGE_TOP_MM
    bottom_margin: float = BOTTOM_MARGIN_MM
    header_height: float = SECTION_HEADER_MM
    table_gap: float = TABLE_GAP_MM
    subtotal_height: float = SUBTOTAL_LINE_MM
    subtotal_gap: float = SUBTOTAL_GAP_MM


DEFAULT_GEOMETRY = PageGeometry()


def estimate_table_height(block: TableBlock) -> float:
    return EST_HEAD_ROW_MM + EST_BODY_ROW_MM * len(block.rows)

def table_block(group: CategoryGroup, formatter: UsdFormatter = DEFAULT_FORMATTER) -> TableBlock:
    rows = tuple(
        (t.id, formatter.date(t.date), t.payment_details, t.card_type, formatter.money(t.amount))
        for t in group.transactions
    )
    highlights = tuple(classify_amount(t.amount) for t in group.transactions)
    return TableBlock(category=group.category, head=tuple(TABLE_HEAD), rows=rows, highlights=highlights)

def _after_table(cursor: float, height: float, page_height: float, geo: PageGeometry) -> float:
    # long tables continue on the following page(s); the cursor follows them
    bottom = page_height - geo.bottom_margin
    usable = bottom - geo.top_margin
    cursor += height
    while cursor > bottom and usable > 0:
        cursor -= usable
    return cursor

def plan(
    report: AggregatedReport,
    page_height: float = PAGE_HEIGHT_MM,
    page_break_margin: float = PAGE_BREAK_MARGIN_MM,
    measure: Optional[Measure] = None,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    formatter: UsdFormatter = DEFAULT_FORMATTER,
) -> List[LayoutInstruction]:
    if page_height <= 0:
        raise ValueError(f"page_height must be positive, got {page_height}")
    if page_break_margin < 0 or page_break_margin >= page_height:
        raise ValueError(f"page_break_margin out of range: {page_break_margin}")

    measure = measure or estimate_table_height
    section_limit = page_height - page_break_margin
    summary_limit = page_height - geometry.summary_break_margin

    out: List[LayoutInstruction] = []
    cursor = geometry.first_page_top

    for name, group in report.groups.items():
        if cursor > section_limit:
            log.debug("Page break before section %r at %.1f", name, cursor)
            out.append(PageBreak())
            cursor = geometry.top_margin

        out.append(SectionHeader(name))
        cursor += geometry.header_height

        block = table_block(group, formatter)
        out.append(block)
        cursor = _after_table(cursor, measure(block), page_height, geometry) + geometry.table_gap

        out.append(SubtotalLine(name, group.total))
        cursor += geometry.subtotal_height + geometry.subtotal_gap

    if cursor > summary_limit:
        log.debug("Page break before grand total at %.1f", cursor)
        out.append(PageBreak())

    out.append(GrandTotalBlock(report.grand_total))
    return out
