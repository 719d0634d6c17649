"""
sales_core.report
One call surface for the CLI and the PDF backend: rows -> report + layout.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
from .aggregate import aggregate
from .config import REPORT_FILE_FALLBACK, REPORT_FILE_PREFIX
from .layout import DEFAULT_GEOMETRY, Measure, PageGeometry, plan
from .models import AggregatedReport, DateRange, LayoutInstruction
from .normalize import RawRow


class EmptyReportError(ValueError):
    """Raised when asked to render a report with no aggregated data."""


@dataclass(frozen=True)
class ReportResult:
    report: AggregatedReport
    instructions: List[LayoutInstruction]
    geometry: PageGeometry = DEFAULT_GEOMETRY


def build_report(
    rows: Iterable[RawRow],
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    measure: Optional[Measure] = None,
) -> ReportResult:
    report = aggregate(rows)
    instructions = plan(
        report,
        page_height=geometry.page_height,
        page_break_margin=geometry.page_break_margin,
        measure=measure,
        geometry=geometry,
    )
    return ReportResult(report=report, instructions=instructions, geometry=geometry)

def report_filename(date_range: DateRange) -> str:
    stem = date_range.start.strftime("%Y-%m-%d") if date_range.start else REPORT_FILE_FALLBACK
    return f"{REPORT_FILE_PREFIX}-{stem}.pdf"
