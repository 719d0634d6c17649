"""
sales_core.pdf_reports
PDF creation (reportlab): layout instructions -> platypus story.

Every block height and gap in the story comes from the same PageGeometry the
planner used, and the frame has no padding, so the planner's cursor and the
real page agree.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, List, Tuple
from xml.sax.saxutils import escape
from .config import (
    GRAND_TOTAL_BAR_MM,
    ORG_TITLE,
    PAGE_WIDTH_MM,
    REFUND_TEXT,
    REPORT_SUBTITLE,
    SECTION_BAR_MM,
    SECTION_FILL,
    SIDE_MARGIN_MM,
    TABLE_HEAD_FILL,
    TITLE_ROWS_MM,
    ZERO_TEXT,
)
from .layout import PageGeometry
from .models import (
    GrandTotalBlock,
    Highlight,
    PageBreak,
    SectionHeader,
    SubtotalLine,
    TableBlock,
)
from .report import EmptyReportError, ReportResult
from .utils import DEFAULT_FORMATTER

log = logging.getLogger(__name__)

# Transaction ID, Date, Payment Details, Card Type, Amount
DETAIL_COL_WIDTHS_MM = (30, 34, 58, 30, 30)
AMOUNT_COL = 4

def require_reportlab():
    try:
        from reportlab.lib.units import mm  # noqa
        from reportlab.lib import colors  # noqa
        from reportlab.lib.enums import TA_CENTER, TA_RIGHT  # noqa
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet  # noqa
        from reportlab.platypus import (  # noqa
            BaseDocTemplate, Frame, PageTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak
        )
        return (mm, colors, TA_CENTER, TA_RIGHT, ParagraphStyle, getSampleStyleSheet,
                BaseDocTemplate, Frame, PageTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak)
    except ImportError:
        raise SystemExit("Missing dependency: reportlab\nInstall with: pip3 install reportlab\n")

def _rgb(colors, rgb: Tuple[int, int, int]):
    r, g, b = rgb
    return colors.Color(r / 255.0, g / 255.0, b / 255.0)

def _content_width_mm() -> float:
    return PAGE_WIDTH_MM - 2 * SIDE_MARGIN_MM

def _style_detail_table(block: TableBlock, TableStyle, colors):
    st = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), _rgb(colors, TABLE_HEAD_FILL)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])
    if not block.rows:
        return st
    # text columns are Paragraphs; these apply to the amount column
    st.add("FONTSIZE", (AMOUNT_COL, 1), (AMOUNT_COL, -1), 8)
    st.add("TEXTCOLOR", (AMOUNT_COL, 1), (AMOUNT_COL, -1), colors.black)
    st.add("ALIGN", (AMOUNT_COL, 1), (AMOUNT_COL, -1), "RIGHT")
    st.add("FONTNAME", (AMOUNT_COL, 1), (AMOUNT_COL, -1), "Helvetica-Bold")
    st.add("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.whitesmoke, colors.white])

    for i, hl in enumerate(block.highlights, start=1):
        if hl is Highlight.REFUND:
            st.add("TEXTCOLOR", (AMOUNT_COL, i), (AMOUNT_COL, i), _rgb(colors, REFUND_TEXT))
            st.add("FONTNAME", (AMOUNT_COL, i), (AMOUNT_COL, i), "Helvetica-Bold")
        elif hl is Highlight.ZERO:
            st.add("TEXTCOLOR", (AMOUNT_COL, i), (AMOUNT_COL, i), _rgb(colors, ZERO_TEXT))
            st.add("FONTNAME", (AMOUNT_COL, i), (AMOUNT_COL, i), "Helvetica-Oblique")
    return st

def detail_table(block: TableBlock):
    (mm, colors, _c, _r, ParagraphStyle, getSampleStyleSheet,
     _Doc, _Frame, _PT, Paragraph, _Spacer, Table, TableStyle, _PageBreak) = require_reportlab()
    cell = ParagraphStyle("RwcCell", parent=getSampleStyleSheet()["Normal"], fontSize=8, leading=10)

    data = [list(block.head)]
    for r in block.rows:
        # long payment details wrap inside their column
        data.append([Paragraph(escape(v), cell) for v in r[:AMOUNT_COL]] + list(r[AMOUNT_COL:]))
    tbl = Table(data, colWidths=[w * mm for w in DETAIL_COL_WIDTHS_MM], repeatRows=1)
    tbl.setStyle(_style_detail_table(block, TableStyle, colors))
    return tbl

def make_measurer() -> Callable[[TableBlock], float]:
    """Table height in mm, as reportlab will lay it out (wrapped rows included)."""
    mm = require_reportlab()[0]
    avail_w = _content_width_mm() * mm

    def measure(block: TableBlock) -> float:
        _w, h = detail_table(block).wrap(avail_w, 1e6)
        return h / mm

    return measure

def _bar(text: str, style, fill, height_mm: float, Table, TableStyle, Paragraph, mm):
    tbl = Table([[Paragraph(text, style)]], colWidths=[_content_width_mm() * mm], rowHeights=[height_mm * mm])
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), fill),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 2 * mm),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
    ]))
    return tbl

def _title_block(lines: List[Tuple[str, object]], height_mm: float, Table, TableStyle, Paragraph, mm):
    """Title lines in fixed rows that fill exactly ``height_mm``."""
    rows_mm = list(TITLE_ROWS_MM[:len(lines)])
    scale = min(1.0, height_mm / sum(rows_mm)) if rows_mm else 1.0
    rows_mm = [h * scale for h in rows_mm]
    rows_mm[-1] += height_mm - sum(rows_mm)

    tbl = Table([[Paragraph(text, style)] for text, style in lines],
                colWidths=[_content_width_mm() * mm], rowHeights=[h * mm for h in rows_mm])
    tbl.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
    ]))
    return tbl

def build_story(result: ReportResult, formatter=DEFAULT_FORMATTER) -> List:
    (mm, colors, TA_CENTER, TA_RIGHT, ParagraphStyle, getSampleStyleSheet,
     _Doc, _Frame, _PT, Paragraph, Spacer, Table, TableStyle, RLPageBreak) = require_reportlab()
    styles = getSampleStyleSheet()
    geo: PageGeometry = result.geometry

    title = ParagraphStyle("RwcTitle", parent=styles["Normal"], fontName="Helvetica-Bold",
                           fontSize=18, leading=22, alignment=TA_CENTER)
    subtitle = ParagraphStyle("RwcSubtitle", parent=styles["Normal"], fontSize=14, leading=16, alignment=TA_CENTER)
    small_center = ParagraphStyle("RwcDate", parent=styles["Normal"], fontSize=10, leading=12, alignment=TA_CENTER)
    section = ParagraphStyle("RwcSection", parent=styles["Normal"], fontName="Helvetica-Bold",
                             fontSize=12, leading=14, textColor=colors.white)
    # one subtotal line occupies exactly subtotal_height
    subtotal = ParagraphStyle("RwcSubtotal", parent=styles["Normal"], fontName="Helvetica-Bold",
                              fontSize=10, leading=geo.subtotal_height * mm, alignment=TA_RIGHT)
    grand = ParagraphStyle("RwcGrand", parent=styles["Normal"], fontName="Helvetica-Bold",
                           fontSize=14, leading=16, textColor=colors.white, alignment=TA_CENTER)

    def gap(height_mm: float):
        if height_mm > 0:
            story.append(Spacer(1, height_mm * mm))

    story = []
    lines = [(ORG_TITLE, title), (REPORT_SUBTITLE, subtitle)]
    dr = result.report.date_range
    if dr.start and dr.end:
        lines.append((f"Report Date: {formatter.date_range(dr.start, dr.end)}", small_center))
    story.append(_title_block(lines, geo.first_page_top - geo.top_margin, Table, TableStyle, Paragraph, mm))

    bar_mm = min(SECTION_BAR_MM, geo.header_height)
    for ins in result.instructions:
        if isinstance(ins, PageBreak):
            story.append(RLPageBreak())
        elif isinstance(ins, SectionHeader):
            story.append(_bar(escape(ins.category), section, _rgb(colors, SECTION_FILL), bar_mm,
                              Table, TableStyle, Paragraph, mm))
            gap(geo.header_height - bar_mm)
        elif isinstance(ins, TableBlock):
            story.append(detail_table(ins))
            gap(geo.table_gap)
        elif isinstance(ins, SubtotalLine):
            story.append(Paragraph(f"{escape(ins.category)} Total: {formatter.money(ins.amount)}", subtotal))
            gap(geo.subtotal_gap)
        elif isinstance(ins, GrandTotalBlock):
            story.append(_bar(f"Grand Total: {formatter.money(ins.amount)}", grand, colors.black, GRAND_TOTAL_BAR_MM,
                              Table, TableStyle, Paragraph, mm))
        else:
            raise TypeError(f"Unknown layout instruction: {ins!r}")
    return story

def _doc(pdf_path: Path, geo: PageGeometry):
    (mm, _colors, _c, _r, _PS, _ss,
     BaseDocTemplate, Frame, PageTemplate, *_rest) = require_reportlab()
    doc = BaseDocTemplate(
        str(pdf_path),
        pagesize=(PAGE_WIDTH_MM * mm, geo.page_height * mm),
        leftMargin=SIDE_MARGIN_MM * mm,
        rightMargin=SIDE_MARGIN_MM * mm,
        topMargin=geo.top_margin * mm,
        bottomMargin=geo.bottom_margin * mm,
        title=ORG_TITLE,
    )
    # no frame padding: the frame top is exactly the planner's top margin
    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id="report",
                  leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0)
    doc.addPageTemplates([PageTemplate(id="report", frames=[frame])])
    return doc

def write_report_pdf(result: ReportResult, pdf_path: Path) -> Path:
    if result.report.is_empty:
        raise EmptyReportError("No sales data aggregated; nothing to render.")

    pdf_path = Path(pdf_path)
    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    doc = _doc(pdf_path, result.geometry)
    doc.build(build_story(result))
    log.info("PDF written: %s (%d instructions)", pdf_path, len(result.instructions))
    return pdf_path
