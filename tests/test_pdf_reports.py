import pytest

pytest.importorskip("reportlab")

from reportlab.lib.units import mm  # noqa: E402

from sales_core.layout import PageGeometry  # noqa: E402
from sales_core.models import Highlight, TableBlock  # noqa: E402
from sales_core.pdf_reports import (  # noqa: E402
    _content_width_mm,
    _doc,
    build_story,
    make_measurer,
    write_report_pdf,
)
from sales_core.report import EmptyReportError, build_report  # noqa: E402

from conftest import sale  # noqa: E402

AVAIL_W = _content_width_mm() * mm


def _block(n, details="Online"):
    rows = tuple(("T", "01/01/24, 12:00 AM", details, "Visa", "$1.00") for _ in range(n))
    return TableBlock("Music", ("a", "b", "c", "d", "e"), rows, (Highlight.NORMAL,) * n)


def _height_mm(flowable):
    return flowable.wrap(AVAIL_W, 1e6)[1] / mm


def test_measurer_reports_growing_heights_in_mm():
    measure = make_measurer()
    assert 0 < measure(_block(0)) < measure(_block(1)) < measure(_block(20))


def test_long_payment_details_wrap_and_are_measured():
    measure = make_measurer()
    long_text = "Season subscription, Orchestra row F seats 1-4, paid at box office & online " * 3
    assert measure(_block(1, long_text)) > measure(_block(1)) + 5


def test_story_spacing_follows_page_geometry(example_rows):
    geo = PageGeometry(header_height=12, table_gap=9, subtotal_height=7, subtotal_gap=4)
    result = build_report(example_rows, geometry=geo, measure=make_measurer())
    story = build_story(result)

    # title, bar, gap, table, gap, subtotal, gap, ...
    assert _height_mm(story[0]) == pytest.approx(geo.first_page_top - geo.top_margin)
    assert _height_mm(story[1]) + _height_mm(story[2]) == pytest.approx(geo.header_height)
    assert _height_mm(story[3]) == pytest.approx(make_measurer()(result.instructions[1]))
    assert _height_mm(story[4]) == pytest.approx(geo.table_gap)
    assert _height_mm(story[5]) == pytest.approx(geo.subtotal_height)
    assert _height_mm(story[6]) == pytest.approx(geo.subtotal_gap)


def test_title_block_height_without_date_range():
    result = build_report([sale("Music", "", "5")], measure=make_measurer())
    story = build_story(result)
    assert _height_mm(story[0]) == pytest.approx(20)


def test_frame_starts_at_planner_top_margin(tmp_path):
    geo = PageGeometry(top_margin=25, bottom_margin=12)
    doc = _doc(tmp_path / "x.pdf", geo)
    frame = doc.pageTemplates[0].frames[0]
    assert doc.topMargin == pytest.approx(25 * mm)
    assert doc.pagesize[1] == pytest.approx(geo.page_height * mm)
    assert (frame._topPadding, frame._bottomPadding) == (0, 0)


def test_write_pdf(tmp_path, example_rows):
    result = build_report(example_rows, measure=make_measurer())
    out = write_report_pdf(result, tmp_path / "pdf" / "report.pdf")
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")


def test_many_groups_span_pages(tmp_path):
    rows = [sale(f"Cat & Co {i % 15}", "2024-01-01", str(i - 20)) for i in range(120)]
    result = build_report(rows, measure=make_measurer())
    story = build_story(result)
    assert len(story) > len(result.instructions)
    assert write_report_pdf(result, tmp_path / "big.pdf").stat().st_size > 0


def test_empty_report_is_not_rendered(tmp_path):
    result = build_report([sale("Grand Total")])
    with pytest.raises(EmptyReportError):
        write_report_pdf(result, tmp_path / "empty.pdf")
    assert not (tmp_path / "empty.pdf").exists()
