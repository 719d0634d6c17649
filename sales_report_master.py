#!/usr/bin/env python3
"""
sales_report_master.py

Thundertix sales export (CSV) -> categorized sales report.

Subcommands:
- preview : print the grouped report (categories, rows, subtotals, grand total)
- pdf     : write the printable PDF report (RWC-Sales-Report-<first date>.pdf)

Examples:
  python3 sales_report_master.py --in sales.csv preview
  python3 sales_report_master.py --in sales.csv pdf
  python3 sales_report_master.py --in sales.csv pdf --out ~/Desktop/report.pdf

Logs go to output/logs/, PDFs to output/pdf/ unless --out is given.
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from sales_core.config import DEFAULT_INPUT_CSV
from sales_core.io_csv import parse_csv
from sales_core.models import AggregatedReport, Highlight
from sales_core.paths import out_path
from sales_core.report import EmptyReportError, build_report, report_filename
from sales_core.style import classify_amount
from sales_core.utils import DEFAULT_FORMATTER

# -----------------------------
# Logging
# -----------------------------
def setup_logging(base_dir: Path) -> Path:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = out_path("log", f"sales_report_{stamp}.log", base=base_dir)

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # avoid duplicate handlers if user imports/runs in unusual way
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)

        sh = logging.StreamHandler()
        sh.setLevel(logging.WARNING)
        sh.setFormatter(fmt)

        root.addHandler(fh)
        root.addHandler(sh)

    logging.info("Logging started: %s", log_path)
    return log_path


# -----------------------------
# Upload
# -----------------------------
def decode_upload(in_path: Path) -> Optional[List[Dict[str, str]]]:
    """Rows on success; None (after reporting the message) on failure."""
    outcome: Dict[str, Any] = {}
    parse_csv(
        in_path,
        on_complete=lambda rows: outcome.update(rows=rows),
        on_error=lambda msg: outcome.update(error=msg),
    )
    if "error" in outcome:
        print(f"❌ {outcome['error']}")
        return None
    return outcome["rows"]


# -----------------------------
# Preview
# -----------------------------
MARKS = {Highlight.NORMAL: " ", Highlight.REFUND: "R", Highlight.ZERO: "0"}

def print_preview(report: AggregatedReport) -> None:
    fm = DEFAULT_FORMATTER
    dr = report.date_range
    print("\n📊 Report Preview")
    if dr.start and dr.end:
        print(f"   {fm.date_range(dr.start, dr.end)}")
    print("-" * 96)

    for name, group in report.groups.items():
        print(f"\n{name}")
        for t in group.transactions:
            mark = MARKS[classify_amount(t.amount)]
            print(f" {mark} {t.id:14s} {fm.date(t.date):22s} {t.payment_details[:26]:26s} "
                  f"{t.card_type[:12]:12s} {fm.money(t.amount):>14s}")
        print(f"{'':>60s}{name} Total: {fm.money(group.total)}")

    print("-" * 96)
    print(f"Grand Total: {fm.money(report.grand_total)}   ({report.transaction_count} txns)")


# -----------------------------
# Commands
# -----------------------------
def run_preview(in_path: Path) -> int:
    rows = decode_upload(in_path)
    if rows is None:
        return 1
    result = build_report(rows)
    if result.report.is_empty:
        print("⚠️  No sales rows found in this file.")
        return 0
    print_preview(result.report)
    return 0

def run_pdf(in_path: Path, out: Optional[str], base: Path) -> int:
    from sales_core.pdf_reports import make_measurer, write_report_pdf

    rows = decode_upload(in_path)
    if rows is None:
        return 1
    result = build_report(rows, measure=make_measurer())

    pdf_path = Path(out).expanduser() if out else out_path("pdf", report_filename(result.report.date_range), base=base)
    try:
        write_report_pdf(result, pdf_path)
    except EmptyReportError as e:
        print(f"⚠️  {e}")
        return 0

    print(f"✅ PDF created: {pdf_path}")
    print(f"   {len(result.report.groups)} categories, grand total {DEFAULT_FORMATTER.money(result.report.grand_total)}")
    return 0


# -----------------------------
# CLI
# -----------------------------
def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sales export CSV -> categorized sales report (console preview / PDF).")
    p.add_argument("--in", dest="input_csv", default=DEFAULT_INPUT_CSV, help="Input CSV file.")
    p.add_argument("--base", default=".", help="Folder that receives output/ (default: current folder).")

    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("preview", help="Print the grouped report to the console.")
    pp = sub.add_parser("pdf", help="Write the printable PDF report.")
    pp.add_argument("--out", default=None, help="PDF path (default: output/pdf/RWC-Sales-Report-<date>.pdf).")

    args = p.parse_args(argv)

    base = Path(args.base).expanduser()
    setup_logging(base)

    in_path = Path(args.input_csv).expanduser()
    if not in_path.exists():
        print(f"❌ Input CSV not found: {in_path}")
        return 1

    if args.cmd == "preview":
        return run_preview(in_path)
    if args.cmd == "pdf":
        return run_pdf(in_path, out=args.out, base=base)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
