"""
sales_core.io_csv
CSV decoding: file -> list of header-keyed rows.
"""
from __future__ import annotations
import csv
import io
import logging
from pathlib import Path
from typing import Callable, Dict, List, Union

log = logging.getLogger(__name__)

Source = Union[str, Path, bytes]


class CsvDecodeError(ValueError):
    """The input could not be decoded into header-keyed rows."""


def _read_text(source: Source) -> str:
    try:
        if isinstance(source, bytes):
            return source.decode("utf-8-sig")
        with open(source, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CsvDecodeError(str(e)) from e

def _is_blank(row: Dict[str, str]) -> bool:
    return all(not (v or "").strip() for v in row.values() if isinstance(v, str))

def load_csv_rows(source: Source) -> List[Dict[str, str]]:
    text = _read_text(source)
    reader = csv.DictReader(io.StringIO(text, newline=""))
    try:
        headers = reader.fieldnames
        if not headers:
            # empty upload is not an error, it just has no rows
            log.warning("CSV is empty (no header row); nothing to aggregate")
            return []
        rows = [r for r in reader if not _is_blank(r)]
    except csv.Error as e:
        raise CsvDecodeError(f"line {reader.line_num}: {e}") from e
    log.info("Decoded %d rows (%d columns)", len(rows), len(headers))
    return rows

def parse_csv(
    source: Source,
    on_complete: Callable[[List[Dict[str, str]]], None],
    on_error: Callable[[str], None],
) -> None:
    """Single-shot decode: exactly one of the two callbacks runs."""
    try:
        rows = load_csv_rows(source)
    except CsvDecodeError as e:
        log.error("Error parsing CSV: %s", e)
        on_error(f"Error parsing CSV: {e}")
        return
    on_complete(rows)
