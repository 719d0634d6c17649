import pytest

from sales_core.io_csv import CsvDecodeError, load_csv_rows, parse_csv

CSV_TEXT = (
    "Classes,Date,Payment Details,Card Type,Payment Type,Sum of Total Paid/Refunded\n"
    "A1,2024-01-01,Online,Visa,25,Music\n"
    "\n"
    ",,,,,\n"
    "A2,2024-01-02,Box office,Cash,-5,Music\n"
)


def test_load_rows_from_file_skips_blank_lines(tmp_path):
    p = tmp_path / "sales.csv"
    p.write_text(CSV_TEXT, encoding="utf-8")
    rows = load_csv_rows(p)
    assert [r["Classes"] for r in rows] == ["A1", "A2"]
    assert rows[1]["Payment Type"] == "-5"


def test_load_rows_from_bytes_with_bom():
    rows = load_csv_rows(("\ufeff" + CSV_TEXT).encode("utf-8"))
    assert "Classes" in rows[0]


def test_missing_file_and_undecodable_bytes_fail(tmp_path):
    with pytest.raises(CsvDecodeError):
        load_csv_rows(tmp_path / "nope.csv")
    with pytest.raises(CsvDecodeError):
        load_csv_rows(b"\xff\xfe\x00bad")


def test_empty_input_decodes_to_no_rows(tmp_path):
    assert load_csv_rows(b"") == []
    assert load_csv_rows(b"  \n\n") == []
    p = tmp_path / "empty.csv"
    p.write_bytes(b"")
    assert load_csv_rows(p) == []


def test_parse_csv_completes_on_empty_input():
    done, failed = [], []
    parse_csv(b"", on_complete=done.append, on_error=failed.append)
    assert done == [[]]
    assert failed == []


def test_parse_csv_calls_exactly_one_callback(tmp_path):
    done, failed = [], []
    parse_csv(CSV_TEXT.encode("utf-8"), on_complete=done.append, on_error=failed.append)
    assert len(done) == 1 and not failed
    assert len(done[0]) == 2

    done, failed = [], []
    parse_csv(tmp_path / "nope.csv", on_complete=done.append, on_error=failed.append)
    assert not done
    assert len(failed) == 1
    assert failed[0].startswith("Error parsing CSV:")
