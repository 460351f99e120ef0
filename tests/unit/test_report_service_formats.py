# tests/unit/test_report_service_formats.py
import csv
import json
from pathlib import Path

import pytest

from fsearch.domain.models import FailureKind, FileMatch, ReadFailure, ResultSet
from fsearch.services.report_service import ReportService


def _result() -> ResultSet:
    return ResultSet(
        matches=[FileMatch("a.txt"), FileMatch("sub/b.txt")],
        errors=[ReadFailure("c.bin", FailureKind.DECODING, "invalid start byte")],
        files_scanned=3,
    )


def test_json_default(tmp_path: Path):
    out = tmp_path / "results.json"
    written = ReportService().write_results(_result(), out)
    assert written == out

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [m["path"] for m in data["matches"]] == ["a.txt", "sub/b.txt"]
    assert data["errors"] == [
        {"path": "c.bin", "kind": "decoding", "message": "invalid start byte"}
    ]


def test_json_empty(tmp_path: Path):
    out = tmp_path / "empty.json"
    ReportService().write_results(ResultSet(), out, fmt="json")
    assert json.loads(out.read_text(encoding="utf-8")) == {"matches": [], "errors": []}


def test_ndjson_one_record_per_line(tmp_path: Path):
    out = tmp_path / "results.ndjson"
    ReportService().write_results(_result(), out, fmt="ndjson")

    text = out.read_text(encoding="utf-8")
    lines = [ln for ln in text.splitlines() if ln]
    records = [json.loads(ln) for ln in lines]
    assert [r["type"] for r in records] == ["match", "match", "error"]
    assert records[2]["kind"] == "decoding"


def test_ndjson_empty_file_has_no_newline(tmp_path: Path):
    out = tmp_path / "empty.ndjson"
    ReportService().write_results(ResultSet(), out, fmt="ndjson")
    assert out.read_text(encoding="utf-8") == ""


def test_csv_rows(tmp_path: Path):
    out = tmp_path / "results.csv"
    ReportService().write_results(_result(), out, fmt="CSV")

    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["type"] for r in rows] == ["match", "match", "error"]
    assert rows[0]["kind"] == ""
    assert rows[2]["path"] == "c.bin"


def test_csv_empty_has_header_only(tmp_path: Path):
    out = tmp_path / "empty.csv"
    ReportService().write_results(ResultSet(), out, fmt="csv")
    rows = list(csv.reader(out.read_text(encoding="utf-8").splitlines()))
    assert rows == [["type", "path", "kind", "message"]]


def test_creates_parent_directories(tmp_path: Path):
    out = tmp_path / "nested" / "deeper" / "results.json"
    ReportService().write_results(_result(), out)
    assert out.exists()


def test_rejects_unsupported_format(tmp_path: Path):
    with pytest.raises(ValueError) as excinfo:
        ReportService().write_results(_result(), tmp_path / "x.bogus", fmt="bogus")
    assert "unsupported" in str(excinfo.value).lower()


def test_export_survives_undecodable_filename(tmp_path: Path):
    result = ResultSet(matches=[FileMatch("note\udcff.txt")])
    out = tmp_path / "results.json"
    ReportService().write_results(result, out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["matches"] == [{"path": "note\ufffd.txt"}]
