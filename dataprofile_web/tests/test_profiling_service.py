from __future__ import annotations

import dataclasses
import json

import pytest

from dataprofile_web.adapters.uploads import InMemoryUpload, UploadSource
from dataprofile_web.domain.errors import FileReadError
from dataprofile_web.services.profiling_service import ProfilingService


# -----------------------------
# Test doubles
# -----------------------------
class FailingUpload(UploadSource):
    name = "broken.csv"

    @property
    def size(self) -> int:
        return 0

    def read_bytes(self) -> bytes:
        raise PermissionError("access denied")


def analyze(name: str, data: bytes):
    return ProfilingService().analyze(InMemoryUpload(name, data))


def test_csv_round_trip_through_service():
    result = analyze("sales.csv", b"region,amount\nnorth,10\nsouth,30\n")

    assert result.file_type == "csv"
    assert result.file_size == "32 Bytes"
    assert result.row_count == 2
    assert result.headers == ("region", "amount")
    assert dict(result.data_types) == {"region": "string", "amount": "number"}
    assert result.statistics["amount"].mean == 20


def test_empty_csv_has_no_optional_fields():
    result = analyze("empty.csv", b"\n\n")
    assert result.to_dict() == {
        "summary": "Empty CSV file detected.",
        "fileType": "csv",
        "fileSize": "2 Bytes",
        "rowCount": 0,
        "columnCount": 0,
        "recommendations": [],
    }


def test_malformed_json_is_reported_not_raised():
    result = analyze("bad.json", b'{"a": 1,')
    assert result.summary == "Empty or invalid JSON file."
    assert result.recommendations == (
        "Check the JSON format and try again",
        "Ensure the file contains valid JSON data",
    )
    assert result.row_count is None
    assert result.headers is None


def test_json_uppercase_extension_is_routed():
    payload = json.dumps([{"x": 1}, {"x": 2}]).encode()
    result = analyze("DATA.JSON", payload)
    assert result.file_type == "json"
    assert result.row_count == 2


def test_txt_is_routed():
    result = analyze("notes.txt", b"hello world\n")
    assert result.summary == "Unstructured text file with 1 lines and 2 words."
    assert result.text_statistics.word_count == 2
    assert result.statistics is None


def test_xlsx_gets_canned_report():
    result = analyze("book.xlsx", b"PK\x03\x04")
    assert result.summary == "Excel file detected. Basic metadata analysis available."
    assert len(result.recommendations) == 3
    assert result.row_count is None
    assert result.headers is None


@pytest.mark.parametrize("name", ["image.png", "Makefile", "report.pdf"])
def test_unsupported_types_get_canned_report(name):
    result = analyze(name, b"\x00\x01")
    assert result.summary == "Unsupported file format. Limited analysis available."
    assert result.recommendations == ("Convert to a supported format (CSV, JSON, TXT)",)


def test_read_failure_propagates():
    with pytest.raises(FileReadError):
        ProfilingService().analyze(FailingUpload())


def test_result_is_immutable():
    result = analyze("a.csv", b"k,v\nx,1\n")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.summary = "changed"
    with pytest.raises(TypeError):
        result.data_types["k"] = "number"
    with pytest.raises(TypeError):
        result.sample_data[0]["k"] = "y"


def test_each_upload_gets_an_independent_result():
    service = ProfilingService()
    first = service.analyze(InMemoryUpload("a.csv", b"k\n1\n"))
    second = service.analyze(InMemoryUpload("a.csv", b"k\n1\n"))
    assert first == second
    assert first is not second


def test_to_dict_uses_camel_case_and_keeps_order():
    result = analyze("a.csv", b"z,a,m\n1,x,2024-01-01\n2,y,2024-01-02\n")
    d = result.to_dict()

    assert list(d["dataTypes"]) == ["z", "a", "m"]
    assert list(d["sampleData"][0]) == ["z", "a", "m"]
    assert d["statistics"]["z"] == {"min": 1, "max": 2, "mean": 1.5, "median": 1.5, "stdDev": 0.5, "count": 2}
    assert set(d) == {
        "summary", "fileType", "fileSize", "rowCount", "columnCount", "headers",
        "dataTypes", "sampleData", "statistics", "recommendations",
    }


@pytest.mark.parametrize(
    "name, payload",
    [
        ("nan.json", b'[{"a": NaN}]'),
        ("deep.json", b"[" * 100000 + b"]" * 100000),
    ],
)
def test_invalid_json_documents_get_the_invalid_report(name, payload):
    result = analyze(name, payload)
    assert result.summary == "Empty or invalid JSON file."
    assert result.headers is None


def test_row_array_json_is_profiled_by_position():
    result = analyze("rows.json", b'[[1, "a"], [2, "b"]]')
    assert result.headers == ("0", "1")
    assert dict(result.data_types) == {"0": "number", "1": "string"}
    assert result.statistics["0"].median == 1.5
    assert result.sample_data == ((1, "a"), (2, "b"))


def test_nested_sample_values_are_frozen_all_the_way_down():
    result = analyze("nested.json", b'[{"id": 1, "tags": ["x", "y"], "meta": {"geo": {"lat": 1.5}}}]')
    row = result.sample_data[0]

    assert row["tags"] == ("x", "y")
    with pytest.raises(TypeError):
        row["meta"]["geo"]["lat"] = 0
    with pytest.raises(AttributeError):
        row["tags"].append("z")

    # Serialized form is plain JSON again
    assert result.to_dict()["sampleData"] == [{"id": 1, "tags": ["x", "y"], "meta": {"geo": {"lat": 1.5}}}]
