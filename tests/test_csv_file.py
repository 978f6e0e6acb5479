# tests/test_csv_file.py
"""
Tests for fhir_valueset_tool/transform/to_valueset/csv_file.
"""

import json

from pathlib import Path

from fhir_valueset_tool.config import AppConfig
from fhir_valueset_tool.csv_parser import parse_flat_records
from fhir_valueset_tool.models import ConversionOptions
from fhir_valueset_tool.transform.to_valueset.csv_file import (
    CsvConverter,
    records_to_value_set,
)

CSV_TEXT = "code,system,display\nA,http://sys,Alpha\nB,http://sys,Beta\nC,http://other,Gamma\n"


def write_csv(tmp_path: Path, name: str = "my-codes.csv", text: str = CSV_TEXT) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


# ------------------------------------------------------------------------------
# records_to_value_set
# ------------------------------------------------------------------------------


def test_end_to_end_groups_and_derived_metadata(tmp_path):
    p = write_csv(tmp_path)
    vs = CsvConverter().convert(p, ConversionOptions())
    doc = json.loads(vs.to_json())

    assert doc["id"] == "my-codes"
    assert doc["name"] == "my-codes"
    assert doc["url"] == "http://hl7.org/fhir/ValueSet/my-codes"
    assert doc["status"] == "active"
    assert "description" not in doc
    assert doc["compose"]["include"] == [
        {
            "system": "http://sys",
            "concept": [
                {"code": "A", "display": "Alpha"},
                {"code": "B", "display": "Beta"},
            ],
        },
        {"system": "http://other", "concept": [{"code": "C", "display": "Gamma"}]},
    ]


def test_end_to_end_serialization_is_exact(tmp_path):
    p = write_csv(tmp_path, name="codes.csv", text="code,system,display\nA,http://sys,Alpha\n")
    vs = CsvConverter().convert(p, ConversionOptions(status="draft"))
    expected = {
        "resourceType": "ValueSet",
        "id": "codes",
        "url": "http://hl7.org/fhir/ValueSet/codes",
        "name": "codes",
        "status": "draft",
        "compose": {
            "include": [
                {"system": "http://sys", "concept": [{"code": "A", "display": "Alpha"}]}
            ]
        },
    }
    assert vs.to_json() == json.dumps(expected, indent=2)


def test_empty_system_and_code_only_lines():
    records = parse_flat_records("code,system,display\nA1,,Display One\nA2\n")
    vs = records_to_value_set(records, Path("x.csv"), ConversionOptions())
    include = json.loads(vs.to_json())["compose"]["include"]
    assert include == [
        {"system": "", "concept": [{"code": "A1", "display": "Display One"}]},
        {"concept": [{"code": "A2"}]},
    ]


def test_concept_count_matches_data_lines():
    text = "h\n" + "\n".join(f"C{i},s{i % 4},D{i}" for i in range(25)) + "\n"
    vs = records_to_value_set(parse_flat_records(text), Path("x.csv"), ConversionOptions())
    assert sum(len(g.concept) for g in vs.compose.include) == 25
    assert [g.system for g in vs.compose.include] == ["s0", "s1", "s2", "s3"]


def test_header_only_csv_gives_empty_include():
    vs = records_to_value_set([], Path("empty.csv"), ConversionOptions())
    assert vs.compose.include == []


def test_config_supplies_base_and_default_status():
    cfg = AppConfig(canonical_base="http://example.org/vs/", csv_default_status="unknown")
    vs = records_to_value_set([], Path("x.csv"), ConversionOptions(), cfg)
    assert vs.url == "http://example.org/vs/x"
    assert vs.status == "unknown"


# ------------------------------------------------------------------------------
# CsvConverter.applies
# ------------------------------------------------------------------------------


def test_applies_is_case_sensitive():
    conv = CsvConverter()
    assert conv.applies(Path("a.csv"))
    assert not conv.applies(Path("a.CSV"))
    assert not conv.applies(Path("a.json"))
