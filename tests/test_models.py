# tests/test_models.py
"""
Tests for fhir_valueset_tool/models and transform/assemble.
"""

import json
import pytest

from dataclasses import FrozenInstanceError
from pydantic import ValidationError

from fhir_valueset_tool.exceptions import ConversionError
from fhir_valueset_tool.models import Concept, ConversionOptions, ValueSetInclude
from fhir_valueset_tool.transform.assemble import assemble_value_set
from fhir_valueset_tool.transform.defaults import ValueSetMetadata


def test_assemble_omits_unset_fields():
    vs = assemble_value_set(
        ValueSetMetadata(status="draft", url="http://vs"),
        [ValueSetInclude(system="http://sys", concept=[Concept(code="A")])],
    )
    doc = json.loads(vs.to_json())
    assert doc == {
        "resourceType": "ValueSet",
        "url": "http://vs",
        "status": "draft",
        "compose": {"include": [{"system": "http://sys", "concept": [{"code": "A"}]}]},
    }


def test_empty_strings_are_kept_but_none_is_dropped():
    vs = assemble_value_set(
        ValueSetMetadata(status="active", description=""),
        [
            ValueSetInclude(system="", concept=[Concept(code="A", display="")]),
            ValueSetInclude(system=None, concept=[Concept(code="B")]),
        ],
    )
    doc = json.loads(vs.to_json())
    assert doc["description"] == ""
    assert doc["compose"]["include"][0] == {"system": "", "concept": [{"code": "A", "display": ""}]}
    assert doc["compose"]["include"][1] == {"concept": [{"code": "B"}]}


def test_to_json_uses_two_space_indent_and_field_order():
    vs = assemble_value_set(
        ValueSetMetadata(status="draft", id="x", url="u", name="n", description="d"),
        [ValueSetInclude(system="s", concept=[Concept(code="A", display="Alpha")])],
    )
    text = vs.to_json()
    assert text.startswith('{\n  "resourceType": "ValueSet",\n  "id": "x",')
    assert list(json.loads(text)) == [
        "resourceType",
        "id",
        "url",
        "name",
        "description",
        "status",
        "compose",
    ]


def test_assemble_rejects_unknown_status():
    with pytest.raises(ConversionError, match=r"^invalid ValueSet metadata"):
        assemble_value_set(ValueSetMetadata(status="final"), [])


def test_assemble_rejects_non_string_metadata():
    with pytest.raises(ConversionError):
        assemble_value_set(ValueSetMetadata(status="draft", name=42), [])


def test_concept_requires_code():
    with pytest.raises(ValidationError):
        Concept(display="no code")


def test_conversion_options_are_immutable():
    opts = ConversionOptions(url="u")
    with pytest.raises(FrozenInstanceError):
        opts.url = "other"
