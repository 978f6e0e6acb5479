# tests/test_grouping.py
"""
Tests for fhir_valueset_tool/transform/grouping.
"""

from fhir_valueset_tool.models import Concept
from fhir_valueset_tool.transform.grouping import group_by_system


def _c(code, display=None):
    return Concept(code=code, display=display)


def test_groups_in_first_seen_order_with_arrival_order_inside():
    groups = group_by_system(
        [
            ("http://b", _c("1")),
            ("http://a", _c("2")),
            ("http://b", _c("3")),
            ("http://a", _c("4")),
        ]
    )
    assert [g.system for g in groups] == ["http://b", "http://a"]
    assert [c.code for c in groups[0].concept] == ["1", "3"]
    assert [c.code for c in groups[1].concept] == ["2", "4"]


def test_total_concept_count_matches_input():
    records = [(f"s{i % 3}", _c(str(i))) for i in range(10)]
    groups = group_by_system(records)
    assert sum(len(g.concept) for g in groups) == 10
    assert len(groups) == 3


def test_duplicate_codes_are_kept():
    groups = group_by_system([("s", _c("A")), ("s", _c("A"))])
    assert [c.code for c in groups[0].concept] == ["A", "A"]


def test_none_and_empty_system_are_separate_groups():
    groups = group_by_system([(None, _c("A")), ("", _c("B")), (None, _c("C"))])
    assert [g.system for g in groups] == [None, ""]
    assert [c.code for c in groups[0].concept] == ["A", "C"]


def test_system_match_is_exact():
    groups = group_by_system([("http://sys", _c("A")), ("http://sys/", _c("B"))])
    assert len(groups) == 2


def test_empty_input_gives_no_groups():
    assert group_by_system([]) == []
