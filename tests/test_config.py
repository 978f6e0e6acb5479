# tests/test_config.py
"""
Tests for fhir_valueset_tool.config
"""

from dataclasses import FrozenInstanceError

import pytest
import yaml

from fhir_valueset_tool.config import DEFAULT_CANONICAL_BASE, AppConfig, load_config


def test_load_config_defaults_when_path_is_none():
    cfg = load_config(None)
    assert isinstance(cfg, AppConfig)
    assert cfg.canonical_base == DEFAULT_CANONICAL_BASE == "http://hl7.org/fhir/ValueSet/"
    assert cfg.default_status == "draft"
    assert cfg.csv_default_status == "active"
    assert cfg.indent == 2


def test_load_config_reads_values(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "canonical_base: http://example.org/ValueSet/\n"
        "default_status: active\n"
        "csv_default_status: retired\n"
        "indent: 4\n"
    )
    cfg = load_config(p)
    assert cfg == AppConfig(
        canonical_base="http://example.org/ValueSet/",
        default_status="active",
        csv_default_status="retired",
        indent=4,
    )


def test_load_config_partial_file_keeps_other_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("indent: 0\n")
    cfg = load_config(p)
    assert cfg.indent == 0
    assert cfg.default_status == "draft"


def test_load_config_empty_file_uses_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == AppConfig()


def test_load_config_non_mapping_raises_type_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("- item1\n- item2\n")
    with pytest.raises(
        TypeError, match=r"^Config file must contain a mapping at top level"
    ):
        load_config(p)


def test_load_config_bad_indent_raises_type_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("indent: wide\n")
    with pytest.raises(TypeError, match=r"^Config value 'indent' must be int"):
        load_config(p)


def test_load_config_unknown_status_raises_value_error(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("default_status: final\n")
    with pytest.raises(ValueError, match=r"^Config value 'default_status' must be one of"):
        load_config(p)


def test_load_config_invalid_yaml_raises_yaml_error(tmp_path):
    p = tmp_path / "invalid.yaml"
    p.write_text("canonical_base: [unclosed_list\n")
    with pytest.raises(yaml.YAMLError, match=r"^while parsing a flow sequence"):
        load_config(p)


def test_appconfig_is_immutable():
    cfg = AppConfig()
    with pytest.raises(FrozenInstanceError, match=r"^cannot assign to field"):
        cfg.indent = 8
