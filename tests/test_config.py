"""Tests for defgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from defgen.config import ConfigError, EmitterConfig, config_from_mapping, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == EmitterConfig()
    assert config.declare_module is True
    assert config.eol == "crlf"
    assert config.indent_tabs is False
    assert config.indent_size == 4
    assert config.strict is False
    assert config.options_marker == "TypeScriptDefinitionGenerator:"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".defgen.yml"
    config_file.write_text(
        """
emitter:
  declare_module: false
  class_instead_of_interface: true
  indent_tabs: "yes"
  indent_size: 2
  eol: LF
  strict: true
  default_module_name: "models"
  camel_case_type_names: true
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.declare_module is False
    assert config.class_instead_of_interface is True
    assert config.indent_tabs is True
    assert config.indent_size == 2
    assert config.eol == "lf"
    assert config.strict is True
    assert config.default_module_name == "models"
    assert config.camel_case_type_names is True
    assert config.const_enums is True


def test_load_config_accepts_root_level_options(tmp_path: Path) -> None:
    (tmp_path / ".defgen.yml").write_text("eol: lf\nadd_amd_module_name: true\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.eol == "lf"
    assert config.add_amd_module_name is True


def test_load_config_empty_file_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / ".defgen.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path) == EmitterConfig()


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".defgen.yml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".defgen.yml").write_text("emitter: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "data",
    [
        {"eol": "cr"},
        {"indent_size": "wide"},
        {"strict": "maybe"},
        {"unknown_option": True},
    ],
)
def test_config_from_mapping_rejects_bad_values(data: dict) -> None:
    with pytest.raises(ConfigError):
        config_from_mapping(data)


def test_with_overrides_ignores_none() -> None:
    config = EmitterConfig()
    assert config.with_overrides(strict=None, eol=None) is config
    updated = config.with_overrides(strict=True, eol="lf")
    assert updated.strict is True
    assert updated.eol == "lf"
    assert config.strict is False
