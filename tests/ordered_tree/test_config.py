"""Tests for display configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ordered_tree import ConfigError, DisplayConfig, load_display_config


def test_load_display_config_defaults() -> None:
    assert load_display_config(None) == DisplayConfig()


def test_load_display_config_from_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "display.yaml"
    config_path.write_text(
        """
        indent_width: 2
        separator: ", "
        """,
        encoding="utf-8",
    )

    config = load_display_config(config_path)

    assert config.indent_width == 2
    assert config.separator == ", "
    assert config.placeholder == "·"


def test_load_display_config_from_json(tmp_path: Path) -> None:
    config_path = tmp_path / "display.json"
    config_path.write_text(json.dumps({"empty_marker": "(none)"}), encoding="utf-8")

    config = load_display_config(str(config_path))

    assert config.empty_marker == "(none)"
    assert config.indent_width == 4


def test_empty_document_yields_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "display.yaml"
    config_path.write_text("", encoding="utf-8")
    assert load_display_config(config_path) == DisplayConfig()


@pytest.mark.parametrize(
    "config_text, expected_message",
    [
        ("colour: red", "Unknown display options"),
        ("- 1\n- 2", "must be a mapping"),
        ("indent_width: -1", "non-negative"),
        ("indent_width: two", "must be an integer"),
        ("separator: ''", "must not be empty"),
        ("indent_width: [", "not well formed"),
    ],
)
def test_load_display_config_rejects_invalid_payloads(
    tmp_path: Path, config_text: str, expected_message: str
) -> None:
    config_path = tmp_path / "display.yaml"
    config_path.write_text(config_text, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_message):
        load_display_config(config_path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_display_config(tmp_path / "absent.yaml")


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        DisplayConfig(placeholder=3)  # type: ignore[arg-type]
