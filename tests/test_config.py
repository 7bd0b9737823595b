"""Parser configuration schema and loader tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from gdconfig.config import ParserConfig, load_parser_config
from gdconfig.errors import ConfigurationError, RecoverableError


def test_defaults() -> None:
    """Default config treats # and ; lines as comments."""
    config = ParserConfig.default()
    assert config.comment_prefixes == ["#", ";"]
    assert config.dropped_level == logging.DEBUG
    assert config.encoding == "utf-8"
    assert config.is_comment("; Engine configuration file.")
    assert not config.is_comment("config_version=5")


def test_level_is_normalised() -> None:
    """Level names are upper-cased."""
    config = ParserConfig.from_dict({"dropped_log_level": "warning"})
    assert config.dropped_log_level == "WARNING"
    assert config.dropped_level == logging.WARNING


def test_invalid_values_are_rejected() -> None:
    """Unknown levels and empty prefixes fail validation."""
    with pytest.raises(ValidationError):
        ParserConfig.from_dict({"dropped_log_level": "LOUD"})
    with pytest.raises(ValidationError):
        ParserConfig.from_dict({"comment_prefixes": [""]})


def test_load_none_and_instance() -> None:
    """None gives defaults and an instance passes through."""
    assert load_parser_config(None) == ParserConfig()
    config = ParserConfig(encoding="latin-1")
    assert load_parser_config(config) is config


def test_load_dict_with_parser_table() -> None:
    """Settings may be nested under a parser table."""
    config = load_parser_config({"parser": {"comment_prefixes": ["//"]}})
    assert config.comment_prefixes == ["//"]


def test_load_toml_file(tmp_path: Path) -> None:
    """A .toml file is read from disk."""
    path = tmp_path / "gdconfig.toml"
    path.write_text('[parser]\ndropped_log_level = "info"\n', encoding="utf-8")
    assert load_parser_config(path).dropped_level == logging.INFO
    assert load_parser_config(str(path)).dropped_level == logging.INFO


def test_load_json_file(tmp_path: Path) -> None:
    """A .json file is read from disk."""
    path = tmp_path / "gdconfig.json"
    path.write_text('{"encoding": "utf-16"}', encoding="utf-8")
    assert load_parser_config(path).encoding == "utf-16"


def test_load_inline_text() -> None:
    """Inline JSON and TOML are auto-detected."""
    assert load_parser_config('{"encoding": "ascii"}').encoding == "ascii"
    assert load_parser_config('encoding = "ascii"').encoding == "ascii"


def test_load_errors_are_configuration_errors(tmp_path: Path) -> None:
    """Every loader failure surfaces as ConfigurationError."""
    with pytest.raises(ConfigurationError):
        load_parser_config(tmp_path / "missing.toml")
    with pytest.raises(ConfigurationError):
        load_parser_config("{not json")
    with pytest.raises(ConfigurationError):
        load_parser_config({"dropped_log_level": "LOUD"})
    with pytest.raises(RecoverableError):
        load_parser_config({"parser": ["not", "a", "table"]})
